"""Tests for logging utilities."""

import logging
from io import StringIO

from amoeba import Minimizer
from amoeba.logging import configure_logging, get_logger, set_log_level


def test_get_logger_returns_namespaced_logger():
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "amoeba.test_module"


def test_get_logger_keeps_package_prefix():
    assert get_logger("amoeba.minimizer").name == "amoeba.minimizer"
    assert get_logger().name == "amoeba"


def test_get_logger_caching():
    assert get_logger("test_module") is get_logger("test_module")


def test_get_logger_different_modules():
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_logger_does_not_propagate():
    assert get_logger("test_module").propagate is False


def test_set_log_level_accepts_strings():
    logger = get_logger("test_module")

    set_log_level("DEBUG")
    assert logger.level == logging.DEBUG

    set_log_level("ERROR")
    assert logger.level == logging.ERROR
    assert all(handler.level == logging.ERROR for handler in logger.handlers)


def test_unknown_level_name_falls_back_to_warning():
    logger = get_logger("test_module")
    set_log_level("NOT_A_LEVEL")
    assert logger.level == logging.WARNING


def test_configure_logging_redirects_output():
    logger = get_logger("test_module")
    stream = StringIO()
    configure_logging(level=logging.DEBUG, stream=stream)

    logger.debug("Debug message")

    output = stream.getvalue()
    assert "Debug message" in output
    assert "[DEBUG] amoeba.test_module" in output


def test_configure_logging_custom_format():
    logger = get_logger("test_module")
    stream = StringIO()
    configure_logging(level="INFO", format_string="%(levelname)s|%(message)s", stream=stream)

    logger.info("hello")
    assert stream.getvalue().strip() == "INFO|hello"


def test_minimizer_logs_transformations_at_debug():
    get_logger("amoeba.minimizer")
    stream = StringIO()
    configure_logging(level=logging.DEBUG, stream=stream)

    Minimizer().minimize(lambda x: x[0] ** 2, [1.0])

    output = stream.getvalue()
    assert "Nelder-Mead start" in output
    assert "expand" in output
    assert "Converged after" in output


def test_minimizer_warns_on_iteration_cap():
    get_logger("amoeba.minimizer")
    stream = StringIO()
    configure_logging(level=logging.WARNING, stream=stream)

    Minimizer(max_iter=2).run(lambda x: x[0] ** 2, [1.0])

    output = stream.getvalue()
    assert "[WARNING]" in output
    assert "Maximum iterations (2) reached" in output
