import io
import logging

import pytest

from utils import get_logger, setup_logging
from utils.logging import LOGGER_NAMESPACE


@pytest.fixture(autouse=True)
def _restore_app_logger():
    app_logger = logging.getLogger(LOGGER_NAMESPACE)
    saved = (list(app_logger.handlers), app_logger.level, app_logger.propagate)
    yield
    app_logger.handlers[:] = saved[0]
    app_logger.setLevel(saved[1])
    app_logger.propagate = saved[2]


def test_module_loggers_live_under_the_app_namespace():
    assert get_logger("repository.store").name == "recordbuilder.repository.store"
    assert get_logger("recordbuilder.cli").name == "recordbuilder.cli"


def test_default_level_hides_info():
    stream = io.StringIO()
    setup_logging(stream=stream)

    get_logger("core.workflow").info("saved")
    get_logger("core.workflow").warning("missing structure")

    output = stream.getvalue()
    assert "saved" not in output
    assert "recordbuilder.core.workflow - WARNING - missing structure" in output


def test_verbose_enables_debug():
    stream = io.StringIO()
    setup_logging(verbose=True, stream=stream)

    get_logger("structure.builder").debug("field added")

    assert "DEBUG - field added" in stream.getvalue()


def test_repeated_setup_keeps_a_single_handler():
    setup_logging(stream=io.StringIO())
    app_logger = setup_logging(level=logging.INFO, stream=io.StringIO())

    assert len(app_logger.handlers) == 1
    assert app_logger.level == logging.INFO


def test_root_logger_is_untouched():
    root_handlers = list(logging.getLogger().handlers)

    setup_logging(stream=io.StringIO())

    assert logging.getLogger().handlers == root_handlers
