import logging

import pytest

from intern.utils.logging import PACKAGE_LOGGER, configure_logging, env_truthy, resolve_level


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    previous = logger.level
    yield logger
    logger.setLevel(previous)


def test_default_level_without_environment():
    assert resolve_level({}) == logging.INFO
    assert resolve_level({}, default=logging.WARNING) == logging.WARNING


def test_level_name_and_number_are_accepted():
    assert resolve_level({"INTERN_LOG_LEVEL": "debug"}) == logging.DEBUG
    assert resolve_level({"INTERN_LOG_LEVEL": " 30 "}) == 30


def test_unknown_level_name_falls_back():
    assert resolve_level({"INTERN_LOG_LEVEL": "chatty"}) == logging.INFO


def test_debug_flag_applies_only_without_explicit_level():
    assert resolve_level({"INTERN_DEBUG": "yes"}) == logging.DEBUG
    assert resolve_level({"INTERN_DEBUG": "1", "INTERN_LOG_LEVEL": "ERROR"}) == logging.ERROR


def test_env_truthy():
    assert env_truthy(" On ")
    assert not env_truthy("off")
    assert not env_truthy(None)


def test_configure_logging_sets_package_level_only(package_logger):
    root_level = logging.getLogger().level

    logger = configure_logging(env={"INTERN_LOG_LEVEL": "DEBUG"})

    assert logger is package_logger
    assert package_logger.level == logging.DEBUG
    assert logging.getLogger().level == root_level
    assert logging.getLogger("intern.viewmodels.main_vm").isEnabledFor(logging.DEBUG)
