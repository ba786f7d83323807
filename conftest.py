"""
Shared pytest fixtures.

Every test gets a configuration file path under its own tmp directory, so a
real ~/.htmlq/config.json never leaks into the results.
"""

import logging

import pytest

from htmlq.utils import config as config_module
from htmlq.utils.logging import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    config_path = tmp_path / "htmlq-config.json"
    monkeypatch.setenv(config_module.CONFIG_ENV_VAR, str(config_path))
    config_module.reset_config()
    yield config_path
    config_module._config = None


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(logging.NOTSET)
