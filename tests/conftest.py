"""
Shared pytest fixtures.
"""

import logging

import pytest

from findit.logging_config import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by configure_logging so each test starts clean."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
