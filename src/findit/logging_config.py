"""
Logging setup for findit.

Debug tracing goes to standard output alongside the search results, so the
package logger gets a bare message format and a stdout handler.
"""

import logging
import sys


PACKAGE_LOGGER = "findit"


def configure_logging(debug: bool = False) -> logging.Logger:
    """
    Attach a single stdout handler to the package logger.

    Calling this again replaces the previous handler instead of adding one.

    Args:
        debug: Emit DEBUG records when True, only warnings and errors otherwise

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.propagate = False
    return logger
