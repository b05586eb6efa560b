"""
Logging setup for applications embedding the library.

The library itself only creates module loggers; handlers are left to the caller.
"""

import logging

from seqsets import constants


def configure_logging(debug: bool | None = None) -> None:
    """
    Configure the root logger with the library format.

    Args:
        debug: Enable debug messages. Falls back to constants.DEBUG when None.
    """
    if debug is None:
        debug = constants.DEBUG

    logging.basicConfig(
        level=logging.INFO,
        format=constants.LOG_FORMAT,
    )

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
