import logging

import coloredlogs

from domainkit.const import LOG_LEVELS, PACKAGE_KEY

FORMAT_DATE = "%Y-%m-%d"
FORMAT_TIME = "%H:%M:%S"
FORMAT_DATETIME = f"{FORMAT_DATE} {FORMAT_TIME}"
FMT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s.%(funcName)s:%(lineno)d ─ %(message)s"


def enable_logging(log_level: LOG_LEVELS) -> None:
    """Set up the logging"""

    logger = logging.getLogger(PACKAGE_KEY)

    # don't propagate to root, the host application may configure its own handlers there
    logger.propagate = False

    # Clear any old handlers
    logger.handlers.clear()

    # NOTSET on the handler so only the logger level clamps child logs
    coloredlogs.install(level=logging.NOTSET, logger=logger, fmt=FMT, datefmt=FORMAT_DATETIME)

    # coloredlogs.install sets the logger to WARNING
    logger.setLevel(log_level)

    logging.captureWarnings(True)
