import logging
import os
from typing import cast

from domainkit.const import LOG_LEVELS


def get_log_level() -> LOG_LEVELS:
    log_level = (
        os.getenv("DOMAINKIT__LOG_LEVEL") or os.getenv("DOMAINKIT_LOG_LEVEL") or os.getenv("LOG_LEVEL") or "INFO"
    ).upper()
    if log_level not in list(LOG_LEVELS.__args__):
        logging.getLogger(__name__).warning("Log level %r is not valid, defaulting to INFO", log_level)
        log_level = "INFO"
    return cast("LOG_LEVELS", log_level)


def default_enabled_domains() -> list[str]:
    """Return every built-in domain name, in registration order."""
    from domainkit.domains import BUILTIN_SCHEMAS

    return list(BUILTIN_SCHEMAS)
