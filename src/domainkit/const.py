from typing import Literal

LOG_LEVELS = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

PACKAGE_KEY = "domainkit"

ACTION_TURN_ON = "turn_on"
ACTION_TURN_OFF = "turn_off"
