import logging
import os
from dataclasses import dataclass

__version__ = "0.4.0"

PROGRAM_NAME = "tcpping"
RELEASES_URL = "https://api.github.com/repos/ReyReyy/tcpping/releases/"
LOG_LEVEL_ENV = "TCPPING_LOG_LEVEL"

DEFAULT_PORT = 80

@dataclass
class Settings:
    connect_timeout: float = 1.0   # seconds per attempt
    interval: float = 1.0          # sleep after each attempt, not compensated
    precheck_timeout: float = 0.1
    fail_fast_precheck: bool = True

def log_level() -> int:
    """Log level from the environment, WARNING when unset or unknown."""
    name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING
