"""Numeric level table used to filter translation catalogs.

Covers the facade levels plus the names other logging backends use, so a
threshold configured as ``FINE`` or ``SEVERE`` still works.
"""

import math
from typing import Dict

from logfacade_tools.exceptions import ConfigurationError
from logfacade_tools.model import MessageMethod

LEVEL_VALUES: Dict[str, float] = {
    "ALL": -math.inf,
    "FINEST": 300,
    "TRACE": 400,
    "FINER": 400,
    "DEBUG": 500,
    "FINE": 500,
    "CONFIG": 700,
    "INFO": 800,
    "WARN": 900,
    "WARNING": 900,
    "ERROR": 1000,
    "SEVERE": 1000,
    "FATAL": 1100,
    "OFF": math.inf,
}


def level_value(level: str) -> float:
    """Numeric value of a level name; dotted names use their last segment.

    Raises:
        ConfigurationError: If the level is unknown
    """
    name = level.rsplit(".", 1)[-1]
    try:
        return LEVEL_VALUES[name]
    except KeyError:
        raise ConfigurationError(f"Level {name} is invalid.", details={"level": level}) from None


class LevelThreshold:
    """Lets through bundle methods and logger methods at or above a level."""

    def __init__(self, level: str):
        self.level = level
        self._value = level_value(level)

    def allows(self, method: MessageMethod) -> bool:
        if method.log_level is None:
            return True
        return level_value(method.log_level.value) >= self._value

    def __repr__(self) -> str:
        return f"LevelThreshold({self.level!r})"
