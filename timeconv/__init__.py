#!filepath: timeconv/__init__.py

from .utils.logger import Logging, logs, init_logging
from .utils.errors import ConversionError, TickRangeError, UnsupportedKindError
from .config.app_config import AppConfig

from .core import (
    EPOCH_TICKS,
    TICKS_PER_MILLISECOND,
    TICKS_PER_SECOND,
    FixedOffsetProvider,
    Local,
    TimeConverter,
    TimeKind,
    TimeValue,
    TimezoneProvider,
    Unspecified,
    Utc,
    ZoneInfoProvider,
)

__all__ = [
    "logs", "Logging", "init_logging",
    "ConversionError", "UnsupportedKindError", "TickRangeError",
    "AppConfig",
    "TimeConverter",
    "TimeKind", "TimeValue", "Local", "Utc", "Unspecified",
    "TimezoneProvider", "ZoneInfoProvider", "FixedOffsetProvider",
    "EPOCH_TICKS", "TICKS_PER_SECOND", "TICKS_PER_MILLISECOND",
]
