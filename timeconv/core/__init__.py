#!filepath: timeconv/core/__init__.py
from .kinds import AnyTime, Local, TimeKind, TimeValue, Unspecified, Utc
from .zone import FixedOffsetProvider, TimezoneProvider, ZoneInfoProvider
from .converter import TimeConverter
from .ticks import (
    EPOCH_TICKS,
    MAX_TICKS,
    MIN_TICKS,
    TICKS_PER_MICROSECOND,
    TICKS_PER_MILLISECOND,
    TICKS_PER_SECOND,
    js_timestamp_to_utc_ticks,
    unix_timestamp_to_utc_ticks,
    utc_ticks_to_unix_timestamp,
)
