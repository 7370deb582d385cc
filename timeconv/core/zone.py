#!filepath: timeconv/core/zone.py
"""
Timezone-offset providers.

A converter never reads the host's local zone by itself; it asks a provider
for the offset in effect at a UTC instant, or for the offset that applies to a
local wall-clock reading. Providers are read-only and safe to share.
"""
from __future__ import annotations

import os
import time
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Literal, Optional, Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

Ambiguous = Literal["standard", "daylight"]

_LOCALTIME_PATH = "/etc/localtime"


class TimezoneProvider(Protocol):
    """
    时区偏移来源。

    utc_offset:   给定 UTC 瞬间，返回该瞬间的 UTC 偏移
    local_offset: 给定本地墙钟读数，返回应当使用的 UTC 偏移
                  （DST 跳变的空档 / 重叠由实现决定如何消歧）
    """

    @property
    def tzinfo(self) -> tzinfo:
        ...

    def utc_offset(self, utc_wall: datetime) -> timedelta:
        ...

    def local_offset(self, local_wall: datetime) -> timedelta:
        ...


class ZoneInfoProvider:
    """
    基于 zoneinfo 的 provider。

    key=None 时解析宿主环境的本地时区：
        1) 环境变量 TZ
        2) /etc/localtime
        3) 兜底 UTC

    ambiguous 决定 DST 空档/重叠里的本地时间按哪个偏移解释：
        "standard"  标准时间（默认）
        "daylight"  夏令时间
    """

    def __init__(self, key: Optional[str] = None, ambiguous: Ambiguous = "standard"):
        if ambiguous not in ("standard", "daylight"):
            raise ValueError(f"ambiguous must be 'standard' or 'daylight': {ambiguous!r}")
        self.ambiguous = ambiguous
        self._tz = _resolve_zone(key)

    @property
    def tzinfo(self) -> tzinfo:
        return self._tz

    @property
    def name(self) -> str:
        return getattr(self._tz, "key", None) or str(self._tz)

    def utc_offset(self, utc_wall: datetime) -> timedelta:
        aware = utc_wall.replace(tzinfo=timezone.utc).astimezone(self._tz)
        return aware.utcoffset() or timedelta(0)

    def local_offset(self, local_wall: datetime) -> timedelta:
        first = local_wall.replace(tzinfo=self._tz, fold=0)
        second = local_wall.replace(tzinfo=self._tz, fold=1)
        if first.utcoffset() == second.utcoffset():
            return first.utcoffset() or timedelta(0)

        # 落在跳变区间：按 dst() 大小选
        candidates = sorted((first, second), key=lambda d: d.dst() or timedelta(0))
        chosen = candidates[0] if self.ambiguous == "standard" else candidates[-1]
        return chosen.utcoffset() or timedelta(0)

    def __repr__(self) -> str:
        return f"ZoneInfoProvider({self.name!r}, ambiguous={self.ambiguous!r})"


class FixedOffsetProvider:
    """固定偏移，无 DST。"""

    def __init__(self, offset: timedelta):
        self._tz = timezone(offset)
        self.offset = offset

    @property
    def tzinfo(self) -> tzinfo:
        return self._tz

    @property
    def name(self) -> str:
        return self._tz.tzname(None)

    def utc_offset(self, utc_wall: datetime) -> timedelta:
        return self.offset

    def local_offset(self, local_wall: datetime) -> timedelta:
        return self.offset

    def __repr__(self) -> str:
        return f"FixedOffsetProvider({self.offset!r})"


def _resolve_zone(key: Optional[str]) -> tzinfo:
    if key:
        return ZoneInfo(key)

    env_key = os.getenv("TZ", "").lstrip(":")
    if env_key:
        return _zone_from_tz_env(env_key)

    if os.path.exists(_LOCALTIME_PATH):
        with open(_LOCALTIME_PATH, "rb") as f:
            return ZoneInfo.from_file(f, key="localtime")

    return timezone.utc


def _zone_from_tz_env(value: str) -> tzinfo:
    """
    TZ 可以是：
        IANA key          "Asia/Tokyo"
        绝对路径          "/usr/share/zoneinfo/Asia/Tokyo"
        POSIX 规则串      "UTC0" / "CST-8" / "EST5EDT,M3.2.0,M11.1.0"
    POSIX 规则串交给 C 库解析，得到的是当前时刻的固定偏移
    """
    if os.path.isabs(value):
        if os.path.isfile(value):
            with open(value, "rb") as f:
                return ZoneInfo.from_file(f, key=value)
    else:
        try:
            return ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError, OSError):
            pass

    # C 库按 TZ 重新初始化
    if hasattr(time, "tzset"):
        time.tzset()
    return datetime.now().astimezone().tzinfo or timezone.utc
