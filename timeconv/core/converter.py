#!filepath: timeconv/core/converter.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Iterable

from timeconv.core import ticks as tk
from timeconv.core.kinds import AnyTime, Local, TimeKind, TimeValue, Unspecified, Utc
from timeconv.core.zone import TimezoneProvider, ZoneInfoProvider
from timeconv.utils.errors import TickRangeError, UnsupportedKindError
from timeconv.utils.logger import logs

if TYPE_CHECKING:
    from timeconv.config import AppConfig, TimezoneConfig

_LOCAL_KINDS = (TimeKind.LOCAL, TimeKind.UNSPECIFIED)
_UTC_KINDS = (TimeKind.UTC, TimeKind.UNSPECIFIED)
_ALL_KINDS = (TimeKind.LOCAL, TimeKind.UTC, TimeKind.UNSPECIFIED)


class TimeConverter:
    """
    时间换算上下文
    ---------------------------------------
    - 持有一个 TimezoneProvider（代替进程级“本地时区”）
    - 所有换算都是纯函数，实例构造后不可变，可多线程共享
    - 一切换算都以 UtcTicks 为中转：source → UtcTicks → target
    ---------------------------------------
    """

    def __init__(self, provider: TimezoneProvider):
        self._provider = provider
        logs.info(f"[timeconv] converter ready, zone={getattr(provider, 'name', provider)}")

    @classmethod
    def ambient(cls) -> "TimeConverter":
        """使用宿主环境的本地时区"""
        return cls(ZoneInfoProvider())

    @classmethod
    def from_config(cls, cfg: AppConfig | TimezoneConfig) -> "TimeConverter":
        """cfg: AppConfig 或 TimezoneConfig"""
        tz_cfg = cfg if hasattr(cfg, "provider") else cfg.timezone
        return cls(tz_cfg.provider())

    @property
    def provider(self) -> TimezoneProvider:
        return self._provider

    # ================================================================
    # Local ⇄ Utc 墙钟 tick（保留亚微秒余数）
    # ================================================================
    def _utc_to_local_ticks(self, utc_ticks: int) -> int:
        try:
            offset = self._provider.utc_offset(tk.ticks_to_datetime(utc_ticks))
        except OverflowError as e:
            raise TickRangeError("ticks", utc_ticks) from e
        return self._shift(utc_ticks, offset)

    def _local_to_utc_ticks(self, local_ticks: int) -> int:
        try:
            offset = self._provider.local_offset(tk.ticks_to_datetime(local_ticks))
        except OverflowError as e:
            raise TickRangeError("ticks", local_ticks) from e
        return self._shift(local_ticks, -offset)

    @staticmethod
    def _shift(ticks: int, offset: timedelta) -> int:
        shifted = ticks + offset // timedelta(microseconds=1) * tk.TICKS_PER_MICROSECOND
        if not tk.MIN_TICKS <= shifted <= tk.MAX_TICKS:
            raise TickRangeError("ticks", shifted)
        return shifted

    # ================================================================
    # kind 归一化
    # ================================================================
    def as_local(self, value: AnyTime) -> Local:
        match value:
            case Local():
                return value
            case Utc(ticks=t):
                return Local(self._utc_to_local_ticks(t))
            case Unspecified(ticks=t):
                # 先按本地规则转 UTC，再转回本地：DST 空档里的读数会落到真实的本地时间
                return Local(self._utc_to_local_ticks(self._local_to_utc_ticks(t)))
            case _:
                raise _reject("value", _ALL_KINDS, value)

    def as_utc(self, value: AnyTime) -> Utc:
        match value:
            case Utc():
                return value
            case Local(ticks=t) | Unspecified(ticks=t):
                return Utc(self._local_to_utc_ticks(t))
            case _:
                raise _reject("value", _ALL_KINDS, value)

    # ================================================================
    # Unix 秒
    # ================================================================
    def local_time_to_unix_timestamp(self, local_time: AnyTime) -> int:
        _require("local_time", local_time, _LOCAL_KINDS)
        utc = self.as_utc(self.as_local(local_time))
        return tk.utc_ticks_to_unix_timestamp(utc.ticks)

    def utc_time_to_unix_timestamp(self, utc_time: AnyTime) -> int:
        _require("utc_time", utc_time, _UTC_KINDS)
        return tk.utc_ticks_to_unix_timestamp(self.as_utc(utc_time).ticks)

    @staticmethod
    def unix_timestamp_to_utc_time(unix: int) -> Utc:
        return Utc(_checked(tk.unix_timestamp_to_utc_ticks(unix), "unix"))

    def unix_timestamp_to_local_time(self, unix: int) -> Local:
        return self.as_local(self.unix_timestamp_to_utc_time(unix))

    # ================================================================
    # JS 毫秒
    # ================================================================
    @staticmethod
    def to_js_timestamp(utc_time: AnyTime) -> int:
        """只接受 Utc，不做任何归一化"""
        _require("utc_time", utc_time, (TimeKind.UTC,))
        return tk.trunc_div(tk.elapsed_ticks(utc_time.ticks), tk.TICKS_PER_MILLISECOND)

    def local_time_to_js_timestamp(self, local_time: AnyTime) -> int:
        _require("local_time", local_time, _LOCAL_KINDS)
        return self.to_js_timestamp(self.as_utc(self.as_local(local_time)))

    def utc_time_to_js_timestamp(self, utc_time: AnyTime) -> int:
        _require("utc_time", utc_time, _UTC_KINDS)
        return self.to_js_timestamp(self.as_utc(utc_time))

    @staticmethod
    def js_timestamp_to_utc_time(js: int) -> Utc:
        return Utc(_checked(tk.js_timestamp_to_utc_ticks(js), "js"))

    def js_timestamp_to_local_time(self, js: int) -> Local:
        return self.as_local(self.js_timestamp_to_utc_time(js))

    def js_timestamp_to_utc_time_offset(self, js: int) -> datetime:
        return self.utc_ticks_to_utc_time_offset(tk.js_timestamp_to_utc_ticks(js))

    def js_timestamp_to_local_time_offset(self, js: int) -> datetime:
        return self.utc_ticks_to_local_time_offset(tk.js_timestamp_to_utc_ticks(js))

    # ================================================================
    # UtcTicks
    # ================================================================
    @staticmethod
    def utc_ticks_to_utc_time(utc_ticks: int) -> Utc:
        return Utc(_checked(utc_ticks, "utc_ticks"))

    def utc_ticks_to_local_time(self, utc_ticks: int) -> Local:
        return self.as_local(self.utc_ticks_to_utc_time(utc_ticks))

    def utc_ticks_to_utc_time_offset(self, utc_ticks: int) -> datetime:
        """aware datetime（UTC，微秒精度）"""
        return self.utc_ticks_to_utc_time(utc_ticks).wall.replace(tzinfo=timezone.utc)

    def utc_ticks_to_local_time_offset(self, utc_ticks: int) -> datetime:
        """aware datetime（provider 时区，微秒精度）"""
        aware = self.utc_ticks_to_utc_time_offset(utc_ticks)
        try:
            return aware.astimezone(self._provider.tzinfo)
        except OverflowError as e:
            raise TickRangeError("utc_ticks", utc_ticks) from e

    def local_time_to_utc_ticks(self, local_time: AnyTime) -> int:
        _require("local_time", local_time, _LOCAL_KINDS)
        return self.as_utc(self.as_local(local_time)).ticks

    def utc_time_to_utc_ticks(self, utc_time: AnyTime) -> int:
        _require("utc_time", utc_time, _UTC_KINDS)
        return self.as_utc(utc_time).ticks

    # ---------- 纯整数换算（与时区无关） ----------
    unix_timestamp_to_utc_ticks = staticmethod(tk.unix_timestamp_to_utc_ticks)
    utc_ticks_to_unix_timestamp = staticmethod(tk.utc_ticks_to_unix_timestamp)
    js_timestamp_to_utc_ticks = staticmethod(tk.js_timestamp_to_utc_ticks)

    def utc_ticks_to_js_timestamp(self, utc_ticks: int) -> int:
        return self.to_js_timestamp(self.utc_ticks_to_utc_time(utc_ticks))

    def js_timestamp_to_unix_timestamp(self, js: int) -> int:
        return self.utc_time_to_unix_timestamp(self.js_timestamp_to_utc_time(js))

    def unix_timestamp_to_js_timestamp(self, unix: int) -> int:
        return self.utc_time_to_js_timestamp(self.unix_timestamp_to_utc_time(unix))

    def __repr__(self) -> str:
        return f"TimeConverter({self._provider!r})"


# ----------------------------------------------------------------------
def _require(param: str, value: object, accepted: Iterable[TimeKind]) -> None:
    accepted = tuple(accepted)
    if not isinstance(value, TimeValue) or getattr(type(value), "kind", None) not in accepted:
        raise _reject(param, accepted, value)


def _reject(param: str, accepted: Iterable[TimeKind], value: object) -> UnsupportedKindError:
    actual = getattr(type(value), "kind", value)
    logs.debug(f"[timeconv] reject {param}: kind={actual}, accepted={list(accepted)}")
    return UnsupportedKindError(param, accepted, actual)


def _checked(ticks: int, param: str) -> int:
    return tk.check_ticks(ticks, param)
