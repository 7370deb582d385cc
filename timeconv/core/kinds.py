#!filepath: timeconv/core/kinds.py
"""
带 kind 标记的时间值。

TimeValue 是一个 tagged union：
    Local(ticks)        本地墙钟时间
    Utc(ticks)          UTC 墙钟时间
    Unspecified(ticks)  偏移未知，使用前按本地时区解释

ticks 是各自参照系下的墙钟读数（100ns，原点 0001-01-01），
不经过 datetime 存储，亚微秒精度不会丢失。
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import ClassVar, Union

from timeconv.core.ticks import check_ticks, datetime_to_ticks, ticks_to_datetime
from timeconv.utils.errors import TickRangeError


class TimeKind(str, Enum):
    LOCAL = "local"
    UTC = "utc"
    UNSPECIFIED = "unspecified"


@dataclass(frozen=True)
class TimeValue:
    ticks: int

    kind: ClassVar[TimeKind]

    def __post_init__(self) -> None:
        check_ticks(self.ticks)

    @property
    def wall(self) -> datetime:
        """naive datetime（微秒精度）"""
        return ticks_to_datetime(self.ticks)

    @classmethod
    def from_datetime(cls, value: datetime) -> "TimeValue":
        """
        基类上调用：aware → Utc，naive → Unspecified
        子类上调用：直接取字段值，必须是 naive
        """
        if cls is TimeValue:
            if value.tzinfo is not None and value.utcoffset() is not None:
                try:
                    utc_wall = value.astimezone(timezone.utc)
                except OverflowError as e:
                    raise TickRangeError("value", datetime_to_ticks(value)) from e
                return Utc(datetime_to_ticks(utc_wall))
            return Unspecified(datetime_to_ticks(value))

        if value.tzinfo is not None:
            raise ValueError(f"{cls.__name__}.from_datetime expects a naive datetime")
        return cls(datetime_to_ticks(value))


@dataclass(frozen=True)
class Local(TimeValue):
    kind: ClassVar[TimeKind] = TimeKind.LOCAL


@dataclass(frozen=True)
class Utc(TimeValue):
    kind: ClassVar[TimeKind] = TimeKind.UTC


@dataclass(frozen=True)
class Unspecified(TimeValue):
    kind: ClassVar[TimeKind] = TimeKind.UNSPECIFIED


AnyTime = Union[Local, Utc, Unspecified]
