#!filepath: timeconv/core/ticks.py
from __future__ import annotations

from datetime import datetime, timedelta

from timeconv.utils.errors import TickRangeError

# ================================================================
# 常量：tick = 100ns，原点 0001-01-01T00:00:00
# ================================================================
TICKS_PER_MICROSECOND = 10
TICKS_PER_MILLISECOND = 10_000
TICKS_PER_SECOND = 10_000_000

MIN_TICKS = 0
MAX_TICKS = 3_155_378_975_999_999_999   # 9999-12-31T23:59:59.9999999

# 1970-01-01T00:00:00 UTC
EPOCH_TICKS = 621_355_968_000_000_000


def check_ticks(ticks: int, param: str = "ticks") -> int:
    if not MIN_TICKS <= ticks <= MAX_TICKS:
        raise TickRangeError(param, ticks)
    return ticks


def datetime_to_ticks(wall: datetime) -> int:
    """
    naive/aware datetime → 墙钟 tick（tzinfo 被忽略，只看字段值）
    """
    delta = wall.replace(tzinfo=None) - datetime.min
    return (delta.days * 86_400 + delta.seconds) * TICKS_PER_SECOND \
        + delta.microseconds * TICKS_PER_MICROSECOND


def ticks_to_datetime(ticks: int) -> datetime:
    """
    tick → naive datetime，亚微秒部分向下截断
    """
    check_ticks(ticks)
    return datetime.min + timedelta(microseconds=ticks // TICKS_PER_MICROSECOND)


def trunc_div(a: int, b: int) -> int:
    # 向零截断；Python 的 // 是向下取整
    q = abs(a) // b
    return q if a >= 0 else -q


# ================================================================
# 纯整数换算（不涉及时区）
# ================================================================
def unix_timestamp_to_utc_ticks(unix: int) -> int:
    return unix * TICKS_PER_SECOND + EPOCH_TICKS


def utc_ticks_to_unix_timestamp(utc_ticks: int) -> int:
    return trunc_div(utc_ticks - EPOCH_TICKS, TICKS_PER_SECOND)


def js_timestamp_to_utc_ticks(js: int) -> int:
    """
    js 毫秒 → tick。

    拆成秒 + 毫秒时统一用 floor 语义（divmod），负数时间戳的余数始终非负，
    结果等价于 EPOCH_TICKS + js * TICKS_PER_MILLISECOND。
    """
    s, ms = divmod(js, 1000)
    return EPOCH_TICKS + s * TICKS_PER_SECOND + ms * TICKS_PER_MILLISECOND


def elapsed_ticks(utc_ticks: int) -> int:
    return utc_ticks - EPOCH_TICKS
