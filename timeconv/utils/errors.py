# timeconv/utils/errors.py
from __future__ import annotations

from typing import Any, Iterable


class ConversionError(Exception):
    """
    所有时间换算错误的基类。
    属于调用方契约错误：不重试，不降级，直接抛给调用方。
    """

    def __init__(self, user_message: str) -> None:
        super().__init__(user_message)
        self.user_message = user_message


class UnsupportedKindError(ConversionError, ValueError):
    """
    Raised when a time value's kind is outside the set an operation accepts.

    Carries the parameter name and the accepted kinds so the call site can be fixed.
    """

    def __init__(self, param: str, accepted: Iterable[Any], actual: Any) -> None:
        self.param = param
        self.accepted = tuple(accepted)
        self.actual = actual
        names = " or ".join(_kind_name(k) for k in self.accepted)
        super().__init__(
            f"unsupported kind for '{param}': {_kind_name(actual)} (must be {names})"
        )


class TickRangeError(ConversionError, OverflowError):
    """
    tick 超出可表示的日历范围（0001-01-01 ~ 9999-12-31）
    """

    def __init__(self, param: str, ticks: int) -> None:
        self.param = param
        self.ticks = ticks
        super().__init__(f"'{param}' out of representable range: {ticks}")


def _kind_name(kind: Any) -> str:
    value = getattr(kind, "value", None)
    if isinstance(value, str):
        return value
    return type(kind).__name__
