"""Solutions to the traits section: appending "Bar" to different kinds of values."""

from __future__ import annotations

from functools import singledispatch

_BAR = "Bar"


@singledispatch
def append_bar(value: object) -> object:
    """Return the value with "Bar" appended."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + _BAR


@append_bar.register
def _(value: list) -> list:
    return [*value, _BAR]