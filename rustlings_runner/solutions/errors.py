"""Solutions to the error handling section."""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO

_PROCESSING_FEE = 1
_COST_PER_ITEM = 5
_DIGITS = frozenset("0123456789")


class CreationError(ValueError):
    """A positive nonzero integer could not be made; kind is "negative" or "zero"."""

    _DESCRIPTIONS = {"negative": "Number is negative", "zero": "Number is zero"}

    def __init__(self, kind: str) -> None:
        if kind not in self._DESCRIPTIONS:
            raise ValueError(f"unknown creation error kind {kind!r}")
        super().__init__(self._DESCRIPTIONS[kind])
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreationError):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value == 0:
            raise CreationError("zero")
        if self.value < 0:
            raise CreationError("negative")


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed decimal integer of the given width, as strictly as the exercises expect."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > (1 << (bits - 1)) - 1:
        raise ValueError("number too large to fit in target type")
    if value < -(1 << (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the nametag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed quantity; raise ValueError if it is not a number."""
    qty = _parse_int(item_quantity, 32)
    return qty * _COST_PER_ITEM + _PROCESSING_FEE


def spend_tokens(tokens: int, item_quantity: str) -> int:
    """Buy the items if affordable and return the tokens that are left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


def read_and_validate(stream: IO) -> PositiveNonzeroInteger:
    """Read one line and turn it into a positive nonzero integer.

    Reading errors propagate as OSError, parsing errors as ValueError and
    validation errors as CreationError.
    """
    line = stream.readline()
    if isinstance(line, bytes):
        line = line.decode("utf-8")
    num = _parse_int(line.strip(), 64)
    return PositiveNonzeroInteger(num)