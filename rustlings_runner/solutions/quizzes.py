"""Solutions to the quizzes that close the early sections."""

from __future__ import annotations

_BULK_THRESHOLD = 40
_REGULAR_PRICE = 2
_BULK_PRICE = 1


def calculate_apple_price(quantity: int) -> int:
    """Price of an order: 2 each, or 1 each when more than 40 are bought."""
    unit = _BULK_PRICE if quantity > _BULK_THRESHOLD else _REGULAR_PRICE
    return quantity * unit


def string_slice(arg: str) -> None:
    """Print a borrowed string."""
    print(arg)


def string(arg: str) -> None:
    """Print an owned string."""
    print(arg)


def times_two(num: int) -> int:
    """Double a number."""
    return num * 2


def my_macro(text: str) -> str:
    """Greet whatever is given."""
    return f"Hello {text}"