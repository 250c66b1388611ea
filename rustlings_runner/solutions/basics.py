"""Solutions to the variables, functions, if, primitive types and strings sections."""

from __future__ import annotations

from collections.abc import Sequence, Sized
from typing import Any

_COLOR_WORDS = frozenset({"green", "blue", "red"})
_BIG_ARRAY = 100


def call_me(num: int) -> None:
    """Ring once for every call, numbering the calls from one."""
    for call in range(1, num + 1):
        print(f"Ring! Call number {call}")


def is_even(num: int) -> bool:
    """Return True for even numbers."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Take 10 off an even price and 3 off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """Return the number multiplied by itself."""
    return num * num


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    if a > b:
        return a
    return b


def fizz_if_foo(fizzish: str) -> str:
    """Map "fizz" to "foo", "fuzz" to "bar" and anything else to "baz"."""
    match fizzish:
        case "fizz":
            return "foo"
        case "fuzz":
            return "bar"
        case _:
            return "baz"


def classify_character(character: str) -> str:
    """Describe a single character as alphabetical, numerical or neither."""
    if len(character) != 1:
        raise ValueError(f"expected a single character, got {character!r}")
    if character.isalpha():
        return "Alphabetical!"
    if character.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def describe_array(values: Sized) -> str:
    """Comment on the size of a collection: big means at least 100 elements."""
    if len(values) >= _BIG_ARRAY:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def nice_slice(values: Sequence[Any]) -> Sequence[Any]:
    """Return the second through fourth elements."""
    return values[1:4]


def second_of(numbers: Sequence[Any]) -> Any:
    """Return the second element of a tuple."""
    return numbers[1]


def describe_cat(cat: tuple[str, float]) -> str:
    """Unpack a (name, age) pair into a sentence."""
    name, age = cat
    return f"{name} is {age} years old."


def current_favorite_color() -> str:
    """Return the favourite colour."""
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Return True for the colour words that are known."""
    return attempt in _COLOR_WORDS