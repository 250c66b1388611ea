"""Solutions to the standard library types section: cons lists, iterators and division."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_U64_MAX = (1 << 64) - 1
_FAVORITE_FRUITS = ("banana", "custard apple", "avocado", "peach", "raspberry")


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""

    def __repr__(self) -> str:
        return "Nil"


@dataclass(frozen=True)
class Cons:
    """One item of a cons list: a value and the rest of the list."""

    value: int
    rest: "Cons | Nil"

    def __iter__(self) -> Iterator[int]:
        node: Cons | Nil = self
        while isinstance(node, Cons):
            yield node.value
            node = node.rest


def create_empty_list() -> Nil:
    """Return the empty cons list."""
    return Nil()


def create_non_empty_list() -> Cons:
    """Return a cons list holding 1, 2 and 3."""
    return Cons(1, Cons(2, Cons(3, Nil())))


def favorite_fruits() -> Iterator[str]:
    """Iterate over the favourite fruits in order."""
    return iter(_FAVORITE_FRUITS)


def capitalize_first(text: str) -> str:
    """Upper-case the first character of the text, leaving the rest alone."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words(words: Iterable[str]) -> list[str]:
    """Capitalize the first character of every word."""
    return [capitalize_first(word) for word in words]


def capitalize_joined(words: Iterable[str]) -> str:
    """Capitalize every word and join them into one string."""
    return "".join(capitalize_words(words))


class DivisionError(ArithmeticError):
    """A division could not be carried out exactly."""


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivideByZeroError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(DivideByZeroError)


def divide(a: int, b: int) -> int:
    """Divide a by b when b divides a evenly; raise a DivisionError otherwise."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def divide_all(numbers: Iterable[int], divisor: int) -> list[int]:
    """Divide every number, raising the first DivisionError met."""
    return [divide(number, divisor) for number in numbers]


def divide_each(numbers: Iterable[int], divisor: int) -> list[int | DivisionError]:
    """Divide every number, keeping each quotient or the error it raised."""
    results: list[int | DivisionError] = []
    for number in numbers:
        try:
            results.append(divide(number, divisor))
        except DivisionError as error:
            results.append(error)
    return results


def factorial(num: int) -> int:
    """Return num! for a non-negative num whose factorial fits in 64 unsigned bits."""
    if num < 0:
        raise ValueError(f"factorial of a negative number: {num}")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError(f"factorial of {num} does not fit in 64 bits")
    return result