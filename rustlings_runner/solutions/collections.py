"""Solutions to the collections section: lists and dictionaries."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, auto


class Fruit(Enum):
    """Kinds of fruit that can go into a basket."""

    APPLE = auto()
    BANANA = auto()
    MANGO = auto()
    LICHI = auto()
    PINEAPPLE = auto()


_NEW_FRUIT_COUNT = 1


def fruit_basket() -> dict[str, int]:
    """Return a basket with at least three kinds and at least five fruits."""
    basket = {"banana": 2}
    basket["apple"] = 3
    basket["mango"] = 1
    return basket


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add every missing kind of fruit to the basket, leaving present kinds alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, _NEW_FRUIT_COUNT)


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """Return a fixed tuple and a list holding the same elements."""
    a = (10, 20, 30, 40)
    v = list(a)
    return a, v


def vec_loop(values: Iterable[int]) -> list[int]:
    """Return the values each multiplied by two."""
    return [value * 2 for value in values]