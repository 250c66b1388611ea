"""Solutions to the enums section: messages and a state machine that processes them."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    """A position on a small grid."""

    x: int
    y: int


@dataclass(frozen=True)
class Quit:
    """Ask the state to stop."""


@dataclass(frozen=True)
class Echo:
    """Print a piece of text."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move to a new position."""

    point: Point


@dataclass(frozen=True)
class ChangeColor:
    """Switch to a new (red, green, blue) colour."""

    color: tuple[int, int, int]


Message = Quit | Echo | Move | ChangeColor


@dataclass
class State:
    """Colour, position and quit flag, changed by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(color=color):
                self.color = color
            case Echo(text=text):
                print(text)
            case Move(point=point):
                self.position = point
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message {message!r}")