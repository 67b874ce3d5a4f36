"""Keyboard state: which movement and view keys are held."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Key(Enum):
    """Logical keys the game reacts to."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    LOOK_UP = auto()
    LOOK_DOWN = auto()
    TURN_LEFT = auto()
    TURN_RIGHT = auto()
    RUN = auto()
    AIM = auto()
    ESCAPE = auto()


class QuitRequested(Exception):
    """Raised when the quit key is released."""


# Each key of an opposing pair switches its partner off when pressed.
_PAIRS = {
    Key.UP: ("up", "down"),
    Key.DOWN: ("down", "up"),
    Key.LEFT: ("left", "right"),
    Key.RIGHT: ("right", "left"),
    Key.LOOK_UP: ("look_up", "look_down"),
    Key.LOOK_DOWN: ("look_down", "look_up"),
    Key.TURN_LEFT: ("turn_left", "turn_right"),
    Key.TURN_RIGHT: ("turn_right", "turn_left"),
}
_FLAGS = {Key.RUN: "run", Key.AIM: "aim"}


@dataclass
class InputState:
    """Flags for every held key."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    look_up: bool = False
    look_down: bool = False
    turn_left: bool = False
    turn_right: bool = False
    run: bool = False
    aim: bool = False

    def press(self, key: Key) -> None:
        """Record a key going down."""
        if key in _PAIRS:
            on, off = _PAIRS[key]
            setattr(self, on, True)
            setattr(self, off, False)
        elif key in _FLAGS:
            setattr(self, _FLAGS[key], True)

    def release(self, key: Key) -> None:
        """Record a key coming up; releasing the quit key raises QuitRequested."""
        if key is Key.ESCAPE:
            raise QuitRequested()
        if key in _PAIRS:
            setattr(self, _PAIRS[key][0], False)
        elif key in _FLAGS:
            setattr(self, _FLAGS[key], False)