"""Control bindings: the actions a player can bind, key names and persistence."""

from __future__ import annotations

import os
import re
from enum import Enum
from pathlib import Path
from typing import Iterable

KEY_NULL = 0

_KEY_NAMES: dict[int, str] = {
    0: "NONE",
    32: "SPACE",
    39: "'",
    44: ",",
    45: "-",
    46: ".",
    47: "/",
    **{code: chr(code) for code in range(48, 58)},
    59: ";",
    61: "=",
    **{code: chr(code) for code in range(65, 91)},
    91: "[",
    92: "\\",
    93: "]",
    96: "`",
    256: "ESC",
    257: "ENTER",
    258: "TAB",
    259: "BACKSPACE",
    260: "INSERT",
    261: "DEL",
    262: "ARROW RIGHT",
    263: "ARROW LEFT",
    264: "ARROW DOWN",
    265: "ARROW UP",
    266: "PAGE UP",
    267: "PAGE DOWN",
    268: "HOME",
    269: "END",
    280: "CAPS LOCK",
    281: "SCROLL LOCK",
    282: "NUM LOCK",
    283: "PRINT SCREEN",
    284: "PAUSE",
    **{290 + n: f"F{n + 1}" for n in range(12)},
    **{320 + n: f"KEYPAD {n}" for n in range(10)},
    330: "KEYPAD .",
    331: "KEYPAD /",
    332: "KEYPAD *",
    333: "KEYPAD -",
    334: "KEYPAD +",
    335: "KEYPAD ENTER",
    336: "KEYPAD =",
    340: "LEFT SHIFT",
    341: "LEFT CONTROL",
    342: "LEFT ALT",
    343: "LEFT SUPER",
    344: "RIGHT SHIFT",
    345: "RIGHT CONTROL",
    346: "RIGHT ALT",
    347: "RIGHT SUPER",
    348: "KB MENU",
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def key_name(key: int) -> str:
    """Return the display name of a key code, or ``"INVALID KEY"``."""
    return _KEY_NAMES.get(key, "INVALID KEY")


class Action(Enum):
    """A bindable control; the value is its slot in a binding row."""

    MOVE_RIGHT = 0
    MOVE_LEFT = 1
    ROTATE_RIGHT = 2
    ROTATE_LEFT = 3
    RESET = 4
    MENU = 5
    HARD_DROP = 6
    SOFT_DROP = 7
    SWAP_PIECE = 8

    @property
    def label(self) -> str:
        """The caption shown for this action in the controls screen."""
        return _LABELS[self]


_LABELS = {
    Action.MOVE_RIGHT: "MOVE RIGHT",
    Action.MOVE_LEFT: "MOVE LEFT",
    Action.ROTATE_RIGHT: "ROTATE RIGHT",
    Action.ROTATE_LEFT: "ROTATE LEFT",
    Action.RESET: "RESET",
    Action.MENU: "OPEN MENU",
    Action.HARD_DROP: "HARD DROP",
    Action.SOFT_DROP: "SOFT DROP",
    Action.SWAP_PIECE: "HOLD PIECE",
}


def _parse_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not a key code: {text!r}")
    return int(match.group(1))


class KeyBindings:
    """Primary and alternate key codes for every action."""

    def __init__(self, primary: Iterable[int], alternate: Iterable[int]) -> None:
        self._rows = [list(primary), list(alternate)]
        for row in self._rows:
            if len(row) != len(Action):
                raise ValueError(
                    f"a binding row needs {len(Action)} keys, got {len(row)}"
                )

    def _row(self, alternate: bool) -> list[int]:
        return self._rows[1 if alternate else 0]

    def get(self, action: Action, alternate: bool = False) -> int:
        """Return the key code bound to ``action``."""
        return self._row(alternate)[action.value]

    def assign(self, action: Action, key: int, alternate: bool = False) -> int:
        """Bind ``key`` to ``action``; pressing the current key again unbinds it.

        Returns the key code now bound.
        """
        row = self._row(alternate)
        row[action.value] = KEY_NULL if key == row[action.value] else key
        return row[action.value]

    def rows(self) -> tuple[tuple[int, ...], tuple[int, ...]]:
        """Return the primary and alternate rows."""
        return tuple(self._rows[0]), tuple(self._rows[1])

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write all key codes, primary row first, one per line."""
        with open(path, "w", encoding="ascii") as out:
            for row in self._rows:
                for key in row:
                    out.write(f"{key}\n")

    def load(self, path: str | os.PathLike[str]) -> None:
        """Read key codes written by :meth:`save`.

        A missing file, blank lines and missing lines leave bindings unchanged.
        """
        file = Path(path)
        if not file.is_file():
            return
        lines = file.read_text(encoding="ascii").splitlines()
        slots = [(row, index) for row in self._rows for index in range(len(row))]
        for (row, index), line in zip(slots, lines):
            if line != "":
                row[index] = _parse_int(line)