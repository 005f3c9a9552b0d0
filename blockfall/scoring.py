"""Score, cleared-line count and the saved best score."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path

SPIN_ACTION = 1
"""The ``last_action`` value that marks a clear made by a spin."""

B2B_MULTIPLIER = 1.5

# lines cleared -> (plain clear, spin clear) points per level
_POINTS: dict[int, tuple[int, int]] = {
    1: (100, 200),
    2: (300, 1200),
    3: (500, 1600),
    4: (800, 2000),
    5: (1500, 3000),
    6: (2100, 4500),
}

# lines cleared -> name announced for a spin that is not back to back
_SPIN_NAMES: dict[int, str] = {
    1: "Mini",
    2: "Double",
    3: "Triple",
    4: "Quintiple",
    5: "Mega",
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class LastClear:
    """The previous clear: lines cleared, action that made it and piece id."""

    lines: int = 0
    action: int = 0
    piece: int = 0


def _parse_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not a score: {text!r}")
    return int(match.group(1))


class ScoreManager:
    """Keeps the running score, the cleared lines and the high score."""

    def __init__(self) -> None:
        self.score = 0
        self.lines = 0
        self.high_score = 0
        self.last_clear = LastClear()

    def increase_score(
        self,
        lines: int,
        last_action: int,
        last_piece: int,
        alias: str,
        level: int,
        found_extra_lines: bool = True,
    ) -> list[str]:
        """Score a clear of ``lines`` rows and return the announcements it makes.

        A spin (``last_action == SPIN_ACTION``) scores more, and a spin that
        repeats the previous clear's action and piece scores 1.5 times that
        (back to back). ``found_extra_lines`` is accepted but no all-clear
        bonus is ever awarded.
        """
        del found_extra_lines
        announcements: list[str] = []
        points = _POINTS.get(lines)
        if points is not None:
            plain, spin = points
            multiplier = level + 1
            if last_action == SPIN_ACTION:
                if lines == 4:
                    announcements.append(f"Quad {alias} spin")
                back_to_back = (
                    self.last_clear.action == last_action
                    and self.last_clear.piece == last_piece
                )
                if back_to_back:
                    self.score += multiplier * int(spin * B2B_MULTIPLIER)
                    announcements.append(f"B2B {alias} spin")
                else:
                    self.score += multiplier * spin
                    name = _SPIN_NAMES.get(lines)
                    if name is not None:
                        announcements.append(f"{name} {alias} spin")
            else:
                self.score += multiplier * plain
                if lines == 6:
                    announcements.append(f"Mega {alias} spin")
        self.last_clear = LastClear(lines, last_action, last_piece)
        return announcements

    def add_points(self, increase: int) -> None:
        """Add ``increase`` points to the score."""
        self.score += increase

    def increase_lines(self, n_lines: int) -> None:
        """Add ``n_lines`` to the cleared-line count."""
        self.lines += n_lines

    def save_best_score(self, file: str | os.PathLike[str]) -> bool:
        """Save score and lines to ``<file>.HS`` if they beat the saved score.

        The file is written when it is missing, its first line is empty or
        its saved score is lower. Returns whether a new best was saved.
        """
        path = Path(f"{os.fspath(file)}.HS")
        first_line = ""
        if path.is_file():
            text = path.read_text(encoding="ascii")
            first_line = text.splitlines()[0] if text else ""
        if first_line == "" or _parse_int(first_line) < self.score:
            path.write_text(f"{self.score}\n{self.lines}", encoding="ascii")
            return True
        return False

    def set_high_score(self, high_score: int) -> None:
        """Set the high score shown alongside the score."""
        self.high_score = high_score

    def reset_score(self) -> None:
        """Clear the score and the cleared-line count."""
        self.score = 0
        self.lines = 0