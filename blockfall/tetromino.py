"""The falling piece: movement, rotation with wall kicks, landing and placing."""

from __future__ import annotations

from typing import Iterator, Protocol, Sequence

from blockfall.shapes import Rotation, rotated_cells

Color = tuple[int, int, int, int]
Position = tuple[int, int]

RAYWHITE: Color = (245, 245, 245, 255)
HARD_DROP_FACTOR = 1.5


class Board(Protocol):
    """The playfield a :class:`Tetromino` moves on."""

    width: int
    height: int
    level: int

    def cell_exists(self, pos: Position) -> bool: ...

    def set_cell(
        self,
        pos: Position,
        color: Color,
        alternate_color: Color,
        alternate_color2: Color,
    ) -> None: ...

    def add_points(self, points: int) -> None: ...


class Tetromino:
    """A piece on a board, stored as a square shape under a rotation.

    ``kicks`` maps a ``(from, to)`` rotation pair to the offsets tried, in
    order, when the piece does not fit in place after that rotation.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self.shape: list[bool] = []
        self.dimension = 0
        self.kicks: dict[tuple[Rotation, Rotation], list[Position]] = {}
        self.color: Color = RAYWHITE
        self.alternate_color: Color = RAYWHITE
        self.alternate_color2: Color = RAYWHITE
        self.fallen = True
        self.pos: Position = (board.width // 2 - self.dimension // 2, 0)
        self.rotation = Rotation.UP
        self.piece_id = -1
        self.is_anything_held = False
        self.alias = ""

    def _occupied(self, pos: Position) -> bool:
        # Rows above the board hold no cells.
        return pos[1] >= 0 and self.board.cell_exists(pos)

    def cells(self) -> Iterator[Position]:
        """Yield the board positions of the piece's filled cells."""
        px, py = self.pos
        for x, y in rotated_cells(self.shape, self.dimension, self.rotation):
            yield px + x, py + y

    def _fits(self, rotation: Rotation, offset: Position) -> bool:
        px, py = self.pos[0] + offset[0], self.pos[1] + offset[1]
        for x, y in rotated_cells(self.shape, self.dimension, rotation):
            ax, ay = px + x, py + y
            if ax < 0 or ax >= self.board.width or ay >= self.board.height:
                return False
            if self._occupied((ax, ay)):
                return False
        return True

    def _rotate_to(self, target: Rotation) -> bool:
        offsets: Sequence[Position] = [(0, 0)]
        offsets = [*offsets, *self.kicks.get((self.rotation, target), [])]
        for dx, dy in offsets:
            if self._fits(target, (dx, dy)):
                self.rotation = target
                self.pos = (self.pos[0] + dx, self.pos[1] + dy)
                return True
        return False

    def rotate_clockwise(self) -> bool:
        """Turn a quarter clockwise, kicking if needed; return whether it turned."""
        return self._rotate_to(self.rotation.clockwise())

    def rotate_counter_clockwise(self) -> bool:
        """Turn a quarter counter-clockwise, kicking if needed; return whether it turned."""
        return self._rotate_to(self.rotation.counter_clockwise())

    def rotate_full(self) -> None:
        """Turn half a turn without any fit check."""
        self.rotation = self.rotation.opposite()

    def fall(self) -> None:
        """Move one row down without any fit check."""
        self.pos = (self.pos[0], self.pos[1] + 1)

    def place(self) -> bool:
        """Write the piece's cells into the board.

        Returns whether the game should end: a cell above the board stops
        placing the remaining cells.
        """
        should_end = False
        for x, y in self.cells():
            if y < 0:
                should_end = True
            if not should_end:
                self.board.set_cell(
                    (x, y), self.color, self.alternate_color, self.alternate_color2
                )
        self.fallen = True
        return should_end

    def move_right(self) -> bool:
        """Shift one column right if there is room; return whether it moved."""
        for x, y in self.cells():
            if x + 1 >= self.board.width or self._occupied((x + 1, y)):
                return False
        self.pos = (self.pos[0] + 1, self.pos[1])
        return True

    def move_left(self) -> bool:
        """Shift one column left if there is room; return whether it moved."""
        for x, y in self.cells():
            if x - 1 < 0 or self._occupied((x - 1, y)):
                return False
        self.pos = (self.pos[0] - 1, self.pos[1])
        return True

    def is_bottom(self) -> bool:
        """Return whether the piece rests on the floor or on a filled cell."""
        return any(
            y + 1 >= self.board.height or self._occupied((x, y + 1))
            for x, y in self.cells()
        )

    def is_bottom_but_top(self) -> bool:
        """Return whether the piece touches the top row without overlapping a cell."""
        found = False
        for x, y in self.cells():
            if self._occupied((x, y)):
                return False
            if y - 1 < 0:
                found = True
        return found

    def hard_drop(self) -> int:
        """Drop until resting, scoring points per row; return the rows dropped."""
        rows = 0
        while not self.is_bottom():
            self.fall()
            rows += 1
            self.board.add_points(int((2 + self.board.level) * HARD_DROP_FACTOR))
        return rows

    def align_to(self, other: Tetromino) -> None:
        """Take ``other``'s shape, place and rotation, then drop to rest."""
        self.dimension = other.dimension
        self.shape = list(other.shape)
        self.pos = other.pos
        self.color = other.color
        self.rotation = other.rotation
        while not self.is_bottom():
            self.fall()