import pytest

from blockfall.shapes import Rotation, rotated_cells
from blockfall.tetromino import Tetromino

T_SHAPE = [False, True, False, True, True, True, False, False, False]


class FakeBoard:
    def __init__(self, width=10, height=20, level=0):
        self.width = width
        self.height = height
        self.level = level
        self.filled = {}
        self.points = []

    def cell_exists(self, pos):
        return pos in self.filled

    def set_cell(self, pos, color, alternate_color, alternate_color2):
        self.filled[pos] = color

    def add_points(self, points):
        self.points.append(points)


def make_t(board, pos=(3, 0)):
    piece = Tetromino(board)
    piece.shape = list(T_SHAPE)
    piece.dimension = 3
    piece.pos = pos
    return piece


def test_initial_position_centres_on_board():
    piece = Tetromino(FakeBoard(width=10))
    assert piece.pos == (5, 0)
    assert piece.rotation is Rotation.UP
    assert piece.fallen is True


def test_cells_are_offset_by_position():
    piece = make_t(FakeBoard(), (3, 0))
    assert set(piece.cells()) == {(4, 0), (3, 1), (4, 1), (5, 1)}


def test_cells_reject_mismatched_shape():
    piece = make_t(FakeBoard())
    piece.dimension = 4
    with pytest.raises(ValueError):
        list(piece.cells())


def test_rotate_clockwise_in_open_space():
    piece = make_t(FakeBoard(), (3, 5))
    assert piece.rotate_clockwise() is True
    assert piece.rotation is Rotation.RIGHT
    assert piece.pos == (3, 5)
    expected = {(3 + x, 5 + y) for x, y in rotated_cells(T_SHAPE, 3, Rotation.RIGHT)}
    assert set(piece.cells()) == expected


def test_four_clockwise_turns_return_to_start():
    piece = make_t(FakeBoard(), (3, 5))
    start = set(piece.cells())
    for _ in range(4):
        piece.rotate_clockwise()
    assert piece.rotation is Rotation.UP
    assert set(piece.cells()) == start


def test_counter_clockwise_undoes_clockwise():
    piece = make_t(FakeBoard(), (3, 5))
    piece.rotate_counter_clockwise()
    assert piece.rotation is Rotation.LEFT
    piece.rotate_clockwise()
    assert piece.rotation is Rotation.UP
    assert piece.pos == (3, 5)


def test_rotation_uses_wall_kick():
    piece = make_t(FakeBoard(), (-1, 5))
    piece.rotation = Rotation.RIGHT
    piece.kicks[(Rotation.RIGHT, Rotation.DOWN)] = [(1, 0)]
    assert piece.rotate_clockwise() is True
    assert piece.rotation is Rotation.DOWN
    assert piece.pos == (0, 5)


def test_rotation_without_room_keeps_piece():
    piece = make_t(FakeBoard(), (-1, 5))
    piece.rotation = Rotation.RIGHT
    assert piece.rotate_clockwise() is False
    assert piece.rotation is Rotation.RIGHT
    assert piece.pos == (-1, 5)


def test_rotation_blocked_by_filled_cell():
    board = FakeBoard()
    piece = make_t(board, (3, 5))
    target = {(3 + x, 5 + y) for x, y in rotated_cells(T_SHAPE, 3, Rotation.RIGHT)}
    blocker = next(iter(target - set(piece.cells())))
    board.filled[blocker] = (0, 0, 0, 255)
    assert piece.rotate_clockwise() is False
    assert piece.rotation is Rotation.UP


def test_rotate_full_turns_half():
    piece = make_t(FakeBoard())
    piece.rotate_full()
    assert piece.rotation is Rotation.DOWN


def test_fall_moves_down_one_row():
    piece = make_t(FakeBoard(), (3, 4))
    piece.fall()
    assert piece.pos == (3, 5)


def test_move_left_stops_at_wall():
    piece = make_t(FakeBoard(), (0, 5))
    assert piece.move_left() is False
    assert piece.pos == (0, 5)


def test_move_right_and_left_round_trip():
    piece = make_t(FakeBoard(), (3, 5))
    assert piece.move_right() is True
    assert piece.pos == (4, 5)
    assert piece.move_left() is True
    assert piece.pos == (3, 5)


def test_move_right_stops_at_wall_and_cells():
    board = FakeBoard(width=10)
    piece = make_t(board, (7, 5))
    assert piece.move_right() is False
    piece.pos = (3, 5)
    board.filled[(6, 6)] = (0, 0, 0, 255)
    assert piece.move_right() is False
    assert piece.pos == (3, 5)


def test_is_bottom_on_floor_and_on_cells():
    board = FakeBoard(height=20)
    piece = make_t(board, (3, 18))
    assert piece.is_bottom() is True
    piece.pos = (3, 10)
    assert piece.is_bottom() is False
    board.filled[(4, 12)] = (0, 0, 0, 255)
    assert piece.is_bottom() is True


def test_hard_drop_lands_and_scores_each_row():
    board = FakeBoard(height=20, level=1)
    piece = make_t(board, (3, 0))
    rows = piece.hard_drop()
    assert rows == 18
    assert piece.pos == (3, 18)
    assert piece.is_bottom() is True
    assert board.points == [4] * rows


def test_place_writes_cells_into_board():
    board = FakeBoard()
    piece = make_t(board, (3, 18))
    piece.fallen = False
    assert piece.place() is False
    assert set(board.filled) == set(piece.cells())
    assert piece.fallen is True


def test_place_above_board_ends_game():
    board = FakeBoard()
    piece = make_t(board, (3, -1))
    assert piece.place() is True
    assert board.filled == {}


def test_is_bottom_but_top():
    board = FakeBoard()
    piece = make_t(board, (3, 0))
    assert piece.is_bottom_but_top() is True
    piece.pos = (3, 1)
    assert piece.is_bottom_but_top() is False
    piece.pos = (3, 0)
    board.filled[(4, 1)] = (0, 0, 0, 255)
    assert piece.is_bottom_but_top() is False


def test_align_to_drops_copy_to_rest():
    board = FakeBoard()
    piece = make_t(board, (2, 3))
    piece.rotation = Rotation.RIGHT
    ghost = Tetromino(board)
    ghost.align_to(piece)
    assert ghost.shape == piece.shape
    assert ghost.rotation is Rotation.RIGHT
    assert ghost.pos[0] == 2
    assert ghost.is_bottom() is True
    assert max(y for _, y in ghost.cells()) == board.height - 1
    assert piece.pos == (2, 3)