"""Board transitions: Move, MoveTile, NoOp and dispatch."""

from __future__ import annotations

import random

import pytest

from backend.engine.gameplay import move, move_tile, update
from backend.models import BLANK, Board, Direction, Move, MoveTile, NoOp, Shuffle

_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


# -- helpers ------------------------------------------------------------------


def _assert_valid(board: Board) -> None:
    """Exactly one blank, every identifier once, blank_index consistent."""
    n = board.width * board.height
    assert len(board.tiles) == n
    assert board.tiles.count(BLANK) == 1
    assert sorted(t for t in board.tiles if t is not BLANK) == list(range(n - 1))
    assert board.tiles[board.blank_index] is BLANK


def _centre_blank() -> Board:
    """3×3 board with the blank in the middle cell."""
    return Board.init(0, 3, 3, 50, 4, "1,2,3,4,,5,6,7,8", "1,2,3,4,5,6,7,8,")


# -- Move ---------------------------------------------------------------------


@pytest.mark.parametrize(
    "direction, expected_blank",
    [
        (Direction.UP, (2, 1)),     # tile below moves up
        (Direction.DOWN, (0, 1)),   # tile above moves down
        (Direction.LEFT, (1, 2)),   # tile to the right moves left
        (Direction.RIGHT, (1, 0)),  # tile to the left moves right
    ],
)
def test_move_slides_neighbour_into_blank(
    direction: Direction, expected_blank: tuple[int, int]
) -> None:
    board = _centre_blank()
    moved = update(Move(direction), board)
    assert moved.blank_pos == expected_blank
    assert moved.tiles[board.blank_index] == board.tiles[moved.blank_index]
    _assert_valid(moved)


@pytest.mark.parametrize("direction", [Direction.LEFT, Direction.UP])
def test_move_off_board_is_noop(solved3: Board, direction: Direction) -> None:
    # blank is bottom-right: nothing right of it, nothing below it
    assert update(Move(direction), solved3) is solved3


def test_move_left_with_blank_in_last_column() -> None:
    board = Board.init(0, 3, 3, 50, 4, "1,2,,3,4,5,6,7,8", "")
    assert board.blank_pos == (0, 2)
    assert move(board, Direction.LEFT) is board


@pytest.mark.parametrize("direction", list(Direction))
def test_move_then_opposite_restores(direction: Direction) -> None:
    board = _centre_blank()
    there = update(Move(direction), board)
    back = update(Move(_OPPOSITE[direction]), there)
    assert back.tiles == board.tiles
    assert back.blank_index == board.blank_index


def test_update_never_mutates_input(solved3: Board) -> None:
    before = solved3.tiles
    update(Move(Direction.RIGHT), solved3)
    assert solved3.tiles == before


# -- MoveTile -----------------------------------------------------------------


def test_move_tile_adjacent(solved3: Board) -> None:
    moved = update(MoveTile(2, 1), solved3)
    assert moved.blank_pos == (2, 1)
    assert moved.tile_at(2, 2) == 7
    _assert_valid(moved)


def test_move_tile_back_restores(solved3: Board) -> None:
    moved = move_tile(solved3, 1, 2)
    back = move_tile(moved, 2, 2)
    assert back.tiles == solved3.tiles


@pytest.mark.parametrize(
    "row, column",
    [
        (0, 2),    # two rows above the blank
        (2, 0),    # two columns left
        (1, 1),    # diagonal
        (2, 2),    # the blank itself
        (-1, 2),
        (3, 2),
        (2, 3),
        (100, -100),
    ],
)
def test_move_tile_not_adjacent_is_noop(solved3: Board, row: int, column: int) -> None:
    assert update(MoveTile(row, column), solved3) is solved3


def test_move_tile_matches_directional_move() -> None:
    board = _centre_blank()
    assert move_tile(board, 1, 2) == move(board, Direction.LEFT)
    assert move_tile(board, 0, 1) == move(board, Direction.DOWN)


# -- dispatch -----------------------------------------------------------------


def test_noop_and_unknown_actions(solved3: Board) -> None:
    assert update(NoOp(), solved3) is solved3
    assert update("jump", solved3) is solved3  # type: ignore[arg-type]


@pytest.mark.parametrize("walk_seed", range(10))
def test_random_walks_keep_board_valid(walk_seed: int) -> None:
    rng = random.Random(walk_seed)
    board = Board.solved(4, 3, seed=walk_seed)
    for _ in range(200):
        action = rng.choice(
            [
                Move(rng.choice(list(Direction))),
                MoveTile(rng.randrange(-1, 5), rng.randrange(-1, 6)),
                Shuffle(rng.randrange(0, 4)),
                NoOp(),
            ]
        )
        board = update(action, board)
        _assert_valid(board)
