"""Seeded shuffle behaviour."""

from __future__ import annotations

import pytest

from backend.engine.gamegenerator import get_neighbors, shuffle
from backend.engine.gameplay import update
from backend.models import Board, Shuffle


def test_neighbors_of_corner_and_centre(solved3: Board) -> None:
    assert get_neighbors(solved3) == [5, 7]
    centre = solved3.swap_blank(4)
    assert sorted(get_neighbors(centre)) == [1, 3, 5, 7]


@pytest.mark.parametrize("steps", [0, -5])
def test_non_positive_shuffle_is_identity(solved3: Board, steps: int) -> None:
    assert update(Shuffle(steps), solved3) is solved3


@pytest.mark.parametrize("seed", [0, 1, 42, 2**31])
def test_shuffle_is_deterministic(seed: int) -> None:
    board = Board.solved(4, 4, seed=seed)
    first = update(Shuffle(300), board)
    second = update(Shuffle(300), board)
    assert first == second


def test_shuffle_advances_seed(solved3: Board) -> None:
    shuffled = shuffle(solved3, 3)
    assert shuffled.seed != solved3.seed
    # the same board shuffled again continues from the new seed
    assert shuffle(shuffled, 3) == shuffle(shuffled, 3)


@pytest.mark.parametrize("seed", range(25))
def test_single_step_swaps_two_adjacent_cells(seed: int) -> None:
    board = Board.solved(3, 3, seed=seed)
    shuffled = update(Shuffle(1), board)

    assert board.is_solved()
    assert not shuffled.is_solved()
    changed = [i for i, (a, b) in enumerate(zip(board.tiles, shuffled.tiles)) if a != b]
    assert len(changed) == 2
    (r1, c1), (r2, c2) = (board.position(i) for i in changed)
    assert abs(r1 - r2) + abs(c1 - c2) == 1


@pytest.mark.parametrize("seed", range(25))
def test_shuffle_never_undoes_previous_step(seed: int) -> None:
    # two legal moves return to the start only if the second reverses the first
    board = Board.solved(3, 3, seed=seed)
    assert shuffle(board, 2).tiles != board.tiles


def test_two_by_two_shuffle_cycles() -> None:
    # on 2×2 the anti-reversal rule leaves one option, so the blank circles
    board = Board.solved(2, 2, seed=3)
    assert shuffle(board, 12).tiles == board.tiles
    assert shuffle(board, 4).tiles != board.tiles
