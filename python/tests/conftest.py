from __future__ import annotations

import pytest

from backend.models import Board


@pytest.fixture
def solved3() -> Board:
    """3×3 solved board, blank bottom-right, 50 px tiles."""
    return Board.solved(3, 3, seed=42, tile_size=50)
