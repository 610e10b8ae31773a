"""Startup options resolved from a query-string style mapping.

Recognised keys::

    width, height   board size in tiles (2-10, default 3)
    size            tile size override in px (5-200, default: fit window)
    shuffle         shuffle steps at startup (0-20000, default (w*h)**2)
    start, goal     tile sequences, see ``backend.models.sequence``
                    (default: solved board)
    seed            shuffle seed
    spacing         gap between tiles in px (0-20, default 4)

Out-of-range numbers are clamped; unparsable ones fall back to the default.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from urllib.parse import parse_qsl

from backend.engine.gamestate.layout import MAX_TILE_SIZE, MIN_TILE_SIZE

logger = logging.getLogger(__name__)

MIN_BOARD, MAX_BOARD = 2, 10
DEFAULT_BOARD = 3
MAX_SHUFFLE = 20000
DEFAULT_SPACING, MAX_SPACING = 4, 20


@dataclass(frozen=True)
class PuzzleConfig:
    width: int = DEFAULT_BOARD
    height: int = DEFAULT_BOARD
    size: int | None = None
    shuffle: int = (DEFAULT_BOARD * DEFAULT_BOARD) ** 2
    start: str | None = None
    goal: str | None = None
    seed: int = 0
    spacing: int = DEFAULT_SPACING

    @classmethod
    def from_query(
        cls, params: Mapping[str, str], *, default_seed: int = 0
    ) -> PuzzleConfig:
        width = _int_option(params, "width", DEFAULT_BOARD, MIN_BOARD, MAX_BOARD)
        height = _int_option(params, "height", DEFAULT_BOARD, MIN_BOARD, MAX_BOARD)
        return cls(
            width=width,
            height=height,
            size=_int_option(params, "size", None, MIN_TILE_SIZE, MAX_TILE_SIZE),
            shuffle=_int_option(
                params, "shuffle", (width * height) ** 2, 0, MAX_SHUFFLE
            ),
            start=params.get("start"),
            goal=params.get("goal"),
            seed=_int_option(params, "seed", default_seed, None, None),
            spacing=_int_option(params, "spacing", DEFAULT_SPACING, 0, MAX_SPACING),
        )


def parse_query_string(query: str) -> dict[str, str]:
    """Split ``"width=4&height=3"`` (optionally ``?``-prefixed) into a dict.

    Blank values are kept so that ``start=`` can be told apart from a
    missing key; the last occurrence of a repeated key wins.
    """
    return dict(parse_qsl(query.lstrip("?"), keep_blank_values=True))


# -- helpers ------------------------------------------------------------------


def _int_option(
    params: Mapping[str, str],
    key: str,
    default: int | None,
    lo: int | None,
    hi: int | None,
) -> int | None:
    raw = params.get(key)
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning(f"Ignoring {key}={raw!r}: not an integer, using {default}")
        return default

    clamped = value
    if lo is not None:
        clamped = max(lo, clamped)
    if hi is not None:
        clamped = min(hi, clamped)
    if clamped != value:
        logger.debug(f"Clamped {key} from {value} to {clamped}")
    return clamped
