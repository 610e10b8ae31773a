"""Comma-separated tile sequences used for the ``start`` and ``goal`` options.

Entries are the *labels* shown on the tiles (``1..N-1``); the identifier
stored on the board is ``label - 1``.  An empty entry or ``0`` marks the
blank.  When exactly ``N-1`` labels are given and no blank, the blank is
implicit in the last cell.

Example (3×3, solved)::

    "1,2,3,4,5,6,7,8,"   # explicit blank
    "1,2,3,4,5,6,7,8"    # implicit blank
"""

from __future__ import annotations

BLANK = None

Tiles = tuple[int | None, ...]


def solved_sequence(width: int, height: int) -> Tiles:
    """Return the canonical solved arrangement (blank bottom-right)."""
    count = width * height
    return (*range(count - 1), BLANK)


def parse_sequence(text: str, count: int) -> Tiles | None:
    """Parse *text* into a tile tuple of length *count*.

    Returns ``None`` when the text is not a valid arrangement: a
    non-integer entry, a label outside ``1..count-1``, a duplicate or
    missing tile, or anything other than exactly one blank.
    """
    entries = [e.strip() for e in text.split(",")]
    tiles: list[int | None] = []
    for entry in entries:
        if entry in ("", "0"):
            tiles.append(BLANK)
            continue
        try:
            label = int(entry)
        except ValueError:
            return None
        if not 1 <= label < count:
            return None
        tiles.append(label - 1)

    if len(tiles) == count - 1 and BLANK not in tiles:
        tiles.append(BLANK)

    if len(tiles) != count or tiles.count(BLANK) != 1:
        return None
    if sorted(t for t in tiles if t is not BLANK) != list(range(count - 1)):
        return None
    return tuple(tiles)


def format_sequence(tiles: Tiles) -> str:
    """Inverse of :func:`parse_sequence` using the explicit-blank form."""
    return ",".join("" if t is BLANK else str(t + 1) for t in tiles)
