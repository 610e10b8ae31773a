"""Exceptions raised by the puzzle core."""

from __future__ import annotations


class ContractViolation(RuntimeError):
    """A collaborator called the core in a way it promised never to.

    The core itself never raises for bad *player* input (that is normalised
    to a no-op); this is reserved for programming errors in the layers that
    feed it, e.g. constructing a 1-wide board or clicking before the window
    size is known.
    """
