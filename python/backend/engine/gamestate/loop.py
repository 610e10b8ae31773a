"""Single-threaded event queue feeding :func:`step`."""

from __future__ import annotations

import functools
from collections import deque
from collections.abc import Callable, Iterable

from backend.engine.gamestate.state import GameState, step
from backend.models.actions import Action, NoOp
from backend.models.events import Event

Listener = Callable[[GameState], None]


def fold(events: Iterable[Event | Action], state: GameState) -> GameState:
    """Reduce *events* over *state* in order."""
    return functools.reduce(lambda s, e: step(e, s), events, state)


class EventLoop:
    """FIFO of pending events; one is fully applied before the next.

    Frontends ``post`` events as they arrive and call ``run_pending``
    once per frame.  Listeners see every state that differs from the
    previous one.
    """

    def __init__(self, state: GameState) -> None:
        self.state = state
        self._queue: deque[Event | Action] = deque()
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def post(self, event: Event | Action) -> None:
        if isinstance(event, NoOp):
            return
        self._queue.append(event)

    @property
    def pending(self) -> int:
        return len(self._queue)

    def run_pending(self) -> GameState:
        """Drain the queue and return the final state."""
        while self._queue:
            event = self._queue.popleft()
            new_state = step(event, self.state)
            if new_state is self.state:
                continue
            self.state = new_state
            for listener in self._listeners:
                listener(new_state)
        return self.state
