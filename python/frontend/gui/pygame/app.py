"""Pygame GUI frontend — resizable window, keyboard and mouse input.

Every pygame event is translated into a backend event and posted to the
shared :class:`EventLoop`; drawing only reads the resulting state.
"""

from __future__ import annotations

import pygame

from backend.config import PuzzleConfig
from backend.engine.gamestate import EventLoop, GameState, board_origin
from backend.engine.gamestate.state import DEFAULT_WINDOW
from backend.models import ArrowKey, Click, Direction, Event, NoOp, Shuffle, WindowResize

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_OVERLAY0 = (108, 112, 134)
COL_BLUE = (137, 180, 250)
COL_GREEN = (166, 227, 161)
COL_PINK = (245, 194, 231)

_DIRS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}


def translate(
    ev: pygame.event.Event, window: tuple[int, int], shuffle_steps: int
) -> Event | Shuffle:
    """Map a pygame event to a backend event (``NoOp`` when irrelevant)."""
    if ev.type == pygame.VIDEORESIZE:
        return WindowResize(ev.w, ev.h)
    if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
        x, y = ev.pos
        return Click(x, y, *window)
    if ev.type == pygame.KEYDOWN:
        if ev.key in _DIRS:
            return ArrowKey(_DIRS[ev.key])
        if ev.key == pygame.K_r:
            return Shuffle(shuffle_steps)
    return NoOp()


class PygameApp:
    def __init__(self, config: PuzzleConfig) -> None:
        self._config = config
        self._loop = EventLoop(GameState.create(config))

        pygame.init()
        self._surf = pygame.display.set_mode(DEFAULT_WINDOW, pygame.RESIZABLE)
        pygame.display.set_caption("Sliding Tiles")
        self._clock = pygame.time.Clock()

        self._f_title = pygame.font.SysFont("Helvetica", 22, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13)

        # The core needs a resize before the first click.
        self._loop.post(WindowResize(*self._surf.get_size()))
        self._loop.run_pending()

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw(self) -> None:
        self._surf.fill(COL_BASE)
        state = self._loop.state
        board = state.board
        ww, wh = self._surf.get_size()
        ts, gap = board.tile_size, board.tile_spacing
        ox, oy = board_origin(board, ww, wh)
        f_tile = pygame.font.SysFont("Helvetica", max(8, ts // 3), bold=True)

        pygame.draw.rect(
            self._surf,
            COL_MANTLE,
            pygame.Rect(ox, oy, board.width * ts, board.height * ts),
            border_radius=6,
        )

        for i, val in enumerate(board.tiles):
            if val is None:
                continue
            r, c = board.position(i)
            rect = pygame.Rect(
                ox + c * ts + gap // 2,
                oy + r * ts + gap // 2,
                max(1, ts - gap),
                max(1, ts - gap),
            )
            col = COL_GREEN if board.is_tile_correct(i) else COL_BLUE
            pygame.draw.rect(self._surf, col, rect, border_radius=6)
            lbl = f_tile.render(str(board.label(val)), True, COL_BASE)
            self._surf.blit(
                lbl,
                (
                    rect.centerx - lbl.get_width() // 2,
                    rect.centery - lbl.get_height() // 2,
                ),
            )

        if state.is_solved:
            head = self._f_title.render("★  S O L V E D  ★", True, COL_GREEN)
        else:
            head = self._f_title.render(f"Moves: {state.moves}", True, COL_PINK)
        self._surf.blit(head, ((ww - head.get_width()) // 2, 4))

        hint = self._f_small.render(
            "Arrows / WASD / click  move     R  shuffle     Esc  quit",
            True,
            COL_OVERLAY0,
        )
        self._surf.blit(hint, ((ww - hint.get_width()) // 2, wh - 18))

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT or (
                    ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE
                ):
                    running = False
                    break
                if ev.type == pygame.VIDEORESIZE:
                    self._surf = pygame.display.set_mode(
                        (ev.w, ev.h), pygame.RESIZABLE
                    )
                self._loop.post(
                    translate(ev, self._surf.get_size(), self._config.shuffle)
                )

            self._loop.run_pending()
            self._draw()
            pygame.display.flip()
            self._clock.tick(30)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(config: PuzzleConfig) -> None:
    """Launch the Pygame GUI."""
    app = PygameApp(config)
    app.run_loop()
