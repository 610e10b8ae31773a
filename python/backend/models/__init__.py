from backend.models.actions import Action, Move, MoveTile, NoOp, Shuffle
from backend.models.board import Board, Direction, is_solved
from backend.models.events import ArrowKey, Click, Event, WindowResize
from backend.models.sequence import BLANK, format_sequence, parse_sequence, solved_sequence

__all__ = [
    "BLANK",
    "Action",
    "ArrowKey",
    "Board",
    "Click",
    "Direction",
    "Event",
    "Move",
    "MoveTile",
    "NoOp",
    "Shuffle",
    "WindowResize",
    "format_sequence",
    "is_solved",
    "parse_sequence",
    "solved_sequence",
]
