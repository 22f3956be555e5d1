"""
Towers of Hanoi, the interactive terminal puzzle.

Components:
    - config.py  : game configuration (TowerConfig)
    - board.py   : needles, disks and move rules (Board)
    - terminal.py: input providers and the bounded-retry prompt (get_input)
    - render.py  : fixed-width board drawing (render_board)
    - prompts.py : banner, instructions and player messages
    - game.py    : session state machine (TowerGame)
"""

from .config import TowerConfig
from .board import Board, legal_disks
from .game import Outcome, Session, TowerGame
from .render import render_board
from .terminal import ConsoleTerminal, ScriptedTerminal, get_input

__version__ = "0.1.0"

__all__ = [
    "TowerConfig",
    "Board",
    "legal_disks",
    "Outcome",
    "Session",
    "TowerGame",
    "render_board",
    "ConsoleTerminal",
    "ScriptedTerminal",
    "get_input",
]
