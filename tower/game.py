"""
╔══════════════════════════════════════════════════════════════════════════════╗
║                           GAME LOOP                                           ║
║                                                                               ║
║  Choose a size, play moves until the puzzle is solved or the move limit       ║
║  is hit, then offer another round.                                            ║
╚══════════════════════════════════════════════════════════════════════════════╝
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from . import prompts
from .board import NUM_NEEDLES, Board, legal_disks
from .config import TowerConfig
from .errors import EndOfInput, RetriesExhausted
from .render import render_board
from .terminal import Terminal, get_input

logger = logging.getLogger(__name__)

DIGITS = re.compile(r"[0-9]+")


def as_number(text: str) -> Optional[int]:
    """The answer as an integer, or None unless it is a plain run of digits."""
    if DIGITS.fullmatch(text) is None:
        return None
    try:
        return int(text)
    except ValueError:
        # longer than the interpreter allows for str -> int conversion
        return None


class Outcome(Enum):
    WON = "won"
    LIMIT_EXCEEDED = "limit_exceeded"


@dataclass
class Session:
    """One play-through: the board, its size and the moves made so far."""

    board: Board
    size: int
    move_limit: int
    moves: int = 0

    @classmethod
    def start(cls, size: int, config: TowerConfig) -> "Session":
        return cls(
            board=Board.initialize(size, config.max_disks),
            size=size,
            move_limit=config.move_limit,
        )

    def apply(self, src: int, dst: int) -> int:
        disk = self.board.move(src, dst)
        self.moves += 1
        return disk

    def outcome(self) -> Optional[Outcome]:
        if self.board.is_solved(self.size):
            return Outcome.WON
        if self.moves >= self.move_limit:
            return Outcome.LIMIT_EXCEEDED
        return None


class TowerGame:
    """
    Interactive Towers of Hanoi.

    The terminal supplies answers and receives all output; see
    `tower.terminal` for the console and scripted implementations.
    """

    def __init__(self, terminal: Terminal, config: Optional[TowerConfig] = None):
        self.terminal = terminal
        self.config = config or TowerConfig()
        self.session: Optional[Session] = None

    def run(self) -> int:
        """
        Play rounds until the player stops.

        Returns:
            Process exit status: 0 for a normal finish or end of input,
            1 when the player used up a retry budget.
        """
        self.terminal.write(prompts.BANNER)
        try:
            while True:
                self.play_session()
                self.terminal.write()
                if not self.ask_replay():
                    return 0
        except EndOfInput:
            logger.debug("End of input, stopping")
            return 0
        except RetriesExhausted as exc:
            self.terminal.warn(exc.message)
            return 1

    def play_session(self) -> Outcome:
        self.terminal.write(prompts.INTRODUCTION)
        size = self.choose_size()
        self.terminal.write(prompts.instructions(self.config.max_disks))

        session = self.session = Session.start(size, self.config)
        logger.info("Starting a %d disk puzzle", size)
        self.show(session.board)

        while True:
            self.play_turn(session)
            outcome = session.outcome()
            if outcome is Outcome.WON:
                self.terminal.write(prompts.congratulations(session.moves))
            elif outcome is Outcome.LIMIT_EXCEEDED:
                self.terminal.warn(prompts.move_limit_message(session.moves))
            if outcome is not None:
                logger.info("Puzzle finished: %s after %d moves", outcome.value, session.moves)
                return outcome

    def choose_size(self) -> int:
        max_disks = self.config.max_disks
        answer = get_input(
            self.terminal,
            prompts.size_question(max_disks),
            lambda text: as_number(text) in range(1, max_disks + 1),
            self.config.size_tries,
            prompts.WARNINGS["size"],
            prompts.FAREWELLS["size"],
        )
        return int(answer)

    def play_turn(self, session: Session) -> int:
        """
        Ask for moves until one is legal, apply it and draw the board.

        Returns the disk that moved.
        """
        while True:
            disk, src = self.select_disk(session)
            dst = self.select_destination(src)
            if session.board.can_place(disk, dst):
                break
            self.terminal.warn(prompts.WARNINGS["crush"])

        session.apply(src, dst)
        logger.debug("Move %d: disk %d from needle %d to %d", session.moves, disk, src + 1, dst + 1)
        self.show(session.board)
        return disk

    def select_disk(self, session: Session) -> Tuple[int, int]:
        """Ask for a disk until one on top of a needle is named."""
        disks = legal_disks(session.size, self.config.max_disks)

        while True:
            answer = get_input(
                self.terminal,
                prompts.QUESTIONS["disk"],
                lambda text: as_number(text) in disks,
                self.config.disk_tries,
                prompts.illegal_disk_warning(disks),
                prompts.FAREWELLS["disk"],
            )
            disk = int(answer)
            src = session.board.locate(disk)
            if src is not None:
                return disk, src
            self.terminal.warn(prompts.WARNINGS["buried"])

    def select_destination(self, src: int) -> int:
        needles = [n for n in range(1, NUM_NEEDLES + 1) if n != src + 1]
        answer = get_input(
            self.terminal,
            prompts.QUESTIONS["needle"],
            lambda text: as_number(text) in needles,
            self.config.needle_tries,
            prompts.WARNINGS["needle"],
            prompts.FAREWELLS["needle"],
        )
        return int(answer) - 1

    def ask_replay(self) -> bool:
        """True to play again. An empty answer counts as no."""
        answer = get_input(
            self.terminal,
            prompts.QUESTIONS["replay"],
            lambda text: text == "" or text[0] in "nNyY",
            None,
            prompts.WARNINGS["replay"],
        )
        return answer[:1] in ("y", "Y")

    def show(self, board: Board) -> None:
        self.terminal.write()
        self.terminal.write(render_board(board, self.config.max_disks))
        self.terminal.write()
