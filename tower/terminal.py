"""
Input providers and the bounded-retry prompt.

A terminal reads one line per question and writes text back to the player.
`get_input` wraps a terminal with validation and a retry budget.
"""

import logging
import platform
import sys
from typing import Callable, Iterable, List, Optional, Protocol

from .errors import EndOfInput, RetriesExhausted

if platform.system() in ("Linux", "Darwin"):
    import readline  # noqa: F401  (line editing for input())

logger = logging.getLogger(__name__)


class Terminal(Protocol):
    """What the game needs from its input and output."""

    def read_line(self, prompt: str) -> Optional[str]: ...

    def write(self, text: str = "") -> None: ...

    def warn(self, text: str) -> None: ...


class ConsoleTerminal:
    """Reads from the keyboard, writes to stdout, warns on stderr."""

    def __init__(self, stdout=None, stderr=None):
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr

    def read_line(self, prompt: str) -> Optional[str]:
        """Return the next line without its newline, or None at end of input."""
        try:
            return input(prompt)
        except EOFError:
            return None

    def write(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def warn(self, text: str) -> None:
        print(text, file=self.stderr)


class ScriptedTerminal:
    """
    Plays back a fixed list of answers.

    Everything the game says is captured: `transcript` holds prompts, answers
    and normal output in order, `warnings` holds what went to the error
    stream. Running out of answers behaves like end of input.
    """

    def __init__(self, answers: Iterable[str]):
        self._answers = iter(answers)
        self.transcript: List[str] = []
        self.warnings: List[str] = []

    def read_line(self, prompt: str) -> Optional[str]:
        answer = next(self._answers, None)
        self.transcript.append(prompt + (answer if answer is not None else ""))
        return answer

    def write(self, text: str = "") -> None:
        self.transcript.append(text)

    def warn(self, text: str) -> None:
        self.warnings.append(text)

    @property
    def output(self) -> str:
        return "\n".join(self.transcript)


def get_input(
    terminal: Terminal,
    prompt: str,
    validate: Callable[[str], bool],
    tries: Optional[int],
    warning: str,
    error: str = "",
) -> str:
    """
    Ask `prompt` until `validate` accepts the answer.

    Args:
        terminal: Where the question is asked and warnings go
        prompt: Question shown to the player
        validate: Predicate over the raw answer
        tries: Answers allowed in total, or None for no limit
        warning: Shown after each rejected answer that still leaves a try
        error: Message carried by RetriesExhausted when the tries run out

    Returns:
        The first accepted answer

    Raises:
        EndOfInput: the terminal has no more lines
        RetriesExhausted: `tries` answers in a row were rejected
    """
    remaining = tries
    while True:
        line = terminal.read_line(prompt)
        if line is None:
            raise EndOfInput()

        if validate(line):
            return line

        if remaining is not None:
            remaining -= 1
            if remaining <= 0:
                logger.info("Retries exhausted at prompt %r", prompt)
                raise RetriesExhausted(error)

        logger.debug("Rejected %r at prompt %r", line, prompt)
        terminal.warn(warning)
