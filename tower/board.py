"""
Board model: three needles holding odd-numbered disks.

A disk's code is also its size, so every comparison between disks is a plain
integer comparison. Needles are lists ordered bottom to top.
"""

from typing import Iterator, List, Optional, Sequence, Tuple

from .errors import IllegalMoveError

NUM_NEEDLES = 3

# Disks start on the leftmost needle and must end on the rightmost one
START_NEEDLE = 0
GOAL_NEEDLE = 2


def legal_disks(size: int, max_disks: int) -> List[int]:
    """
    Disk codes in play for a puzzle of `size` disks, smallest first.

    These are the `size` largest odd numbers up to 2 * max_disks + 1.
    """
    return [n * 2 + 1 for n in range(max_disks + 1 - size, max_disks + 1)]


def minimum_moves(size: int) -> int:
    """Fewest moves that solve a puzzle of `size` disks."""
    return 2 ** size - 1


def solution_moves(
    size: int,
    src: int = START_NEEDLE,
    aux: int = 1,
    dst: int = GOAL_NEEDLE,
) -> Iterator[Tuple[int, int]]:
    """Yield the optimal (source, destination) sequence for `size` disks."""
    if size:
        yield from solution_moves(size - 1, src, dst, aux)
        yield (src, dst)
        yield from solution_moves(size - 1, aux, src, dst)


class Board:
    """The three needles of one puzzle."""

    def __init__(self, needles: Sequence[Sequence[int]]):
        if len(needles) != NUM_NEEDLES:
            raise ValueError(f"a board has {NUM_NEEDLES} needles, got {len(needles)}")
        self.needles: List[List[int]] = [list(n) for n in needles]

    @classmethod
    def initialize(cls, size: int, max_disks: int) -> "Board":
        """All `size` disks on the first needle, largest at the bottom."""
        if not 1 <= size <= max_disks:
            raise ValueError(f"puzzle size must be between 1 and {max_disks}, got {size}")
        return cls([list(reversed(legal_disks(size, max_disks))), [], []])

    def top_disk(self, needle: int) -> Optional[int]:
        stack = self.needles[needle]
        return stack[-1] if stack else None

    def locate(self, disk: int) -> Optional[int]:
        """
        Index of the needle whose top disk is `disk`.

        Returns None when the disk is not on top of any needle, which for a
        disk in play means something is sitting on it.
        """
        for index, stack in enumerate(self.needles):
            if stack and stack[-1] == disk:
                return index
        return None

    def can_place(self, disk: int, needle: int) -> bool:
        top = self.top_disk(needle)
        return top is None or top > disk

    def move(self, src: int, dst: int) -> int:
        """Move the top disk of `src` onto `dst` and return it."""
        disk = self.top_disk(src)
        if disk is None:
            raise IllegalMoveError(f"needle {src + 1} is empty")
        if not self.can_place(disk, dst):
            raise IllegalMoveError(
                f"disk {disk} cannot go on disk {self.top_disk(dst)} (needle {dst + 1})"
            )
        self.needles[dst].append(self.needles[src].pop())
        return disk

    def is_solved(self, size: int) -> bool:
        return len(self.needles[GOAL_NEEDLE]) == size

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.needles == other.needles

    def __repr__(self):
        return f"Board({self.needles!r})"
