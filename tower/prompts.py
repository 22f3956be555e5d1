"""
╔══════════════════════════════════════════════════════════════════════════════╗
║                           PLAYER-FACING TEXT                                  ║
║                                                                               ║
║  Questions, warnings and farewells shown during a game. Anything that         ║
║  depends on the puzzle bounds is built by a function below.                   ║
╚══════════════════════════════════════════════════════════════════════════════╝
"""

from typing import Sequence


# ══════════════════════════════════════════════════════════════════════════════
#  FIXED TEXT
# ══════════════════════════════════════════════════════════════════════════════

BANNER = """\
                                 TOWERS
               Creative Computing  Morristown, New Jersey

"""

INTRODUCTION = """\
Towers of Hanoi Puzzle.

You must transfer the disks from the left to the right
Tower, one at a time, never putting a larger disk on a
smaller disk.
"""

QUESTIONS = {
    "disk": "Which disk would you like to move? ",
    "needle": "Place disk on which needle? ",
    "replay": "Try again? [y/N]: ",
}

WARNINGS = {
    "size": "Sorry, but I can't do that job for you.",
    "needle": (
        "I'll assume you hit the wrong key this time.  But watch it,\n"
        "I only allow one mistake."
    ),
    "buried": "That disk is below another one.  Make another choice.",
    "crush": (
        "You can't place a larger disk on top of a smaller one,\n"
        "It might crush it!"
    ),
    "replay": "Please respond 'y' or 'n'",
}

FAREWELLS = {
    "size": (
        "All right, wise guy, if you can't play the game right, I'll\n"
        "just take my puzzle and go home.  So long."
    ),
    "disk": "Stop wasting my time.  Go bother someone else.",
    "needle": (
        "I tried to warn you, but you wouldn't listen.\n"
        "Bye bye, big shot."
    ),
}


# ══════════════════════════════════════════════════════════════════════════════
#  TEXT THAT DEPENDS ON THE PUZZLE BOUNDS
# ══════════════════════════════════════════════════════════════════════════════

def size_question(max_disks: int) -> str:
    return f"How many disks do you want to move ({max_disks} is max)? "


def instructions(max_disks: int) -> str:
    """Explain the disk codes, using the real codes for the configured maximum."""
    top = max_disks * 2 + 1
    return (
        "In this program, we shall refer to disks by numerical code.\n"
        "3 will represent the smallest disk, 5 the next size,\n"
        f"7 the next, and so on, up to {top}.  If you do the puzzle with\n"
        f"2 disks, their code names would be {top - 2} and {top}.  With 3 disks\n"
        f"the code names would be {top - 4}, {top - 2} and {top}, etc.  The needles\n"
        "are numbered from left to right, 1 to 3.  We will\n"
        "start with the disks on needle 1, and attempt to move them\n"
        "to needle 3.\n"
        "\n"
        "\n"
        "Good luck!\n"
    )


def illegal_disk_warning(disks: Sequence[int]) -> str:
    return "Illegal entry... You may only type " + ", ".join(str(d) for d in disks)


def congratulations(moves: int) -> str:
    return f"Congratulations!\n\nYou have performed the task in {moves} moves.\n"


def move_limit_message(moves: int) -> str:
    return (
        "Sorry, but I have orders to stop if you make more than\n"
        f"{moves} moves."
    )
