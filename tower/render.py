"""Fixed-width text drawing of a board."""

from .board import NUM_NEEDLES, Board


def render_board(board: Board, max_disks: int) -> str:
    """
    Draw the needles side by side, top row first, with labels underneath.

    A disk is its code followed by (code - 1) / 2 asterisks on each side of
    the needle. Column widths grow with `max_disks` so that codes of any
    length keep the needles lined up; one and two digit codes share the
    same four-column margin.
    """
    margin = max(4, len(str(max_disks * 2 + 1)) + 2)
    column = max_disks * 2 + margin + 1
    empty_needle = " " * (margin + max_disks) + "|" + " " * max_disks

    lines = []
    for row in reversed(range(max_disks + 1)):
        line = ""
        for stack in board.needles:
            if row < len(stack):
                disk = stack[row]
                half_disk = "*" * ((disk - 1) // 2)
                width = margin + max_disks - 1 - len(half_disk)
                line += f"{disk:>{width}} {half_disk}|{half_disk}".ljust(column)
            else:
                line += empty_needle
        lines.append(line.rstrip())

    labels = "".join(
        f"{needle + 1:>{margin + max_disks + 1}}" + " " * max_disks
        for needle in range(NUM_NEEDLES)
    )
    lines.append(labels.rstrip())
    return "\n".join(lines)
