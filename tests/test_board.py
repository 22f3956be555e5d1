import pytest

from tower.board import Board, legal_disks, minimum_moves, solution_moves
from tower.errors import IllegalMoveError

MAX_DISKS = 7


def assert_needles_ordered(board):
    for stack in board.needles:
        assert all(lower > upper for lower, upper in zip(stack, stack[1:]))


@pytest.mark.parametrize("size", range(1, MAX_DISKS + 1))
def test_initialize_stacks_every_disk_on_first_needle(size):
    board = Board.initialize(size, MAX_DISKS)

    assert len(board.needles[0]) == size
    assert board.needles[1] == []
    assert board.needles[2] == []
    assert_needles_ordered(board)
    assert sorted(board.needles[0]) == legal_disks(size, MAX_DISKS)


def test_legal_disks_are_largest_odd_codes():
    assert legal_disks(1, 7) == [15]
    assert legal_disks(3, 7) == [11, 13, 15]
    assert legal_disks(7, 7) == [3, 5, 7, 9, 11, 13, 15]


@pytest.mark.parametrize("size", [0, 8, -1])
def test_initialize_rejects_out_of_range_sizes(size):
    with pytest.raises(ValueError):
        Board.initialize(size, MAX_DISKS)


def test_top_disk_and_locate():
    board = Board.initialize(3, MAX_DISKS)

    assert board.top_disk(0) == 11
    assert board.top_disk(1) is None
    assert board.locate(11) == 0
    assert board.locate(13) is None  # buried under 11
    assert board.locate(15) is None


@pytest.mark.parametrize(
    "needles, disk, needle, expected",
    [
        ([[15], [], []], 15, 1, True),
        ([[15, 13], [11], []], 13, 1, False),
        ([[15, 11], [13], []], 11, 1, True),
        ([[15], [13], []], 15, 1, False),
    ],
)
def test_can_place_compares_codes(needles, disk, needle, expected):
    assert Board(needles).can_place(disk, needle) is expected


def test_move_carries_top_disk():
    board = Board.initialize(2, MAX_DISKS)

    assert board.move(0, 2) == 13
    assert board.needles == [[15], [], [13]]
    assert sum(len(stack) for stack in board.needles) == 2


def test_move_from_empty_needle_raises():
    board = Board.initialize(2, MAX_DISKS)

    with pytest.raises(IllegalMoveError):
        board.move(1, 2)


def test_move_larger_onto_smaller_raises_and_leaves_board_alone():
    board = Board([[15], [13], []])

    with pytest.raises(IllegalMoveError):
        board.move(0, 1)
    assert board == Board([[15], [13], []])


def test_is_solved_only_when_goal_needle_is_full():
    assert not Board.initialize(2, MAX_DISKS).is_solved(2)
    assert not Board([[], [15], [13]]).is_solved(2)
    assert Board([[], [], [15, 13]]).is_solved(2)


@pytest.mark.parametrize("size", range(1, MAX_DISKS + 1))
def test_optimal_solution_solves_within_move_limit(size):
    board = Board.initialize(size, MAX_DISKS)
    moves = list(solution_moves(size))

    for src, dst in moves:
        board.move(src, dst)
        assert sum(len(stack) for stack in board.needles) == size
        assert_needles_ordered(board)

    assert board.is_solved(size)
    assert len(moves) == minimum_moves(size) == 2 ** size - 1
    assert len(moves) < 2 ** MAX_DISKS


def test_single_disk_puzzle_solves_in_one_move():
    board = Board.initialize(1, MAX_DISKS)

    assert board.needles[0] == [2 * MAX_DISKS + 1]
    board.move(0, 2)
    assert board.is_solved(1)


def test_three_disk_puzzle_canonical_sequence():
    board = Board.initialize(3, MAX_DISKS)
    assert board.needles[0] == [15, 13, 11]

    moved = [board.move(src, dst) for src, dst in solution_moves(3)]

    assert moved == [11, 13, 11, 15, 11, 13, 11]
    assert board.needles == [[], [], [15, 13, 11]]
    assert board.is_solved(3)


def test_board_requires_three_needles():
    with pytest.raises(ValueError):
        Board([[15], []])
