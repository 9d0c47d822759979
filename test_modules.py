"""
Tests for the TicTacToe logic and console modules.
Run with pytest from the project root.
"""

import io

import pytest

from logic.errors import InvalidMoveError
from logic.game_state import Board, Mark, Player, Square
from logic.win_checker import WinChecker
from logic.move_validator import MoveValidator
from logic.ai_player import AIPlayer, random_strategy
from console.config import ConsoleConfig
from console.renderer import BoardRenderer
from console.terminal import Terminal


def make_board(x_positions, o_positions):
    board = Board()
    for position in x_positions:
        board.place_mark(position, Mark.X)
    for position in o_positions:
        board.place_mark(position, Mark.O)
    return board


# ==================== SQUARE / PLAYER ====================

def test_square_starts_unmarked():
    square = Square()
    assert square.mark == Mark.EMPTY
    assert square.is_unmarked()
    assert str(square) == " "


def test_square_set_mark():
    square = Square()
    square.set_mark(Mark.O)
    assert square.mark == Mark.O
    assert not square.is_unmarked()
    assert str(square) == "O"


def test_player_mark_is_fixed():
    player = Player(Mark.X)
    assert player.mark == Mark.X
    with pytest.raises(AttributeError):
        player.mark = Mark.O


def test_player_cannot_be_empty():
    with pytest.raises(ValueError):
        Player(Mark.EMPTY)


def test_mark_opposite():
    assert Mark.X.opposite() == Mark.O
    assert Mark.O.opposite() == Mark.X
    with pytest.raises(ValueError):
        Mark.EMPTY.opposite()


# ==================== BOARD ====================

def test_new_board_is_empty():
    board = Board()
    assert board.unmarked_positions() == list(range(1, 10))
    assert not board.is_full()
    assert board.winning_line() is None
    assert board.winning_mark() is None
    assert not board.has_winner()


@pytest.mark.parametrize("line", WinChecker.WINNING_LINES)
@pytest.mark.parametrize("mark", [Mark.X, Mark.O])
def test_every_line_wins(line, mark):
    board = Board()
    for position in line:
        board.place_mark(position, mark)

    assert board.has_winner()
    assert board.winning_mark() == mark
    assert board.winning_line() == line


def test_mixed_line_is_not_a_win():
    board = make_board([1, 2], [3])
    assert board.winning_line() is None


def test_winning_line_scan_order():
    # Row 1-2-3 and column 1-4-7 both held by X: rows are checked first
    board = make_board([1, 2, 3, 4, 7], [])
    assert board.winning_line() == (1, 2, 3)


def test_full_board_without_line_is_a_tie():
    board = make_board([1, 2, 6, 7, 8], [3, 4, 5, 9])
    assert board.is_full()
    assert not board.has_winner()
    assert board.unmarked_positions() == []


def test_unmarked_positions_shrink_by_one():
    board = Board()
    order = [5, 1, 9, 3, 7]
    for count, position in enumerate(order, start=1):
        board.place_mark(position, Mark.X if count % 2 else Mark.O)
        unmarked = board.unmarked_positions()
        assert len(unmarked) == 9 - count
        assert not set(order[:count]) & set(unmarked)
        assert unmarked == sorted(unmarked)


def test_clear_resets_board():
    board = make_board([1, 5, 9], [2, 3])
    assert board.has_winner()

    board.clear()

    assert board.unmarked_positions() == list(range(1, 10))
    assert board.winning_line() is None
    assert all(mark == Mark.EMPTY for mark in board.marks().values())


def test_place_mark_rejects_marked_square():
    board = make_board([5], [])
    with pytest.raises(InvalidMoveError):
        board.place_mark(5, Mark.O)
    assert board.marks()[5] == Mark.X


@pytest.mark.parametrize("position", [0, 10, -1])
def test_place_mark_rejects_off_board(position):
    with pytest.raises(InvalidMoveError):
        Board().place_mark(position, Mark.X)


def test_place_mark_rejects_empty_mark():
    with pytest.raises(InvalidMoveError):
        Board().place_mark(1, Mark.EMPTY)


def test_cells_are_read_only():
    board = Board()
    with pytest.raises(TypeError):
        board.cells[1] = Square(Mark.X)


# ==================== MOVE VALIDATOR ====================

def test_validator_accepts_open_square():
    result = MoveValidator().validate_move(Board(), " 7 ")
    assert result.is_valid
    assert result.position == 7


@pytest.mark.parametrize("text", ["", "0", "10", "x", "5a", "-1", "1.0"])
def test_validator_rejects_bad_input(text):
    result = MoveValidator().validate_move(Board(), text)
    assert not result.is_valid
    assert not result.show_numbers
    assert result.error_message == MoveValidator.INVALID_CHOICE_MESSAGE


def test_validator_rejects_taken_square():
    board = make_board([4], [])
    result = MoveValidator().validate_move(board, "4")
    assert not result.is_valid
    assert result.error_message == MoveValidator.INVALID_CHOICE_MESSAGE


@pytest.mark.parametrize("text", ["d", "D"])
def test_validator_hint_key(text):
    result = MoveValidator().validate_move(Board(), text)
    assert not result.is_valid
    assert result.show_numbers
    assert result.error_message is None


@pytest.mark.parametrize("text,answer", [("y", True), ("Y", True), ("n", False), (" N ", False)])
def test_play_again_answers(text, answer):
    result = MoveValidator().validate_play_again(text)
    assert result.is_valid
    assert result.answer is answer


@pytest.mark.parametrize("text", ["", "yes", "no", "maybe"])
def test_play_again_rejects_other_answers(text):
    result = MoveValidator().validate_play_again(text)
    assert not result.is_valid
    assert result.error_message == MoveValidator.INVALID_ANSWER_MESSAGE


# ==================== AI PLAYER ====================

def test_ai_uses_strategy_on_open_squares():
    seen = []

    def pick_last(positions):
        seen.append(positions)
        return positions[-1]

    ai = AIPlayer(Mark.O, strategy=pick_last)
    board = make_board([9], [])

    assert ai.choose_move(board) == 8
    assert seen == [[1, 2, 3, 4, 5, 6, 7, 8]]


def test_ai_random_move_is_open():
    board = make_board([1, 2, 3], [4, 5])
    ai = AIPlayer(Mark.O)
    for _ in range(20):
        assert ai.choose_move(board) in [6, 7, 8, 9]


def test_random_strategy_single_choice():
    assert random_strategy([6]) == 6


def test_ai_full_board_has_no_move():
    board = make_board([1, 2, 6, 7, 8], [3, 4, 5, 9])
    assert AIPlayer().choose_move(board) is None


def test_ai_rejects_strategy_picking_taken_square():
    ai = AIPlayer(Mark.O, strategy=lambda positions: 1)
    with pytest.raises(InvalidMoveError):
        ai.choose_move(make_board([1], []))


# ==================== RENDERER ====================

def test_draw_board():
    board = make_board([1, 5], [3])
    lines = BoardRenderer().draw(board.cells)

    assert lines == [
        "     |     |   ",
        "  X  |     |  O ",
        "     |     |   ",
        "-----|-----|-----",
        "     |     |   ",
        "     |  X  |    ",
        "     |     |   ",
        "-----|-----|-----",
        "     |     |   ",
        "     |     |    ",
        "     |     |   ",
    ]


def test_draw_numbers():
    lines = BoardRenderer().draw_numbers()
    assert lines[1] == "  1  |  2  |  3 "
    assert lines[5] == "  4  |  5  |  6 "
    assert lines[9] == "  7  |  8  |  9 "


def test_draw_emphasized():
    board = make_board([1, 5, 9], [2, 3])
    lines = BoardRenderer().draw_emphasized(board.cells, board.winning_line())

    assert lines[1] == "  *  |  O  |  O "
    assert lines[5] == "     |  *  |    "
    assert lines[9] == "     |     |  * "


# ==================== TERMINAL ====================

def test_terminal_reads_and_writes():
    stdin = io.StringIO("5\n\nn\r\n")
    stdout = io.StringIO()
    terminal = Terminal(stdin=stdin, stdout=stdout)

    assert terminal.read_line() == "5"
    assert terminal.read_line() == ""
    assert terminal.read_line() == "n"
    with pytest.raises(EOFError):
        terminal.read_line()

    terminal.write_line("hello")
    terminal.write(".")
    terminal.clear()
    assert stdout.getvalue() == "hello\n." + ConsoleConfig.CLEAR_SEQUENCE


def test_terminal_pause_uses_sleep():
    pauses = []
    terminal = Terminal(stdin=io.StringIO(), stdout=io.StringIO(), sleep=pauses.append)
    terminal.pause(0.35)
    assert pauses == [0.35]
