"""
Main orchestration script for TicTacToe.

This script ties together:
- Logic (board, win checking, move validation, computer opponent)
- Console (terminal input/output, board rendering)

Run this script to play TicTacToe against the computer!
"""

import logging
from enum import Enum
from typing import List, Optional

# Logic imports
from logic.config import GameConfig
from logic.game_state import Board, Mark, Move, Player
from logic.move_validator import MoveValidator
from logic.ai_player import AIPlayer, MoveStrategy

# Console imports
from console.config import ConsoleConfig
from console.terminal import Terminal
from console.renderer import BoardRenderer

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    """Where the game is in its session."""
    AWAITING_FIRST_MOVE = "awaiting_first_move"
    TURN_IN_PROGRESS = "turn_in_progress"
    ROUND_OVER = "round_over"
    ASK_PLAY_AGAIN = "ask_play_again"
    TERMINATED = "terminated"


class RoundResult(Enum):
    """How a round ended."""
    HUMAN_WON = "human_won"
    COMPUTER_WON = "computer_won"
    TIE = "tie"


class TicTacToeGame:
    """
    Main controller for a TicTacToe session.

    Game flow:
    1. Whoever holds the first-to-move mark plays first
    2. The human types a square; the computer picks an open one at random
    3. Turns alternate until someone has three in a row or the board is full
    4. The result is shown and the human is asked to play again
    """

    RESULT_MESSAGES = {
        RoundResult.HUMAN_WON: "You won!",
        RoundResult.COMPUTER_WON: "Computer won",
        RoundResult.TIE: "It's a tie",
    }

    def __init__(
        self,
        terminal: Optional[Terminal] = None,
        strategy: Optional[MoveStrategy] = None,
        human_mark: Optional[Mark] = None,
        first_to_move: Optional[Mark] = None,
        game_config: Optional[GameConfig] = None,
        console_config: Optional[ConsoleConfig] = None
    ):
        """
        Initialize the game.

        Args:
            terminal: Where input comes from and output goes to.
            strategy: Move selection for the computer. Random if not provided.
            human_mark: Which mark the human plays (default from GameConfig).
            first_to_move: Mark that starts every round (default from GameConfig).
            game_config: Rules configuration.
            console_config: Display configuration.
        """
        self.game_config = game_config or GameConfig()
        self.console_config = console_config or ConsoleConfig()

        self.terminal = terminal or Terminal(self.console_config)
        self.renderer = BoardRenderer(self.console_config)
        self.validator = MoveValidator(self.console_config.BOARD_HINT_KEY)

        human_mark = human_mark or self.game_config.HUMAN_MARK
        self.human = Player(human_mark)
        self.computer = AIPlayer(human_mark.opposite(), strategy)
        self.first_to_move = first_to_move or self.game_config.FIRST_TO_MOVE

        self.board = Board()
        self.active_mark = self.first_to_move

        # State tracking
        self.moves: List[Move] = []
        self.results: List[RoundResult] = []
        self.phase = GamePhase.AWAITING_FIRST_MOVE

    def play(self):
        """Run a whole session, until the player declines another round."""
        self.terminal.clear()
        self._display_welcome_message()
        self._press_any_key_to("begin")

        self._match()

        self.terminal.clear()
        self.terminal.write_line(self.console_config.GOODBYE_MESSAGE)
        self.terminal.write_line()

    def round_result(self) -> Optional[RoundResult]:
        """
        Get the result of the current round.

        Returns:
            The RoundResult, or None if the round is still going.
        """
        winner = self.board.winning_mark()

        if winner == self.human.mark:
            return RoundResult.HUMAN_WON
        if winner == self.computer.mark:
            return RoundResult.COMPUTER_WON
        if self.board.is_full():
            return RoundResult.TIE
        return None

    def _match(self):
        """Play rounds until the player stops."""
        while True:
            self._display_board()
            self.phase = GamePhase.TURN_IN_PROGRESS

            while True:
                self._current_player_moves()
                self._switch_turns()
                if self.board.has_winner() or self.board.is_full():
                    break
                self._clear_screen_and_display_board()

            self.phase = GamePhase.ROUND_OVER
            self._display_result()

            self.phase = GamePhase.ASK_PLAY_AGAIN
            if not self._play_again():
                break

            self._reset()
            self.terminal.write_line(self.console_config.PLAY_AGAIN_MESSAGE)
            self.terminal.write_line()
            self._press_any_key_to("start a new game!")

        self.phase = GamePhase.TERMINATED
        logger.info("Session over after %d round(s)", len(self.results))

    def _current_player_moves(self):
        if self.active_mark == self.human.mark:
            self._human_moves()
        else:
            self._computer_moves()

    def _switch_turns(self):
        self.active_mark = self.active_mark.opposite()

    def _human_moves(self):
        """Ask for a square until the player names an open one."""
        while True:
            choices = ", ".join(str(p) for p in self.board.unmarked_positions())
            self.terminal.write_line(f"Choose a square between ({choices}):")

            result = self.validator.validate_move(self.board, self.terminal.read_line())

            if result.show_numbers:
                self._display_board_with_numbers()
                continue

            if result.is_valid:
                break

            self.terminal.write_line(result.error_message)

        self._apply_move(result.position)

    def _computer_moves(self):
        self.terminal.write_line(self.console_config.THINKING_MESSAGE)
        self._loading()
        self._apply_move(self.computer.choose_move(self.board))

    def _apply_move(self, position: int):
        self.board.place_mark(position, self.active_mark)
        self.moves.append(Move(
            mark=self.active_mark,
            position=position,
            move_number=len(self.moves)
        ))
        logger.debug("Move %d: %s -> %d", len(self.moves), self.active_mark.value, position)

    def _loading(self):
        """Print the thinking dots, one per pause."""
        for _ in range(self.console_config.THINKING_DOTS):
            self.terminal.write(".")
            self.terminal.pause(self.console_config.THINKING_DELAY)
        self.terminal.write_line()

    def _display_result(self) -> RoundResult:
        """Show the final board and who won."""
        result = self.round_result() or RoundResult.TIE

        self.terminal.clear()
        winning_line = self.board.winning_line()
        if winning_line is not None:
            self._emphasize_result(winning_line)
        else:
            self._display_board()

        self.terminal.write_line(self.RESULT_MESSAGES[result])

        self.results.append(result)
        logger.info("Round %d: %s", len(self.results), result.value)
        return result

    def _emphasize_result(self, winning_line):
        """Flash the winning line a few times, ending on the normal board."""
        for _ in range(self.console_config.FLASH_CYCLES):
            self._clear_screen_and_display_board()
            self.terminal.pause(self.console_config.FLASH_DELAY)
            self.terminal.clear()
            self._display_header()
            self._write_lines(self.renderer.draw_emphasized(self.board.cells, winning_line))
            self.terminal.write_line()
            self.terminal.pause(self.console_config.FLASH_DELAY)

        self._clear_screen_and_display_board()

    def _play_again(self) -> bool:
        while True:
            self.terminal.write_line(self.console_config.PLAY_AGAIN_PROMPT)
            result = self.validator.validate_play_again(self.terminal.read_line())
            if result.is_valid:
                return result.answer
            self.terminal.write_line(result.error_message)

    def _reset(self):
        """Reset the game for a new round."""
        self.board.clear()
        self.active_mark = self.first_to_move
        self.moves = []
        self.terminal.clear()

    def _press_any_key_to(self, action: str):
        self.terminal.write_line(f"Press any key to {action}")
        self.terminal.read_line()
        self.terminal.clear()

    def _display_welcome_message(self):
        self.terminal.write_line(self.console_config.WELCOME_MESSAGE)
        self.terminal.write_line()

    def _display_header(self):
        self.terminal.write_line(
            f"You're a {self.human.mark.value}. Computer is a {self.computer.mark.value}."
        )
        self.terminal.write_line()
        self.terminal.write_line(
            "To see the board with its corresponding numbers "
            f"press '{self.console_config.BOARD_HINT_KEY}'"
        )
        self.terminal.write_line()

    def _display_board(self):
        self._display_header()
        self._write_lines(self.renderer.draw(self.board.cells))
        self.terminal.write_line()

    def _clear_screen_and_display_board(self):
        self.terminal.clear()
        self._display_board()

    def _display_board_with_numbers(self):
        self.terminal.clear()
        self.terminal.write_line()
        self.terminal.write_line(self.console_config.NUMBERS_TITLE)
        self.terminal.write_line()
        self._write_lines(self.renderer.draw_numbers())
        self.terminal.write_line()
        self._press_any_key_to("return to game board")
        self._clear_screen_and_display_board()

    def _write_lines(self, lines: List[str]):
        for line in lines:
            self.terminal.write_line(line)


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Play TicTacToe against the computer")
    parser.parse_args()

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )

    game = TicTacToeGame()

    try:
        game.play()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
        print("Goodbye!")


if __name__ == "__main__":
    main()
