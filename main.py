"""
Main entry point for TicTacToe.

Runs the Tkinter UI by default, or a console game with --no-ui.
"""

import argparse
from typing import Optional

from display.board_renderer import BoardRenderer
from engine.ai_player import Difficulty
from engine.game_state import Player
from session.config import SessionConfig
from session.controller import GameController
from session.players import GameMode
from session.storage import GameStorage


class ConsoleGame:
    """
    Play TicTacToe in the terminal.

    Cells are numbered 0-8, left to right and top to bottom.
    Type 'u' to undo, 'q' to quit.
    """

    def __init__(self, controller: GameController, screenshot: Optional[str] = None):
        self.controller = controller
        self.screenshot = screenshot
        self.is_running = False

    def start(self):
        """Play rounds until the user quits."""
        if self.controller.has_saved_session():
            answer = input("Do you want to continue your saved game? [y/N] ").strip().lower()
            if answer != "y" or not self.controller.load_saved_session():
                self.controller.discard_saved_session()

        self.is_running = True
        while self.is_running:
            self._play_round()
            if not self.is_running:
                break
            self._show_scores()
            answer = input("\nPlay again? [Y/n] ").strip().lower()
            if answer == "n":
                self.is_running = False
            else:
                self.controller.new_round()

    def _play_round(self):
        """Main game loop for one round."""
        board = self.controller.board
        while not board.game_over:
            board.get_state().print_board()

            if self.controller.is_ai_turn():
                print("\n>>> Computer is thinking...")
                self.controller.play_ai_turn()
                continue

            command = input(f"\n{self.controller.describe_status()} - cell (0-8), u=undo, q=quit: ")
            command = command.strip().lower()

            if command == "q":
                print("\nGame quit by user.")
                self.controller.save_session()
                self.is_running = False
                return
            if command == "u":
                if self.controller.undo() is None:
                    print("Nothing to undo!")
                continue
            if not command.isdigit():
                print("Please enter a cell number from 0 to 8.")
                continue

            result = self.controller.play_cell(int(command))
            if not result.valid:
                print(result.error_message)

        self._show_game_result()

    def _show_game_result(self):
        """Show the final game result."""
        state = self.controller.board.get_state()
        print("\n" + "=" * 40)
        print("   GAME OVER!")
        print("=" * 40)
        state.print_board()
        print(f"\n{self.controller.describe_status()}")

        if self.screenshot:
            BoardRenderer().save(self.screenshot, state.board, state.win_pattern)
            print(f"Saved: {self.screenshot}")

    def _show_scores(self):
        players = self.controller.players.get_players()
        scores = self.controller.players.get_scores()
        print(f"\nScore - {players[Player.X].name}: {scores.x}  "
              f"{players[Player.O].name}: {scores.o}  Draws: {scores.draw}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in GameMode],
        help="pvp for two players, pvc to play the computer"
    )
    parser.add_argument(
        "--difficulty",
        choices=[difficulty.value for difficulty in Difficulty],
        help="Computer difficulty"
    )
    parser.add_argument("--player1", help="Name of player X")
    parser.add_argument("--player2", help="Name of player O")
    parser.add_argument(
        "--data-dir",
        help=f"Where scores and saved games are kept (default: {SessionConfig.DATA_DIR})"
    )
    parser.add_argument(
        "--reset-scores",
        action="store_true",
        help="Start the scoreboard from zero"
    )
    parser.add_argument(
        "--screenshot",
        metavar="PATH",
        help="Console mode: save an image of each finished board to PATH"
    )
    return parser


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    storage = GameStorage(SessionConfig(data_dir=args.data_dir))
    controller = GameController(storage)

    if args.no_ui:
        controller.start_game(
            player1_name=args.player1,
            player2_name=args.player2,
            game_mode=args.mode,
            ai_difficulty=args.difficulty,
            reset_scores=args.reset_scores
        )
        game = ConsoleGame(controller, screenshot=args.screenshot)
        try:
            game.start()
        except (KeyboardInterrupt, EOFError):
            print("\n\nGame interrupted by user.")
            controller.save_session()
        finally:
            print("Goodbye!")
        return

    # Launch UI by default
    from ui import TicTacToeUI

    controller.players.initialize(
        player1_name=args.player1,
        player2_name=args.player2,
        game_mode=args.mode,
        ai_difficulty=args.difficulty,
        reset_scores=args.reset_scores
    )
    print("\n" + "=" * 60)
    print("   TicTacToe")
    print("=" * 60 + "\n")
    ui = TicTacToeUI(controller)
    ui.run()


if __name__ == "__main__":
    main()
