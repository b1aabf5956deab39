"""
Main script for TicTacToe.

Play against the AI either in a window (default) or in the console:

    python main.py              # Tkinter window
    python main.py --no-ui      # Console mode
    python main.py --seed 7     # Repeatable AI choices
"""

import random
import time
from typing import Optional

from logic.config import GameConfig
from logic.errors import InvalidIndexError
from logic.game_controller import GameController
from logic.game_state import GameStatus, Mark


class ConsoleGame:
    """
    TicTacToe in the terminal.

    Game flow:
    1. Board is printed, human types a cell number (0-8)
    2. AI "thinks" for a moment, then plays
    3. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        think_delay_ms: Optional[int] = None,
        seed: Optional[int] = None,
        config: Optional[GameConfig] = None
    ):
        """
        Initialize the console game.

        Args:
            think_delay_ms: Pause before the AI plays.
            seed: Seed for the AI's random choices.
            config: Game configuration.
        """
        self.config = config or GameConfig()
        self.think_delay_ms = (
            self.config.THINK_DELAY_MS if think_delay_ms is None else think_delay_ms
        )

        self.controller = GameController(
            on_cell_marked=self._on_cell_marked,
            on_game_ended=self._on_game_ended,
            rng=random.Random(seed) if seed is not None else None,
            config=self.config,
        )
        self.is_running = False

    def start(self):
        """Start the game."""
        print("\n" + "="*40)
        print("   TicTacToe - you are "
              f"{self.config.PLAYER_SYMBOL}, the AI is {self.config.AGENT_SYMBOL}")
        print("="*40)
        print("Type a cell number (0-8), 'r' to restart, 'q' to quit\n")

        self.is_running = True
        self._game_loop()

    def _game_loop(self):
        """Main game loop."""
        while self.is_running:
            self.controller.game_state.print_board()

            try:
                command = input("\n> ").strip().lower()
            except EOFError:
                command = "q"

            if command == "q":
                print("\nGame quit by user.")
                self.is_running = False
            elif command == "r":
                self._reset_game()
            else:
                self.handle_command(command)

    def handle_command(self, command: str) -> bool:
        """
        Play a cell typed by the human, then the AI's reply.

        Returns:
            True if the human's move was played.
        """
        if self.controller.get_status().is_terminal:
            print("Game over! Type 'r' to play again.")
            return False

        try:
            index = int(command)
            played = self.controller.apply_player_move(index)
        except (ValueError, InvalidIndexError):
            print("Please type a number from 0 to 8.")
            return False

        if not played:
            print(f"Cell {index} is taken, pick another one.")
            return False

        if self.controller.is_processing():
            print("\n>>> AI is thinking...")
            time.sleep(self.think_delay_ms / 1000.0)
            self.controller.run_agent_move()

        return True

    def _on_cell_marked(self, index: int, mark: Mark):
        who = "You" if mark == Mark.PLAYER else "AI"
        print(f">>> {who} played cell {index}")

    def _on_game_ended(self, status: GameStatus, winning_line):
        print("\n" + "="*40)
        print("   GAME OVER!")
        print("="*40)

        if status == GameStatus.PLAYER_WON:
            print(f"\n🎉 Congratulations! You won! (line {winning_line})")
        elif status == GameStatus.AGENT_WON:
            print(f"\n🤖 AI wins! Better luck next time! (line {winning_line})")
        else:
            print("\n🤝 It's a draw! Good game!")

        print("\nType 'r' to play again or 'q' to quit.")

    def _reset_game(self):
        """Reset the game for a new round."""
        print("\nResetting game...")
        self.controller.reset_game()


def parse_args(argv=None):
    """Parse command line arguments."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against the AI")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the AI's random choices"
    )
    parser.add_argument(
        "--delay",
        type=int,
        default=GameConfig.THINK_DELAY_MS,
        help="AI thinking delay in milliseconds"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print what the game logic is doing"
    )

    return parser.parse_args(argv)


def make_config(args) -> GameConfig:
    """Build the game config for one run (the class defaults stay untouched)."""
    config = GameConfig()
    if args.debug:
        config.DEBUG_MODE = True
    return config


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    config = make_config(args)

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(think_delay_ms=args.delay, seed=args.seed, config=config)
        ui.run()
        return

    # Console mode (--no-ui)
    game = ConsoleGame(think_delay_ms=args.delay, seed=args.seed, config=config)

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
