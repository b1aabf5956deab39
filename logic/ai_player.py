"""
AI player for TicTacToe.
Uses a fixed-priority list of simple rules to choose a move.
"""

import random
from typing import Callable, List, Optional, Sequence, Tuple

from .config import GameConfig
from .errors import InvariantViolation
from .game_state import Mark
from .win_checker import WinChecker


Rule = Callable[[Sequence[Mark]], Optional[int]]


class AIPlayer:
    """
    An AI that plays TicTacToe with a rule cascade.

    Rules are tried in order and the first one that finds a cell wins:
    1. Win: complete our own line
    2. Block: complete the opponent's line before they do
    3. Center: take cell 4
    4. Corner: random free corner
    5. Any: random free cell

    It is NOT a perfect player - a fork will beat it.
    """

    RULE_NAMES = ("win", "block", "center", "corner", "any")

    def __init__(
        self,
        mark: Mark = Mark.AGENT,
        rng: Optional[random.Random] = None,
        config: Optional[GameConfig] = None
    ):
        """
        Initialize the AI player.

        Args:
            mark: Which mark the AI plays (default: AGENT)
            rng: Random source for corner/any picks. Pass a seeded
                 random.Random for repeatable games.
            config: Game configuration.
        """
        self.mark = mark
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else random.Random(self.config.RANDOM_SEED)
        self.win_checker = WinChecker()

        # Which rule picked the last move (for debugging and tests)
        self.last_rule: Optional[str] = None

    @property
    def rules(self) -> List[Tuple[str, Rule]]:
        """The cascade, highest priority first."""
        return [
            ("win", self.find_win),
            ("block", self.find_block),
            ("center", self.take_center),
            ("corner", self.take_corner),
            ("any", self.take_any),
        ]

    def choose_move(self, board: Sequence[Mark]) -> int:
        """
        Pick a cell for the AI.

        Args:
            board: The 9 cells.

        Returns:
            Index of the chosen (empty) cell.

        Raises:
            InvariantViolation: If the board has no empty cell. The
                controller must classify a full board as a draw before
                ever asking the AI to move.
        """
        if Mark.EMPTY not in board:
            raise InvariantViolation("AI asked to move on a full board")

        for name, rule in self.rules:
            move = rule(board)
            if move is not None:
                self.last_rule = name
                if self.config.DEBUG_MODE:
                    print(f"AI rule '{name}' picked cell {move}")
                return move

        # take_any always finds a cell on a non-full board
        raise InvariantViolation("No rule produced a move")

    # ==================== RULES ====================

    def find_win(self, board: Sequence[Mark]) -> Optional[int]:
        """Cell that completes one of our lines."""
        return self.win_checker.find_completing_cell(board, self.mark)

    def find_block(self, board: Sequence[Mark]) -> Optional[int]:
        """Cell the opponent needs to complete a line."""
        return self.win_checker.find_completing_cell(board, self.mark.opposite())

    def take_center(self, board: Sequence[Mark]) -> Optional[int]:
        """The center, if it's free."""
        center = self.config.CENTER_CELL
        if board[center] == Mark.EMPTY:
            return center
        return None

    def take_corner(self, board: Sequence[Mark]) -> Optional[int]:
        """A random free corner."""
        corners = [i for i in self.config.CORNER_CELLS if board[i] == Mark.EMPTY]
        if not corners:
            return None
        return self.rng.choice(corners)

    def take_any(self, board: Sequence[Mark]) -> Optional[int]:
        """A random free cell."""
        empty = [i for i, mark in enumerate(board) if mark == Mark.EMPTY]
        if not empty:
            return None
        return self.rng.choice(empty)


# Quick test
if __name__ == "__main__":
    print("Testing AIPlayer...")

    X, O, _ = Mark.PLAYER, Mark.AGENT, Mark.EMPTY
    ai = AIPlayer(rng=random.Random(0))

    boards = {
        "win": [O, O, _,
                X, X, _,
                X, _, _],
        "block": [X, X, _,
                  _, O, _,
                  _, _, _],
        "center": [X, _, _,
                   _, _, _,
                   _, _, _],
        "corner": [_, _, _,
                   _, X, _,
                   _, _, _],
    }

    for expected, board in boards.items():
        move = ai.choose_move(board)
        print(f"{expected:>6}: cell {move} (rule: {ai.last_rule})")
        assert ai.last_rule == expected

    print("\nAIPlayer test done!")
