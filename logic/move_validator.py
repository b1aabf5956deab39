"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, List, Sequence
from dataclasses import dataclass

from .config import GameConfig
from .errors import InvalidIndexError
from .game_state import GameState, Mark


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Cell index must be 0-8 (anything else is a programming error)
    2. Game must not be over
    3. Human can't move while the agent is thinking
    4. It must be that side's turn
    5. Can only place on empty cells
    """

    @staticmethod
    def check_index(index: int) -> int:
        """
        Make sure a cell index is on the board.

        Raises:
            InvalidIndexError: If index is not an int in 0-8.
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidIndexError(index)
        if not 0 <= index < GameConfig.NUM_CELLS:
            raise InvalidIndexError(index)
        return index

    def is_cell_empty(self, board: Sequence[Mark], index: int) -> bool:
        """
        Check if a cell is free.

        Args:
            board: The 9 cells.
            index: Cell index (0-8).

        Returns:
            True if nobody has played there.

        Raises:
            InvalidIndexError: If index is outside 0-8.
        """
        self.check_index(index)
        return board[index] == Mark.EMPTY

    def validate_move(
        self,
        game_state: GameState,
        index: int,
        mark: Mark = Mark.PLAYER
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to play (0-8).
            mark: Who is moving (default: the human).

        Returns:
            ValidationResult with is_valid and error_message.

        Raises:
            InvalidIndexError: If index is outside 0-8.
        """
        self.check_index(index)

        # Check if game is over
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Human input is locked while the agent is thinking
        if mark == Mark.PLAYER and game_state.is_processing:
            return ValidationResult(
                is_valid=False,
                error_message="Wait for the computer to finish its move!"
            )

        # Check it's this side's turn
        if game_state.current_turn != mark:
            return ValidationResult(
                is_valid=False,
                error_message=f"It's not {mark.value}'s turn!"
            )

        # Check if cell is empty
        if not self.is_cell_empty(game_state.board, index):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {game_state.board[index].symbol}"
            )

        # All checks passed!
        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the side to move.

        Args:
            game_state: Current game state.

        Returns:
            List of playable cell indices.
        """
        if game_state.is_game_over:
            return []

        return game_state.get_empty_cells()


# Quick test
if __name__ == "__main__":
    print("Testing MoveValidator...")

    game = GameState()
    validator = MoveValidator()

    # Test valid move
    result = validator.validate_move(game, 4)
    print(f"Move 4: valid={result.is_valid}, error={result.error_message}")

    # Make the move and hand the turn back to the human
    game.place_mark(4, Mark.PLAYER)
    game.current_turn = Mark.PLAYER

    # Test invalid move (same cell)
    result = validator.validate_move(game, 4)
    print(f"Move 4 again: valid={result.is_valid}, error={result.error_message}")

    # Test out of range
    try:
        validator.validate_move(game, 9)
    except InvalidIndexError as e:
        print(f"Move 9: {e}")

    # Get valid moves
    print(f"Valid moves: {validator.get_valid_moves(game)}")

    print("\nMoveValidator test done!")
