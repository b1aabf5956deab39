"""
Game state management for TicTacToe.
Tracks the board, whose turn it is, and the game status.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

from .config import GameConfig


class Mark(Enum):
    """What can occupy a cell."""
    EMPTY = "empty"
    PLAYER = "player"   # The human
    AGENT = "agent"     # The computer

    def opposite(self) -> "Mark":
        """Get the other side's mark (EMPTY stays EMPTY)."""
        if self == Mark.PLAYER:
            return Mark.AGENT
        if self == Mark.AGENT:
            return Mark.PLAYER
        return Mark.EMPTY

    @property
    def symbol(self) -> str:
        """Symbol shown on the board for this mark."""
        if self == Mark.PLAYER:
            return GameConfig.PLAYER_SYMBOL
        if self == Mark.AGENT:
            return GameConfig.AGENT_SYMBOL
        return GameConfig.EMPTY_SYMBOL


class GameStatus(Enum):
    """Where the game stands."""
    IN_PROGRESS = "in_progress"
    PLAYER_WON = "player_won"
    AGENT_WON = "agent_won"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        """True once no more moves are accepted."""
        return self != GameStatus.IN_PROGRESS

    @classmethod
    def won_by(cls, mark: Mark) -> "GameStatus":
        """Get the Won status for a mark."""
        if mark == Mark.PLAYER:
            return cls.PLAYER_WON
        if mark == Mark.AGENT:
            return cls.AGENT_WON
        raise ValueError("EMPTY cannot win")


Board = List[Mark]
Line = Tuple[int, int, int]


def empty_board() -> Board:
    """A fresh board with all 9 cells empty."""
    return [Mark.EMPTY for _ in range(GameConfig.NUM_CELLS)]


@dataclass
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - The 9-cell board (row-major, index 0-8)
    - Whose turn it is
    - Whether the agent is "thinking" (human input blocked)
    - Game status (ongoing, won, draw) and the winning line
    """

    # The board - Mark.EMPTY means nobody has played there
    board: Board = field(default_factory=empty_board)

    # Whose move is next (PLAYER or AGENT)
    current_turn: Mark = Mark.PLAYER

    # True between a human move and the agent's reply
    is_processing: bool = False

    # Game result (kept in sync by WinChecker.update_game_state)
    status: GameStatus = GameStatus.IN_PROGRESS
    winning_line: Optional[Line] = None

    @property
    def is_game_over(self) -> bool:
        """True if somebody won or the board is full."""
        return self.status.is_terminal

    def place_mark(self, index: int, mark: Mark) -> bool:
        """
        Put a mark on the board and pass the turn.

        This does no rule checking beyond "is the cell free" - use
        MoveValidator for that.

        Args:
            index: Cell index (0-8).
            mark: PLAYER or AGENT.

        Returns:
            True if the mark was placed, False otherwise.
        """
        if self.is_game_over:
            return False

        if self.board[index] != Mark.EMPTY:
            return False

        self.board[index] = mark
        self.current_turn = mark.opposite()
        return True

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            List of cell indices, in ascending order.
        """
        return [i for i, mark in enumerate(self.board) if mark == Mark.EMPTY]

    def print_board(self):
        """Print the board to console. Empty cells show their index."""
        print()
        print("┌───┬───┬───┐")

        for row in range(3):
            row_str = "│"
            for col in range(3):
                index = row * 3 + col
                mark = self.board[index]
                if mark == Mark.EMPTY:
                    row_str += f" {index} │"
                else:
                    row_str += f" {mark.symbol} │"
            print(row_str)

            if row < 2:
                print("├───┼───┼───┤")

        print("└───┴───┴───┘")

        # Print game info
        if self.status == GameStatus.PLAYER_WON:
            print("\n🏆 You win!")
        elif self.status == GameStatus.AGENT_WON:
            print("\n🤖 The computer wins!")
        elif self.status == GameStatus.DRAW:
            print("\n🤝 It's a DRAW!")
        else:
            who = "You" if self.current_turn == Mark.PLAYER else "Computer"
            print(f"\nCurrent turn: {who} ({self.current_turn.symbol})")


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    game = GameState()

    # Simulate a few moves
    moves = [
        (4, Mark.PLAYER),   # Human takes center
        (0, Mark.AGENT),    # Agent takes a corner
        (8, Mark.PLAYER),
        (8, Mark.AGENT),    # Occupied - should be refused
    ]

    for index, mark in moves:
        placed = game.place_mark(index, mark)
        print(f"\n{mark.value} -> cell {index}: placed={placed}")
        game.print_board()

    print(f"\nEmpty cells: {game.get_empty_cells()}")
    print("\nGame state test done!")
