"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw, and finds
cells that would complete a line.
"""

from typing import Optional, Sequence
from .game_state import GameState, GameStatus, Mark, Line


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)

    Lines are always scanned in the order of WINNING_LINES. Only one side
    can ever own a complete line, so the order only decides which line
    gets highlighted and which cell find_completing_cell reports first.
    """

    # All possible winning lines (as row-major cell indices)
    WINNING_LINES = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def check_outcome(self, board: Sequence[Mark]) -> GameStatus:
        """
        Classify a board.

        Args:
            board: The 9 cells.

        Returns:
            PLAYER_WON / AGENT_WON for the first complete line,
            DRAW if the board is full, IN_PROGRESS otherwise.
        """
        winner = self.check_winner(board)
        if winner is not None:
            return GameStatus.won_by(winner)

        if Mark.EMPTY not in board:
            return GameStatus.DRAW

        return GameStatus.IN_PROGRESS

    def check_winner(self, board: Sequence[Mark]) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            board: The 9 cells.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board[line[0]]

    def _check_line(self, board: Sequence[Mark], line: Line) -> Optional[Mark]:
        """
        Check if a single line has a winner.

        Returns:
            The mark if all 3 cells hold it, None otherwise.
        """
        a, b, c = line
        if board[a] != Mark.EMPTY and board[a] == board[b] == board[c]:
            return board[a]
        return None

    def check_draw(self, board: Sequence[Mark]) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND there is no winner.
        """
        return self.check_outcome(board) == GameStatus.DRAW

    def get_winning_line(self, board: Sequence[Mark]) -> Optional[Line]:
        """
        Get the winning line if there is one.

        Returns:
            The first complete line in WINNING_LINES order, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line) is not None:
                return line
        return None

    def find_completing_cell(self, board: Sequence[Mark], mark: Mark) -> Optional[int]:
        """
        Find the cell that would give `mark` three in a row.

        Used both to spot a winning move and, with the opponent's mark,
        the move that must be blocked.

        Args:
            board: The 9 cells.
            mark: PLAYER or AGENT.

        Returns:
            The empty cell of the first line holding exactly two `mark`
            and one empty cell, or None if there is no such line.
        """
        for line in self.WINNING_LINES:
            cells = [board[i] for i in line]
            if cells.count(mark) == 2 and cells.count(Mark.EMPTY) == 1:
                return line[cells.index(Mark.EMPTY)]
        return None

    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Update the game state with winner/draw information.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        game_state.status = self.check_outcome(game_state.board)
        game_state.winning_line = self.get_winning_line(game_state.board)

        if game_state.is_game_over:
            game_state.is_processing = False

        return game_state


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()
    X, O, _ = Mark.PLAYER, Mark.AGENT, Mark.EMPTY

    # Test 1: Horizontal win
    board1 = [X, X, X,
              _, O, _,
              O, _, _]
    print(f"Test 1 (horizontal): {checker.check_outcome(board1)}")
    assert checker.check_outcome(board1) == GameStatus.PLAYER_WON

    # Test 2: Diagonal win
    board2 = [O, X, _,
              X, O, _,
              X, _, O]
    print(f"Test 2 (diagonal): {checker.check_outcome(board2)}")
    assert checker.check_outcome(board2) == GameStatus.AGENT_WON

    # Test 3: Draw (full board, no winner)
    board3 = [X, O, X,
              X, O, O,
              O, X, X]
    print(f"Test 3 (draw): {checker.check_outcome(board3)}")
    assert checker.check_outcome(board3) == GameStatus.DRAW

    # Test 4: Completing cell
    board4 = [X, X, _,
              _, _, _,
              _, _, _]
    print(f"Test 4 (completing cell): {checker.find_completing_cell(board4, X)}")
    assert checker.find_completing_cell(board4, X) == 2

    print("\nWinChecker test done!")
