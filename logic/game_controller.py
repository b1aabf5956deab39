"""
Turn controller for TicTacToe.
Owns the game state and runs the human -> agent turn cycle.
"""

import random
from typing import Callable, Optional, Tuple

from .ai_player import AIPlayer
from .config import GameConfig
from .errors import InvariantViolation
from .game_state import GameState, GameStatus, Mark, Line
from .move_validator import MoveValidator
from .win_checker import WinChecker


CellMarkedCallback = Callable[[int, Mark], None]
GameEndedCallback = Callable[[GameStatus, Optional[Line]], None]
TurnChangedCallback = Callable[[Mark], None]


class GameController:
    """
    Main controller for a game of TicTacToe against the AI.

    Game flow:
    1. Human plays a cell -> apply_player_move()
    2. Controller enters "processing" and hands the turn to the AI
    3. After its own delay, the UI calls run_agent_move()
    4. AI picks a cell, controller hands the turn back
    5. Repeat until someone wins or it's a draw, then reset_game()

    The controller never waits or sleeps. Whoever drives it (ui.py,
    main.py) owns the "thinking" delay.
    """

    def __init__(
        self,
        on_cell_marked: Optional[CellMarkedCallback] = None,
        on_game_ended: Optional[GameEndedCallback] = None,
        on_turn_changed: Optional[TurnChangedCallback] = None,
        rng: Optional[random.Random] = None,
        config: Optional[GameConfig] = None
    ):
        """
        Initialize the controller.

        Args:
            on_cell_marked: Called with (index, mark) after every placement.
            on_game_ended: Called with (status, winning_line) once the game ends.
            on_turn_changed: Called with the mark whose turn it now is.
            rng: Random source for the AI (seed it for repeatable games).
            config: Game configuration.
        """
        self.config = config or GameConfig()

        self.on_cell_marked = on_cell_marked
        self.on_game_ended = on_game_ended
        self.on_turn_changed = on_turn_changed

        # Game logic
        self.game_state = GameState()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = AIPlayer(Mark.AGENT, rng=rng, config=self.config)

    # ==================== QUERIES ====================

    def get_board(self) -> Tuple[Mark, ...]:
        """Snapshot of the 9 cells."""
        return tuple(self.game_state.board)

    def get_status(self) -> GameStatus:
        return self.game_state.status

    def is_processing(self) -> bool:
        """True while the AI's reply is pending."""
        return self.game_state.is_processing

    def get_current_turn(self) -> Mark:
        return self.game_state.current_turn

    def get_winning_line(self) -> Optional[Line]:
        return self.game_state.winning_line

    # ==================== MOVES ====================

    def apply_player_move(self, index: int) -> bool:
        """
        Play a cell for the human.

        Illegal moves (occupied cell, game over, AI still thinking) are
        ignored: nothing changes and no callback fires.

        Args:
            index: Cell index (0-8).

        Returns:
            True if the move was played.

        Raises:
            InvalidIndexError: If index is outside 0-8.
        """
        result = self.validator.validate_move(self.game_state, index, Mark.PLAYER)
        if not result.is_valid:
            self._debug(f"Ignoring move {index}: {result.error_message}")
            return False

        self._place(index, Mark.PLAYER)

        if self._check_game_over():
            return True

        # AI's turn - lock out the human until it replies
        self.game_state.is_processing = True
        self._turn_changed(Mark.AGENT)
        return True

    def run_agent_move(self) -> Optional[int]:
        """
        Let the AI play its reply.

        Meant to be called once the UI's thinking delay has passed. A call
        that arrives after a reset (or after the game ended) is stale and
        ignored.

        Returns:
            The cell the AI played, or None if the call was stale.

        Raises:
            InvariantViolation: If the AI is asked to move on a full board.
        """
        state = self.game_state

        if state.is_game_over or not state.is_processing:
            self._debug("Ignoring stale AI move")
            return None

        index = self.ai.choose_move(state.board)

        result = self.validator.validate_move(state, index, Mark.AGENT)
        if not result.is_valid:
            raise InvariantViolation(f"AI chose an illegal move {index}: {result.error_message}")

        self._place(index, Mark.AGENT)

        if self._check_game_over():
            return index

        state.is_processing = False
        self._turn_changed(Mark.PLAYER)
        return index

    def reset_game(self):
        """Start a new game. Any pending AI move becomes stale."""
        self._debug("Resetting game...")
        self.game_state = GameState()
        self._turn_changed(Mark.PLAYER)

    # ==================== INTERNALS ====================

    def _place(self, index: int, mark: Mark):
        """Put a mark down and tell the listener."""
        if not self.game_state.place_mark(index, mark):
            raise InvariantViolation(f"Could not place {mark.value} at {index}")

        self._debug(f"{mark.value} played cell {index}")

        if self.on_cell_marked is not None:
            self.on_cell_marked(index, mark)

    def _check_game_over(self) -> bool:
        """Classify the board; report the result if the game just ended."""
        self.win_checker.update_game_state(self.game_state)

        if not self.game_state.is_game_over:
            return False

        self._debug(f"Game over: {self.game_state.status.value}")

        if self.on_game_ended is not None:
            self.on_game_ended(self.game_state.status, self.game_state.winning_line)
        return True

    def _turn_changed(self, mark: Mark):
        if self.on_turn_changed is not None:
            self.on_turn_changed(mark)

    def _debug(self, message: str):
        if self.config.DEBUG_MODE:
            print(message)


# Quick test
if __name__ == "__main__":
    print("Testing GameController...")

    controller = GameController(
        on_cell_marked=lambda i, m: print(f"  marked {i} with {m.symbol}"),
        on_game_ended=lambda s, line: print(f"  game ended: {s.value} {line or ''}"),
        on_turn_changed=lambda m: print(f"  turn: {m.value}"),
        rng=random.Random(42),
    )

    for cell in (4, 0, 8, 2, 6, 1, 3, 5, 7):
        if controller.get_status().is_terminal:
            break
        if controller.apply_player_move(cell):
            controller.run_agent_move()

    controller.game_state.print_board()
    print("\nGameController test done!")
