"""
Test script for the TicTacToe logic modules.
Run this to verify the rules and the AI before playing.
"""

import contextlib
import io
import random
import sys

import pytest

from logic.ai_player import AIPlayer
from logic.errors import InvalidIndexError, InvariantViolation
from logic.game_state import GameState, GameStatus, Mark
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker


X, O, _ = Mark.PLAYER, Mark.AGENT, Mark.EMPTY


def reachable_boards():
    """Every board reachable by alternating moves (human first)."""
    checker = WinChecker()
    seen = set()
    stack = [(tuple([_] * 9), X)]

    while stack:
        board, mark = stack.pop()
        if board in seen:
            continue
        seen.add(board)

        if checker.check_outcome(board).is_terminal:
            continue

        for i, cell in enumerate(board):
            if cell == _:
                nxt = list(board)
                nxt[i] = mark
                stack.append((tuple(nxt), mark.opposite()))

    return seen


def test_game_state():
    """Test the game state container."""
    print("\n=== Testing GameState ===")
    game = GameState()

    assert game.board == [_] * 9
    assert game.current_turn == X
    assert game.status == GameStatus.IN_PROGRESS
    assert not game.is_processing
    assert not game.is_game_over

    assert game.place_mark(4, X)
    print(f"  Placed X at 4, turn is now {game.current_turn.value}")
    assert game.current_turn == O

    # Occupied cell is refused
    assert not game.place_mark(4, O)
    assert game.board[4] == X

    assert game.get_empty_cells() == [0, 1, 2, 3, 5, 6, 7, 8]
    print("  ✓ GameState OK")


def test_mark_and_status():
    """Test Mark / GameStatus helpers."""
    print("\n=== Testing Mark / GameStatus ===")
    assert X.opposite() == O
    assert O.opposite() == X
    assert _.opposite() == _
    assert X.symbol == "X" and O.symbol == "O" and _.symbol == ""

    assert GameStatus.won_by(X) == GameStatus.PLAYER_WON
    assert GameStatus.won_by(O) == GameStatus.AGENT_WON
    with pytest.raises(ValueError):
        GameStatus.won_by(_)

    assert not GameStatus.IN_PROGRESS.is_terminal
    assert all(s.is_terminal for s in (GameStatus.PLAYER_WON, GameStatus.AGENT_WON, GameStatus.DRAW))
    print("  ✓ Mark / GameStatus OK")


def test_win_checker_outcomes():
    """Test win / draw / in-progress classification."""
    print("\n=== Testing WinChecker outcomes ===")
    checker = WinChecker()

    # Every line wins for both sides
    for line in WinChecker.WINNING_LINES:
        for mark, status in ((X, GameStatus.PLAYER_WON), (O, GameStatus.AGENT_WON)):
            board = [_] * 9
            for i in line:
                board[i] = mark
            assert checker.check_outcome(board) == status
            assert checker.get_winning_line(board) == line
            assert checker.check_winner(board) == mark

    # Full board, no line
    draw = [X, O, X,
            X, O, O,
            O, X, X]
    print(f"  Full board without a line: {checker.check_outcome(draw).value}")
    assert checker.check_outcome(draw) == GameStatus.DRAW
    assert checker.check_draw(draw)
    assert checker.get_winning_line(draw) is None

    # Won on the last cell is a win, not a draw
    full_win = [X, O, X,
                O, X, O,
                O, X, X]
    assert checker.check_outcome(full_win) == GameStatus.PLAYER_WON
    assert not checker.check_draw(full_win)

    assert checker.check_outcome([_] * 9) == GameStatus.IN_PROGRESS
    print("  ✓ WinChecker outcomes OK")


def test_winning_line_fixed_order():
    """The first complete line in WINNING_LINES order is reported."""
    print("\n=== Testing winning line order ===")
    checker = WinChecker()

    # Row 0 and column 0 both complete
    board = [X, X, X,
             X, O, O,
             X, O, O]
    assert checker.get_winning_line(board) == (0, 1, 2)
    print("  ✓ Winning line order OK")


def test_never_two_winners():
    """No reachable board has both sides with three in a row."""
    print("\n=== Testing single winner on reachable boards ===")
    boards = reachable_boards()
    print(f"  Reachable boards: {len(boards)}")
    assert len(boards) == 5478

    for board in boards:
        winners = {
            board[a] for a, b, c in WinChecker.WINNING_LINES
            if board[a] != _ and board[a] == board[b] == board[c]
        }
        assert len(winners) <= 1
    print("  ✓ Single winner OK")


def test_find_completing_cell():
    """Test the line-completion helper."""
    print("\n=== Testing find_completing_cell ===")
    checker = WinChecker()

    # Two X on the top row
    board = [X, X, _,
             _, _, _,
             _, _, _]
    assert checker.find_completing_cell(board, X) == 2
    assert checker.find_completing_cell(board, O) is None

    # Blocked line doesn't count
    board = [X, X, O,
             _, _, _,
             _, _, _]
    assert checker.find_completing_cell(board, X) is None

    # First line in the fixed order wins: row 1 before column 2 and the diagonal
    board = [_, _, _,
             _, X, X,
             _, _, X]
    assert checker.find_completing_cell(board, X) == 3

    board = [O, _, _,
             _, _, _,
             O, _, _]
    assert checker.find_completing_cell(board, O) == 3
    print("  ✓ find_completing_cell OK")


def test_find_completing_cell_matches_brute_force():
    """None iff no line has exactly two `mark` and one empty cell."""
    print("\n=== Testing find_completing_cell on reachable boards ===")
    checker = WinChecker()

    for board in reachable_boards():
        for mark in (X, O):
            candidates = [
                line for line in WinChecker.WINNING_LINES
                if [board[i] for i in line].count(mark) == 2
                and [board[i] for i in line].count(_) == 1
            ]
            cell = checker.find_completing_cell(board, mark)
            if not candidates:
                assert cell is None
            else:
                assert cell in candidates[0]
                assert board[cell] == _
    print("  ✓ find_completing_cell brute force OK")


def test_move_validator():
    """Test move validation."""
    print("\n=== Testing MoveValidator ===")
    validator = MoveValidator()
    game = GameState()

    result = validator.validate_move(game, 4)
    print(f"  Validate 4: valid={result.is_valid}")
    assert result.is_valid
    assert validator.is_cell_empty(game.board, 4)

    game.place_mark(4, X)
    assert not validator.is_cell_empty(game.board, 4)

    # Not the human's turn any more
    result = validator.validate_move(game, 0)
    assert not result.is_valid
    assert "turn" in result.error_message

    # The agent can play, but not on the occupied cell
    assert validator.validate_move(game, 0, O).is_valid
    result = validator.validate_move(game, 4, O)
    assert not result.is_valid
    assert "occupied" in result.error_message

    # Processing blocks the human only
    game.current_turn = X
    game.is_processing = True
    result = validator.validate_move(game, 0)
    assert not result.is_valid

    game.status = GameStatus.DRAW
    assert not validator.validate_move(game, 0, O).is_valid
    assert validator.get_valid_moves(game) == []
    print("  ✓ MoveValidator OK")


def test_invalid_index():
    """Indices outside 0-8 are programming errors."""
    print("\n=== Testing invalid indices ===")
    validator = MoveValidator()
    board = [_] * 9

    for bad in (-1, 9, 100, "4", 4.0, None, True):
        with pytest.raises(InvalidIndexError):
            validator.is_cell_empty(board, bad)

    # Also an IndexError, for callers that catch that
    with pytest.raises(IndexError):
        validator.validate_move(GameState(), 9)
    print("  ✓ Invalid indices OK")


def test_ai_rules_in_order():
    """Each rule of the cascade fires on a board built for it."""
    print("\n=== Testing AI rule cascade ===")
    ai = AIPlayer(rng=random.Random(1))
    assert tuple(name for name, rule in ai.rules) == AIPlayer.RULE_NAMES

    cases = [
        # Win beats block
        ("win", [O, O, _,
                 X, X, _,
                 X, _, _], 2),
        ("block", [X, X, _,
                   _, O, _,
                   _, _, _], 2),
        ("center", [X, _, _,
                    _, _, _,
                    _, _, _], 4),
    ]
    for rule, board, expected in cases:
        move = ai.choose_move(board)
        print(f"  {rule}: cell {move}")
        assert move == expected
        assert ai.last_rule == rule

    # Corners all taken, center taken, nothing to win or block
    board = [O, _, X,
             X, X, O,
             O, _, X]
    move = ai.choose_move(board)
    assert ai.last_rule == "any"
    assert move in (1, 7)
    print("  ✓ AI rule cascade OK")


def test_ai_prefers_corner_over_edge():
    """With the center gone, the AI never takes an edge while a corner is free."""
    print("\n=== Testing AI corner preference ===")
    board = [_, _, _,
             _, X, _,
             _, _, _]

    for seed in range(20):
        ai = AIPlayer(rng=random.Random(seed))
        move = ai.choose_move(board)
        assert move in (0, 2, 6, 8)
        assert ai.last_rule == "corner"

    # Only one corner left
    board = [O, _, X,
             _, X, _,
             O, X, _]
    ai = AIPlayer(rng=random.Random(0))
    assert ai.take_corner(board) == 8
    print("  ✓ AI corner preference OK")


def test_ai_seeded_randomness():
    """Same seed, same choices."""
    print("\n=== Testing AI seeding ===")
    board = [_, _, _,
             _, X, _,
             _, _, _]
    first = [AIPlayer(rng=random.Random(7)).choose_move(board) for attempt in range(3)]
    assert len(set(first)) == 1

    ai_a = AIPlayer(rng=random.Random(123))
    ai_b = AIPlayer(rng=random.Random(123))
    moves_a = [ai_a.choose_move(board) for attempt in range(10)]
    moves_b = [ai_b.choose_move(board) for attempt in range(10)]
    assert moves_a == moves_b
    print("  ✓ AI seeding OK")


def test_ai_full_board():
    """Asking the AI to move on a full board is a bug, not a draw."""
    print("\n=== Testing AI on a full board ===")
    ai = AIPlayer()
    full = [X, O, X,
            X, O, O,
            O, X, X]
    with pytest.raises(InvariantViolation):
        ai.choose_move(full)
    print("  ✓ AI full board OK")


def test_logic_is_quiet():
    """Without debug mode, state, rules and AI print nothing."""
    print("\n=== Testing quiet logic ===")
    out = io.StringIO()
    with contextlib.redirect_stdout(out):
        game = GameState()
        game.place_mark(4, X)
        game.place_mark(4, O)       # occupied
        game.status = GameStatus.DRAW
        game.place_mark(0, O)       # game over

        validator = MoveValidator()
        validator.validate_move(GameState(), 4, O)
        WinChecker().check_outcome([_] * 9)

        ai = AIPlayer(rng=random.Random(0))
        ai.choose_move([X, _, _,
                        _, _, _,
                        _, _, _])
    assert out.getvalue() == ""
    print("  ✓ Quiet logic OK")


def run_all_tests():
    """Run all tests."""
    print("="*60)
    print("   TicTacToe - Logic Module Tests")
    print("="*60)

    tests = {
        "GameState": test_game_state,
        "Mark / GameStatus": test_mark_and_status,
        "WinChecker outcomes": test_win_checker_outcomes,
        "Winning line order": test_winning_line_fixed_order,
        "Single winner": test_never_two_winners,
        "find_completing_cell": test_find_completing_cell,
        "find_completing_cell (brute force)": test_find_completing_cell_matches_brute_force,
        "MoveValidator": test_move_validator,
        "Invalid indices": test_invalid_index,
        "AI cascade": test_ai_rules_in_order,
        "AI corner preference": test_ai_prefers_corner_over_edge,
        "AI seeding": test_ai_seeded_randomness,
        "AI full board": test_ai_full_board,
        "Quiet logic": test_logic_is_quiet,
    }

    results = {}
    for name, test in tests.items():
        try:
            test()
            results[name] = True
        except Exception as e:
            print(f"  ✗ {name} FAILED: {e!r}")
            results[name] = False

    print("\n" + "="*60)
    print("   Test Results")
    print("="*60)

    for name, passed in results.items():
        status = "✓ PASS" if passed else "✗ FAIL"
        print(f"  {name}: {status}")

    print("="*60)

    if all(results.values()):
        print("\n🎉 All tests passed!\n")
        return 0
    else:
        print("\n⚠ Some tests failed. Check the errors above.\n")
        return 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
