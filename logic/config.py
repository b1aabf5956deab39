"""
Game configuration for TicTacToe.
All the settings for marks, agent behaviour, and pacing.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tweak how the agent plays!
    """

    # ==================== MARKS ====================
    # Symbols shown for each mark
    PLAYER_SYMBOL = "X"   # Human
    AGENT_SYMBOL = "O"    # Computer
    EMPTY_SYMBOL = ""

    # ==================== BOARD ====================
    BOARD_SIZE = 3
    NUM_CELLS = BOARD_SIZE * BOARD_SIZE  # 9

    # Cell indices are row-major:
    #   0 | 1 | 2
    #   3 | 4 | 5
    #   6 | 7 | 8
    CENTER_CELL = 4
    CORNER_CELLS = (0, 2, 6, 8)

    # ==================== AGENT SETTINGS ====================
    # Seed for the agent's corner/fallback picks (None = random every game)
    RANDOM_SEED = None

    # How long the presentation layer waits before asking the agent to move
    # The core never sleeps - this is only read by ui.py and main.py
    THINK_DELAY_MS = 500

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
