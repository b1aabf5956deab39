"""
TicTacToe UI
A graphical interface for playing TicTacToe against the AI using Tkinter.

Shows:
- The 3x3 board (click a cell, or focus it and press Enter/Space)
- Game status ("Your Turn", "AI's Turn", result)
- The winning line, highlighted
- A restart button
"""

import tkinter as tk
from tkinter import ttk
from PIL import Image, ImageDraw, ImageTk
import random
from typing import Dict, Optional

from logic.config import GameConfig
from logic.game_controller import GameController
from logic.game_state import GameStatus, Mark


class UIConfig:
    """
    Look and feel of the game window.
    """

    # ==================== WINDOW ====================
    TITLE = "TicTacToe"
    BG_COLOR = '#1a1a2e'

    # ==================== BOARD ====================
    CELL_SIZE = 120          # Pixels per cell
    CELL_BG = '#16213e'
    CELL_HOVER_BG = '#1f2b4d'
    WIN_BG = '#065f46'       # Highlight for the winning line

    # ==================== MARKS ====================
    PLAYER_COLOR = '#00d4ff'
    AGENT_COLOR = '#ffd700'
    MARK_PADDING = 0.22      # Fraction of the cell left empty around a mark
    MARK_WIDTH = 0.09        # Stroke width as a fraction of the cell
    SUPERSAMPLE = 4          # Draw bigger, then shrink, for smooth edges

    # ==================== STATUS MESSAGES ====================
    MESSAGES = {
        Mark.PLAYER: "Your Turn",
        Mark.AGENT: "AI's Turn",
        GameStatus.PLAYER_WON: "You Win 🎉",
        GameStatus.AGENT_WON: "You Lose 😞",
        GameStatus.DRAW: "It's a Draw 🤝",
    }
    STATUS_COLORS = {
        GameStatus.IN_PROGRESS: '#ffffff',
        GameStatus.PLAYER_WON: '#10b981',
        GameStatus.AGENT_WON: '#f87171',
        GameStatus.DRAW: '#fbbf24',
    }


def render_mark_image(mark: Mark, size: int = UIConfig.CELL_SIZE) -> Image.Image:
    """
    Draw a mark as a transparent RGBA image.

    X for the human, O for the AI, a blank tile for an empty cell.
    """
    scale = UIConfig.SUPERSAMPLE
    big = size * scale
    image = Image.new("RGBA", (big, big), (0, 0, 0, 0))

    if mark == Mark.EMPTY:
        return image.resize((size, size))

    draw = ImageDraw.Draw(image)
    pad = int(big * UIConfig.MARK_PADDING)
    width = max(1, int(big * UIConfig.MARK_WIDTH))

    if mark == Mark.PLAYER:
        draw.line((pad, pad, big - pad, big - pad), fill=UIConfig.PLAYER_COLOR, width=width)
        draw.line((pad, big - pad, big - pad, pad), fill=UIConfig.PLAYER_COLOR, width=width)
    else:
        draw.ellipse((pad, pad, big - pad, big - pad), outline=UIConfig.AGENT_COLOR, width=width)

    return image.resize((size, size), Image.Resampling.LANCZOS)


class TicTacToeUI:
    """
    Main UI class. Draws whatever the GameController reports and owns
    the AI's "thinking" delay.
    """

    def __init__(
        self,
        think_delay_ms: Optional[int] = None,
        seed: Optional[int] = None,
        config: Optional[GameConfig] = None
    ):
        """Initialize the UI."""
        self.config = config or GameConfig()
        self.think_delay_ms = (
            self.config.THINK_DELAY_MS if think_delay_ms is None else think_delay_ms
        )

        # Handle of the scheduled AI move (so reset can cancel it)
        self.pending_agent_move: Optional[str] = None

        self.controller = GameController(
            on_cell_marked=self._on_cell_marked,
            on_game_ended=self._on_game_ended,
            on_turn_changed=self._on_turn_changed,
            rng=random.Random(seed) if seed is not None else None,
            config=self.config,
        )

        # Create UI
        self._create_ui()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(UIConfig.TITLE)
        self.root.configure(bg=UIConfig.BG_COLOR)
        self.root.resizable(False, False)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=UIConfig.BG_COLOR)
        style.configure('Title.TLabel', background=UIConfig.BG_COLOR,
                        font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', background=UIConfig.BG_COLOR,
                        font=('Segoe UI', 14, 'bold'), foreground='white')

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=20, pady=20)

        ttk.Label(main_frame, text="TicTacToe", style='Title.TLabel').pack(pady=(0, 10))

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=(0, 10))

        # Mark images (Tk needs the PhotoImage objects kept alive)
        self.mark_images: Dict[Mark, ImageTk.PhotoImage] = {
            mark: ImageTk.PhotoImage(render_mark_image(mark))
            for mark in Mark
        }

        # Board
        board_frame = ttk.Frame(main_frame)
        board_frame.pack()

        self.cells = []
        for index in range(self.config.NUM_CELLS):
            cell = tk.Label(
                board_frame,
                image=self.mark_images[Mark.EMPTY],
                bg=UIConfig.CELL_BG,
                relief='ridge',
                borderwidth=2,
                takefocus=1,
                highlightthickness=2,
                highlightcolor='#00d4ff',
                highlightbackground=UIConfig.BG_COLOR,
            )
            row, col = divmod(index, self.config.BOARD_SIZE)
            cell.grid(row=row, column=col, padx=2, pady=2)

            cell.bind('<Button-1>', lambda e, i=index: self._on_cell_clicked(i))
            cell.bind('<Return>', lambda e, i=index: self._on_cell_clicked(i))
            cell.bind('<space>', lambda e, i=index: self._on_cell_clicked(i))
            cell.bind('<Enter>', lambda e, i=index: self._on_hover(i, True))
            cell.bind('<Leave>', lambda e, i=index: self._on_hover(i, False))
            self.cells.append(cell)

        # Legend
        legend_frame = ttk.Frame(main_frame)
        legend_frame.pack(pady=10)
        tk.Label(legend_frame, text=f"{self.config.PLAYER_SYMBOL} = You   ",
                 bg=UIConfig.BG_COLOR, fg=UIConfig.PLAYER_COLOR).pack(side=tk.LEFT)
        tk.Label(legend_frame, text=f"{self.config.AGENT_SYMBOL} = AI",
                 bg=UIConfig.BG_COLOR, fg=UIConfig.AGENT_COLOR).pack(side=tk.LEFT)

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="🔄 Restart",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="✕ Quit",
            font=('Segoe UI', 11),
            bg='#ef4444',
            fg='white',
            width=12,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

        self._set_status(UIConfig.MESSAGES[Mark.PLAYER], GameStatus.IN_PROGRESS)

    # ==================== INPUT ====================

    def _on_cell_clicked(self, index: int):
        """Forward a click to the controller (it ignores illegal ones)."""
        self.controller.apply_player_move(index)

    def _on_hover(self, index: int, entering: bool):
        """Light up empty cells the human can still play."""
        if self.controller.get_winning_line() and index in self.controller.get_winning_line():
            return
        playable = (
            entering
            and not self.controller.get_status().is_terminal
            and not self.controller.is_processing()
            and self.controller.get_board()[index] == Mark.EMPTY
        )
        self.cells[index].configure(bg=UIConfig.CELL_HOVER_BG if playable else UIConfig.CELL_BG)

    # ==================== CONTROLLER CALLBACKS ====================

    def _on_cell_marked(self, index: int, mark: Mark):
        self.cells[index].configure(image=self.mark_images[mark], bg=UIConfig.CELL_BG)

    def _on_turn_changed(self, mark: Mark):
        self._set_status(UIConfig.MESSAGES[mark], GameStatus.IN_PROGRESS)

        if mark == Mark.AGENT:
            self.pending_agent_move = self.root.after(self.think_delay_ms, self._agent_move)

    def _on_game_ended(self, status: GameStatus, winning_line):
        self._set_status(UIConfig.MESSAGES[status], status)

        # Highlight the winning trio
        for index in winning_line or ():
            self.cells[index].configure(bg=UIConfig.WIN_BG)

    def _agent_move(self):
        """Runs once the thinking delay is over."""
        self.pending_agent_move = None
        self.controller.run_agent_move()

    # ==================== HELPERS ====================

    def _set_status(self, text: str, status: GameStatus):
        self.status_label.configure(text=text, foreground=UIConfig.STATUS_COLORS[status])

    def _reset_game(self):
        """Reset the game."""
        # A pending AI move belongs to the old game
        if self.pending_agent_move is not None:
            self.root.after_cancel(self.pending_agent_move)
            self.pending_agent_move = None

        # Clear board display
        for cell in self.cells:
            cell.configure(image=self.mark_images[Mark.EMPTY], bg=UIConfig.CELL_BG)

        self.controller.reset_game()

    def _quit(self):
        """Quit the application."""
        if self.pending_agent_move is not None:
            self.root.after_cancel(self.pending_agent_move)
            self.pending_agent_move = None

        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
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

    args = parser.parse_args()

    ui = TicTacToeUI(think_delay_ms=args.delay, seed=args.seed)
    ui.run()


if __name__ == "__main__":
    main()
