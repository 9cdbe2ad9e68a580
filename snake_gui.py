# Tkinter presentation layer: frame pump, raw key events and cell drawing.
from __future__ import annotations

import argparse
import tkinter as tk
from tkinter import messagebox

import numpy as np

# Support both package imports and running this file directly.
try:
    from .game_logic import (
        MAX_BOARD_HEIGHT,
        MAX_BOARD_WIDTH,
        MAX_CELL_SIZE,
        MAX_FPS,
        MIN_BOARD_HEIGHT,
        MIN_BOARD_WIDTH,
        MIN_CELL_SIZE,
        MIN_FPS,
        Difficulty,
        GameConfig,
        MenuItem,
        Phase,
        SnakeController,
    )
    from .graphics import board_middle, rasterize, segment_runs
    from .keyboard_input import InputTracker, KeySamplingError
    from .platform_input import TkKeySource
    from .rectilinear import BodyPath
    from .timing import FrameTimer
except ImportError:
    from game_logic import (
        MAX_BOARD_HEIGHT,
        MAX_BOARD_WIDTH,
        MAX_CELL_SIZE,
        MAX_FPS,
        MIN_BOARD_HEIGHT,
        MIN_BOARD_WIDTH,
        MIN_CELL_SIZE,
        MIN_FPS,
        Difficulty,
        GameConfig,
        MenuItem,
        Phase,
        SnakeController,
    )
    from graphics import board_middle, rasterize, segment_runs
    from keyboard_input import InputTracker, KeySamplingError
    from platform_input import TkKeySource
    from rectilinear import BodyPath
    from timing import FrameTimer


class SnakeApp:
    """Tkinter window driving SnakeController once per frame."""
    BG = "#101418"
    BOARD_BG = "#1c2229"
    SIDEBAR_BG = "#0f1720"
    SNAKE_COLOR = "#1fb86b"
    WALL_COLOR = "#7f8b99"
    TEXT_PRIMARY = "#e6eef7"
    TEXT_MUTED = "#95a4b8"
    ACCENT = "#42c4ff"

    def __init__(self, root: tk.Tk, config: GameConfig) -> None:
        self.root = root
        self.root.title("Rectilinear Snake")
        self.root.configure(bg=self.BG)

        self.config = config
        self.keys = TkKeySource()
        self.controller = SnakeController(config, InputTracker(self.keys))
        self.timer = FrameTimer(config.fps)
        self.after_id: str | None = None  # Tkinter timer id for the frame pump

        self._build_layout()
        self.keys.bind(self.root)
        self.root.protocol("WM_DELETE_WINDOW", self.close)
        self.draw()

    def _build_layout(self) -> None:
        """Board canvas (with one border cell on every side) + status sidebar."""
        cell = self.config.cell_size
        container = tk.Frame(self.root, bg=self.BG)
        container.pack(fill="both", expand=True, padx=16, pady=16)

        self.canvas = tk.Canvas(
            container,
            width=(self.config.board_width + 2) * cell,
            height=(self.config.board_height + 2) * cell,
            bg=self.BOARD_BG,
            highlightthickness=0,
            bd=0,
        )
        self.canvas.pack(side="left")

        sidebar = tk.Frame(container, bg=self.SIDEBAR_BG, width=220)
        sidebar.pack(side="left", fill="y", padx=(16, 0))

        self.phase_var = tk.StringVar()
        self.difficulty_var = tk.StringVar()
        self.length_var = tk.StringVar()
        self.head_var = tk.StringVar()
        self.frames_var = tk.StringVar()
        for var in (self.phase_var, self.difficulty_var, self.length_var, self.head_var, self.frames_var):
            tk.Label(
                sidebar,
                textvariable=var,
                fg=self.TEXT_PRIMARY,
                bg=self.SIDEBAR_BG,
                font=("Helvetica", 11),
                anchor="w",
            ).pack(fill="x", padx=10, pady=4)

        tk.Label(
            sidebar,
            text="Move: Arrow keys\nMenu: Up/Down/Enter\nQuit: Esc",
            fg=self.TEXT_MUTED,
            bg=self.SIDEBAR_BG,
            justify="left",
            font=("Helvetica", 10),
        ).pack(anchor="w", padx=10, pady=(12, 10))

    def start(self) -> None:
        self.tick()

    def close(self) -> None:
        if self.after_id is not None:
            self.root.after_cancel(self.after_id)
            self.after_id = None
        self.keys.close()
        self.root.destroy()

    def tick(self) -> None:
        """Poll the frame timer; run one controller update per elapsed frame period."""
        self.after_id = None
        if self.timer.frame_due():
            try:
                self.controller.update()
            except KeySamplingError as exc:
                messagebox.showerror("Input Error", str(exc))
                self.close()
                return
            if self.controller.quit_requested:
                self.close()
                return
            self.draw()
        self.after_id = self.root.after(self.timer.ms_until_next_frame(), self.tick)

    def _fill_cells(self, path: BodyPath, color: str) -> None:
        cell = self.config.cell_size
        for run in segment_runs(path):
            for point in run.cells():
                # Board coordinates start one cell in, past the wall.
                x1, y1 = (point.x + 1) * cell, (point.y + 1) * cell
                self.canvas.create_rectangle(x1, y1, x1 + cell, y1 + cell, fill=color, outline="")

    def _fill_board(self, path: BodyPath, color: str) -> None:
        cell = self.config.cell_size
        grid = rasterize(path, self.config.board_width, self.config.board_height)
        for y, x in np.argwhere(grid):
            x1, y1 = (int(x) + 1) * cell, (int(y) + 1) * cell
            self.canvas.create_rectangle(x1, y1, x1 + cell, y1 + cell, fill=color, outline="")

    def _text(self, x: int, y: int, text: str, highlight: bool = False, size: int = 14) -> None:
        cell = self.config.cell_size
        self.canvas.create_text(
            (x + 1) * cell,
            (y + 1) * cell,
            text=text,
            fill=self.ACCENT if highlight else self.TEXT_PRIMARY,
            font=("Helvetica", size, "bold" if highlight else "normal"),
        )

    def draw(self) -> None:
        """Render the current phase and refresh status labels."""
        controller = self.controller
        self.canvas.delete("all")
        self._fill_cells(controller.wall, self.WALL_COLOR)
        middle = board_middle(self.config.board_width, self.config.board_height)

        if controller.phase is Phase.MENU:
            self._text(middle.x, middle.y - 3, "SNAKE", size=28)
            for row, item in enumerate(MenuItem):
                label = item.value
                if item is MenuItem.DIFFICULTY:
                    label = f"{label}: {controller.difficulty.name.title()}"
                highlight = not controller.difficulty_focused and item is controller.menu_items.current_item()
                if item is MenuItem.DIFFICULTY and controller.difficulty_focused:
                    label = f"< {label} >"
                    highlight = True
                self._text(middle.x, middle.y + row, label, highlight=highlight)
        elif controller.phase is Phase.ROUND_START:
            self._text(middle.x, middle.y, "Get Ready!")
        elif controller.phase is Phase.PLAYING:
            self._fill_board(controller.body, self.SNAKE_COLOR)
        else:
            self._text(middle.x, middle.y, "Good Bye!")

        self.phase_var.set(f"State: {controller.phase.value.replace('_', ' ').title()}")
        self.difficulty_var.set(f"Difficulty: {controller.difficulty.name.title()}")
        self.length_var.set(f"Length: {controller.body.cell_count}")
        head = controller.body.head
        self.head_var.set(f"Head: ({head.x}, {head.y}) {controller.body.direction.name.title()}")
        self.frames_var.set(f"Frames: {controller.elapsed_frames}")


def run_snake_gui(config: GameConfig | None = None) -> SnakeController:
    """Open the game window and block until it closes; returns the finished controller."""
    config = config or GameConfig()
    root = tk.Tk()
    app = SnakeApp(root, config)
    app.start()
    root.mainloop()
    return app.controller


def parse_args(argv: list[str] | None = None) -> tuple[GameConfig, bool]:
    defaults = GameConfig()
    parser = argparse.ArgumentParser(description="Rectilinear snake in a Tk window")
    parser.add_argument("--board-width", type=int, default=defaults.board_width)
    parser.add_argument("--board-height", type=int, default=defaults.board_height)
    parser.add_argument("--cell-size", type=int, default=defaults.cell_size)
    parser.add_argument("--fps", type=int, default=defaults.fps)
    parser.add_argument("--initial-length", type=int, default=defaults.initial_length)
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=defaults.difficulty.value,
        help="Starting difficulty; can still be changed from the menu",
    )
    parser.add_argument("--text", action="store_true", help="Print the final board as text on exit")
    args = parser.parse_args(argv)

    config = GameConfig(
        board_width=args.board_width,
        board_height=args.board_height,
        cell_size=args.cell_size,
        fps=args.fps,
        initial_length=args.initial_length,
        difficulty=Difficulty(args.difficulty),
    )
    try:
        config.validate()
    except ValueError as exc:
        parser.error(
            f"{exc} (board {MIN_BOARD_WIDTH}-{MAX_BOARD_WIDTH} x {MIN_BOARD_HEIGHT}-{MAX_BOARD_HEIGHT}, "
            f"cell {MIN_CELL_SIZE}-{MAX_CELL_SIZE}px, fps {MIN_FPS}-{MAX_FPS})"
        )
    return config, args.text


def main(argv: list[str] | None = None) -> None:
    config, dump_text = parse_args(argv)
    print(
        f"Board {config.board_width}x{config.board_height}, {config.fps} fps, "
        f"difficulty {config.difficulty.value}"
    )
    controller = run_snake_gui(config)
    print(f"Exited after {controller.elapsed_frames} frames")
    if dump_text:
        print(controller.board_text())


if __name__ == "__main__":
    main()
