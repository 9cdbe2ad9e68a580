# Per-tick controller: feeds InputTracker decisions into the snake BodyPath.
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

try:
    from .keyboard_input import InputTracker, any_key_pressed
    from .graphics import rasterize, render_text
    from .menu import ItemList
    from .rectilinear import BodyPath, Direction, Point
    from .virtual_keycodes import VK_DOWN, VK_ESCAPE, VK_LEFT, VK_RETURN, VK_RIGHT, VK_UP
except ImportError:
    from keyboard_input import InputTracker, any_key_pressed
    from graphics import rasterize, render_text
    from menu import ItemList
    from rectilinear import BodyPath, Direction, Point
    from virtual_keycodes import VK_DOWN, VK_ESCAPE, VK_LEFT, VK_RETURN, VK_RIGHT, VK_UP


# Bounds used when validating configuration from the command line.
MIN_BOARD_WIDTH = 10
MAX_BOARD_WIDTH = 120
MIN_BOARD_HEIGHT = 6
MAX_BOARD_HEIGHT = 60
MIN_CELL_SIZE = 8
MAX_CELL_SIZE = 48
MIN_FPS = 10
MAX_FPS = 240
MIN_INITIAL_LENGTH = 1

ROUND_START_FRAMES = 90
EXIT_FRAMES = 30

# Checked in this order; the first key pressed this tick wins.
DIRECTION_KEYS: tuple[tuple[int, Direction], ...] = (
    (VK_LEFT, Direction.LEFT),
    (VK_RIGHT, Direction.RIGHT),
    (VK_DOWN, Direction.DOWN),
    (VK_UP, Direction.UP),
)


class Difficulty(Enum):
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"

    @property
    def movement_period(self) -> int:
        """Frames between unprompted steps."""
        return {Difficulty.EASY: 8, Difficulty.NORMAL: 6, Difficulty.HARD: 4}[self]


class MenuItem(Enum):
    START = "Start"
    DIFFICULTY = "Difficulty"
    EXIT = "Exit"


class Phase(Enum):
    MENU = "menu"
    ROUND_START = "round_start"
    PLAYING = "playing"
    EXITING = "exiting"


@dataclass
class GameConfig:
    """Runtime settings shared between the controller and GUI."""
    board_width: int = 60
    board_height: int = 12
    cell_size: int = 20
    fps: int = 60
    initial_length: int = 3
    difficulty: Difficulty = Difficulty.NORMAL

    def validate(self) -> None:
        checks = (
            ("board_width", self.board_width, MIN_BOARD_WIDTH, MAX_BOARD_WIDTH),
            ("board_height", self.board_height, MIN_BOARD_HEIGHT, MAX_BOARD_HEIGHT),
            ("cell_size", self.cell_size, MIN_CELL_SIZE, MAX_CELL_SIZE),
            ("fps", self.fps, MIN_FPS, MAX_FPS),
        )
        for label, value, low, high in checks:
            if not (low <= value <= high):
                raise ValueError(f"{label} must be between {low} and {high}.")
        if not (MIN_INITIAL_LENGTH <= self.initial_length < self.board_height):
            raise ValueError(
                f"initial_length must be between {MIN_INITIAL_LENGTH} and {self.board_height - 1}."
            )
        if not isinstance(self.difficulty, Difficulty):
            raise ValueError(f"Unknown difficulty: {self.difficulty!r}")


def read_direction(
    tracker: InputTracker,
    bindings: tuple[tuple[int, Direction], ...] = DIRECTION_KEYS,
) -> Direction | None:
    for code, direction in bindings:
        if tracker.key_pressed_now(code):
            return direction
    return None


def play_area_wall(width: int, height: int) -> BodyPath:
    """Closed border one cell outside the board, drawn like any other path."""
    return BodyPath(
        [
            (-1, -1),
            (width, -1),
            (width, height),
            (-1, height),
            (-1, 0),
        ]
    )


class SnakeController:
    """Owns the tracker and the snake; advanced by exactly one update() per frame."""

    def __init__(self, config: GameConfig, tracker: InputTracker) -> None:
        config.validate()
        self.config = config
        self.tracker = tracker
        self.elapsed_frames = 0
        self.quit_requested = False

        self.menu_items = ItemList(MenuItem)
        self.difficulty_items = ItemList(Difficulty, list(Difficulty).index(config.difficulty))
        self.difficulty_focused = False
        self.phase = Phase.MENU
        self.phase_frames = 0

        self.wall = play_area_wall(config.board_width, config.board_height)
        self.reset_round()

    @property
    def difficulty(self) -> Difficulty:
        return self.difficulty_items.current_item()

    def reset_round(self) -> None:
        """Seed a straight snake heading down from the top edge."""
        start = Point(self.config.board_width // 4, 0)
        self.body = BodyPath.straight(start, Direction.DOWN, self.config.initial_length)
        self.heading = self.body.direction
        self.movement_period = self.difficulty.movement_period
        self.movement_frames = 0
        self.turn_cooldown = 0

    def _enter(self, phase: Phase) -> None:
        self.phase = phase
        self.phase_frames = 0

    def update(self) -> None:
        """Sample input once, then run the current phase."""
        self.tracker.update()
        self.elapsed_frames += 1
        if self.tracker.key_pressed_now(VK_ESCAPE):
            self.quit_requested = True
            return

        if self.phase is Phase.MENU:
            self._run_menu()
        elif self.phase is Phase.ROUND_START:
            self._run_round_start()
        elif self.phase is Phase.PLAYING:
            self._run_round()
        else:
            self._run_exit()

    def _run_menu(self) -> None:
        tracker = self.tracker
        if self.difficulty_focused:
            if tracker.key_pressed_now(VK_LEFT):
                self.difficulty_items.move_back()
            if tracker.key_pressed_now(VK_RIGHT):
                self.difficulty_items.move_forward()
            if tracker.key_pressed_now(VK_RETURN):
                self.difficulty_focused = False
            return

        if tracker.key_pressed_now(VK_UP):
            self.menu_items.move_back()
        if tracker.key_pressed_now(VK_DOWN):
            self.menu_items.move_forward()
        if not tracker.key_pressed_now(VK_RETURN):
            return

        selected = self.menu_items.current_item()
        if selected is MenuItem.START:
            self.reset_round()
            self._enter(Phase.ROUND_START)
        elif selected is MenuItem.DIFFICULTY:
            self.difficulty_focused = True
        else:
            self._enter(Phase.EXITING)

    def _run_round_start(self) -> None:
        self.phase_frames += 1
        # Any keyboard key skips the countdown; pointer buttons do not.
        if self.phase_frames > ROUND_START_FRAMES or any_key_pressed(self.tracker):
            self._enter(Phase.PLAYING)

    def _run_round(self) -> None:
        self.movement_frames += 1
        self.turn_cooldown = max(0, self.turn_cooldown - 1)

        new_direction = read_direction(self.tracker)
        if new_direction is not None:
            # Only 90 degree turns, and not more often than the cooldown allows.
            if new_direction is not self.heading.opposite() and self.turn_cooldown == 0:
                self.heading = new_direction
                self.movement_frames = self.movement_period
                self.turn_cooldown = self.movement_period // 2

        if self.movement_frames >= self.movement_period:
            self.body.move(self.heading)
            self.movement_frames = 0

    def _run_exit(self) -> None:
        self.phase_frames += 1
        if self.phase_frames >= EXIT_FRAMES:
            self.quit_requested = True

    def board_text(self) -> str:
        """Snake on the board as text, one line per row."""
        grid = rasterize(self.body, self.config.board_width, self.config.board_height)
        return render_text(grid, glyph="#", blank=".")
