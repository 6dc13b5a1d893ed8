"""Markdown logger for gameplay events (session start, shots, game over)."""

from __future__ import annotations

import datetime


class GameLogger:
    """Handles logging of game events to markdown file."""

    def __init__(self, log_file: str):
        """
        Initialize the game logger.

        Parameters
        ----------
        log_file : str
            Path to the log file
        """
        self.log_file = log_file
        self.setup_log()

    def setup_log(self) -> None:
        """Initialize the log file with headers."""
        try:
            with open(self.log_file, 'w', encoding='utf-8') as f:
                f.write("# Circle Shooter Game Log\n\n")
                f.write(f"Log started at: {datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
                f.write("| Timestamp | Event | Details |\n")
                f.write("|-----------|-------|---------|\n")
        except OSError as e:
            print(f"Failed to initialize log file: {e}")

    def write_row(self, event: str, details: str) -> None:
        timestamp = datetime.datetime.now().strftime('%H:%M:%S.%f')[:-3]  # Include milliseconds
        try:
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(f"| {timestamp} | {event} | {details} |\n")
        except OSError as e:
            print(f"Failed to log {event.lower()}: {e}")

    def log_session_start(self, width: int, height: int) -> None:
        self.write_row("START", f"Viewport {width}x{height}")

    def log_shot(self, pos: tuple[float, float], angle: float) -> None:
        """
        Log a projectile being fired.

        Parameters
        ----------
        pos : tuple[float, float]
            Click position (x, y)
        angle : float
            Firing angle in radians
        """
        self.write_row("SHOT", f"Target ({pos[0]:.0f}, {pos[1]:.0f}) angle {angle:.3f} rad")

    def log_game_over(self, score: int, shots: int, hits: int, kills: int) -> None:
        self.write_row("GAME OVER", f"Score {score}, shots {shots}, hits {hits}, kills {kills}")
