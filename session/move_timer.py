"""
Per-move countdown for TicTacToe.

The timer owns no thread or clock. Whoever drives it (the Tkinter loop,
or a test) calls tick() once a second.
"""

from typing import Callable, Optional


class MoveTimer:
    """
    Counts down the time a player has left for the current move.

    on_tick(remaining) fires after every tick while running.
    on_expire() fires once when the time runs out; the timer stops itself.
    """

    def __init__(
        self,
        seconds: int = 30,
        warning_seconds: int = 5,
        on_tick: Optional[Callable[[int], None]] = None,
        on_expire: Optional[Callable[[], None]] = None
    ):
        self.seconds = seconds
        self.warning_seconds = warning_seconds
        self.on_tick = on_tick
        self.on_expire = on_expire

        self.time_left = seconds
        self.is_running = False

    def start(self):
        """Start counting from the full time."""
        self.time_left = self.seconds
        self.is_running = True

    def reset(self):
        self.start()

    def stop(self):
        self.is_running = False

    @property
    def is_warning(self) -> bool:
        """True during the last few seconds of a running countdown."""
        return self.is_running and 0 < self.time_left <= self.warning_seconds

    def tick(self) -> int:
        """
        Advance the countdown by one second.

        Returns:
            Seconds left. Ticks while stopped change nothing.
        """
        if not self.is_running:
            return self.time_left

        self.time_left -= 1

        if self.on_tick is not None:
            self.on_tick(self.time_left)

        if self.time_left <= 0:
            self.stop()
            if self.on_expire is not None:
                self.on_expire()

        return self.time_left
