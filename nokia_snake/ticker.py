"""
Fixed-period scheduler that drives GameController.tick().
"""

from .config import TICK_MS
from .controller import GamePhase


class Ticker:
    """
    Converts elapsed frame time into game ticks.

    At most one tick fires per call, so a slow frame never replays missed
    moves. Time only accumulates while the controller is running. Pausing, game
    over or an idle controller drop whatever was accumulated, so after
    starting or resuming the first move comes one full period later.
    """

    def __init__(self, controller, period_ms=TICK_MS):
        if period_ms <= 0:
            raise ValueError(f"period_ms must be positive, got {period_ms}")
        self.controller = controller
        self.period_ms = period_ms
        self.pending_ms = 0

    @property
    def armed(self):
        return self.controller.phase is GamePhase.RUNNING

    def advance(self, elapsed_ms):
        """Add elapsed_ms of wall time; fires at most one tick and returns the count."""
        if not self.armed:
            self.pending_ms = 0
            return 0

        self.pending_ms += elapsed_ms
        if self.pending_ms < self.period_ms:
            return 0

        # Missed periods are dropped, never replayed.
        self.pending_ms = min(self.pending_ms - self.period_ms, self.period_ms - 1)
        self.controller.tick()
        if not self.armed:
            self.pending_ms = 0
        return 1
