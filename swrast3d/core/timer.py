"""
Таймер кадра с высоким разрешением.
"""

import time


class Timer:
    """Таймер кадра; dt зажимается сверху значением max_delta."""
    def __init__(self, max_delta: float = 0.1):
        self._last = time.perf_counter()
        self.max_delta = max_delta
        self.delta = 0.0
        self.fps = 0.0
        self.elapsed = 0.0

    def tick(self) -> float:
        """Обновить таймер, вернуть dt в секундах."""
        now = time.perf_counter()
        raw = now - self._last
        self._last = now
        self.fps = 1.0 / raw if raw > 0.0 else 0.0
        self.delta = min(raw, self.max_delta)
        self.elapsed += self.delta
        return self.delta
