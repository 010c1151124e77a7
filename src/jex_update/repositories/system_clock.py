import time


class SystemClock:
    """Clock backed by time.time(). Satisfies the Clock protocol."""

    def now(self) -> float:
        return time.time()
