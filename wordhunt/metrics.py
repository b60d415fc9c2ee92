import logging
import time
from contextlib import contextmanager

logger = logging.getLogger("wordhunt")


class StageTimer:
    """Per-stage wall-clock timings (ms) and counters for one solve request.

    Stages that raise are still timed, so a failed recognition or solve shows
    up in the log next to the error.
    """

    def __init__(self):
        self.timings: dict[str, float] = {}
        self.counters: dict[str, int] = {}
        self._start = time.perf_counter()

    @contextmanager
    def stage(self, name: str):
        t0 = time.perf_counter()
        try:
            yield self
        finally:
            self.timings[name] = round((time.perf_counter() - t0) * 1000, 1)
            logger.info("stage=%s elapsed=%.1fms", name, self.timings[name])

    def count(self, name: str, value: int):
        self.counters[name] = self.counters.get(name, 0) + value

    @property
    def total_ms(self) -> float:
        return round((time.perf_counter() - self._start) * 1000, 1)

    def summary(self) -> dict[str, float]:
        return {**self.timings, "total": self.total_ms}

    def log_summary(self, label: str):
        counters = " ".join(f"{k}={v}" for k, v in sorted(self.counters.items()))
        logger.info("%s total=%.1fms %s", label, self.total_ms, counters)
