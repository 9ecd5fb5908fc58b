"""Probabilistic fault injector used to exercise client error paths."""

from __future__ import annotations

import random
from threading import Lock
from typing import Final, Protocol

DEFAULT_REJECT_PERCENT: Final[int] = 8
DRAW_RANGE: Final[int] = 100


class RandomSource(Protocol):
    """Entropy capability consumed by :class:`FaultInjector`."""

    def randrange(self, start: int, stop: int) -> int: ...


class FaultInjector:
    """Thread-safe gate that rejects a configurable share of requests.

    Each call draws a uniform integer in ``[0, 100)`` and rejects when the
    draw falls below ``reject_percent``. The outcome never depends on the
    request being processed.
    """

    def __init__(
        self,
        reject_percent: int = DEFAULT_REJECT_PERCENT,
        *,
        rng: RandomSource | None = None,
        seed: int | None = None,
    ) -> None:
        """Validate the threshold and bind the random source used for draws."""
        if not 0 <= reject_percent <= DRAW_RANGE:
            raise ValueError(f"reject_percent must be within 0..{DRAW_RANGE}, got {reject_percent}")
        self._reject_percent = reject_percent
        self._rng: RandomSource = rng if rng is not None else random.Random(seed)
        self._lock = Lock()

    @property
    def reject_percent(self) -> int:
        return self._reject_percent

    def should_reject(self) -> bool:
        """Return ``True`` when the current request should be rejected."""
        with self._lock:
            draw = self._rng.randrange(0, DRAW_RANGE)
        return draw < self._reject_percent
