"""Random source backed by ``random.Random`` with an optional fixed seed."""

from __future__ import annotations

import random
import threading
from typing import Optional

from src.shared import get_logger

logger = get_logger(__name__)


class SeededRandomSource:
    """Thread-safe ``IRandomSource`` implementation.

    A configured seed makes template picks and reach estimates repeatable
    across restarts, which is what the test and staging environments use.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._seed = seed
        self._rng = random.Random(seed)
        self._lock = threading.Lock()
        logger.debug("random_source.initialized", seeded=seed is not None)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def random(self) -> float:
        with self._lock:
            return self._rng.random()
