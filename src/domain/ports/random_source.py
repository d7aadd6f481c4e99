"""Port for the randomness used by campaign drafting and reach estimates."""

from __future__ import annotations

from typing import Protocol


class IRandomSource(Protocol):
    """Anything exposing ``random()`` in ``[0.0, 1.0)``, e.g. ``random.Random``."""

    def random(self) -> float:
        ...
