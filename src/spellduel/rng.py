from __future__ import annotations

import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


class RNG:
    """Random source owned by a single Character.

    Spell choice draws only from here, so two characters never share random
    state and a duel replays exactly from the characters' seeds.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._random = random.Random(seed)

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return self._random.choice(seq)

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"RNG(seed={self.seed!r})"
