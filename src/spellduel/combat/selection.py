from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..rng import RNG
from .spells import Spell

logger = logging.getLogger(__name__)


class SpellSelector:
    """Picks one spell out of the candidates that passed the eligibility filter."""

    def choose(self, candidates: Sequence[Spell], rng: RNG) -> Optional[Spell]:
        raise NotImplementedError


class UniformSelector(SpellSelector):
    """Uniform random choice using the caster's own RNG."""

    def choose(self, candidates: Sequence[Spell], rng: RNG) -> Optional[Spell]:
        if not candidates:
            return None
        return rng.choice(list(candidates))


class PreferenceSelector(SpellSelector):
    """
    Prefer spells by name in the given order, falling back to a uniform choice.

    The default order favours sustain: Recharge, then Shield, then Drain.
    """

    DEFAULT_ORDER = ("Recharge", "Shield", "Drain")

    def __init__(self, preferred: Sequence[str] = DEFAULT_ORDER, fallback: Optional[SpellSelector] = None) -> None:
        self.preferred = tuple(preferred)
        self.fallback = fallback or UniformSelector()

    def choose(self, candidates: Sequence[Spell], rng: RNG) -> Optional[Spell]:
        by_name = {s.name: s for s in candidates}
        for name in self.preferred:
            if name in by_name:
                logger.debug("Preferred spell %s is available", name)
                return by_name[name]
        return self.fallback.choose(candidates, rng)
