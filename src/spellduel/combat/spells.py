from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Tuple

from .effects import Effect, EffectKind


@dataclass(frozen=True)
class Spell:
    """An immutable spell definition.

    Attributes:
        name: Key of the spell in a spell book.
        cost: Mana price (>= 0).
        caster_effects: Effect templates applied to the caster, in order.
        target_effects: Effect templates applied to the target, in order.
    """

    name: str
    cost: int
    caster_effects: Tuple[Effect, ...] = field(default_factory=tuple)
    target_effects: Tuple[Effect, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Spell.name must be a non-empty string")
        if int(self.cost) < 0:
            raise ValueError("Spell.cost must be non-negative")
        object.__setattr__(self, "cost", int(self.cost))
        object.__setattr__(self, "caster_effects", tuple(self.caster_effects))
        object.__setattr__(self, "target_effects", tuple(self.target_effects))

    @property
    def caster_kinds(self) -> frozenset[EffectKind]:
        return frozenset(e.kind for e in self.caster_effects)

    @property
    def target_kinds(self) -> frozenset[EffectKind]:
        return frozenset(e.kind for e in self.target_effects)


def spell_book(spells: Iterable[Spell]) -> dict[str, Spell]:
    """Index spells by name, rejecting duplicates."""
    book: dict[str, Spell] = {}
    for spell in spells:
        if spell.name in book:
            raise ValueError(f"Duplicate spell name: {spell.name!r}")
        book[spell.name] = spell
    return book
