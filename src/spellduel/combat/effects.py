from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EffectKind(Enum):
    """Closed set of effect categories.

    The kind decides which field of the owner an effect modifies.
    """

    HEALING = "healing"
    DAMAGE = "damage"
    MANA_REGEN = "mana_regen"
    ARMOR = "armor"


@dataclass
class Effect:
    """A single modifier carried by a spell and applied to a character.

    Attributes:
        kind: Which stat the effect touches.
        value: Signed magnitude applied once (instantaneous) or per round start
            (durational).
        duration: Remaining round starts for a durational effect, or None for an
            instantaneous one.

    Spells hold Effects as templates; a character stores a fresh copy from
    ``spawn()`` so the countdown of one cast never leaks into another.
    """

    kind: EffectKind
    value: int
    duration: Optional[int] = None

    def __post_init__(self) -> None:
        self.kind = EffectKind(self.kind)
        self.value = int(self.value)
        if self.duration is None:
            if self.kind is EffectKind.ARMOR:
                raise ValueError("Armor effects must have a duration")
            return
        self.duration = int(self.duration)
        if self.duration < 1:
            raise ValueError("duration must be >= 1 for a durational effect")

    @property
    def instantaneous(self) -> bool:
        return self.duration is None

    @property
    def faded(self) -> bool:
        return self.duration is not None and self.duration <= 0

    def fade(self) -> None:
        """Count down one round. Instantaneous effects have nothing to count."""
        if self.duration is not None:
            self.duration -= 1

    def spawn(self) -> "Effect":
        return dataclasses.replace(self)

    def describe(self) -> str:
        if self.instantaneous:
            return f"{self.kind.value}({self.value})"
        return f"{self.kind.value}({self.value} x{self.duration})"


def healing(value: int, duration: Optional[int] = None) -> Effect:
    return Effect(EffectKind.HEALING, value, duration)


def damage(value: int, duration: Optional[int] = None) -> Effect:
    return Effect(EffectKind.DAMAGE, value, duration)


def mana_regen(value: int, duration: Optional[int] = None) -> Effect:
    return Effect(EffectKind.MANA_REGEN, value, duration)


def armor(value: int, duration: int) -> Effect:
    return Effect(EffectKind.ARMOR, value, duration)
