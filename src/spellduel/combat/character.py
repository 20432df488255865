from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Tuple, Union

from ..errors import UnknownSpellError
from ..rng import RNG
from .effects import Effect, EffectKind
from .observer import CombatObserver, LoggingObserver
from .selection import SpellSelector, UniformSelector
from .spells import Spell, spell_book

logger = logging.getLogger(__name__)


class Character:
    """A participant in a duel.

    A Character owns its health, mana, armor bonus and active effects. The
    opponent is only ever passed into a method call and is touched solely
    through its ``add_effect`` and ``attacked_by`` entry points.

    Args:
        name: Display name used in logs.
        health: Starting health (>= 0). The character is alive while > 0.
        attack_rating: Damage dealt by a physical attack before armor.
        armor: Base armor, reduced from every incoming physical attack.
        mana: Starting mana. Forced casts may drive it below zero.
        spells: Spell book, either a name -> Spell mapping or an iterable of
            spells.
        spell_sequence: Optional forced cast order, consumed one name per cast.
        seed: Seed for the character's own RNG, ignored when ``rng`` is given.
        rng: Explicit RNG instance.
        selector: Strategy choosing among eligible spells; uniform by default.
        observer: Diagnostic hook; defaults to a LoggingObserver.
    """

    def __init__(
        self,
        name: str,
        health: int = 0,
        attack_rating: int = 0,
        armor: int = 0,
        mana: int = 0,
        spells: Union[Mapping[str, Spell], Iterable[Spell], None] = None,
        spell_sequence: Optional[Iterable[str]] = None,
        seed: Optional[int] = None,
        rng: Optional[RNG] = None,
        selector: Optional[SpellSelector] = None,
        observer: Optional[CombatObserver] = None,
    ) -> None:
        if int(health) < 0:
            raise ValueError("health must be non-negative")
        self.name = name
        self._health = int(health)
        self.attack_rating = int(attack_rating)
        self.base_armor = int(armor)
        self._bonus_armor = 0
        self._mana = int(mana)
        self._total_mana_spent = 0
        self._active_effects: List[Effect] = []

        if spells is None:
            self._spells: dict[str, Spell] = {}
        elif isinstance(spells, Mapping):
            self._spells = dict(spells)
        else:
            self._spells = spell_book(spells)

        self._spell_sequence: List[str] = list(spell_sequence or [])
        for spell_name in self._spell_sequence:
            if spell_name not in self._spells:
                raise UnknownSpellError(spell_name)

        self.rng = rng or RNG(seed)
        self.selector = selector or UniformSelector()
        self.observer = observer or LoggingObserver()

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    @property
    def health(self) -> int:
        return self._health

    @property
    def mana(self) -> int:
        return self._mana

    @property
    def total_mana_spent(self) -> int:
        return self._total_mana_spent

    @property
    def bonus_armor(self) -> int:
        return self._bonus_armor

    @property
    def armor(self) -> int:
        """Total armor: base armor plus every active armor effect."""
        return self.base_armor + self._bonus_armor

    @property
    def active_effects(self) -> List[Effect]:
        return list(self._active_effects)

    @property
    def active_kinds(self) -> frozenset[EffectKind]:
        return frozenset(e.kind for e in self._active_effects)

    @property
    def spell_book(self) -> Mapping[str, Spell]:
        return MappingProxyType(self._spells)

    @property
    def spell_sequence(self) -> Tuple[str, ...]:
        """Forced spell names not yet cast."""
        return tuple(self._spell_sequence)

    @property
    def alive(self) -> bool:
        return self._health > 0

    @property
    def dead(self) -> bool:
        return not self.alive

    # ------------------------------------------------------------------ #
    # Round lifecycle
    # ------------------------------------------------------------------ #

    def start_round(self) -> None:
        """Tick every active effect once, then drop the ones that faded."""
        self.observer.round_started(self)
        self._apply_effects()
        self._clear_faded_effects()

    def end_round(self) -> None:
        self.observer.round_ended(self)

    # ------------------------------------------------------------------ #
    # Actions
    # ------------------------------------------------------------------ #

    def cast_spell_on(self, opponent: "Character") -> Optional[Spell]:
        """Cast one spell on ``opponent``.

        The spell is the next forced one if a sequence remains, otherwise a
        choice among the eligible spells. Returns the spell cast, or None when
        the caster is dead or no spell is eligible.
        """
        if self.dead:
            self.observer.action_refused(self, "cast spell on", opponent)
            return None
        self.observer.cast_attempted(self, opponent)

        forced = bool(self._spell_sequence)
        if forced:
            spell = self._spells[self._spell_sequence.pop(0)]
        else:
            spell = self.selector.choose(self.eligible_spells(opponent), self.rng)
        if spell is None:
            self.observer.no_spell_available(self)
            return None
        self.observer.spell_chosen(self, spell, forced)

        # Costs are not checked against the balance here; a forced cast may
        # leave mana negative.
        self._mana -= spell.cost
        self._total_mana_spent += spell.cost

        for effect in spell.caster_effects:
            self.add_effect(effect)
        for effect in spell.target_effects:
            opponent.add_effect(effect)
        return spell

    def add_effect(self, effect: Effect) -> None:
        """Apply an instantaneous effect now, or start tracking a durational one."""
        if effect.instantaneous:
            self._apply(effect)
            return
        active = effect.spawn()
        self._active_effects.append(active)
        if active.kind is EffectKind.ARMOR:
            self._bonus_armor += active.value
        self.observer.effect_added(self, active)

    def eligible_spells(self, opponent: "Character") -> List[Spell]:
        """Spells that are affordable and would not stack an active effect kind.

        A spell is dropped if any of its caster effects shares a kind with an
        effect active on this character, or any of its target effects shares a
        kind with an effect active on ``opponent``.
        """
        my_kinds = self.active_kinds
        their_kinds = opponent.active_kinds
        eligible = []
        for spell in self._spells.values():
            if spell.cost > self._mana:
                logger.debug("  Drop %s: can't afford it (mana %d, cost %d)", spell.name, self._mana, spell.cost)
                continue
            if spell.caster_kinds & my_kinds:
                logger.debug("  Drop %s: caster effect already active", spell.name)
                continue
            if spell.target_kinds & their_kinds:
                logger.debug("  Drop %s: target effect already active on %s", spell.name, opponent.name)
                continue
            eligible.append(spell)
        return eligible

    def attack(self, opponent: "Character") -> int:
        """Physically attack ``opponent``. Returns the health it lost."""
        if self.dead:
            self.observer.action_refused(self, "attack", opponent)
            return 0
        return opponent.attacked_by(self)

    def attacked_by(self, attacker: "Character") -> int:
        """Take a physical hit. Armor reduces it, but at least 1 damage lands."""
        hit = attacker.attack_rating - self.armor
        if hit <= 0:
            hit = 1
        dealt = self._injure(hit)
        self.observer.attacked(attacker, self, dealt)
        return dealt

    # ------------------------------------------------------------------ #
    # Internals
    # ------------------------------------------------------------------ #

    def _apply_effects(self) -> None:
        for effect in self._active_effects:
            if effect.kind is not EffectKind.ARMOR:
                self._apply(effect)
            effect.fade()

    def _clear_faded_effects(self) -> None:
        kept = []
        for effect in self._active_effects:
            if not effect.faded:
                kept.append(effect)
                continue
            if effect.kind is EffectKind.ARMOR:
                self._bonus_armor -= effect.value
            self.observer.effect_faded(self, effect)
        self._active_effects = kept

    def _apply(self, effect: Effect) -> None:
        kind = effect.kind
        if kind is EffectKind.HEALING:
            self._heal(effect.value)
        elif kind is EffectKind.DAMAGE:
            self._injure(effect.value)
        elif kind is EffectKind.MANA_REGEN:
            self._replenish(effect.value)
        elif kind is EffectKind.ARMOR:
            # Carried by bonus_armor for the effect's whole lifetime.
            return
        else:  # pragma: no cover
            raise AssertionError(f"Unhandled effect kind: {kind!r}")
        self.observer.effect_applied(self, effect)

    def _heal(self, value: int) -> None:
        if self.dead:
            self.observer.heal_ignored(self, value)
            return
        self._health = max(0, self._health + value)

    def _injure(self, value: int) -> int:
        if self.dead:
            # Negative damage would heal; a dead character stays at 0.
            if value < 0:
                self.observer.heal_ignored(self, -value)
            return 0
        before = self._health
        self._health = max(0, self._health - value)
        return before - self._health

    def _replenish(self, value: int) -> None:
        self._mana += value

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return (
            f"Character(name={self.name!r}, health={self._health}, mana={self._mana}, "
            f"armor={self.armor}, effects={[e.describe() for e in self._active_effects]!r})"
        )
