from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover
    from .character import Character
    from .effects import Effect
    from .spells import Spell

logger = logging.getLogger(__name__)


class CombatObserver:
    """Diagnostic side channel for combat transitions.

    Every hook is a no-op here. Observers only watch: they must never change
    the characters they are told about.
    """

    def round_started(self, character: "Character") -> None:
        pass

    def round_ended(self, character: "Character") -> None:
        pass

    def cast_attempted(self, caster: "Character", target: "Character") -> None:
        pass

    def spell_chosen(self, caster: "Character", spell: "Spell", forced: bool) -> None:
        pass

    def no_spell_available(self, caster: "Character") -> None:
        pass

    def effect_added(self, character: "Character", effect: "Effect") -> None:
        pass

    def effect_applied(self, character: "Character", effect: "Effect") -> None:
        pass

    def effect_faded(self, character: "Character", effect: "Effect") -> None:
        pass

    def heal_ignored(self, character: "Character", amount: int) -> None:
        pass

    def attacked(self, attacker: "Character", defender: "Character", damage: int) -> None:
        pass

    def action_refused(self, character: "Character", action: str, target: "Character") -> None:
        pass

    def defeated(self, character: "Character") -> None:
        pass


class LoggingObserver(CombatObserver):
    """Forward every combat transition to the standard logging module."""

    def _emit(self, event_type: str, level: int, message: str, **data: Any) -> None:
        logger.log(level, message)

    def round_started(self, character):
        self._emit(
            "round_start",
            logging.DEBUG,
            f"Starting round for {character.name} (HP {character.health}, mana {character.mana})",
            character=character.name,
        )

    def round_ended(self, character):
        self._emit("round_end", logging.DEBUG, f"Ending round for {character.name}", character=character.name)

    def cast_attempted(self, caster, target):
        self._emit(
            "cast",
            logging.DEBUG,
            f"{caster.name} casts a spell on {target.name}",
            caster=caster.name,
            target=target.name,
        )

    def spell_chosen(self, caster, spell, forced):
        how = "forced" if forced else "chosen"
        self._emit(
            "spell",
            logging.DEBUG,
            f"{caster.name} {how} spell {spell.name} ({spell.cost} mana)",
            caster=caster.name,
            spell=spell.name,
            cost=spell.cost,
            forced=forced,
        )

    def no_spell_available(self, caster):
        self._emit(
            "pass",
            logging.DEBUG,
            f"{caster.name} has no eligible spell (mana {caster.mana}); passing",
            caster=caster.name,
            mana=caster.mana,
        )

    def effect_added(self, character, effect):
        self._emit(
            "effect_added",
            logging.DEBUG,
            f"{character.name} gains {effect.describe()}",
            character=character.name,
            kind=effect.kind.value,
            value=effect.value,
            duration=effect.duration,
        )

    def effect_applied(self, character, effect):
        self._emit(
            "effect",
            logging.DEBUG,
            f"{effect.describe()} applied to {character.name} (HP {character.health}, mana {character.mana})",
            character=character.name,
            kind=effect.kind.value,
            value=effect.value,
        )

    def effect_faded(self, character, effect):
        self._emit(
            "effect_faded",
            logging.DEBUG,
            f"{effect.kind.value} faded from {character.name}",
            character=character.name,
            kind=effect.kind.value,
        )

    def heal_ignored(self, character, amount):
        self._emit(
            "heal_ignored",
            logging.DEBUG,
            f"{character.name} is defeated; healing of {amount} ignored",
            character=character.name,
            amount=amount,
        )

    def attacked(self, attacker, defender, damage):
        self._emit(
            "attack",
            logging.DEBUG,
            f"{attacker.name} attacks {defender.name} for {damage} damage (HP {defender.health})",
            attacker=attacker.name,
            defender=defender.name,
            damage=damage,
        )

    def action_refused(self, character, action, target):
        self._emit(
            "refused",
            logging.WARNING,
            f"{character.name} can not {action} {target.name} because {character.name} is dead.",
            character=character.name,
            action=action,
            target=target.name,
        )

    def defeated(self, character):
        self._emit("defeat", logging.INFO, f"{character.name} was defeated.", character=character.name)
