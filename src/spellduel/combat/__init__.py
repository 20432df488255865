"""
Combat package for spellduel.

Contains:
- Effects (healing, damage, mana regeneration, armor) and their countdown.
- Immutable spell definitions and spell-selection strategies.
- The Character with its round lifecycle, casting and physical attacks.
- The Duel driver plus observer hooks and an in-memory combat log.
"""

from .effects import Effect, EffectKind
from .spells import Spell, spell_book
from .selection import SpellSelector, UniformSelector, PreferenceSelector
from .observer import CombatObserver, LoggingObserver
from .log import CombatLog, CombatEvent
from .character import Character
from .duel import Duel, DuelResult

__all__ = [
    "Effect",
    "EffectKind",
    "Spell",
    "spell_book",
    "SpellSelector",
    "UniformSelector",
    "PreferenceSelector",
    "CombatObserver",
    "LoggingObserver",
    "CombatLog",
    "CombatEvent",
    "Character",
    "Duel",
    "DuelResult",
]
