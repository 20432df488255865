"""
spellduel: a turn-based duel between a spellcaster and a brute.

The package provides headless domain logic only:
- Effects, spells and characters with their round lifecycle
- Eligibility-filtered spell selection with a per-character RNG
- A Duel driver and diagnostic observers
- The standard spell catalog and YAML settings for the CLI
"""
from .combat import (
    Character,
    CombatLog,
    CombatObserver,
    Duel,
    DuelResult,
    Effect,
    EffectKind,
    LoggingObserver,
    PreferenceSelector,
    Spell,
    UniformSelector,
)
from .catalog import STANDARD_SPELLS, standard_spellbook
from .errors import SettingsError, SpellDuelError, UnknownSpellError
from .rng import RNG

__all__ = [
    "Character",
    "CombatLog",
    "CombatObserver",
    "Duel",
    "DuelResult",
    "Effect",
    "EffectKind",
    "LoggingObserver",
    "PreferenceSelector",
    "Spell",
    "UniformSelector",
    "STANDARD_SPELLS",
    "standard_spellbook",
    "SettingsError",
    "SpellDuelError",
    "UnknownSpellError",
    "RNG",
]
