from __future__ import annotations

from typing import Dict, Iterable, Optional

from .combat.effects import armor, damage, healing, mana_regen
from .combat.spells import Spell
from .errors import UnknownSpellError

MAGIC_MISSILE = Spell("MagicMissile", 53, target_effects=(damage(4),))
DRAIN = Spell("Drain", 73, caster_effects=(healing(2),), target_effects=(damage(2),))
SHIELD = Spell("Shield", 113, caster_effects=(armor(7, duration=6),))
POISON = Spell("Poison", 173, target_effects=(damage(3, duration=6),))
RECHARGE = Spell("Recharge", 229, caster_effects=(mana_regen(101, duration=5),))

STANDARD_SPELLS: Dict[str, Spell] = {
    s.name: s for s in (MAGIC_MISSILE, DRAIN, SHIELD, POISON, RECHARGE)
}


def standard_spellbook(names: Optional[Iterable[str]] = None) -> Dict[str, Spell]:
    """Return a spell book drawn from the standard spells.

    Args:
        names: Subset of spell names to include. All standard spells when None.

    Raises:
        UnknownSpellError: if a name is not a standard spell.
    """
    if names is None:
        return dict(STANDARD_SPELLS)
    book: Dict[str, Spell] = {}
    for name in names:
        if name not in STANDARD_SPELLS:
            raise UnknownSpellError(name)
        book[name] = STANDARD_SPELLS[name]
    return book
