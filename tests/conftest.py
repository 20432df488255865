import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from spellduel.catalog import standard_spellbook  # noqa: E402
from spellduel.combat.character import Character  # noqa: E402


@pytest.fixture
def wizard():
    return Character("Wizard", health=50, mana=500, spells=standard_spellbook(), seed=1)


@pytest.fixture
def boss():
    return Character("Boss", health=58, attack_rating=9)
