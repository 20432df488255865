import logging

from spellduel.combat.character import Character
from spellduel.combat.effects import armor


def test_armor_reduces_damage():
    a = Character("A", health=10, attack_rating=10)
    b = Character("B", health=20, armor=3)
    assert a.attack(b) == 7
    assert b.health == 13


def test_minimum_damage_is_one():
    a = Character("A", health=10, attack_rating=8)
    b = Character("B", health=20, armor=10)
    assert a.attack(b) == 1
    assert b.health == 19


def test_minimum_damage_with_huge_armor():
    a = Character("A", health=10, attack_rating=0)
    b = Character("B", health=20, armor=10_000)
    assert b.attacked_by(a) == 1
    assert b.health == 19


def test_armor_effect_counts_toward_defense():
    boss = Character("Boss", health=58, attack_rating=9)
    wizard = Character("Wizard", health=50)
    wizard.add_effect(armor(7, duration=6))
    assert boss.attack(wizard) == 2
    assert wizard.health == 48


def test_overkill_clamps_health_to_zero():
    a = Character("A", health=10, attack_rating=50)
    b = Character("B", health=3)
    assert a.attack(b) == 3
    assert b.health == 0
    assert b.dead


def test_dead_attacker_does_nothing(caplog):
    a = Character("A", health=0, attack_rating=50)
    b = Character("B", health=20)
    with caplog.at_level(logging.WARNING):
        assert a.attack(b) == 0
    assert b.health == 20
    assert a.health == 0
    assert any("can not attack" in r.getMessage() for r in caplog.records)


def test_attacking_does_not_change_attacker():
    a = Character("A", health=10, attack_rating=5, mana=7)
    b = Character("B", health=20)
    a.attack(b)
    assert (a.health, a.mana, a.active_effects) == (10, 7, [])
