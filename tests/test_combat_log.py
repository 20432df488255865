import logging

from spellduel.catalog import standard_spellbook
from spellduel.combat.character import Character
from spellduel.combat.log import CombatLog
from spellduel.combat.observer import CombatObserver


def test_cast_records_events_in_order():
    log = CombatLog()
    a = Character("A", health=10, mana=250, spells=standard_spellbook(["MagicMissile"]), observer=log)
    b = Character("B", health=13, observer=log)
    a.cast_spell_on(b)

    assert [e.type for e in log.events()] == ["cast", "spell", "effect"]
    spell_event = log.of_type("spell")[0]
    assert spell_event.data["spell"] == "MagicMissile"
    assert spell_event.data["forced"] is False


def test_round_events_and_fading():
    log = CombatLog()
    a = Character("A", health=10, mana=250, spells=standard_spellbook(), spell_sequence=["Shield"], observer=log)
    b = Character("B", health=13, observer=log)
    a.cast_spell_on(b)
    assert log.of_type("effect_added")[0].data["duration"] == 6
    log.clear()
    assert len(log) == 0

    for _ in range(6):
        a.start_round()
        a.end_round()
    assert len(log.of_type("round_start")) == 6
    assert len(log.of_type("round_end")) == 6
    faded = log.of_type("effect_faded")
    assert len(faded) == 1
    assert faded[0].data["kind"] == "armor"


def test_attack_and_pass_events():
    log = CombatLog()
    a = Character("A", health=10, attack_rating=8, mana=0, spells=standard_spellbook(), observer=log)
    b = Character("B", health=13, armor=10, observer=log)
    a.cast_spell_on(b)
    a.attack(b)

    assert log.of_type("pass")[0].data["mana"] == 0
    attack = log.of_type("attack")[0]
    assert attack.data == {"attacker": "A", "defender": "B", "damage": 1}


def test_refused_action_forwarded_to_logging(caplog):
    log = CombatLog()
    a = Character("A", health=0, attack_rating=8, observer=log)
    b = Character("B", health=13, observer=log)
    with caplog.at_level(logging.WARNING, logger="spellduel"):
        a.attack(b)
    assert log.of_type("refused")[0].data["action"] == "attack"
    assert "A can not attack B because A is dead." in caplog.text


def test_events_returns_a_copy():
    log = CombatLog()
    log.add("note", "hello", level=logging.INFO, who="me")
    log.events().clear()
    assert [e.message for e in log.events()] == ["hello"]


def test_null_observer_does_not_change_outcome():
    a = Character("A", health=10, mana=250, spells=standard_spellbook(), observer=CombatObserver())
    b = Character("B", health=13, observer=CombatObserver())
    a.cast_spell_on(b)
    assert b.health in (9, 11, 13)
    assert a.total_mana_spent > 0
