import pytest

from spellduel.catalog import standard_spellbook
from spellduel.combat.character import Character
from spellduel.combat.duel import Duel
from spellduel.combat.log import CombatLog


def forced_duel(**kwargs):
    hero = Character("Wizard", health=10, mana=250, spells=standard_spellbook(), spell_sequence=["Poison", "MagicMissile"])
    boss = Character("Boss", health=13, attack_rating=1)
    return hero, boss, Duel(hero, boss, **kwargs)


def test_forced_sequence_duel_is_won_by_poison_tick():
    hero, boss, duel = forced_duel()
    result = duel.run()

    assert result.winner == "Wizard"
    assert result.hero_won is True
    assert result.rounds == 3
    assert result.spells_cast == ["Poison", "MagicMissile"]
    assert result.passes == 1
    assert result.mana_spent == 226
    assert result.hero_health == 8
    assert result.boss_health == 0
    assert hero.mana == 24


def test_forfeit_on_pass_hands_the_win_to_the_boss():
    _, _, duel = forced_duel(forfeit_on_pass=True)
    result = duel.run()
    assert result.winner == "Boss"
    assert result.hero_won is False
    assert result.rounds == 3


def test_boss_kills_hero():
    hero = Character("Wizard", health=5, mana=0, spells=standard_spellbook())
    boss = Character("Boss", health=50, attack_rating=10)
    result = Duel(hero, boss).run()
    assert result.winner == "Boss"
    assert result.rounds == 1
    assert result.hero_health == 0
    assert result.boss_health == 50


def test_round_limit_ends_without_winner():
    hero = Character("Wizard", health=100, mana=0, spells=standard_spellbook())
    boss = Character("Boss", health=1000, attack_rating=1)
    result = Duel(hero, boss, max_rounds=5).run()
    assert result.winner is None
    assert result.hero_won is False
    assert result.rounds == 5
    assert result.passes == 5
    assert result.hero_health == 95


def test_invalid_round_limit():
    hero = Character("Wizard", health=1)
    boss = Character("Boss", health=1)
    with pytest.raises(ValueError):
        Duel(hero, boss, max_rounds=0)


def test_seeded_duels_are_reproducible():
    def play():
        hero = Character("Wizard", health=50, mana=500, spells=standard_spellbook(), seed=2015)
        boss = Character("Boss", health=58, attack_rating=9, seed=22)
        return Duel(hero, boss).run()

    first, second = play(), play()
    assert first == second
    assert first.winner in ("Wizard", "Boss")


def test_defeat_is_logged():
    log = CombatLog()
    hero = Character("Wizard", health=5, mana=0, observer=log)
    boss = Character("Boss", health=50, attack_rating=10, observer=log)
    Duel(hero, boss, observer=log).run()
    defeats = log.of_type("defeat")
    assert len(defeats) == 1
    assert "Wizard was defeated" in defeats[0].message


def test_second_run_starts_counting_from_zero():
    hero, boss, duel = forced_duel()
    first = duel.run()
    again = duel.run()

    assert first.rounds == 3
    # The boss is already dead, so the rerun ends on the first death check.
    assert again.winner == "Wizard"
    assert again.rounds == 1
    assert again.spells_cast == []
    assert again.passes == 0
