from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .character import Character
from .observer import CombatObserver, LoggingObserver

logger = logging.getLogger(__name__)

DEFAULT_MAX_ROUNDS = 100


@dataclass(frozen=True)
class DuelResult:
    """Outcome of a single duel.

    ``winner`` is the name of the surviving character, or None when the round
    limit ran out first.
    """

    winner: Optional[str]
    hero_won: bool
    rounds: int
    mana_spent: int
    hero_health: int
    boss_health: int
    spells_cast: List[str] = field(default_factory=list)
    passes: int = 0


class Duel:
    """Drives the alternating round loop between a caster and an attacker.

    Per round the hero starts its round, casts on the boss and ends its round;
    then the boss starts its round, attacks the hero and ends its round. A
    death check follows every step that can change health.

    Args:
        hero: The spellcasting side.
        boss: The side that attacks physically.
        max_rounds: Safety bound on the number of full rounds.
        forfeit_on_pass: If True, a hero with no eligible spell loses at once.
        observer: Receives the ``defeated`` notification.
    """

    def __init__(
        self,
        hero: Character,
        boss: Character,
        max_rounds: int = DEFAULT_MAX_ROUNDS,
        forfeit_on_pass: bool = False,
        observer: Optional[CombatObserver] = None,
    ) -> None:
        if max_rounds < 1:
            raise ValueError("max_rounds must be >= 1")
        self.hero = hero
        self.boss = boss
        self.max_rounds = int(max_rounds)
        self.forfeit_on_pass = forfeit_on_pass
        self.observer = observer or LoggingObserver()
        self._spells_cast: List[str] = []
        self._passes = 0
        self._rounds = 0

    def run(self) -> DuelResult:
        """Play rounds until a character dies or the round limit is reached.

        Counters start from zero on every call; the characters keep whatever
        state earlier runs left them in.
        """
        self._spells_cast = []
        self._passes = 0
        self._rounds = 0
        logger.info("Duel: %s vs %s", self.hero.name, self.boss.name)
        winner = None
        while self._rounds < self.max_rounds:
            self._rounds += 1
            winner = self._play_round()
            if winner is not None:
                break
        else:
            logger.info("Duel ended without a winner after %d rounds", self._rounds)

        result = DuelResult(
            winner=winner.name if winner is not None else None,
            hero_won=winner is self.hero,
            rounds=self._rounds,
            mana_spent=self.hero.total_mana_spent,
            hero_health=self.hero.health,
            boss_health=self.boss.health,
            spells_cast=list(self._spells_cast),
            passes=self._passes,
        )
        logger.info(
            "Duel result: winner=%s rounds=%d mana_spent=%d",
            result.winner,
            result.rounds,
            result.mana_spent,
        )
        return result

    def _play_round(self) -> Optional[Character]:
        hero, boss = self.hero, self.boss

        hero.start_round()
        winner = self._check_death()
        if winner is not None:
            return winner

        spell = hero.cast_spell_on(boss)
        if spell is None:
            self._passes += 1
            if self.forfeit_on_pass:
                logger.info("%s has no spell to cast and forfeits", hero.name)
                self.observer.defeated(hero)
                return boss
        else:
            self._spells_cast.append(spell.name)
        winner = self._check_death()
        if winner is not None:
            return winner
        hero.end_round()

        boss.start_round()
        winner = self._check_death()
        if winner is not None:
            return winner

        boss.attack(hero)
        winner = self._check_death()
        if winner is not None:
            return winner
        boss.end_round()
        return None

    def _check_death(self) -> Optional[Character]:
        if self.boss.dead:
            self.observer.defeated(self.boss)
            return self.hero
        if self.hero.dead:
            self.observer.defeated(self.hero)
            return self.boss
        return None
