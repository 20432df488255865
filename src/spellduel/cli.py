import argparse
import logging
from pathlib import Path

from .combat.duel import Duel
from .errors import SpellDuelError
from .settings import Settings, build_boss, build_hero, default_user_settings_path
from .utils.logging import configure_logging

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="spellduel",
        description="Simulate one duel between a spellcasting hero and a boss.",
    )
    parser.add_argument(
        "--settings",
        dest="settings_path",
        type=Path,
        default=None,
        help="Path to a user settings YAML file to load/override defaults.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the hero's spell choices.")
    parser.add_argument(
        "--sequence",
        nargs="+",
        default=None,
        metavar="SPELL",
        help="Forced spell order for the hero, e.g. --sequence Poison MagicMissile.",
    )
    parser.add_argument("--prefer", action="store_true", help="Prefer Recharge, Shield and Drain when eligible.")
    parser.add_argument("--max-rounds", type=int, default=None, help="Override the round limit.")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable verbose debug logging.",
    )
    return parser.parse_args(argv)


def _resolve_settings_path(explicit):
    if explicit is not None:
        return explicit
    user_path = default_user_settings_path()
    return user_path if user_path.exists() else None


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        settings = Settings.load(user_path=_resolve_settings_path(args.settings_path))
        level = logging.DEBUG if args.debug else getattr(logging, settings.log_level)
        configure_logging(level=level)

        if args.seed is not None:
            settings.hero.seed = args.seed
        if args.prefer:
            settings.duel.prefer = True
        if args.max_rounds is not None:
            settings.duel.max_rounds = args.max_rounds

        hero = build_hero(settings, spell_sequence=args.sequence)
        boss = build_boss(settings)
        duel = Duel(
            hero,
            boss,
            max_rounds=settings.duel.max_rounds,
            forfeit_on_pass=settings.duel.forfeit_on_pass,
        )
    except (SpellDuelError, ValueError) as exc:
        logger.error("%s", exc)
        return 2

    result = duel.run()
    print(f"Winner: {result.winner or 'none'} after {result.rounds} rounds")
    print(f"Mana spent: {result.mana_spent}")
    print(f"{hero.name}: {result.hero_health} HP | {boss.name}: {result.boss_health} HP")
    print(f"Spells: {', '.join(result.spells_cast) or '-'}")
    return 0 if result.hero_won else 1
