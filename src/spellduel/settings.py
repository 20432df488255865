from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import yaml
from platformdirs import user_config_dir
from pydantic import BaseModel, Field, ValidationError, field_validator

from .catalog import STANDARD_SPELLS, standard_spellbook
from .combat.character import Character
from .combat.duel import DEFAULT_MAX_ROUNDS
from .combat.observer import CombatObserver
from .combat.selection import PreferenceSelector, UniformSelector
from .errors import SettingsError

logger = logging.getLogger(__name__)

APP_NAME = "spellduel"
DEFAULT_SETTINGS_RESOURCE = "default_settings.yaml"


def _load_yaml(path: Path) -> dict:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise SettingsError(f"Unable to read settings from {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise SettingsError(f"Settings file {path} must contain a mapping")
    return data


def _deep_merge(base: dict, overlay: dict) -> dict:
    merged = dict(base)
    for k, v in (overlay or {}).items():
        if isinstance(v, dict) and isinstance(base.get(k), dict):
            merged[k] = _deep_merge(base[k], v)
        else:
            merged[k] = v
    return merged


class CombatantSettings(BaseModel):
    """Starting stats of one side of the duel."""

    name: str = Field(..., min_length=1, description="Display name")
    health: int = Field(..., ge=0, description="Starting health")
    attack: int = Field(0, ge=0, description="Attack rating")
    armor: int = Field(0, description="Base armor")
    mana: int = Field(0, description="Starting mana")
    seed: Optional[int] = Field(default=None, description="Seed for this side's RNG")
    spells: Optional[List[str]] = Field(
        default=None, description="Standard spell names in the spell book; all when omitted"
    )

    @field_validator("spells")
    @classmethod
    def known_spells(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        if v is None:
            return None
        unknown = [name for name in v if name not in STANDARD_SPELLS]
        if unknown:
            raise ValueError(f"Unknown spells: {', '.join(unknown)}")
        return list(v)


class DuelSettings(BaseModel):
    max_rounds: int = Field(DEFAULT_MAX_ROUNDS, ge=1)
    forfeit_on_pass: bool = False
    prefer: bool = Field(False, description="Prefer Recharge/Shield/Drain over a uniform choice")


class Settings(BaseModel):
    hero: CombatantSettings
    boss: CombatantSettings
    duel: DuelSettings = Field(default_factory=DuelSettings)
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def known_level(cls, v: str) -> str:
        level = str(v).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @staticmethod
    def defaults() -> Dict[str, Any]:
        text = resources.files(APP_NAME).joinpath(DEFAULT_SETTINGS_RESOURCE).read_text(encoding="utf-8")
        return yaml.safe_load(text) or {}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise SettingsError(f"Invalid settings:\n{exc}") from exc

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "Settings":
        """Load settings from built-in defaults and optional user override file.

        If user_path is provided and exists, overlay values onto defaults.
        """
        default_data = cls.defaults()

        user_data = {}
        if user_path is not None:
            if user_path.exists():
                user_data = _load_yaml(user_path)
                logger.info("Loaded user settings from %s", user_path)
            else:
                logger.warning("User settings file not found: %s", user_path)

        merged = _deep_merge(default_data, user_data)
        settings = cls.from_dict(merged)
        logger.debug("Settings merged: %s", settings)
        return settings

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(self.model_dump(), f, sort_keys=False)
        logger.info("Saved settings to %s", path)


def default_user_settings_path() -> Path:
    return Path(user_config_dir(APP_NAME)) / "settings.yaml"


def build_hero(
    settings: Settings,
    spell_sequence: Optional[Iterable[str]] = None,
    observer: Optional[CombatObserver] = None,
) -> Character:
    cfg = settings.hero
    selector = PreferenceSelector() if settings.duel.prefer else UniformSelector()
    return Character(
        cfg.name,
        health=cfg.health,
        attack_rating=cfg.attack,
        armor=cfg.armor,
        mana=cfg.mana,
        spells=standard_spellbook(cfg.spells),
        spell_sequence=spell_sequence,
        seed=cfg.seed,
        selector=selector,
        observer=observer,
    )


def build_boss(settings: Settings, observer: Optional[CombatObserver] = None) -> Character:
    cfg = settings.boss
    return Character(
        cfg.name,
        health=cfg.health,
        attack_rating=cfg.attack,
        armor=cfg.armor,
        mana=cfg.mana,
        spells=standard_spellbook(cfg.spells) if cfg.spells else None,
        seed=cfg.seed,
        observer=observer,
    )
