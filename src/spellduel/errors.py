class SpellDuelError(Exception):
    """Base error for spellduel construction and configuration faults."""


class UnknownSpellError(SpellDuelError, KeyError):
    """Raised when a spell name is not present in a spell book or the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown spell: {self.name!r}"


class SettingsError(SpellDuelError):
    """Raised when settings cannot be read or fail validation."""
