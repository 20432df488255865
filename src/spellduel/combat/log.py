from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .observer import LoggingObserver


@dataclass(frozen=True)
class CombatEvent:
    """A log event emitted during combat.

    Common event types: "attack", "spell", "effect", "effect_faded", "defeat".
    """

    type: str
    message: str
    data: Optional[Dict[str, Any]] = None


class CombatLog(LoggingObserver):
    """Lightweight in-memory combat log to capture notable events."""

    def __init__(self) -> None:
        self._events: List[CombatEvent] = []

    def _emit(self, event_type: str, level: int, message: str, **data: Any) -> None:
        self.add(event_type, message, level=level, **data)

    def add(self, event_type: str, message: str, level: int = logging.DEBUG, **data: Any) -> None:
        ev = CombatEvent(type=event_type, message=message, data=data or None)
        self._events.append(ev)
        # Forward to standard logging for visibility if configured.
        logging.getLogger(__name__).log(level, message)

    def events(self) -> List[CombatEvent]:
        return list(self._events)

    def of_type(self, event_type: str) -> List[CombatEvent]:
        return [e for e in self._events if e.type == event_type]

    def clear(self) -> None:
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)
