"""Event system used by game areas to notify observers of state changes."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List

from ..utils.logging_config import get_game_logger

logger = get_game_logger(__name__)


class AreaEventType(Enum):
    """Types of events a game area can emit."""
    AREA_CHANGED = "area_changed"


@dataclass
class AreaEvent:
    """Context information for an area event."""
    event_type: AreaEventType
    area_id: str
    data: Dict[str, Any] = field(default_factory=dict)


AreaListener = Callable[[AreaEvent], None]


class AreaEventManager:
    """Manages observers of a single game area."""

    def __init__(self, area_id: str):
        self.area_id = area_id
        self._listeners: List[AreaListener] = []

    def subscribe(self, listener: AreaListener) -> None:
        """Register a listener; registering the same listener twice is a no-op."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: AreaListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def emit(self, event_type: AreaEventType, **data: Any) -> AreaEvent:
        """Deliver an event to every listener in subscription order.

        A failing listener is logged and skipped; delivery continues with the
        remaining listeners.
        """
        event = AreaEvent(event_type=event_type, area_id=self.area_id, data=data)
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Listener %r failed handling %s for area %s",
                                 listener, event_type.value, self.area_id)
        return event
