"""Event system: bus and event types for stylesheet loading."""

from kss.events.bus import EventBus
from kss.events.types import LoadCompleted, StylesheetFailed, StylesheetLoaded

__all__ = [
    "EventBus",
    "LoadCompleted",
    "StylesheetFailed",
    "StylesheetLoaded",
]
