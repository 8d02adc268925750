"""Event system: bus and event types for apply reporting."""

from paramstyle.events.bus import EventBus, EventRecorder
from paramstyle.events.types import ParamApplied, ParamFailed, SheetApplied

__all__ = [
    "EventBus",
    "EventRecorder",
    "ParamApplied",
    "ParamFailed",
    "SheetApplied",
]
