"""
Event Enumerations
==================

Diary event types and EventBus topics.
"""

from enum import Enum


class EventType(str, Enum):
    """Type of event in a plant's diary."""

    WATERING = "watering"
    FEEDING = "feeding"
    FLUSH = "flush"
    NOTE = "note"
    PHOTO = "photo"
    STRESS = "stress"
    ENVIRONMENT = "environment"
    LIGHT_CHECK = "light_check"

    def __str__(self):
        return self.value


class EventSource(str, Enum):
    """Where a diary event came from."""

    MANUAL = "manual"
    AC_INFINITY = "ac_infinity"
    LIGHT_METER = "light_meter"
    OTHER = "other"

    def __str__(self):
        return self.value


class PlantCareEvent(str, Enum):
    """EventBus topics."""

    WATERING_STATE_CHANGED = "watering_state_changed"
    WATERING_STATE_CLEARED = "watering_state_cleared"

    def __str__(self):
        return self.value
