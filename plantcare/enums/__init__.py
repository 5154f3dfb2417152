"""
Enums Module
============

This module provides enumeration types for plantcare.
Enums ensure type safety and consistency across the codebase.
"""

from plantcare.enums.common import (
    AlertSensitivity,
    EnvironmentalAlertType,
    EnvironmentalMetric,
    EnvironmentalStatus,
    HealthTrend,
    WateringFeedback,
)
from plantcare.enums.events import EventSource, EventType, PlantCareEvent
from plantcare.enums.growth import PlantStage, StressTag, SubstrateType

__all__ = [
    # Growth enums
    "PlantStage",
    "SubstrateType",
    "StressTag",
    # Event enums
    "EventType",
    "EventSource",
    "PlantCareEvent",
    # Common enums
    "EnvironmentalStatus",
    "EnvironmentalMetric",
    "EnvironmentalAlertType",
    "AlertSensitivity",
    "WateringFeedback",
    "HealthTrend",
]
