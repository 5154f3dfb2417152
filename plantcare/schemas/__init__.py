"""
Schemas Module
==============

Pydantic models for ingest validation, responses and EventBus payloads.
"""

from plantcare.schemas.environment import (
    AlertThresholdSchema,
    EnvironmentalReadingSchema,
    EventCorrelationSchema,
)
from plantcare.schemas.events import WateringStateChangedPayload, WateringStateClearedPayload
from plantcare.schemas.watering import WateringStateSchema

__all__ = [
    # Environment
    "EnvironmentalReadingSchema",
    "AlertThresholdSchema",
    "EventCorrelationSchema",
    # Watering
    "WateringStateSchema",
    # EventBus payloads
    "WateringStateChangedPayload",
    "WateringStateClearedPayload",
]
