"""
Environment Schemas
===================

Ingest and response schemas for environmental readings, alert thresholds
and stress correlations.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from plantcare.domain.alert_threshold import AlertThreshold
from plantcare.domain.correlation import EventCorrelation
from plantcare.domain.plant import EnvironmentalReading
from plantcare.enums import AlertSensitivity, EnvironmentalMetric
from plantcare.utils.psychrometrics import calculate_vpd_from_fahrenheit
from plantcare.utils.time import coerce_datetime, utc_now


class EnvironmentalReadingSchema(BaseModel):
    """Reading from a sensor feed or manual log entry."""

    model_config = ConfigDict(extra="ignore")

    timestamp: datetime = Field(default_factory=utc_now, description="UTC timestamp (ISO-8601)")
    temperature_f: Optional[float] = Field(default=None, description="Temperature in °F")
    humidity_percent: Optional[float] = Field(default=None, ge=0, le=100, description="Relative humidity in %")
    vpd_kpa: Optional[float] = Field(default=None, ge=0, description="Vapor pressure deficit in kPa")

    @field_validator("timestamp", mode="before")
    @classmethod
    def parse_timestamp(cls, v):
        """Accept ISO strings (with or without ``Z``) and normalize to UTC."""
        if v is None:
            return utc_now()
        parsed = coerce_datetime(v)
        if parsed is None:
            raise ValueError(f"Invalid timestamp: {v!r}")
        return parsed

    @model_validator(mode="after")
    def derive_vpd(self):
        if self.vpd_kpa is None and self.temperature_f is not None and self.humidity_percent is not None:
            self.vpd_kpa = calculate_vpd_from_fahrenheit(self.temperature_f, self.humidity_percent)
        return self

    def to_domain(self) -> EnvironmentalReading:
        return EnvironmentalReading(
            timestamp=self.timestamp,
            temperature_f=self.temperature_f,
            humidity_percent=self.humidity_percent,
            vpd_kpa=self.vpd_kpa,
        )


class AlertThresholdSchema(BaseModel):
    """Request schema for creating or updating an alert threshold."""

    id: Optional[UUID] = None
    plant_id: UUID
    metric: EnvironmentalMetric
    min: Optional[float] = None
    max: Optional[float] = None
    enabled: bool = True
    sensitivity: AlertSensitivity = AlertSensitivity.FIFTEEN_MINUTES

    @field_validator("metric", "sensitivity", mode="before")
    @classmethod
    def normalize_enum(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @model_validator(mode="after")
    def check_range(self):
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"min ({self.min}) must not exceed max ({self.max})")
        return self

    def to_domain(self) -> AlertThreshold:
        kwargs = {"id": self.id} if self.id is not None else {}
        return AlertThreshold(
            plant_id=self.plant_id,
            metric=self.metric,
            min=self.min,
            max=self.max,
            enabled=self.enabled,
            sensitivity=self.sensitivity,
            **kwargs,
        )


class EventCorrelationSchema(BaseModel):
    """Response schema for a stress/environment correlation."""

    message: str
    related_event_id: Optional[UUID] = None

    @classmethod
    def from_domain(cls, correlation: EventCorrelation) -> "EventCorrelationSchema":
        return cls(message=correlation.message, related_event_id=correlation.related_event_id)
