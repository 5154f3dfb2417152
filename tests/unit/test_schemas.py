"""
Schema Tests
============
Tests for the pydantic ingest/response schemas.
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from plantcare.domain.correlation import EventCorrelation
from plantcare.domain.watering import WateringState
from plantcare.enums import AlertSensitivity, EnvironmentalMetric
from plantcare.schemas import (
    AlertThresholdSchema,
    EnvironmentalReadingSchema,
    EventCorrelationSchema,
    WateringStateChangedPayload,
    WateringStateSchema,
)
from plantcare.utils.psychrometrics import calculate_vpd_from_fahrenheit


class TestEnvironmentalReadingSchema:
    def test_derives_vpd(self):
        schema = EnvironmentalReadingSchema(timestamp="2026-01-05T12:00:00Z", temperature_f=75, humidity_percent=60)
        assert schema.vpd_kpa == pytest.approx(calculate_vpd_from_fahrenheit(75, 60))
        assert schema.timestamp == datetime(2026, 1, 5, 12, tzinfo=timezone.utc)

    def test_keeps_supplied_vpd(self):
        schema = EnvironmentalReadingSchema(temperature_f=75, humidity_percent=60, vpd_kpa=0.9)
        assert schema.vpd_kpa == 0.9

    def test_partial_reading_has_no_vpd(self):
        schema = EnvironmentalReadingSchema(temperature_f=75)
        assert schema.vpd_kpa is None
        assert schema.timestamp.tzinfo is not None

    def test_offset_timestamp_is_normalized(self):
        schema = EnvironmentalReadingSchema(timestamp="2026-01-05T14:00:00+02:00", humidity_percent=50)
        assert schema.timestamp == datetime(2026, 1, 5, 12, tzinfo=timezone.utc)

    @pytest.mark.parametrize("humidity", [-1, 100.5])
    def test_humidity_out_of_range(self, humidity):
        with pytest.raises(ValidationError):
            EnvironmentalReadingSchema(temperature_f=75, humidity_percent=humidity)

    def test_bad_timestamp(self):
        with pytest.raises(ValidationError):
            EnvironmentalReadingSchema(timestamp="not-a-date", temperature_f=75)

    def test_to_domain(self):
        reading = EnvironmentalReadingSchema(
            timestamp="2026-01-05T12:00:00Z", temperature_f=80, humidity_percent=50
        ).to_domain()
        assert reading.has_all_channels
        assert reading.temperature_f == 80


class TestAlertThresholdSchema:
    def test_to_domain(self):
        plant_id = uuid.uuid4()
        threshold = AlertThresholdSchema(
            plant_id=str(plant_id), metric="Temperature", max=85, sensitivity="1h"
        ).to_domain()
        assert threshold.plant_id == plant_id
        assert threshold.metric is EnvironmentalMetric.TEMPERATURE
        assert threshold.sensitivity is AlertSensitivity.ONE_HOUR
        assert threshold.enabled is True

    def test_keeps_supplied_id(self):
        threshold_id = uuid.uuid4()
        schema = AlertThresholdSchema(id=threshold_id, plant_id=uuid.uuid4(), metric="vpd", min=0.8)
        assert schema.to_domain().id == threshold_id

    def test_min_above_max(self):
        with pytest.raises(ValidationError):
            AlertThresholdSchema(plant_id=uuid.uuid4(), metric="humidity", min=70, max=50)

    def test_unknown_metric(self):
        with pytest.raises(ValidationError):
            AlertThresholdSchema(plant_id=uuid.uuid4(), metric="co2")


class TestResponseSchemas:
    def test_watering_state_from_domain(self):
        now = datetime(2026, 1, 5, tzinfo=timezone.utc)
        state = WateringState(
            plant_id=uuid.uuid4(),
            interval_days=3,
            last_watering_date=now,
            next_watering_date=now + timedelta(days=3),
        )
        data = WateringStateSchema.from_domain(state).model_dump(mode="json")
        assert data["interval_days"] == 3
        assert data["plant_id"] == str(state.plant_id)
        assert data["next_watering_date"].startswith("2026-01-08T00:00:00")

    def test_correlation_from_domain(self):
        event_id = uuid.uuid4()
        schema = EventCorrelationSchema.from_domain(EventCorrelation("High VPD stress", event_id))
        assert schema.model_dump(mode="json") == {"message": "High VPD stress", "related_event_id": str(event_id)}

    def test_changed_payload_rejects_unknown_reason(self):
        with pytest.raises(ValidationError):
            WateringStateChangedPayload(plant_id="x", reason="guessed")
