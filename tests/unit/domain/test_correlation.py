"""
Correlation Detector Tests
==========================
Tests for matching stress events with nearby environmental anomalies.
"""

from datetime import timedelta

from plantcare.constants import CorrelationThresholds
from plantcare.domain.correlation import CorrelationDetector
from plantcare.domain.plant import EnvironmentalReading, Event
from plantcare.enums import EventType


class TestDetect:
    def test_high_temp_within_window(self, plant, now, make_env_event, make_stress_event):
        stress = make_stress_event(plant.id, now)
        env = make_env_event(plant.id, now - timedelta(hours=2), temperature_f=90)

        correlations = CorrelationDetector.detect([env], [stress])

        assert len(correlations) == 1
        assert "high temp" in correlations[0].message
        assert correlations[0].related_event_id == stress.id

    def test_same_reading_ten_hours_away_is_ignored(self, plant, now, make_env_event, make_stress_event):
        stress = make_stress_event(plant.id, now)
        env = make_env_event(plant.id, now + timedelta(hours=10), temperature_f=90)
        assert CorrelationDetector.detect([env], [stress]) == []

    def test_window_is_strict(self, plant, now, make_env_event, make_stress_event):
        stress = make_stress_event(plant.id, now)
        edge = make_env_event(plant.id, now + timedelta(hours=4), temperature_f=90)
        inside = make_env_event(plant.id, now - timedelta(hours=4) + timedelta(seconds=1), temperature_f=90)
        correlations = CorrelationDetector.detect([edge, inside], [stress])
        assert len(correlations) == 1

    def test_every_exceeded_condition_in_fixed_order(self, plant, now, make_env_event, make_stress_event):
        stress = make_stress_event(plant.id, now)
        env = make_env_event(plant.id, now, temperature_f=92, humidity_percent=25, vpd_kpa=2.1)
        messages = [c.message for c in CorrelationDetector.detect([env], [stress])]
        assert messages == [
            CorrelationThresholds.HIGH_TEMP_MESSAGE,
            CorrelationThresholds.LOW_HUMIDITY_MESSAGE,
            CorrelationThresholds.HIGH_VPD_MESSAGE,
        ]

    def test_thresholds_are_strict(self, plant, now, make_env_event, make_stress_event):
        stress = make_stress_event(plant.id, now)
        env = make_env_event(plant.id, now, temperature_f=85, humidity_percent=30, vpd_kpa=1.8)
        assert CorrelationDetector.detect([env], [stress]) == []

    def test_incomplete_reading_is_skipped(self, plant, now, make_env_event, make_stress_event):
        stress = make_stress_event(plant.id, now)
        env = make_env_event(plant.id, now, temperature_f=99, vpd_kpa=None)
        assert CorrelationDetector.detect([env], [stress]) == []

    def test_non_stress_events_are_ignored(self, plant, now, make_env_event):
        note = Event(plant_id=plant.id, type=EventType.NOTE, timestamp=now)
        env = make_env_event(plant.id, now, temperature_f=99)
        assert CorrelationDetector.detect([env], [note]) == []

    def test_duplicates_are_kept(self, plant, now, make_env_event, make_stress_event):
        stress = make_stress_event(plant.id, now)
        envs = [make_env_event(plant.id, now + timedelta(hours=h), temperature_f=90) for h in (-1, 1, 2)]
        correlations = CorrelationDetector.detect(envs, [stress])
        assert [c.message for c in correlations] == [CorrelationThresholds.HIGH_TEMP_MESSAGE] * 3
        assert {c.related_event_id for c in correlations} == {stress.id}

    def test_multiple_stress_events(self, plant, now, make_env_event, make_stress_event):
        first = make_stress_event(plant.id, now)
        second = make_stress_event(plant.id, now + timedelta(hours=3))
        env = make_env_event(plant.id, now + timedelta(hours=1), humidity_percent=20)
        correlations = CorrelationDetector.detect([env], [first, second])
        assert [c.related_event_id for c in correlations] == [first.id, second.id]

    def test_deterministic(self, plant, now, make_env_event, make_stress_event):
        stress = make_stress_event(plant.id, now)
        envs = [make_env_event(plant.id, now + timedelta(minutes=30 * i), temperature_f=86 + i) for i in range(5)]
        assert CorrelationDetector.detect(envs, [stress]) == CorrelationDetector.detect(envs, [stress])


class TestDetectReadings:
    def test_bare_readings(self, plant, now, make_stress_event):
        stress = make_stress_event(plant.id, now)
        reading = EnvironmentalReading(timestamp=now, temperature_f=75, humidity_percent=60, vpd_kpa=2.0)
        (correlation,) = CorrelationDetector.detect_readings([reading], [stress])
        assert correlation.message == "High VPD stress"
