"""
Environmental Data Service Tests
================================
"""

import uuid
from datetime import timedelta

import pytest

from plantcare.domain.exceptions import PlantNotFoundError
from plantcare.enums import HealthTrend
from plantcare.services.application.environmental_data_service import EnvironmentalDataService


class TestGrouping:
    def test_group_for_plant(self, environmental_data_service, seed, plant, now):
        for i in range(15):
            seed.environment(plant, at=now + timedelta(minutes=20 * i))
        seed.watering(plant, at=now)

        groups = environmental_data_service.group_for_plant(plant.id)

        assert len(groups) == 5
        assert groups[0].timestamp > groups[-1].timestamp

    def test_unknown_plant_has_no_groups(self, environmental_data_service):
        assert environmental_data_service.group_for_plant(uuid.uuid4()) == []

    def test_rerun_is_identical(self, environmental_data_service, seed, plant, now):
        for i in range(4):
            seed.environment(plant, at=now + timedelta(days=2 * i))
        first = environmental_data_service.group_for_plant(plant.id)
        second = environmental_data_service.group_for_plant(plant.id)
        assert [g.readings for g in first] == [g.readings for g in second]


class TestCorrelations:
    def test_correlations_for_plant(self, environmental_data_service, seed, plant, now):
        stress = seed.stress(plant, at=now)
        seed.environment(plant, at=now - timedelta(hours=1), temperature_f=91)
        seed.environment(plant, at=now - timedelta(hours=9), temperature_f=91)

        correlations = environmental_data_service.correlations_for_plant(plant.id)

        assert [c.message for c in correlations] == ["During high temp period"]
        assert correlations[0].related_event_id == stress.id

    def test_detect_correlations_delegates(self, environmental_data_service, plant, now, make_env_event, make_stress_event):
        stress = make_stress_event(plant.id, now)
        env = make_env_event(plant.id, now, humidity_percent=10)
        (correlation,) = environmental_data_service.detect_correlations([env], [stress])
        assert correlation.message == "During low humidity"


class TestHealthScore:
    def test_uses_plant_stage(self, environmental_data_service, seed, plant, now):
        seed.environment(plant, at=now, temperature_f=75, humidity_percent=60, vpd_kpa=1.0)
        score = environmental_data_service.health_score_for_plant(plant.id, previous_period_score=50)
        assert score.overall == pytest.approx(100)
        assert score.trend is HealthTrend.IMPROVING

    def test_unknown_plant_raises(self, environmental_data_service):
        with pytest.raises(PlantNotFoundError):
            environmental_data_service.health_score_for_plant(uuid.uuid4())

    def test_without_plant_reader_raises(self, event_repo, plant):
        service = EnvironmentalDataService(event_reader=event_repo)
        with pytest.raises(PlantNotFoundError):
            service.health_score_for_plant(plant.id)


class TestStats:
    def test_current_is_newest_reading(self, environmental_data_service, seed, plant, now):
        seed.environment(plant, at=now, temperature_f=70)
        seed.environment(plant, at=now + timedelta(hours=2), temperature_f=78)
        stats = environmental_data_service.stats_for_plant(plant.id)
        assert stats.current.temperature == 78
        assert stats.min.temperature == 70
