"""
Shared test fixtures for the plantcare test suite.

Provides:
- A fixed reference instant so date arithmetic is deterministic
- Plant factories for every stage/substrate combination
- In-memory repositories and a mock EventBus
- Service factories for the application services
- A seed helper for writing diary events

Usage:
    def test_example(seed, plant, now):
        seed.environment(plant, at=now, temperature_f=90, humidity_percent=40)
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from infrastructure.repositories.in_memory import (
    InMemoryEventRepository,
    InMemoryPlantRepository,
    InMemoryWateringStateStore,
)
from plantcare.domain.plant import EnvironmentalReading, Event, Plant
from plantcare.enums import EventType, PlantStage, StressTag, SubstrateType
from plantcare.services.application.environmental_data_service import EnvironmentalDataService
from plantcare.services.application.watering_service import WateringService

# ---------------------------------------------------------------------------
# Logging: keep test output clean
# ---------------------------------------------------------------------------
logging.getLogger("infrastructure").setLevel(logging.WARNING)
logging.getLogger("plantcare").setLevel(logging.WARNING)


# 2026-01-05 is a Monday; on the hour so bucket keys are easy to reason about
REFERENCE_TIME = datetime(2026, 1, 5, 12, 0, tzinfo=timezone.utc)


# ========================== Domain Fixtures ================================


@pytest.fixture()
def now() -> datetime:
    return REFERENCE_TIME


@pytest.fixture()
def make_plant():
    """Factory for plants; defaults to a vegetative soil plant in an 11 L pot."""

    def _make(
        stage: PlantStage = PlantStage.VEGETATIVE,
        substrate_type: SubstrateType | None = SubstrateType.SOIL,
        pot_size_liters: float | None = 11.0,
        name: str = "Test Plant",
    ) -> Plant:
        return Plant(
            name=name,
            stage=stage,
            substrate_type=substrate_type,
            pot_size_liters=pot_size_liters,
            start_date=REFERENCE_TIME - timedelta(days=30),
        )

    return _make


@pytest.fixture()
def plant(make_plant) -> Plant:
    return make_plant()


@pytest.fixture()
def make_env_event():
    """Factory for environment events carrying a reading."""

    def _make(
        plant_id,
        timestamp: datetime,
        temperature_f: float | None = 75.0,
        humidity_percent: float | None = 60.0,
        vpd_kpa: float | None = 1.0,
    ) -> Event:
        reading = EnvironmentalReading(
            timestamp=timestamp,
            temperature_f=temperature_f,
            humidity_percent=humidity_percent,
            vpd_kpa=vpd_kpa,
        )
        return Event.environment(plant_id, reading)

    return _make


@pytest.fixture()
def make_stress_event():
    def _make(plant_id, timestamp: datetime) -> Event:
        return Event(
            plant_id=plant_id,
            type=EventType.STRESS,
            timestamp=timestamp,
            stress_tags=[StressTag.HEAT_STRESS],
        )

    return _make


# ========================== Repository Fixtures ============================


@pytest.fixture()
def plant_repo(plant):
    """InMemoryPlantRepository holding the default ``plant``."""
    return InMemoryPlantRepository([plant])


@pytest.fixture()
def event_repo():
    return InMemoryEventRepository()


@pytest.fixture()
def state_store():
    return InMemoryWateringStateStore()


# ========================== Mock Services ==================================


@pytest.fixture()
def mock_event_bus():
    """Mock EventBus that records publish calls."""
    bus = MagicMock()
    bus.publish = MagicMock()
    bus.subscribe = MagicMock()
    return bus


# ========================== Service Factories ==============================


@pytest.fixture()
def watering_service(event_repo, state_store, mock_event_bus):
    return WateringService(event_reader=event_repo, state_store=state_store, event_bus=mock_event_bus)


@pytest.fixture()
def environmental_data_service(event_repo, plant_repo):
    return EnvironmentalDataService(event_reader=event_repo, plant_reader=plant_repo)


# ========================== Seed Data Helpers ==============================


class SeedData:
    """Helper to write diary events into the event repository.

    Usage in tests::

        def test_something(seed, plant):
            seed.watering(plant, at=REFERENCE_TIME)
            seed.environment(plant, at=REFERENCE_TIME, temperature_f=90)
    """

    def __init__(self, event_repo: InMemoryEventRepository):
        self._repo = event_repo

    def watering(self, plant: Plant, at: datetime, volume_liters: float = 1.0) -> Event:
        return self._repo.add_event(
            Event(plant_id=plant.id, type=EventType.WATERING, timestamp=at, volume_liters=volume_liters)
        )

    def stress(self, plant: Plant, at: datetime) -> Event:
        return self._repo.add_event(
            Event(plant_id=plant.id, type=EventType.STRESS, timestamp=at, stress_tags=[StressTag.HEAT_STRESS])
        )

    def environment(
        self,
        plant: Plant,
        at: datetime,
        temperature_f: float | None = 75.0,
        humidity_percent: float | None = 60.0,
        vpd_kpa: float | None = 1.0,
    ) -> Event:
        reading = EnvironmentalReading(
            timestamp=at,
            temperature_f=temperature_f,
            humidity_percent=humidity_percent,
            vpd_kpa=vpd_kpa,
        )
        return self._repo.add_event(Event.environment(plant.id, reading))


@pytest.fixture()
def seed(event_repo):
    """SeedData helper bound to the test's event repository."""
    return SeedData(event_repo)
