"""Storage backends for plants, diary events and watering states."""

from infrastructure.repositories.in_memory import (
    InMemoryEventRepository,
    InMemoryPlantRepository,
    InMemoryWateringStateStore,
)

__all__ = ["InMemoryPlantRepository", "InMemoryEventRepository", "InMemoryWateringStateStore"]
