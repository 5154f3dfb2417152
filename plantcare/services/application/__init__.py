"""Application services coordinating repositories, domain logic and the EventBus."""

from plantcare.services.application.environmental_data_service import EnvironmentalDataService
from plantcare.services.application.watering_service import WateringService

__all__ = ["WateringService", "EnvironmentalDataService"]
