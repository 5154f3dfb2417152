"""
Growth-related Enumerations
============================

This module contains all enums related to plants and their growing medium.
"""

from enum import Enum


class PlantStage(str, Enum):
    """Growth stages for plants"""

    SEEDLING = "seedling"
    VEGETATIVE = "vegetative"
    FLOWERING = "flowering"
    DRYING = "drying"
    CURING = "curing"

    def __str__(self):
        return self.value

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class SubstrateType(str, Enum):
    """Growing substrate/medium"""

    SOIL = "soil"
    COCO = "coco"
    HYDRO = "hydro"
    SOILLESS = "soilless"
    OTHER = "other"

    def __str__(self):
        return self.value

    @property
    def display_name(self) -> str:
        return _SUBSTRATE_NAMES[self]


_SUBSTRATE_NAMES = {
    SubstrateType.SOIL: "Soil",
    SubstrateType.COCO: "Coco Coir",
    SubstrateType.HYDRO: "Hydroponic",
    SubstrateType.SOILLESS: "Soilless Mix",
    SubstrateType.OTHER: "Other",
}


class StressTag(str, Enum):
    """Tags for marking stress or important diary events"""

    HEAT_STRESS = "heat_stress"
    LIGHT_STRESS = "light_stress"
    OVERWATERING = "overwatering"
    UNDERWATERING = "underwatering"
    PESTS = "pests"
    TRAINING = "training"
    TRANSPLANT = "transplant"
    OTHER = "other"

    def __str__(self):
        return self.value
