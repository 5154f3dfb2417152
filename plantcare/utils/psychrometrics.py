"""
Psychrometric Calculations
==========================

Pure utility functions for air-science derived metrics used in grow environments.

Functions:
- fahrenheit_to_celsius: Temperature conversion
- calculate_svp_kpa: Saturation vapor pressure (helper)
- calculate_vpd_kpa: Vapor Pressure Deficit from Celsius
- calculate_vpd_from_fahrenheit: Vapor Pressure Deficit from Fahrenheit (diary units)

These are stateless calculations suitable for:
- Deriving VPD when a reading is logged (VPD is never entered by hand)
- Classification and alert evaluation
"""
from __future__ import annotations

import math


def fahrenheit_to_celsius(temperature_f: float) -> float:
    """Convert °F to °C."""
    return (temperature_f - 32) * 5 / 9


def calculate_svp_kpa(temperature_c: float) -> float:
    """
    Calculate Saturation Vapor Pressure (SVP) in kPa using Magnus formula.

    SVP = 0.6108 × exp(17.27 × T / (T + 237.3))

    Args:
        temperature_c: Temperature in Celsius

    Returns:
        Saturation vapor pressure in kPa
    """
    return 0.6108 * math.exp((17.27 * temperature_c) / (temperature_c + 237.3))


def calculate_vpd_kpa(temperature_c: float | None, relative_humidity: float | None) -> float | None:
    """
    Calculate Vapor Pressure Deficit (VPD) in kPa from a Celsius temperature.

    Args:
        temperature_c: Temperature in Celsius
        relative_humidity: Relative humidity percentage (0-100)

    Returns:
        VPD in kPa, or None if inputs are None
    """
    if temperature_c is None or relative_humidity is None:
        return None

    svp = calculate_svp_kpa(float(temperature_c))
    avp = svp * (float(relative_humidity) / 100.0)
    return svp - avp


def calculate_vpd_from_fahrenheit(temperature_f: float, humidity_percent: float) -> float:
    """
    Calculate Vapor Pressure Deficit (VPD) in kPa from diary units.

    temp_c = (°F - 32) × 5/9
    VPD    = SVP - SVP × RH/100

    Optimal VPD ranges for plants:
    - Seedlings: 0.4-0.8 kPa
    - Vegetative: 0.8-1.2 kPa
    - Flowering: 1.0-1.5 kPa

    Humidity is not validated; callers must pass a value within 0-100.

    Args:
        temperature_f: Temperature in Fahrenheit
        humidity_percent: Relative humidity percentage (0-100)

    Returns:
        VPD in kPa
    """
    svp = calculate_svp_kpa(fahrenheit_to_celsius(temperature_f))
    avp = svp * (humidity_percent / 100)
    return svp - avp
