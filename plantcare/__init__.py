"""
plantcare
=========

Domain core of a personal plant-care tracker: VPD derivation, environmental
classification and alerting, adaptive watering intervals, and event
aggregation/correlation for the plant diary.
"""

__version__ = "1.0.0"
