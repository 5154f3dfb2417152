"""
Domain Package
==============
Plant, diary and watering objects plus the pure algorithms that operate on
them. Nothing in this package performs I/O; repositories and the event bus
are injected by the application services.
"""

from .alert_threshold import AlertThreshold, AlertThresholdEvaluator, AlertViolation, is_critical
from .correlation import CorrelationDetector, EventCorrelation
from .environmental_stats import EnvironmentalAnalyzer, EnvironmentalHealthScore, EnvironmentalStats, MetricValues
from .environmental_status import EnvironmentalStatusResult, classify_environment, classify_reading
from .environmental_thresholds import EnvironmentalAlert, EnvironmentalThresholds
from .event_grouping import EnvironmentalEventGroup, EventGrouper
from .light import DLIAdjustment, DLIAdjustmentKind, DLICalculator
from .plant import EnvironmentalReading, Event, LightMeasurement, Plant
from .watering import IntervalBounds, WateringState, WateringStatus
from .watering_scheduler import WateringScheduler

__all__ = [
    # Plants & diary
    "Plant",
    "Event",
    "EnvironmentalReading",
    "LightMeasurement",
    # Watering
    "IntervalBounds",
    "WateringState",
    "WateringStatus",
    "WateringScheduler",
    # Environment classification & alerts
    "classify_environment",
    "classify_reading",
    "EnvironmentalStatusResult",
    "AlertThreshold",
    "AlertThresholdEvaluator",
    "AlertViolation",
    "is_critical",
    "EnvironmentalAlert",
    "EnvironmentalThresholds",
    # Aggregation & analytics
    "EnvironmentalEventGroup",
    "EventGrouper",
    "CorrelationDetector",
    "EventCorrelation",
    "EnvironmentalStats",
    "EnvironmentalHealthScore",
    "EnvironmentalAnalyzer",
    "MetricValues",
    # Light
    "DLICalculator",
    "DLIAdjustment",
    "DLIAdjustmentKind",
]
