"""
Pollution catalog: categories, per-item weights, count ceilings and the
detector label table.
"""

from .constants import (
    AVERAGE_WEIGHTS_KG,
    DEFAULT_WEIGHT_KG,
    MAX_REASONABLE_COUNTS,
    OBJECT_TO_CATEGORY,
    PollutionCategory,
)
from .mapping import dominant_category, is_people_dominated, map_detections, map_label
from .models import CategoryCounts, ClientSubmission, DetectionInput, FraudRequest, ScoreRequest

__all__ = [
    "AVERAGE_WEIGHTS_KG",
    "DEFAULT_WEIGHT_KG",
    "MAX_REASONABLE_COUNTS",
    "OBJECT_TO_CATEGORY",
    "PollutionCategory",
    "CategoryCounts",
    "ClientSubmission",
    "DetectionInput",
    "FraudRequest",
    "ScoreRequest",
    "map_label",
    "map_detections",
    "dominant_category",
    "is_people_dominated",
]
