"""
Detector label mapping.

Translates raw detector labels (COCO class names) into pollution categories.
The lookup table lives in constants.OBJECT_TO_CATEGORY and is curated by hand
against the detector's class list; it is not derived at runtime.
"""

import logging
from typing import Dict, Mapping, Optional

from .constants import (
    DETECTOR_CLASSES,
    OBJECT_TO_CATEGORY,
    PEOPLE_DOMINATED_RATIO,
    PollutionCategory,
)
from .models import CategoryCounts, DetectionInput

logger = logging.getLogger(__name__)

_MODEL_CLASSES = frozenset(DETECTOR_CLASSES)


def map_label(label: str) -> Optional[PollutionCategory]:
    """Return the category for a detector label, or None if unmapped."""
    return OBJECT_TO_CATEGORY.get(label.lower())


def map_detections(raw_label_counts: Mapping[str, int]) -> CategoryCounts:
    """
    Aggregate raw label counts into category counts.
    Unmapped labels are dropped silently.
    """
    counts: Dict[PollutionCategory, int] = {}
    for label, count in raw_label_counts.items():
        category = map_label(label)
        if category is None:
            if label.lower() not in _MODEL_CLASSES:
                logger.debug("Label outside detector vocabulary", extra={"label": label})
            continue
        counts[category] = counts.get(category, 0) + count
    return counts


def dominant_category(counts: CategoryCounts) -> Optional[PollutionCategory]:
    best: Optional[PollutionCategory] = None
    best_count = 0
    for category in PollutionCategory:
        count = counts.get(category, 0)
        if count > best_count:
            best, best_count = category, count
    return best


def is_people_dominated(detection: DetectionInput) -> bool:
    total = detection.people_count + sum(detection.raw_label_counts.values())
    return detection.people_count > total * PEOPLE_DOMINATED_RATIO
