"""
Severity suggestion (1-5) from item counts and scene context.

Also used by the fraud detector as the expected severity for a set of counts.
"""

from __future__ import annotations

from typing import Sequence

from pollution_catalog.constants import PollutionCategory
from pollution_catalog.models import CategoryCounts
from utils import clamp, has_category, is_marine_scene, total_items


def _base_severity(item_total: int) -> int:
    if item_total >= 20:
        return 5
    if item_total >= 10:
        return 4
    if item_total >= 5:
        return 3
    if item_total >= 2:
        return 2
    return 1


def calculate_severity_heuristic(counts: CategoryCounts, scene_labels: Sequence[str] = ()) -> int:
    severity = _base_severity(total_items(counts))

    # hazardous categories
    if has_category(counts, PollutionCategory.FISHING_GEAR, PollutionCategory.OIL):
        severity = clamp(severity + 1, 1, 5)

    if is_marine_scene(scene_labels):
        severity = clamp(severity + 1, 1, 5)

    return severity
