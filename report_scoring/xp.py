"""
XP / Credits for a report.

Strictly additive: report base, photo/location/scene bonuses, severity and
variety bonuses, plus cleanup bonuses scaled by item count and weight (each
capped so bulk reports cannot run away with the leaderboard).
"""

from __future__ import annotations

from typing import Dict, Sequence

from pollution_catalog.constants import (
    BASE_REPORT_XP,
    ENVIRONMENT_BONUS,
    LOCATION_BONUS,
    MAX_ITEM_BONUS,
    MAX_WEIGHT_BONUS,
    MIN_PENALIZED_XP,
    PHOTO_BONUS,
    SEVERITY_MULTIPLIER,
    VARIETY_BONUS,
    VOLUME_TIER_BONUSES,
    WEIGHT_XP_PER_KG,
)
from pollution_catalog.models import CategoryCounts
from report_scoring.fraud import detect_fraud
from report_scoring.weight import calculate_total_weight
from utils import clamp, is_marine_scene, reported_categories, round_half_away, total_items


def _report_bonus(has_location: bool, has_photo: bool) -> int:
    xp = BASE_REPORT_XP
    if has_photo:
        xp += PHOTO_BONUS
    if has_location:
        xp += LOCATION_BONUS
    return xp


def _location_bonus(scene_labels: Sequence[str]) -> int:
    return ENVIRONMENT_BONUS if is_marine_scene(scene_labels) else 0


def _severity_bonus(severity: int) -> int:
    # Not clamped: severity <= 0 gives a negative contribution.
    return (severity - 1) * SEVERITY_MULTIPLIER


def _variety_bonus(counts: CategoryCounts) -> int:
    category_count = len(reported_categories(counts))
    if category_count > 1:
        return (category_count - 1) * VARIETY_BONUS
    return 0


def item_bonus(item_total: int) -> int:
    return clamp(item_total, 0, MAX_ITEM_BONUS)


def weight_bonus(weight_kg: float) -> int:
    return clamp(round_half_away(weight_kg * WEIGHT_XP_PER_KG), 0, MAX_WEIGHT_BONUS)


def volume_tier_bonus(item_total: int) -> int:
    for threshold, bonus in VOLUME_TIER_BONUSES:
        if item_total >= threshold:
            return bonus
    return 0


def _cleanup_bonus(counts: CategoryCounts) -> int:
    item_total = total_items(counts)
    return (
        item_bonus(item_total)
        + weight_bonus(calculate_total_weight(counts))
        + volume_tier_bonus(item_total)
    )


def calculate_xp(
    counts: CategoryCounts,
    severity: int,
    has_location: bool,
    has_photo: bool,
    scene_labels: Sequence[str] = (),
) -> int:
    return (
        _report_bonus(has_location, has_photo)
        + _location_bonus(scene_labels)
        + _severity_bonus(severity)
        + _variety_bonus(counts)
        + _cleanup_bonus(counts)
    )


def get_xp_breakdown(
    counts: CategoryCounts,
    severity: int,
    has_location: bool,
    has_photo: bool,
    scene_labels: Sequence[str] = (),
) -> Dict[str, int]:
    """
    Group the XP terms into display buckets. "Report" is always present, the
    others only when non-zero, so the values always sum to calculate_xp().
    """
    breakdown = {"Report": _report_bonus(has_location, has_photo)}

    location = _location_bonus(scene_labels)
    if location:
        breakdown["Location"] = location

    cleanup = _cleanup_bonus(counts)
    if cleanup:
        breakdown["Cleanup"] = cleanup

    impact = _severity_bonus(severity) + _variety_bonus(counts)
    if impact:
        breakdown["Impact"] = impact

    return breakdown


def calculate_xp_with_fraud_check(
    counts: CategoryCounts,
    ai_baseline: CategoryCounts,
    severity: int,
    has_location: bool,
    has_photo: bool,
    scene_labels: Sequence[str] = (),
) -> int:
    xp = calculate_xp(counts, severity, has_location, has_photo, scene_labels)

    fraud = detect_fraud(counts, ai_baseline, severity)
    if fraud.is_suspicious:
        penalty = round_half_away(xp * fraud.fraud_score)
        # floor at MIN_PENALIZED_XP, but a penalty never raises XP
        xp = min(xp, max(xp - penalty, MIN_PENALIZED_XP))

    return xp
