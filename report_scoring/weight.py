"""
Weight estimation from category counts.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Dict

from pollution_catalog.constants import AVERAGE_WEIGHTS_KG, DEFAULT_WEIGHT_KG, PollutionCategory
from pollution_catalog.models import CategoryCounts
from utils import round_half_away


def weight_per_item(category: PollutionCategory) -> float:
    return AVERAGE_WEIGHTS_KG.get(category, DEFAULT_WEIGHT_KG)


def calculate_total_weight(counts: CategoryCounts) -> float:
    total = 0.0
    for category, count in counts.items():
        total += weight_per_item(category) * count
    return total


def calculate_weight_breakdown(counts: CategoryCounts) -> Dict[PollutionCategory, float]:
    return {category: weight_per_item(category) * count for category, count in counts.items()}


def _fixed(value: float, places: int) -> str:
    # Exact binary value, halves rounded up (matches the client's fixed-point formatting).
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_weight(weight_kg: float) -> str:
    """
    Display string for a weight: "< 1 g", whole grams below 1 kg,
    two decimals below 10 kg, one decimal above.
    """
    if weight_kg < 0.001:
        return "< 1 g"
    if weight_kg < 1.0:
        return f"{round_half_away(weight_kg * 1000)} g"
    if weight_kg < 10.0:
        return f"{_fixed(weight_kg, 2)} kg"
    return f"{_fixed(weight_kg, 1)} kg"
