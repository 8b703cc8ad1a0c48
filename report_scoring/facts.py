from __future__ import annotations

from typing import Sequence

from pollution_catalog.constants import PollutionCategory
from pollution_catalog.models import CategoryCounts
from utils import contains_category

OIL_FACT = "Oil on beaches takes 20+ years to degrade and affects 150+ marine species."
SEWAGE_FACT = "Sewage pollution causes harmful algae blooms that deplete oxygen and kill marine life."
GHOST_NET_FACT = "Abandoned fishing gear (ghost nets) kills 650,000 marine animals annually."
PLASTIC_BULK_FACT = "Plastic bottles take 450 years to decompose. You're preventing decades of harm!"
PLASTIC_FACT = "Every plastic bottle removed saves marine life from ingesting microplastics."
DEBRIS_FACT = "Marine debris injures or kills over 100,000 marine animals each year globally."
GENERIC_FACT = "Ocean pollution affects 267 species worldwide, including 86% of sea turtles."

PLASTIC_BULK_THRESHOLD = 10


def get_educational_fact(counts: CategoryCounts, scene_labels: Sequence[str] = ()) -> str:
    """Most impactful category first; the first match wins."""
    if contains_category(counts, PollutionCategory.OIL):
        return OIL_FACT
    if contains_category(counts, PollutionCategory.SEWAGE):
        return SEWAGE_FACT
    if contains_category(counts, PollutionCategory.FISHING_GEAR):
        return GHOST_NET_FACT
    if contains_category(counts, PollutionCategory.PLASTIC):
        if counts[PollutionCategory.PLASTIC] >= PLASTIC_BULK_THRESHOLD:
            return PLASTIC_BULK_FACT
        return PLASTIC_FACT
    if contains_category(counts, PollutionCategory.DEBRIS):
        return DEBRIS_FACT
    return GENERIC_FACT
