import math
import os
from typing import Iterable, List, Mapping

from dotenv import load_dotenv

from pollution_catalog.constants import MARINE_SCENE_TOKENS

load_dotenv()


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO")


def server_host() -> str:
    return os.getenv("HOST", "0.0.0.0")


def server_port() -> int:
    return int(os.getenv("PORT", "8000"))


def cors_allow_origins() -> List[str]:
    raw = os.getenv("CORS_ALLOW_ORIGINS", "*")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


# -----------------------------------------------------------------------------
# Shared engine helpers
# -----------------------------------------------------------------------------

def round_half_away(value: float) -> int:
    """
    Round to the nearest integer, halves away from zero.
    Built-in round() rounds halves to even, which would disagree with the
    client and database implementations at x.5.
    """
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


def clamp(value, low, high):
    return max(low, min(value, high))


def is_marine_scene(scene_labels: Iterable[str]) -> bool:
    for label in scene_labels:
        lowered = label.lower()
        if any(token in lowered for token in MARINE_SCENE_TOKENS):
            return True
    return False


def total_items(counts: Mapping[object, int]) -> int:
    return sum(counts.values())


def reported_categories(counts: Mapping[object, int]) -> List[object]:
    """Every category keyed in the report, zero-valued entries included."""
    return list(counts)


def contains_category(counts: Mapping[object, int], *categories: object) -> bool:
    return any(category in counts for category in categories)


def has_category(counts: Mapping[object, int], *categories: object) -> bool:
    """True when any of the categories has a positive count."""
    return any(counts.get(category, 0) > 0 for category in categories)
