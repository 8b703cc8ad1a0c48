"""
Environmental impact estimate: ecosystem risk, cleanup time, volunteers.
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from pydantic import ValidationError

# Allow running as a script without installing as a package
if __package__ is None or __package__ == "":
    sys.path.append(str(Path(__file__).resolve().parent.parent))

from pollution_catalog.constants import PollutionCategory  # noqa: E402
from pollution_catalog.io_utils import load_payload, rejected  # noqa: E402
from pollution_catalog.models import CategoryCounts, ScoreRequest  # noqa: E402
from utils import clamp, contains_category, is_marine_scene, reported_categories, round_half_away, total_items  # noqa: E402


class RiskLevel(str, Enum):
    MINIMAL = "MINIMAL"
    LOW = "LOW"
    MODERATE = "MODERATE"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


RISK_LABELS = {
    1: RiskLevel.MINIMAL,
    2: RiskLevel.LOW,
    3: RiskLevel.MODERATE,
    4: RiskLevel.HIGH,
    5: RiskLevel.CRITICAL,
}


@dataclass(frozen=True)
class ImpactEstimate:
    ecosystem_risk: int  # 1-5
    risk_level: RiskLevel
    cleanup_minutes: int  # 5-180
    volunteers_needed: int  # 1-10
    cleanup_formatted: str
    volunteers_formatted: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ecosystem_risk": self.ecosystem_risk,
            "risk_level": self.risk_level.value,
            "cleanup_minutes": self.cleanup_minutes,
            "cleanup_formatted": self.cleanup_formatted,
            "volunteers_needed": self.volunteers_needed,
            "volunteers_formatted": self.volunteers_formatted,
        }


def risk_label(risk: int) -> RiskLevel:
    return RISK_LABELS.get(risk, RiskLevel.LOW)


def format_cleanup_time(minutes: int) -> str:
    if minutes < 60:
        return f"~{minutes} min"
    hours = round_half_away(minutes / 60)
    return f"~{hours} hr{'s' if hours > 1 else ''}"


def format_volunteers(count: int) -> str:
    if count == 1:
        return "1 volunteer"
    if count <= 3:
        return f"{count} volunteers"
    return f"{count}+ volunteers"


def _volunteer_tier(item_total: int) -> int:
    if item_total >= 50:
        return 8
    if item_total >= 30:
        return 5
    if item_total >= 15:
        return 3
    if item_total >= 8:
        return 2
    return 1


def calculate_impact(counts: CategoryCounts, severity: int, scene_labels: Sequence[str] = ()) -> ImpactEstimate:
    item_total = total_items(counts)

    risk = severity
    if is_marine_scene(scene_labels):
        risk = clamp(risk + 1, 1, 5)
    if contains_category(counts, PollutionCategory.OIL, PollutionCategory.SEWAGE):
        risk = clamp(risk + 1, 1, 5)
    # out-of-range input severity with no boosts
    risk = clamp(risk, 1, 5)

    # ~2.5 min per item; fishing gear adds a flat 15
    minutes = round_half_away(item_total * 2.5)
    if contains_category(counts, PollutionCategory.FISHING_GEAR):
        minutes += 15
    minutes = clamp(minutes, 5, 180)

    volunteers = _volunteer_tier(item_total)
    if len(reported_categories(counts)) >= 3:
        volunteers += 1
    volunteers = clamp(volunteers, 1, 10)

    return ImpactEstimate(
        ecosystem_risk=risk,
        risk_level=risk_label(risk),
        cleanup_minutes=minutes,
        volunteers_needed=volunteers,
        cleanup_formatted=format_cleanup_time(minutes),
        volunteers_formatted=format_volunteers(volunteers),
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Estimate environmental impact of a pollution report")
    parser.add_argument("source", help="Path to JSON score request (user_counts, severity, scene_labels)")
    args = parser.parse_args(argv)

    try:
        request = ScoreRequest.model_validate(load_payload(args.source))
    except (ValidationError, ValueError) as exc:
        json.dump(rejected(f"invalid_payload: {exc}"), fp=sys.stdout, indent=2)
        print()
        return 1

    impact = calculate_impact(request.user_counts, request.severity, request.scene_labels)
    json.dump({"impact": impact.to_dict()}, fp=sys.stdout, indent=2)
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
