"""
Report scoring pipeline.

Runs every engine component over one submission and returns the bundle handed
to the report store: weight, XP, severity suggestion, fraud analysis, impact
estimate and an educational fact. Pure and synchronous; safe to call from any
context.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple

from pollution_catalog.constants import PEOPLE_DOMINATED_WARNING, PollutionCategory
from pollution_catalog.mapping import dominant_category, is_people_dominated, map_detections
from pollution_catalog.models import CategoryCounts, ScoreRequest, counts_to_dict
from report_scoring.facts import get_educational_fact
from report_scoring.fraud import FraudAnalysis, detect_fraud
from report_scoring.impact import ImpactEstimate, calculate_impact
from report_scoring.severity import calculate_severity_heuristic
from report_scoring.weight import calculate_total_weight, calculate_weight_breakdown, format_weight
from report_scoring.xp import calculate_xp_with_fraud_check, get_xp_breakdown

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportScore:
    total_weight: float
    weight_breakdown: Mapping[PollutionCategory, float]
    weight_formatted: str
    xp_earned: int
    xp_breakdown: Mapping[str, int]
    severity_suggestion: int
    fraud_analysis: FraudAnalysis
    impact: ImpactEstimate
    educational_fact: str
    ai_baseline: Mapping[PollutionCategory, int]
    likely_category: PollutionCategory | None
    detection_warnings: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_weight": self.total_weight,
            "weight_breakdown": {c.value: w for c, w in self.weight_breakdown.items()},
            "weight_formatted": self.weight_formatted,
            "xp_earned": self.xp_earned,
            "xp_breakdown": dict(self.xp_breakdown),
            "severity_suggestion": self.severity_suggestion,
            "fraud_analysis": self.fraud_analysis.to_dict(),
            "impact": self.impact.to_dict(),
            "educational_fact": self.educational_fact,
            "ai_baseline": counts_to_dict(self.ai_baseline),
            "likely_category": self.likely_category.value if self.likely_category else None,
            "detection_warnings": list(self.detection_warnings),
        }


def resolve_baseline(request: ScoreRequest) -> CategoryCounts:
    """Explicit baseline wins; otherwise map the raw detections; otherwise empty."""
    if request.ai_baseline is not None:
        return dict(request.ai_baseline)
    if request.detections is not None:
        return map_detections(request.detections.raw_label_counts)
    return {}


def resolve_scene_labels(request: ScoreRequest) -> List[str]:
    if request.scene_labels:
        return list(request.scene_labels)
    if request.detections is not None:
        return list(request.detections.scene_labels)
    return []


def score_report(request: ScoreRequest) -> ReportScore:
    counts = request.user_counts
    baseline = resolve_baseline(request)
    scene_labels = resolve_scene_labels(request)

    detection_warnings: List[str] = []
    if request.detections is not None and is_people_dominated(request.detections):
        detection_warnings.append(PEOPLE_DOMINATED_WARNING)

    total_weight = calculate_total_weight(counts)
    fraud = detect_fraud(counts, baseline, request.severity)
    xp = calculate_xp_with_fraud_check(
        counts,
        baseline,
        request.severity,
        request.has_location,
        request.has_photo,
        scene_labels,
    )

    result = ReportScore(
        total_weight=total_weight,
        weight_breakdown=MappingProxyType(calculate_weight_breakdown(counts)),
        weight_formatted=format_weight(total_weight),
        xp_earned=xp,
        xp_breakdown=MappingProxyType(
            get_xp_breakdown(counts, request.severity, request.has_location, request.has_photo, scene_labels)
        ),
        severity_suggestion=calculate_severity_heuristic(counts, scene_labels),
        fraud_analysis=fraud,
        impact=calculate_impact(counts, request.severity, scene_labels),
        educational_fact=get_educational_fact(counts, scene_labels),
        ai_baseline=MappingProxyType(baseline),
        likely_category=dominant_category(baseline),
        detection_warnings=tuple(detection_warnings),
    )
    logger.info(
        "Report scored",
        extra={"xp_earned": xp, "total_weight": total_weight, "fraud_score": fraud.fraud_score},
    )
    return result
