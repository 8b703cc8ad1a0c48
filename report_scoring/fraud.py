"""
Fraud detection: compare user-declared counts against the detector baseline.

Every rule that fires appends a warning and adds to a running score; the score
is clamped to [0, 1] once all rules have run. A flagged report is never
refused, only rewarded less (see xp.calculate_xp_with_fraud_check).
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from pydantic import ValidationError

# Allow running as a script without installing as a package
if __package__ is None or __package__ == "":
    sys.path.append(str(Path(__file__).resolve().parent.parent))

from pollution_catalog.constants import (  # noqa: E402
    EMPTY_BASELINE_MIN_ITEMS,
    EMPTY_BASELINE_PENALTY,
    FRAUD_FLAG_THRESHOLD,
    INFLATION_PENALTY,
    INFLATION_RATIO,
    MAX_REASONABLE_COUNTS,
    PER_CATEGORY_INFLATION_PENALTY,
    PER_CATEGORY_INFLATION_RATIO,
    SEVERITY_MISMATCH_DELTA,
    SEVERITY_MISMATCH_PENALTY,
    UNBASELINED_CATEGORY_PENALTY,
    UNREASONABLE_COUNT_PENALTY,
    PollutionCategory,
)
from pollution_catalog.io_utils import load_payload, rejected  # noqa: E402
from pollution_catalog.models import CategoryCounts, FraudRequest, counts_to_dict  # noqa: E402
from report_scoring.severity import calculate_severity_heuristic  # noqa: E402
from utils import clamp, total_items  # noqa: E402

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FraudAnalysis:
    is_suspicious: bool
    fraud_score: float  # 0.0 clean .. 1.0 highly suspicious; not a probability
    warnings: Tuple[str, ...]
    suggested_counts: Mapping[PollutionCategory, int]  # detector baseline, read-only copy

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_suspicious": self.is_suspicious,
            "fraud_score": self.fraud_score,
            "warnings": list(self.warnings),
            "suggested_counts": counts_to_dict(self.suggested_counts),
        }


def max_reasonable_count(category: PollutionCategory) -> int:
    return MAX_REASONABLE_COUNTS.get(category, MAX_REASONABLE_COUNTS[PollutionCategory.OTHER])


def _label(category: PollutionCategory) -> str:
    if isinstance(category, PollutionCategory):
        return category.display_label
    return str(category)


def detect_fraud(user_counts: CategoryCounts, ai_baseline: CategoryCounts, severity: int) -> FraudAnalysis:
    """
    Rules, in warning order:
    - empty baseline but more than 10 user items (soft, +0.25)
    - total inflated beyond 3x the baseline (+0.4)
    - per category: inflated beyond 2x its baseline (+0.2), above the category ceiling (+0.3)
    - chosen severity 2+ levels from the count-based expectation (+0.2)
    - category entered that the baseline does not contain (+0.1 each)
    """
    warnings: List[str] = []
    score = 0.0

    user_total = total_items(user_counts)
    ai_total = total_items(ai_baseline)

    # The detector can miss everything on a poor photo; only warn on large counts.
    if ai_total == 0 and user_total > EMPTY_BASELINE_MIN_ITEMS:
        warnings.append(f"AI detected no items, but you entered {user_total} - please verify your counts")
        score += EMPTY_BASELINE_PENALTY

    if ai_total > 0 and user_total > ai_total * INFLATION_RATIO:
        pct = int((user_total / ai_total) * 100)
        warnings.append(f"Count inflated {pct}% above AI detection")
        score += INFLATION_PENALTY

    for category, user_count in user_counts.items():
        ai_count = ai_baseline.get(category, 0)
        if ai_count > 0 and user_count > ai_count * PER_CATEGORY_INFLATION_RATIO:
            pct = int((user_count / ai_count) * 100)
            warnings.append(f"{_label(category)} count inflated {pct}%")
            score += PER_CATEGORY_INFLATION_PENALTY

        ceiling = max_reasonable_count(category)
        if user_count > ceiling:
            warnings.append(f"{_label(category)}: {user_count} items exceeds reasonable maximum ({ceiling})")
            score += UNREASONABLE_COUNT_PENALTY

    # scene labels deliberately not considered here
    expected = calculate_severity_heuristic(user_counts)
    if abs(severity - expected) >= SEVERITY_MISMATCH_DELTA:
        warnings.append(f"Severity ({severity}) doesn't match item count (expected ~{expected})")
        score += SEVERITY_MISMATCH_PENALTY

    for category, user_count in user_counts.items():
        if category not in ai_baseline and user_count > 0:
            warnings.append(f"{_label(category)} added but not detected by AI")
            score += UNBASELINED_CATEGORY_PENALTY

    score = clamp(score, 0.0, 1.0)
    analysis = FraudAnalysis(
        is_suspicious=score >= FRAUD_FLAG_THRESHOLD,
        fraud_score=score,
        warnings=tuple(warnings),
        suggested_counts=MappingProxyType(dict(ai_baseline)),
    )

    logger.debug(
        "Fraud check evaluated",
        extra={"user_total": user_total, "ai_total": ai_total, "fraud_score": score},
    )
    if analysis.is_suspicious:
        logger.info(
            "Report flagged as suspicious",
            extra={"fraud_score": score, "warning_count": len(warnings)},
        )
    return analysis


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run fraud detection on user counts vs detector baseline")
    parser.add_argument("source", help="Path to JSON with user_counts, ai_baseline, severity")
    args = parser.parse_args(argv)

    try:
        request = FraudRequest.model_validate(load_payload(args.source))
    except (ValidationError, ValueError) as exc:
        json.dump(rejected(f"invalid_payload: {exc}"), fp=sys.stdout, indent=2)
        print()
        return 1

    analysis = detect_fraud(request.user_counts, request.ai_baseline, request.severity)
    json.dump({"fraud_analysis": analysis.to_dict()}, fp=sys.stdout, indent=2)
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
