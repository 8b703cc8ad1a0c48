"""
Server-side re-verification of client-submitted scores.

The client computes weight and XP before submission; the server recomputes
both with the same rules and treats its own values as authoritative. Integer
outputs must match exactly, weights within WEIGHT_TOLERANCE_KG.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict

from pollution_catalog.constants import (
    CLIENT_XP_INFLATION_PENALTY,
    CLIENT_XP_INFLATION_RATIO,
    FRAUD_FLAG_THRESHOLD,
    WEIGHT_TOLERANCE_KG,
)
from pollution_catalog.models import ClientSubmission
from report_scoring.fraud import FraudAnalysis, detect_fraud
from report_scoring.weight import calculate_total_weight
from report_scoring.xp import calculate_xp
from utils import clamp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VerificationResult:
    server_weight: float
    server_xp: int
    client_xp: int
    weight_matches: bool
    xp_matches: bool
    fraud_analysis: FraudAnalysis

    def to_dict(self) -> Dict[str, Any]:
        return {
            "server_weight": self.server_weight,
            "server_xp": self.server_xp,
            "client_xp": self.client_xp,
            "weight_matches": self.weight_matches,
            "xp_matches": self.xp_matches,
            "fraud_analysis": self.fraud_analysis.to_dict(),
        }


def verify_submission(submission: ClientSubmission) -> VerificationResult:
    counts = submission.pollution_counts
    server_weight = calculate_total_weight(counts)
    # photo is mandatory for submission
    server_xp = calculate_xp(
        counts,
        submission.severity,
        has_location=submission.has_location,
        has_photo=True,
        scene_labels=submission.scene_labels,
    )

    fraud = detect_fraud(counts, submission.ai_baseline, submission.severity)
    if submission.client_xp > server_xp * CLIENT_XP_INFLATION_RATIO:
        score = clamp(fraud.fraud_score + CLIENT_XP_INFLATION_PENALTY, 0.0, 1.0)
        fraud = replace(
            fraud,
            fraud_score=score,
            is_suspicious=score >= FRAUD_FLAG_THRESHOLD,
            warnings=fraud.warnings + (
                f"Client XP ({submission.client_xp}) exceeds server calculation ({server_xp}) by >50%",
            ),
        )
        logger.warning(
            "Client XP exceeds server calculation",
            extra={"client_xp": submission.client_xp, "server_xp": server_xp},
        )

    weight_matches = (
        submission.client_weight_kg is None
        or abs(submission.client_weight_kg - server_weight) <= WEIGHT_TOLERANCE_KG
    )

    return VerificationResult(
        server_weight=server_weight,
        server_xp=server_xp,
        client_xp=submission.client_xp,
        weight_matches=weight_matches,
        xp_matches=submission.client_xp == server_xp,
        fraud_analysis=fraud,
    )
