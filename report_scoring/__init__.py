"""
Report scoring engine: weight, severity, fraud, XP, impact and facts.
"""

from .facts import get_educational_fact
from .fraud import FraudAnalysis, detect_fraud
from .impact import ImpactEstimate, RiskLevel, calculate_impact
from .pipeline import ReportScore, score_report
from .severity import calculate_severity_heuristic
from .verification import VerificationResult, verify_submission
from .weight import calculate_total_weight, calculate_weight_breakdown, format_weight
from .xp import calculate_xp, calculate_xp_with_fraud_check, get_xp_breakdown

__all__ = [
    "FraudAnalysis",
    "ImpactEstimate",
    "ReportScore",
    "RiskLevel",
    "VerificationResult",
    "calculate_impact",
    "calculate_severity_heuristic",
    "calculate_total_weight",
    "calculate_weight_breakdown",
    "calculate_xp",
    "calculate_xp_with_fraud_check",
    "detect_fraud",
    "format_weight",
    "get_educational_fact",
    "get_xp_breakdown",
    "score_report",
    "verify_submission",
]
