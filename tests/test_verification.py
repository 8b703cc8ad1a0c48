import pytest

from pollution_catalog.models import ClientSubmission
from report_scoring.verification import verify_submission


def _submission(**overrides) -> ClientSubmission:
    payload = {
        "pollution_counts": {"plastic": 5},
        "ai_baseline": {"plastic": 5},
        "scene_labels": [],
        "severity": 3,
        "has_location": True,
        "client_xp": 60,
        "client_weight_kg": 0.125,
    }
    payload.update(overrides)
    return ClientSubmission.model_validate(payload)


def test_matching_client_values() -> None:
    result = verify_submission(_submission())
    # photo bonus always applied server-side
    assert result.server_xp == 60
    assert result.server_weight == pytest.approx(0.125)
    assert result.xp_matches is True
    assert result.weight_matches is True
    assert result.fraud_analysis.warnings == ()


def test_weight_tolerance() -> None:
    assert verify_submission(_submission(client_weight_kg=0.1255)).weight_matches is True
    assert verify_submission(_submission(client_weight_kg=0.2)).weight_matches is False
    assert verify_submission(_submission(client_weight_kg=None)).weight_matches is True


def test_client_xp_mismatch_without_inflation() -> None:
    result = verify_submission(_submission(client_xp=90))
    assert result.xp_matches is False
    assert result.fraud_analysis.warnings == ()


def test_client_xp_inflation_adds_warning_and_score() -> None:
    result = verify_submission(_submission(client_xp=91))
    assert result.fraud_analysis.warnings == ("Client XP (91) exceeds server calculation (60) by >50%",)
    assert result.fraud_analysis.fraud_score == pytest.approx(0.2)
    assert result.fraud_analysis.is_suspicious is False


def test_client_xp_inflation_can_cross_threshold() -> None:
    # ceiling warning alone is 0.3; client inflation pushes it to 0.5
    result = verify_submission(
        _submission(pollution_counts={"plastic": 600}, ai_baseline={"plastic": 600}, severity=5, client_xp=500)
    )
    assert result.server_xp == 160
    assert result.fraud_analysis.fraud_score == pytest.approx(0.5)
    assert result.fraud_analysis.is_suspicious is True
    assert result.fraud_analysis.warnings[-1] == "Client XP (500) exceeds server calculation (160) by >50%"


def test_client_xp_inflation_score_is_capped() -> None:
    result = verify_submission(
        _submission(
            pollution_counts={"plastic": 1000, "debris": 2000, "oil": 100},
            ai_baseline={},
            severity=5,
            client_xp=5000,
        )
    )
    assert result.fraud_analysis.fraud_score == 1.0
    assert len(result.fraud_analysis.warnings) == 8
