import dataclasses
import itertools

import pytest

from pollution_catalog.constants import PollutionCategory
from report_scoring.fraud import detect_fraud

P = PollutionCategory


def test_clean_when_counts_match_baseline() -> None:
    result = detect_fraud({P.PLASTIC: 5}, {P.PLASTIC: 5}, severity=3)
    assert result.is_suspicious is False
    assert result.fraud_score == 0.0
    assert result.warnings == ()


def test_gross_inflation_above_three_times_baseline() -> None:
    result = detect_fraud({P.PLASTIC: 30}, {P.PLASTIC: 5}, severity=3)
    assert result.fraud_score >= 0.4
    assert any("inflated" in w for w in result.warnings)
    assert result.warnings == (
        "Count inflated 600% above AI detection",
        "Plastic count inflated 600%",
        "Severity (3) doesn't match item count (expected ~5)",
    )
    assert result.fraud_score == pytest.approx(0.8)
    assert result.is_suspicious is True


def test_empty_baseline_soft_warning_above_ten_items() -> None:
    result = detect_fraud({P.PLASTIC: 15}, {}, severity=3)
    assert result.warnings == (
        "AI detected no items, but you entered 15 - please verify your counts",
        "Plastic added but not detected by AI",
    )
    assert result.fraud_score == pytest.approx(0.35)
    assert result.is_suspicious is False


def test_empty_baseline_no_soft_warning_at_or_below_ten_items() -> None:
    result = detect_fraud({P.PLASTIC: 10}, {}, severity=4)
    assert not any("AI detected no items" in w for w in result.warnings)
    assert result.warnings == ("Plastic added but not detected by AI",)


def test_per_category_inflation_only() -> None:
    # 11 vs 5 total is under 3x but plastic is over 2x its own baseline
    result = detect_fraud({P.PLASTIC: 11}, {P.PLASTIC: 5}, severity=4)
    assert result.warnings == ("Plastic count inflated 220%",)
    assert result.fraud_score == pytest.approx(0.2)


def test_unreasonable_count_per_category() -> None:
    result = detect_fraud({P.PLASTIC: 600}, {P.PLASTIC: 600}, severity=5)
    assert result.warnings == ("Plastic: 600 items exceeds reasonable maximum (500)",)
    assert result.fraud_score == pytest.approx(0.3)


@pytest.mark.parametrize(
    "category, ceiling",
    [
        (P.PLASTIC, 500),
        (P.OIL, 50),
        (P.DEBRIS, 1000),
        (P.SEWAGE, 20),
        (P.FISHING_GEAR, 100),
        (P.CONTAINER, 200),
        (P.OTHER, 500),
    ],
)
def test_category_ceilings(category: PollutionCategory, ceiling: int) -> None:
    at_ceiling = detect_fraud({category: ceiling}, {category: ceiling}, severity=5)
    over_ceiling = detect_fraud({category: ceiling + 1}, {category: ceiling + 1}, severity=5)
    assert not any("exceeds reasonable maximum" in w for w in at_ceiling.warnings)
    assert f"({ceiling})" in over_ceiling.warnings[0]


def test_severity_mismatch() -> None:
    result = detect_fraud({P.PLASTIC: 2}, {P.PLASTIC: 2}, severity=5)
    assert result.warnings == ("Severity (5) doesn't match item count (expected ~2)",)


def test_severity_mismatch_ignores_scene_context() -> None:
    # one item -> expected 1; a severity of 2 is within tolerance
    assert detect_fraud({P.PLASTIC: 1}, {P.PLASTIC: 1}, severity=2).warnings == ()
    assert detect_fraud({P.PLASTIC: 1}, {P.PLASTIC: 1}, severity=3).fraud_score == pytest.approx(0.2)


def test_out_of_range_severity_still_checked() -> None:
    result = detect_fraud({P.PLASTIC: 5}, {P.PLASTIC: 5}, severity=9)
    assert result.warnings == ("Severity (9) doesn't match item count (expected ~3)",)


def test_category_not_in_baseline() -> None:
    result = detect_fraud({P.PLASTIC: 5, P.OIL: 2}, {P.PLASTIC: 5}, severity=3)
    assert result.warnings == ("Oil added but not detected by AI",)
    assert result.fraud_score == pytest.approx(0.1)


def test_zero_count_category_not_flagged_as_unbaselined() -> None:
    result = detect_fraud({P.PLASTIC: 5, P.OIL: 0}, {P.PLASTIC: 5}, severity=3)
    assert result.warnings == ()


def test_per_category_checks_run_in_user_category_order() -> None:
    result = detect_fraud(
        {P.PLASTIC: 30, P.DEBRIS: 1200},
        {P.PLASTIC: 5, P.DEBRIS: 1000},
        severity=5,
    )
    assert result.warnings == (
        "Plastic count inflated 600%",
        "Debris: 1200 items exceeds reasonable maximum (1000)",
    )
    assert result.fraud_score == pytest.approx(0.5)
    assert result.is_suspicious is True


def test_score_is_capped_at_one() -> None:
    result = detect_fraud({P.PLASTIC: 1000, P.DEBRIS: 2000, P.OIL: 100}, {}, severity=5)
    assert result.fraud_score == 1.0
    assert result.is_suspicious is True
    assert len(result.warnings) == 7


def test_threshold_exactly_half_is_suspicious() -> None:
    result = detect_fraud({P.PLASTIC: 5, P.DEBRIS: 12}, {P.PLASTIC: 5}, severity=4)
    assert result.warnings == (
        "Count inflated 340% above AI detection",
        "Debris added but not detected by AI",
    )
    assert result.fraud_score == 0.5
    assert result.is_suspicious is True


def test_suggested_counts_echo_baseline_and_result_is_frozen() -> None:
    baseline = {P.PLASTIC: 5}
    result = detect_fraud({P.PLASTIC: 6}, baseline, severity=3)
    assert result.suggested_counts == baseline
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.fraud_score = 0.9  # type: ignore[misc]


def test_suggested_counts_are_read_only_and_detached() -> None:
    baseline = {P.PLASTIC: 5}
    result = detect_fraud({P.PLASTIC: 6}, baseline, severity=3)
    with pytest.raises(TypeError):
        result.suggested_counts[P.PLASTIC] = 50  # type: ignore[index]
    baseline[P.PLASTIC] = 1
    assert result.suggested_counts[P.PLASTIC] == 5


def test_score_bounds_and_threshold_over_grid() -> None:
    user_options = [{}, {P.PLASTIC: 3}, {P.PLASTIC: 40, P.OIL: 60}, {P.SEWAGE: 25, P.DEBRIS: 1}]
    baseline_options = [{}, {P.PLASTIC: 3}, {P.SEWAGE: 1}]
    for user, baseline, severity in itertools.product(user_options, baseline_options, [-1, 1, 3, 5, 8]):
        result = detect_fraud(user, baseline, severity)
        assert 0.0 <= result.fraud_score <= 1.0
        assert result.is_suspicious == (result.fraud_score >= 0.5)


def test_deterministic() -> None:
    first = detect_fraud({P.PLASTIC: 30, P.OIL: 2}, {P.PLASTIC: 5}, severity=2)
    for _ in range(5):
        assert detect_fraud({P.PLASTIC: 30, P.OIL: 2}, {P.PLASTIC: 5}, severity=2) == first
