import pytest

from analysis.scoring import (
    CORTISOL_KEYWORDS, GLUCOSE_KEYWORDS, PH_KEYWORDS, SALT_KEYWORDS,
    calculate_pcos_risk_percentage, raw_points, zone_points,
)


def test_strong_readings_clamp_to_100():
    assert raw_points("dark", "purple", "dark", "high") == 40
    assert calculate_pcos_risk_percentage("dark", "purple", "dark", "high") == 100


def test_unmatched_readings_score_zero():
    assert calculate_pcos_risk_percentage("clear", "pink", "none", "blue") == 0


def test_mild_readings():
    assert calculate_pcos_risk_percentage("moderate", "neutral", "faint", "moderate") == 67


def test_matching_is_case_insensitive_substring():
    assert zone_points("Dark Blue", GLUCOSE_KEYWORDS) == 10
    assert zone_points("HIGHLY visible", CORTISOL_KEYWORDS) == 10
    assert zone_points("Light Green", PH_KEYWORDS) == 5
    assert zone_points("Alkaline purple", PH_KEYWORDS) == 10


def test_strong_keyword_wins_over_mild():
    assert zone_points("moderate but dark", GLUCOSE_KEYWORDS) == 10


@pytest.mark.parametrize("salt,expected", [
    ("Yellow", 10),
    ("Dark Yellow", 10),
    ("high", 10),
    ("Moderate", 5),
    ("Light Brown", 0),
    ("light", 0),
])
def test_salt_only_matches_first_phrase(salt, expected):
    assert zone_points(salt, SALT_KEYWORDS) == expected


def test_empty_strings_score_zero():
    assert calculate_pcos_risk_percentage("", "", "", "") == 0


def test_halves_round_up():
    # 15 / 30 -> exactly 50, 5 / 30 -> 16.67, 25 / 30 -> 83.33
    assert calculate_pcos_risk_percentage("moderate", "green", "faint", "") == 50
    assert calculate_pcos_risk_percentage("moderate", "", "", "") == 17
    assert calculate_pcos_risk_percentage("dark", "green", "faint", "moderate") == 83


def test_custom_denominator():
    assert calculate_pcos_risk_percentage("dark", "purple", "dark", "high", max_score=40) == 100
    assert calculate_pcos_risk_percentage("moderate", "neutral", "faint", "moderate", max_score=40) == 50


def test_denominator_must_be_positive():
    with pytest.raises(ValueError):
        calculate_pcos_risk_percentage("dark", "", "", "", max_score=0)
