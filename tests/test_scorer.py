from skillgap.services.scorer import (
    compute_gap_scores,
    compute_priority_scores,
    compute_priority_skills,
    compute_readiness_score,
    confidence_or_zero,
    demand_or_zero,
    find_missing_high_demand,
    find_over_saturated,
)


def test_get_or_zero_accessors():
    assert confidence_or_zero({"python": 0.7}, "python") == 0.7
    assert confidence_or_zero({}, "python") == 0.0
    assert demand_or_zero({"go": 0.1}, "rust") == 0.0


def test_gap_scores():
    gaps = compute_gap_scores(
        {"docker": 0.5, "react": 0.5, "kubernetes": 1.0},
        {"docker": 0.4, "react": 1.0, "python": 1.0},
    )
    assert gaps == {"docker": 0.1, "react": -0.5, "kubernetes": 1.0}


def test_gap_scores_only_cover_demanded_skills():
    assert compute_gap_scores({}, {"python": 1.0}) == {}


def test_readiness_weighted_by_demand():
    # (1.0*0.9 + 0.0*0.1) / 1.0 = 0.9
    assert compute_readiness_score({"python": 0.9, "rust": 0.1}, {"python": 1.0}) == 90
    # (0.0*0.9 + 1.0*0.1) / 1.0 = 0.1
    assert compute_readiness_score({"python": 0.9, "rust": 0.1}, {"rust": 1.0}) == 10


def test_readiness_empty_demand_is_zero():
    assert compute_readiness_score({}, {"python": 1.0}) == 0


def test_readiness_bounds():
    assert compute_readiness_score({"a": 1.0}, {"a": 1.0}) == 100
    assert compute_readiness_score({"a": 1.0}, {}) == 0


def test_readiness_rounds_half_up():
    # 0.7*0.5 + 0.4*0.5 = 0.55 -> 55; 0.125 -> 12.5 -> 13
    assert compute_readiness_score({"a": 0.5, "b": 0.5}, {"a": 0.7, "b": 0.4}) == 55
    assert compute_readiness_score({"a": 0.5, "b": 0.5}, {"a": 0.25}) == 13


def test_priority_scores():
    scores = compute_priority_scores({"docker": 0.5, "aws": 1.0}, {"docker": 0.4})
    assert scores == {"docker": 0.3, "aws": 1.0}


def test_priority_skills_sorted_and_truncated():
    demand = {s: d for s, d in zip("abcdefg", [0.1, 0.7, 0.3, 0.9, 0.5, 0.2, 0.6])}
    assert compute_priority_skills(demand, {}) == ["d", "b", "g", "e", "c"]


def test_priority_skills_ties_alphabetical():
    demand = {"redis": 0.5, "docker": 0.5, "aws": 0.5}
    assert compute_priority_skills(demand, {}) == ["aws", "docker", "redis"]


def test_priority_skills_top_n():
    demand = {"a": 0.5, "b": 0.4}
    assert compute_priority_skills(demand, {}, top_n=1) == ["a"]


def test_over_saturated():
    demand = {"python": 0.1, "react": 0.5}
    confidence = {"python": 1.0, "react": 1.0, "jquery": 0.7, "css": 0.4}
    assert find_over_saturated(demand, confidence) == ["python", "jquery"]


def test_over_saturated_thresholds_are_strict():
    assert find_over_saturated({"a": 0.2}, {"a": 1.0}) == []
    assert find_over_saturated({}, {"a": 0.6}) == []


def test_missing_high_demand():
    demand = {"aws": 0.8, "docker": 0.9, "rust": 0.6, "go": 0.7}
    confidence = {"docker": 0.4, "go": 0.0}
    # go has an explicit zero, which counts as missing
    assert find_missing_high_demand(demand, confidence) == ["aws", "go"]
