"""Gap, readiness and priority scoring over demand and confidence maps.

All functions are pure. Lookups go through ``confidence_or_zero`` /
``demand_or_zero`` so that "absent" and "0.0" are handled explicitly.
"""

import math

OVER_SATURATED_CONFIDENCE = 0.6
OVER_SATURATED_DEMAND = 0.2
HIGH_DEMAND = 0.6
DEFAULT_TOP_N = 5


def confidence_or_zero(confidence_map: dict[str, float], skill: str) -> float:
    return confidence_map.get(skill, 0.0)


def demand_or_zero(demand_map: dict[str, float], skill: str) -> float:
    return demand_map.get(skill, 0.0)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_gap_scores(
    demand_map: dict[str, float], confidence_map: dict[str, float]
) -> dict[str, float]:
    """gap = demand - confidence, in [-1, 1], for every demanded skill."""
    return {
        skill: round(demand - confidence_or_zero(confidence_map, skill), 4)
        for skill, demand in demand_map.items()
    }


def compute_readiness_score(
    demand_map: dict[str, float], confidence_map: dict[str, float]
) -> int:
    """Demand-weighted average confidence as an integer 0-100.

    readiness = sum(confidence * demand) / sum(demand) * 100
    """
    numerator = 0.0
    denominator = 0.0
    for skill, demand in demand_map.items():
        numerator += confidence_or_zero(confidence_map, skill) * demand
        denominator += demand

    if denominator == 0:
        return 0
    return min(100, max(0, _round_half_up(numerator / denominator * 100)))


def compute_priority_scores(
    demand_map: dict[str, float], confidence_map: dict[str, float]
) -> dict[str, float]:
    """priority = demand * (1 - confidence): high demand, low confidence first."""
    return {
        skill: round(demand * (1 - confidence_or_zero(confidence_map, skill)), 4)
        for skill, demand in demand_map.items()
    }


def compute_priority_skills(
    demand_map: dict[str, float],
    confidence_map: dict[str, float],
    top_n: int = DEFAULT_TOP_N,
) -> list[str]:
    """Top N skills by priority score, ties broken alphabetically."""
    scores = compute_priority_scores(demand_map, confidence_map)
    ranked = sorted(scores.items(), key=lambda item: (-item[1], item[0]))
    return [skill for skill, _ in ranked[:top_n]]


def find_over_saturated(
    demand_map: dict[str, float], confidence_map: dict[str, float]
) -> list[str]:
    """Skills the resume leans on heavily that the market rarely asks for."""
    return [
        skill
        for skill, confidence in confidence_map.items()
        if confidence > OVER_SATURATED_CONFIDENCE
        and demand_or_zero(demand_map, skill) < OVER_SATURATED_DEMAND
    ]


def find_missing_high_demand(
    demand_map: dict[str, float], confidence_map: dict[str, float]
) -> list[str]:
    """Skills in more than 60% of JDs with no resume evidence.

    A confidence of exactly 0.0 counts as missing, same as an absent key.
    """
    return [
        skill
        for skill, demand in demand_map.items()
        if demand > HIGH_DEMAND and not confidence_or_zero(confidence_map, skill)
    ]
