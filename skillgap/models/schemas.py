"""Engine result contracts. All instances are frozen once built."""

from pydantic import BaseModel, ConfigDict


class ResumeConfidence(BaseModel):
    """Per-skill confidence derived from which resume section a skill appears in."""
    model_config = ConfigDict(frozen=True)

    confidence_map: dict[str, float] = {}
    skills: list[str] = []  # keys of confidence_map, discovery order


class DemandResult(BaseModel):
    """Per-skill market demand across a JD set."""
    model_config = ConfigDict(frozen=True)

    demand_map: dict[str, float] = {}
    jd_skill_lists: list[list[str]] = []  # one entry per JD, input order


class AnalysisMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_jds: int = 0
    demand_skill_count: int = 0
    resume_skill_count: int = 0


class AnalysisResult(BaseModel):
    """Structured output of a full resume vs. JD-set analysis.

    Gap scores are demand minus confidence: positive means the market asks for
    more than the resume shows, negative means the resume is over-indexed.
    """
    model_config = ConfigDict(frozen=True)

    confidence_map: dict[str, float] = {}
    demand_map: dict[str, float] = {}
    gap_scores: dict[str, float] = {}
    readiness_score: int = 0  # 0-100, demand-weighted average confidence
    priority_skills: list[str] = []  # top N by demand * (1 - confidence)
    over_saturated: list[str] = []  # confidence > 0.6, demand < 0.2
    missing_high_demand: list[str] = []  # demand > 0.6, no confidence
    jd_skill_lists: list[list[str]] = []
    meta: AnalysisMeta = AnalysisMeta()
