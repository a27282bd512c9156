"""Skill gap engine: wires extraction, confidence, demand and scoring together.

Flow:
    jd_texts    -> build_demand_map        -> DemandResult
    resume_text -> build_resume_confidence -> ResumeConfidence
                         |                         |
                         +------> scorer <---------+
                                    |
                              AnalysisResult
"""

import logging

from skillgap.config import settings
from skillgap.models.schemas import AnalysisMeta, AnalysisResult
from skillgap.services import scorer
from skillgap.services.demand_builder import build_demand_map, validate_jd_texts
from skillgap.services.fingerprint import fingerprint
from skillgap.services.section_parser import build_resume_confidence
from skillgap.services.skill_extractor import extract_skills
from skillgap.services.vocabulary import SkillVocabulary

logger = logging.getLogger(__name__)

__all__ = [
    "build_demand_map",
    "build_resume_confidence",
    "extract_skills",
    "fingerprint",
    "run_analysis",
]


def run_analysis(
    resume_text,
    jd_texts,
    vocabulary: SkillVocabulary | None = None,
    top_n: int | None = None,
) -> AnalysisResult:
    """Score a resume against 1-20 job descriptions.

    Raises InvalidInputError before doing any work if the JD set is malformed.
    """
    validate_jd_texts(jd_texts)
    if top_n is None:
        top_n = settings.priority_top_n

    logger.debug("run_analysis start: %d JDs", len(jd_texts))

    demand = build_demand_map(jd_texts, vocabulary)
    confidence = build_resume_confidence(resume_text, vocabulary)
    demand_map = demand.demand_map
    confidence_map = confidence.confidence_map

    result = AnalysisResult(
        confidence_map=confidence_map,
        demand_map=demand_map,
        gap_scores=scorer.compute_gap_scores(demand_map, confidence_map),
        readiness_score=scorer.compute_readiness_score(demand_map, confidence_map),
        priority_skills=scorer.compute_priority_skills(demand_map, confidence_map, top_n),
        over_saturated=scorer.find_over_saturated(demand_map, confidence_map),
        missing_high_demand=scorer.find_missing_high_demand(demand_map, confidence_map),
        jd_skill_lists=demand.jd_skill_lists,
        meta=AnalysisMeta(
            total_jds=len(jd_texts),
            demand_skill_count=len(demand_map),
            resume_skill_count=len(confidence.skills),
        ),
    )

    logger.debug(
        "run_analysis complete: %d demand skills, %d resume skills, readiness=%d",
        result.meta.demand_skill_count,
        result.meta.resume_skill_count,
        result.readiness_score,
    )
    return result
