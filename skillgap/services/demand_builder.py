"""Market demand across a set of job descriptions."""

import logging
from collections import Counter

from skillgap.config import settings
from skillgap.models.schemas import DemandResult
from skillgap.services.errors import InvalidInputError
from skillgap.services.skill_extractor import extract_skills_ordered
from skillgap.services.vocabulary import SkillVocabulary

logger = logging.getLogger(__name__)


def validate_jd_texts(jd_texts, max_count: int | None = None) -> None:
    """Fail fast unless ``jd_texts`` is a list of 1..max_count entries."""
    if max_count is None:
        max_count = settings.max_jd_count
    if not isinstance(jd_texts, (list, tuple)) or not 1 <= len(jd_texts) <= max_count:
        raise InvalidInputError(f"Provide between 1 and {max_count} job descriptions")


def build_demand_map(jd_texts, vocabulary: SkillVocabulary | None = None) -> DemandResult:
    """demand(skill) = (# JDs mentioning skill) / (# JDs), rounded to 4 places.

    A skill counts once per JD no matter how often that JD repeats it.
    """
    validate_jd_texts(jd_texts)

    counts: Counter[str] = Counter()
    jd_skill_lists: list[list[str]] = []
    for jd_text in jd_texts:
        skills = extract_skills_ordered(jd_text, vocabulary)
        jd_skill_lists.append(skills)
        counts.update(skills)

    total = len(jd_texts)
    demand_map = {skill: round(count / total, 4) for skill, count in counts.items()}
    logger.debug("Demand map built: %d JDs, %d skills", total, len(demand_map))

    return DemandResult(demand_map=demand_map, jd_skill_lists=jd_skill_lists)
