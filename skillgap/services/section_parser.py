"""Section-aware resume scanning and per-skill confidence scoring."""

import re

from skillgap.models.schemas import ResumeConfidence
from skillgap.services.skill_extractor import extract_skills_ordered
from skillgap.services.vocabulary import SkillVocabulary

DEFAULT_SECTION = "skills"

# Section header patterns and their canonical names, checked in this order.
# A line matching any keyword is treated as a header, not as content.
SECTION_PATTERNS: list[tuple[str, list[str]]] = [
    ("experience", [
        r"experience",
        r"work\s+history",
        r"employment",
        r"professional\s+background",
        r"work\s+experience",
    ]),
    ("projects", [
        r"projects",
        r"personal\s+projects",
        r"side\s+projects",
        r"portfolio",
        r"open.?source",
    ]),
    ("skills", [
        r"skills",
        r"technical\s+skills",
        r"competencies",
        r"technologies",
        r"tech\s+stack",
    ]),
]

SECTION_HEADERS: list[tuple[str, re.Pattern]] = [
    (section, re.compile(rf"\b(?:{'|'.join(patterns)})\b", re.IGNORECASE))
    for section, patterns in SECTION_PATTERNS
]

# Professional use is stronger evidence than a project, which beats a bare listing
SECTION_WEIGHTS: dict[str, float] = {
    "experience": 1.0,
    "projects": 0.7,
    "skills": 0.4,
}

_LINE_SPLIT_RE = re.compile(r"\r?\n")


def detect_section(
    line: str, headers: list[tuple[str, re.Pattern]] | None = None
) -> str | None:
    """Return the section a header line opens, or None for a content line."""
    for section, pattern in headers if headers is not None else SECTION_HEADERS:
        if pattern.search(line):
            return section
    return None


def build_resume_confidence(
    resume_text,
    vocabulary: SkillVocabulary | None = None,
    headers: list[tuple[str, re.Pattern]] | None = None,
    weights: dict[str, float] | None = None,
) -> ResumeConfidence:
    """Scan resume lines and score each skill by the strongest section it appears in.

    confidence[skill] = max(existing, weight[current_section]). Header lines
    switch the current section and carry no skills themselves. Text before
    any header counts as the skills section.
    """
    if not resume_text or not isinstance(resume_text, str):
        return ResumeConfidence()
    if weights is None:
        weights = SECTION_WEIGHTS

    confidence_map: dict[str, float] = {}
    current_section = DEFAULT_SECTION

    for line in _LINE_SPLIT_RE.split(resume_text):
        if not line.strip():
            continue

        detected = detect_section(line, headers)
        if detected:
            current_section = detected
            continue

        weight = weights.get(current_section, SECTION_WEIGHTS[DEFAULT_SECTION])
        for skill in extract_skills_ordered(line, vocabulary):
            confidence_map[skill] = max(confidence_map.get(skill, 0.0), weight)

    return ResumeConfidence(
        confidence_map=confidence_map,
        skills=list(confidence_map),
    )
