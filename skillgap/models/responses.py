from pydantic import BaseModel

from skillgap.models.schemas import AnalysisResult


class ExtractSkillsResponse(BaseModel):
    skills: list[str] = []
    categories: dict[str, str] = {}


class ResumeConfidenceResponse(BaseModel):
    confidence_map: dict[str, float] = {}
    skills: list[str] = []


class AnalysisResponse(AnalysisResult):
    # SHA-256 of the JD set; callers key cached results on (owner, resume, jd_set_hash)
    jd_set_hash: str = ""
