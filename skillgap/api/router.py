import logging

from fastapi import APIRouter, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from skillgap.config import settings
from skillgap.models.requests import (
    AnalysisRequest,
    ExtractSkillsRequest,
    ResumeConfidenceRequest,
)
from skillgap.models.responses import (
    AnalysisResponse,
    ExtractSkillsResponse,
    ResumeConfidenceResponse,
)
from skillgap.services import skill_engine
from skillgap.services.vocabulary import DEFAULT_VOCABULARY

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "vocabulary_size": len(DEFAULT_VOCABULARY),
    }


@router.post("/skills/extract", response_model=ExtractSkillsResponse)
@limiter.limit(settings.rate_limit)
async def extract(request: Request, body: ExtractSkillsRequest):
    skills = sorted(skill_engine.extract_skills(body.text))
    return ExtractSkillsResponse(
        skills=skills,
        categories={s: DEFAULT_VOCABULARY.category_of(s) for s in skills},
    )


@router.post("/resume/confidence", response_model=ResumeConfidenceResponse)
@limiter.limit(settings.rate_limit)
async def resume_confidence(request: Request, body: ResumeConfidenceRequest):
    result = skill_engine.build_resume_confidence(body.resume_text)
    return ResumeConfidenceResponse(
        confidence_map=result.confidence_map,
        skills=result.skills,
    )


@router.post("/analysis", response_model=AnalysisResponse, status_code=201)
@limiter.limit(settings.rate_limit)
async def analysis(request: Request, body: AnalysisRequest):
    result = skill_engine.run_analysis(body.resume_text, body.jd_texts)
    jd_set_hash = skill_engine.fingerprint(body.jd_texts)

    logger.info(
        "Analysis created: readiness=%d, demand_skills=%d, jd_set_hash=%s",
        result.readiness_score,
        result.meta.demand_skill_count,
        jd_set_hash[:8],
    )
    return AnalysisResponse(**result.model_dump(), jd_set_hash=jd_set_hash)
