from pydantic import BaseModel, Field, field_validator

from skillgap.config import settings


class ExtractSkillsRequest(BaseModel):
    text: str = Field(..., max_length=settings.max_resume_length, description="Any free text")


class ResumeConfidenceRequest(BaseModel):
    resume_text: str = Field(
        ...,
        min_length=settings.min_resume_length,
        max_length=settings.max_resume_length,
        description="Plain text resume content",
    )


class AnalysisRequest(BaseModel):
    resume_text: str = Field(
        ...,
        min_length=settings.min_resume_length,
        max_length=settings.max_resume_length,
        description="Plain text resume content",
    )
    jd_texts: list[str] = Field(
        ...,
        min_length=1,
        max_length=settings.max_jd_count,
        description="Job description texts",
    )

    @field_validator("jd_texts")
    @classmethod
    def _check_jd_lengths(cls, value: list[str]) -> list[str]:
        for i, jd in enumerate(value):
            if not settings.min_jd_length <= len(jd) <= settings.max_jd_length:
                raise ValueError(
                    f"jd_texts[{i}] must be {settings.min_jd_length}-"
                    f"{settings.max_jd_length} characters"
                )
        return value
