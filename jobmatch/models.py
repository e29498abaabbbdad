from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


class MatchRequest(BaseModel):
    """Input contract for a single resume/job comparison."""
    resume_text: str = ""
    job_description: str = ""
    resume_skills: List[str] = Field(default_factory=list)
    required_skills: List[str] = Field(
        default_factory=list,
        description="Declared required skills; empty means infer them from the job description",
    )
    resume_years_experience: float = Field(default=0.0, ge=0.0)
    required_years_experience: float = Field(
        default=0.0, ge=0.0, description="0 means no requirement"
    )

    @field_validator("resume_text", "job_description", mode="before")
    @classmethod
    def none_as_empty_text(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("resume_skills", "required_skills", mode="before")
    @classmethod
    def none_as_empty_list(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("resume_years_experience", "required_years_experience", mode="before")
    @classmethod
    def none_as_zero_years(cls, v: Any) -> Any:
        return 0.0 if v is None else v


class ResumeProfile(BaseModel):
    """The candidate half of a match request, reused across many jobs."""
    text: str = ""
    skills: List[str] = Field(default_factory=list)
    years_experience: float = Field(default=0.0, ge=0.0)

    @field_validator("text", "skills", "years_experience", mode="before")
    @classmethod
    def fill_missing(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None:
            return {"text": "", "skills": [], "years_experience": 0.0}[info.field_name]
        return v


class JobPosting(BaseModel):
    """The job half of a match request."""
    job_id: Optional[str] = None
    title: Optional[str] = None
    description: str = ""
    required_skills: List[str] = Field(default_factory=list)
    required_years_experience: float = Field(default=0.0, ge=0.0)

    @field_validator("description", "required_skills", "required_years_experience", mode="before")
    @classmethod
    def fill_missing(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None:
            return {"description": "", "required_skills": [], "required_years_experience": 0.0}[info.field_name]
        return v


class MatchResult(BaseModel):
    """Explainable outcome of one resume/job comparison."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    match_score: float = Field(ge=0.0, le=1.0)
    text_similarity: float = Field(ge=0.0, le=1.0)
    skill_match: float = Field(ge=0.0, le=1.0)
    experience_score: float = Field(ge=0.0, le=1.0)
    matched_skills: List[str] = Field(default_factory=list)
    missing_skills: List[str] = Field(default_factory=list)
    matched_keywords: List[str] = Field(default_factory=list)
    explanation: str = ""
    penalty_applied: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class RankedMatch(BaseModel):
    """A MatchResult placed in a ranked list of jobs."""
    model_config = ConfigDict(frozen=True)

    rank: int
    job_index: int
    job_id: Optional[str] = None
    title: Optional[str] = None
    result: MatchResult


class ParsedResume(BaseModel):
    """Structured fields pulled from raw resume text."""
    model_config = ConfigDict(frozen=True)

    skills: List[str] = Field(default_factory=list)
    years_of_experience: float = 0.0
    education: List[str] = Field(default_factory=list)
    raw_text: str = ""

    def to_profile(self) -> ResumeProfile:
        return ResumeProfile(
            text=self.raw_text,
            skills=list(self.skills),
            years_experience=self.years_of_experience,
        )
