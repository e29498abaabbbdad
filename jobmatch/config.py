"""
Configuration for the deterministic resume-job matching engine.
Adjust weights and thresholds here, or override them through the environment.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, model_validator

# Component weights (must sum to 1.0)
WEIGHTS = {
    "coverage": 0.30,
    "skills": 0.50,
    "experience": 0.20,
}

# Kill switch: weak skill evidence zeroes experience and caps the composite
KILL_SWITCH = {
    "skill_threshold": 0.20,  # skill_match strictly below this triggers it
    "score_cap": 0.20,
}

# Experience bands, checked top to bottom after the "no requirement" case
EXPERIENCE_BANDS = {
    "met": 1.0,             # resume_years >= required_years
    "half": 0.8,            # resume_years >= 0.5 * required_years
    "some": 0.5,            # resume_years >= 1
    "junior": 0.2,          # anything else
}
EXPERIENCE_HALF_RATIO = 0.5
EXPERIENCE_MIN_YEARS = 1

# Explanation wording thresholds
EXPLANATION_BANDS = {
    "skills_strong": 0.8,
    "skills_good": 0.5,
    "experience_met": 0.8,
}

# Tokenization
MIN_TOKEN_LENGTH = 3
MATCHED_KEYWORDS_LIMIT = 10

# Batch ranking
MAX_CONCURRENCY = 8

# Resume/job boilerplate that carries no matching signal
STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
    "of", "with", "by", "from", "up", "about", "into", "through", "during",
    "is", "are", "was", "were", "be", "been", "being", "have", "has", "had",
    "do", "does", "did", "will", "would", "could", "should", "may", "might",
    "must", "can", "i", "you", "he", "she", "it", "we", "they", "me", "him",
    "her", "us", "them", "my", "your", "his", "its", "our", "their", "this",
    "that", "these", "those", "am", "as", "than", "so", "very", "just", "too",
    "also", "like", "use", "using", "used", "work", "worked", "working",
    "experience", "experienced", "year", "years", "month", "months", "knowledge",
    "proficient", "proficiency", "skill", "skills", "ability", "responsible",
    "responsibility", "responsibilities", "role", "team", "member", "project",
    "projects", "application", "applications", "various", "including", "etc",
    "good", "excellent", "strong", "proven", "track", "record", "successful",
    "successfully", "demonstrated", "familiar", "familiarity",
})

# Degree keywords used by the resume parser
EDUCATION_KEYWORDS = (
    "bachelor", "master", "phd", "doctorate", "diploma", "degree",
    "b.s.", "m.s.", "b.a.", "m.a.", "mba",
)
EDUCATION_MAX_LINES = 5

# Environment variable naming a JSON skill lexicon to use instead of the built-in one
LEXICON_PATH_ENV = "JOBMATCH_SKILL_LEXICON"


class ScoringSettings(BaseModel):
    """Tunable business constants for score composition."""
    model_config = ConfigDict(frozen=True)

    coverage_weight: float = Field(default=WEIGHTS["coverage"], ge=0.0, le=1.0)
    skills_weight: float = Field(default=WEIGHTS["skills"], ge=0.0, le=1.0)
    experience_weight: float = Field(default=WEIGHTS["experience"], ge=0.0, le=1.0)
    skill_threshold: float = Field(default=KILL_SWITCH["skill_threshold"], ge=0.0, le=1.0)
    score_cap: float = Field(default=KILL_SWITCH["score_cap"], ge=0.0, le=1.0)
    keyword_limit: int = Field(default=MATCHED_KEYWORDS_LIMIT, ge=0)
    max_concurrency: int = Field(default=MAX_CONCURRENCY, ge=1)

    @model_validator(mode="after")
    def check_weights(self) -> "ScoringSettings":
        total = self.coverage_weight + self.skills_weight + self.experience_weight
        if abs(total - 1.0) > 1e-6:
            raise ValueError(f"Component weights must sum to 1.0, got {total:.4f}")
        return self


DEFAULT_SETTINGS = ScoringSettings()


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def get_settings(dotenv_path: Optional[Path] = None) -> ScoringSettings:
    """Build settings from the environment, loading a .env file first if present."""
    load_dotenv(dotenv_path=dotenv_path, override=False)
    return ScoringSettings(
        coverage_weight=_env_float("JOBMATCH_WEIGHT_COVERAGE", WEIGHTS["coverage"]),
        skills_weight=_env_float("JOBMATCH_WEIGHT_SKILLS", WEIGHTS["skills"]),
        experience_weight=_env_float("JOBMATCH_WEIGHT_EXPERIENCE", WEIGHTS["experience"]),
        skill_threshold=_env_float("JOBMATCH_SKILL_THRESHOLD", KILL_SWITCH["skill_threshold"]),
        score_cap=_env_float("JOBMATCH_SCORE_CAP", KILL_SWITCH["score_cap"]),
        keyword_limit=_env_int("JOBMATCH_KEYWORD_LIMIT", MATCHED_KEYWORDS_LIMIT),
        max_concurrency=_env_int("JOBMATCH_MAX_CONCURRENCY", MAX_CONCURRENCY),
    )
