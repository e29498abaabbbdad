"""
Deterministic Scoring Engine

All scoring functions are deterministic - same inputs produce same outputs.
Scores are fractions in [0, 1]; rounding happens only when results are reported.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from .config import (
    DEFAULT_SETTINGS, EXPERIENCE_BANDS, EXPERIENCE_HALF_RATIO, EXPERIENCE_MIN_YEARS,
    MATCHED_KEYWORDS_LIMIT, ScoringSettings,
)

logger = logging.getLogger(__name__)


def round_half_up(value: float, places: int = 2) -> float:
    """Round half away from zero for non-negative scores (0.125 -> 0.13)."""
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def to_percentage(value: float) -> int:
    """Fraction to whole percent, rounding half up."""
    return int(math.floor(value * 100 + 0.5))


def calculate_coverage_score(resume_words: Sequence[str], job_words: Sequence[str]) -> float:
    """
    Calculate asymmetric keyword coverage (0-1).

    Formula:
    - |distinct job tokens that also occur in the resume| / |distinct job tokens|
    - Resume tokens the job never mentions neither help nor hurt.

    Args:
        resume_words: Normalized resume tokens
        job_words: Normalized job description tokens

    Returns:
        Score from 0-1 (0 when the job has no tokens)
    """
    job_unique = set(job_words)
    if not job_unique:
        logger.debug("Job description has no tokens, coverage = 0")
        return 0.0

    resume_unique = set(resume_words)
    covered = sum(1 for word in job_unique if word in resume_unique)
    score = covered / len(job_unique)

    logger.debug(f"Coverage: {covered}/{len(job_unique)} job tokens = {score:.4f}")
    return score


def find_matched_keywords(
    resume_words: Sequence[str],
    job_words: Sequence[str],
    limit: int = MATCHED_KEYWORDS_LIMIT,
) -> List[str]:
    """Distinct job tokens also found in the resume, in job order, truncated to ``limit``."""
    resume_unique = set(resume_words)
    matched = [word for word in dict.fromkeys(job_words) if word in resume_unique]
    return matched[:limit]


def dedupe_skills(skills: Optional[Iterable[str]]) -> List[str]:
    """Trim names, drop blanks and keep the first of any case-insensitive duplicates."""
    seen = set()
    result = []
    for skill in skills or []:
        if not isinstance(skill, str):
            continue
        name = skill.strip()
        key = name.lower()
        if not name or key in seen:
            continue
        seen.add(key)
        result.append(name)
    return result


@dataclass(frozen=True)
class SkillMatch:
    score: float
    matched: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)


def calculate_skill_match(
    resume_skills: Optional[Iterable[str]],
    required_skills: Optional[Iterable[str]],
) -> SkillMatch:
    """
    Calculate required-skill match (0-1) with the matched/missing partition.

    Formula:
    - (required skills present in resume, case-insensitive) / (required skills)
    - No requirements = 0 (no evidence, no credit)

    Args:
        resume_skills: Candidate's skills
        required_skills: Effective required skills

    Returns:
        SkillMatch with score, matched and missing skills in required order
    """
    required = dedupe_skills(required_skills)
    if not required:
        logger.debug("No required skills, skill match = 0")
        return SkillMatch(score=0.0)

    candidate = {s.strip().lower() for s in resume_skills or [] if isinstance(s, str)}
    matched = [s for s in required if s.lower() in candidate]
    missing = [s for s in required if s.lower() not in candidate]
    score = len(matched) / len(required)

    logger.debug(f"Required skills: {len(matched)}/{len(required)} = {score:.4f}")
    return SkillMatch(score=score, matched=matched, missing=missing)


def calculate_experience_score(
    resume_years: Optional[float],
    required_years: Optional[float],
) -> float:
    """
    Calculate experience score (0-1) from fixed bands.

    Bands:
    - No requirement (required <= 0): 1.0
    - resume >= required: 1.0
    - resume >= half of required: 0.8
    - resume >= 1 year: 0.5
    - otherwise: 0.2

    Args:
        resume_years: Candidate's years of experience
        required_years: Minimum years required (0 = unspecified)

    Returns:
        One of the band scores
    """
    resume_years = resume_years or 0
    required_years = required_years or 0

    if required_years <= 0:
        score = EXPERIENCE_BANDS["met"]
    elif resume_years >= required_years:
        score = EXPERIENCE_BANDS["met"]
    elif resume_years >= required_years * EXPERIENCE_HALF_RATIO:
        score = EXPERIENCE_BANDS["half"]
    elif resume_years >= EXPERIENCE_MIN_YEARS:
        score = EXPERIENCE_BANDS["some"]
    else:
        score = EXPERIENCE_BANDS["junior"]

    logger.debug(f"Experience: {resume_years} vs {required_years} years, score = {score}")
    return score


@dataclass(frozen=True)
class ComposedScore:
    match_score: float
    experience_score: float
    penalty_applied: bool


def compose_score(
    coverage: float,
    skill_match: float,
    experience: float,
    has_requirements: bool,
    settings: Optional[ScoringSettings] = None,
) -> ComposedScore:
    """
    Combine sub-scores into the final (unrounded) match score.

    Formula:
    - coverage_weight * coverage + skills_weight * skill_match + experience_weight * experience
    - Kill switch: with requirements present and skill_match below the threshold,
      experience counts as 0 and the composite is capped at score_cap.
    """
    settings = settings or DEFAULT_SETTINGS

    penalty_applied = has_requirements and skill_match < settings.skill_threshold
    if penalty_applied:
        experience = 0.0

    match_score = (
        settings.coverage_weight * coverage +
        settings.skills_weight * skill_match +
        settings.experience_weight * experience
    )

    if penalty_applied:
        match_score = min(match_score, settings.score_cap)
        logger.info(
            f"Kill switch applied: skill match {skill_match:.2f} < {settings.skill_threshold:.2f}, "
            f"score capped at {match_score:.4f}"
        )

    return ComposedScore(
        match_score=match_score,
        experience_score=experience,
        penalty_applied=penalty_applied,
    )
