"""
Main Matcher Module

Orchestrates the complete matching process:
1. Normalize resume and job texts into tokens
2. Resolve the effective required skills (declared, or extracted from the job text)
3. Score coverage, skills and experience, then compose and explain
4. Rank one resume against many jobs
"""

import asyncio
import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from .config import DEFAULT_SETTINGS, ScoringSettings
from .explanation import generate_explanation
from .extractor import extract_skills
from .lexicon import SkillLexicon, default_lexicon
from .models import JobPosting, MatchRequest, MatchResult, RankedMatch, ResumeProfile
from .normalizer import preprocess_text
from .scoring_engine import (
    calculate_coverage_score,
    calculate_experience_score,
    calculate_skill_match,
    compose_score,
    dedupe_skills,
    find_matched_keywords,
    round_half_up,
)

logger = logging.getLogger(__name__)

JobLike = Union[JobPosting, Dict[str, Any]]
ResumeLike = Union[ResumeProfile, Dict[str, Any]]


def resolve_required_skills(
    required_skills: Optional[Iterable[str]],
    job_description: Optional[str],
    lexicon: Optional[SkillLexicon] = None,
) -> List[str]:
    """
    Effective required skills for a job.

    The declared list wins when it has any entries. An untagged job falls back
    to the lexicon skills found in its own description, so it cannot earn a
    perfect skill match by default. Declared names known to the lexicon are
    reported in their canonical spelling.
    """
    lexicon = lexicon if lexicon is not None else default_lexicon()

    declared = dedupe_skills(required_skills)
    if declared:
        return [lexicon.canonical(name) or name for name in declared]

    inferred = extract_skills(job_description, lexicon)
    logger.debug(f"No declared skills, inferred {len(inferred)} from description: {inferred}")
    return inferred


def calculate_match(
    resume_text: Optional[str],
    job_description: Optional[str],
    resume_skills: Optional[Sequence[str]],
    required_skills: Optional[Sequence[str]],
    resume_years_experience: Optional[float] = 0,
    required_years_experience: Optional[float] = 0,
    settings: Optional[ScoringSettings] = None,
    lexicon: Optional[SkillLexicon] = None,
) -> MatchResult:
    """
    Calculate the match between a resume and a job.

    Missing text, skill lists or years fall back to empty/zero; this function
    has no error path for well-typed input.

    Args:
        resume_text: Full resume text
        job_description: Full job description text
        resume_skills: Candidate's skills
        required_skills: Job's declared required skills (may be empty)
        resume_years_experience: Candidate's years of experience
        required_years_experience: Required years (0 = unspecified)
        settings: Weights and kill-switch thresholds (defaults from config)
        lexicon: Skill lexicon for fallback extraction (defaults to built-in)

    Returns:
        MatchResult with rounded scores, skill partition, keywords and explanation

    Example:
        >>> result = calculate_match(resume, job_desc, ["Python"], [], 5, 3)
        >>> print(f"Match: {result.match_score}")
    """
    settings = settings or DEFAULT_SETTINGS

    resume_words = preprocess_text(resume_text)
    job_words = preprocess_text(job_description)

    effective_required = resolve_required_skills(required_skills, job_description, lexicon)

    coverage = calculate_coverage_score(resume_words, job_words)
    skills = calculate_skill_match(resume_skills, effective_required)
    experience = calculate_experience_score(resume_years_experience, required_years_experience)

    composed = compose_score(
        coverage,
        skills.score,
        experience,
        has_requirements=bool(effective_required),
        settings=settings,
    )

    explanation = generate_explanation(
        composed.match_score,
        skills.score,
        composed.experience_score,
        composed.penalty_applied,
    )

    result = MatchResult(
        match_score=round_half_up(composed.match_score),
        text_similarity=round_half_up(coverage),
        skill_match=round_half_up(skills.score),
        experience_score=round_half_up(composed.experience_score),
        matched_skills=skills.matched,
        missing_skills=skills.missing,
        matched_keywords=find_matched_keywords(resume_words, job_words, settings.keyword_limit),
        explanation=explanation,
        penalty_applied=composed.penalty_applied,
    )

    logger.info(
        f"Match score: {result.match_score:.2f} (coverage {result.text_similarity:.2f}, "
        f"skills {result.skill_match:.2f}, experience {result.experience_score:.2f})"
    )
    return result


def match_request(
    request: Union[MatchRequest, Dict[str, Any]],
    settings: Optional[ScoringSettings] = None,
    lexicon: Optional[SkillLexicon] = None,
) -> MatchResult:
    """Validate a request payload and score it. Raises pydantic.ValidationError on bad input."""
    if not isinstance(request, MatchRequest):
        request = MatchRequest.model_validate(request)

    return calculate_match(
        request.resume_text,
        request.job_description,
        request.resume_skills,
        request.required_skills,
        request.resume_years_experience,
        request.required_years_experience,
        settings=settings,
        lexicon=lexicon,
    )


def match_job(
    resume: ResumeProfile,
    job: JobPosting,
    settings: Optional[ScoringSettings] = None,
    lexicon: Optional[SkillLexicon] = None,
) -> MatchResult:
    """Score one validated resume profile against one validated job posting."""
    return calculate_match(
        resume.text,
        job.description,
        resume.skills,
        job.required_skills,
        resume.years_experience,
        job.required_years_experience,
        settings=settings,
        lexicon=lexicon,
    )


def _validate_inputs(resume: ResumeLike, jobs: Iterable[JobLike]):
    if not isinstance(resume, ResumeProfile):
        resume = ResumeProfile.model_validate(resume)
    postings = [
        job if isinstance(job, JobPosting) else JobPosting.model_validate(job)
        for job in jobs
    ]
    return resume, postings


def _rank(postings: List[JobPosting], results: List[MatchResult]) -> List[RankedMatch]:
    # list.sort is stable, so equal scores keep input order
    order = list(range(len(postings)))
    order.sort(key=lambda i: results[i].match_score, reverse=True)

    ranked = [
        RankedMatch(
            rank=rank,
            job_index=i,
            job_id=postings[i].job_id,
            title=postings[i].title,
            result=results[i],
        )
        for rank, i in enumerate(order, 1)
    ]

    if ranked:
        logger.info(f"Top match: job {ranked[0].job_index} at {ranked[0].result.match_score:.2f}")
    return ranked


def rank_jobs(
    resume: ResumeLike,
    jobs: Iterable[JobLike],
    settings: Optional[ScoringSettings] = None,
    lexicon: Optional[SkillLexicon] = None,
) -> List[RankedMatch]:
    """
    Match a resume against multiple jobs.

    Args:
        resume: ResumeProfile or dict with text/skills/years_experience
        jobs: JobPosting objects or dicts
        settings: Scoring settings
        lexicon: Skill lexicon

    Returns:
        Ranked matches, highest score first; ties keep input order

    Example:
        >>> ranked = rank_jobs(profile, [job1, job2, job3])
        >>> for match in ranked:
        >>>     print(f"#{match.rank}: {match.result.match_score}")
    """
    resume, postings = _validate_inputs(resume, jobs)
    logger.info(f"Matching resume against {len(postings)} jobs")

    results = [match_job(resume, job, settings, lexicon) for job in postings]
    return _rank(postings, results)


async def rank_jobs_async(
    resume: ResumeLike,
    jobs: Iterable[JobLike],
    settings: Optional[ScoringSettings] = None,
    lexicon: Optional[SkillLexicon] = None,
) -> List[RankedMatch]:
    """
    Concurrent variant of ``rank_jobs``.

    Each job is scored in a worker thread, at most ``settings.max_concurrency``
    at a time. The returned order is identical to ``rank_jobs``.
    """
    settings = settings or DEFAULT_SETTINGS
    resume, postings = _validate_inputs(resume, jobs)
    logger.info(
        f"Matching resume against {len(postings)} jobs "
        f"(max {settings.max_concurrency} concurrent)"
    )

    semaphore = asyncio.Semaphore(settings.max_concurrency)

    async def score(job: JobPosting) -> MatchResult:
        async with semaphore:
            return await asyncio.to_thread(match_job, resume, job, settings, lexicon)

    results = await asyncio.gather(*[score(job) for job in postings])
    return _rank(postings, list(results))
