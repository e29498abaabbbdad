"""
Deterministic Resume-Job Matching Engine

Scores a resume against a job description from three signals:
1. Keyword coverage of the job text by the resume text
2. Required-skill match (declared, or extracted from the job text)
3. Banded years-of-experience comparison

Usage:
    from jobmatch import calculate_match

    result = calculate_match(resume_text, job_description, ["Python"], [], 5, 3)
    print(f"Match: {result.match_score}")
    print(result.explanation)
"""

from .config import WEIGHTS, ScoringSettings, get_settings
from .extractor import SkillExtractor, extract_skills
from .lexicon import SkillLexicon, default_lexicon, load_lexicon
from .matcher import calculate_match, match_request, rank_jobs, rank_jobs_async
from .models import JobPosting, MatchRequest, MatchResult, ParsedResume, RankedMatch, ResumeProfile
from .normalizer import preprocess_text
from .resume_parser import parse_resume

__all__ = [
    "calculate_match",
    "match_request",
    "rank_jobs",
    "rank_jobs_async",
    "parse_resume",
    "preprocess_text",
    "extract_skills",
    "SkillExtractor",
    "SkillLexicon",
    "default_lexicon",
    "load_lexicon",
    "ScoringSettings",
    "get_settings",
    "WEIGHTS",
    "JobPosting",
    "MatchRequest",
    "MatchResult",
    "ParsedResume",
    "RankedMatch",
    "ResumeProfile",
]
__version__ = "1.0.0"
