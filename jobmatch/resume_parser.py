"""
Lightweight resume field extraction.

Pulls skills, years of experience and education lines out of plain resume
text so a parsed resume can feed straight into the matcher. Converting
uploaded files to text happens upstream.
"""

import logging
import re
from datetime import date
from typing import List, Optional

from .config import EDUCATION_KEYWORDS, EDUCATION_MAX_LINES
from .extractor import extract_skills
from .lexicon import SkillLexicon
from .models import ParsedResume

logger = logging.getLogger(__name__)

# "5 years of experience", "3+ yrs exp", "10 years experience"
YEARS_PATTERN = re.compile(
    r"(\d+)\+?\s*(?:years?|yrs?)\s*(?:of\s*)?(?:experience|exp)",
    re.IGNORECASE,
)
# "2018 - 2021", "2020-present", "2019 - current"
DATE_RANGE_PATTERN = re.compile(
    r"(\d{4})\s*-\s*(\d{4}|present|current)",
    re.IGNORECASE,
)


def extract_years_of_experience(text: str, reference_year: Optional[int] = None) -> float:
    """
    Estimate total years of experience.

    Explicit statements win (largest one found). Otherwise the spans of all
    year ranges are summed, with open ranges ending at ``reference_year``.
    """
    stated = [int(m.group(1)) for m in YEARS_PATTERN.finditer(text)]
    if stated:
        return float(max(stated))

    if reference_year is None:
        reference_year = date.today().year

    total = 0
    for m in DATE_RANGE_PATTERN.finditer(text):
        start = int(m.group(1))
        end = int(m.group(2)) if m.group(2).isdigit() else reference_year
        total += max(0, end - start)
    return float(total)


def extract_education(text: str) -> List[str]:
    """Lines mentioning a degree, stripped, at most EDUCATION_MAX_LINES."""
    lines = []
    for line in text.split("\n"):
        lowered = line.lower()
        if any(keyword in lowered for keyword in EDUCATION_KEYWORDS):
            lines.append(line.strip())
    return lines[:EDUCATION_MAX_LINES]


def parse_resume(
    text: Optional[str],
    lexicon: Optional[SkillLexicon] = None,
    reference_year: Optional[int] = None,
) -> ParsedResume:
    """
    Parse plain resume text into structured fields.

    Args:
        text: Resume text (may be empty or None)
        lexicon: Skill lexicon (defaults to built-in)
        reference_year: Year that closes "present"/"current" ranges (defaults to this year)

    Returns:
        ParsedResume
    """
    if not text:
        return ParsedResume()

    parsed = ParsedResume(
        skills=extract_skills(text, lexicon),
        years_of_experience=extract_years_of_experience(text, reference_year),
        education=extract_education(text),
        raw_text=text,
    )
    logger.info(
        f"Parsed resume: {len(parsed.skills)} skills, "
        f"{parsed.years_of_experience:g} years, {len(parsed.education)} education lines"
    )
    return parsed
