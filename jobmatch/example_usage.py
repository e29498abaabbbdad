"""
Example usage of the deterministic resume-job matching engine.

Run this file to see the engine in action:
    python -m jobmatch.example_usage
"""

import asyncio
import logging

from jobmatch import get_settings, load_lexicon, parse_resume, rank_jobs_async
from jobmatch.matcher import calculate_match

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

# Sample job description
JOB_DESCRIPTION = """
Data Annotator - AI/ML Team

We are seeking a Data Annotator for our machine learning platform.

Requirements:
- Experience: 0 to 1 Year
- Skills: Python, Machine Learning, Data Analysis, SQL
- Understanding of computer vision concepts and data curation

Responsibilities:
- Annotate data for machine learning models
- Clean and curate datasets with Pandas
- Quality check labeled images
"""

# Sample resume
RESUME = """
Jordan Rivera
B.E. in Computer Science and Engineering

SKILLS
Programming: Python, C++, Java
ML/AI: TensorFlow, Keras, PyTorch, OpenCV, Computer Vision
Data: Pandas, NumPy, Tableau, MySQL

EXPERIENCE
AI Research Intern | 2023 - 2024
- Built image classification models for crop disease detection
- Curated and cleaned labeled datasets for machine learning
"""


def example_basic_matching(settings, lexicon):
    """Example 1: Parse a resume and match it against one job."""
    print("\n" + "="*80)
    print("EXAMPLE 1: Basic Matching")
    print("="*80)

    parsed = parse_resume(RESUME, lexicon=lexicon)
    result = calculate_match(
        parsed.raw_text,
        JOB_DESCRIPTION,
        parsed.skills,
        [],
        parsed.years_of_experience,
        1,
        settings=settings,
        lexicon=lexicon,
    )

    print(f"\nOverall Match: {result.match_score:.2f}")
    for label, score in (
        ("Coverage", result.text_similarity),
        ("Skills", result.skill_match),
        ("Experience", result.experience_score),
    ):
        bar = "█" * int(score * 20)
        print(f"  {label:12} {score:4.2f} {bar}")

    print(f"\nMatched skills: {', '.join(result.matched_skills) or '-'}")
    print(f"Missing skills: {', '.join(result.missing_skills) or '-'}")
    print(f"Keywords:       {', '.join(result.matched_keywords) or '-'}")
    print(f"\n{result.explanation}")
    print(f"{'='*80}\n")


def example_multiple_jobs(settings, lexicon):
    """Example 2: Rank several jobs for one resume."""
    print("\n" + "="*80)
    print("EXAMPLE 2: Multiple Job Ranking")
    print("="*80)

    parsed = parse_resume(RESUME, lexicon=lexicon)
    jobs = [
        {"job_id": "annotator", "description": JOB_DESCRIPTION, "required_years_experience": 1},
        {"job_id": "senior-ml", "description": JOB_DESCRIPTION.replace("Data Annotator", "Senior ML Engineer"),
         "required_years_experience": 6},
        {"job_id": "nurse", "description": "Registered nurse for patient care and Excel reporting",
         "required_skills": ["Patient Care", "Excel"], "required_years_experience": 2},
    ]

    ranked = asyncio.run(rank_jobs_async(parsed.to_profile(), jobs, settings=settings, lexicon=lexicon))

    for match in ranked:
        print(f"\n#{match.rank} - {match.job_id}: {match.result.match_score:.2f}")
        print(f"  {match.result.explanation}")
    print(f"{'='*80}\n")


def main():
    """Run all examples."""
    settings = get_settings()
    lexicon = load_lexicon()

    example_basic_matching(settings, lexicon)
    example_multiple_jobs(settings, lexicon)


if __name__ == "__main__":
    main()
