"""Human-readable match explanations. Fixed templates, no randomness."""

from .config import EXPLANATION_BANDS
from .scoring_engine import to_percentage


def generate_explanation(
    match_score: float,
    skill_match: float,
    experience_score: float,
    penalty_applied: bool = False,
) -> str:
    """
    Summarize a match in one or two sentences per component.

    Args:
        match_score: Final composite score (unrounded)
        skill_match: Skill match score (unrounded)
        experience_score: Experience score as used in the composite
        penalty_applied: Whether the kill switch fired

    Returns:
        Explanation string
    """
    skill_pct = to_percentage(skill_match)

    explanation = f"Overall match: {to_percentage(match_score)}%. "

    if skill_match >= EXPLANATION_BANDS["skills_strong"]:
        explanation += f"Strong skill match ({skill_pct}%). "
    elif skill_match >= EXPLANATION_BANDS["skills_good"]:
        explanation += f"Good skill match ({skill_pct}%). "
    else:
        explanation += f"Partial skill match ({skill_pct}%). "

    if experience_score >= EXPLANATION_BANDS["experience_met"]:
        explanation += "Experience requirement met."
    elif experience_score > 0:
        explanation += "Experience considered."
    else:
        explanation += "Experience mismatch or ignored."

    if penalty_applied:
        explanation = (
            f"Low skill match ({skill_pct}%). Experience ignored due to skill mismatch. "
            + explanation
        )

    return explanation
