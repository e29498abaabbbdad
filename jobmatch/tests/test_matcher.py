"""
Unit tests for the resume-job matching pipeline.
"""

import asyncio
import logging
import unittest

from pydantic import ValidationError

from jobmatch import calculate_match, match_request, rank_jobs, rank_jobs_async
from jobmatch.config import ScoringSettings
from jobmatch.extractor import extract_skills
from jobmatch.matcher import resolve_required_skills

# Configure logging for tests
logging.basicConfig(level=logging.INFO)


SAMPLE_RESUME = "5 years experience in Python and React"
SAMPLE_JOB = "Looking for a developer with Python, React and SQL"


class TestEndToEnd(unittest.TestCase):
    """Full pipeline on small hand-checked inputs."""

    def test_inferred_skills_partial_match(self):
        result = calculate_match(SAMPLE_RESUME, SAMPLE_JOB, ["Python", "React"], [], 5, 3)

        self.assertEqual(result.skill_match, 0.67)
        self.assertEqual(result.experience_score, 1.0)
        self.assertEqual(result.matched_skills, ["Python", "React"])
        self.assertEqual(result.missing_skills, ["SQL"])
        self.assertFalse(result.penalty_applied)
        # job tokens: looking, developer, python, react, sql
        self.assertEqual(result.text_similarity, 0.4)
        self.assertEqual(result.matched_keywords, ["python", "react"])
        # 0.3 * 0.4 + 0.5 * 2/3 + 0.2 * 1.0 = 0.6533
        self.assertEqual(result.match_score, 0.65)
        self.assertEqual(
            result.explanation,
            "Overall match: 65%. Good skill match (67%). Experience requirement met.",
        )

    def test_declared_skills_take_precedence(self):
        result = calculate_match(SAMPLE_RESUME, SAMPLE_JOB, ["Python"], ["Python", "Kubernetes"], 5, 3)
        self.assertEqual(result.matched_skills, ["Python"])
        self.assertEqual(result.missing_skills, ["Kubernetes"])
        self.assertEqual(result.skill_match, 0.5)

    def test_perfect_match(self):
        result = calculate_match(SAMPLE_JOB, SAMPLE_JOB, ["python", "REACT", "Sql"], [], 10, 3)
        self.assertEqual(result.skill_match, 1.0)
        self.assertEqual(result.text_similarity, 1.0)
        self.assertEqual(result.match_score, 1.0)
        self.assertEqual(result.missing_skills, [])
        self.assertTrue(result.explanation.startswith("Overall match: 100%. Strong skill match (100%)."))

    def test_missing_inputs_default(self):
        result = calculate_match(None, None, None, None, None, None)
        self.assertEqual(result.match_score, 0.2)  # only the "no requirement" experience credit
        self.assertEqual(result.text_similarity, 0.0)
        self.assertEqual(result.skill_match, 0.0)
        self.assertEqual(result.experience_score, 1.0)
        self.assertEqual(result.matched_skills, [])
        self.assertEqual(result.missing_skills, [])
        self.assertEqual(result.matched_keywords, [])


class TestKillSwitch(unittest.TestCase):
    """Weak skill evidence must not be masked by text or experience overlap."""

    def test_override_caps_score(self):
        job = "Cloud engineer needed: Python, AWS and Docker on production systems"
        result = calculate_match(job, job, ["Excel"], ["Python", "AWS", "Docker"], 15, 2)

        self.assertTrue(result.penalty_applied)
        self.assertEqual(result.skill_match, 0.0)
        self.assertEqual(result.experience_score, 0.0)
        self.assertLessEqual(result.match_score, 0.20)
        self.assertEqual(result.match_score, 0.2)  # coverage alone would give 0.30
        self.assertTrue(result.explanation.startswith(
            "Low skill match (0%). Experience ignored due to skill mismatch. "
        ))
        self.assertTrue(result.explanation.endswith("Experience mismatch or ignored."))

    def test_override_threshold_is_strict(self):
        required = ["Python", "AWS", "Docker", "SQL", "Java"]
        result = calculate_match("", "", ["Python"], required, 5, 2)  # exactly 0.20
        self.assertFalse(result.penalty_applied)
        self.assertEqual(result.experience_score, 1.0)

    def test_no_override_without_requirements(self):
        result = calculate_match("Experienced barista", "Friendly barista wanted", ["Excel"], [], 3, 0)
        self.assertFalse(result.penalty_applied)
        self.assertEqual(result.skill_match, 0.0)
        # 0.3 * 1/3 + 0.2 * 1.0
        self.assertEqual(result.match_score, 0.3)
        self.assertEqual(
            result.explanation,
            "Overall match: 30%. Partial skill match (0%). Experience requirement met.",
        )

    def test_custom_settings(self):
        settings = ScoringSettings(skill_threshold=0.5, score_cap=0.1)
        result = calculate_match(SAMPLE_JOB, SAMPLE_JOB, ["Python"], ["Python", "Go", "Rust"], 5, 2,
                                 settings=settings)
        self.assertTrue(result.penalty_applied)
        self.assertEqual(result.match_score, 0.1)


class TestEffectiveRequiredSkills(unittest.TestCase):

    def test_fallback_equals_extraction(self):
        job = "We build React Native apps backed by Node.js, PostgreSQL and AWS"
        self.assertEqual(resolve_required_skills([], job), extract_skills(job))
        self.assertEqual(resolve_required_skills(None, job), extract_skills(job))

    def test_declared_list_is_cleaned(self):
        self.assertEqual(
            resolve_required_skills([" Python ", "python", "", "SQL"], "irrelevant"),
            ["Python", "SQL"],
        )

    def test_declared_names_use_lexicon_spelling(self):
        self.assertEqual(
            resolve_required_skills(["aws", "react native", "Patient Care"], ""),
            ["AWS", "React Native", "Patient Care"],
        )
        result = calculate_match("", "", ["Python"], ["python", "aws"], 0, 0)
        self.assertEqual(result.matched_skills, ["Python"])
        self.assertEqual(result.missing_skills, ["AWS"])

    def test_partition_invariant(self):
        cases = [
            (["Python", "react"], ["Python", "React", "SQL"], ""),
            ([], ["Python"], ""),
            (["Go"], [], "Backend role in Go, Rust and Kubernetes"),
            (["Excel", "SQL"], [], "Financial Analysis with Excel and SQL; Tableau a plus"),
            (["Java"], ["Java", "JAVA", "C#"], ""),
        ]
        for resume_skills, required, job in cases:
            with self.subTest(required=required, job=job):
                result = calculate_match("", job, resume_skills, required, 0, 0)
                effective = resolve_required_skills(required, job)
                matched = set(result.matched_skills)
                missing = set(result.missing_skills)
                self.assertEqual(matched | missing, set(effective))
                self.assertFalse(matched & missing)
                all_present = all(s.lower() in {r.lower() for r in resume_skills} for s in effective)
                self.assertEqual(result.skill_match == 1.0, bool(effective) and all_present)


class TestMatchRequest(unittest.TestCase):

    def test_request_dict_with_nulls(self):
        result = match_request({
            "resume_text": None,
            "job_description": SAMPLE_JOB,
            "resume_skills": None,
            "required_skills": None,
            "resume_years_experience": None,
            "required_years_experience": 3,
        })
        self.assertEqual(result.missing_skills, ["Python", "React", "SQL"])
        self.assertTrue(result.penalty_applied)

    def test_negative_years_rejected(self):
        with self.assertRaises(ValidationError):
            match_request({"resume_years_experience": -1})

    def test_camel_case_output(self):
        result = calculate_match(SAMPLE_RESUME, SAMPLE_JOB, ["Python", "React"], [], 5, 3)
        data = result.to_dict()
        for key in ("matchScore", "textSimilarity", "skillMatch", "experienceScore",
                    "matchedSkills", "missingSkills", "matchedKeywords", "explanation"):
            self.assertIn(key, data)
        self.assertEqual(data["skillMatch"], 0.67)

    def test_result_is_frozen(self):
        result = calculate_match(SAMPLE_RESUME, SAMPLE_JOB, [], [], 0, 0)
        with self.assertRaises(ValidationError):
            result.match_score = 1.0


class TestRanking(unittest.TestCase):

    RESUME = {
        "text": "Python developer building Django services",
        "skills": ["Python", "Django"],
        "years_experience": 4,
    }
    JOBS = [
        {"job_id": "a", "description": "Python Django services", "required_skills": ["Python", "SQL"]},
        {"job_id": "b", "description": "Python Django services", "required_skills": ["Python", "Django"]},
        {"job_id": "c", "description": "Python Django services", "required_skills": ["Python", "SQL"]},
    ]

    def test_sorted_with_stable_ties(self):
        ranked = rank_jobs(self.RESUME, self.JOBS)
        self.assertEqual([m.job_id for m in ranked], ["b", "a", "c"])
        self.assertEqual([m.rank for m in ranked], [1, 2, 3])
        self.assertEqual([m.job_index for m in ranked], [1, 0, 2])
        self.assertEqual(ranked[1].result, ranked[2].result)

    def test_async_matches_sync(self):
        settings = ScoringSettings(max_concurrency=2)
        sync_ranked = rank_jobs(self.RESUME, self.JOBS, settings=settings)
        async_ranked = asyncio.run(rank_jobs_async(self.RESUME, self.JOBS, settings=settings))
        self.assertEqual(sync_ranked, async_ranked)

    def test_empty_job_list(self):
        self.assertEqual(rank_jobs(self.RESUME, []), [])

    def test_invalid_job_rejected(self):
        with self.assertRaises(ValidationError):
            rank_jobs(self.RESUME, [{"description": "x", "required_years_experience": -2}])


class TestDeterminism(unittest.TestCase):
    """Same inputs produce the same outputs."""

    def test_repeated_runs(self):
        first = calculate_match(SAMPLE_RESUME, SAMPLE_JOB, ["Python"], [], 2, 4)
        second = calculate_match(SAMPLE_RESUME, SAMPLE_JOB, ["Python"], [], 2, 4)
        self.assertEqual(first, second)


if __name__ == "__main__":
    unittest.main()
