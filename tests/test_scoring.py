# tests/test_scoring.py
import unittest
import sys
import os

# Add parent directory to path to import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from mentor_matching.models import Mentor, Mentee
from mentor_matching.config import WEIGHTS
from mentor_matching.scoring.normalizers import language_rank, study_rank
from mentor_matching.scoring.pairwise import (
    score_pair, age_distance, gender_distance, study_level_distance,
)
from mentor_matching.data_generation.toy_dataset import make_toy_cohorts


def scenario_pair():
    mentor = Mentor(
        id="M1", birth_year=1990, gender="male", german_level="C1",
        english_level="B2", nationality="DE", city="Berlin", level_of_studies="Master",
    )
    mentee = Mentee(
        id="N1", birth_year=1998, desired_gender="doesn't matter", german_level="B1",
        english_level="B2", nationality="DE", city="Berlin", level_of_studies="Bachelor",
    )
    return mentor, mentee


class TestNormalizers(unittest.TestCase):

    def test_language_levels(self):
        self.assertEqual(language_rank("A1"), 1)
        self.assertEqual(language_rank("C2"), 6)
        self.assertEqual(language_rank("Upper Intermediate"), 4)
        self.assertEqual(language_rank("native"), 6)
        self.assertEqual(language_rank("Muttersprache / Native language"), 6)

    def test_language_lookup_ignores_case_and_whitespace(self):
        self.assertEqual(language_rank(" b2 "), 4)
        self.assertEqual(language_rank("ADVANCED"), 5)

    def test_unknown_labels_are_rank_zero(self):
        for label in ["", None, "fluent-ish", "Z9"]:
            self.assertEqual(language_rank(label), 0)
            self.assertEqual(study_rank(label), 0)

    def test_study_levels(self):
        self.assertEqual(study_rank("Other"), 0)
        self.assertEqual(study_rank("Bachelor"), 1)
        self.assertEqual(study_rank("PhD"), 3)
        self.assertEqual(study_rank("Doktorat / PhD"), 3)
        self.assertEqual(study_rank("Professor"), 5)


class TestPairwiseScorer(unittest.TestCase):

    def test_reference_pair(self):
        mentor, mentee = scenario_pair()
        pair = score_pair(mentor, mentee)

        self.assertAlmostEqual(pair.distances["age"], 8 / 30)
        self.assertEqual(pair.distances["gender"], 0)
        self.assertEqual(pair.distances["language"], 0)
        self.assertEqual(pair.distances["city"], 0)
        self.assertEqual(pair.distances["study_level"], 0)
        self.assertEqual(pair.distances["nationality"], 0)
        self.assertAlmostEqual(pair.distance, 0.08)
        self.assertAlmostEqual(pair.score, 0.92)

    def test_reasons_follow_criteria(self):
        mentor, mentee = scenario_pair()
        pair = score_pair(mentor, mentee)

        self.assertEqual(
            [r.criterion for r in pair.reasons],
            ["Age Difference", "Gender Preference", "Language Compatibility",
             "Location", "Academic Level", "Nationality"],
        )
        self.assertAlmostEqual(sum(r.contribution for r in pair.reasons), pair.distance)
        self.assertIn("8 years", pair.reasons[0].explanation)
        self.assertEqual(pair.reasons[3].explanation, "Same city: Berlin")

    def test_worst_pair_hits_upper_bound(self):
        mentor = Mentor(
            id="M9", birth_year=1960, gender="male", nationality="DE", city="Berlin",
            german_level="", english_level="", level_of_studies="Other",
        )
        mentee = Mentee(
            id="N9", birth_year=2000, desired_gender="female", nationality="UA",
            city="Munich", german_level="C2", english_level="native",
            level_of_studies="Professor",
        )
        pair = score_pair(mentor, mentee)
        self.assertAlmostEqual(pair.distance, sum(WEIGHTS.values()))
        self.assertAlmostEqual(pair.distance, 2.30)
        self.assertLessEqual(pair.distance, 2.45)

    def test_distance_bounds_on_toy_cohorts(self):
        mentors, mentees = make_toy_cohorts(num_mentors=12, num_mentees=12, seed=7)
        for m in mentors:
            for n in mentees:
                pair = score_pair(m, n)
                self.assertGreaterEqual(pair.distance, 0.0)
                self.assertLessEqual(pair.distance, 2.45 + 1e-9)
                self.assertAlmostEqual(pair.score, 1 - pair.distance)
                for d in pair.distances.values():
                    self.assertTrue(0.0 <= d <= 1.0)

    def test_gender_preference(self):
        mentor = Mentor(id="M1", gender="Female")
        self.assertEqual(gender_distance(mentor, Mentee(id="N1", desired_gender="female")), 0)
        self.assertEqual(gender_distance(mentor, Mentee(id="N1", desired_gender="male")), 1)
        self.assertEqual(gender_distance(mentor, Mentee(id="N1", desired_gender="Doesn't Matter")), 0)
        self.assertEqual(gender_distance(mentor, Mentee(id="N1", desired_gender="")), 0)

    def test_study_level_only_penalizes_mentor_below_mentee(self):
        phd_mentor = Mentor(id="M1", level_of_studies="PhD")
        bachelor_mentor = Mentor(id="M2", level_of_studies="Bachelor")
        master_mentee = Mentee(id="N1", level_of_studies="Master")
        postdoc_mentee = Mentee(id="N2", level_of_studies="PostDoc")

        self.assertEqual(study_level_distance(phd_mentor, master_mentee), 0)
        self.assertAlmostEqual(study_level_distance(bachelor_mentor, master_mentee), 0.25)
        self.assertAlmostEqual(study_level_distance(bachelor_mentor, postdoc_mentee), 0.75)

    def test_malformed_attributes_do_not_raise(self):
        pair = score_pair(Mentor(id="M1"), Mentee(id="N1"))
        # everything empty: equal strings and zero ranks, but unknown years
        self.assertAlmostEqual(pair.distance, WEIGHTS["age"])
        self.assertIn("unknown", pair.reasons[0].explanation)

    def test_unknown_birth_year_is_never_a_good_age_match(self):
        known_mentor = Mentor(id="M1", birth_year=1990)
        known_mentee = Mentee(id="N1", birth_year=1990)
        unknown_mentor = Mentor(id="M2")
        unknown_mentee = Mentee(id="N2")

        self.assertEqual(age_distance(known_mentor, known_mentee), 0.0)
        self.assertEqual(age_distance(known_mentor, unknown_mentee), 1.0)
        self.assertEqual(age_distance(unknown_mentor, known_mentee), 1.0)
        self.assertEqual(age_distance(unknown_mentor, unknown_mentee), 1.0)


if __name__ == '__main__':
    unittest.main()
