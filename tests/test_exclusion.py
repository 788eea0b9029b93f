# tests/test_exclusion.py
import unittest
import sys
import os

# Add parent directory to path to import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from mentor_matching.models import (
    Mentor, Mentee, ExclusionCriterion, MentorAttribute, Condition,
)
from mentor_matching.scoring.exclusion import (
    passes_exclusion_criteria,
    attribute_value_options,
)


class TestExclusionFilter(unittest.TestCase):

    def setUp(self):
        self.m1 = Mentor(id="M1", birth_year=1990, gender="male", city="Berlin",
                         nationality="DE", level_of_studies="Master")
        self.m2 = Mentor(id="M2", birth_year=1985, gender="female", city="Munich",
                         nationality="UA", level_of_studies="PhD")
        self.m_unknown_year = Mentor(id="M3", birth_year=0, city="Berlin")
        self.n1 = Mentee(id="N1")
        self.n2 = Mentee(id="N2")

    def test_no_rules_always_pass(self):
        self.assertTrue(passes_exclusion_criteria(self.m1, self.n1, []))

    def test_mentor_id_not_equals_excludes_that_mentor(self):
        rule = ExclusionCriterion("N1", "mentorId", "not_equals", "M1")
        self.assertFalse(passes_exclusion_criteria(self.m1, self.n1, [rule]))
        self.assertTrue(passes_exclusion_criteria(self.m2, self.n1, [rule]))

    def test_mentor_id_comparison_ignores_case(self):
        rule = ExclusionCriterion("N1", "mentorId", "not_equals", "m1")
        self.assertFalse(passes_exclusion_criteria(self.m1, self.n1, [rule]))
        self.assertTrue(passes_exclusion_criteria(self.m2, self.n1, [rule]))

    def test_rules_only_apply_to_their_mentee(self):
        rule = ExclusionCriterion("N1", "mentorId", "not_equals", "M1")
        self.assertTrue(passes_exclusion_criteria(self.m1, self.n2, [rule]))

    def test_equals_is_case_insensitive_requirement(self):
        rule = ExclusionCriterion("N1", "city", "equals", "berlin")
        self.assertTrue(passes_exclusion_criteria(self.m1, self.n1, [rule]))
        self.assertFalse(passes_exclusion_criteria(self.m2, self.n1, [rule]))

    def test_numeric_bounds(self):
        at_least = ExclusionCriterion("N1", "birthYear", "at_least", "1988")
        at_most = ExclusionCriterion("N1", "birthYear", "at_most", "1988")

        self.assertTrue(passes_exclusion_criteria(self.m1, self.n1, [at_least]))
        self.assertFalse(passes_exclusion_criteria(self.m2, self.n1, [at_least]))
        self.assertFalse(passes_exclusion_criteria(self.m1, self.n1, [at_most]))
        self.assertTrue(passes_exclusion_criteria(self.m2, self.n1, [at_most]))

    def test_non_numeric_comparison_fails_closed(self):
        for cond in ["at_least", "at_most"]:
            on_text_attr = ExclusionCriterion("N1", "city", cond, "3")
            with_text_value = ExclusionCriterion("N1", "birthYear", cond, "nineteen")
            self.assertFalse(passes_exclusion_criteria(self.m1, self.n1, [on_text_attr]))
            self.assertFalse(passes_exclusion_criteria(self.m1, self.n1, [with_text_value]))

    def test_only_plain_decimals_count_as_numbers(self):
        for value in ["infinity", "inf", "-inf", "nan", "1_990", "1e3"]:
            for cond in ["at_least", "at_most"]:
                rule = ExclusionCriterion("N1", "birthYear", cond, value)
                self.assertFalse(passes_exclusion_criteria(self.m1, self.n1, [rule]), value)

        rule = ExclusionCriterion("N1", "birthYear", "at_least", " 1989.5 ")
        self.assertTrue(passes_exclusion_criteria(self.m1, self.n1, [rule]))

    def test_unknown_birth_year_fails_numeric_rules(self):
        rule = ExclusionCriterion("N1", "birthYear", "at_most", "2000")
        self.assertFalse(passes_exclusion_criteria(self.m_unknown_year, self.n1, [rule]))

    def test_all_rules_must_hold(self):
        rules = [
            ExclusionCriterion("N1", "gender", "equals", "male"),
            ExclusionCriterion("N1", "nationality", "not_equals", "DE"),
        ]
        self.assertFalse(passes_exclusion_criteria(self.m1, self.n1, rules))
        # order does not matter
        self.assertFalse(passes_exclusion_criteria(self.m1, self.n1, list(reversed(rules))))
        self.assertFalse(passes_exclusion_criteria(self.m2, self.n1, rules))

    def test_rule_creation_rejects_unknown_names(self):
        with self.assertRaises(ValueError):
            ExclusionCriterion("N1", "favouriteColour", "equals", "blue")
        with self.assertRaises(ValueError):
            ExclusionCriterion("N1", "city", "greater_than", "3")

    def test_rule_creation_accepts_form_labels(self):
        rule = ExclusionCriterion("N1", "Birth year", "at least", 1990)
        self.assertIs(rule.attribute, MentorAttribute.BIRTH_YEAR)
        self.assertIs(rule.condition, Condition.AT_LEAST)
        self.assertEqual(rule.value, "1990")

        self.assertIs(MentorAttribute.parse("Level ofStudies"), MentorAttribute.LEVEL_OF_STUDIES)
        self.assertIs(MentorAttribute.parse("MentorId"), MentorAttribute.MENTOR_ID)
        self.assertIs(MentorAttribute.parse("german_level"), MentorAttribute.GERMAN_LEVEL)

    def test_attribute_value_options(self):
        mentors = [self.m1, self.m2, self.m_unknown_year]
        self.assertEqual(attribute_value_options(mentors, "mentorId"), ["M1", "M2", "M3"])
        self.assertEqual(attribute_value_options(mentors, "city"), ["Berlin", "Munich"])
        self.assertEqual(attribute_value_options(mentors, "birthYear"), ["1985", "1990"])
        self.assertEqual(attribute_value_options(mentors, "englishLevel"), [])


if __name__ == '__main__':
    unittest.main()
