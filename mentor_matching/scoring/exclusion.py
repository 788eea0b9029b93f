# mentor_matching/scoring/exclusion.py
from __future__ import annotations

import math
import re
from typing import Callable, Dict, Iterable, List

from ..models import Mentor, Mentee, MentorAttribute, Condition, ExclusionCriterion


# Typed accessor per attribute; birth year 0 means unknown and resolves to "".
MENTOR_ATTRIBUTE_ACCESSORS: Dict[MentorAttribute, Callable[[Mentor], str]] = {
    MentorAttribute.MENTOR_ID: lambda m: m.id,
    MentorAttribute.GENDER: lambda m: m.gender,
    MentorAttribute.NATIONALITY: lambda m: m.nationality,
    MentorAttribute.CITY: lambda m: m.city,
    MentorAttribute.LEVEL_OF_STUDIES: lambda m: m.level_of_studies,
    MentorAttribute.GERMAN_LEVEL: lambda m: m.german_level,
    MentorAttribute.ENGLISH_LEVEL: lambda m: m.english_level,
    MentorAttribute.BIRTH_YEAR: lambda m: str(m.birth_year) if m.birth_year else "",
}


def mentor_attribute_value(mentor: Mentor, attribute: MentorAttribute) -> str:
    value = MENTOR_ATTRIBUTE_ACCESSORS[attribute](mentor)
    return "" if value is None else str(value)


_PLAIN_NUMBER = re.compile(r"[+-]?\d+(\.\d+)?")


def _to_number(s: str) -> float:
    """Plain decimal numbers only; anything else (incl. "inf", "nan", "1_990") is NaN."""
    if not _PLAIN_NUMBER.fullmatch(s.strip()):
        return math.nan
    return float(s)


def _holds(actual: str, condition: Condition, expected: str) -> bool:
    if condition is Condition.EQUALS:
        return actual == expected
    if condition is Condition.NOT_EQUALS:
        return actual != expected
    # NaN comparisons are always False, so non-numeric values exclude the pair
    if condition is Condition.AT_LEAST:
        return _to_number(actual) >= _to_number(expected)
    if condition is Condition.AT_MOST:
        return _to_number(actual) <= _to_number(expected)
    raise ValueError(f"Unknown exclusion condition: {condition!r}")


def passes_exclusion_criteria(
    mentor: Mentor,
    mentee: Mentee,
    criteria: Iterable[ExclusionCriterion],
) -> bool:
    """
    Every criterion scoped to this mentee is a required condition on the
    mentor. The first unmet one excludes the pair.
    """
    for criterion in criteria:
        if criterion.mentee_id != mentee.id:
            continue

        actual = mentor_attribute_value(mentor, criterion.attribute).strip().lower()
        expected = criterion.value.strip().lower()

        if not _holds(actual, criterion.condition, expected):
            return False
    return True


def attribute_value_options(
    mentors: Iterable[Mentor],
    attribute,
) -> List[str]:
    """
    Distinct, non-empty values of `attribute` across mentors, for building
    rules. Mentor ids are returned in input order, everything else sorted.
    """
    attribute = MentorAttribute.parse(attribute)
    if attribute is MentorAttribute.MENTOR_ID:
        return [m.id for m in mentors]

    values = {mentor_attribute_value(m, attribute) for m in mentors}
    values.discard("")
    return sorted(values)
