# mentor_matching/scoring/pairwise.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from ..config import (
    WEIGHTS,
    MAX_AGE_DIFF_YEARS,
    MAX_LANGUAGE_DIFF,
    MAX_STUDY_LEVEL_DIFF,
    NO_GENDER_PREFERENCE,
)
from ..models import Mentor, Mentee, MatchReason
from .normalizers import language_rank, study_rank


@dataclass(frozen=True)
class PairScore:
    distances: Dict[str, float]   # criterion -> distance in [0, 1]
    distance: float               # weighted sum
    reasons: List[MatchReason] = field(default_factory=list)

    @property
    def score(self) -> float:
        return 1 - self.distance


def _norm(s) -> str:
    return "" if s is None else str(s).strip().lower()


def age_distance(mentor: Mentor, mentee: Mentee) -> float:
    # 0 is an unknown year, never a good match
    if not mentor.birth_year or not mentee.birth_year:
        return 1.0
    diff = abs(mentor.birth_year - mentee.birth_year)
    return min(diff / MAX_AGE_DIFF_YEARS, 1.0)


def gender_distance(mentor: Mentor, mentee: Mentee) -> float:
    wanted = _norm(mentee.desired_gender)
    if wanted in NO_GENDER_PREFERENCE:
        return 0.0
    return 0.0 if _norm(mentor.gender) == wanted else 1.0


def language_distance(mentor: Mentor, mentee: Mentee) -> float:
    """Best-matching of the two languages wins."""
    german_diff = abs(language_rank(mentor.german_level) - language_rank(mentee.german_level))
    english_diff = abs(language_rank(mentor.english_level) - language_rank(mentee.english_level))
    return min(min(german_diff, english_diff) / MAX_LANGUAGE_DIFF, 1.0)


def city_distance(mentor: Mentor, mentee: Mentee) -> float:
    return 0.0 if _norm(mentor.city) == _norm(mentee.city) else 1.0


def study_level_distance(mentor: Mentor, mentee: Mentee) -> float:
    """
    Mentors at or above the mentee's level are fine; mentors below it are
    penalized by the gap.
    """
    mentor_level = study_rank(mentor.level_of_studies)
    mentee_level = study_rank(mentee.level_of_studies)
    if mentor_level >= mentee_level:
        return 0.0
    return min((mentee_level - mentor_level) / MAX_STUDY_LEVEL_DIFF, 1.0)


def nationality_distance(mentor: Mentor, mentee: Mentee) -> float:
    return 0.0 if _norm(mentor.nationality) == _norm(mentee.nationality) else 1.0


def _year_label(year: int) -> str:
    return str(year) if year else "unknown"


def score_pair(mentor: Mentor, mentee: Mentee) -> PairScore:
    """
    Score one mentor/mentee pair.

    Returns the per-criterion distances (each in [0, 1]), the weighted sum
    (in [0, sum(WEIGHTS)]) and one MatchReason per criterion, in display
    order.
    """
    d = {
        "age": age_distance(mentor, mentee),
        "gender": gender_distance(mentor, mentee),
        "language": language_distance(mentor, mentee),
        "city": city_distance(mentor, mentee),
        "study_level": study_level_distance(mentor, mentee),
        "nationality": nationality_distance(mentor, mentee),
    }
    distance = sum(WEIGHTS[k] * v for k, v in d.items())

    if mentor.birth_year and mentee.birth_year:
        year_gap = f"{abs(mentor.birth_year - mentee.birth_year)} years"
    else:
        year_gap = "unknown"
    explanations = {
        "age": (
            "Age Difference",
            f"Age difference: {year_gap} "
            f"({_year_label(mentor.birth_year)} / {_year_label(mentee.birth_year)})",
        ),
        "gender": (
            "Gender Preference",
            "Preferred gender matched / no gender preference"
            if d["gender"] == 0 else "Gender preference mismatch",
        ),
        "language": (
            "Language Compatibility",
            f"Language levels - German: {mentor.german_level}/{mentee.german_level}, "
            f"English: {mentor.english_level}/{mentee.english_level}",
        ),
        "city": (
            "Location",
            f"Same city: {mentor.city}"
            if d["city"] == 0 else f"Different cities: {mentor.city} / {mentee.city}",
        ),
        "study_level": (
            "Academic Level",
            f"Study levels: {mentor.level_of_studies} | {mentee.level_of_studies}",
        ),
        "nationality": (
            "Nationality",
            f"Same nationality: {mentor.nationality}"
            if d["nationality"] == 0 else "Different nationalities",
        ),
    }

    reasons = [
        MatchReason(
            criterion=label,
            weight=WEIGHTS[k],
            contribution=WEIGHTS[k] * d[k],
            explanation=text,
        )
        for k, (label, text) in explanations.items()
    ]

    return PairScore(distances=d, distance=distance, reasons=reasons)
