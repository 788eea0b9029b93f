# mentor_matching/scoring/match_set.py
from __future__ import annotations

from typing import Iterable, List, Optional

from ..config import TOP_MATCHES_DEFAULT
from ..models import Mentor, Mentee, Match, MatchStatus, ExclusionCriterion
from .exclusion import passes_exclusion_criteria
from .pairwise import score_pair


def normalize_scores(matches: List[Match]) -> None:
    """
    Min-max normalize distances across the whole batch, inverted so the
    closest pair gets 1.0. If all distances are equal every score is 1.0.
    """
    if not matches:
        return

    distances = [m.distance for m in matches]
    min_dist = min(distances)
    max_dist = max(distances)
    spread = (max_dist - min_dist) or 1

    for m in matches:
        m.normalized_score = 1 - (m.distance - min_dist) / spread


def calculate_matches(
    mentors: List[Mentor],
    mentees: List[Mentee],
    criteria: Iterable[ExclusionCriterion] = (),
) -> List[Match]:
    """
    Score every mentor x mentee pair that survives the exclusion rules.

    Excluded pairs produce no Match at all. The result is sorted by
    normalized score, best first.
    """
    criteria = list(criteria)
    matches: List[Match] = []

    for mentor in mentors:
        for mentee in mentees:
            if not passes_exclusion_criteria(mentor, mentee, criteria):
                continue

            pair = score_pair(mentor, mentee)
            matches.append(
                Match(
                    mentor_id=mentor.id,
                    mentee_id=mentee.id,
                    distance=pair.distance,
                    score=pair.score,
                    reasons=pair.reasons,
                    status=MatchStatus.PENDING,
                )
            )

    normalize_scores(matches)
    matches.sort(key=lambda m: m.normalized_score, reverse=True)
    return matches


def get_top_matches(
    matches: List[Match],
    mentor_id: Optional[str] = None,
    mentee_id: Optional[str] = None,
    limit: int = TOP_MATCHES_DEFAULT,
) -> List[Match]:
    """
    First `limit` matches for a mentor (takes precedence) or a mentee.
    Relies on `matches` already being sorted best first.
    """
    if mentor_id:
        filtered = [m for m in matches if m.mentor_id == mentor_id]
    elif mentee_id:
        filtered = [m for m in matches if m.mentee_id == mentee_id]
    else:
        filtered = list(matches)
    return filtered[:limit]
