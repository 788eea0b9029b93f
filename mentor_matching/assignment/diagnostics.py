# mentor_matching/assignment/diagnostics.py
from __future__ import annotations

from typing import Any, Dict, List

from ..models import Mentor, Mentee, Match


def analyze_pool(
    mentors: List[Mentor],
    mentees: List[Mentee],
    matches: List[Match],
) -> Dict[str, Any]:
    """
    Check the candidate pool before solving the assignment.

    The solver always returns a full pairing of the smaller side, but a
    participant whose every pair was excluded can only be paired at the
    worst (default) cost and will never get a recommendation.

    Returns a dict with:
      - 'ok': bool
      - 'messages': list[str] (human-readable diagnostics)
      - 'suggestion': str (summary)

      - 'num_mentors': int
      - 'num_mentees': int
      - 'num_candidate_pairs': int   (mentors x mentees)
      - 'num_scored_pairs': int      (pairs that produced a Match)
      - 'num_excluded_pairs': int
      - 'unmatchable_mentees': List[str]   (no scorable mentor)
      - 'unmatchable_mentors': List[str]   (no scorable mentee)
      - 'unassigned_side': str | None      ('mentors' / 'mentees' left over)
      - 'num_unassigned': int
    """
    messages: List[str] = []

    num_mentors = len(mentors)
    num_mentees = len(mentees)
    num_candidate_pairs = num_mentors * num_mentees
    num_scored_pairs = len(matches)
    num_excluded_pairs = num_candidate_pairs - num_scored_pairs

    # ---------- 1. Empty cohorts ----------
    if num_mentors == 0:
        messages.append("No mentors loaded. Nothing can be matched.")
    if num_mentees == 0:
        messages.append("No mentees loaded. Nothing can be matched.")

    # ---------- 2. Participants without any scorable partner ----------
    mentors_with_match = {m.mentor_id for m in matches}
    mentees_with_match = {m.mentee_id for m in matches}

    unmatchable_mentees = [n.id for n in mentees if n.id not in mentees_with_match]
    unmatchable_mentors = [m.id for m in mentors if m.id not in mentors_with_match]

    if num_mentors and unmatchable_mentees:
        for mid in unmatchable_mentees:
            messages.append(
                f"Mentee {mid} has no scorable mentor: every pair was removed "
                "by exclusion rules."
            )
    if num_mentees and unmatchable_mentors:
        for mid in unmatchable_mentors:
            messages.append(
                f"Mentor {mid} has no scorable mentee: every pair was removed "
                "by exclusion rules."
            )

    # ---------- 3. Size mismatch (informational) ----------
    unassigned_side = None
    num_unassigned = abs(num_mentors - num_mentees)
    if num_mentors > num_mentees:
        unassigned_side = "mentors"
    elif num_mentees > num_mentors:
        unassigned_side = "mentees"

    ok = len(messages) == 0

    if ok:
        suggestion = "Every participant has at least one scorable partner."
    else:
        suggestion = "Pool has gaps. "
        if num_mentors == 0 or num_mentees == 0:
            suggestion += "Load both cohorts before matching. "
        if unmatchable_mentees or unmatchable_mentors:
            suggestion += (
                "Relax the exclusion rules for the listed participants, "
                "or review them manually."
            )

    if unassigned_side:
        suggestion += (
            f" {num_unassigned} {unassigned_side} will stay unassigned "
            "because the cohorts differ in size."
        )

    return {
        "ok": ok,
        "messages": messages,
        "suggestion": suggestion.strip(),
        "num_mentors": num_mentors,
        "num_mentees": num_mentees,
        "num_candidate_pairs": num_candidate_pairs,
        "num_scored_pairs": num_scored_pairs,
        "num_excluded_pairs": num_excluded_pairs,
        "unmatchable_mentees": unmatchable_mentees,
        "unmatchable_mentors": unmatchable_mentors,
        "unassigned_side": unassigned_side,
        "num_unassigned": num_unassigned,
    }
