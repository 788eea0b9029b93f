# mentor_matching/reporting.py
from __future__ import annotations

from typing import Dict, List, Optional

import pandas as pd

from .models import Match


def matches_to_frame(matches: List[Match]) -> pd.DataFrame:
    """One row per match, in list order, with one column per criterion contribution."""
    records = []
    for m in matches:
        row = {
            "mentor": m.mentor_id,
            "mentee": m.mentee_id,
            "distance": m.distance,
            "score": m.score,
            "normalized_score": m.normalized_score,
            "status": m.status.value,
        }
        for reason in m.reasons:
            row[reason.criterion] = reason.contribution
        records.append(row)

    columns = ["mentor", "mentee", "distance", "score", "normalized_score", "status"]
    if not records:
        return pd.DataFrame(columns=columns)
    return pd.DataFrame.from_records(records)


def score_matrix(
    matches: List[Match],
    mentor_ids: Optional[List[str]] = None,
    mentee_ids: Optional[List[str]] = None,
) -> pd.DataFrame:
    """
    Mentor x mentee table of normalized scores; excluded pairs are NaN.
    Pass the cohort ids so participants with every pair excluded still get
    an (all NaN) row or column.
    """
    if matches:
        df = matches_to_frame(matches)
        matrix = df.pivot(index="mentor", columns="mentee", values="normalized_score").sort_index()
    else:
        matrix = pd.DataFrame(dtype=float)

    if mentor_ids is not None:
        matrix = matrix.reindex(index=list(mentor_ids))
    if mentee_ids is not None:
        matrix = matrix.reindex(columns=list(mentee_ids))
    return matrix


def pairing_to_frame(pairing: Dict[str, str], matches: List[Match]) -> pd.DataFrame:
    by_pair = {m.key: m for m in matches}
    rows = []
    for mentor_id, mentee_id in sorted(pairing.items()):
        match = by_pair.get((mentor_id, mentee_id))
        rows.append({
            "mentor": mentor_id,
            "mentee": mentee_id,
            "normalized_score": match.normalized_score if match else None,
            "status": match.status.value if match else "excluded",
        })
    return pd.DataFrame(rows, columns=["mentor", "mentee", "normalized_score", "status"])
