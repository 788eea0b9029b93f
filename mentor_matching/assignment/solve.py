# mentor_matching/assignment/solve.py
from __future__ import annotations

from typing import Dict, List

import pandas as pd
import pulp

from ..models import Mentor, Mentee, Match
from .milp_model import build_assignment_model


def build_cost_matrix(
    mentors: List[Mentor],
    mentees: List[Mentee],
    matches: List[Match],
) -> pd.DataFrame:
    """
    cost[mentor_id, mentee_id] = 1 - normalized_score if a Match exists,
    else 1.0. Excluded pairs stay finite (maximally undesirable, not
    forbidden).
    """
    if not mentors or not mentees:
        return pd.DataFrame(
            index=[m.id for m in mentors],
            columns=[m.id for m in mentees],
            dtype=float,
        )

    by_pair: Dict[tuple, Match] = {m.key: m for m in matches}

    rows = [
        [
            1 - by_pair[(mentor.id, mentee.id)].normalized_score
            if (mentor.id, mentee.id) in by_pair else 1.0
            for mentee in mentees
        ]
        for mentor in mentors
    ]
    return pd.DataFrame(
        rows,
        index=[m.id for m in mentors],
        columns=[m.id for m in mentees],
        dtype=float,
    )


def solve_min_cost_assignment(cost: pd.DataFrame) -> Dict[str, str]:
    """
    Return {row label: column label} minimizing total cost. With a
    rectangular matrix the surplus rows / columns stay unassigned.
    """
    if cost.shape[0] == 0 or cost.shape[1] == 0:
        return {}

    prob, x = build_assignment_model(cost.to_numpy(dtype=float).tolist())

    solver = pulp.PULP_CBC_CMD(msg=False)
    prob.solve(solver)

    status = pulp.LpStatus[prob.status]
    if status != "Optimal":
        raise RuntimeError(f"Assignment model not solved to optimality: {status}")

    row_labels = list(cost.index)
    col_labels = list(cost.columns)

    assignment: Dict[str, str] = {}
    for (i, j), var in x.items():
        val = var.varValue
        if val is not None and val > 0.5:
            assignment[row_labels[i]] = col_labels[j]

    return assignment


def solve_optimal_pairing(
    mentors: List[Mentor],
    mentees: List[Mentee],
    matches: List[Match],
) -> Dict[str, str]:
    """Mentor id -> mentee id for the whole cohort."""
    cost = build_cost_matrix(mentors, mentees, matches)
    return solve_min_cost_assignment(cost)
