# mentor_matching/assignment/milp_model.py
from __future__ import annotations

from typing import Dict, List, Tuple
import pulp


def build_assignment_model(
    costs: List[List[float]],
) -> Tuple[pulp.LpProblem, Dict[Tuple[int, int], pulp.LpVariable]]:
    """
    Min-cost one-to-one assignment between rows (mentors) and columns
    (mentees) of a possibly rectangular cost matrix.

    Variables:
        x[i, j] = 1 if row i is assigned to column j.

    Rules encoded:

      1) Each row is assigned at most once:
           ∀i: sum_j x[i,j] ≤ 1

      2) Each column is assigned at most once:
           ∀j: sum_i x[i,j] ≤ 1

      3) As many pairs as the smaller side allows:
           sum_ij x[i,j] = min(rows, cols)

    Objective: minimize sum_ij cost[i][j] * x[i,j].

    The constraint matrix is totally unimodular, so CBC's optimum is the
    global optimum over all one-to-one assignments of that size.
    """
    rows = range(len(costs))
    cols = range(len(costs[0]) if costs else 0)

    # ---------- Problem ----------
    prob = pulp.LpProblem("Mentor_Mentee_Assignment", pulp.LpMinimize)

    # ---------- Decision variables ----------
    x: Dict[Tuple[int, int], pulp.LpVariable] = {}
    for i in rows:
        for j in cols:
            x[(i, j)] = pulp.LpVariable(f"x_{i}_{j}", lowBound=0, upBound=1, cat="Binary")

    # ---------- Objective ----------
    prob += pulp.lpSum(costs[i][j] * x[(i, j)] for i in rows for j in cols), "Total_Cost"

    # ---------- Constraints ----------

    # (1) One mentee per mentor
    for i in rows:
        prob += (
            pulp.lpSum(x[(i, j)] for j in cols) <= 1,
            f"OneMenteePerMentor_{i}",
        )

    # (2) One mentor per mentee
    for j in cols:
        prob += (
            pulp.lpSum(x[(i, j)] for i in rows) <= 1,
            f"OneMentorPerMentee_{j}",
        )

    # (3) Full cardinality on the smaller side
    prob += (
        pulp.lpSum(x.values()) == min(len(rows), len(cols)),
        "AssignSmallerSide",
    )

    return prob, x
