# run_matching.py

import os

import pandas as pd

from mentor_matching.config import MENTORS_CSV_PATH, MENTEES_CSV_PATH
from mentor_matching.models import ExclusionCriterion
from mentor_matching.data_generation.csv_loader import load_mentors, load_mentees
from mentor_matching.data_generation.toy_dataset import make_toy_cohorts
from mentor_matching.scoring.match_set import calculate_matches, get_top_matches
from mentor_matching.assignment.diagnostics import analyze_pool
from mentor_matching.assignment.session import AssignmentSession
from mentor_matching.reporting import matches_to_frame, score_matrix, pairing_to_frame


def load_cohorts():
    if os.path.exists(MENTORS_CSV_PATH) and os.path.exists(MENTEES_CSV_PATH):
        print(f"Found CSVs at {MENTORS_CSV_PATH} / {MENTEES_CSV_PATH}. Loading...")
        return load_mentors(MENTORS_CSV_PATH), load_mentees(MENTEES_CSV_PATH)

    print("No CSV exports found, using toy cohorts.")
    return make_toy_cohorts()


def main():
    mentors, mentees = load_cohorts()

    # Edit to add rules, e.g.
    #   ExclusionCriterion("N001", "mentorId", "not_equals", "M003")
    #   ExclusionCriterion("N002", "birthYear", "at_most", "1985")
    criteria = [
        ExclusionCriterion("N001", "mentorId", "not_equals", "M001"),
    ]

    print(f"\n[MATCHING] Scoring {len(mentors)} mentors x {len(mentees)} mentees "
          f"with {len(criteria)} exclusion rule(s)...")
    matches = calculate_matches(mentors, mentees, criteria)
    print(f"[MATCHING] {len(matches)} scorable pairs.")

    pd.set_option("display.width", 160)
    pd.set_option("display.max_columns", 20)

    print("\n=== NORMALIZED SCORE MATRIX (1 = best, NaN = excluded) ===")
    print(score_matrix(matches, [m.id for m in mentors], [n.id for n in mentees]).round(2))

    print("\n=== TOP 10 MATCHES ===")
    print(matches_to_frame(matches[:10]).round(3))

    # ---- Diagnostics ----
    diag = analyze_pool(mentors, mentees, matches)
    print("\n=== DIAGNOSTICS ===")
    if diag["messages"]:
        for msg in diag["messages"]:
            print("-", msg)
    else:
        print("- No pool issues detected.")
    print("Suggestion:", diag["suggestion"])

    if not matches:
        print("\nNo scorable pairs, nothing to assign.")
        return

    # ---- Optimal assignment ----
    session = AssignmentSession(mentors, mentees, matches)
    print("\n=== OPTIMAL PAIRING ===")
    print(pairing_to_frame(session.optimal_pairing, matches).round(3))

    print("\n=== TOP 3 MENTORS PER MENTEE ===")
    for mentee in mentees:
        top = get_top_matches(matches, mentee_id=mentee.id)
        label = ", ".join(f"{m.mentor_id} ({m.normalized_score:.2f})" for m in top) or "-"
        print(f"{mentee.id}: {label}")


if __name__ == "__main__":
    main()
