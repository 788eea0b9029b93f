# run_interactive.py

from __future__ import annotations

from mentor_matching.models import MatchStatus
from mentor_matching.scoring.match_set import calculate_matches, get_top_matches
from mentor_matching.assignment.session import AssignmentSession
from run_matching import load_cohorts


def print_match(match) -> None:
    print(
        f"  {match.mentor_id} <-> {match.mentee_id}: "
        f"normalized {match.normalized_score:.2f}, distance {match.distance:.3f}"
    )
    for reason in match.reasons:
        print(
            f"    - {reason.criterion} (w={reason.weight:.2f}, "
            f"+{reason.contribution:.3f}): {reason.explanation}"
        )


def review_loop(session: AssignmentSession, max_rounds: int = 100) -> None:
    """
    Walk through the recommended pairs one by one:
      - approve it (both participants leave the pending view)
      - reject it (the mentor loses its recommendation)
      - show the alternatives for that mentee
      - skip to the next mentor
    until nothing is pending or the user stops.
    """
    round_idx = 0
    skipped = set()

    while round_idx < max_rounds:
        round_idx += 1
        pending = {
            m: n for m, n in session.pending_pairing().items() if m not in skipped
        }

        print(f"\n========== ROUND {round_idx} ==========")
        print(
            f"{len(session.matches_with_status(MatchStatus.APPROVED))} approved, "
            f"{len(session.pending_pairing())} recommended pairs pending"
        )

        if not pending:
            print("\n✅ No recommended pairs left to review.")
            return

        mentor_id = sorted(pending)[0]
        match = session.recommended_match(mentor_id)
        print("\n[REVIEW] Recommended pairing:")
        print_match(match)

        print(
            "\nChoose an action:\n"
            "  1) Approve\n"
            "  2) Reject\n"
            "  3) Show top alternatives for this mentee\n"
            "  4) Skip this mentor\n"
            "  5) Stop reviewing\n"
        )
        choice = input("Your choice [1-5]: ").strip()

        if choice == "1":
            session.approve(match.mentor_id, match.mentee_id)
            print(f"[REVIEW] Approved {match.mentor_id} <-> {match.mentee_id}.")

        elif choice == "2":
            session.reject(match.mentor_id, match.mentee_id)
            print(f"[REVIEW] Rejected {match.mentor_id} <-> {match.mentee_id}.")

        elif choice == "3":
            taken = session.approved_ids
            alternatives = [
                m for m in get_top_matches(session.matches, mentee_id=match.mentee_id, limit=10)
                if m.mentor_id not in taken and m.status is MatchStatus.PENDING
            ][:3]
            if not alternatives:
                print("[REVIEW] No pending alternatives for this mentee.")
            for alt in alternatives:
                print_match(alt)

        elif choice == "4":
            skipped.add(mentor_id)

        elif choice == "5":
            print("Stopping review.")
            return

        else:
            print("Invalid choice, please select 1–5.")

    print("\n❌ Reached maximum rounds.")


def main():
    mentors, mentees = load_cohorts()
    matches = calculate_matches(mentors, mentees)

    if not matches:
        print("No scorable pairs, nothing to review.")
        return

    session = AssignmentSession(mentors, mentees, matches)
    review_loop(session)

    print("\n========== APPROVED PAIRS ==========")
    for m in session.matches_with_status(MatchStatus.APPROVED):
        print(f"- {m.mentor_id} <-> {m.mentee_id} ({m.normalized_score:.2f})")


if __name__ == "__main__":
    main()
