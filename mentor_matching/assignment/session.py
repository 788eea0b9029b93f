# mentor_matching/assignment/session.py
from __future__ import annotations

from dataclasses import replace
from enum import Enum
from typing import Dict, List, Optional, Set, Tuple

from ..models import Mentor, Mentee, Match, MatchStatus
from .solve import solve_optimal_pairing


class SessionState(str, Enum):
    UNINITIALIZED = "uninitialized"
    SOLVED = "solved"


class AssignmentSession:
    """
    Review session over one scored pool.

    The optimal mentor -> mentee map is solved once, on first access, over
    the complete cohorts and is never recomputed. Approvals only hide pairs
    from the pending view; remaining participants are not re-optimized.

    Rejected pairs are hidden from the pending view as well, so a rejected
    recommendation leaves that mentor without one.

    Review statuses live in the session, keyed by (mentor_id, mentee_id).
    Matches handed out are copies carrying the current status; writing to
    them does not change the session.
    """

    def __init__(
        self,
        mentors: List[Mentor],
        mentees: List[Mentee],
        matches: List[Match],
    ):
        self.mentors = list(mentors)
        self.mentees = list(mentees)
        self._matches = list(matches)
        self._by_pair: Dict[Tuple[str, str], Match] = {m.key: m for m in self._matches}
        self._status: Dict[Tuple[str, str], MatchStatus] = {
            m.key: MatchStatus(m.status) for m in self._matches
        }

        self.state = SessionState.UNINITIALIZED
        self._pairing: Dict[str, str] = {}

    # ------------------------------------------------------------------
    # Fixed optimal pairing
    # ------------------------------------------------------------------

    def _solve_once(self) -> None:
        if self.state is SessionState.SOLVED:
            return
        print(
            f"[ASSIGNMENT] Solving optimal pairing for {len(self.mentors)} mentors "
            f"x {len(self.mentees)} mentees..."
        )
        self._pairing = solve_optimal_pairing(self.mentors, self.mentees, self._matches)
        self.state = SessionState.SOLVED
        print(f"[ASSIGNMENT] Fixed {len(self._pairing)} pairs for this session.")

    @property
    def optimal_pairing(self) -> Dict[str, str]:
        self._solve_once()
        return dict(self._pairing)

    # ------------------------------------------------------------------
    # Status changes
    # ------------------------------------------------------------------

    def _snapshot(self, match: Match) -> Match:
        return replace(match, status=self._status[match.key])

    @property
    def matches(self) -> List[Match]:
        return [self._snapshot(m) for m in self._matches]

    def get_match(self, mentor_id: str, mentee_id: str) -> Optional[Match]:
        """Copy of the match with its current status, or None if excluded."""
        match = self._by_pair.get((mentor_id, mentee_id))
        return None if match is None else self._snapshot(match)

    def status_of(self, mentor_id: str, mentee_id: str) -> MatchStatus:
        key = (mentor_id, mentee_id)
        if key not in self._status:
            raise KeyError(f"No match for mentor {mentor_id} and mentee {mentee_id}.")
        return self._status[key]

    def set_status(self, mentor_id: str, mentee_id: str, status) -> Match:
        current = self.status_of(mentor_id, mentee_id)

        status = MatchStatus(status)
        if status is MatchStatus.APPROVED and current is not MatchStatus.APPROVED:
            taken = self.approved_ids
            if mentor_id in taken or mentee_id in taken:
                raise ValueError(
                    f"Cannot approve {mentor_id} / {mentee_id}: one of them is "
                    "already part of an approved pair."
                )

        self._status[(mentor_id, mentee_id)] = status
        return self.get_match(mentor_id, mentee_id)

    def approve(self, mentor_id: str, mentee_id: str) -> Match:
        return self.set_status(mentor_id, mentee_id, MatchStatus.APPROVED)

    def reject(self, mentor_id: str, mentee_id: str) -> Match:
        return self.set_status(mentor_id, mentee_id, MatchStatus.REJECTED)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def matches_with_status(self, status) -> List[Match]:
        status = MatchStatus(status)
        return [self._snapshot(m) for m in self._matches if self._status[m.key] is status]

    @property
    def approved_ids(self) -> Set[str]:
        ids: Set[str] = set()
        for (mentor_id, mentee_id), status in self._status.items():
            if status is MatchStatus.APPROVED:
                ids.add(mentor_id)
                ids.add(mentee_id)
        return ids

    def pending_pairing(self) -> Dict[str, str]:
        """
        The fixed optimal map minus pairs touching an approved participant
        and minus pairs whose match is missing (excluded) or not pending.
        """
        self._solve_once()
        taken = self.approved_ids

        pending: Dict[str, str] = {}
        for mentor_id, mentee_id in self._pairing.items():
            if mentor_id in taken or mentee_id in taken:
                continue
            if self._status.get((mentor_id, mentee_id)) is not MatchStatus.PENDING:
                continue
            pending[mentor_id] = mentee_id
        return pending

    def recommended_match(self, mentor_id: str) -> Optional[Match]:
        mentee_id = self.pending_pairing().get(mentor_id)
        if mentee_id is None:
            return None
        return self.get_match(mentor_id, mentee_id)
