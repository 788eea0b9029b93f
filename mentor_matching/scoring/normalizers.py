# mentor_matching/scoring/normalizers.py
from __future__ import annotations

from typing import Dict, Optional

from ..config import LANGUAGE_LEVELS, STUDY_LEVELS


def _lookup_rank(table: Dict[str, int], label: Optional[str]) -> int:
    """
    Exact label first, then case-insensitive. Anything unknown is rank 0.
    """
    if not label:
        return 0
    label = str(label).strip()
    if label in table:
        return table[label]
    lowered = label.lower()
    for key, rank in table.items():
        if key.lower() == lowered:
            return rank
    return 0


def language_rank(label: Optional[str]) -> int:
    return _lookup_rank(LANGUAGE_LEVELS, label)


def study_rank(label: Optional[str]) -> int:
    return _lookup_rank(STUDY_LEVELS, label)
