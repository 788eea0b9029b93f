# mentor_matching/data_generation/csv_loader.py
import csv
import re

from ..config import MENTOR_CSV_COLUMNS, MENTEE_CSV_COLUMNS
from ..models import Mentor, Mentee

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_birth_year(raw):
    """Leading integer of the cell, 0 if there is none."""
    m = _LEADING_INT.match(raw or "")
    return int(m.group(1)) if m else 0


def _read_rows(path):
    with open(path, "r", newline="", encoding="utf-8-sig") as f:
        rows = [row for row in csv.reader(f) if any(c.strip() for c in row)]
    # first row is the header
    return rows[1:]


def _cells(row, columns):
    out = {}
    for name, idx in columns.items():
        out[name] = row[idx].strip() if idx < len(row) else ""
    return out


def load_mentors(path):
    """
    Reads the mentor export (fixed column layout, see MENTOR_CSV_COLUMNS).
    Rows without an id are dropped.
    """
    mentors = []
    for row in _read_rows(path):
        cells = _cells(row, MENTOR_CSV_COLUMNS)
        if not cells["id"]:
            continue
        cells["birth_year"] = parse_birth_year(cells["birth_year"])
        mentors.append(Mentor(**cells))

    print(f"[LOAD] {len(mentors)} mentors from {path}")
    return mentors


def load_mentees(path):
    """Same contract as load_mentors, mentee column layout."""
    mentees = []
    for row in _read_rows(path):
        cells = _cells(row, MENTEE_CSV_COLUMNS)
        if not cells["id"]:
            continue
        cells["birth_year"] = parse_birth_year(cells["birth_year"])
        mentees.append(Mentee(**cells))

    print(f"[LOAD] {len(mentees)} mentees from {path}")
    return mentees
