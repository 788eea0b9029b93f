# mentor_matching/data_generation/toy_dataset.py
from __future__ import annotations
from typing import List, Tuple
import random

from ..models import Mentor, Mentee
from ..config import (
    NUM_MENTORS_DEFAULT,
    NUM_MENTEES_DEFAULT,
    DEFAULT_SEED,
)

TOY_GENDERS = ["female", "male", "diverse"]
TOY_DESIRED_GENDERS = ["female", "male", "doesn't matter", "doesn't matter"]
TOY_NATIONALITIES = ["DE", "UA", "SY", "IN", "TR", "BR"]
TOY_CITIES = ["Berlin", "Munich", "Hamburg", "Cologne"]
TOY_LANGUAGE_LEVELS = ["A1", "A2", "B1", "B2", "C1", "C2", "native"]
TOY_STUDY_LEVELS = ["Bachelor", "Master", "PhD", "PostDoc", "Other"]


def create_mentors(
    num_mentors: int = NUM_MENTORS_DEFAULT,
    rng: random.Random | None = None,
) -> List[Mentor]:
    rng = rng or random.Random(DEFAULT_SEED)
    mentors: List[Mentor] = []
    for idx in range(1, num_mentors + 1):
        mentors.append(
            Mentor(
                id=f"M{idx:03d}",
                birth_year=rng.randint(1965, 2000),
                gender=rng.choice(TOY_GENDERS),
                nationality=rng.choice(TOY_NATIONALITIES),
                city=rng.choice(TOY_CITIES),
                # mentors lean towards good German
                german_level=rng.choice(TOY_LANGUAGE_LEVELS[3:]),
                english_level=rng.choice(TOY_LANGUAGE_LEVELS),
                level_of_studies=rng.choice(TOY_STUDY_LEVELS),
            )
        )
    return mentors


def create_mentees(
    num_mentees: int = NUM_MENTEES_DEFAULT,
    rng: random.Random | None = None,
) -> List[Mentee]:
    rng = rng or random.Random(DEFAULT_SEED)
    mentees: List[Mentee] = []
    for idx in range(1, num_mentees + 1):
        mentees.append(
            Mentee(
                id=f"N{idx:03d}",
                birth_year=rng.randint(1985, 2006),
                gender=rng.choice(TOY_GENDERS),
                desired_gender=rng.choice(TOY_DESIRED_GENDERS),
                nationality=rng.choice(TOY_NATIONALITIES),
                city=rng.choice(TOY_CITIES),
                german_level=rng.choice(TOY_LANGUAGE_LEVELS[:5]),
                english_level=rng.choice(TOY_LANGUAGE_LEVELS),
                level_of_studies=rng.choice(TOY_STUDY_LEVELS),
            )
        )
    return mentees


def make_toy_cohorts(
    num_mentors: int = NUM_MENTORS_DEFAULT,
    num_mentees: int = NUM_MENTEES_DEFAULT,
    seed: int = DEFAULT_SEED,
) -> Tuple[List[Mentor], List[Mentee]]:
    """
    Return reproducible random mentors and mentees.
    """
    rng = random.Random(seed)
    mentors = create_mentors(num_mentors, rng)
    mentees = create_mentees(num_mentees, rng)
    return mentors, mentees
