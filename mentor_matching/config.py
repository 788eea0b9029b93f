# mentor_matching/config.py

# Criterion weights (distance = sum of weight * criterion distance)
WEIGHTS = {
    "age": 0.30,
    "gender": 0.20,
    "language": 0.50,
    "city": 0.15,
    "study_level": 0.15,
    "nationality": 1.00,
}

# Normalization caps for the ordinal / numeric criteria
MAX_AGE_DIFF_YEARS = 30
MAX_LANGUAGE_DIFF = 6
MAX_STUDY_LEVEL_DIFF = 4

# Language proficiency label -> rank (unknown = 0)
LANGUAGE_LEVELS = {
    "A1": 1, "A2": 2, "B1": 3, "B2": 4, "C1": 5, "C2": 6,
    "Beginner": 1,
    "Elementary": 2,
    "Intermediate": 3,
    "Upper Intermediate": 4,
    "Advanced": 5,
    "Proficient": 6,
    "native": 6,
    # label used by the registration form export
    "Muttersprache / Native language": 6,
}

# Academic level label -> rank (unknown = 0)
STUDY_LEVELS = {
    "Other": 0,
    "Bachelor": 1,
    "Master": 2,
    "PhD": 3,
    "Doktorat / PhD": 3,
    "PostDoc": 4,
    "Professor": 5,
}

# Mentee "desired gender" values meaning "no preference"
NO_GENDER_PREFERENCE = {"doesn't matter", "doesn’t matter", ""}

# Review
TOP_MATCHES_DEFAULT = 3

# Toy data knobs
NUM_MENTORS_DEFAULT = 8
NUM_MENTEES_DEFAULT = 8
DEFAULT_SEED = 42

# -----------------------------------------------------------
# CSV column layouts (0-based positions in the form exports)
# -----------------------------------------------------------

MENTOR_CSV_COLUMNS = {
    "id": 0,
    "level_of_studies": 1,
    "birth_year": 5,
    "gender": 6,
    "nationality": 8,
    "city": 9,
    "german_level": 10,
    "english_level": 11,
    "other_languages": 13,
}

MENTEE_CSV_COLUMNS = {
    "id": 0,
    "birth_year": 1,
    "desired_gender": 4,
    "english_level": 5,
    "other_languages": 12,
    "gender": 13,
    "german_level": 14,
    "nationality": 18,
    "level_of_studies": 20,
    "city": 25,
}

# Paths to the form exports (if absent, run scripts fall back to toy cohorts)
MENTORS_CSV_PATH = "data/mentors.csv"
MENTEES_CSV_PATH = "data/mentees.csv"
