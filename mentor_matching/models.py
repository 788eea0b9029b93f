# mentor_matching/models.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List


@dataclass(frozen=True)
class Mentor:
    id: str
    birth_year: int = 0   # 0 = unknown
    gender: str = ""
    nationality: str = ""
    city: str = ""
    german_level: str = ""
    english_level: str = ""
    level_of_studies: str = ""
    other_languages: str = ""  # informational only, not scored


@dataclass(frozen=True)
class Mentee:
    id: str
    birth_year: int = 0   # 0 = unknown
    gender: str = ""
    desired_gender: str = ""
    nationality: str = ""
    city: str = ""
    german_level: str = ""
    english_level: str = ""
    level_of_studies: str = ""
    other_languages: str = ""


class MentorAttribute(str, Enum):
    """Mentor fields an exclusion rule may refer to."""

    MENTOR_ID = "mentorId"
    GENDER = "gender"
    NATIONALITY = "nationality"
    CITY = "city"
    LEVEL_OF_STUDIES = "levelOfStudies"
    GERMAN_LEVEL = "germanLevel"
    ENGLISH_LEVEL = "englishLevel"
    BIRTH_YEAR = "birthYear"

    @classmethod
    def parse(cls, name) -> "MentorAttribute":
        """
        Accepts the enum value itself, its camelCase / snake_case name or the
        form label ("Birth year", "Level ofStudies", "MentorId").
        """
        if isinstance(name, cls):
            return name
        key = str(name).replace("_", "").replace(" ", "").lower()
        for attr in cls:
            if attr.value.lower() == key:
                return attr
        raise ValueError(f"Unknown mentor attribute for exclusion rule: {name!r}")


class Condition(str, Enum):
    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    AT_LEAST = "at_least"
    AT_MOST = "at_most"

    @classmethod
    def parse(cls, name) -> "Condition":
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower().replace(" ", "_")
        for cond in cls:
            if cond.value == key:
                return cond
        raise ValueError(f"Unknown exclusion condition: {name!r}")


class MatchStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


@dataclass(frozen=True)
class ExclusionCriterion:
    """
    A required condition on a mentor attribute, scoped to one mentee.
    Strings are coerced to enums here so bad rules fail at creation time.
    """
    mentee_id: str
    attribute: MentorAttribute
    condition: Condition
    value: str

    def __post_init__(self):
        object.__setattr__(self, "attribute", MentorAttribute.parse(self.attribute))
        object.__setattr__(self, "condition", Condition.parse(self.condition))
        object.__setattr__(self, "value", str(self.value))


@dataclass(frozen=True)
class MatchReason:
    criterion: str
    weight: float
    contribution: float
    explanation: str


@dataclass
class Match:
    mentor_id: str
    mentee_id: str
    distance: float
    score: float
    normalized_score: float = 0.0
    reasons: List[MatchReason] = field(default_factory=list)
    status: MatchStatus = MatchStatus.PENDING

    @property
    def key(self):
        return (self.mentor_id, self.mentee_id)
