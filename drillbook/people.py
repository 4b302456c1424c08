"""Sorting people and heroes, and generating tutors with graded pupils."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterable

LETTERS = "ABCDE"
PUPILS_PER_TUTOR = 5
MIN_SCORE = 40
MAX_SCORE = 99


@dataclass
class Person:
    name: str
    age: int
    height: int


def sort_people(people: Iterable[Person]) -> list[Person]:
    """Order by age ascending, then by height descending; ties keep their order."""
    return sorted(people, key=lambda person: (person.age, -person.height))


@dataclass
class Hero:
    name: str
    age: int
    category: str


def sort_heroes(heroes: Iterable[Hero]) -> list[Hero]:
    """Order by age ascending; heroes of equal age keep their order."""
    return sorted(heroes, key=lambda hero: hero.age)


@dataclass
class Pupil:
    name: str
    score: int


@dataclass
class Tutor:
    name: str
    pupils: list[Pupil] = field(default_factory=list)


def make_tutors(count: int, rng: random.Random | None = None) -> list[Tutor]:
    """Create tutors, each with five pupils scored from 40 to 99."""
    if not 0 <= count <= len(LETTERS):
        raise ValueError(f"count must be 0 to {len(LETTERS)}, got {count}")
    rng = rng if rng is not None else random.Random()
    return [
        Tutor(
            f"Teacher_{tutor_letter}",
            [
                Pupil(f"Student_{pupil_letter}", rng.randint(MIN_SCORE, MAX_SCORE))
                for pupil_letter in LETTERS[:PUPILS_PER_TUTOR]
            ],
        )
        for tutor_letter in LETTERS[:count]
    ]


def format_tutors(tutors: Iterable[Tutor]) -> str:
    """Describe each tutor followed by their pupils and scores."""
    lines = []
    for tutor in tutors:
        lines.append(f"老师的姓名：{tutor.name}")
        lines.extend(
            f"\t学生的姓名：{pupil.name}考试分数：{pupil.score}"
            for pupil in tutor.pupils
        )
    return "\n".join(lines)