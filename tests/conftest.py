# tests/conftest.py

"""
Pytest Fixtures - Shared test configuration and event data

TEAM ID REFERENCE:
- ten_teams:       ids 1-10, numbers 101A-110A, all High School
- mixed_event:     ids 1-6 High School, 11-14 Middle School
"""

import random

import pytest

from excellence.config import Settings
from excellence.models.enumerations import Grade, SkillType
from excellence.models.event import (
    Award,
    Division,
    EventSnapshot,
    QualifyingRanking,
    SkillsAttempt,
    Team,
)
from excellence.scoring.skills_records import build_team_skills_records


# =============================================================================
# BUILDERS
# =============================================================================

def make_team(team_id: int, grade: Grade = Grade.HIGH_SCHOOL) -> Team:
    return Team(id=team_id, number=f"{100 + team_id}A", grade=grade)


def attempts(team_id: int, programming=None, driver=None):
    """Skills attempts for one team; None means no attempt of that type."""
    out = []
    if programming is not None:
        out.append(SkillsAttempt(team_id=team_id, type=SkillType.PROGRAMMING, score=programming))
    if driver is not None:
        out.append(SkillsAttempt(team_id=team_id, type=SkillType.DRIVER, score=driver))
    return out


# =============================================================================
# SETTINGS FIXTURES
# =============================================================================

@pytest.fixture
def settings_30():
    """2023-24 season rule: top 30%."""
    return Settings(_env_file=None, EXCELLENCE_PERCENTILE=0.30)


@pytest.fixture
def settings_40():
    """Current rule: top 40%."""
    return Settings(_env_file=None, EXCELLENCE_PERCENTILE=0.40)


# =============================================================================
# TEN TEAM GROUP (Scenarios A-D)
# =============================================================================

@pytest.fixture
def ten_teams():
    return [make_team(i) for i in range(1, 11)]


@pytest.fixture
def ten_rankings():
    """Team i holds qualifying rank i; input order deliberately shuffled."""
    rankings = [QualifyingRanking(team_id=i, rank=i) for i in range(1, 11)]
    random.Random(7).shuffle(rankings)
    return rankings


@pytest.fixture
def ten_attempts():
    """
    Autonomous order: 1 (50), 3 (45), 2 (40), 4 (30), 5..10 (20..15)
    Overall order:    3 (80), 1 (70), 2 (60), 4 (50), 5..10
    """
    out = []
    out += attempts(1, programming=50, driver=20)
    out += attempts(2, programming=40, driver=20)
    out += attempts(3, programming=45, driver=35)
    out += attempts(4, programming=30, driver=20)
    for i in range(5, 11):
        out += attempts(i, programming=25 - i, driver=10)
    return out


@pytest.fixture
def ten_records(ten_teams, ten_attempts):
    return build_team_skills_records(ten_teams, ten_attempts)


# =============================================================================
# EVENT SNAPSHOT FIXTURES
# =============================================================================

@pytest.fixture
def mixed_teams():
    hs = [make_team(i, Grade.HIGH_SCHOOL) for i in range(1, 7)]
    ms = [make_team(i, Grade.MIDDLE_SCHOOL) for i in range(11, 15)]
    # Interleave so roster order differs from grade order
    return [hs[0], ms[0], hs[1], ms[1], hs[2], ms[2], hs[3], ms[3], hs[4], hs[5]]


@pytest.fixture
def mixed_event(mixed_teams):
    """Single-division event with one excellence award per grade."""
    rankings = [
        QualifyingRanking(team_id=t.id, rank=pos)
        for pos, t in enumerate(mixed_teams, start=1)
    ]
    skills = []
    for pos, t in enumerate(mixed_teams):
        skills += attempts(t.id, programming=100 - pos * 5, driver=50 - pos)
    return EventSnapshot(
        sku="RE-VRC-23-1234",
        name="Test Signature Event",
        teams=mixed_teams,
        rankings=rankings,
        skills=skills,
        awards=[
            Award(id=1, title="Excellence Award - High School (VRC/VEXU/VAIRC)"),
            Award(id=2, title="Excellence Award - Middle School (VRC/VEXU/VAIRC)"),
            Award(id=3, title="Tournament Champions (VRC/VEXU/VAIRC)"),
        ],
    )


@pytest.fixture
def two_division_event(mixed_teams):
    """Two divisions; Middle School teams only compete in division 2."""
    hs_ids = [t.id for t in mixed_teams if t.grade == Grade.HIGH_SCHOOL]
    ms_ids = [t.id for t in mixed_teams if t.grade == Grade.MIDDLE_SCHOOL]
    rankings = [
        QualifyingRanking(team_id=tid, rank=pos, division_id=1)
        for pos, tid in enumerate(hs_ids, start=1)
    ] + [
        QualifyingRanking(team_id=tid, rank=pos, division_id=2)
        for pos, tid in enumerate(ms_ids, start=1)
    ]
    return EventSnapshot(
        sku="RE-VRC-23-5678",
        divisions=[Division(id=1, name="Science"), Division(id=2, name="Technology", order=2)],
        teams=mixed_teams,
        division_team_ids={1: hs_ids, 2: ms_ids},
        rankings=rankings,
        skills=[a for t in mixed_teams for a in attempts(t.id, programming=10, driver=10)],
        awards=[
            Award(id=1, title="Excellence Award - High School"),
            Award(id=2, title="Excellence Award - Middle School"),
        ],
    )
