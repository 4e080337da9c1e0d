# excellence/scoring/rank_resolver.py
"""
Rank Resolver

Locates a team in a list already ordered by the criterion's key and reports
its 1-based position. The three orderings used for excellence eligibility:

    qualifying rankings: rank ascending
    autonomous skills  : best programming score descending, missing lowest
    overall skills     : combined score descending

Python's sort is stable, so equal keys keep their input order. No secondary
tie-break is applied.
"""

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, List, Optional, Sequence, TypeVar, Union

from excellence.models.event import QualifyingRanking, TeamSkillsRecord

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    """Team located at 1-based position `rank`."""
    rank: int
    record: T


@dataclass(frozen=True)
class Absent:
    """Team not in the list. rank is 0 only for display and export."""
    rank: int = 0
    record: None = None


ABSENT = Absent()

Resolution = Union[Found[T], Absent]


def resolve(
    team_id: int,
    ordered: Sequence[T],
    team_id_of: Callable[[T], Optional[int]],
) -> Resolution:
    """
    Return Found for the first entry whose team id matches, else ABSENT.

    team_id_of may return None for an entry that does not count for this
    criterion; such entries keep their position but never match.
    """
    for index, entry in enumerate(ordered):
        if team_id_of(entry) == team_id:
            return Found(rank=index + 1, record=entry)
    return ABSENT


# ---------------------------------------------------------------------------
# Orderings
# ---------------------------------------------------------------------------

def sort_rankings(rankings: Iterable[QualifyingRanking]) -> List[QualifyingRanking]:
    return sorted(rankings, key=lambda r: r.rank)


def order_by_auto_skills(records: Iterable[TeamSkillsRecord]) -> List[TeamSkillsRecord]:
    return sorted(
        records,
        key=lambda r: -1 if r.programming is None else r.programming,
        reverse=True,
    )


def order_by_overall_skills(records: Iterable[TeamSkillsRecord]) -> List[TeamSkillsRecord]:
    return sorted(records, key=lambda r: r.combined, reverse=True)


# ---------------------------------------------------------------------------
# Team id extractors
# ---------------------------------------------------------------------------

def ranking_team_id(ranking: QualifyingRanking) -> int:
    return ranking.team_id


def auto_skills_team_id(record: TeamSkillsRecord) -> Optional[int]:
    """Only records holding an autonomous attempt count for the auto list."""
    return record.team_id if record.programming is not None else None


def overall_skills_team_id(record: TeamSkillsRecord) -> Optional[int]:
    return record.team_id if record.has_attempts else None
