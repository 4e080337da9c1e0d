# excellence/scoring/grouping.py
"""
Grade Grouping

Partitions a roster, a ranking list or a skills list into an "overall" view
plus one bucket per grade. Every item lands in exactly one bucket, so the
buckets together hold the overall view with nothing dropped or repeated.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, Hashable, Iterable, List, Optional, TypeVar

from excellence.models.enumerations import OVERALL, Grade
from excellence.models.event import GradeScope, QualifyingRanking, Team, TeamSkillsRecord

T = TypeVar("T")


@dataclass
class GradeGroups(Generic[T]):
    """Output of group_by_grade()."""
    overall: List[T]                                   # input order, untouched
    by_grade: Dict[Optional[Hashable], List[T]] = field(default_factory=dict)

    def select(self, scope: GradeScope) -> List[T]:
        """
        Items an award with this grade scope is judged over.

        Raises ValueError for a scope that is neither OVERALL nor a Grade.
        """
        if scope == OVERALL:
            return list(self.overall)
        return list(self.by_grade.get(Grade(scope), []))


def group_by_grade(
    items: Iterable[T],
    key_of: Callable[[T], Optional[Hashable]],
) -> GradeGroups[T]:
    """
    Split items by the grade key_of() resolves for each one.

    Items whose grade cannot be resolved (key None) get a bucket of their
    own; they still count toward the overall view.
    """
    overall = list(items)
    by_grade: Dict[Optional[Hashable], List[T]] = {}
    for item in overall:
        by_grade.setdefault(key_of(item), []).append(item)
    return GradeGroups(overall=overall, by_grade=by_grade)


def group_teams_by_grade(teams: Iterable[Team]) -> GradeGroups[Team]:
    return group_by_grade(teams, lambda t: t.grade)


def group_rankings_by_grade(
    rankings: Iterable[QualifyingRanking],
    teams: Iterable[Team],
) -> GradeGroups[QualifyingRanking]:
    """Group rankings by the grade of the roster team each one refers to."""
    grade_of = {t.id: t.grade for t in teams}
    return group_by_grade(rankings, lambda r: grade_of.get(r.team_id))


def group_skills_by_grade(
    records: Iterable[TeamSkillsRecord],
    teams: Iterable[Team],
) -> GradeGroups[TeamSkillsRecord]:
    grade_of = {t.id: t.grade for t in teams}
    return group_by_grade(records, lambda r: grade_of.get(r.team_id))
