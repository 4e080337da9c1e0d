# excellence/scoring/skills_records.py
"""
Skills Record Builder

Folds raw skills attempts into one TeamSkillsRecord per roster team: the
best autonomous-coding score, the best driver score (each None when the team
never attempted that type) and their combined sum.
"""

from typing import Dict, Iterable, List, Optional

import structlog

from excellence.models.enumerations import SkillType
from excellence.models.event import SkillsAttempt, Team, TeamSkillsRecord

logger = structlog.get_logger(__name__)


def _best(current: Optional[float], score: float) -> float:
    return score if current is None else max(current, score)


def build_team_skills_records(
    teams: Iterable[Team],
    attempts: Iterable[SkillsAttempt],
) -> List[TeamSkillsRecord]:
    """
    Build skills records in roster order.

    Attempts by teams outside the roster are ignored; roster teams without
    any attempt still get a record with both scores None.
    """
    best: Dict[int, Dict[SkillType, Optional[float]]] = {}
    for attempt in attempts:
        scores = best.setdefault(
            attempt.team_id, {SkillType.PROGRAMMING: None, SkillType.DRIVER: None}
        )
        scores[attempt.type] = _best(scores[attempt.type], attempt.score)

    records: List[TeamSkillsRecord] = []
    for team in teams:
        scores = best.get(team.id, {})
        records.append(TeamSkillsRecord(
            team_id=team.id,
            programming=scores.get(SkillType.PROGRAMMING),
            driver=scores.get(SkillType.DRIVER),
        ))

    logger.debug(
        "skills_records_built",
        teams=len(records),
        teams_with_attempts=sum(1 for r in records if r.has_attempts),
    )
    return records
