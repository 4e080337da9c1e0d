"""
scoring/aggregator.py

Applies EligibilityEvaluator to every team of a group, in roster order.
The three ordered lists are derived once per group and shared by all teams.
"""

from typing import Iterable, List, Optional, Sequence

import structlog

from excellence.models.eligibility import EligibilityVerdict
from excellence.models.event import QualifyingRanking, Team, TeamSkillsRecord
from excellence.scoring.eligibility_evaluator import EligibilityEvaluator
from excellence.scoring.rank_resolver import (
    order_by_auto_skills,
    order_by_overall_skills,
    sort_rankings,
)

logger = structlog.get_logger(__name__)


def evaluate_group(
    teams: Sequence[Team],
    rankings: Iterable[QualifyingRanking],
    skills_records: Iterable[TeamSkillsRecord],
    ranking_threshold: int,
    skills_threshold: int,
    evaluator: Optional[EligibilityEvaluator] = None,
) -> List[EligibilityVerdict]:
    """
    One verdict per team, same length and order as `teams`.

    Rankings may arrive in any order; they are sorted by rank here.
    """
    evaluator = evaluator or EligibilityEvaluator()
    records = list(skills_records)

    ranked = sort_rankings(rankings)
    auto_ordered = order_by_auto_skills(records)
    overall_ordered = order_by_overall_skills(records)

    verdicts = [
        evaluator.evaluate(
            team,
            ranked,
            auto_ordered,
            overall_ordered,
            ranking_threshold,
            skills_threshold,
        )
        for team in teams
    ]

    logger.info(
        "group_evaluated",
        teams=len(verdicts),
        eligible=sum(1 for v in verdicts if v.eligible),
        ranking_threshold=ranking_threshold,
        skills_threshold=skills_threshold,
    )
    return verdicts


def eligible_teams(verdicts: Iterable[EligibilityVerdict]) -> List[Team]:
    """Teams whose aggregate verdict is eligible, in verdict (roster) order."""
    return [verdict.team for verdict in verdicts if verdict.eligible]
