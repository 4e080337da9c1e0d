"""
scoring/eligibility_evaluator.py

Per-team excellence eligibility across the three objective criteria.

Rules, applied to each criterion with its own list and threshold:
    1. Team not in the list           -> ineligible, "No Data", rank 0
    2. Skills score below 1           -> ineligible, "Zero Score"
       (skills criteria only; rank and score still reported)
    3. Rank above the threshold       -> ineligible, reason cites rank
    4. Otherwise                      -> eligible, reason cites rank

The team is eligible only when all three criteria are.
"""

from typing import Callable, Optional, Sequence

import structlog

from excellence.models.eligibility import (
    NO_DATA,
    ZERO_SCORE,
    CriterionResult,
    EligibilityVerdict,
)
from excellence.models.event import QualifyingRanking, Team, TeamSkillsRecord
from excellence.scoring.rank_resolver import (
    Found,
    auto_skills_team_id,
    overall_skills_team_id,
    ranking_team_id,
    resolve,
)

logger = structlog.get_logger(__name__)


def format_score(score: float) -> str:
    """Render whole-number scores without a trailing .0."""
    return str(int(score)) if float(score).is_integer() else str(score)


class EligibilityEvaluator:
    """Evaluate one team against qualifying, autonomous and overall skills lists."""

    def evaluate(
        self,
        team: Team,
        rankings: Sequence[QualifyingRanking],
        auto_skills: Sequence[TeamSkillsRecord],
        overall_skills: Sequence[TeamSkillsRecord],
        ranking_threshold: int,
        skills_threshold: int,
    ) -> EligibilityVerdict:
        """
        Args:
            team: Team being judged.
            rankings: Qualifying rankings sorted by rank ascending.
            auto_skills: Skills records ordered by autonomous score descending.
            overall_skills: Skills records ordered by combined score descending.
            ranking_threshold: Cutoff for the qualifying rank.
            skills_threshold: Cutoff shared by both skills criteria.

        Returns:
            EligibilityVerdict with one CriterionResult per criterion.
        """
        verdict = EligibilityVerdict(
            team=team,
            ranking=self.evaluate_ranking(team, rankings, ranking_threshold),
            auto_skills=self._evaluate_skills(
                team,
                auto_skills,
                auto_skills_team_id,
                lambda r: r.programming,
                skills_threshold,
                "Auto Skills Rank",
            ),
            skills=self._evaluate_skills(
                team,
                overall_skills,
                overall_skills_team_id,
                lambda r: r.combined,
                skills_threshold,
                "Overall Skills Rank",
            ),
        )

        logger.debug(
            "eligibility_evaluated",
            team=team.number,
            eligible=verdict.eligible,
            ranking=verdict.ranking.reason,
            auto_skills=verdict.auto_skills.reason,
            skills=verdict.skills.reason,
        )
        return verdict

    def evaluate_ranking(
        self,
        team: Team,
        rankings: Sequence[QualifyingRanking],
        threshold: int,
    ) -> CriterionResult:
        """Qualifying rank has no score, so the Zero Score rule is skipped."""
        found = resolve(team.id, rankings, ranking_team_id)
        if not isinstance(found, Found):
            return CriterionResult(eligible=False, rank=0, reason=NO_DATA)

        return CriterionResult(
            eligible=found.rank <= threshold,
            rank=found.rank,
            reason=f"Rank {found.rank}",
        )

    def _evaluate_skills(
        self,
        team: Team,
        ordered: Sequence[TeamSkillsRecord],
        team_id_of: Callable[[TeamSkillsRecord], Optional[int]],
        score_of: Callable[[TeamSkillsRecord], Optional[float]],
        threshold: int,
        label: str,
    ) -> CriterionResult:
        found = resolve(team.id, ordered, team_id_of)
        if not isinstance(found, Found):
            return CriterionResult(eligible=False, rank=0, score=0, reason=NO_DATA)

        score = score_of(found.record) or 0
        if score < 1:
            return CriterionResult(
                eligible=False,
                rank=found.rank,
                score=score,
                reason=ZERO_SCORE,
            )

        return CriterionResult(
            eligible=found.rank <= threshold,
            rank=found.rank,
            score=score,
            reason=f"{label} {found.rank} [score: {format_score(score)}]",
        )
