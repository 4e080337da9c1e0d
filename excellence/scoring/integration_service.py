"""
scoring/integration_service.py

Full pipeline: event snapshot -> per-award eligibility.

Class: ExcellenceEvaluationService
Method: evaluate_event(snapshot) -> List[AwardEvaluation]

Pipeline steps:
  1. Discover excellence awards and their grade scopes
  2. Derive one skills record per roster team
  3. Group teams, division rankings and skills records by grade
  4. For each award x division:
       a. scope-select the division's teams, its rankings, event teams, skills
       b. ranking threshold from division teams in scope
       c. skills threshold from event teams in scope (skills are event-wide)
       d. Aggregator -> verdicts in roster order
  5. Build AwardEvaluation summaries
"""

from typing import List, Optional

import structlog

from excellence.config import Settings, get_settings
from excellence.models.eligibility import AwardEvaluation
from excellence.models.event import AwardDescriptor, Division, EventSnapshot, TeamSkillsRecord
from excellence.scoring.aggregator import evaluate_group
from excellence.scoring.award_descriptors import MANUAL_CRITERIA, excellence_award_descriptors
from excellence.scoring.eligibility_evaluator import EligibilityEvaluator
from excellence.scoring.grouping import (
    group_rankings_by_grade,
    group_skills_by_grade,
    group_teams_by_grade,
)
from excellence.scoring.skills_records import build_team_skills_records
from excellence.scoring.utils import raw_threshold, threshold
from excellence.services.event_data_source import EventDataSource

logger = structlog.get_logger(__name__)


class ExcellenceEvaluationService:
    """Evaluate excellence eligibility for every award and division of an event."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        data_source: Optional[EventDataSource] = None,
    ):
        self.settings = settings or get_settings()
        self.data_source = data_source
        self.evaluator = EligibilityEvaluator()

    # ------------------------------------------------------------------
    # Main pipeline
    # ------------------------------------------------------------------

    def evaluate_sku(self, sku: str) -> List[AwardEvaluation]:
        """Fetch the event from the data source, then evaluate it."""
        if self.data_source is None:
            raise ValueError("ExcellenceEvaluationService has no data source")
        return self.evaluate_event(self.data_source.get_event(sku))

    def evaluate_event(self, snapshot: EventSnapshot) -> List[AwardEvaluation]:
        """
        Evaluate every excellence award in every division.

        In multi-division events an award whose grade has no teams in a
        division is skipped for that division.
        """
        descriptors = self.award_descriptors(snapshot)
        if not descriptors:
            logger.info("no_excellence_award", sku=snapshot.sku)
            return []

        skills_records = build_team_skills_records(snapshot.teams, snapshot.skills)

        evaluations: List[AwardEvaluation] = []
        for descriptor in descriptors:
            for division in snapshot.divisions:
                evaluation = self.evaluate_award(
                    snapshot, descriptor, division, skills_records
                )
                if snapshot.has_multiple_divisions and evaluation.teams_in_group == 0:
                    continue
                evaluations.append(evaluation)

        logger.info(
            "event_evaluated",
            sku=snapshot.sku,
            awards=len(descriptors),
            evaluations=len(evaluations),
        )
        return evaluations

    def award_descriptors(self, snapshot: EventSnapshot) -> List[AwardDescriptor]:
        return excellence_award_descriptors(
            snapshot.awards,
            keyword=self.settings.EXCELLENCE_AWARD_KEYWORD,
            split_min_awards=self.settings.GRADE_SPLIT_MIN_AWARDS,
        )

    def evaluate_award(
        self,
        snapshot: EventSnapshot,
        descriptor: AwardDescriptor,
        division: Division,
        skills_records: Optional[List[TeamSkillsRecord]] = None,
    ) -> AwardEvaluation:
        """Evaluate one award over one division's teams."""
        percentile = self.settings.EXCELLENCE_PERCENTILE
        scope = descriptor.grade_scope

        if skills_records is None:
            skills_records = build_team_skills_records(snapshot.teams, snapshot.skills)

        division_teams = group_teams_by_grade(
            snapshot.teams_in_division(division.id)
        ).select(scope)
        event_teams = group_teams_by_grade(snapshot.teams).select(scope)
        rankings = group_rankings_by_grade(
            snapshot.rankings_in_division(division.id), snapshot.teams
        ).select(scope)
        skills = group_skills_by_grade(skills_records, snapshot.teams).select(scope)

        ranking_threshold = threshold(len(division_teams), percentile)
        skills_threshold = threshold(len(event_teams), percentile)

        logger.info(
            "thresholds_computed",
            sku=snapshot.sku,
            award=descriptor.award.title,
            division=division.name,
            teams_in_group=len(division_teams),
            teams_in_grade=len(event_teams),
            percentile=percentile,
            ranking_threshold=ranking_threshold,
            skills_threshold=skills_threshold,
        )

        verdicts = evaluate_group(
            division_teams,
            rankings,
            skills,
            ranking_threshold,
            skills_threshold,
            evaluator=self.evaluator,
        )

        evaluation = AwardEvaluation(
            award_title=descriptor.award.title,
            grade_scope=scope,
            division=division,
            percentile=percentile,
            teams_in_group=len(division_teams),
            teams_in_grade=len(event_teams),
            raw_ranking_threshold=raw_threshold(len(division_teams), percentile),
            ranking_threshold=ranking_threshold,
            raw_skills_threshold=raw_threshold(len(event_teams), percentile),
            skills_threshold=skills_threshold,
            verdicts=verdicts,
            manual_criteria=list(MANUAL_CRITERIA),
        )

        logger.info(
            "award_evaluated",
            sku=snapshot.sku,
            award=descriptor.award.title,
            division=division.name,
            eligible=evaluation.eligible_team_numbers,
        )
        return evaluation
