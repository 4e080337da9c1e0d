from pydantic import BaseModel, ConfigDict, Field, computed_field
from decimal import Decimal
from typing import Any, Dict, List

from excellence.models.enumerations import Criterion
from excellence.models.event import Division, GradeScope, Team


NO_DATA = "No Data"
ZERO_SCORE = "Zero Score"


class CriterionResult(BaseModel):
    """
    Verdict for one criterion. rank 0 means the team was not in the list.
    """

    model_config = ConfigDict(frozen=True)

    eligible: bool = False
    rank: int = Field(default=0, ge=0)
    score: float = Field(default=0, description="0 when absent or for the ranking criterion")
    reason: str = NO_DATA


class EligibilityVerdict(BaseModel):
    """
    Per-team outcome across the three automatically checked criteria.
    """

    model_config = ConfigDict(frozen=True)

    team: Team
    ranking: CriterionResult
    auto_skills: CriterionResult
    skills: CriterionResult

    @computed_field
    @property
    def eligible(self) -> bool:
        return self.ranking.eligible and self.auto_skills.eligible and self.skills.eligible

    def to_flat(self) -> Dict[str, Any]:
        """
        Flat record addressed by stable dotted field paths.

        Export and table layers look these keys up by name, so they must
        not change.
        """
        flat: Dict[str, Any] = {
            "team.number": self.team.number,
            "eligible": self.eligible,
        }
        for criterion, result in (
            (Criterion.RANKING, self.ranking),
            (Criterion.SKILLS, self.skills),
            (Criterion.AUTO_SKILLS, self.auto_skills),
        ):
            prefix = criterion.value
            flat[f"{prefix}.eligible"] = result.eligible
            flat[f"{prefix}.reason"] = result.reason
            flat[f"{prefix}.rank"] = result.rank
            if criterion is not Criterion.RANKING:
                flat[f"{prefix}.score"] = result.score
        return flat


class AwardEvaluation(BaseModel):
    """
    Eligibility of every team in scope for one award in one division.
    """

    model_config = ConfigDict(frozen=True)

    award_title: str
    grade_scope: GradeScope
    division: Division
    percentile: float
    teams_in_group: int = Field(..., ge=0, description="Division teams in the award's grade scope")
    teams_in_grade: int = Field(..., ge=0, description="Event teams in the award's grade scope")
    raw_ranking_threshold: Decimal
    ranking_threshold: int = Field(..., ge=0)
    raw_skills_threshold: Decimal
    skills_threshold: int = Field(..., ge=0)
    verdicts: List[EligibilityVerdict] = Field(default_factory=list)
    manual_criteria: List[str] = Field(default_factory=list)

    @computed_field
    @property
    def eligible_team_numbers(self) -> List[str]:
        return [v.team.number for v in self.verdicts if v.eligible]

    def to_flat_records(self) -> List[Dict[str, Any]]:
        return [v.to_flat() for v in self.verdicts]
