from pydantic import BaseModel, ConfigDict, Field, computed_field
from typing import Dict, List, Literal, Optional, Union

from excellence.models.enumerations import Grade, SkillType


GradeScope = Union[Grade, Literal["Overall"]]  # A Grade, or OVERALL


class Team(BaseModel):
    """
    A registered team as fetched for one event.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Opaque team identifier")
    number: str = Field(..., min_length=1, description="Display number, e.g. 1234A")
    grade: Grade = Field(..., description="Grade category the team competes in")


class Division(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(default=1, description="Division identifier")
    name: str = Field(default="Competition", description="Division display name")
    order: int = Field(default=1, ge=0)


class QualifyingRanking(BaseModel):
    """
    A team's standing after qualification matches in one division.

    Lists of rankings arrive in arbitrary order and are sorted by `rank`
    before any position lookup.
    """

    model_config = ConfigDict(frozen=True)

    team_id: int
    rank: int = Field(..., ge=1, description="1 = best")
    division_id: int = Field(default=1)


class SkillsAttempt(BaseModel):
    model_config = ConfigDict(frozen=True)

    team_id: int
    type: SkillType
    score: float = Field(..., ge=0)


class TeamSkillsRecord(BaseModel):
    """
    Best skills scores for one team.

    `programming` and `driver` stay None when the team has no attempt of
    that type; only `combined` treats a missing attempt as 0.
    """

    model_config = ConfigDict(frozen=True)

    team_id: int
    programming: Optional[float] = Field(default=None, ge=0)
    driver: Optional[float] = Field(default=None, ge=0)

    @computed_field
    @property
    def combined(self) -> float:
        return (self.programming or 0) + (self.driver or 0)

    @property
    def has_attempts(self) -> bool:
        return self.programming is not None or self.driver is not None


class Award(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    title: str


class AwardDescriptor(BaseModel):
    """
    An excellence award and the grade scope it is judged over.
    """

    model_config = ConfigDict(frozen=True)

    award: Award
    grade_scope: GradeScope = Field(
        ...,
        description="OVERALL for a single event-wide award, otherwise one Grade",
    )


class EventSnapshot(BaseModel):
    """
    Everything the engine needs about one event, captured at one moment.
    """

    model_config = ConfigDict(frozen=True)

    sku: str
    name: str = ""
    divisions: List[Division] = Field(default_factory=lambda: [Division()])
    teams: List[Team] = Field(default_factory=list)
    division_team_ids: Dict[int, List[int]] = Field(
        default_factory=dict,
        description="Division id -> team ids; a division missing here holds every team",
    )
    rankings: List[QualifyingRanking] = Field(default_factory=list)
    skills: List[SkillsAttempt] = Field(default_factory=list)
    awards: List[Award] = Field(default_factory=list)

    @property
    def has_multiple_divisions(self) -> bool:
        return len(self.divisions) > 1

    def teams_in_division(self, division_id: int) -> List[Team]:
        """Roster of one division, in event roster order."""
        if division_id not in self.division_team_ids:
            return list(self.teams)
        wanted = set(self.division_team_ids[division_id])
        return [t for t in self.teams if t.id in wanted]

    def rankings_in_division(self, division_id: int) -> List[QualifyingRanking]:
        return [r for r in self.rankings if r.division_id == division_id]
