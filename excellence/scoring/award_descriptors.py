# excellence/scoring/award_descriptors.py
"""
Excellence award discovery.

An event with a single Excellence Award judges it over every team. Once an
event issues GRADE_SPLIT_MIN_AWARDS or more, each award covers the grade
named in its title.
"""

from typing import Iterable, List

import structlog

from excellence.models.enumerations import OVERALL, Grade
from excellence.models.event import Award, AwardDescriptor, GradeScope

logger = structlog.get_logger(__name__)

# Judged criteria from the Guide to Judging that no data feed can check
MANUAL_CRITERIA: List[str] = [
    "Be at or near the top of all Engineering Notebook Rubric rankings",
    "Exhibit a high-quality team interview",
    "Be a candidate in consideration for other Judged Awards",
    "Demonstrate a student-centered ethos",
    "Exhibit positive team conduct, good sportsmanship, and professionalism",
]


def grade_from_title(title: str) -> GradeScope:
    """First grade whose name appears in the title, else OVERALL."""
    for grade in Grade:
        if grade.value in title:
            return grade
    return OVERALL


def excellence_award_descriptors(
    awards: Iterable[Award],
    keyword: str = "Excellence Award",
    split_min_awards: int = 2,
) -> List[AwardDescriptor]:
    """
    Descriptors for every excellence award at an event, in award order.

    Returns [] when the event has no excellence award.
    """
    excellence = [a for a in awards if keyword in a.title]

    if not excellence:
        return []

    if len(excellence) < split_min_awards:
        return [AwardDescriptor(award=excellence[0], grade_scope=OVERALL)]

    descriptors = [
        AwardDescriptor(award=award, grade_scope=grade_from_title(award.title))
        for award in excellence
    ]
    unmatched = [d.award.title for d in descriptors if d.grade_scope == OVERALL]
    if unmatched:
        logger.warning("award_grade_not_found", titles=unmatched)
    return descriptors
