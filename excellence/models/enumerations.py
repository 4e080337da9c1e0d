from enum import Enum

OVERALL = "Overall"  # Award scope covering every grade at the event


class Grade(str, Enum):
    # Declaration order is the order award titles are matched in
    COLLEGE = "College"
    HIGH_SCHOOL = "High School"
    MIDDLE_SCHOOL = "Middle School"
    ELEMENTARY_SCHOOL = "Elementary School"


class SkillType(str, Enum):
    PROGRAMMING = "programming"  # Autonomous coding skills
    DRIVER = "driver"            # Driver-operated skills


class Criterion(str, Enum):
    RANKING = "ranking"
    AUTO_SKILLS = "autoSkills"
    SKILLS = "skills"
