"""
scoring/: Excellence Eligibility Engine

Modules:
    utils.py                  - Decimal threshold math
    grouping.py               - Overall / per-grade partitioning
    skills_records.py         - Skills attempts -> TeamSkillsRecord
    rank_resolver.py          - Position lookup in ordered lists (Found / Absent)
    eligibility_evaluator.py  - Per-team, per-criterion verdicts
    aggregator.py             - Group evaluation in roster order
    award_descriptors.py      - Excellence award discovery and grade scopes
    integration_service.py    - Snapshot -> AwardEvaluation pipeline
"""
