"""Excellence Award eligibility engine."""

__version__ = "1.0.0"
