"""senametrics: read-only learner statistics service."""

__version__ = "0.1.0"
