"""Aggregation module for learner statistics.

- views: pure functions computing the summary views
- summary: binds each view to the record store
- Forbidden: writes to the store
"""
