"""API module for senametrics.

- Maps GET requests to summary views
- Returns JSON payloads
- Forbidden: aggregation logic, writes to the record store
"""
