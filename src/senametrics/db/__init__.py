"""Record store: schema, session management, repository and seeding.

- Owns every SQLAlchemy query
- Returns plain record documents to callers
- Forbidden: aggregation logic
"""
