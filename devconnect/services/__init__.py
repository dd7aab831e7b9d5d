"""Services Layer - request handlers sitting between routes and the database.

Invariants:
    - Handlers receive an AsyncSession and explicit caller identity
    - Validation runs before any query

Design Decisions:
    - One handler file per resource for locality
"""
