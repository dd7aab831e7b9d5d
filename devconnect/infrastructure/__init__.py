"""Infrastructure Layer - database, hashing, tokens and logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All SQLAlchemy failures mapped to DatabaseError before leaving this layer
"""
