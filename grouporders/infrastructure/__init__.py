"""Infrastructure Layer: database sessions, logging setup, credential hashing.

Invariants:
    - Infrastructure never imports from services/ or api/
"""
