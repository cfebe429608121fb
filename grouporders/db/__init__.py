"""Database Infrastructure: SQLAlchemy declarative base.

Invariants:
    - All sessions are async (AsyncSession), created by infrastructure/database.py
"""
