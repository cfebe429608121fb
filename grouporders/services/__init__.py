"""Services Layer: orchestration of repositories around the core eligibility rules.

Invariants:
    - Services own the transaction boundary (commit / rollback)
    - Services never build HTTP responses
"""
