"""Group Orders: shared food orders collected in time-bounded packs.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
