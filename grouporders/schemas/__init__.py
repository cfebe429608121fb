"""Pydantic Schemas: request/response models for the HTTP boundary.

Invariants:
    - Wire field names keep the public API spelling (ordersPack_id, paymentMethod, ...)
      through aliases; Python code uses snake_case
    - Response models never expose password hashes
"""
