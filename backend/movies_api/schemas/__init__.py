"""API Schemas — Pydantic request/response models.

Invariants:
    - Schemas never import ORM models or touch the store
"""
