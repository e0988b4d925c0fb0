"""Database Metadata — SQLAlchemy declarative Base.

Invariants:
    - Table metadata only; engines and sessions live in infrastructure/database.py
"""
