"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - Models imported here so Base.metadata is complete for Alembic and test fixtures
"""

from movies_api.models.movie import Movie  # noqa: F401
