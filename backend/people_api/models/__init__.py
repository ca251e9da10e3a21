"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every model imported here so create_all sees it before the schema is built
"""

from people_api.models.person import Person  # noqa: F401
