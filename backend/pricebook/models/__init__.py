"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Provider owns its data points (data_points.provider_id FK)

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from pricebook.models.provider import Provider  # noqa: F401
from pricebook.models.data_point import DataPoint  # noqa: F401
