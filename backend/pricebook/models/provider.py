"""Provider ORM — the organisation supplying pricing data points.

Invariants:
    - id is an integer primary key (autoincrement)
    - name is non-nullable and unique (display name used by the provider filter)

Design Decisions:
    - data_points relationship is lazy="raise": providers are listed on their own,
      the join only runs from the data point side
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pricebook.db.base import Base


class Provider(Base):
    """Provider entity — referenced by id from every data point."""
    __tablename__ = "providers"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    data_points: Mapped[list["DataPoint"]] = relationship(
        "DataPoint", back_populates="provider", lazy="raise",
    )
