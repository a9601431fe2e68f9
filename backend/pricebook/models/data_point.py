"""DataPoint ORM — persists a single pricing observation.

Invariants:
    - Always belongs to a Provider (provider_id FK, non-nullable)
    - date is stamped by the service at creation and never updated
    - No min_price <= max_price constraint at the table level (checked in core)

Design Decisions:
    - Integer autoincrement id: ids are shown in the table and used in URLs
    - provider relationship lazy="selectin": every read returns the joined provider
"""

from datetime import datetime

from sqlalchemy import Integer, String, Float, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pricebook.db.base import Base


class DataPoint(Base):
    """Data point entity — provider, asset class, quarter, price range."""
    __tablename__ = "data_points"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    provider_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("providers.id"), nullable=False, index=True,
    )
    asset_class: Mapped[str] = mapped_column(String(50), nullable=False)
    quarter: Mapped[str] = mapped_column(String(20), nullable=False)
    min_price: Mapped[float] = mapped_column(Float, nullable=False)
    max_price: Mapped[float] = mapped_column(Float, nullable=False)
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True,
    )

    provider: Mapped["Provider"] = relationship(
        "Provider", back_populates="data_points", lazy="selectin",
    )
