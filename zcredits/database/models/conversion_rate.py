from datetime import datetime, UTC

from sqlalchemy import DateTime, Index
from sqlalchemy.orm import Mapped, mapped_column

from zcredits.database.models.base import Base


class ConversionRate(Base):
    """PKR paid for one Z-Credit, effective from ``effective_date`` onwards."""
    __tablename__ = "conversion_rate"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    rate: Mapped[float] = mapped_column(nullable=False)
    effective_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
    )

    __table_args__ = (
        Index('idx_conversion_rate_effective_date', 'effective_date'),
    )
