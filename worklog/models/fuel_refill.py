from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, utcnow


class FuelRefill(Base):
    __tablename__ = "fuel_refills"
    __table_args__ = (
        Index("ix_fuel_refills_organization_id", "organization_id"),
        Index("ix_fuel_refills_vehicle_id", "vehicle_id"),
        Index("ix_fuel_refills_refill_date", "refill_date"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    organization_id: Mapped[int] = mapped_column(
        ForeignKey("organizations.id"), nullable=False
    )
    vehicle_id: Mapped[int] = mapped_column(
        ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False
    )
    refill_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    operator_id: Mapped[int | None] = mapped_column(ForeignKey("users.id"))
    liters_before: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    liters_after: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    # liters_after - liters_before, fixed at write time.
    liters_refilled: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    km_reading: Mapped[Decimal | None] = mapped_column(Numeric(12, 1))
    engine_hours_reading: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    total_cost: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    notes: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    vehicle: Mapped["Vehicle"] = relationship("Vehicle", back_populates="refills")
