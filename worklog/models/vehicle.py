from datetime import datetime
from enum import Enum

import sqlalchemy as sa
from sqlalchemy import Boolean, DateTime, Enum as SAEnum, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, enum_values, utcnow


class FuelTypeEnum(str, Enum):
    GASOLINE = "gasoline"
    DIESEL = "diesel"
    LPG = "lpg"
    METHANE = "methane"
    ELECTRIC = "electric"


class Vehicle(Base):
    __tablename__ = "vehicles"
    __table_args__ = (
        sa.UniqueConstraint(
            "organization_id", "license_plate", name="uq_vehicles_organization_plate"
        ),
        sa.Index("ix_vehicles_organization_id", "organization_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    organization_id: Mapped[int] = mapped_column(
        ForeignKey("organizations.id"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    license_plate: Mapped[str] = mapped_column(String(50), nullable=False)
    fuel_type: Mapped[FuelTypeEnum] = mapped_column(
        SAEnum(
            FuelTypeEnum,
            native_enum=False,
            create_constraint=False,
            values_callable=enum_values,
        ),
        nullable=False,
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utcnow, onupdate=utcnow
    )
    refills: Mapped[list["FuelRefill"]] = relationship(
        "FuelRefill",
        back_populates="vehicle",
        cascade="all, delete-orphan",
    )
