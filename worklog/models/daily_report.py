from datetime import datetime
from enum import Enum

import sqlalchemy as sa
from sqlalchemy import DateTime, Enum as SAEnum, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, enum_values, utcnow


class ReportStatusEnum(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"


class DailyReport(Base):
    __tablename__ = "daily_reports"
    __table_args__ = (
        sa.UniqueConstraint(
            "organization_id",
            "employee_id",
            "date",
            name="uq_daily_reports_organization_employee_date",
        ),
        sa.Index("ix_daily_reports_organization_id", "organization_id"),
        sa.Index("ix_daily_reports_date", "date"),
        sa.Index("ix_daily_reports_status", "status"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    organization_id: Mapped[int] = mapped_column(
        ForeignKey("organizations.id"), nullable=False
    )
    employee_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False)
    # ISO YYYY-MM-DD; string comparison is date comparison.
    date: Mapped[str] = mapped_column(String(10), nullable=False)
    status: Mapped[ReportStatusEnum] = mapped_column(
        SAEnum(
            ReportStatusEnum,
            native_enum=False,
            create_constraint=False,
            values_callable=enum_values,
        ),
        nullable=False,
        default=ReportStatusEnum.PENDING,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utcnow, onupdate=utcnow
    )
    employee: Mapped["User"] = relationship("User")
    operations: Mapped[list["Operation"]] = relationship(
        "Operation",
        back_populates="daily_report",
        cascade="all, delete-orphan",
        order_by="Operation.id",
    )
    hours_adjustment: Mapped["HoursAdjustment | None"] = relationship(
        "HoursAdjustment",
        back_populates="daily_report",
        cascade="all, delete-orphan",
        uselist=False,
    )
