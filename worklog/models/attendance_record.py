from datetime import datetime
from enum import Enum

import sqlalchemy as sa
from sqlalchemy import DateTime, Enum as SAEnum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, enum_values, utcnow


class AttendanceStatusEnum(str, Enum):
    PRESENT = "Present"
    HOLIDAY = "Holiday"
    ABSENT = "Absent"
    LEAVE = "Leave"


class AttendanceRecord(Base):
    __tablename__ = "attendance_records"
    __table_args__ = (
        sa.UniqueConstraint(
            "organization_id",
            "employee_id",
            "date",
            name="uq_attendance_records_organization_employee_date",
        ),
        sa.Index("ix_attendance_records_organization_id", "organization_id"),
        sa.Index("ix_attendance_records_date", "date"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    organization_id: Mapped[int] = mapped_column(
        ForeignKey("organizations.id"), nullable=False
    )
    employee_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False)
    # ISO YYYY-MM-DD, same as daily reports.
    date: Mapped[str] = mapped_column(String(10), nullable=False)
    status: Mapped[AttendanceStatusEnum] = mapped_column(
        SAEnum(
            AttendanceStatusEnum,
            native_enum=False,
            create_constraint=False,
            values_callable=enum_values,
        ),
        nullable=False,
    )
    notes: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utcnow, onupdate=utcnow
    )
    employee: Mapped["User"] = relationship("User")
