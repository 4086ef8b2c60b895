from decimal import Decimal

from sqlalchemy import JSON, ForeignKey, Index, Integer, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class Operation(Base):
    __tablename__ = "operations"
    __table_args__ = (
        Index("ix_operations_daily_report_id", "daily_report_id"),
        Index("ix_operations_work_order_id", "work_order_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    daily_report_id: Mapped[int] = mapped_column(
        ForeignKey("daily_reports.id", ondelete="CASCADE"), nullable=False
    )
    client_id: Mapped[int] = mapped_column(ForeignKey("clients.id"), nullable=False)
    work_order_id: Mapped[int | None] = mapped_column(ForeignKey("work_orders.id"))
    work_types: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    materials: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    hours: Mapped[Decimal] = mapped_column(Numeric(6, 2), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text)
    photos: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    daily_report: Mapped["DailyReport"] = relationship(
        "DailyReport", back_populates="operations"
    )
