import sqlalchemy as sa
from sqlalchemy import JSON, Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class WorkOrder(Base):
    __tablename__ = "work_orders"
    __table_args__ = (
        sa.Index("ix_work_orders_organization_id", "organization_id"),
        sa.Index("ix_work_orders_client_id", "client_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    organization_id: Mapped[int] = mapped_column(
        ForeignKey("organizations.id"), nullable=False
    )
    client_id: Mapped[int] = mapped_column(ForeignKey("clients.id"), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    # Form validation only; aggregation never reads these.
    allowed_work_types: Mapped[list[str]] = mapped_column(
        JSON, default=list, nullable=False
    )
    allowed_materials: Mapped[list[str]] = mapped_column(
        JSON, default=list, nullable=False
    )
    client: Mapped["Client"] = relationship("Client")
