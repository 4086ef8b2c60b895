"""attendance records

Revision ID: c8e0a2b4d617
Revises: b4d6f8a0c213
Create Date: 2026-10-20 10:00:00.000000
"""
from alembic import op
import sqlalchemy as sa


revision = "c8e0a2b4d617"
down_revision = "b4d6f8a0c213"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "attendance_records",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "organization_id",
            sa.Integer(),
            sa.ForeignKey("organizations.id"),
            nullable=False,
        ),
        sa.Column("employee_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("date", sa.String(length=10), nullable=False),
        sa.Column("status", sa.String(length=7), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.UniqueConstraint(
            "organization_id",
            "employee_id",
            "date",
            name="uq_attendance_records_organization_employee_date",
        ),
    )
    op.create_index(
        "ix_attendance_records_organization_id",
        "attendance_records",
        ["organization_id"],
    )
    op.create_index("ix_attendance_records_date", "attendance_records", ["date"])


def downgrade() -> None:
    op.drop_index("ix_attendance_records_date", table_name="attendance_records")
    op.drop_index(
        "ix_attendance_records_organization_id", table_name="attendance_records"
    )
    op.drop_table("attendance_records")
