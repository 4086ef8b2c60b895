"""fuel models

Revision ID: b4d6f8a0c213
Revises: a1c3e5f7b902
Create Date: 2026-10-19 09:30:00.000000
"""
from alembic import op
import sqlalchemy as sa


revision = "b4d6f8a0c213"
down_revision = "a1c3e5f7b902"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "vehicles",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "organization_id",
            sa.Integer(),
            sa.ForeignKey("organizations.id"),
            nullable=False,
        ),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("license_plate", sa.String(length=50), nullable=False),
        sa.Column("fuel_type", sa.String(length=8), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.UniqueConstraint(
            "organization_id", "license_plate", name="uq_vehicles_organization_plate"
        ),
    )
    op.create_index("ix_vehicles_organization_id", "vehicles", ["organization_id"])

    op.create_table(
        "fuel_tank_loads",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "organization_id",
            sa.Integer(),
            sa.ForeignKey("organizations.id"),
            nullable=False,
        ),
        sa.Column("load_date", sa.DateTime(), nullable=False),
        sa.Column("liters", sa.Numeric(12, 2), nullable=False),
        sa.Column("total_cost", sa.Numeric(12, 2), nullable=True),
        sa.Column("supplier", sa.String(length=255), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
    )
    op.create_index(
        "ix_fuel_tank_loads_organization_id", "fuel_tank_loads", ["organization_id"]
    )
    op.create_index("ix_fuel_tank_loads_load_date", "fuel_tank_loads", ["load_date"])

    op.create_table(
        "fuel_refills",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "organization_id",
            sa.Integer(),
            sa.ForeignKey("organizations.id"),
            nullable=False,
        ),
        sa.Column(
            "vehicle_id",
            sa.Integer(),
            sa.ForeignKey("vehicles.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("refill_date", sa.DateTime(), nullable=False),
        sa.Column("operator_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=True),
        sa.Column("liters_before", sa.Numeric(12, 2), nullable=False),
        sa.Column("liters_after", sa.Numeric(12, 2), nullable=False),
        sa.Column("liters_refilled", sa.Numeric(12, 2), nullable=False),
        sa.Column("km_reading", sa.Numeric(12, 1), nullable=True),
        sa.Column("engine_hours_reading", sa.Numeric(12, 2), nullable=True),
        sa.Column("total_cost", sa.Numeric(12, 2), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
    )
    op.create_index(
        "ix_fuel_refills_organization_id", "fuel_refills", ["organization_id"]
    )
    op.create_index("ix_fuel_refills_vehicle_id", "fuel_refills", ["vehicle_id"])
    op.create_index("ix_fuel_refills_refill_date", "fuel_refills", ["refill_date"])


def downgrade() -> None:
    op.drop_index("ix_fuel_refills_refill_date", table_name="fuel_refills")
    op.drop_index("ix_fuel_refills_vehicle_id", table_name="fuel_refills")
    op.drop_index("ix_fuel_refills_organization_id", table_name="fuel_refills")
    op.drop_table("fuel_refills")
    op.drop_index("ix_fuel_tank_loads_load_date", table_name="fuel_tank_loads")
    op.drop_index("ix_fuel_tank_loads_organization_id", table_name="fuel_tank_loads")
    op.drop_table("fuel_tank_loads")
    op.drop_index("ix_vehicles_organization_id", table_name="vehicles")
    op.drop_table("vehicles")
