"""Chart-ready fuel consumption series."""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models import FuelRefill, Vehicle
from .numbers import ZERO, round2, to_decimal


@dataclass
class VehicleConsumption:
    vehicle_id: int
    vehicle_name: str
    license_plate: str
    total_liters: Decimal = ZERO
    refill_count: int = 0
    average_liters: Decimal = ZERO


@dataclass
class MonthlyConsumption:
    month: str
    total_liters: Decimal = ZERO
    refill_count: int = 0


@dataclass
class FuelStatistics:
    by_vehicle: list[VehicleConsumption] = field(default_factory=list)
    by_month: list[MonthlyConsumption] = field(default_factory=list)


def average_per_refill(total_liters: Decimal, refill_count: int) -> Decimal:
    if not refill_count:
        return ZERO
    return round2(total_liters / refill_count)


def parse_month(value: str | int | None) -> str | None:
    """Normalize a month filter to two digits ("3" -> "03")."""
    if value is None or str(value).strip() == "":
        return None
    try:
        number = int(str(value).strip())
    except ValueError:
        raise ValueError(f"Invalid month: {value!r}") from None
    if not 1 <= number <= 12:
        raise ValueError(f"Invalid month: {value!r}")
    return f"{number:02d}"


def refill_month(refill: FuelRefill) -> str:
    return f"{refill.refill_date.month:02d}"


def filter_refills(
    refills: Iterable[FuelRefill], year: int | None = None, month: str | None = None
) -> list[FuelRefill]:
    selected = []
    for refill in refills:
        if year is not None and refill.refill_date.year != year:
            continue
        if month is not None and refill_month(refill) != month:
            continue
        selected.append(refill)
    return selected


def project_statistics(
    refills: Iterable[FuelRefill], vehicles: Iterable[Vehicle]
) -> FuelStatistics:
    """Group already-filtered refills by vehicle and by month.

    Vehicles without refills are left out of ``by_vehicle``.
    """
    vehicles_by_id = {vehicle.id: vehicle for vehicle in vehicles}
    by_vehicle: dict[int, VehicleConsumption] = {}
    by_month: dict[str, MonthlyConsumption] = {}
    for refill in refills:
        liters = to_decimal(refill.liters_refilled)

        entry = by_vehicle.get(refill.vehicle_id)
        if entry is None:
            vehicle = vehicles_by_id.get(refill.vehicle_id)
            entry = VehicleConsumption(
                vehicle_id=refill.vehicle_id,
                vehicle_name=vehicle.name if vehicle else "Unknown",
                license_plate=vehicle.license_plate if vehicle else "",
            )
            by_vehicle[refill.vehicle_id] = entry
        entry.total_liters += liters
        entry.refill_count += 1

        month = refill_month(refill)
        monthly = by_month.setdefault(month, MonthlyConsumption(month=month))
        monthly.total_liters += liters
        monthly.refill_count += 1

    for entry in by_vehicle.values():
        entry.average_liters = average_per_refill(entry.total_liters, entry.refill_count)

    return FuelStatistics(
        by_vehicle=sorted(
            by_vehicle.values(),
            key=lambda entry: (entry.vehicle_name.lower(), entry.vehicle_id),
        ),
        by_month=sorted(by_month.values(), key=lambda entry: entry.month),
    )


def compute_fuel_statistics(
    db: Session,
    organization_id: int,
    year: int | None = None,
    month: str | int | None = None,
) -> FuelStatistics:
    month = parse_month(month)
    refills = db.scalars(
        select(FuelRefill)
        .where(FuelRefill.organization_id == organization_id)
        .order_by(FuelRefill.refill_date, FuelRefill.id)
    ).all()
    vehicles = db.scalars(
        select(Vehicle).where(Vehicle.organization_id == organization_id)
    ).all()
    return project_statistics(filter_refills(refills, year, month), vehicles)
