import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import FuelRefill, FuelTankLoad, Organization, User, Vehicle
from ..schemas import (
    ConsistencyRead,
    DispensedRead,
    FuelRefillCreate,
    FuelRefillRead,
    FuelRefillUpdate,
    FuelStatisticsRead,
    FuelTankLoadCreate,
    FuelTankLoadRead,
    PrefillRead,
    RemainingRead,
)
from ..services import fuel_reconciliation, fuel_statistics
from .deps import get_organization, get_scoped

router = APIRouter()
logger = logging.getLogger(__name__)

REQUIRED_REFILL_FIELDS = {"vehicle_id", "refill_date", "liters_before", "liters_after"}


@router.get("/fuel-remaining", response_model=RemainingRead)
def fuel_remaining(
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
) -> RemainingRead:
    remaining = fuel_reconciliation.compute_remaining_liters(db, organization.id)
    return RemainingRead(remaining=remaining)


@router.get("/fuel-remaining/consistency", response_model=ConsistencyRead)
def fuel_remaining_consistency(
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
):
    return fuel_reconciliation.check_consistency(db, organization.id)


@router.get("/fuel-tank-loads", response_model=list[FuelTankLoadRead])
def tank_loads_list(
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
) -> list[FuelTankLoad]:
    return list(
        db.scalars(
            select(FuelTankLoad)
            .where(FuelTankLoad.organization_id == organization.id)
            .order_by(FuelTankLoad.load_date.desc(), FuelTankLoad.id.desc())
        )
    )


@router.post("/fuel-tank-loads", response_model=FuelTankLoadRead, status_code=201)
def tank_loads_create(
    payload: FuelTankLoadCreate,
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
) -> FuelTankLoad:
    load = FuelTankLoad(organization_id=organization.id, **payload.model_dump())
    db.add(load)
    db.commit()
    db.refresh(load)
    logger.info(
        "Tank load of %s L recorded (organization_id=%s)", load.liters, organization.id
    )
    return load


@router.delete("/fuel-tank-loads/{load_id}", status_code=204)
def tank_loads_delete(
    load_id: int,
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
) -> None:
    load = get_scoped(db, FuelTankLoad, load_id, organization.id, "Tank load")
    db.delete(load)
    db.commit()


@router.get("/fuel-refills", response_model=list[FuelRefillRead])
def refills_list(
    vehicle_id: int | None = None,
    year: int | None = None,
    month: str | None = None,
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
) -> list[FuelRefill]:
    month = _month_or_422(month)
    query = (
        select(FuelRefill)
        .where(FuelRefill.organization_id == organization.id)
        .order_by(FuelRefill.refill_date.desc(), FuelRefill.id.desc())
    )
    if vehicle_id is not None:
        query = query.where(FuelRefill.vehicle_id == vehicle_id)
    return fuel_statistics.filter_refills(db.scalars(query), year, month)


@router.get("/fuel-refills/prefill", response_model=PrefillRead)
def refills_prefill(
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
) -> PrefillRead:
    return PrefillRead(
        liters_before=fuel_reconciliation.suggest_liters_before(db, organization.id)
    )


@router.get("/fuel-refills/dispensed", response_model=DispensedRead)
def refills_dispensed_preview(
    liters_before: str | None = None,
    liters_after: str | None = None,
) -> DispensedRead:
    return DispensedRead(
        dispensed=fuel_reconciliation.compute_dispensed(liters_before, liters_after)
    )


@router.get("/fuel-refills/statistics", response_model=FuelStatisticsRead)
def refills_statistics(
    year: int | None = None,
    month: str | None = None,
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
):
    month = _month_or_422(month)
    return fuel_statistics.compute_fuel_statistics(db, organization.id, year, month)


@router.post("/fuel-refills", response_model=FuelRefillRead, status_code=201)
def refills_create(
    payload: FuelRefillCreate,
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
) -> FuelRefill:
    get_scoped(db, Vehicle, payload.vehicle_id, organization.id, "Vehicle")
    if payload.operator_id is not None:
        get_scoped(db, User, payload.operator_id, organization.id, "Operator")

    expected = fuel_reconciliation.suggest_liters_before(db, organization.id)
    refill = FuelRefill(
        organization_id=organization.id,
        liters_refilled=payload.liters_after - payload.liters_before,
        **payload.model_dump(),
    )
    db.add(refill)
    db.commit()
    db.refresh(refill)
    logger.info(
        "Refill of %s L for vehicle_id=%s (organization_id=%s)",
        refill.liters_refilled,
        refill.vehicle_id,
        organization.id,
    )
    if expected is not None and expected != refill.liters_before:
        logger.warning(
            "Refill id=%s starts at %s L but the previous refill ended at %s L",
            refill.id,
            refill.liters_before,
            expected,
        )
    return refill


@router.patch("/fuel-refills/{refill_id}", response_model=FuelRefillRead)
def refills_update(
    refill_id: int,
    payload: FuelRefillUpdate,
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
) -> FuelRefill:
    refill = get_scoped(db, FuelRefill, refill_id, organization.id, "Refill")
    changes = payload.model_dump(exclude_unset=True)
    if changes.get("vehicle_id") is not None:
        get_scoped(db, Vehicle, changes["vehicle_id"], organization.id, "Vehicle")
    if changes.get("operator_id") is not None:
        get_scoped(db, User, changes["operator_id"], organization.id, "Operator")
    for key, value in changes.items():
        if value is None and key in REQUIRED_REFILL_FIELDS:
            continue
        setattr(refill, key, value)

    dispensed = fuel_reconciliation.compute_dispensed(
        refill.liters_before, refill.liters_after
    )
    if dispensed is None or dispensed < 0:
        db.rollback()
        raise HTTPException(
            status_code=400,
            detail="Liters after must not be lower than liters before.",
        )
    refill.liters_refilled = dispensed
    db.commit()
    db.refresh(refill)
    return refill


@router.delete("/fuel-refills/{refill_id}", status_code=204)
def refills_delete(
    refill_id: int,
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
) -> None:
    refill = get_scoped(db, FuelRefill, refill_id, organization.id, "Refill")
    db.delete(refill)
    db.commit()


def _month_or_422(month: str | None) -> str | None:
    try:
        return fuel_statistics.parse_month(month)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
