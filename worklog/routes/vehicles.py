import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import Organization, Vehicle
from ..schemas import VehicleCreate, VehicleRead, VehicleUpdate
from .deps import get_organization, get_scoped

router = APIRouter()
logger = logging.getLogger(__name__)

DUPLICATE_PLATE = "A vehicle with this license plate already exists."


@router.get("/vehicles", response_model=list[VehicleRead])
def vehicles_list(
    active_only: bool = False,
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
) -> list[Vehicle]:
    query = (
        select(Vehicle)
        .where(Vehicle.organization_id == organization.id)
        .order_by(Vehicle.name, Vehicle.id)
    )
    if active_only:
        query = query.where(Vehicle.is_active.is_(True))
    return list(db.scalars(query))


@router.post("/vehicles", response_model=VehicleRead, status_code=201)
def vehicles_create(
    payload: VehicleCreate,
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
) -> Vehicle:
    _ensure_plate_free(db, organization.id, payload.license_plate)
    vehicle = Vehicle(
        organization_id=organization.id,
        name=payload.name.strip(),
        license_plate=payload.license_plate.strip().upper(),
        fuel_type=payload.fuel_type,
        is_active=payload.is_active,
    )
    db.add(vehicle)
    _commit_vehicle(db)
    db.refresh(vehicle)
    return vehicle


@router.get("/vehicles/{vehicle_id}", response_model=VehicleRead)
def vehicles_get(
    vehicle_id: int,
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
) -> Vehicle:
    return get_scoped(db, Vehicle, vehicle_id, organization.id, "Vehicle")


@router.patch("/vehicles/{vehicle_id}", response_model=VehicleRead)
def vehicles_update(
    vehicle_id: int,
    payload: VehicleUpdate,
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
) -> Vehicle:
    vehicle = get_scoped(db, Vehicle, vehicle_id, organization.id, "Vehicle")
    changes = payload.model_dump(exclude_unset=True)
    if changes.get("license_plate"):
        plate = changes["license_plate"].strip().upper()
        if plate != vehicle.license_plate:
            _ensure_plate_free(db, organization.id, plate)
        changes["license_plate"] = plate
    for key, value in changes.items():
        if value is not None:
            setattr(vehicle, key, value)
    _commit_vehicle(db)
    db.refresh(vehicle)
    return vehicle


@router.delete("/vehicles/{vehicle_id}", status_code=204)
def vehicles_delete(
    vehicle_id: int,
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
) -> None:
    vehicle = get_scoped(db, Vehicle, vehicle_id, organization.id, "Vehicle")
    refill_count = len(vehicle.refills)
    # Refills go with the vehicle, which changes the tank balance.
    db.delete(vehicle)
    db.commit()
    logger.info(
        "Deleted vehicle_id=%s with %s refills (organization_id=%s)",
        vehicle_id,
        refill_count,
        organization.id,
    )


def _ensure_plate_free(db: Session, organization_id: int, license_plate: str) -> None:
    existing = db.execute(
        select(Vehicle.id)
        .where(Vehicle.organization_id == organization_id)
        .where(Vehicle.license_plate == license_plate.strip().upper())
    ).scalar_one_or_none()
    if existing is not None:
        raise HTTPException(status_code=409, detail=DUPLICATE_PLATE)


def _commit_vehicle(db: Session) -> None:
    # The plate check above can lose a race; the unique constraint decides.
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise HTTPException(status_code=409, detail=DUPLICATE_PLATE) from exc
