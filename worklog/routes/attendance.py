from datetime import date
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import AttendanceRecord, Organization, User
from ..schemas import AttendanceRead, AttendanceWrite
from .deps import get_organization, get_scoped

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/attendance", response_model=list[AttendanceRead])
def attendance_list(
    from_date: date | None = None,
    to_date: date | None = None,
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
) -> list[AttendanceRecord]:
    if from_date is None or to_date is None:
        raise HTTPException(
            status_code=400, detail="from_date and to_date are required."
        )
    if to_date < from_date:
        raise HTTPException(status_code=400, detail="Date range invalid.")
    return list(
        db.scalars(
            select(AttendanceRecord)
            .where(AttendanceRecord.organization_id == organization.id)
            .where(AttendanceRecord.date >= from_date.isoformat())
            .where(AttendanceRecord.date <= to_date.isoformat())
            .order_by(AttendanceRecord.date, AttendanceRecord.employee_id)
        )
    )


@router.put("/attendance", response_model=AttendanceRead)
def attendance_upsert(
    payload: AttendanceWrite,
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
) -> AttendanceRecord:
    employee = get_scoped(db, User, payload.employee_id, organization.id, "Employee")
    record_date = payload.date.isoformat()
    record = _find_record(db, organization.id, employee.id, record_date)
    if record is None:
        record = AttendanceRecord(
            organization_id=organization.id,
            employee_id=employee.id,
            date=record_date,
        )
        db.add(record)
    record.status = payload.status
    record.notes = payload.notes
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise HTTPException(
            status_code=409,
            detail="Attendance for this employee and date was saved concurrently.",
        ) from exc
    db.refresh(record)
    logger.info(
        "Attendance %s for employee_id=%s on %s (organization_id=%s)",
        record.status.value,
        employee.id,
        record_date,
        organization.id,
    )
    return record


@router.delete("/attendance/{employee_id}/{record_date}", status_code=204)
def attendance_delete(
    employee_id: int,
    record_date: date,
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
) -> None:
    record = _find_record(db, organization.id, employee_id, record_date.isoformat())
    if record is None:
        raise HTTPException(status_code=404, detail="Attendance record not found.")
    db.delete(record)
    db.commit()


def _find_record(
    db: Session, organization_id: int, employee_id: int, record_date: str
) -> AttendanceRecord | None:
    return db.execute(
        select(AttendanceRecord)
        .where(AttendanceRecord.organization_id == organization_id)
        .where(AttendanceRecord.employee_id == employee_id)
        .where(AttendanceRecord.date == record_date)
    ).scalar_one_or_none()
