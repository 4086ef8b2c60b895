from datetime import date
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import (
    Client,
    DailyReport,
    HoursAdjustment,
    Operation,
    Organization,
    ReportStatusEnum,
    User,
    WorkOrder,
)
from ..models.base import utcnow
from ..schemas import (
    DailyReportCreate,
    DailyReportRead,
    DailyReportSummary,
    HoursAdjustmentRead,
    HoursAdjustmentWrite,
    OperationCreate,
    OperationRead,
    ReportHoursRead,
)
from ..services.report_totals import daily_report_hours
from .deps import get_organization, get_scoped

router = APIRouter()
logger = logging.getLogger(__name__)

DUPLICATE_REPORT = "A daily report already exists for this employee and date."


@router.get("/daily-reports", response_model=list[DailyReportSummary])
def daily_reports_list(
    from_date: date | None = None,
    to_date: date | None = None,
    status: ReportStatusEnum | None = None,
    employee_id: int | None = None,
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
) -> list[DailyReport]:
    query = select(DailyReport).where(DailyReport.organization_id == organization.id)
    if from_date:
        query = query.where(DailyReport.date >= from_date.isoformat())
    if to_date:
        query = query.where(DailyReport.date <= to_date.isoformat())
    if status is not None:
        query = query.where(DailyReport.status == status)
    if employee_id is not None:
        query = query.where(DailyReport.employee_id == employee_id)
    return list(db.scalars(query.order_by(DailyReport.date.desc(), DailyReport.id)))


@router.post("/daily-reports", response_model=DailyReportRead, status_code=201)
def daily_reports_create(
    payload: DailyReportCreate,
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
) -> DailyReportRead:
    employee = get_scoped(db, User, payload.employee_id, organization.id, "Employee")
    report_date = payload.date.isoformat()
    _ensure_report_free(db, organization.id, employee.id, report_date)

    report = DailyReport(
        organization_id=organization.id,
        employee_id=employee.id,
        date=report_date,
        status=ReportStatusEnum.PENDING,
    )
    for entry in payload.operations:
        _check_operation(db, organization.id, entry)
        report.operations.append(
            Operation(
                client_id=entry.client_id,
                work_order_id=entry.work_order_id,
                work_types=list(entry.work_types),
                materials=list(entry.materials),
                hours=entry.hours,
                notes=entry.notes,
                photos=list(entry.photos),
            )
        )
    db.add(report)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise HTTPException(status_code=409, detail=DUPLICATE_REPORT) from exc
    db.refresh(report)
    return _report_read(report)


@router.get("/daily-reports/{report_id}", response_model=DailyReportRead)
def daily_reports_get(
    report_id: int,
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
) -> DailyReportRead:
    report = get_scoped(db, DailyReport, report_id, organization.id, "Daily report")
    return _report_read(report)


@router.patch("/daily-reports/{report_id}/approve", response_model=DailyReportRead)
def daily_reports_approve(
    report_id: int,
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
) -> DailyReportRead:
    report = get_scoped(db, DailyReport, report_id, organization.id, "Daily report")
    if report.status != ReportStatusEnum.APPROVED:
        report.status = ReportStatusEnum.APPROVED
        report.updated_at = utcnow()
        db.commit()
        db.refresh(report)
        logger.info(
            "Approved daily report id=%s (%s operations, organization_id=%s)",
            report.id,
            len(report.operations),
            organization.id,
        )
    return _report_read(report)


@router.delete("/daily-reports/{report_id}", status_code=204)
def daily_reports_delete(
    report_id: int,
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
) -> None:
    report = get_scoped(db, DailyReport, report_id, organization.id, "Daily report")
    db.delete(report)
    db.commit()


@router.put(
    "/daily-reports/{report_id}/hours-adjustment", response_model=HoursAdjustmentRead
)
def hours_adjustment_upsert(
    report_id: int,
    payload: HoursAdjustmentWrite,
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
) -> HoursAdjustment:
    report = get_scoped(db, DailyReport, report_id, organization.id, "Daily report")
    if payload.created_by is not None:
        get_scoped(db, User, payload.created_by, organization.id, "User")

    adjustment = report.hours_adjustment
    if adjustment is None:
        adjustment = HoursAdjustment(
            organization_id=organization.id,
            daily_report_id=report.id,
            adjustment=payload.adjustment,
            reason=payload.reason,
            created_by=payload.created_by,
        )
        db.add(adjustment)
    else:
        adjustment.adjustment = payload.adjustment
        adjustment.reason = payload.reason
        adjustment.updated_at = utcnow()
    db.commit()
    db.refresh(adjustment)
    logger.info(
        "Hours adjustment %s on daily report id=%s (organization_id=%s)",
        adjustment.adjustment,
        report.id,
        organization.id,
    )
    return adjustment


@router.delete("/daily-reports/{report_id}/hours-adjustment", status_code=204)
def hours_adjustment_delete(
    report_id: int,
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
) -> None:
    report = get_scoped(db, DailyReport, report_id, organization.id, "Daily report")
    if report.hours_adjustment is None:
        raise HTTPException(status_code=404, detail="Hours adjustment not found.")
    db.delete(report.hours_adjustment)
    db.commit()


def _ensure_report_free(
    db: Session, organization_id: int, employee_id: int, report_date: str
) -> None:
    existing = db.execute(
        select(DailyReport.id)
        .where(DailyReport.organization_id == organization_id)
        .where(DailyReport.employee_id == employee_id)
        .where(DailyReport.date == report_date)
    ).scalar_one_or_none()
    if existing is not None:
        raise HTTPException(status_code=409, detail=DUPLICATE_REPORT)


def _check_operation(db: Session, organization_id: int, entry: OperationCreate) -> None:
    get_scoped(db, Client, entry.client_id, organization_id, "Client")
    if entry.work_order_id is None:
        return
    work_order = get_scoped(
        db, WorkOrder, entry.work_order_id, organization_id, "Work order"
    )
    if work_order.client_id != entry.client_id:
        raise HTTPException(
            status_code=400,
            detail="Work order does not belong to the selected client.",
        )
    if work_order.allowed_work_types:
        for name in entry.work_types:
            if name not in work_order.allowed_work_types:
                raise HTTPException(
                    status_code=400,
                    detail=f"Work type not allowed for this work order: {name}",
                )
    if work_order.allowed_materials:
        for name in entry.materials:
            if name not in work_order.allowed_materials:
                raise HTTPException(
                    status_code=400,
                    detail=f"Material not allowed for this work order: {name}",
                )


def _report_read(report: DailyReport) -> DailyReportRead:
    return DailyReportRead(
        id=report.id,
        employee_id=report.employee_id,
        employee_name=report.employee.full_name,
        date=report.date,
        status=report.status,
        operations=[
            OperationRead.model_validate(operation) for operation in report.operations
        ],
        hours=ReportHoursRead.model_validate(daily_report_hours(report)),
        hours_adjustment=(
            HoursAdjustmentRead.model_validate(report.hours_adjustment)
            if report.hours_adjustment is not None
            else None
        ),
    )
