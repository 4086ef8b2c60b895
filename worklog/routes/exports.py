from datetime import date

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import Organization, ReportStatusEnum, WorkOrder
from ..services import exports
from .deps import get_organization, get_scoped

router = APIRouter(prefix="/export")


@router.get("/daily-reports", response_class=PlainTextResponse)
def export_daily_reports(
    from_date: date | None = None,
    to_date: date | None = None,
    status: ReportStatusEnum | None = None,
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
) -> PlainTextResponse:
    if from_date and to_date and to_date < from_date:
        raise HTTPException(status_code=400, detail="Date range invalid.")
    try:
        content = exports.render_daily_reports_txt(
            db,
            organization.id,
            from_date.isoformat() if from_date else None,
            to_date.isoformat() if to_date else None,
            status,
        )
    except exports.ExportEmpty as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    if from_date and to_date:
        filename = f"daily_reports_{from_date.isoformat()}_{to_date.isoformat()}.txt"
    else:
        filename = "daily_reports.txt"
    return PlainTextResponse(
        content,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/work-orders/{work_order_id}", response_class=PlainTextResponse)
def export_work_order(
    work_order_id: int,
    organization: Organization = Depends(get_organization),
    db: Session = Depends(get_db),
) -> PlainTextResponse:
    work_order = get_scoped(db, WorkOrder, work_order_id, organization.id, "Work order")
    content = exports.render_work_order_txt(db, work_order, organization.id)
    return PlainTextResponse(
        content,
        headers={
            "Content-Disposition": f'attachment; filename="work_order_{work_order.id}.txt"'
        },
    )
