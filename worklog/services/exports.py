"""Plain-text exports.

Exports never regroup rows on their own: daily report totals come from
``report_totals`` and work order tables from ``work_order_stats``.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
import logging

from jinja2 import Environment, FileSystemLoader
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from ..config import settings
from ..models import Client, DailyReport, ReportStatusEnum, User, WorkOrder
from .report_totals import ReportHours, daily_report_hours
from .work_order_stats import compute_work_order_detail_rows

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
UNKNOWN_CLIENT = "Unknown client"
UNKNOWN_WORK_ORDER = "Unknown work order"


class ExportEmpty(LookupError):
    """Nothing matched the export filters."""


def format_date(value: str) -> str:
    # YYYY-MM-DD -> DD/MM/YYYY without going through datetime.
    parts = value.split("-") if value else []
    if len(parts) != 3:
        return value or ""
    year, month, day = parts
    return f"{day}/{month}/{year}"


def format_hours(value) -> str:
    return f"{Decimal(value or 0):.2f}"


def format_signed(value) -> str:
    return f"{Decimal(value or 0):+.2f}"


_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)
_env.filters["it_date"] = format_date
_env.filters["hours"] = format_hours
_env.filters["signed"] = format_signed


@dataclass
class EmployeeSection:
    employee_name: str
    hours: ReportHours
    adjustment_reason: str | None
    # client name -> work order name -> operations
    groups: dict[str, dict[str, list]] = field(default_factory=dict)


@dataclass
class DateSection:
    date: str
    employees: list[EmployeeSection] = field(default_factory=list)


def _range_title(from_date: str | None, to_date: str | None) -> str:
    if from_date and to_date:
        return f"from {format_date(from_date)} to {format_date(to_date)}"
    if from_date:
        return f"from {format_date(from_date)}"
    if to_date:
        return f"until {format_date(to_date)}"
    return "all dates"


def _employee_section(
    report: DailyReport,
    clients: dict[int, Client],
    work_orders: dict[int, WorkOrder],
) -> EmployeeSection:
    adjustment = report.hours_adjustment
    section = EmployeeSection(
        employee_name=report.employee.full_name,
        hours=daily_report_hours(report),
        adjustment_reason=(adjustment.reason or None) if adjustment else None,
    )
    for operation in report.operations:
        work_order = work_orders.get(operation.work_order_id)
        client = clients.get(work_order.client_id if work_order else operation.client_id)
        client_name = client.name if client else UNKNOWN_CLIENT
        work_order_name = work_order.name if work_order else UNKNOWN_WORK_ORDER
        section.groups.setdefault(client_name, {}).setdefault(
            work_order_name, []
        ).append(operation)
    return section


def render_daily_reports_txt(
    db: Session,
    organization_id: int,
    from_date: str | None = None,
    to_date: str | None = None,
    status: ReportStatusEnum | None = None,
) -> str:
    filters = [DailyReport.organization_id == organization_id]
    if from_date:
        filters.append(DailyReport.date >= from_date)
    if to_date:
        filters.append(DailyReport.date <= to_date)
    if status is not None:
        filters.append(DailyReport.status == status)

    reports = db.scalars(
        select(DailyReport)
        .join(User, DailyReport.employee_id == User.id)
        .where(*filters)
        .options(
            selectinload(DailyReport.operations),
            selectinload(DailyReport.hours_adjustment),
            selectinload(DailyReport.employee),
        )
        .order_by(DailyReport.date, User.full_name, User.id)
    ).all()
    reports = [report for report in reports if report.operations]
    if not reports:
        raise ExportEmpty("No daily reports found for the selected filters.")

    clients = {
        client.id: client
        for client in db.scalars(
            select(Client).where(Client.organization_id == organization_id)
        )
    }
    work_orders = {
        work_order.id: work_order
        for work_order in db.scalars(
            select(WorkOrder).where(WorkOrder.organization_id == organization_id)
        )
    }

    sections: list[DateSection] = []
    for report in reports:
        if not sections or sections[-1].date != report.date:
            sections.append(DateSection(date=report.date))
        sections[-1].employees.append(_employee_section(report, clients, work_orders))

    logger.info(
        "Rendering daily report export for organization_id=%s (%s reports)",
        organization_id,
        len(reports),
    )
    return _env.get_template("exports/daily_reports.txt.j2").render(
        company=settings.export_company_name,
        title=_range_title(from_date, to_date),
        sections=sections,
    )


def render_work_order_txt(
    db: Session, work_order: WorkOrder, organization_id: int
) -> str:
    detail = compute_work_order_detail_rows(db, work_order.id, organization_id)
    client = db.get(Client, work_order.client_id)
    return _env.get_template("exports/work_order.txt.j2").render(
        company=settings.export_company_name,
        work_order=work_order,
        client_name=client.name if client else UNKNOWN_CLIENT,
        detail=detail,
    )
