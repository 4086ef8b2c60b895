"""Work order roll-ups over approved daily reports.

Only operations whose daily report is approved count. Pending reports are
invisible here until an admin approves them. Hours adjustments are a
per-report correction and are not applied to these totals.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models import (
    Client,
    DailyReport,
    Operation,
    ReportStatusEnum,
    User,
    WorkOrder,
)
from .numbers import ZERO, to_decimal

NOTES_SEPARATOR = "; "


@dataclass
class WorkOrderStats:
    work_order_id: int
    work_order_name: str
    client_id: int
    is_active: bool
    total_operations: int = 0
    total_hours: Decimal = ZERO
    last_activity: str | None = None


@dataclass(frozen=True)
class ApprovedOperation:
    operation_id: int
    daily_report_id: int
    work_order_id: int | None
    client_id: int
    client_name: str | None
    employee_id: int
    employee_name: str
    date: str
    hours: Decimal
    work_types: tuple[str, ...] = ()
    materials: tuple[str, ...] = ()
    notes: str | None = None
    photos: tuple[str, ...] = ()


@dataclass
class DetailRow:
    date: str
    employee_id: int
    employee_name: str
    hours: Decimal = ZERO
    work_types: list[str] = field(default_factory=list)
    materials: list[str] = field(default_factory=list)
    notes: str = ""
    operation_count: int = 0


@dataclass
class WorkOrderDetail:
    work_order_id: int
    rows: list[DetailRow]
    total_hours: Decimal
    day_count: int
    employee_count: int


def _approved_filters(organization_id: int) -> list:
    return [
        DailyReport.organization_id == organization_id,
        DailyReport.status == ReportStatusEnum.APPROVED,
    ]


def aggregate_work_order_stats(
    work_orders: Iterable[WorkOrder], operations: Iterable
) -> list[WorkOrderStats]:
    """Build one stats entry per work order.

    ``operations`` yields objects with ``work_order_id``, ``hours`` and
    ``date`` attributes, already restricted to approved reports. Work orders
    without any operation still get an entry with zero totals.
    """
    stats = {
        work_order.id: WorkOrderStats(
            work_order_id=work_order.id,
            work_order_name=work_order.name,
            client_id=work_order.client_id,
            is_active=work_order.is_active,
        )
        for work_order in work_orders
    }
    for operation in operations:
        entry = stats.get(operation.work_order_id)
        if entry is None:
            continue
        entry.total_operations += 1
        entry.total_hours += to_decimal(operation.hours)
        if entry.last_activity is None or operation.date > entry.last_activity:
            entry.last_activity = operation.date
    return list(stats.values())


def compute_work_order_stats(db: Session, organization_id: int) -> list[WorkOrderStats]:
    work_orders = db.scalars(
        select(WorkOrder)
        .where(WorkOrder.organization_id == organization_id)
        .order_by(WorkOrder.id)
    ).all()
    rows = db.execute(
        select(Operation.work_order_id, Operation.hours, DailyReport.date)
        .join(DailyReport, Operation.daily_report_id == DailyReport.id)
        .where(*_approved_filters(organization_id))
        .where(Operation.work_order_id.is_not(None))
    ).all()
    return aggregate_work_order_stats(work_orders, rows)


def approved_work_order_operations(
    db: Session, work_order_id: int, organization_id: int
) -> list[ApprovedOperation]:
    rows = db.execute(
        select(
            Operation,
            DailyReport.date,
            DailyReport.employee_id,
            User.full_name,
            Client.name,
        )
        .join(DailyReport, Operation.daily_report_id == DailyReport.id)
        .join(User, DailyReport.employee_id == User.id)
        .outerjoin(Client, Operation.client_id == Client.id)
        .where(*_approved_filters(organization_id))
        .where(Operation.work_order_id == work_order_id)
        .order_by(DailyReport.date, Operation.id)
    ).all()
    return [
        ApprovedOperation(
            operation_id=operation.id,
            daily_report_id=operation.daily_report_id,
            work_order_id=operation.work_order_id,
            client_id=operation.client_id,
            client_name=client_name,
            employee_id=employee_id,
            employee_name=employee_name,
            date=report_date,
            hours=to_decimal(operation.hours),
            work_types=tuple(operation.work_types or ()),
            materials=tuple(operation.materials or ()),
            notes=operation.notes,
            photos=tuple(operation.photos or ()),
        )
        for operation, report_date, employee_id, employee_name, client_name in rows
    ]


def _merge_unique(target: list[str], values: Iterable[str]) -> None:
    for value in values:
        if value not in target:
            target.append(value)


def group_detail_rows(
    work_order_id: int, operations: Iterable[ApprovedOperation]
) -> WorkOrderDetail:
    """Merge operations into one row per (date, employee).

    Rows come out sorted by date. Within a date, employees keep the order in
    which they were first encountered.
    """
    grouped: dict[tuple[str, int], DetailRow] = {}
    notes: dict[tuple[str, int], list[str]] = {}
    for operation in operations:
        key = (operation.date, operation.employee_id)
        row = grouped.get(key)
        if row is None:
            row = DetailRow(
                date=operation.date,
                employee_id=operation.employee_id,
                employee_name=operation.employee_name,
            )
            grouped[key] = row
            notes[key] = []
        row.hours += to_decimal(operation.hours)
        row.operation_count += 1
        _merge_unique(row.work_types, operation.work_types)
        _merge_unique(row.materials, operation.materials)
        if operation.notes and operation.notes.strip():
            notes[key].append(operation.notes.strip())

    for key, row in grouped.items():
        row.notes = NOTES_SEPARATOR.join(notes[key])

    rows = sorted(grouped.values(), key=lambda row: row.date)
    return WorkOrderDetail(
        work_order_id=work_order_id,
        rows=rows,
        total_hours=sum((row.hours for row in rows), ZERO),
        day_count=len({row.date for row in rows}),
        employee_count=len({row.employee_id for row in rows}),
    )


def compute_work_order_detail_rows(
    db: Session, work_order_id: int, organization_id: int
) -> WorkOrderDetail:
    operations = approved_work_order_operations(db, work_order_id, organization_id)
    return group_detail_rows(work_order_id, operations)
