from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from ..models import DailyReport, HoursAdjustment
from .numbers import ZERO, to_decimal


@dataclass(frozen=True)
class ReportHours:
    original: Decimal
    adjustment: Decimal | None
    total: Decimal


def report_hours(
    operation_hours: Iterable, adjustment: HoursAdjustment | None = None
) -> ReportHours:
    # Only the single-report view applies adjustments; work order stats do not.
    original = sum((to_decimal(hours) for hours in operation_hours), ZERO)
    if adjustment is None:
        return ReportHours(original=original, adjustment=None, total=original)
    delta = to_decimal(adjustment.adjustment)
    return ReportHours(original=original, adjustment=delta, total=original + delta)


def daily_report_hours(report: DailyReport) -> ReportHours:
    return report_hours(
        (operation.hours for operation in report.operations),
        report.hours_adjustment,
    )
