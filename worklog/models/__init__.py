from .attendance_record import AttendanceRecord, AttendanceStatusEnum
from .base import Base
from .client import Client
from .daily_report import DailyReport, ReportStatusEnum
from .fuel_refill import FuelRefill
from .fuel_tank_load import FuelTankLoad
from .hours_adjustment import HoursAdjustment
from .operation import Operation
from .organization import Organization
from .user import RoleEnum, User
from .vehicle import FuelTypeEnum, Vehicle
from .work_order import WorkOrder

__all__ = [
    "AttendanceRecord",
    "AttendanceStatusEnum",
    "Base",
    "Client",
    "DailyReport",
    "ReportStatusEnum",
    "FuelRefill",
    "FuelTankLoad",
    "HoursAdjustment",
    "Operation",
    "Organization",
    "RoleEnum",
    "User",
    "FuelTypeEnum",
    "Vehicle",
    "WorkOrder",
]
