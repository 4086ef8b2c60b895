from .fuel import (
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
    VehicleCreate,
    VehicleRead,
    VehicleUpdate,
)
from .timesheets import (
    AttendanceRead,
    AttendanceWrite,
    ClientCreate,
    ClientRead,
    DailyReportCreate,
    DailyReportRead,
    DailyReportSummary,
    EmployeeCreate,
    EmployeeRead,
    HoursAdjustmentRead,
    HoursAdjustmentWrite,
    OperationCreate,
    OperationRead,
    ReportHoursRead,
    WorkOrderCreate,
    WorkOrderRead,
)
from .work_orders import (
    ApprovedOperationRead,
    WorkOrderDetailRead,
    WorkOrderStatsRead,
)

__all__ = [
    "ConsistencyRead",
    "DispensedRead",
    "FuelRefillCreate",
    "FuelRefillRead",
    "FuelRefillUpdate",
    "FuelStatisticsRead",
    "FuelTankLoadCreate",
    "FuelTankLoadRead",
    "PrefillRead",
    "RemainingRead",
    "VehicleCreate",
    "VehicleRead",
    "VehicleUpdate",
    "AttendanceRead",
    "AttendanceWrite",
    "ClientCreate",
    "ClientRead",
    "DailyReportCreate",
    "DailyReportRead",
    "DailyReportSummary",
    "EmployeeCreate",
    "EmployeeRead",
    "HoursAdjustmentRead",
    "HoursAdjustmentWrite",
    "OperationCreate",
    "OperationRead",
    "ReportHoursRead",
    "WorkOrderCreate",
    "WorkOrderRead",
    "ApprovedOperationRead",
    "WorkOrderDetailRead",
    "WorkOrderStatsRead",
]
