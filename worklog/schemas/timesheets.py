from datetime import date as date_type
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from ..models import AttendanceStatusEnum, ReportStatusEnum, RoleEnum

MAX_PHOTOS = 5


class EmployeeCreate(BaseModel):
    username: str = Field(min_length=3, max_length=150)
    full_name: str = Field(min_length=2, max_length=255)
    role: RoleEnum = RoleEnum.EMPLOYEE


class EmployeeRead(BaseModel):
    id: int
    username: str
    full_name: str
    role: RoleEnum
    is_active: bool

    model_config = {"from_attributes": True}


class ClientCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None


class ClientRead(BaseModel):
    id: int
    name: str
    description: str | None

    model_config = {"from_attributes": True}


class WorkOrderCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    is_active: bool = True
    allowed_work_types: list[str] = Field(default_factory=list)
    allowed_materials: list[str] = Field(default_factory=list)


class WorkOrderRead(BaseModel):
    id: int
    client_id: int
    name: str
    description: str | None
    is_active: bool
    allowed_work_types: list[str]
    allowed_materials: list[str]

    model_config = {"from_attributes": True}


class OperationCreate(BaseModel):
    client_id: int
    work_order_id: int | None = None
    work_types: list[str] = Field(default_factory=list)
    materials: list[str] = Field(default_factory=list)
    hours: Decimal = Field(ge=0, le=24, decimal_places=2)
    notes: str | None = None
    photos: list[str] = Field(default_factory=list, max_length=MAX_PHOTOS)


class OperationRead(BaseModel):
    id: int
    client_id: int
    work_order_id: int | None
    work_types: list[str]
    materials: list[str]
    hours: float
    notes: str | None
    photos: list[str]

    model_config = {"from_attributes": True}


class DailyReportCreate(BaseModel):
    employee_id: int
    date: date_type
    operations: list[OperationCreate] = Field(default_factory=list)


class HoursAdjustmentWrite(BaseModel):
    adjustment: Decimal = Field(max_digits=6, decimal_places=2)
    reason: str | None = None
    created_by: int | None = None

    @field_validator("adjustment")
    @classmethod
    def check_not_zero(cls, value: Decimal) -> Decimal:
        if value == 0:
            raise ValueError("Adjustment cannot be zero.")
        return value


class HoursAdjustmentRead(BaseModel):
    id: int
    daily_report_id: int
    adjustment: float
    reason: str | None
    created_by: int | None

    model_config = {"from_attributes": True}


class ReportHoursRead(BaseModel):
    original: float
    adjustment: float | None
    total: float

    model_config = {"from_attributes": True}


class DailyReportSummary(BaseModel):
    id: int
    employee_id: int
    date: str
    status: ReportStatusEnum

    model_config = {"from_attributes": True}


class DailyReportRead(DailyReportSummary):
    employee_name: str
    operations: list[OperationRead]
    hours: ReportHoursRead
    hours_adjustment: HoursAdjustmentRead | None


class AttendanceWrite(BaseModel):
    employee_id: int
    date: date_type
    status: AttendanceStatusEnum
    notes: str | None = None


class AttendanceRead(BaseModel):
    id: int
    employee_id: int
    date: str
    status: AttendanceStatusEnum
    notes: str | None

    model_config = {"from_attributes": True}
