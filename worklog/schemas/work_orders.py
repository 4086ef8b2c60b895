from pydantic import BaseModel


class WorkOrderStatsRead(BaseModel):
    work_order_id: int
    work_order_name: str
    client_id: int
    is_active: bool
    total_operations: int
    total_hours: float
    last_activity: str | None

    model_config = {"from_attributes": True}


class ApprovedOperationRead(BaseModel):
    operation_id: int
    daily_report_id: int
    work_order_id: int | None
    client_id: int
    client_name: str | None
    employee_id: int
    employee_name: str
    date: str
    hours: float
    work_types: list[str]
    materials: list[str]
    notes: str | None
    photos: list[str]

    model_config = {"from_attributes": True}


class DetailRowRead(BaseModel):
    date: str
    employee_id: int
    employee_name: str
    hours: float
    work_types: list[str]
    materials: list[str]
    notes: str
    operation_count: int

    model_config = {"from_attributes": True}


class WorkOrderDetailRead(BaseModel):
    work_order_id: int
    rows: list[DetailRowRead]
    total_hours: float
    day_count: int
    employee_count: int

    model_config = {"from_attributes": True}
