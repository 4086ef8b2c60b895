from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, model_validator

from ..models import FuelTypeEnum


class VehicleCreate(BaseModel):
    name: str = Field(min_length=1, max_length=120)
    license_plate: str = Field(min_length=1, max_length=50)
    fuel_type: FuelTypeEnum
    is_active: bool = True


class VehicleUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=120)
    license_plate: str | None = Field(default=None, min_length=1, max_length=50)
    fuel_type: FuelTypeEnum | None = None
    is_active: bool | None = None


class VehicleRead(BaseModel):
    id: int
    name: str
    license_plate: str
    fuel_type: FuelTypeEnum
    is_active: bool

    model_config = {"from_attributes": True}


class FuelTankLoadCreate(BaseModel):
    load_date: datetime
    liters: Decimal = Field(gt=0, max_digits=12, decimal_places=2)
    total_cost: Decimal | None = Field(
        default=None, ge=0, max_digits=12, decimal_places=2
    )
    supplier: str | None = None
    notes: str | None = None


class FuelTankLoadRead(BaseModel):
    id: int
    load_date: datetime
    liters: float
    total_cost: float | None
    supplier: str | None
    notes: str | None

    model_config = {"from_attributes": True}


class FuelRefillCreate(BaseModel):
    vehicle_id: int
    refill_date: datetime
    operator_id: int | None = None
    # Precision matches the columns so liters_refilled is exact once stored.
    liters_before: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    liters_after: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    km_reading: Decimal | None = Field(
        default=None, ge=0, max_digits=12, decimal_places=1
    )
    engine_hours_reading: Decimal | None = Field(
        default=None, ge=0, max_digits=12, decimal_places=2
    )
    total_cost: Decimal | None = Field(
        default=None, ge=0, max_digits=12, decimal_places=2
    )
    notes: str | None = None

    @model_validator(mode="after")
    def check_levels(self) -> "FuelRefillCreate":
        if self.liters_after < self.liters_before:
            raise ValueError("Liters after must not be lower than liters before.")
        return self


class FuelRefillUpdate(BaseModel):
    vehicle_id: int | None = None
    refill_date: datetime | None = None
    operator_id: int | None = None
    liters_before: Decimal | None = Field(
        default=None, ge=0, max_digits=12, decimal_places=2
    )
    liters_after: Decimal | None = Field(
        default=None, ge=0, max_digits=12, decimal_places=2
    )
    km_reading: Decimal | None = Field(
        default=None, ge=0, max_digits=12, decimal_places=1
    )
    engine_hours_reading: Decimal | None = Field(
        default=None, ge=0, max_digits=12, decimal_places=2
    )
    total_cost: Decimal | None = Field(
        default=None, ge=0, max_digits=12, decimal_places=2
    )
    notes: str | None = None


class FuelRefillRead(BaseModel):
    id: int
    vehicle_id: int
    refill_date: datetime
    operator_id: int | None
    liters_before: float
    liters_after: float
    liters_refilled: float
    km_reading: float | None
    engine_hours_reading: float | None
    total_cost: float | None
    notes: str | None

    model_config = {"from_attributes": True}


class RemainingRead(BaseModel):
    remaining: float


class RefillGapRead(BaseModel):
    refill_id: int
    expected_liters_before: float
    liters_before: float
    difference: float

    model_config = {"from_attributes": True}


class ConsistencyRead(BaseModel):
    remaining: float
    negative_balance: bool
    gaps: list[RefillGapRead]

    model_config = {"from_attributes": True}


class PrefillRead(BaseModel):
    liters_before: float | None


class DispensedRead(BaseModel):
    dispensed: float | None


class VehicleConsumptionRead(BaseModel):
    vehicle_id: int
    vehicle_name: str
    license_plate: str
    total_liters: float
    refill_count: int
    average_liters: float

    model_config = {"from_attributes": True}


class MonthlyConsumptionRead(BaseModel):
    month: str
    total_liters: float
    refill_count: int

    model_config = {"from_attributes": True}


class FuelStatisticsRead(BaseModel):
    by_vehicle: list[VehicleConsumptionRead]
    by_month: list[MonthlyConsumptionRead]

    model_config = {"from_attributes": True}
