from datetime import datetime
from decimal import Decimal
from types import SimpleNamespace

import pytest

from worklog.models import FuelRefill, FuelTypeEnum, Vehicle
from worklog.services import fuel_statistics


def _refill(vehicle_id, when, liters):
    return SimpleNamespace(
        vehicle_id=vehicle_id, refill_date=when, liters_refilled=Decimal(liters)
    )


def _vehicles():
    return [
        SimpleNamespace(id=1, name="Truck", license_plate="TR001AA"),
        SimpleNamespace(id=2, name="Excavator", license_plate="EX001AA"),
        SimpleNamespace(id=3, name="Van", license_plate="VN001AA"),
    ]


def test_project_statistics_groups_by_vehicle_and_month():
    refills = [
        _refill(1, datetime(2026, 1, 10), "100"),
        _refill(1, datetime(2026, 2, 3), "50"),
        _refill(2, datetime(2026, 1, 20), "40.5"),
    ]

    stats = fuel_statistics.project_statistics(refills, _vehicles())

    assert [entry.vehicle_name for entry in stats.by_vehicle] == ["Excavator", "Truck"]
    truck = stats.by_vehicle[1]
    assert truck.total_liters == Decimal("150")
    assert truck.refill_count == 2
    assert truck.average_liters == Decimal("75.00")
    assert [(entry.month, entry.total_liters) for entry in stats.by_month] == [
        ("01", Decimal("140.5")),
        ("02", Decimal("50")),
    ]


def test_vehicle_without_refills_is_omitted():
    stats = fuel_statistics.project_statistics(
        [_refill(1, datetime(2026, 1, 10), "30")], _vehicles()
    )

    assert [entry.vehicle_id for entry in stats.by_vehicle] == [1]


def test_average_guard_and_rounding():
    assert fuel_statistics.average_per_refill(Decimal("0"), 0) == Decimal("0")
    assert fuel_statistics.average_per_refill(Decimal("100"), 3) == Decimal("33.33")
    assert fuel_statistics.average_per_refill(Decimal("0.05"), 2) == Decimal("0.03")


def test_refill_for_unknown_vehicle_is_labelled():
    stats = fuel_statistics.project_statistics(
        [_refill(42, datetime(2026, 1, 10), "30")], _vehicles()
    )

    assert stats.by_vehicle[0].vehicle_name == "Unknown"


@pytest.mark.parametrize(
    "value, expected",
    [("3", "03"), ("03", "03"), (12, "12"), (None, None), ("", None)],
)
def test_parse_month(value, expected):
    assert fuel_statistics.parse_month(value) == expected


@pytest.mark.parametrize("value", ["0", "13", "march"])
def test_parse_month_rejects_invalid(value):
    with pytest.raises(ValueError):
        fuel_statistics.parse_month(value)


def test_filter_refills_by_year_and_month():
    refills = [
        _refill(1, datetime(2025, 3, 10), "10"),
        _refill(1, datetime(2026, 3, 10), "20"),
        _refill(1, datetime(2026, 4, 10), "30"),
    ]

    selected = fuel_statistics.filter_refills(refills, 2026, "03")

    assert [refill.liters_refilled for refill in selected] == [Decimal("20")]


def test_statistics_endpoint(client, db_session, organization, other_organization, headers):
    truck = Vehicle(
        organization_id=organization.id,
        name="Truck",
        license_plate="TR001AA",
        fuel_type=FuelTypeEnum.DIESEL,
    )
    foreign = Vehicle(
        organization_id=other_organization.id,
        name="Foreign",
        license_plate="FR001AA",
        fuel_type=FuelTypeEnum.GASOLINE,
    )
    db_session.add_all([truck, foreign])
    db_session.flush()
    for vehicle, when, liters in [
        (truck, datetime(2026, 3, 1), "60"),
        (truck, datetime(2026, 3, 15), "40"),
        (truck, datetime(2026, 4, 2), "25"),
        (foreign, datetime(2026, 3, 1), "999"),
    ]:
        db_session.add(
            FuelRefill(
                organization_id=vehicle.organization_id,
                vehicle_id=vehicle.id,
                refill_date=when,
                liters_before=Decimal("0"),
                liters_after=Decimal(liters),
                liters_refilled=Decimal(liters),
            )
        )
    db_session.commit()

    response = client.get(
        "/fuel-refills/statistics", params={"year": 2026, "month": "3"}, headers=headers
    )

    assert response.status_code == 200
    body = response.json()
    assert body["by_vehicle"] == [
        {
            "vehicle_id": truck.id,
            "vehicle_name": "Truck",
            "license_plate": "TR001AA",
            "total_liters": 100,
            "refill_count": 2,
            "average_liters": 50,
        }
    ]
    assert body["by_month"] == [{"month": "03", "total_liters": 100, "refill_count": 2}]

    response = client.get("/fuel-refills/statistics", headers=headers)
    assert [entry["month"] for entry in response.json()["by_month"]] == ["03", "04"]


def test_statistics_endpoint_rejects_invalid_month(client, headers):
    response = client.get(
        "/fuel-refills/statistics", params={"month": "13"}, headers=headers
    )
    assert response.status_code == 422
