import pytest
from sqlalchemy import func, select

from worklog.models import AttendanceRecord


def _put(client, headers, employee, date="2026-03-02", status="Holiday", notes=None):
    return client.put(
        "/attendance",
        json={
            "employee_id": employee.id,
            "date": date,
            "status": status,
            "notes": notes,
        },
        headers=headers,
    )


def test_upsert_creates_then_updates_same_record(
    client, db_session, timesheet_setup, headers
):
    employee = timesheet_setup["employee"]

    created = _put(client, headers, employee, status="Holiday")
    updated = _put(client, headers, employee, status="Leave", notes="Doctor visit")

    assert created.status_code == 200
    assert created.json()["status"] == "Holiday"
    assert updated.json()["id"] == created.json()["id"]
    assert updated.json()["status"] == "Leave"
    assert updated.json()["notes"] == "Doctor visit"
    assert db_session.scalar(select(func.count()).select_from(AttendanceRecord)) == 1


def test_upsert_rejects_unknown_status(client, timesheet_setup, headers):
    response = _put(client, headers, timesheet_setup["employee"], status="Sick")

    assert response.status_code == 422


def test_upsert_rejects_employee_of_other_organization(
    client, timesheet_setup, other_organization
):
    response = _put(
        client,
        {"X-Organization-Id": str(other_organization.id)},
        timesheet_setup["employee"],
    )

    assert response.status_code == 404


def test_list_requires_both_dates(client, headers):
    response = client.get(
        "/attendance", params={"from_date": "2026-03-01"}, headers=headers
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "from_date and to_date are required."


def test_list_filters_by_date_range(client, timesheet_setup, headers):
    employee = timesheet_setup["employee"]
    second = timesheet_setup["second_employee"]
    _put(client, headers, employee, date="2026-02-28")
    _put(client, headers, employee, date="2026-03-02", status="Absent")
    _put(client, headers, second, date="2026-03-31", status="Present")

    response = client.get(
        "/attendance",
        params={"from_date": "2026-03-01", "to_date": "2026-03-31"},
        headers=headers,
    )

    assert response.status_code == 200
    assert [(item["date"], item["status"]) for item in response.json()] == [
        ("2026-03-02", "Absent"),
        ("2026-03-31", "Present"),
    ]


def test_delete_record(client, timesheet_setup, headers):
    employee = timesheet_setup["employee"]
    _put(client, headers, employee)

    deleted = client.delete(f"/attendance/{employee.id}/2026-03-02", headers=headers)
    missing = client.delete(f"/attendance/{employee.id}/2026-03-02", headers=headers)

    assert deleted.status_code == 204
    assert missing.status_code == 404


@pytest.mark.parametrize("bad_date", ["02-03-2026", "2026-13-01"])
def test_delete_rejects_malformed_date(client, timesheet_setup, headers, bad_date):
    employee = timesheet_setup["employee"]

    response = client.delete(f"/attendance/{employee.id}/{bad_date}", headers=headers)

    assert response.status_code == 422
