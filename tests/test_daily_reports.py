import pytest
from sqlalchemy import func, select

from worklog.models import DailyReport, HoursAdjustment, Operation


def _payload(setup, date="2026-03-02", **operation):
    entry = {
        "client_id": setup["client"].id,
        "work_order_id": setup["work_order"].id,
        "work_types": ["Cut"],
        "materials": ["Steel"],
        "hours": "4",
        "notes": "Roof frame",
    }
    entry.update(operation)
    return {
        "employee_id": setup["employee"].id,
        "date": date,
        "operations": [entry],
    }


def test_create_report_starts_pending(client, timesheet_setup, headers):
    response = client.post(
        "/daily-reports", json=_payload(timesheet_setup), headers=headers
    )

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "Pending"
    assert body["date"] == "2026-03-02"
    assert body["employee_name"] == "Mario Rossi"
    assert body["hours"] == {"original": 4, "adjustment": None, "total": 4}
    assert body["operations"][0]["work_types"] == ["Cut"]


def test_duplicate_report_for_same_day_is_conflict(client, timesheet_setup, headers):
    first = client.post("/daily-reports", json=_payload(timesheet_setup), headers=headers)
    second = client.post("/daily-reports", json=_payload(timesheet_setup), headers=headers)

    assert first.status_code == 201
    assert second.status_code == 409


@pytest.mark.parametrize(
    "operation, status_code",
    [
        ({"hours": "-1"}, 422),
        ({"hours": "25"}, 422),
        ({"hours": "1.255"}, 422),
        ({"photos": [f"photo-{index}.jpg" for index in range(6)]}, 422),
        ({"work_types": ["Paint"]}, 400),
        ({"materials": ["Glass"]}, 400),
        ({"work_order_id": 999}, 404),
    ],
)
def test_invalid_operations_are_rejected(
    client, timesheet_setup, headers, operation, status_code
):
    response = client.post(
        "/daily-reports", json=_payload(timesheet_setup, **operation), headers=headers
    )

    assert response.status_code == status_code


def test_work_order_must_belong_to_client(client, db_session, timesheet_setup, headers):
    other = client.post("/clients", json={"name": "Northside Farms"}, headers=headers)
    assert other.status_code == 201

    response = client.post(
        "/daily-reports",
        json=_payload(timesheet_setup, client_id=other.json()["id"]),
        headers=headers,
    )

    assert response.status_code == 400


def test_approve_is_idempotent(client, timesheet_setup, headers):
    created = client.post(
        "/daily-reports", json=_payload(timesheet_setup), headers=headers
    ).json()

    first = client.patch(f"/daily-reports/{created['id']}/approve", headers=headers)
    second = client.patch(f"/daily-reports/{created['id']}/approve", headers=headers)

    assert first.status_code == 200
    assert first.json()["status"] == "Approved"
    assert second.json()["status"] == "Approved"


def test_list_filters_by_status_and_range(client, timesheet_setup, headers):
    first = client.post(
        "/daily-reports", json=_payload(timesheet_setup, "2026-03-02"), headers=headers
    ).json()
    client.post("/daily-reports", json=_payload(timesheet_setup, "2026-03-05"), headers=headers)
    client.patch(f"/daily-reports/{first['id']}/approve", headers=headers)

    approved = client.get(
        "/daily-reports", params={"status": "Approved"}, headers=headers
    ).json()
    in_range = client.get(
        "/daily-reports",
        params={"from_date": "2026-03-03", "to_date": "2026-03-31"},
        headers=headers,
    ).json()

    assert [report["id"] for report in approved] == [first["id"]]
    assert [report["date"] for report in in_range] == ["2026-03-05"]


def test_hours_adjustment_changes_report_total(client, timesheet_setup, headers):
    created = client.post(
        "/daily-reports", json=_payload(timesheet_setup, hours="7.5"), headers=headers
    ).json()

    response = client.put(
        f"/daily-reports/{created['id']}/hours-adjustment",
        json={
            "adjustment": "-0.5",
            "reason": "Lunch break not logged",
            "created_by": timesheet_setup["admin"].id,
        },
        headers=headers,
    )
    assert response.status_code == 200
    assert response.json()["adjustment"] == -0.5

    report = client.get(f"/daily-reports/{created['id']}", headers=headers).json()
    assert report["hours"] == {"original": 7.5, "adjustment": -0.5, "total": 7}
    assert report["hours_adjustment"]["reason"] == "Lunch break not logged"

    updated = client.put(
        f"/daily-reports/{created['id']}/hours-adjustment",
        json={"adjustment": "1"},
        headers=headers,
    )
    assert updated.json()["id"] == response.json()["id"]
    report = client.get(f"/daily-reports/{created['id']}", headers=headers).json()
    assert report["hours"]["total"] == 8.5

    deleted = client.delete(
        f"/daily-reports/{created['id']}/hours-adjustment", headers=headers
    )
    assert deleted.status_code == 204
    report = client.get(f"/daily-reports/{created['id']}", headers=headers).json()
    assert report["hours"] == {"original": 7.5, "adjustment": None, "total": 7.5}
    assert report["hours_adjustment"] is None

    missing = client.delete(
        f"/daily-reports/{created['id']}/hours-adjustment", headers=headers
    )
    assert missing.status_code == 404


def test_zero_adjustment_is_rejected(client, timesheet_setup, headers):
    created = client.post(
        "/daily-reports", json=_payload(timesheet_setup), headers=headers
    ).json()

    response = client.put(
        f"/daily-reports/{created['id']}/hours-adjustment",
        json={"adjustment": "0"},
        headers=headers,
    )

    assert response.status_code == 422


def test_delete_report_removes_operations_and_adjustment(
    client, db_session, timesheet_setup, headers
):
    created = client.post(
        "/daily-reports", json=_payload(timesheet_setup), headers=headers
    ).json()
    client.put(
        f"/daily-reports/{created['id']}/hours-adjustment",
        json={"adjustment": "2"},
        headers=headers,
    )

    response = client.delete(f"/daily-reports/{created['id']}", headers=headers)

    assert response.status_code == 204
    assert db_session.get(DailyReport, created["id"]) is None
    assert db_session.scalar(select(func.count()).select_from(Operation)) == 0
    assert db_session.scalar(select(func.count()).select_from(HoursAdjustment)) == 0


def test_reports_are_isolated_per_organization(
    client, timesheet_setup, other_organization, headers
):
    created = client.post(
        "/daily-reports", json=_payload(timesheet_setup), headers=headers
    ).json()
    foreign = {"X-Organization-Id": str(other_organization.id)}

    assert client.get(f"/daily-reports/{created['id']}", headers=foreign).status_code == 404
    assert client.get("/daily-reports", headers=foreign).json() == []
    assert (
        client.patch(f"/daily-reports/{created['id']}/approve", headers=foreign).status_code
        == 404
    )


@pytest.mark.parametrize("adjustment", ["0.001", "-0.004", "12345.5"])
def test_adjustment_outside_stored_precision_is_rejected(
    client, db_session, timesheet_setup, headers, adjustment
):
    created = client.post(
        "/daily-reports", json=_payload(timesheet_setup), headers=headers
    ).json()

    response = client.put(
        f"/daily-reports/{created['id']}/hours-adjustment",
        json={"adjustment": adjustment},
        headers=headers,
    )

    assert response.status_code == 422
    assert db_session.scalar(select(func.count()).select_from(HoursAdjustment)) == 0


def test_duplicate_report_caught_by_constraint_is_conflict(
    client, timesheet_setup, headers, monkeypatch
):
    # Simulates two requests passing the existence check at the same time.
    monkeypatch.setattr(
        "worklog.routes.daily_reports._ensure_report_free", lambda *args: None
    )

    first = client.post("/daily-reports", json=_payload(timesheet_setup), headers=headers)
    second = client.post("/daily-reports", json=_payload(timesheet_setup), headers=headers)

    assert first.status_code == 201
    assert second.status_code == 409
    assert second.json()["detail"] == (
        "A daily report already exists for this employee and date."
    )
