def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_employee_usernames_are_unique_per_organization(
    client, headers, other_organization
):
    payload = {"username": "mrossi", "full_name": "Mario Rossi"}

    first = client.post("/employees", json=payload, headers=headers)
    duplicate = client.post("/employees", json=payload, headers=headers)
    elsewhere = client.post(
        "/employees",
        json=payload,
        headers={"X-Organization-Id": str(other_organization.id)},
    )

    assert first.status_code == 201
    assert first.json()["role"] == "employee"
    assert duplicate.status_code == 409
    assert elsewhere.status_code == 201


def test_client_work_orders(client, headers):
    customer = client.post("/clients", json={"name": "City Council"}, headers=headers)
    assert customer.status_code == 201
    duplicate = client.post("/clients", json={"name": "City Council"}, headers=headers)
    assert duplicate.status_code == 409

    client_id = customer.json()["id"]
    client.post(
        f"/clients/{client_id}/work-orders",
        json={"name": "Road signage", "allowed_work_types": ["Install"]},
        headers=headers,
    )
    client.post(
        f"/clients/{client_id}/work-orders",
        json={"name": "Park maintenance", "is_active": False},
        headers=headers,
    )

    all_orders = client.get(f"/clients/{client_id}/work-orders", headers=headers).json()
    active = client.get(
        f"/clients/{client_id}/work-orders", params={"active_only": True}, headers=headers
    ).json()
    stats = client.get("/work-orders/stats", headers=headers).json()

    assert [order["name"] for order in all_orders] == ["Park maintenance", "Road signage"]
    assert [order["name"] for order in active] == ["Road signage"]
    assert all_orders[1]["allowed_work_types"] == ["Install"]
    assert len(stats) == 2
    assert all(entry["total_operations"] == 0 for entry in stats)


def test_missing_organization_header_is_rejected(client):
    assert client.get("/vehicles").status_code == 422
