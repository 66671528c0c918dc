"""Position Routes — HTTP behavior through FastAPI with the test DB.

Tests cover:
    - POST under an existing company (201) or unknown company (404)
    - GET by id, 400 for non-positive ids, 404 for missing
    - PUT and DELETE report affected rows
"""


def _payload(company_id: int, **overrides) -> dict:
    data = {
        "description": "Gerente",
        "hierarchy": 2,
        "max_amount": 5000,
        "company_id": company_id,
    }
    data.update(overrides)
    return data


async def test_create_position(client, seed_company):
    res = await client.post(
        "/api/v1/positions", json=_payload(seed_company.id),
    )
    assert res.status_code == 201
    assert res.json() == {"affected_rows": 1}


async def test_create_position_unknown_company_returns_404(client):
    res = await client.post("/api/v1/positions", json=_payload(999))
    assert res.status_code == 404
    assert res.json()["error"]["context"]["resource_type"] == "Company"


async def test_create_position_empty_description_returns_400(
    client, seed_company,
):
    res = await client.post(
        "/api/v1/positions", json=_payload(seed_company.id, description=""),
    )
    assert res.status_code == 400


async def test_get_position(client, seed_position):
    res = await client.get(f"/api/v1/positions/{seed_position.id}")
    assert res.status_code == 200
    body = res.json()
    assert body["description"] == "Lider"
    assert body["max_amount"] == 1000.0


async def test_get_position_negative_id_returns_400(client):
    res = await client.get("/api/v1/positions/-1")
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "BAD_REQUEST"


async def test_get_missing_position_returns_404(client):
    res = await client.get("/api/v1/positions/999")
    assert res.status_code == 404


async def test_update_position(client, seed_position):
    res = await client.put(
        f"/api/v1/positions/{seed_position.id}",
        json=_payload(seed_position.company_id, description="Jefe"),
    )
    assert res.status_code == 200
    assert res.json() == {"affected_rows": 1}

    res = await client.get(f"/api/v1/positions/{seed_position.id}")
    assert res.json()["description"] == "Jefe"


async def test_delete_position(client, seed_position):
    res = await client.delete(f"/api/v1/positions/{seed_position.id}")
    assert res.status_code == 200
    assert res.json() == {"affected_rows": 1}

    res = await client.get(f"/api/v1/positions/{seed_position.id}")
    assert res.status_code == 404


async def test_delete_missing_position_returns_404(client):
    res = await client.delete("/api/v1/positions/999")
    assert res.status_code == 404
