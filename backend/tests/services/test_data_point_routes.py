"""Data Point Routes — HTTP contract of /dataPoints, /providers, /settings and health.

Invariants:
    - POST returns 201 with camelCase record and embedded provider
    - GET lists most recent first
    - PUT accepts the full draft record (id, date, provider object) and replaces fields
    - DELETE returns 204; unknown ids return 404 with the error envelope
    - Bad provider references return 400/404 domain errors, never 5xx
    - Non-finite prices and oversize text fields are 400s, never storage errors
"""

from datetime import datetime, timezone

import pytest

BASE = "/api/v1"


def _body(**overrides) -> dict:
    body = {
        "providerId": 7,
        "assetClass": "Growth",
        "quarter": "Q3 2024",
        "minPrice": 1.5,
        "maxPrice": 3.0,
    }
    body.update(overrides)
    return body


async def _create(client, **overrides) -> dict:
    res = await client.post(f"{BASE}/dataPoints", json=_body(**overrides))
    assert res.status_code == 201, res.text
    return res.json()


async def test_post_creates_record_with_embedded_provider(client, seed_providers):
    before = datetime.now(timezone.utc).replace(tzinfo=None)
    created = await _create(client)
    assert isinstance(created["id"], int)
    assert created["assetClass"] == "Growth"
    assert created["quarter"] == "Q3 2024"
    assert created["minPrice"] == 1.5
    assert created["maxPrice"] == 3.0
    assert created["provider"] == {"id": 7, "name": "ACME Capital"}
    stamped = datetime.fromisoformat(created["date"].replace("Z", "+00:00"))
    assert stamped.replace(tzinfo=None) >= before


async def test_get_lists_created_records_most_recent_first(client, seed_providers):
    first = await _create(client, quarter="Q1 2024")
    second = await _create(client, quarter="Q2 2024")
    res = await client.get(f"{BASE}/dataPoints")
    assert res.status_code == 200
    ids = [r["id"] for r in res.json()]
    assert ids == [second["id"], first["id"]]


async def test_post_accepts_provider_form_string(client, seed_providers):
    created = await _create(client, providerId=None, provider="8")
    assert created["provider"]["id"] == 8


async def test_post_unknown_provider_returns_404(client, seed_providers):
    res = await client.post(f"{BASE}/dataPoints", json=_body(providerId=404))
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_post_unparseable_provider_returns_400(client, seed_providers):
    res = await client.post(f"{BASE}/dataPoints", json=_body(providerId="acme"))
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_PROVIDER_REFERENCE"


async def test_post_missing_fields_returns_all_messages(client, seed_providers):
    res = await client.post(f"{BASE}/dataPoints", json={"providerId": 7})
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"] == [
        "Asset class is required",
        "Quarter is required",
        "Min price is required",
        "Max price is required",
    ]


async def test_post_non_finite_prices_return_400_and_insert_nothing(client, seed_providers):
    res = await client.post(
        f"{BASE}/dataPoints", json=_body(minPrice="nan", maxPrice="inf"),
    )
    assert res.status_code == 400
    assert res.json()["error"]["details"] == [
        "Min price must be a number",
        "Max price must be a number",
    ]
    assert (await client.get(f"{BASE}/dataPoints")).json() == []


@pytest.mark.parametrize("field,value", [
    ("quarter", "Q" * 21),
    ("assetClass", "A" * 51),
])
async def test_oversize_text_fields_return_400(client, seed_providers, field, value):
    res = await client.post(f"{BASE}/dataPoints", json=_body(**{field: value}))
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["category"] == "validation"
    assert error["details"][0]["field"].endswith(field)


async def test_put_oversize_quarter_returns_400_and_keeps_record(client, seed_providers):
    created = await _create(client)
    res = await client.put(
        f"{BASE}/dataPoints/{created['id']}", json=_body(quarter="Q" * 21),
    )
    assert res.status_code == 400
    fetched = (await client.get(f"{BASE}/dataPoints/{created['id']}")).json()
    assert fetched["quarter"] == "Q3 2024"


async def test_get_single_record(client, seed_providers):
    created = await _create(client)
    res = await client.get(f"{BASE}/dataPoints/{created['id']}")
    assert res.status_code == 200
    assert res.json()["id"] == created["id"]


async def test_put_with_full_draft_replaces_fields(client, seed_providers):
    created = await _create(client)
    draft = dict(created)
    draft.update({"provider": "8", "providerId": 8, "quarter": "Q4 2024", "maxPrice": 5})

    res = await client.put(f"{BASE}/dataPoints/{created['id']}", json=draft)
    assert res.status_code == 200, res.text
    updated = res.json()
    assert updated["id"] == created["id"]
    assert updated["provider"]["id"] == 8
    assert updated["quarter"] == "Q4 2024"
    assert updated["maxPrice"] == 5.0
    assert updated["date"] == created["date"]


async def test_put_unknown_id_returns_404(client, seed_providers):
    res = await client.put(f"{BASE}/dataPoints/999", json=_body())
    assert res.status_code == 404


async def test_delete_then_fetch_never_contains_id(client, seed_providers):
    keep = await _create(client, quarter="Q1 2024")
    drop = await _create(client, quarter="Q2 2024")

    res = await client.delete(f"{BASE}/dataPoints/{drop['id']}")
    assert res.status_code == 204

    ids = [r["id"] for r in (await client.get(f"{BASE}/dataPoints")).json()]
    assert ids == [keep["id"]]


async def test_delete_unknown_id_returns_404_and_keeps_list(client, seed_providers):
    keep = await _create(client)
    res = await client.delete(f"{BASE}/dataPoints/{keep['id'] + 50}")
    assert res.status_code == 404
    ids = [r["id"] for r in (await client.get(f"{BASE}/dataPoints")).json()]
    assert ids == [keep["id"]]


async def test_list_providers(client, seed_providers):
    res = await client.get(f"{BASE}/providers")
    assert res.status_code == 200
    assert res.json() == [
        {"id": 7, "name": "ACME Capital"},
        {"id": 8, "name": "Birch Partners"},
    ]


async def test_create_provider_and_reject_duplicate(client, seed_providers):
    res = await client.post(f"{BASE}/providers", json={"name": "Cedar Fund"})
    assert res.status_code == 201
    assert res.json()["name"] == "Cedar Fund"

    dup = await client.post(f"{BASE}/providers", json={"name": "Cedar Fund"})
    assert dup.status_code == 409


async def test_create_provider_blank_name_is_validation_error(client):
    res = await client.post(f"{BASE}/providers", json={"name": "  "})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_settings_exposes_asset_class_labels(client):
    res = await client.get(f"{BASE}/settings")
    assert res.status_code == 200
    assert list(res.json()["assetClasses"].keys()) == ["Buyout", "Growth", "Venture"]


@pytest.mark.parametrize("path,expected", [
    (f"{BASE}/health/", "healthy"),
    (f"{BASE}/health/ready", "ready"),
])
async def test_health_probes(client, path, expected):
    res = await client.get(path)
    assert res.status_code == 200
    assert res.json()["status"] == expected
