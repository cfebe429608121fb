"""Orders Pack Routes: open a pack and read it back.

Invariants:
    - Opening answers 201 and references the pack from its owner
    - Unknown owner or past expiration answers 400 GENERIC_ERROR
    - expirationDate without a timezone offset is a validation error
    - Lookup embeds the pack's orders in insertion order
"""

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from uuid import UUID, uuid4


def _pack_body(owner, **overrides):
    body = {
        "name": "Team dinner",
        "owner_id": str(owner.id),
        "expirationDate": (
            datetime.now(timezone.utc) + timedelta(hours=3)
        ).isoformat(),
    }
    body.update(overrides)
    return body


async def test_open_orders_pack_returns_201(client, seed_user):
    res = await client.post("/api/v1/orders-packs", json=_pack_body(seed_user))

    assert res.status_code == 201
    data = res.json()
    assert data["name"] == "Team dinner"
    assert data["owner_id"] == str(seed_user.id)
    assert data["orders"] == []
    assert UUID(data["id"])

    owner = (await client.get(f"/api/v1/users/{seed_user.id}")).json()
    assert owner["ordersPacks"] == [data["id"]]


async def test_open_orders_pack_for_unknown_owner_is_rejected(client):
    res = await client.post(
        "/api/v1/orders-packs",
        json=_pack_body(SimpleNamespace(id=uuid4())),
    )
    assert res.status_code == 400
    assert res.json()["code"] == "GENERIC_ERROR"


async def test_open_orders_pack_in_the_past_is_rejected(client, seed_user):
    past = (datetime.now(timezone.utc) - timedelta(minutes=5)).isoformat()
    res = await client.post(
        "/api/v1/orders-packs", json=_pack_body(seed_user, expirationDate=past),
    )
    assert res.status_code == 400
    assert res.json()["code"] == "GENERIC_ERROR"


async def test_naive_expiration_date_is_validation_error(client, seed_user):
    res = await client.post(
        "/api/v1/orders-packs",
        json=_pack_body(seed_user, expirationDate="2030-01-01T12:00:00"),
    )
    assert res.status_code == 400
    assert res.json()["code"] == "VALIDATION_ERROR"


async def test_get_orders_pack_embeds_orders(client, seed_order, open_pack):
    res = await client.get(f"/api/v1/orders-packs/{open_pack.id}")

    assert res.status_code == 200
    data = res.json()
    assert data["id"] == str(open_pack.id)
    assert [o["id"] for o in data["orders"]] == [str(seed_order.id)]
    assert data["orders"][0]["description"] == "Milanesa napolitana"


async def test_get_unknown_orders_pack_is_404(client):
    res = await client.get(f"/api/v1/orders-packs/{uuid4()}")
    assert res.status_code == 404
    assert res.json()["code"] == "RESOURCE_NOT_FOUND"
