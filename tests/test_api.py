"""Tests for the HTTP API"""
import httpx
import pytest
import pytest_asyncio

from cartshop.main import create_app


@pytest_asyncio.fixture
async def client(store):
    app = create_app(store)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.mark.asyncio
async def test_health(client):
    r = await client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_list_products(client):
    r = await client.get("/api/products")
    assert r.status_code == 200
    assert r.json()[0] == {"name": "Apple", "price": 10}


@pytest.mark.asyncio
async def test_add_and_show_cart(client):
    r = await client.post("/api/cart/add", json={"product_name": "Apple", "quantity": 3})
    assert r.status_code == 201
    r = await client.post("/api/cart/add", json={"product_name": "Apple", "quantity": 2})
    assert r.status_code == 201

    r = await client.get("/api/cart")
    assert r.json() == {
        "items": [{"product_name": "Apple", "price": 10, "quantity": 5}],
        "count": 1,
        "total": 50,
    }
    r = await client.get("/api/cart/count")
    assert r.json() == {"count": 1}


@pytest.mark.asyncio
async def test_error_mapping(client):
    r = await client.post("/api/cart/add", json={"product_name": "Apple", "quantity": 0})
    assert r.status_code == 400
    assert r.json() == {"detail": "invalid quantity"}

    r = await client.post("/api/cart/add", json={"product_name": "Durian", "quantity": 1})
    assert r.status_code == 404

    r = await client.delete("/api/cart/items/Banana")
    assert r.status_code == 404
    assert r.json() == {"detail": "product not found"}


@pytest.mark.asyncio
async def test_remove_and_clear(client):
    await client.post("/api/cart/add", json={"product_name": "Apple", "quantity": 1})
    await client.post("/api/cart/add", json={"product_name": "Banana", "quantity": 1})

    r = await client.delete("/api/cart/items/Apple")
    assert r.status_code == 204
    r = await client.get("/api/cart")
    assert [it["product_name"] for it in r.json()["items"]] == ["Banana"]

    r = await client.delete("/api/cart")
    assert r.status_code == 204
    r = await client.get("/api/cart")
    assert r.json()["items"] == []


@pytest.mark.asyncio
async def test_pay(client):
    await client.post("/api/cart/add", json={"product_name": "Apple", "quantity": 5})

    r = await client.post("/api/checkout/pay", json={"money": 40})
    assert r.status_code == 402
    assert r.json() == {"detail": "money is not enough"}

    r = await client.post("/api/checkout/pay", json={"money": 60})
    assert r.status_code == 200
    assert r.json() == {
        "product_list": [{"product_name": "Apple", "price": 10, "quantity": 5}],
        "total_price": 50,
        "money_paid": 60,
        "change": 10,
    }
    r = await client.get("/api/cart")
    assert r.json()["count"] == 0


@pytest.mark.asyncio
async def test_pay_with_failed_reset(client, store):
    await client.post("/api/cart/add", json={"product_name": "Banana", "quantity": 2})
    store.fail_saves = True

    r = await client.post("/api/checkout/pay", json={"money": 10})

    assert r.status_code == 503
    body = r.json()
    assert body["payment"]["total_price"] == 10
    assert body["payment"]["change"] == 0


def test_build_store_rejects_unknown_backend():
    from cartshop.main import build_store
    from cartshop.store import InMemoryCartStore

    assert isinstance(build_store("memory"), InMemoryCartStore)
    with pytest.raises(ValueError):
        build_store("redis")


@pytest.mark.asyncio
async def test_remove_product_named_like_a_route(client, store):
    await store.add_product("clear", 1)
    await store.add_product("Tea/Green", 7)
    for name in ("clear", "Apple", "Tea/Green"):
        await client.post("/api/cart/add", json={"product_name": name, "quantity": 1})

    r = await client.delete("/api/cart/items/clear")
    assert r.status_code == 204
    r = await client.delete("/api/cart/items/Tea/Green")
    assert r.status_code == 204

    r = await client.get("/api/cart")
    assert [it["product_name"] for it in r.json()["items"]] == ["Apple"]


@pytest.mark.asyncio
async def test_memory_backend_serves_demo_catalog():
    from cartshop.main import build_store

    app = create_app(build_store("memory"))
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        r = await c.get("/api/products")
        assert {"name": "Apple", "price": 10} in r.json()

        r = await c.post("/api/cart/add", json={"product_name": "Apple", "quantity": 2})
        assert r.status_code == 201
        r = await c.post("/api/checkout/pay", json={"money": 25})
        assert r.status_code == 200
        assert r.json()["change"] == 5
