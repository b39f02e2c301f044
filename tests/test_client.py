import asyncio
import json

import httpx
import pytest

from sdk.techlab import ApiError, ProductsClient


def test_create_sends_json_payload(recorder, recorded_client):
    asyncio.run(recorded_client.create_product("Widget", 9.99, "toys"))

    (request,) = recorder.requests
    assert request.method == "POST"
    assert str(request.url) == "https://fakestoreapi.com/products"
    assert request.headers["content-type"] == "application/json"
    assert json.loads(request.content) == {
        "title": "Widget",
        "price": 9.99,
        "description": "Producto Widget de la categoría toys",
        "image": "https://fakestoreapi.com/img/placeholder.jpg",
        "category": "toys",
    }


def test_paths_follow_base_url():
    seen = []

    def handler(request):
        seen.append((request.method, str(request.url)))
        return httpx.Response(200, json={})

    c = ProductsClient(base_url="http://localhost:8085/", transport=httpx.MockTransport(handler))
    asyncio.run(c.list_products())
    asyncio.run(c.get_product(5))
    asyncio.run(c.delete_product(7))
    assert seen == [
        ("GET", "http://localhost:8085/products"),
        ("GET", "http://localhost:8085/products/5"),
        ("DELETE", "http://localhost:8085/products/7"),
    ]
    assert c.placeholder_image == "http://localhost:8085/img/placeholder.jpg"


def test_non_2xx_raises_with_status():
    c = ProductsClient(transport=httpx.MockTransport(lambda r: httpx.Response(404, json={})))
    with pytest.raises(ApiError) as exc:
        asyncio.run(c.get_product(99))
    assert exc.value.status_code == 404
    assert str(exc.value) == "HTTP Error: 404 - Not Found"


def test_follows_redirect_to_final_response():
    seen = []

    def handler(request):
        seen.append(str(request.url))
        if len(seen) == 1:
            return httpx.Response(301, headers={"Location": "https://fakestoreapi.com/products/5"})
        return httpx.Response(200, json={"id": 5})

    c = ProductsClient(base_url="http://fakestoreapi.com", transport=httpx.MockTransport(handler))
    assert asyncio.run(c.get_product(5)) == {"id": 5}
    assert seen == ["http://fakestoreapi.com/products/5", "https://fakestoreapi.com/products/5"]


def test_transport_failure_raises():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    c = ProductsClient(transport=httpx.MockTransport(handler))
    with pytest.raises(ApiError) as exc:
        asyncio.run(c.list_products())
    assert exc.value.status_code is None
    assert "connection refused" in str(exc.value)


def test_non_json_body_raises():
    c = ProductsClient(transport=httpx.MockTransport(lambda r: httpx.Response(200, text="<html>")))
    with pytest.raises(ApiError, match="Invalid JSON"):
        asyncio.run(c.list_products())


def test_against_fake_api(fake_api_client):
    products = asyncio.run(fake_api_client.list_products())
    assert [p["id"] for p in products] == [1, 2, 3, 4, 5]

    created = asyncio.run(fake_api_client.create_product("Widget", 9.99, "toys"))
    assert created["id"] == 6
    assert created["image"] == "http://testserver/img/placeholder.jpg"

    deleted = asyncio.run(fake_api_client.delete_product(6))
    assert deleted["title"] == "Widget"
