"""Tests for the product list endpoint."""

import pytest

import routes.products
from services.catalog import PRODUCT_CACHE_KEY, get_catalog


EXPECTED = [
    {"id": 1, "name": "Laptop", "price": 1200.5, "stock": 25, "category": {"id": 101, "name": "Electronics"}},
    {"id": 2, "name": "Headphones", "price": 50.0, "stock": 100, "category": {"id": 102, "name": "Accessories"}},
    {"id": 3, "name": "Wireless Mouse", "price": 25.99, "stock": 150, "category": {"id": 102, "name": "Accessories"}},
    {"id": 4, "name": "USB-C Hub", "price": 45.0, "stock": 75, "category": {"id": 101, "name": "Electronics"}},
]


class TestProductListRoute:
    def test_returns_catalog(self, client):
        response = client.get("/api/productlist")
        assert response.status_code == 200
        assert response.json() == EXPECTED

    def test_populates_cache(self, client, product_cache):
        assert product_cache.entry(PRODUCT_CACHE_KEY) is None
        client.get("/api/productlist")
        assert product_cache.entry(PRODUCT_CACHE_KEY) is not None

    def test_served_from_cache_within_ttl(self, client, product_cache, clock):
        client.get("/api/productlist")
        entry = product_cache.entry(PRODUCT_CACHE_KEY)

        clock.advance(299)
        response = client.get("/api/productlist")

        assert response.json() == EXPECTED
        assert product_cache.entry(PRODUCT_CACHE_KEY) is entry

    def test_regenerated_after_ttl(self, client, product_cache, clock):
        client.get("/api/productlist")
        clock.advance(301)
        response = client.get("/api/productlist")

        assert response.json() == EXPECTED
        assert product_cache.entry(PRODUCT_CACHE_KEY).created_at == 301

    def test_generation_error_maps_to_500(self, client, monkeypatch):
        def broken():
            raise RuntimeError("source offline")

        monkeypatch.setattr(routes.products, "get_catalog", lambda cache: get_catalog(cache, broken))

        response = client.get("/api/productlist")
        assert response.status_code == 500
        assert response.json() == {"error": "Error retrieving product list", "detail": "source offline"}

    def test_cors_allows_any_origin(self, client):
        response = client.get("/api/productlist", headers={"Origin": "https://shop.example.com"})
        assert response.headers["access-control-allow-origin"] == "*"

    def test_security_headers(self, client):
        response = client.get("/api/productlist")
        assert response.headers["x-content-type-options"] == "nosniff"
        assert response.headers["x-frame-options"] == "DENY"


class TestOtherRoutes:
    def test_ready(self, client):
        response = client.get("/ready")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"
        assert response.json()["service"] == "product-catalog-api"

    def test_weather_forecast(self, client):
        response = client.get("/weatherforecast")
        assert response.status_code == 200
        forecast = response.json()
        assert len(forecast) == 5
        for day in forecast:
            assert set(day) == {"date", "temperatureC", "temperatureF", "summary"}
            assert -20 <= day["temperatureC"] < 55
            assert day["temperatureF"] == 32 + int(day["temperatureC"] / 0.5556)

    @pytest.mark.parametrize("path", ["/docs", "/openapi.json"])
    def test_docs_available_locally(self, client, path):
        assert client.get(path).status_code == 200
