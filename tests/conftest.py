"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from app import create_app
from services.catalog import new_product_cache


class FakeClock:
    """Manually advanced clock, in seconds."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def product_cache(clock):
    return new_product_cache(clock=clock)


@pytest.fixture
def client(product_cache):
    return TestClient(create_app(product_cache=product_cache))
