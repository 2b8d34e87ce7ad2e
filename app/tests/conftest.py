"""
Pytest configuration and shared fixtures for the vehicle catalog test suite.

This module provides:
- Environment defaults for tests (rate limiting off, plain-text logs)
- Repository and service fixtures backed by a fresh in-memory catalog
- FastAPI test client fixtures with the service dependency overridden
- Vehicle factories
"""

import os

# Must be set before the application modules are imported
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["LOG_JSON"] = "false"

import pytest
from typing import AsyncGenerator, Generator

from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from main import app
from core.db import get_vehicle_service
from models.vehicle import Vehicle, VehicleAttributes
from repositories.vehicle_repository import VehicleRepository
from services.vehicle_service import VehicleService


VALID_ATTRIBUTES = dict(
    brand="Toyota",
    model="Corolla",
    registration="ABC-1234",
    year=2020,
    color="red",
    max_speed=180,
    fuel_type="gasoline",
    transmission="automatic",
    passengers=5,
    height=1.5,
    width=1.8,
    weight=1300.0,
)


def build_vehicle(vehicle_id: int = 0, **overrides) -> Vehicle:
    """Vehicle with valid attributes; keyword arguments override single fields."""
    return Vehicle(attributes=VehicleAttributes(**{**VALID_ATTRIBUTES, **overrides}), id=vehicle_id)


def build_payload(**overrides) -> dict:
    """Request body for POST /vehicles."""
    return {**VALID_ATTRIBUTES, **overrides}


@pytest.fixture
def make_vehicle():
    return build_vehicle


@pytest.fixture
def make_payload():
    return build_payload


@pytest.fixture
def repository() -> VehicleRepository:
    """Empty in-memory repository."""
    return VehicleRepository()


@pytest.fixture
def service(repository) -> VehicleService:
    return VehicleService(repository)


@pytest.fixture
def client(repository) -> Generator[TestClient, None, None]:
    """Test client whose vehicle service runs on the `repository` fixture."""
    app.dependency_overrides[get_vehicle_service] = lambda: VehicleService(repository)

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(repository) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client with the same dependency override as `client`."""
    app.dependency_overrides[get_vehicle_service] = lambda: VehicleService(repository)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as test_client:
        yield test_client

    app.dependency_overrides.clear()
