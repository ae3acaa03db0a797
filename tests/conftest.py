"""
Pytest configuration and fixtures
"""

import pytest
from fastapi.testclient import TestClient

from api.config import Settings
from api.main import create_app
from pc_catalog_core.infra.catalog_source import (
    ComponentRecord,
    InMemoryCatalogSource,
    get_reference_catalog,
)


@pytest.fixture
def reference_catalog():
    """The 12-record reference catalog"""
    return get_reference_catalog()


@pytest.fixture
def components(reference_catalog):
    """Reference catalog records as a list"""
    return list(reference_catalog.list_components())


@pytest.fixture
def tied_components():
    """Records with duplicate names and prices, for stability checks"""
    return [
        ComponentRecord("GPU", "ASUS", "Beta", "https://example.com/1.jpg", 300),
        ComponentRecord("GPU", "MSI", "Alpha", "https://example.com/2.jpg", 100),
        ComponentRecord("CPU", "AMD", "Beta", "https://example.com/3.jpg", 100),
        ComponentRecord("CPU", "Intel", "Alpha", "https://example.com/4.jpg", 300),
    ]


@pytest.fixture
def settings():
    """Default settings with the rate limiter switched off"""
    return Settings(environ={"RATE_LIMIT_ENABLED": "false"})


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def small_catalog_client(settings, tied_components):
    """Client over a four-record catalog"""
    app = create_app(settings, catalog_source=InMemoryCatalogSource(tied_components))
    with TestClient(app) as test_client:
        yield test_client


# Test markers
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (HTTP layer)"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests (full workflow)"
    )
