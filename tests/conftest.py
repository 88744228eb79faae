"""Pytest configuration and fixtures"""
import os
import pytest
from fastapi.testclient import TestClient

# Set test environment variables
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from storefront.app import create_app
from storefront.cart import CartStore
from storefront.catalog import Catalog
from storefront.config import DEFAULT_CATALOG_PATH, Settings
from storefront.models import Item


@pytest.fixture
def item_a():
    """Item priced 10"""
    return Item(id="1", name="Canvas Backpack", price=10, category="bags", image_url="/img/1.jpg")


@pytest.fixture
def item_b():
    """Item priced 15"""
    return Item(id="2", name="Running Sneakers", price=15, category="shoes")


@pytest.fixture
def item_c():
    """Item with a fractional price"""
    return Item(id="3", name="Wool Beanie", price="19.95", category="accessories")


@pytest.fixture
def sample_catalog(item_a, item_b, item_c):
    """Small catalog of three items"""
    return Catalog([item_a, item_b, item_c])


@pytest.fixture
def store():
    """Empty cart store"""
    return CartStore()


@pytest.fixture
def test_settings():
    """Settings independent of the process environment"""
    return Settings(
        app_env="test",
        log_level="DEBUG",
        catalog_path=str(DEFAULT_CATALOG_PATH),
        cors_origins=("*",),
    )


@pytest.fixture
def client(test_settings, sample_catalog):
    """Test client for an app built around the sample catalog"""
    app = create_app(settings=test_settings, catalog=sample_catalog)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def session_headers(client):
    """Headers carrying a freshly opened cart session"""
    response = client.post("/api/cart/session")
    return {"X-Cart-Session": response.json()["session_id"]}
