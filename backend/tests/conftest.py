"""
Pytest fixtures and configuration for Namma City Backend tests

This file provides shared fixtures that can be used across all test modules.

Author: Namma City
Date: 2025-10-17
"""
import pytest
from fastapi.testclient import TestClient

from namma_city.domain.logistics import LogisticsRegistry
from namma_city.main import create_app
from namma_city.repositories.product_repository import ProductRepository
from namma_city.repositories.seller_repository import SellerRepository
from namma_city.services.marketplace_service import MarketplaceService


@pytest.fixture
def logistics():
    """The default logistics provider registry"""
    return LogisticsRegistry()


@pytest.fixture
def seller_repo():
    """
    Provides an empty identity store

    Scope: function (fresh store per test)
    """
    return SellerRepository()


@pytest.fixture
def product_repo(logistics):
    """Provides an empty catalog store backed by the default registry"""
    return ProductRepository(logistics)


@pytest.fixture
def marketplace(seller_repo, product_repo, logistics):
    return MarketplaceService(seller_repo, product_repo, logistics, flat_delivery_fee_inr=50)


@pytest.fixture
def acme_id(seller_repo):
    """A registered seller 'Acme'"""
    return seller_repo.register("Acme", "acme@x.com", "s1")


@pytest.fixture
def globex_id(seller_repo):
    """A second, unrelated seller"""
    return seller_repo.register("Globex", "globex@x.com", "s2")


@pytest.fixture
def client():
    """
    Provides a TestClient over a freshly built app

    Entering the client runs the lifespan, so every test gets its own
    empty stores.
    """
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def sample_seller_data():
    """
    Provides sample registration data for tests
    """
    return {
        "name": "Acme",
        "email": "acme@x.com",
        "password": "s1",
    }


@pytest.fixture
def sample_product_data():
    """
    Provides sample product data for tests
    """
    return {
        "name": "Banana",
        "description": "Nendran bananas, 1 dozen",
        "price": 45,
        "inventory": 100,
    }


@pytest.fixture
def auth_headers(client, sample_seller_data):
    """Registers the sample seller and returns its x-auth-token header"""
    client.post("/api/register", json=sample_seller_data)
    response = client.post("/api/login", json={
        "email": sample_seller_data["email"],
        "password": sample_seller_data["password"],
    })
    return {"x-auth-token": response.json()["token"]}
