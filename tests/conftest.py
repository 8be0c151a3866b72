"""Test configuration and fixtures."""

import pytest
import tempfile
import os
from datetime import datetime, timedelta
from typing import Generator

from catalog_store.container import Container
from catalog_store.domain.services import ProductService, ArticleService, OrderService
from catalog_store.infrastructure.storage import InMemoryCollection, InMemoryStore, TimestampIdGenerator


class FakeClock:
    """Clock that advances by one second per call."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 12, 0, 0)):
        self.current = start
        self.calls = 0

    def now(self) -> datetime:
        self.calls += 1
        self.current = self.current + timedelta(seconds=1)
        return self.current


class SequenceIdGenerator:
    """Deterministic ids: p1, p2, ..."""

    def __init__(self, prefix: str = "id"):
        self.prefix = prefix
        self.issued = 0

    def __call__(self) -> str:
        self.issued += 1
        return f"{self.prefix}{self.issued}"


@pytest.fixture
def fake_clock():
    """Provide a deterministic clock."""
    return FakeClock()


@pytest.fixture
def collection(fake_clock):
    """Provide an empty products collection."""
    return InMemoryCollection("products", id_generator=SequenceIdGenerator("p"), clock=fake_clock)


@pytest.fixture
def empty_store():
    """Provide a store with the three registered collections and no documents."""
    return InMemoryStore(id_generator=TimestampIdGenerator())


@pytest.fixture
def product_service(empty_store):
    return ProductService(empty_store)


@pytest.fixture
def article_service(empty_store):
    return ArticleService(empty_store)


@pytest.fixture
def order_service(empty_store):
    return OrderService(empty_store)


@pytest.fixture
def test_container(temp_storage_dir):
    """Provide a container seeded with demo data and a temporary snapshot file."""
    return Container(
        seed_mode="demo",
        id_strategy="uuid",
        snapshot_path=os.path.join(temp_storage_dir, "snapshot.json")
    )


@pytest.fixture
def sample_product_data():
    """Provide product fields as a UI form would submit them."""
    return {
        "name": "Desk Lamp",
        "description": "LED lamp with adjustable arm",
        "price": 45.0,
        "category": "Home",
        "tags": ["New", "Featured"],
        "image_url": "/images/lamp.jpg",
        "inventory": 12,
    }


@pytest.fixture
def sample_article_data():
    """Provide article fields as a UI form would submit them."""
    return {
        "title": "Indexing Strategies",
        "content": "Compound indexes speed up queries that filter on several fields.",
        "category": "Database",
        "tags": ["MongoDB", "Performance"],
    }


@pytest.fixture
def sample_order_data():
    """Provide a checkout payload."""
    return {
        "items": [
            {"product_id": "1", "name": "Wireless Headphones", "price": 199.99, "quantity": 1},
            {"product_id": "8", "name": "Yoga Mat", "price": 35.0, "quantity": 2},
        ],
        "customer_info": {
            "name": "Jordan Lee",
            "email": "jordan@example.com",
            "phone": "555-0100",
            "address": "1 Main St",
            "city": "Springfield",
            "state": "IL",
            "zip_code": "62701",
        },
        "total_amount": 269.99,
    }


@pytest.fixture
def temp_storage_dir() -> Generator[str, None, None]:
    """Provide temporary directory for storage tests."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield temp_dir
