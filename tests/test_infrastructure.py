"""Test cases for the storage infrastructure layer."""

import json
import os
import pytest
from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import patch

from catalog_store.domain.query import RegexMatch
from catalog_store.domain.repositories import CollectionRepository, DocumentStore, SnapshotRepository
from catalog_store.exceptions import CollectionNotFoundError, ConfigurationError, SnapshotError, StoreError
from catalog_store.infrastructure.storage import (
    InMemoryCollection, InMemoryStore, build_store, UuidIdGenerator, TimestampIdGenerator,
    MonotonicClock, make_id_generator, FileSnapshotStore, CartSnapshot, CartLine
)


class TestInMemoryCollection:
    """Test the in-memory collection."""

    def test_implements_interface(self, collection):
        assert isinstance(collection, CollectionRepository)
        assert collection.count() == 0

    def test_insert_assigns_id_and_timestamps(self, collection):
        """Test insert stamps store-owned fields and ignores caller values for them."""
        doc_id = collection.insert({"name": "Lamp", "id": "mine", "created_at": "yesterday"})

        assert doc_id == "p1"
        stored = collection.find_by_id("p1")
        assert stored["name"] == "Lamp"
        assert stored["created_at"] == stored["updated_at"]
        assert isinstance(stored["created_at"], datetime)
        assert collection.find_by_id("mine") is None

    def test_ids_are_unique(self, collection):
        ids = [collection.insert({"n": i}) for i in range(50)]

        assert len(set(ids)) == 50
        assert collection.count() == 50

    def test_duplicate_generated_id_is_retried(self, fake_clock):
        issued = iter(["a", "a", "b"])
        coll = InMemoryCollection("things", id_generator=lambda: next(issued), clock=fake_clock)

        assert coll.insert({}) == "a"
        assert coll.insert({}) == "b"

    def test_find_returns_copies(self, collection):
        """Mutating a returned document never changes the stored one."""
        original = {"name": "Lamp", "tags": ["New"]}
        doc_id = collection.insert(original)
        original["tags"].append("Changed")

        found = collection.find()[0]
        found["tags"].append("Sale")
        collection.find_by_id(doc_id)["name"] = "Other"

        assert collection.find_by_id(doc_id)["tags"] == ["New"]
        assert collection.find_by_id(doc_id)["name"] == "Lamp"

    def test_find_keeps_insertion_order_and_filters(self, collection):
        for category in ("Home", "Sports", "home"):
            collection.insert({"category": category})

        assert [d["id"] for d in collection.find()] == ["p1", "p2", "p3"]
        matched = collection.find(RegexMatch("category", "home", anchored=True))
        assert [d["id"] for d in matched] == ["p1", "p3"]

    def test_update_merges_and_bumps_updated_at(self, collection):
        doc_id = collection.insert({"name": "Lamp", "price": 10.0})
        before = collection.find_by_id(doc_id)

        assert collection.update_by_id(doc_id, {"price": 12.0, "id": "x", "created_at": None})

        after = collection.find_by_id(doc_id)
        assert after["name"] == "Lamp"
        assert after["price"] == 12.0
        assert after["id"] == doc_id
        assert after["created_at"] == before["created_at"]
        assert after["updated_at"] > before["updated_at"]

    def test_update_missing_document(self, collection):
        assert collection.update_by_id("nope", {"name": "x"}) is False

    def test_delete_is_idempotent(self, collection):
        doc_id = collection.insert({"name": "Lamp"})

        assert collection.delete_by_id(doc_id) is True
        assert collection.delete_by_id(doc_id) is False
        assert collection.find_by_id(doc_id) is None
        assert collection.count() == 0

    def test_distinct_values(self, collection):
        collection.insert({"category": "Home", "tags": ["New", "Sale"]})
        collection.insert({"category": "Sports", "tags": ["Sale"]})
        collection.insert({"category": "", "tags": []})
        collection.insert({"category": "Home"})

        assert collection.distinct_values("category") == ["Home", "Sports"]
        assert collection.distinct_values("tags") == ["New", "Sale"]
        assert collection.distinct_values("missing") == []

    def test_seed_keeps_ids_and_timestamps(self, fake_clock):
        created = datetime(2023, 1, 1)
        coll = InMemoryCollection(
            "articles",
            seed=[{"id": "1", "title": "A", "created_at": created, "updated_at": created}, {"title": "B"}],
            id_generator=lambda: "generated",
            clock=fake_clock,
        )

        assert coll.find_by_id("1")["created_at"] == created
        assert coll.find_by_id("generated")["title"] == "B"

    def test_insert_then_find_round_trips(self, collection):
        document = {"name": "Lamp", "price": 45.0, "tags": ["New"], "dimensions": {"h": 40, "w": 12}}

        stored = collection.find_by_id(collection.insert(document))

        assert {k: v for k, v in stored.items() if k not in ("id", "created_at", "updated_at")} == document

    def test_update_after_future_seed_timestamp(self, fake_clock):
        future = datetime(2999, 1, 1)
        coll = InMemoryCollection("products", seed=[{"id": "1", "created_at": future, "updated_at": future}],
                                  clock=fake_clock)

        coll.update_by_id("1", {"name": "Later"})
        first = coll.find_by_id("1")["updated_at"]
        coll.update_by_id("1", {"name": "Later still"})
        second = coll.find_by_id("1")["updated_at"]

        assert future < first < second

    def test_seed_timestamps_are_normalised(self, fake_clock):
        aware = datetime(2023, 5, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))
        coll = InMemoryCollection(
            "articles",
            seed=[
                {"id": "1", "created_at": aware},
                {"id": "2", "created_at": datetime(2023, 6, 1), "updated_at": datetime(2023, 1, 1)},
            ],
            clock=fake_clock,
        )

        first, second = coll.find_by_id("1"), coll.find_by_id("2")
        assert first["created_at"] == datetime(2023, 5, 1, 10, 0)
        assert first["created_at"].tzinfo is None
        assert second["updated_at"] == second["created_at"]
        newest_first = sorted(coll.find(), key=lambda d: d["created_at"], reverse=True)
        assert [d["id"] for d in newest_first] == ["2", "1"]

    def test_seed_rejects_non_datetime_timestamps(self, fake_clock):
        with pytest.raises(StoreError):
            InMemoryCollection("articles", seed=[{"id": "1", "created_at": "2023-01-01"}], clock=fake_clock)


class TestInMemoryStore:
    """Test the store and its collection registry."""

    def test_registered_collections(self, empty_store):
        assert isinstance(empty_store, DocumentStore)
        assert empty_store.collection_names() == ["products", "articles", "orders"]
        assert empty_store.collection("products") is empty_store.collection("products")

    def test_unknown_collection_raises(self, empty_store):
        with pytest.raises(CollectionNotFoundError) as exc_info:
            empty_store.collection("customers")

        assert exc_info.value.details["requested"] == "customers"
        assert isinstance(exc_info.value, ConfigurationError)

    def test_seed_for_unknown_collection_raises(self):
        with pytest.raises(CollectionNotFoundError):
            InMemoryStore(seed={"customers": [{"name": "x"}]})

    def test_build_store_demo_seed(self):
        store = build_store("demo", "uuid")

        assert store.collection("products").count() == 8
        assert store.collection("articles").count() == 3
        assert store.collection("orders").count() == 0
        assert store.collection("products").find_by_id("1")["name"] == "Wireless Headphones"

    def test_build_store_empty(self):
        store = build_store("empty", "timestamp")

        assert all(store.collection(name).count() == 0 for name in store.collection_names())

    def test_build_store_rejects_unknown_settings(self):
        with pytest.raises(ConfigurationError):
            build_store("mock", "uuid")
        with pytest.raises(ConfigurationError):
            build_store("demo", "serial")


class TestIdentity:
    """Test id generators and the store clock."""

    def test_uuid_ids(self):
        generate = UuidIdGenerator()
        ids = {generate() for _ in range(100)}

        assert len(ids) == 100
        assert all(len(i) == 32 for i in ids)

    def test_timestamp_ids_within_one_millisecond(self):
        generate = TimestampIdGenerator(time_source=lambda: 1700000000.0)

        assert [generate() for _ in range(3)] == [
            "1700000000000-0", "1700000000000-1", "1700000000000-2"
        ]

    def test_timestamp_ids_restart_sequence_on_new_millisecond(self):
        times = iter([1.0, 1.0, 1.001, 0.5])
        generate = TimestampIdGenerator(time_source=lambda: next(times))

        assert [generate() for _ in range(4)] == ["1000-0", "1000-1", "1001-0", "1001-1"]

    def test_timestamp_ids_round_to_nearest_millisecond(self):
        generate = TimestampIdGenerator(time_source=lambda: 1.001)

        assert generate() == "1001-0"

    def test_make_id_generator(self):
        assert isinstance(make_id_generator("uuid"), UuidIdGenerator)
        assert isinstance(make_id_generator("timestamp"), TimestampIdGenerator)
        with pytest.raises(ConfigurationError):
            make_id_generator("random")

    def test_clock_strictly_increases(self):
        fixed = datetime(2024, 1, 1)
        clock = MonotonicClock(time_source=lambda: fixed)

        first, second, third = clock.now(), clock.now(), clock.now()
        assert first == fixed
        assert first < second < third

    def test_default_clock_is_naive(self):
        assert MonotonicClock().now().tzinfo is None


class TestSnapshotStore:
    """Test the file-backed snapshot store and cart snapshot."""

    def test_set_get_delete(self, temp_storage_dir):
        path = os.path.join(temp_storage_dir, "nested", "snap.json")
        snapshots = FileSnapshotStore(path)

        assert isinstance(snapshots, SnapshotRepository)
        assert snapshots.get("cart") is None
        snapshots.set("cart", "[]")
        assert FileSnapshotStore(path).get("cart") == "[]"
        assert snapshots.delete("cart") is True
        assert snapshots.delete("cart") is False

    def test_corrupt_file_is_ignored(self, temp_storage_dir):
        path = os.path.join(temp_storage_dir, "snap.json")
        with open(path, "w", encoding="utf-8") as f:
            f.write("{not json")

        assert FileSnapshotStore(path).get("cart") is None

    def test_cart_round_trip_with_datetimes(self, temp_storage_dir):
        path = os.path.join(temp_storage_dir, "snap.json")
        cart = CartSnapshot(FileSnapshotStore(path))
        product = {"id": "1", "name": "Headphones", "price": 199.99, "created_at": datetime(2023, 1, 10)}

        cart.save([CartLine(product=product, quantity=2)])

        lines = CartSnapshot(FileSnapshotStore(path)).load()
        assert len(lines) == 1
        assert lines[0].quantity == 2
        assert lines[0].product["created_at"] == "2023-01-10T00:00:00"
        with open(path, encoding="utf-8") as f:
            assert "cart" in json.load(f)

    def test_unparseable_cart_loads_empty(self, temp_storage_dir):
        snapshots = FileSnapshotStore(os.path.join(temp_storage_dir, "snap.json"))
        snapshots.set("cart", "{broken")
        assert CartSnapshot(snapshots).load() == []

        snapshots.set("cart", json.dumps([{"product": {}}]))
        assert CartSnapshot(snapshots).load() == []

    def test_clear_cart(self, temp_storage_dir):
        snapshots = FileSnapshotStore(os.path.join(temp_storage_dir, "snap.json"))
        cart = CartSnapshot(snapshots)
        cart.save([CartLine(product={"id": "1"}, quantity=1)])

        cart.clear()

        assert cart.load() == []
        assert snapshots.get("cart") == "[]"

    def test_failed_write_keeps_previous_values(self, temp_storage_dir):
        path = os.path.join(temp_storage_dir, "snap.json")
        snapshots = FileSnapshotStore(path)
        snapshots.set("cart", "[]")

        with patch.object(Path, "mkdir", side_effect=PermissionError("read-only")):
            with pytest.raises(SnapshotError):
                snapshots.set("cart", "[1]")
            with pytest.raises(SnapshotError):
                snapshots.delete("cart")

        assert snapshots.get("cart") == "[]"
        assert FileSnapshotStore(path).get("cart") == "[]"

    def test_cart_line_quantity(self):
        with pytest.raises(ValueError):
            CartLine(product={}, quantity=0)
