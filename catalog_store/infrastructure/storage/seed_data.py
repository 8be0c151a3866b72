"""Sample documents loaded when the store runs in ``demo`` seed mode."""

from datetime import datetime
from typing import Any, Dict, List

from ...config import PRODUCTS_COLLECTION, ARTICLES_COLLECTION, ORDERS_COLLECTION


def _products() -> List[Dict[str, Any]]:
    rows = [
        ("1", "Wireless Headphones", "Over-ear headphones with active noise cancelling and 30 hour battery.",
         199.99, "Electronics", ["Featured", "New"], 25, datetime(2023, 1, 10)),
        ("2", "Smart Watch", "Fitness tracking, heart rate monitor and notifications on your wrist.",
         149.5, "Electronics", ["Trending"], 40, datetime(2023, 1, 20)),
        ("3", "Organic Cotton T-Shirt", "Soft everyday tee made from certified organic cotton.",
         24.0, "Clothing", ["Eco-Friendly", "Organic"], 120, datetime(2023, 2, 1)),
        ("4", "Denim Jacket", "Classic fit denim jacket with a washed finish.",
         79.0, "Clothing", ["Sale"], 15, datetime(2023, 2, 14)),
        ("5", "Ceramic Plant Pot", "Hand glazed pot with drainage hole, suitable for indoor plants.",
         18.75, "Home", ["New", "Eco-Friendly"], 60, datetime(2023, 3, 3)),
        ("6", "Scented Candle Set", "Three soy wax candles in lavender, cedar and citrus.",
         32.0, "Home", ["Sale", "Featured"], 0, datetime(2023, 3, 18)),
        ("7", "Vitamin C Serum", "Brightening face serum with hyaluronic acid.",
         27.99, "Beauty", ["Organic", "Trending"], 75, datetime(2023, 4, 2)),
        ("8", "Yoga Mat", "Non-slip 6mm mat with carrying strap.",
         35.0, "Sports", ["Featured"], 50, datetime(2023, 4, 21)),
    ]
    return [
        {
            "id": id_,
            "name": name,
            "description": description,
            "price": price,
            "category": category,
            "tags": tags,
            "image_url": f"/images/products/{id_}.jpg",
            "inventory": inventory,
            "created_at": created,
            "updated_at": created,
        }
        for id_, name, description, price, category, tags, inventory, created in rows
    ]


def _articles() -> List[Dict[str, Any]]:
    return [
        {
            "id": "1",
            "title": "Getting Started with MongoDB",
            "content": "MongoDB is a NoSQL database that provides high performance, "
                       "high availability, and easy scalability.",
            "category": "Database",
            "tags": ["MongoDB", "NoSQL", "Database"],
            "created_at": datetime(2023, 1, 1),
            "updated_at": datetime(2023, 1, 2),
        },
        {
            "id": "2",
            "title": "React Hooks Explained",
            "content": "React Hooks are functions that let you \"hook into\" React state "
                       "and lifecycle features from function components.",
            "category": "Frontend",
            "tags": ["React", "JavaScript", "Hooks"],
            "created_at": datetime(2023, 2, 1),
            "updated_at": datetime(2023, 2, 2),
        },
        {
            "id": "3",
            "title": "Tailwind CSS Tips and Tricks",
            "content": "Tailwind CSS is a utility-first CSS framework that can be composed "
                       "to build any design, directly in your markup.",
            "category": "CSS",
            "tags": ["CSS", "Tailwind", "Frontend"],
            "created_at": datetime(2023, 3, 1),
            "updated_at": datetime(2023, 3, 2),
        },
    ]


def demo_seed() -> Dict[str, List[Dict[str, Any]]]:
    """Fresh copies of the demo documents keyed by collection name."""
    return {
        PRODUCTS_COLLECTION: _products(),
        ARTICLES_COLLECTION: _articles(),
        ORDERS_COLLECTION: [],
    }
