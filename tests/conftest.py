"""Root conftest: shared test configuration and the catalog snapshot document."""

import os

import pytest

# Keep tests independent of any local .env / deployment settings
os.environ.setdefault("B2B_GATE_SNAPSHOT_PATH", "tests-missing-snapshot.json")
os.environ.setdefault("B2B_GATE_LOG_FORMAT", "text")
os.environ.setdefault("B2B_GATE_LOG_LEVEL", "WARNING")


@pytest.fixture
def document() -> dict:
    """Catalog with category 3 activated; visitor anonymous in store 1.

    Products: 10 in category 2 (inactive), 11 in category 6 (under 3, active),
    20 grouped in category 2 with parent 30 in category 6.
    """
    return {
        "store": {"id": 1, "root_category_id": 1},
        "config": {
            "generalsettings.active": "1",
            "activatebycategorysettings.activebycategory": "1",
            "activatebycategorysettings.activecategories": "3",
            "add_to_cart.value": "Please log in",
            "requirelogin": "1",
        },
        "customer_groups": {"NOT LOGGED IN": 0, "General": 1, "Wholesale": 2},
        "categories": [
            {"id": 1, "child_ids": [2, 3], "is_root": True},
            {"id": 2},
            {"id": 3, "child_ids": [6]},
            {"id": 6},
        ],
        "products": [
            {"id": 10, "category_ids": [2]},
            {"id": 11, "category_ids": [6]},
            {"id": 20, "type": "grouped", "category_ids": [2], "grouped_parent_ids": [30]},
            {"id": 30, "category_ids": [6]},
        ],
        "session": {"logged_in": False},
        "context": {"current_category_id": 2},
        "cart": {"items": [{"product_id": 10}]},
    }
