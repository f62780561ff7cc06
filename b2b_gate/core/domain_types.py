"""Domain Types: identity wrappers and closed enums shared across the codebase.

Invariants:
    - CategoryId, ProductId, GroupId, StoreId, CustomerId wrap int
    - ProductType is closed: SIMPLE, GROUPED, CONFIGURABLE
    - ConfigKey values are the store configuration paths read by the evaluator
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

CategoryId = NewType("CategoryId", int)
ProductId = NewType("ProductId", int)
GroupId = NewType("GroupId", int)
StoreId = NewType("StoreId", int)
CustomerId = NewType("CustomerId", int)


# ─── Constants ───────────────────────────────────────────────────

ANONYMOUS_GROUP_CODE = "NOT LOGGED IN"
ADMIN_CREATED_IN = "Admin"


# ─── Enums ───────────────────────────────────────────────────────

class ProductType(str, Enum):
    """Catalog product types that affect parent category resolution."""
    SIMPLE = "simple"
    GROUPED = "grouped"
    CONFIGURABLE = "configurable"


class ConfigKey(str, Enum):
    """Store configuration keys consumed by the evaluator."""
    REQUIRE_LOGIN = "requirelogin"
    EXTENSION_ACTIVE = "generalsettings.active"
    GLOBAL_CUSTOMER_ACTIVATION = "generalsettings.activecustomers"
    ACTIVATE_BY_CUSTOMER_GROUP = "activatebycustomersettings.activebycustomer"
    ACTIVATED_CUSTOMER_GROUPS = "activatebycustomersettings.activecustomers"
    ACTIVATE_BY_CATEGORY = "activatebycategorysettings.activebycategory"
    ACTIVATED_CATEGORIES = "activatebycategorysettings.activecategories"
    ADD_TO_CART_REPLACEMENT = "add_to_cart.value"


class ActivationMode(str, Enum):
    """Which membership checks gate visibility, from the two mode flags."""
    CUSTOMER_AND_CATEGORY = "customer_and_category"
    CUSTOMER_GROUP = "customer_group"
    CATEGORY = "category"
    LOGIN_WALL = "login_wall"
