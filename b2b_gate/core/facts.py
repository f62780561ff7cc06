"""Facts: read-only value snapshots handed to the evaluator for one decision.

Invariants:
    - All facts are frozen; the evaluator never mutates or caches them
    - Logged-in state belongs to the session, not to Customer
    - CategoryContext resolves to exactly one source: filters > current > root
"""

from dataclasses import dataclass, field

from b2b_gate.core.domain_types import (
    CategoryId, ProductId, GroupId, StoreId, CustomerId, ProductType,
)


@dataclass(frozen=True)
class Customer:
    """Storefront customer account as seen by the current session."""
    id: CustomerId
    group_id: GroupId
    store_id: StoreId
    # Admin-created accounts are not bound to a storefront
    created_via_admin: bool = False


@dataclass(frozen=True)
class Product:
    id: ProductId
    category_ids: frozenset[CategoryId] = frozenset()
    type: ProductType = ProductType.SIMPLE


@dataclass(frozen=True)
class Category:
    id: CategoryId
    child_ids: frozenset[CategoryId] = frozenset()
    is_root: bool = False


@dataclass(frozen=True)
class CartItem:
    product_id: ProductId


@dataclass(frozen=True)
class Cart:
    """Checkout quote: ordered line items, only product ids matter here."""
    items: tuple[CartItem, ...] = ()

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class CategoryContext:
    """Browsing context used for context-level (non-product) decisions."""
    root_category_id: CategoryId
    filter_ids: tuple[CategoryId, ...] = field(default_factory=tuple)
    current_category_id: CategoryId | None = None
