"""Boundary Protocols: contracts between the decision core and its collaborators.

Invariants:
    - Core NEVER imports from the shell; dependency arrows point inward only
    - Every lookup the evaluator needs goes through one of these Protocols
    - load() methods raise NotFoundError for unknown ids, never return None
"""

from typing import Protocol, Sequence

from b2b_gate.core.domain_types import (
    CategoryId, ProductId, GroupId, StoreId, ProductType,
)
from b2b_gate.core.facts import Customer, Product, Category, Cart, CategoryContext


class ConfigurationProvider(Protocol):
    """Raw store configuration values, keyed by ConfigKey values."""
    def get_flag(self, key: str) -> bool: ...
    def get_string(self, key: str) -> str: ...


class SessionProvider(Protocol):
    """Current visitor session. Customer lookups only make sense when logged in."""
    def is_logged_in(self) -> bool: ...
    def current_customer(self) -> Customer: ...
    def current_customer_group_id(self) -> GroupId: ...
    def current_store_id(self) -> StoreId: ...


class CategoryRepository(Protocol):
    def load(self, category_id: CategoryId) -> Category: ...
    def all_children_ids(
        self, category_id: CategoryId, include_self: bool,
    ) -> set[CategoryId]: ...


class ProductRepository(Protocol):
    def load(self, product_id: ProductId) -> Product: ...
    def parent_ids_by_child(
        self, product_id: ProductId, product_type: ProductType,
    ) -> Sequence[ProductId]: ...


class CustomerGroupRepository(Protocol):
    def id_by_code(self, code: str) -> GroupId: ...


class CartRepository(Protocol):
    def current_cart(self) -> Cart: ...


class CategoryContextProvider(Protocol):
    """Current listing filters, browsing category and store root."""
    def current_context(self) -> CategoryContext: ...
