"""Snapshot Collaborators: in-memory implementations of the core Protocols.

Invariants:
    - Built from one validated CatalogSnapshot; never written back
    - load() raises NotFoundError for unknown ids
    - Descendant walk is breadth-first with a visited set (cycles terminate)
    - Unreadable or invalid snapshot files raise CollaboratorUnavailableError
    - The store root category, when listed, must be flagged is_root
"""

import json
import logging
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Sequence

from pydantic import ValidationError

from b2b_gate.core.domain_types import (
    CategoryId, ProductId, GroupId, StoreId, CustomerId, ProductType,
    ANONYMOUS_GROUP_CODE,
)
from b2b_gate.core.errors import NotFoundError, CollaboratorUnavailableError
from b2b_gate.core.facts import (
    Customer, Product, Category, Cart, CartItem, CategoryContext,
)
from b2b_gate.schemas.snapshot import CatalogSnapshot, SessionRecord

logger = logging.getLogger(__name__)

_FALSE_FLAG_VALUES = ("", "0", "false")


class MappingConfigurationProvider:
    """Store config backed by a flat key -> raw string mapping."""

    def __init__(self, values: Mapping[str, str]):
        self._values = dict(values)

    def get_flag(self, key: str) -> bool:
        return self._values.get(key, "").strip().lower() not in _FALSE_FLAG_VALUES

    def get_string(self, key: str) -> str:
        return self._values.get(key, "")


class InMemoryCategoryRepository:

    def __init__(self, categories: Sequence[Category]):
        self._categories = {c.id: c for c in categories}

    def load(self, category_id: CategoryId) -> Category:
        category = self._categories.get(category_id)
        if category is None:
            raise NotFoundError("Category", category_id)
        return category

    def all_children_ids(
        self, category_id: CategoryId, include_self: bool,
    ) -> set[CategoryId]:
        seen: set[CategoryId] = {category_id}
        queue = deque([category_id])
        while queue:
            current = self._categories.get(queue.popleft())
            if current is None:
                continue
            for child_id in current.child_ids:
                if child_id not in seen:
                    seen.add(child_id)
                    queue.append(child_id)
        if not include_self:
            seen.discard(category_id)
        return seen


class InMemoryProductRepository:

    def __init__(
        self,
        products: Sequence[Product],
        parents: Mapping[tuple[ProductId, ProductType], Sequence[ProductId]],
    ):
        self._products = {p.id: p for p in products}
        self._parents = {key: list(ids) for key, ids in parents.items()}

    def load(self, product_id: ProductId) -> Product:
        product = self._products.get(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        return product

    def parent_ids_by_child(
        self, product_id: ProductId, product_type: ProductType,
    ) -> list[ProductId]:
        return list(self._parents.get((product_id, product_type), []))


class InMemoryCustomerGroupRepository:

    def __init__(self, groups: Mapping[str, int]):
        self._groups = dict(groups)

    def id_by_code(self, code: str) -> GroupId:
        if code not in self._groups:
            raise NotFoundError("Customer group", code)
        return GroupId(self._groups[code])


class StaticSession:
    """Session snapshot: logged-in state, customer and current store."""

    def __init__(
        self,
        store_id: StoreId,
        anonymous_group_id: GroupId,
        customer: Customer | None = None,
        logged_in: bool = False,
    ):
        self._store_id = store_id
        self._anonymous_group_id = anonymous_group_id
        self._customer = customer
        self._logged_in = logged_in and customer is not None

    def is_logged_in(self) -> bool:
        return self._logged_in

    def current_customer(self) -> Customer:
        if not self._logged_in:
            raise NotFoundError("Customer", "current session")
        return self._customer

    def current_customer_group_id(self) -> GroupId:
        if not self._logged_in:
            return self._anonymous_group_id
        return self._customer.group_id

    def current_store_id(self) -> StoreId:
        return self._store_id


class StaticCartRepository:

    def __init__(self, cart: Cart):
        self._cart = cart

    def current_cart(self) -> Cart:
        return self._cart


class StaticCategoryContext:

    def __init__(self, context: CategoryContext):
        self._context = context

    def current_context(self) -> CategoryContext:
        return self._context


@dataclass(frozen=True)
class SnapshotCollaborators:
    """Every collaborator the evaluator and cart validator need."""
    configuration: MappingConfigurationProvider
    session: StaticSession
    categories: InMemoryCategoryRepository
    products: InMemoryProductRepository
    customer_groups: InMemoryCustomerGroupRepository
    carts: StaticCartRepository
    context: StaticCategoryContext


def _customer_from_record(session: SessionRecord) -> Customer | None:
    record = session.customer
    if record is None:
        return None
    return Customer(
        id=CustomerId(record.id),
        group_id=GroupId(record.group_id),
        store_id=StoreId(record.store_id),
        created_via_admin=record.created_via_admin,
    )


def _check_root_category(
    categories: Sequence[Category], root_category_id: CategoryId,
) -> None:
    """A listed store root must carry the is_root flag; an unlisted one is stale."""
    for category in categories:
        if category.id == root_category_id and not category.is_root:
            raise CollaboratorUnavailableError(
                "Catalog snapshot",
                f"store root category {root_category_id} is not flagged is_root",
            )


def build_collaborators(snapshot: CatalogSnapshot) -> SnapshotCollaborators:
    """Turn a validated snapshot document into in-memory collaborators."""
    categories = [
        Category(
            id=CategoryId(c.id),
            child_ids=frozenset(CategoryId(i) for i in c.child_ids),
            is_root=c.is_root,
        )
        for c in snapshot.categories
    ]
    _check_root_category(categories, CategoryId(snapshot.store.root_category_id))
    products = [
        Product(
            id=ProductId(p.id),
            category_ids=frozenset(CategoryId(i) for i in p.category_ids),
            type=p.type,
        )
        for p in snapshot.products
    ]
    parents: dict[tuple[ProductId, ProductType], list[ProductId]] = {}
    for p in snapshot.products:
        if p.grouped_parent_ids:
            parents[(ProductId(p.id), ProductType.GROUPED)] = [
                ProductId(i) for i in p.grouped_parent_ids
            ]
        if p.configurable_parent_ids:
            parents[(ProductId(p.id), ProductType.CONFIGURABLE)] = [
                ProductId(i) for i in p.configurable_parent_ids
            ]
    groups = InMemoryCustomerGroupRepository(snapshot.customer_groups)
    context = CategoryContext(
        root_category_id=CategoryId(snapshot.store.root_category_id),
        filter_ids=tuple(CategoryId(i) for i in snapshot.context.category_filter_ids),
        current_category_id=(
            CategoryId(snapshot.context.current_category_id)
            if snapshot.context.current_category_id is not None else None
        ),
    )
    cart = Cart(items=tuple(
        CartItem(product_id=ProductId(item.product_id))
        for item in snapshot.cart.items
    ))
    return SnapshotCollaborators(
        configuration=MappingConfigurationProvider(snapshot.config),
        session=StaticSession(
            store_id=StoreId(snapshot.store.id),
            anonymous_group_id=groups.id_by_code(ANONYMOUS_GROUP_CODE),
            customer=_customer_from_record(snapshot.session),
            logged_in=snapshot.session.logged_in,
        ),
        categories=InMemoryCategoryRepository(categories),
        products=InMemoryProductRepository(products, parents),
        customer_groups=groups,
        carts=StaticCartRepository(cart),
        context=StaticCategoryContext(context),
    )


def load_snapshot(path: str | Path) -> SnapshotCollaborators:
    """Read, validate and wrap a catalog snapshot file."""
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise CollaboratorUnavailableError("Catalog snapshot", str(e)) from e
    try:
        snapshot = CatalogSnapshot.model_validate(json.loads(raw))
    except (json.JSONDecodeError, ValidationError) as e:
        raise CollaboratorUnavailableError(
            "Catalog snapshot", f"invalid document {path}: {e}",
        ) from e
    logger.debug(
        f"Loaded catalog snapshot {path}: "
        f"{len(snapshot.categories)} categories, {len(snapshot.products)} products",
    )
    return build_collaborators(snapshot)
