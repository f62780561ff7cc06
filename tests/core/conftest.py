"""Core test fixtures: in-memory catalog collaborators and an evaluator factory."""

import pytest

from b2b_gate.core.configuration import load_configuration
from b2b_gate.core.domain_types import CategoryId, ProductId, ProductType
from b2b_gate.core.facts import Customer, CategoryContext
from b2b_gate.core.policy import PolicyEvaluator
from b2b_gate.infrastructure.snapshot import (
    MappingConfigurationProvider, InMemoryCategoryRepository,
    InMemoryProductRepository, InMemoryCustomerGroupRepository,
    StaticSession, StaticCategoryContext,
)

from catalog_helpers import GUEST, STORE, make_category, make_product


@pytest.fixture
def categories() -> InMemoryCategoryRepository:
    return InMemoryCategoryRepository([
        make_category(1, 2, 3, 7, is_root=True),
        make_category(2, 4, 5),
        make_category(3, 6),
        make_category(4, 8),
        make_category(5),
        make_category(6),
        make_category(7),
        make_category(8),
    ])


@pytest.fixture
def products() -> InMemoryProductRepository:
    return InMemoryProductRepository(
        [
            make_product(10, {4}),
            make_product(11, {6}),
            make_product(20, {5}, ProductType.GROUPED),
            make_product(21, {5}, ProductType.CONFIGURABLE),
            make_product(22, {5}, ProductType.GROUPED),
            make_product(30, {7}),
            make_product(31, {6}),
        ],
        {
            (ProductId(20), ProductType.GROUPED): [ProductId(30)],
            (ProductId(21), ProductType.CONFIGURABLE): [ProductId(31)],
        },
    )


@pytest.fixture
def customer_groups() -> InMemoryCustomerGroupRepository:
    return InMemoryCustomerGroupRepository(
        {"NOT LOGGED IN": 0, "General": 1, "Wholesale": 2},
    )


@pytest.fixture
def make_evaluator(categories, products, customer_groups):
    """Factory: PolicyEvaluator over the fixture catalog.

    visitor=None means an anonymous session.
    """
    def _make(
        values: dict[str, str],
        visitor: Customer | None = None,
        context: CategoryContext | None = None,
    ) -> PolicyEvaluator:
        session = StaticSession(
            store_id=STORE, anonymous_group_id=GUEST,
            customer=visitor, logged_in=visitor is not None,
        )
        return PolicyEvaluator(
            load_configuration(MappingConfigurationProvider(values)),
            session=session,
            categories=categories,
            products=products,
            customer_groups=customer_groups,
            context=StaticCategoryContext(
                context or CategoryContext(root_category_id=CategoryId(1)),
            ),
        )
    return _make
