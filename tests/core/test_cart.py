"""Cart Validation: a cart stays valid only while no item is policy-active.

Tests cover:
    - All items inactive -> valid; any item active -> invalid; empty -> valid
    - Every item is evaluated, even after an active one is found
    - CartValidator defaults to the current cart from CartRepository
"""

import pytest

from b2b_gate.core.cart import CartValidator, has_valid_cart
from b2b_gate.core.domain_types import ProductId
from b2b_gate.core.errors import NotFoundError
from b2b_gate.core.facts import Cart, CartItem
from b2b_gate.infrastructure.snapshot import StaticCartRepository

from catalog_helpers import WHOLESALE, config, customer


def _cart(*product_ids: int) -> Cart:
    return Cart(items=tuple(CartItem(ProductId(pid)) for pid in product_ids))


def _policy(active_ids: set[int]):
    return lambda pid: pid in active_ids


# ─── has_valid_cart ──────────────────────────────────────────────

def test_cart_with_only_inactive_items_is_valid():
    assert has_valid_cart(_cart(1, 2), _policy(set())) is True


def test_cart_with_active_item_is_invalid():
    # Kept as-is: an item that is currently restricted invalidates the cart
    assert has_valid_cart(_cart(1, 2), _policy({2})) is False


def test_empty_cart_is_valid():
    assert has_valid_cart(_cart(), _policy({1})) is True


def test_every_item_is_evaluated():
    seen = []

    def is_active(pid):
        seen.append(pid)
        return True

    has_valid_cart(_cart(1, 2, 3), is_active)
    assert seen == [1, 2, 3]


# ─── CartValidator ───────────────────────────────────────────────

def test_validator_uses_current_cart(make_evaluator):
    evaluator = make_evaluator(config(False, True))
    validator = CartValidator(evaluator, StaticCartRepository(_cart(10)))
    assert validator.is_valid() is True


def test_validator_detects_active_item(make_evaluator):
    evaluator = make_evaluator(config(False, True))
    validator = CartValidator(evaluator, StaticCartRepository(_cart(10, 11)))
    assert validator.is_valid() is False


def test_validator_explicit_cart_overrides_current(make_evaluator):
    evaluator = make_evaluator(config(False, True))
    validator = CartValidator(evaluator, StaticCartRepository(_cart(11)))
    assert validator.is_valid(_cart(10)) is True


def test_validator_propagates_missing_product(make_evaluator):
    evaluator = make_evaluator(config(False, True))
    validator = CartValidator(evaluator, StaticCartRepository(_cart(10, 999)))
    with pytest.raises(NotFoundError):
        validator.is_valid()


def test_validator_propagates_missing_product_in_customer_group_mode(make_evaluator):
    evaluator = make_evaluator(config(True, False), customer(WHOLESALE))
    validator = CartValidator(evaluator, StaticCartRepository(_cart(10, 999)))
    with pytest.raises(NotFoundError):
        validator.is_valid()
