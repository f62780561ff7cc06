"""Cart Validation: a cart is valid only while none of its items is policy-active.

Invariants:
    - Every item is evaluated (no short-circuit), so lookup failures always surface
    - Any active item makes the cart invalid; an empty cart is valid
"""

from typing import Callable

from b2b_gate.core.domain_types import ProductId
from b2b_gate.core.facts import Cart
from b2b_gate.core.policy import PolicyEvaluator
from b2b_gate.core.repository_protocols import CartRepository


def has_valid_cart(
    cart: Cart, is_product_active: Callable[[ProductId], bool],
) -> bool:
    valid = True
    for item in cart.items:
        if is_product_active(item.product_id):
            valid = False
    return valid


class CartValidator:
    """Applies the product policy to every line of the current cart."""

    def __init__(self, evaluator: PolicyEvaluator, carts: CartRepository):
        self._evaluator = evaluator
        self._carts = carts

    def is_valid(self, cart: Cart | None = None) -> bool:
        if cart is None:
            cart = self._carts.current_cart()
        return has_valid_cart(cart, self._evaluator.is_product_active)
