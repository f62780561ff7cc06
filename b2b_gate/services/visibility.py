"""Visibility Service: builds the evaluator from collaborators and logs each decision.

Invariants:
    - Store configuration is parsed once per service (load_configuration)
    - Decisions are computed fresh on every call; nothing is cached
    - Errors propagate unchanged to the caller (route handler or CLI)
"""

import logging

from b2b_gate.core.cart import CartValidator
from b2b_gate.core.configuration import B2BConfiguration, load_configuration
from b2b_gate.core.domain_types import ProductId
from b2b_gate.core.policy import PolicyEvaluator, activation_mode
from b2b_gate.infrastructure.snapshot import SnapshotCollaborators

logger = logging.getLogger(__name__)


class VisibilityService:
    """Thin orchestration around PolicyEvaluator and CartValidator."""

    def __init__(self, collaborators: SnapshotCollaborators):
        self.configuration: B2BConfiguration = load_configuration(
            collaborators.configuration,
        )
        self.evaluator = PolicyEvaluator(
            self.configuration,
            session=collaborators.session,
            categories=collaborators.categories,
            products=collaborators.products,
            customer_groups=collaborators.customer_groups,
            context=collaborators.context,
        )
        self.cart_validator = CartValidator(self.evaluator, collaborators.carts)
        self._carts = collaborators.carts

    def context_active(self) -> bool:
        active = self.evaluator.is_active()
        logger.info(
            "Context visibility evaluated",
            extra={
                "subject": "context",
                "decision": _status(active),
                "activation_mode": activation_mode(self.configuration).value,
            },
        )
        return active

    def product_active(self, product_id: int) -> bool:
        active = self.evaluator.is_product_active(ProductId(product_id))
        logger.info(
            f"Product {product_id} visibility evaluated",
            extra={
                "subject": "product",
                "product_id": product_id,
                "decision": _status(active),
            },
        )
        return active

    def replace_add_to_cart(self, product_id: int, section_enabled: bool) -> bool:
        return self.evaluator.replace_add_to_cart(
            ProductId(product_id), section_enabled,
        )

    def cart_valid(self) -> tuple[bool, int]:
        """Validate the current cart. Returns (valid, item_count)."""
        cart = self._carts.current_cart()
        valid = self.cart_validator.is_valid(cart)
        logger.info(
            "Cart validity evaluated",
            extra={
                "subject": "cart",
                "decision": "valid" if valid else "invalid",
                "item_count": len(cart),
            },
        )
        return valid, len(cart)


def _status(active: bool) -> str:
    return "active" if active else "inactive"
