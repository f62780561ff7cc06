"""Activation Policy: decides whether restricted content is active for the visitor.

Invariants:
    - extension_active False -> every decision is False and no collaborator is read
    - is_product_active loads the product in every mode; NotFoundError propagates
    - logged_in means "logged in AND allowed in the current store"
    - Decision table (by_customer, by_category):
        (T, T) -> category_active and customer_group_active
        (T, F) -> customer_group_active
        (F, T) -> category_active and not logged_in
        (F, F) -> not logged_in
    - is_active() and is_product_active() differ only in which category ids they check
    - No state survives between calls; each call re-reads its collaborators
    - (F, T) and (F, F) hide content from logged-in visitors; do not invert
"""

from typing import Callable

from b2b_gate.core.category_tree import (
    build_active_category_set, resolve_context_category_ids, has_active_category,
)
from b2b_gate.core.configuration import B2BConfiguration
from b2b_gate.core.customer_access import (
    customer_allowed_in_store, is_customer_group_active,
    resolve_active_customer_groups,
)
from b2b_gate.core.domain_types import ActivationMode, CategoryId, ProductId
from b2b_gate.core.product_categories import resolve_product_category_ids
from b2b_gate.core.repository_protocols import (
    SessionProvider, CategoryRepository, ProductRepository,
    CustomerGroupRepository, CategoryContextProvider,
)


def activation_mode(configuration: B2BConfiguration) -> ActivationMode:
    by_customer = configuration.activate_by_customer_group
    by_category = configuration.activate_by_category
    if by_customer and by_category:
        return ActivationMode.CUSTOMER_AND_CATEGORY
    if by_customer:
        return ActivationMode.CUSTOMER_GROUP
    if by_category:
        return ActivationMode.CATEGORY
    return ActivationMode.LOGIN_WALL


def decide(
    mode: ActivationMode,
    logged_in: bool,
    category_active: Callable[[], bool],
    customer_group_active: Callable[[], bool],
) -> bool:
    """Apply the decision table. Membership checks are only run when read."""
    match mode:
        case ActivationMode.CUSTOMER_AND_CATEGORY:
            return category_active() and customer_group_active()
        case ActivationMode.CUSTOMER_GROUP:
            return customer_group_active()
        case ActivationMode.CATEGORY:
            return category_active() and not logged_in
        case ActivationMode.LOGIN_WALL:
            return not logged_in
    raise ValueError(f"Unknown activation mode: {mode!r}")


class PolicyEvaluator:
    """Context-level and product-level activation decisions for one request."""

    def __init__(
        self,
        configuration: B2BConfiguration,
        session: SessionProvider,
        categories: CategoryRepository,
        products: ProductRepository,
        customer_groups: CustomerGroupRepository,
        context: CategoryContextProvider,
    ):
        self.configuration = configuration
        self._session = session
        self._categories = categories
        self._products = products
        self._customer_groups = customer_groups
        self._context = context

    # ─── Public decisions ───────────────────────────────────────

    def is_active(self) -> bool:
        """Is restricted content active for the current browsing context?"""
        return self._evaluate(self._context_category_ids)

    def is_product_active(self, product_id: ProductId) -> bool:
        """Is restricted content (price, add-to-cart) active for this product?"""
        if not self.configuration.extension_active:
            return False
        # Unknown products fail in every mode, not only the category rows
        product = self._products.load(product_id)
        return self._evaluate(
            lambda: resolve_product_category_ids(product, self._products),
        )

    def is_login_required(self) -> bool:
        return self.configuration.require_login

    @property
    def add_to_cart_replacement_text(self) -> str:
        return self.configuration.add_to_cart_replacement_text

    def replace_add_to_cart(
        self, product_id: ProductId, section_replacement_enabled: bool,
    ) -> bool:
        """Should the add-to-cart action be swapped for the replacement text?"""
        return self.is_product_active(product_id) and section_replacement_enabled

    # ─── Internals ──────────────────────────────────────────────

    def _evaluate(
        self, category_ids: Callable[[], frozenset[CategoryId]],
    ) -> bool:
        if not self.configuration.extension_active:
            return False
        logged_in = customer_allowed_in_store(self._session, self.configuration)
        return decide(
            activation_mode(self.configuration),
            logged_in,
            category_active=lambda: self._category_active(category_ids()),
            customer_group_active=self._customer_group_active,
        )

    def _category_active(self, category_ids: frozenset[CategoryId]) -> bool:
        active_ids = build_active_category_set(
            self.configuration.activated_category_ids, self._categories,
        )
        return has_active_category(category_ids, active_ids)

    def _customer_group_active(self) -> bool:
        active_groups = resolve_active_customer_groups(
            self.configuration, self._customer_groups,
        )
        return is_customer_group_active(self._session, active_groups)

    def _context_category_ids(self) -> frozenset[CategoryId]:
        return resolve_context_category_ids(
            self._context.current_context(), self._categories,
        )
