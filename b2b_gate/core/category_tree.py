"""Category Tree Resolution: descendants, activated category set, context categories.

Invariants:
    - resolve_with_descendants always contains the requested id itself
    - A stale (missing) category id contributes nothing; the walk continues
    - Empty configured ids give an empty active set, never "all categories"
    - Context resolution uses exactly one source: filters > current category > store root
"""

import logging
from typing import Iterable

from b2b_gate.core.domain_types import CategoryId
from b2b_gate.core.errors import NotFoundError
from b2b_gate.core.facts import CategoryContext
from b2b_gate.core.repository_protocols import CategoryRepository

logger = logging.getLogger(__name__)


def resolve_with_descendants(
    category_id: CategoryId, categories: CategoryRepository,
) -> frozenset[CategoryId]:
    """Return the category id plus all descendant ids. Raises NotFoundError."""
    category = categories.load(category_id)
    children = categories.all_children_ids(category.id, include_self=True)
    return frozenset({category.id, *children})


def expand_category_ids(
    category_ids: Iterable[CategoryId], categories: CategoryRepository,
) -> frozenset[CategoryId]:
    """Union of resolve_with_descendants over ids, skipping stale ids."""
    expanded: set[CategoryId] = set()
    for category_id in category_ids:
        try:
            expanded |= resolve_with_descendants(category_id, categories)
        except NotFoundError:
            logger.warning(
                f"Skipping unknown category {category_id}",
                extra={"category_id": category_id, "error_code": "NOT_FOUND"},
            )
    return frozenset(expanded)


def build_active_category_set(
    configured_ids: Iterable[CategoryId], categories: CategoryRepository,
) -> frozenset[CategoryId]:
    """Activated categories from configuration, descendants included."""
    return expand_category_ids(configured_ids, categories)


def resolve_context_category_ids(
    context: CategoryContext, categories: CategoryRepository,
) -> frozenset[CategoryId]:
    """Category ids relevant to the current browsing context."""
    if context.filter_ids:
        return expand_category_ids(context.filter_ids, categories)
    if context.current_category_id is not None:
        return expand_category_ids([context.current_category_id], categories)
    return expand_category_ids([context.root_category_id], categories)


def has_active_category(
    category_ids: Iterable[CategoryId], active_ids: frozenset[CategoryId],
) -> bool:
    """True when at least one of category_ids is in the active set."""
    return not active_ids.isdisjoint(category_ids)
