"""Product Category Resolution: own categories plus those inherited from parents.

Invariants:
    - SIMPLE products use only their own category ids
    - GROUPED / CONFIGURABLE products add every parent's category ids
    - A missing parent product propagates NotFoundError
"""

from b2b_gate.core.domain_types import CategoryId, ProductType
from b2b_gate.core.facts import Product
from b2b_gate.core.repository_protocols import ProductRepository


def resolve_product_category_ids(
    product: Product, products: ProductRepository,
) -> frozenset[CategoryId]:
    category_ids = set(product.category_ids)
    match product.type:
        case ProductType.GROUPED | ProductType.CONFIGURABLE:
            parent_ids = products.parent_ids_by_child(product.id, product.type)
        case ProductType.SIMPLE:
            parent_ids = []
    for parent_id in parent_ids:
        category_ids |= products.load(parent_id).category_ids
    return frozenset(category_ids)
