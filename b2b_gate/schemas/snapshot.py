"""Catalog Snapshot Schemas: validated shape of the JSON document behind the wrappers.

Invariants:
    - Ids are non-negative integers
    - customer_groups must contain the "NOT LOGGED IN" code
    - A logged-in session must carry a customer
    - Config values stay raw strings; parsing happens in core/configuration.py
"""

from pydantic import BaseModel, Field, model_validator

from b2b_gate.core.domain_types import ProductType, ANONYMOUS_GROUP_CODE, ADMIN_CREATED_IN


class StoreRecord(BaseModel):
    id: int = Field(ge=0)
    root_category_id: int = Field(ge=0)


class CategoryRecord(BaseModel):
    id: int = Field(ge=0)
    child_ids: list[int] = Field(default_factory=list)
    is_root: bool = False


class ProductRecord(BaseModel):
    id: int = Field(ge=0)
    type: ProductType = ProductType.SIMPLE
    category_ids: list[int] = Field(default_factory=list)
    grouped_parent_ids: list[int] = Field(default_factory=list)
    configurable_parent_ids: list[int] = Field(default_factory=list)


class CustomerRecord(BaseModel):
    id: int = Field(ge=0)
    group_id: int = Field(ge=0)
    store_id: int = Field(ge=0)
    created_in: str = ""

    @property
    def created_via_admin(self) -> bool:
        return self.created_in == ADMIN_CREATED_IN


class SessionRecord(BaseModel):
    logged_in: bool = False
    customer: CustomerRecord | None = None

    @model_validator(mode="after")
    def check_customer_when_logged_in(self) -> "SessionRecord":
        if self.logged_in and self.customer is None:
            raise ValueError("logged_in session requires a customer")
        return self


class ContextRecord(BaseModel):
    """Listing filters and current category; empty means "use store root"."""
    category_filter_ids: list[int] = Field(default_factory=list)
    current_category_id: int | None = None


class CartItemRecord(BaseModel):
    product_id: int = Field(ge=0)


class CartRecord(BaseModel):
    items: list[CartItemRecord] = Field(default_factory=list)


class CatalogSnapshot(BaseModel):
    """Everything one evaluation needs, in a single read-only document."""
    store: StoreRecord
    config: dict[str, str] = Field(default_factory=dict)
    customer_groups: dict[str, int] = Field(
        default_factory=lambda: {ANONYMOUS_GROUP_CODE: 0},
    )
    categories: list[CategoryRecord] = Field(default_factory=list)
    products: list[ProductRecord] = Field(default_factory=list)
    session: SessionRecord = Field(default_factory=SessionRecord)
    context: ContextRecord = Field(default_factory=ContextRecord)
    cart: CartRecord = Field(default_factory=CartRecord)

    @model_validator(mode="after")
    def check_anonymous_group(self) -> "CatalogSnapshot":
        if ANONYMOUS_GROUP_CODE not in self.customer_groups:
            raise ValueError(
                f"customer_groups must define '{ANONYMOUS_GROUP_CODE}'",
            )
        return self
