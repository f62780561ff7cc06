"""Visibility Schemas: public response shapes of the visibility endpoints."""

from typing import Literal

from pydantic import BaseModel


class VisibilityResponse(BaseModel):
    """Activation decision for the browsing context or a single product."""
    subject: Literal["context", "product"]
    product_id: int | None = None
    active: bool
    status: Literal["active", "inactive"]
    replace_add_to_cart: bool | None = None


class CartValidityResponse(BaseModel):
    valid: bool
    status: Literal["valid", "invalid"]
    item_count: int


class StorefrontSettingsResponse(BaseModel):
    login_required: bool
    extension_active: bool
    add_to_cart_replacement_text: str
