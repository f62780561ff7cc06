"""Visibility Routes: activation decisions for context, product and cart.

Invariants:
    - Each request loads a fresh snapshot and builds a fresh VisibilityService
    - Unknown products surface as 404 through the B2BGateError handler
    - Stale category ids in configuration never fail a request
"""

from fastapi import APIRouter, Depends, Query

from b2b_gate.config import get_settings
from b2b_gate.infrastructure.snapshot import load_snapshot
from b2b_gate.schemas.visibility import (
    VisibilityResponse, CartValidityResponse, StorefrontSettingsResponse,
)
from b2b_gate.services.visibility import VisibilityService

router = APIRouter(prefix="/api/v1/visibility", tags=["visibility"])


def get_visibility_service() -> VisibilityService:
    """Dependency: service over the configured catalog snapshot."""
    return VisibilityService(load_snapshot(get_settings().snapshot_path))


@router.get("", response_model=VisibilityResponse)
async def context_visibility(
    service: VisibilityService = Depends(get_visibility_service),
):
    active = service.context_active()
    return VisibilityResponse(
        subject="context", active=active,
        status="active" if active else "inactive",
    )


@router.get("/products/{product_id}", response_model=VisibilityResponse)
async def product_visibility(
    product_id: int,
    replace_section: bool = Query(True),
    service: VisibilityService = Depends(get_visibility_service),
):
    active = service.product_active(product_id)
    return VisibilityResponse(
        subject="product", product_id=product_id, active=active,
        status="active" if active else "inactive",
        replace_add_to_cart=service.replace_add_to_cart(product_id, replace_section),
    )


@router.get("/cart", response_model=CartValidityResponse)
async def cart_validity(
    service: VisibilityService = Depends(get_visibility_service),
):
    valid, item_count = service.cart_valid()
    return CartValidityResponse(
        valid=valid, status="valid" if valid else "invalid",
        item_count=item_count,
    )


@router.get("/settings", response_model=StorefrontSettingsResponse)
async def storefront_settings(
    service: VisibilityService = Depends(get_visibility_service),
):
    return StorefrontSettingsResponse(
        login_required=service.evaluator.is_login_required(),
        extension_active=service.configuration.extension_active,
        add_to_cart_replacement_text=service.evaluator.add_to_cart_replacement_text,
    )
