"""Add-on list endpoint consumed by the storefront widget.

GET /api/addons/{product_id} - Returns AddOnsResponse for a product page.

Routers are thin: call services for business logic.
"""

import logging

from fastapi import APIRouter, HTTPException, Path

from addon_api.schemas import AddOnsResponse, ErrorResponse
from addon_api.services.bigcommerce_client import CatalogError, get_bigcommerce_client
from addon_api.services.resolver import resolve_addons
from addon_api.settings import get_settings
from addon_api.stores.mappings import get_mapping_store

router = APIRouter()
logger = logging.getLogger("uvicorn.error")


@router.get(
    "/{product_id}",
    response_model=AddOnsResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_addons(
    product_id: int = Path(description="Primary product id", examples=[101]),
) -> AddOnsResponse:
    """Get the add-ons to offer alongside a product.

    Returns:
        AddOnsResponse; an empty list when nothing is configured.

    Raises:
        HTTPException 500: If the catalog lookup fails.
    """
    settings = get_settings()
    try:
        addons = await resolve_addons(
            product_id,
            store=get_mapping_store(),
            category_id=settings.add_on_category_id,
            client=get_bigcommerce_client(),
        )
    except CatalogError:
        logger.exception(f"Failed to fetch add-ons for product_id={product_id}")
        raise HTTPException(
            status_code=500,
            detail="Failed to fetch add-ons from BigCommerce",
        )

    return AddOnsResponse(addons=addons)
