"""Catalog lookup endpoint (reference/diagnostic, not used by the widget).

GET /api/bc/products/{product_id} - Product details from the Storefront API.
"""

import logging

from fastapi import APIRouter, HTTPException, Path

from addon_api.schemas import ErrorResponse, ProductRecord
from addon_api.services.bigcommerce_client import CatalogError, get_bigcommerce_client

router = APIRouter()
logger = logging.getLogger("uvicorn.error")


@router.get(
    "/products/{product_id}",
    response_model=ProductRecord,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def get_product(
    product_id: int = Path(ge=1, description="BigCommerce product entity id"),
) -> ProductRecord:
    """Fetch one product by id.

    Raises:
        HTTPException 404: If the catalog has no such product.
        HTTPException 500: If the catalog lookup fails.
    """
    try:
        product = await get_bigcommerce_client().product_by_id(product_id)
    except CatalogError:
        logger.exception(f"Failed to fetch product_id={product_id}")
        raise HTTPException(status_code=500, detail="Failed to fetch product")

    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")

    return ProductRecord(
        product_id=product.product_id,
        variant_id=product.variant_id,
        name=product.name,
        price=product.price,
        description=product.description,
    )
