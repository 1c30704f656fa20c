"""Manual add-on mapping configuration.

POST /api/settings - Replace the add-on list of one product.

Mappings live in memory only and are lost on restart.
"""

import logging

from fastapi import APIRouter, HTTPException, Request
from pydantic import ValidationError

from addon_api.schemas import ErrorResponse, SettingsRequest, SettingsResponse
from addon_api.stores.mappings import get_mapping_store

router = APIRouter()
logger = logging.getLogger("uvicorn.error")

INVALID_PAYLOAD_MESSAGE = "Invalid payload. Expected { product_id, addons }."


@router.post(
    "",
    response_model=SettingsResponse,
    responses={400: {"model": ErrorResponse}},
)
async def save_settings(request: Request) -> SettingsResponse:
    """Replace the manual add-on mapping of a product.

    A later call for the same product_id fully replaces the earlier list.

    Raises:
        HTTPException 400: If the body is not JSON, product_id is missing or
            addons is not a list of {product_id, variant_id} objects.
    """
    try:
        payload = await request.json()
    except ValueError:
        logger.info("Rejected settings payload: body is not valid JSON")
        raise HTTPException(status_code=400, detail=INVALID_PAYLOAD_MESSAGE)

    try:
        settings_request = SettingsRequest.model_validate(payload)
    except ValidationError as e:
        logger.info(f"Rejected settings payload: {e.error_count()} validation error(s)")
        raise HTTPException(status_code=400, detail=INVALID_PAYLOAD_MESSAGE)

    get_mapping_store().put(settings_request.product_id, settings_request.addons)
    return SettingsResponse()
