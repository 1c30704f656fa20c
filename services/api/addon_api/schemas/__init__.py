"""Pydantic schemas for API request/response validation."""

from addon_api.schemas.common import ErrorResponse
from addon_api.schemas.addons import (
    AddOnDescriptor,
    AddOnReference,
    AddOnsResponse,
    ProductRecord,
    SettingsRequest,
    SettingsResponse,
)

__all__ = [
    "ErrorResponse",
    "AddOnDescriptor",
    "AddOnReference",
    "AddOnsResponse",
    "ProductRecord",
    "SettingsRequest",
    "SettingsResponse",
]
