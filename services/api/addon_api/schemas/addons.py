"""Schemas for the add-on endpoints (/api/addons, /api/settings, /api/bc)."""

from typing import Annotated

from pydantic import BaseModel, Field, StrictInt, field_validator

# Catalog entity ids: JSON integers only (no bools, strings or floats), positive
EntityId = Annotated[StrictInt, Field(gt=0)]


class AddOnReference(BaseModel):
    """A manually configured pointer to a sellable unit."""

    product_id: EntityId
    variant_id: EntityId | None = None

    @field_validator("variant_id", mode="before")
    @classmethod
    def _zero_variant_is_unset(cls, v: object) -> object:
        # 0 is never a real BigCommerce variant id
        if type(v) is int and v == 0:
            return None
        return v


class AddOnDescriptor(BaseModel):
    """A resolved, display-ready add-on.

    Manual mappings carry no display metadata, so name and price may be null.
    """

    product_id: int
    variant_id: int | None = None
    name: str | None = None
    price: float | None = None


class AddOnsResponse(BaseModel):
    """Response payload for GET /api/addons/{product_id}."""

    addons: list[AddOnDescriptor] = Field(default_factory=list)


class SettingsRequest(BaseModel):
    """Request body for POST /api/settings."""

    product_id: EntityId
    addons: list[AddOnReference]


class SettingsResponse(BaseModel):
    """Response payload for POST /api/settings."""

    status: str = "ok"


class ProductRecord(BaseModel):
    """Reshaped catalog product returned by GET /api/bc/products/{id}."""

    product_id: int
    variant_id: int | None = None
    name: str | None = None
    price: float | None = None
    description: str | None = None
