"""API routes."""

from fastapi import APIRouter

from addon_api.routes import addons, catalog, mappings

api_router = APIRouter()

# Widget endpoint (add-on list for a product page)
api_router.include_router(addons.router, prefix="/api/addons", tags=["addons"])

# Manual mapping configuration
api_router.include_router(mappings.router, prefix="/api/settings", tags=["settings"])

# Diagnostic catalog lookups (not used by the widget)
api_router.include_router(catalog.router, prefix="/api/bc", tags=["catalog"])
