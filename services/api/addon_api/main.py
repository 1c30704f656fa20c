"""FastAPI application entry point.

BigCommerce Add-ons API - add-on lists for product pages.
"""

from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from addon_api.routes import api_router
from addon_api.services.bigcommerce_client import close_bigcommerce_client
from addon_api.settings import get_settings

logger = logging.getLogger("uvicorn.error")

STATIC_DIR = Path(__file__).resolve().parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Handles startup and shutdown events.
    """
    settings = get_settings()
    if not settings.bigcommerce_store_hash or not settings.bigcommerce_storefront_api_token:
        logger.warning("BigCommerce credentials not set; catalog lookups will fail")
    if settings.add_on_category_id is None:
        logger.info("ADD_ON_CATEGORY_ID not set; only manual add-on mappings are served")

    yield

    # Shutdown
    await close_bigcommerce_client()


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Optional add-on products for BigCommerce product pages",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Error format: { "error": str }
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Render HTTP errors in the flat error format."""
        detail = exc.detail if isinstance(exc.detail, str) else "Request failed"
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Reject malformed path params and bodies with 400 instead of 422."""
        errors = exc.errors()
        loc = errors[0].get("loc", ()) if errors else ()
        if len(loc) >= 2 and loc[0] == "path":
            message = f"Invalid {str(loc[-1]).replace('_', ' ')}"
        else:
            message = "Invalid request"
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler returning the flat error format."""
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content={"error": str(exc) if settings.debug else "Internal server error"},
        )

    @app.get("/", tags=["health"], response_class=PlainTextResponse)
    async def root() -> str:
        """Liveness string."""
        return "BigCommerce Add-ons App Server"

    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, bool]:
        """Health check endpoint."""
        return {"ok": True}

    app.include_router(api_router)

    # Storefront widget script (/public/add-ons-widget.js)
    app.mount("/public", StaticFiles(directory=STATIC_DIR), name="public")

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "addon_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
