"""Application settings via Pydantic Settings."""

from functools import lru_cache
import json
from typing import Annotated

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "BigCommerce Add-ons API"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # CORS (the widget runs on the storefront domain)
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["*"],
        validation_alias=AliasChoices("CORS_ORIGINS", "ALLOWED_ORIGINS"),
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _parse_cors_origins(cls, v: object) -> list[str]:
        """
        Accept either:
        - JSON array string: '["https://a.com","http://localhost:3000"]'
        - Comma-separated string: "https://a.com,http://localhost:3000"
        - Already-parsed list[str]
        """
        if v is None:
            return []
        if isinstance(v, list):
            return [str(x).strip() for x in v if str(x).strip()]
        if isinstance(v, str):
            s = v.strip()
            if not s:
                return []
            if s.startswith("["):
                try:
                    parsed = json.loads(s)
                except json.JSONDecodeError:
                    parsed = s.split(",")
                if isinstance(parsed, list):
                    return [str(x).strip() for x in parsed if str(x).strip()]
                return [str(parsed).strip()]
            return [part.strip() for part in s.split(",") if part.strip()]
        return [str(v).strip()] if str(v).strip() else []

    # BigCommerce Storefront API
    bigcommerce_store_hash: str = Field(
        default="",
        validation_alias=AliasChoices("BIGCOMMERCE_STORE_HASH", "STORE_HASH"),
    )
    bigcommerce_storefront_api_token: str = Field(
        default="",
        validation_alias=AliasChoices(
            "BIGCOMMERCE_STOREFRONT_API_TOKEN",
            "BIGCOMMERCE_API_TOKEN",
        ),
    )
    bigcommerce_timeout_seconds: float = Field(
        default=15.0,
        validation_alias=AliasChoices("BIGCOMMERCE_TIMEOUT_SECONDS"),
        gt=0,
        le=120,
        description="Timeout for a single Storefront GraphQL request",
    )

    # Category-driven add-ons (used when a product has no manual mapping)
    add_on_category_id: int | None = Field(
        default=None,
        validation_alias=AliasChoices("ADD_ON_CATEGORY_ID"),
    )
    add_on_category_limit: int = Field(
        default=50,
        validation_alias=AliasChoices("ADD_ON_CATEGORY_LIMIT"),
        ge=1,
        le=50,
        description="Page size of the category products query (Storefront API caps at 50)",
    )

    @field_validator("add_on_category_id", mode="before")
    @classmethod
    def _parse_category_id(cls, v: object) -> object:
        """Treat an empty ADD_ON_CATEGORY_ID as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
