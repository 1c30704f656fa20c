"""BigCommerce Storefront GraphQL client.

Every call is a single POST of {query, variables} to
https://store-{store_hash}.mybigcommerce.com/graphql with a bearer token.

Failure rules:
- Missing store hash or token: CatalogConfigError before any request
- Top-level "errors" in the envelope: CatalogResponseError (never a partial result)
- Network failure, timeout, non-2xx status, malformed JSON: CatalogTransportError
- Missing nested fields (no variants, no prices): the leaf becomes None

No retries and no backoff. The request timeout comes from settings.

Category lookups filter the top-level site.products connection by
categoryEntityId rather than walking site.category(entityId).products.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any

import httpx
from pydantic import BaseModel, Field, ValidationError

from addon_api.settings import get_settings

logger = logging.getLogger("uvicorn.error")


PRODUCTS_BY_CATEGORY_QUERY = """
query ProductsByCategory($categoryId: Int!, $first: Int!) {
  site {
    products(first: $first, filter: { categoryEntityId: $categoryId }) {
      edges {
        node {
          entityId
          name
          prices {
            price {
              value
            }
          }
          variants(first: 1) {
            edges {
              node {
                entityId
              }
            }
          }
        }
      }
    }
  }
}
"""

PRODUCT_BY_ID_QUERY = """
query ProductById($productId: Int!) {
  site {
    product(entityId: $productId) {
      entityId
      name
      plainTextDescription
      prices {
        price {
          value
        }
      }
      variants(first: 1) {
        edges {
          node {
            entityId
          }
        }
      }
    }
  }
}
"""


class CatalogError(RuntimeError):
    """Catalog lookup failed."""


class CatalogConfigError(CatalogError):
    """Store hash or API token is not configured."""


class CatalogResponseError(CatalogError):
    """The GraphQL envelope carried errors or had an unusable shape."""


class CatalogTransportError(CatalogError):
    """The request did not produce a usable HTTP response."""


@dataclass
class CatalogProduct:
    """Catalog entry reshaped from a Storefront product node."""

    product_id: int
    name: str | None = None
    price: float | None = None
    variant_id: int | None = None
    description: str | None = None


# Response records, one per nesting level. Every leaf is optional.


class _Money(BaseModel):
    value: float | None = None


class _Prices(BaseModel):
    price: _Money | None = None


class _VariantNode(BaseModel):
    entity_id: int | None = Field(default=None, alias="entityId")


class _VariantEdge(BaseModel):
    node: _VariantNode | None = None


class _VariantConnection(BaseModel):
    edges: list[_VariantEdge] | None = None


class ProductNode(BaseModel):
    entity_id: int = Field(alias="entityId")
    name: str | None = None
    plain_text_description: str | None = Field(default=None, alias="plainTextDescription")
    prices: _Prices | None = None
    variants: _VariantConnection | None = None

    def first_variant_id(self) -> int | None:
        if self.variants is None or not self.variants.edges:
            return None
        for edge in self.variants.edges:
            if edge.node is not None and edge.node.entity_id:
                return edge.node.entity_id
        return None

    def price_value(self) -> float | None:
        if self.prices is None or self.prices.price is None:
            return None
        return self.prices.price.value

    def to_catalog_product(self) -> CatalogProduct:
        return CatalogProduct(
            product_id=self.entity_id,
            name=self.name,
            price=self.price_value(),
            variant_id=self.first_variant_id(),
            description=self.plain_text_description,
        )


class _ProductEdge(BaseModel):
    node: ProductNode | None = None


class _ProductConnection(BaseModel):
    edges: list[_ProductEdge] | None = None


class _Site(BaseModel):
    products: _ProductConnection | None = None
    product: ProductNode | None = None


class _QueryData(BaseModel):
    site: _Site | None = None


class BigCommerceClient:
    """Client for the BigCommerce Storefront GraphQL API."""

    ENDPOINT_TEMPLATE = "https://store-{store_hash}.mybigcommerce.com/graphql"

    def __init__(
        self,
        store_hash: str | None = None,
        token: str | None = None,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize client; unset arguments fall back to settings."""
        settings = get_settings()
        self.store_hash = store_hash if store_hash is not None else settings.bigcommerce_store_hash
        self.token = token if token is not None else settings.bigcommerce_storefront_api_token
        self.timeout = timeout if timeout is not None else settings.bigcommerce_timeout_seconds
        self._transport = transport
        self._http_client: httpx.AsyncClient | None = None

    @property
    def endpoint(self) -> str:
        return self.ENDPOINT_TEMPLATE.format(store_hash=self.store_hash)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._http_client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None

    async def execute(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """Send one GraphQL request and return its "data" object.

        Args:
            query: GraphQL document.
            variables: Query variables.

        Returns:
            The "data" member of the response envelope ({} when absent).

        Raises:
            CatalogConfigError: Store hash or token missing.
            CatalogResponseError: The envelope contains "errors".
            CatalogTransportError: Network, timeout, status or JSON failure.
        """
        if not self.token or not self.store_hash:
            logger.warning("BigCommerce credentials not configured, refusing catalog request")
            raise CatalogConfigError(
                "Missing BigCommerce API credentials "
                "(BIGCOMMERCE_STORE_HASH / BIGCOMMERCE_STOREFRONT_API_TOKEN)."
            )

        client = await self._get_client()
        try:
            response = await client.post(
                self.endpoint,
                json={"query": query, "variables": variables or {}},
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {self.token}",
                },
            )
        except httpx.HTTPError as e:
            raise CatalogTransportError(f"BigCommerce request failed: {e!r}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise CatalogTransportError(
                f"BigCommerce returned malformed JSON (status {response.status_code})"
            ) from e

        if not isinstance(payload, dict):
            raise CatalogTransportError("BigCommerce returned a non-object JSON payload")

        if payload.get("errors") is not None:
            raise CatalogResponseError(json.dumps(payload["errors"]))

        if response.is_error:
            raise CatalogTransportError(f"BigCommerce returned HTTP {response.status_code}")

        data = payload.get("data")
        return data if isinstance(data, dict) else {}

    async def products_by_category(self, category_id: int, first: int | None = None) -> list[CatalogProduct]:
        """List products in a category, in the order the catalog returns them.

        Args:
            category_id: Catalog category entity id.
            first: Page size (defaults to settings.add_on_category_limit).

        Returns:
            Reshaped catalog products.
        """
        first = first or get_settings().add_on_category_limit
        data = await self.execute(
            PRODUCTS_BY_CATEGORY_QUERY,
            {"categoryId": category_id, "first": first},
        )
        parsed = _parse_data(data)

        products = parsed.site.products if parsed.site else None
        edges = (products.edges if products else None) or []
        results = [edge.node.to_catalog_product() for edge in edges if edge.node is not None]
        logger.info(f"BigCommerce category {category_id} returned {len(results)} product(s)")
        return results

    async def product_by_id(self, product_id: int) -> CatalogProduct | None:
        """Get a single product, or None if the catalog has no such product."""
        data = await self.execute(PRODUCT_BY_ID_QUERY, {"productId": product_id})
        parsed = _parse_data(data)

        node = parsed.site.product if parsed.site else None
        if node is None:
            return None
        return node.to_catalog_product()


def _parse_data(data: dict[str, Any]) -> _QueryData:
    try:
        return _QueryData.model_validate(data)
    except ValidationError as e:
        raise CatalogResponseError(f"Unexpected BigCommerce response shape: {e.error_count()} error(s)") from e


# Singleton client instance
_client: BigCommerceClient | None = None


def get_bigcommerce_client() -> BigCommerceClient:
    """Get BigCommerce client singleton."""
    global _client
    if _client is None:
        _client = BigCommerceClient()
    return _client


async def close_bigcommerce_client() -> None:
    """Close the singleton's HTTP client (app shutdown)."""
    global _client
    if _client is not None:
        await _client.close()
        _client = None
