"""Add-on resolution for a primary product.

Priority:
1. Manual mapping (non-empty) -> returned as stored, name/price unset
2. Category-driven mode (if a category id is configured) -> catalog products
   in that category, minus the product itself, in catalog order
3. Nothing configured -> empty list

An empty list is a valid result. Catalog failures propagate as CatalogError.
"""

import logging

from addon_api.schemas import AddOnDescriptor
from addon_api.services.bigcommerce_client import BigCommerceClient
from addon_api.stores.mappings import MappingStore

logger = logging.getLogger("uvicorn.error")


async def resolve_addons(
    product_id: int,
    *,
    store: MappingStore,
    category_id: int | None,
    client: BigCommerceClient,
) -> list[AddOnDescriptor]:
    """Resolve the add-ons offered alongside a product.

    Args:
        product_id: Primary product id.
        store: Manual mapping store.
        category_id: Add-on category id, or None if category-driven mode is off.
        client: Catalog client used in category-driven mode.

    Returns:
        Ordered add-on descriptors (possibly empty).
    """
    manual = store.get(product_id)
    if manual:
        logger.info(f"Resolved {len(manual)} manual add-on(s) for product_id={product_id}")
        return [
            AddOnDescriptor(
                product_id=ref.product_id,
                variant_id=ref.variant_id or None,
                name=None,
                price=None,
            )
            for ref in manual
        ]

    if category_id is None:
        return []

    products = await client.products_by_category(category_id)
    addons = [
        AddOnDescriptor(
            product_id=product.product_id,
            variant_id=product.variant_id,
            name=product.name,
            price=product.price,
        )
        for product in products
        if product.product_id != product_id
    ]
    logger.info(
        f"Resolved {len(addons)} category add-on(s) for product_id={product_id} "
        f"from category_id={category_id}"
    )
    return addons
