"""Tests for add-on resolution (no network calls)."""

import pytest

from addon_api.schemas import AddOnDescriptor, AddOnReference
from addon_api.services.bigcommerce_client import CatalogProduct, CatalogResponseError
from addon_api.services.resolver import resolve_addons
from addon_api.stores.mappings import MappingStore


class FakeCatalog:
    """Stands in for BigCommerceClient.products_by_category."""

    def __init__(self, products: list[CatalogProduct] | None = None, error: Exception | None = None):
        self.products = products or []
        self.error = error
        self.calls: list[int] = []

    async def products_by_category(self, category_id: int) -> list[CatalogProduct]:
        self.calls.append(category_id)
        if self.error is not None:
            raise self.error
        return self.products


@pytest.mark.asyncio
async def test_manual_mapping_wins_over_category() -> None:
    store = MappingStore()
    store.put(
        101,
        [AddOnReference(product_id=111, variant_id=222), AddOnReference(product_id=112)],
    )
    catalog = FakeCatalog([CatalogProduct(product_id=500, name="Gift wrap", price=4.0)])

    addons = await resolve_addons(101, store=store, category_id=7, client=catalog)

    assert addons == [
        AddOnDescriptor(product_id=111, variant_id=222, name=None, price=None),
        AddOnDescriptor(product_id=112, variant_id=None, name=None, price=None),
    ]
    assert catalog.calls == []


@pytest.mark.asyncio
async def test_empty_manual_mapping_falls_back_to_category() -> None:
    store = MappingStore()
    store.put(101, [])
    catalog = FakeCatalog([CatalogProduct(product_id=500, name="Gift wrap", price=4.0, variant_id=9)])

    addons = await resolve_addons(101, store=store, category_id=7, client=catalog)

    assert addons == [AddOnDescriptor(product_id=500, variant_id=9, name="Gift wrap", price=4.0)]
    assert catalog.calls == [7]


@pytest.mark.asyncio
async def test_no_mapping_and_no_category_is_empty() -> None:
    catalog = FakeCatalog([CatalogProduct(product_id=500)])

    addons = await resolve_addons(101, store=MappingStore(), category_id=None, client=catalog)

    assert addons == []
    assert catalog.calls == []


@pytest.mark.asyncio
async def test_category_excludes_self_and_keeps_order() -> None:
    catalog = FakeCatalog(
        [
            CatalogProduct(product_id=303, name="C", price=3.0, variant_id=33),
            CatalogProduct(product_id=101, name="Self", price=1.0, variant_id=11),
            CatalogProduct(product_id=202, name="B", price=2.0, variant_id=22),
            CatalogProduct(product_id=404, name="D", price=4.0, variant_id=44),
        ]
    )

    addons = await resolve_addons(101, store=MappingStore(), category_id=7, client=catalog)

    assert [a.product_id for a in addons] == [303, 202, 404]


@pytest.mark.asyncio
async def test_category_entry_without_price_or_variant_yields_nulls() -> None:
    catalog = FakeCatalog([CatalogProduct(product_id=500, name="Sticker")])

    addons = await resolve_addons(101, store=MappingStore(), category_id=7, client=catalog)

    assert addons == [AddOnDescriptor(product_id=500, variant_id=None, name="Sticker", price=None)]


@pytest.mark.asyncio
async def test_catalog_failure_propagates() -> None:
    catalog = FakeCatalog(error=CatalogResponseError("boom"))

    with pytest.raises(CatalogResponseError):
        await resolve_addons(101, store=MappingStore(), category_id=7, client=catalog)
