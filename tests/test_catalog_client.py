"""Tests for the catalog listing service client."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from voiceorder.catalog import CatalogError
from voiceorder.catalog.client import CatalogClient, build_catalog

PRODUCTS = [
    {"id": "p1", "name": " Potato ", "price": 20, "unit": "kg", "supplierId": "s1 "},
    {"id": "p2", "name": "onion", "price": "30.5", "unit": "kg", "supplierId": "s2"},
    {"id": "p3", "name": "ghee", "price": 600, "unit": "kg", "supplierId": "gone"},
]
SUPPLIERS = [
    {"id": "s1", "name": "Ramesh Traders"},
    {"id": "s2"},
]


@pytest.fixture()
def catalog_client():
    """Create a CatalogClient with mocked HTTP client."""
    with patch.object(CatalogClient, "__init__", lambda self: None):
        client = CatalogClient.__new__(CatalogClient)
        client._base_url = "https://catalog.example.com"
        client._client = AsyncMock()
        return client


def _mock_response(payload, status_code=200):
    """Create a mock HTTP response with synchronous .json()."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = payload
    resp.text = str(payload)
    return resp


class TestBuildCatalog:
    def test_join_and_normalize(self):
        catalog = build_catalog(PRODUCTS, SUPPLIERS)
        potato = catalog[0]
        assert potato.id == "p1"
        assert potato.name == "potato"
        assert potato.price == 20.0
        assert potato.supplier_id == "s1"
        assert potato.supplier_name == "Ramesh Traders"

    def test_string_price(self):
        assert build_catalog(PRODUCTS, SUPPLIERS)[1].price == 30.5

    def test_nameless_supplier_gets_default(self):
        assert build_catalog(PRODUCTS, SUPPLIERS)[1].supplier_name == "Supplier"

    def test_unknown_supplier_is_unresolved(self):
        ghee = build_catalog(PRODUCTS, SUPPLIERS)[2]
        assert ghee.supplier_name is None
        assert not ghee.has_supplier

    def test_missing_price_defaults_to_zero(self):
        catalog = build_catalog([{"id": "x", "name": "salt"}], [])
        assert catalog[0].price == 0.0
        assert catalog[0].unit == ""

    def test_skips_bad_documents(self):
        docs = [
            {"id": "", "name": "salt"},
            {"id": "a", "name": "  "},
            {"id": "b", "name": "sugar", "price": "cheap"},
            {"id": "c", "name": "jaggery", "price": -5},
            {"id": "d", "name": "rice", "price": 40},
        ]
        assert [p.id for p in build_catalog(docs, [])] == ["d"]

    def test_non_finite_price_skipped(self):
        docs = [
            {"id": "a", "name": "onion", "price": "nan"},
            {"id": "b", "name": "onion", "price": 5},
            {"id": "c", "name": "onion", "price": "inf"},
        ]
        assert [p.id for p in build_catalog(docs, [])] == ["b"]

    def test_non_object_documents_skipped(self):
        docs = ["potato", None, 42, {"id": "d", "name": "rice", "price": 40}]
        assert [p.id for p in build_catalog(docs, [None, "s1"])] == ["d"]

    def test_supplier_name_coerced_to_str(self):
        catalog = build_catalog(
            [{"id": "p", "name": "rice", "supplierId": "s1"}],
            [{"id": "s1", "name": 1234}],
        )
        assert catalog[0].supplier_name == "1234"

    def test_preserves_order(self):
        assert [p.id for p in build_catalog(PRODUCTS, SUPPLIERS)] == ["p1", "p2", "p3"]


class TestFetchCatalog:
    @pytest.mark.asyncio
    async def test_fetches_products_then_suppliers(self, catalog_client):
        catalog_client._client.get = AsyncMock(
            side_effect=[_mock_response(PRODUCTS), _mock_response(SUPPLIERS)]
        )
        catalog = await catalog_client.fetch_catalog()
        assert [p.id for p in catalog] == ["p1", "p2", "p3"]
        urls = [c.args[0] for c in catalog_client._client.get.call_args_list]
        assert urls == [
            "https://catalog.example.com/products",
            "https://catalog.example.com/suppliers",
        ]

    @pytest.mark.asyncio
    async def test_accepts_wrapped_payload(self, catalog_client):
        catalog_client._client.get = AsyncMock(
            side_effect=[
                _mock_response({"products": PRODUCTS}),
                _mock_response({"suppliers": SUPPLIERS}),
            ]
        )
        catalog = await catalog_client.fetch_catalog()
        assert len(catalog) == 3

    @pytest.mark.asyncio
    async def test_no_caching_between_calls(self, catalog_client):
        catalog_client._client.get = AsyncMock(
            side_effect=[
                _mock_response(PRODUCTS), _mock_response(SUPPLIERS),
                _mock_response(PRODUCTS[:1]), _mock_response(SUPPLIERS),
            ]
        )
        first = await catalog_client.fetch_catalog()
        second = await catalog_client.fetch_catalog()
        assert len(first) == 3
        assert len(second) == 1
        assert catalog_client._client.get.call_count == 4

    @pytest.mark.asyncio
    async def test_http_status_error(self, catalog_client):
        catalog_client._client.get = AsyncMock(return_value=_mock_response("boom", status_code=500))
        with pytest.raises(CatalogError) as exc_info:
            await catalog_client.fetch_catalog()
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_transport_error(self, catalog_client):
        catalog_client._client.get = AsyncMock(side_effect=httpx.ConnectError("refused"))
        with pytest.raises(CatalogError):
            await catalog_client.fetch_catalog()

    @pytest.mark.asyncio
    async def test_unexpected_payload(self, catalog_client):
        catalog_client._client.get = AsyncMock(return_value=_mock_response({"items": []}))
        with pytest.raises(CatalogError):
            await catalog_client.fetch_catalog()

    @pytest.mark.asyncio
    async def test_invalid_json(self, catalog_client):
        resp = _mock_response(None)
        resp.json.side_effect = ValueError("not json")
        catalog_client._client.get = AsyncMock(return_value=resp)
        with pytest.raises(CatalogError):
            await catalog_client.fetch_catalog()

    @pytest.mark.asyncio
    async def test_malformed_entries_skipped(self, catalog_client):
        catalog_client._client.get = AsyncMock(
            side_effect=[_mock_response(["potato", None, *PRODUCTS]), _mock_response([None, *SUPPLIERS])]
        )
        catalog = await catalog_client.fetch_catalog()
        assert [p.id for p in catalog] == ["p1", "p2", "p3"]
