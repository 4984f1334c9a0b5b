"""Async client for the catalog listing service using httpx."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from typing import Any

import httpx

from ..config import settings
from ..models import Product
from . import CatalogError

logger = logging.getLogger(__name__)

DEFAULT_SUPPLIER_NAME = "Supplier"  # supplier document exists but has no name


def _as_float(value: Any) -> float | None:
    if value in (None, ""):
        return 0.0
    try:
        price = float(value)
    except (TypeError, ValueError):
        return None
    return price if math.isfinite(price) else None


def build_catalog(
    product_docs: Iterable[dict[str, Any]],
    supplier_docs: Iterable[dict[str, Any]],
) -> list[Product]:
    """Join product documents with supplier documents into Product values.

    Supplier ids are trimmed before the join; a product whose supplier is
    unknown keeps ``supplier_name=None``. Documents that are not objects, lack
    an id or name, or carry a negative or non-finite price are skipped.
    """
    suppliers: dict[str, str] = {}
    for doc in supplier_docs:
        if not isinstance(doc, dict):
            logger.warning("Skipping malformed supplier document: %r", doc)
            continue
        sid = str(doc.get("id") or "").strip()
        if sid:
            suppliers[sid] = str(doc.get("name") or DEFAULT_SUPPLIER_NAME)

    catalog: list[Product] = []
    for doc in product_docs:
        if not isinstance(doc, dict):
            logger.warning("Skipping malformed catalog document: %r", doc)
            continue
        pid = str(doc.get("id") or "").strip()
        name = str(doc.get("name") or "").lower().strip()
        price = _as_float(doc.get("price"))
        if not pid or not name:
            logger.warning("Skipping catalog document without id/name: %r", doc)
            continue
        if price is None or price < 0:
            logger.warning("Skipping product %s with invalid price %r", pid, doc.get("price"))
            continue
        supplier_id = str(doc.get("supplierId") or "").strip()
        catalog.append(Product(
            id=pid,
            name=name,
            price=price,
            unit=str(doc.get("unit") or ""),
            supplier_id=supplier_id,
            supplier_name=suppliers.get(supplier_id),
        ))
    return catalog


class CatalogClient:
    """Reads products and suppliers from the listing service."""

    def __init__(self, base_url: str | None = None, timeout: float | None = None) -> None:
        self._base_url = (base_url or settings.catalog_url).rstrip("/")
        self._client = httpx.AsyncClient(timeout=timeout or settings.catalog_timeout)

    async def fetch_catalog(self) -> list[Product]:
        """Fresh catalog snapshot; nothing is cached between calls."""
        product_docs = await self._get_list("products")
        supplier_docs = await self._get_list("suppliers")
        catalog = build_catalog(product_docs, supplier_docs)
        unresolved = sum(1 for p in catalog if not p.has_supplier)
        if unresolved:
            logger.warning("%d of %d products have no resolvable supplier", unresolved, len(catalog))
        logger.info("Fetched catalog: %d products, %d suppliers", len(catalog), len(supplier_docs))
        return catalog

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def _get_list(self, resource: str) -> list[dict[str, Any]]:
        url = f"{self._base_url}/{resource}"
        try:
            resp = await self._client.get(url)
        except httpx.HTTPError as e:
            raise CatalogError(f"Catalog HTTP error: {e}") from e

        if resp.status_code != 200:
            raise CatalogError(
                f"Catalog service returned {resp.status_code} for {resource}: {resp.text}",
                status_code=resp.status_code,
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise CatalogError(f"Catalog service sent invalid JSON for {resource}") from e
        if isinstance(data, dict):
            data = data.get(resource)
        if not isinstance(data, list):
            raise CatalogError(f"Unexpected catalog payload for {resource}")
        return data
