"""Domain values shared by the voice-order engine.

The catalog arrives from an external listing service as loosely-typed
documents; by the time anything in the engine sees it, it has been converted
into :class:`Product` values (see ``catalog.build_catalog`` and
``schemas.ProductIn``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class Product:
    """A catalog entry offered by one supplier."""

    id: str
    name: str                      # canonical, lower-cased, trimmed
    price: float = 0.0
    unit: str = ""
    supplier_id: str = ""
    supplier_name: str | None = None  # None when the supplier could not be resolved

    @property
    def has_supplier(self) -> bool:
        return bool(self.supplier_name)


@dataclass
class MatchCandidate:
    product: Product
    score: int  # edit distance, 0 = exact or substring match


@dataclass
class LineItem:
    product: Product
    quantity: int = 1


@dataclass
class ParseResult:
    """Outcome of parsing one transcription against one catalog snapshot."""

    items: list[LineItem] = field(default_factory=list)
    unresolved: list[str] = field(default_factory=list)
    token_count: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.items)

    def find(self, product_id: str) -> LineItem | None:
        for item in self.items:
            if item.product.id == product_id:
                return item
        return None


class OrderOutcome(Enum):
    NOT_UNDERSTOOD = "not_understood"  # empty or whitespace-only input
    NO_ITEMS = "no_items"              # tokens present, nothing matched
    PARTIAL = "partial"                # some items matched, some terms unresolved
    COMPLETE = "complete"              # every term matched

    @classmethod
    def of(cls, result: ParseResult) -> OrderOutcome:
        if result.token_count == 0:
            return cls.NOT_UNDERSTOOD
        if result.is_empty:
            return cls.NO_ITEMS
        if result.unresolved:
            return cls.PARTIAL
        return cls.COMPLETE
