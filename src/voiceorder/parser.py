"""Turns a transcription into quantified line items.

Walks the token stream left to right. A number (digits or a numeral word)
sets the quantity for the token that follows it; any other token is an item
with quantity 1. Items are matched against the catalog and merged by product
id, so "2 aloo 1 aloo" yields a single line of 3.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .matcher import match_products
from .models import LineItem, ParseResult, Product
from .normalizer import tokenize
from .numerals import parse_quantity
from .synonyms import SynonymIndex, get_synonym_index

logger = logging.getLogger(__name__)

_MAX_PHRASE_TOKENS = 3


def parse_order(
    text: str | None,
    catalog: Sequence[Product],
    language: str | None = None,
    index: SynonymIndex | None = None,
) -> ParseResult:
    """Parse ``text`` against a catalog snapshot. Never raises."""
    tokens = tokenize(text)
    result = ParseResult(token_count=len(tokens))
    if not tokens:
        return result
    if index is None:
        index = get_synonym_index()

    i, n = 0, len(tokens)
    while i < n:
        quantity = 1
        value = parse_quantity(tokens[i], language)
        # Consecutive numbers: the one right before the item counts
        while value is not None:
            quantity = value
            i += 1
            if i >= n:
                break
            value = parse_quantity(tokens[i], language)
        if i >= n:
            break  # trailing number with nothing to quantify

        item, consumed = _item_at(tokens, i, index)
        i += consumed

        if quantity <= 0:
            logger.debug("Dropping '%s' ordered with quantity %d", item, quantity)
            continue

        matches = match_products(item, catalog, index)
        if not matches:
            logger.debug("No catalog match for '%s'", item)
            result.unresolved.append(item)
            continue

        product = matches[0]
        if not product.has_supplier:
            logger.debug("Match %s for '%s' has no resolved supplier", product.id, item)
            result.unresolved.append(item)
            continue

        existing = result.find(product.id)
        if existing is not None:
            existing.quantity += quantity
        else:
            result.items.append(LineItem(product=product, quantity=quantity))

    return result


def _item_at(tokens: list[str], i: int, index: SynonymIndex) -> tuple[str, int]:
    """Item term starting at ``i`` and how many tokens it spans.

    Adjacent tokens are taken together when they spell a declared multi-word
    form ("shimla mirch", "sarson ka tel"); the longest such form wins.
    """
    for span in range(min(_MAX_PHRASE_TOKENS, len(tokens) - i), 1, -1):
        phrase = " ".join(tokens[i:i + span])
        if index.is_surface_form(phrase):
            return phrase, span
    return tokens[i], 1
