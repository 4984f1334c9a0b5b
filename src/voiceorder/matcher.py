"""Fuzzy product matching: picks the catalog product a spoken word refers to.

Handles:
- Partial / plural words ("tomato" vs "tomatoes") by substring containment
- Hindi ↔ English names (aloo = आलू = potato) via the synonym index
- Single-character recognition typos (pyaj → pyaz) via edit distance
- Several suppliers selling the same thing → the cheapest wins

Scoring:
  Substring containment (either direction)  → 0
  Otherwise min Levenshtein over variants   → 0 .. max_distance-1, else no match

Only the best score survives; ties go to the lowest price, then catalog order.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from rapidfuzz.distance import Levenshtein

from .config import settings
from .models import MatchCandidate, Product
from .normalizer import fold
from .synonyms import SynonymIndex, get_synonym_index

logger = logging.getLogger(__name__)


def levenshtein(a: str, b: str, limit: int | None = None) -> int:
    """Edit distance (insert / delete / substitute = 1), case-insensitive.

    Compares code points, so Devanagari vowel signs count as characters.
    With ``limit`` set, any distance above it is reported as ``limit + 1``.
    """
    return Levenshtein.distance(a, b, processor=str.lower, score_cutoff=limit)


def score_candidates(
    token: str,
    catalog: Sequence[Product],
    index: SynonymIndex | None = None,
    max_distance: int | None = None,
) -> list[MatchCandidate]:
    """Every product that could be meant by ``token``, with its score, in catalog order."""
    if not token:
        return []
    if index is None:
        index = get_synonym_index()
    limit = settings.match_max_distance if max_distance is None else max_distance
    token = fold(token)

    candidates: list[MatchCandidate] = []
    for product in catalog:
        baseline = fold(product.name)
        if not baseline:
            continue
        if token in baseline or baseline in token:
            candidates.append(MatchCandidate(product, 0))
            continue
        best = min(levenshtein(token, v, limit) for v in index.variants_for(baseline))
        if best < limit:
            candidates.append(MatchCandidate(product, best))
    return candidates


def match_products(
    token: str,
    catalog: Sequence[Product],
    index: SynonymIndex | None = None,
    max_distance: int | None = None,
) -> list[Product]:
    """Best product for ``token`` as a 0- or 1-element list."""
    candidates = score_candidates(token, catalog, index, max_distance)
    if not candidates:
        return []

    min_score = min(c.score for c in candidates)
    best = [c for c in candidates if c.score == min_score]
    # min() returns the first of equal keys, so equal prices keep catalog order
    cheapest = min(best, key=lambda c: c.product.price)
    if len(best) > 1:
        logger.debug(
            "'%s': %d products at score %d, picked %s (%.2f)",
            token, len(best), min_score, cheapest.product.id, cheapest.product.price,
        )
    return [cheapest.product]


def best_match(
    token: str,
    catalog: Sequence[Product],
    index: SynonymIndex | None = None,
) -> Product | None:
    matches = match_products(token, catalog, index)
    return matches[0] if matches else None
