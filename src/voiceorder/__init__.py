"""Voice order interpretation: spoken shopping lists → catalog line items."""

from .confirmation import render_confirmation, render_outcome
from .matcher import levenshtein, match_products
from .models import LineItem, MatchCandidate, OrderOutcome, ParseResult, Product
from .normalizer import tokenize
from .numerals import parse_quantity, resolve_numeral
from .parser import parse_order
from .synonyms import SynonymIndex, build_synonym_index, get_synonym_index

__version__ = "0.1.0"

__all__ = [
    "LineItem",
    "MatchCandidate",
    "OrderOutcome",
    "ParseResult",
    "Product",
    "SynonymIndex",
    "build_synonym_index",
    "get_synonym_index",
    "levenshtein",
    "match_products",
    "parse_order",
    "parse_quantity",
    "render_confirmation",
    "render_outcome",
    "resolve_numeral",
    "tokenize",
]
