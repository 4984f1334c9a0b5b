"""Spoken quantity words → integers.

Keys are in the form produced by ``normalizer.tokenize`` (NFKC + lowercase).
"""

from __future__ import annotations

from .normalizer import fold

# Longer digit runs are not spoken quantities
_MAX_QUANTITY_DIGITS = 6

_NUMERALS: dict[str, dict[str, int]] = {
    "en": {
        "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
        "six": 6, "seven": 7, "eight": 8, "nine": 9, "ten": 10,
    },
    "hi": {
        # Latin transliteration
        "ek": 1, "do": 2, "teen": 3, "char": 4, "chaar": 4,
        "paanch": 5, "panch": 5, "chhe": 6, "chhah": 6,
        "saat": 7, "aath": 8, "nau": 9, "das": 10,
        # Devanagari
        "एक": 1, "दो": 2, "तीन": 3, "चार": 4, "पाँच": 5, "पांच": 5,
        "छह": 6, "छः": 6, "छे": 6, "सात": 7, "आठ": 8, "नौ": 9, "दस": 10,
    },
}

# English is always consulted: mixed-language speech is the norm.
_ALWAYS = ("en",)

# Folded once so Devanagari keys compare equal to tokenizer output.
_TABLES: dict[str, dict[str, int]] = {
    lang: {fold(word): value for word, value in table.items()}
    for lang, table in _NUMERALS.items()
}
_ALL: dict[str, int] = {}
for _table in _TABLES.values():
    _ALL.update(_table)


def supported_languages() -> list[str]:
    return sorted(_TABLES)


def _primary_subtag(language: str | None) -> str:
    if not language:
        return ""
    return language.replace("_", "-").split("-", 1)[0].lower()


def _table_for(language: str | None) -> dict[str, int]:
    primary = _primary_subtag(language)
    if primary not in _TABLES:
        return _ALL
    merged: dict[str, int] = {}
    for lang in (*_ALWAYS, primary):
        merged.update(_TABLES[lang])
    return merged


def resolve_numeral(token: str, language: str | None = None) -> int | str:
    """Return the value of a spelled-out number, or the token unchanged.

    ``language`` (e.g. "hi-IN") narrows lookup to that language plus English;
    ``None`` or an unsupported tag consults every table.
    """
    return _table_for(language).get(token, token)


def parse_quantity(token: str, language: str | None = None) -> int | None:
    """Quantity expressed by a token, or None if the token is not a number.

    Accepts numeral words and runs of decimal digits (ASCII or Devanagari)
    up to six digits long.
    """
    value = resolve_numeral(token, language)
    if isinstance(value, int):
        return value
    if token.isdecimal() and len(token) <= _MAX_QUANTITY_DIGITS:
        return int(token)
    return None
