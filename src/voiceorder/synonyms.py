"""Multilingual product synonyms (canonical key → surface forms).

Surface forms cover English names, Hindi in Latin transliteration and Hindi in
Devanagari. The index is built once per process and never mutated; a JSON
file named by ``settings.synonyms_file`` can extend it at build time.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

from .config import settings
from .normalizer import fold

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Static table
# ---------------------------------------------------------------------------

_PRODUCT_SYNONYMS: dict[str, tuple[str, ...]] = {
    # --- Vegetables ---
    "onion": ("onions", "pyaz", "pyaaz", "प्याज"),
    "tomato": ("tomatoes", "tamatar", "टमाटर"),
    "potato": ("potatoes", "aloo", "alu", "आलू"),
    "capsicum": ("shimla mirch", "शिमला मिर्च", "bell pepper"),
    "cabbage": ("patta gobhi", "पत्ता गोभी"),
    "cauliflower": ("phool gobhi", "gobhi", "फूल गोभी"),
    "carrot": ("carrots", "gajar", "गाजर"),
    "beetroot": ("chakundar", "चकुंदर"),
    "ginger": ("adrak", "अदरक"),
    "garlic": ("lehsun", "lahsun", "लहसुन"),
    "green chilli": ("hari mirch", "हरी मिर्च", "chillies", "chilli"),
    "coriander": ("dhaniya", "धनिया", "cilantro"),
    "spinach": ("palak", "पालक"),
    "peas": ("matar", "मटर", "green peas"),
    "lemon": ("lemons", "nimbu", "नींबू"),
    "radish": ("mooli", "मूली"),
    "pumpkin": ("kaddu", "कद्दू"),
    # --- Dairy ---
    "paneer": ("पनीर", "cottage cheese"),
    "milk": ("doodh", "दूध"),
    "curd": ("dahi", "दही", "yogurt"),
    "butter": ("makhan", "मक्खन"),
    "ghee": ("घी", "clarified butter"),
    "cheese": ("cheddar", "mozzarella"),
    "cream": ("malai", "मलाई"),
    "lassi": ("लस्सी",),
    # --- Flour, grains ---
    "atta": ("flour", "aata", "आटा", "wheat flour"),
    "maida": ("मैदा", "refined flour"),
    "rice": ("chawal", "चावल"),
    "poha": ("flattened rice", "पोहा"),
    "suji": ("semolina", "सूजी", "rava"),
    "besan": ("gram flour", "बेसन"),
    # --- Bakery ---
    "bread": ("loaf", "slice", "ब्रेड"),
    "white bread": ("सफेद ब्रेड", "normal bread"),
    "brown bread": ("ब्राउन ब्रेड", "whole wheat bread"),
    "bun": ("bread bun",),
    "pav": ("पाव", "bun"),
    # --- Meat, eggs ---
    "egg": ("eggs", "anda", "ande", "अंडा", "अंडे"),
    "chicken": ("मुर्गा", "murgi", "चिकन"),
    "mutton": ("goat meat", "मटन"),
    "fish": ("मछली", "machhli"),
    # --- Spices ---
    "salt": ("namak", "नमक"),
    "turmeric": ("haldi", "हल्दी"),
    "chilli powder": ("lal mirch", "लाल मिर्च"),
    "cumin": ("jeera", "जीरा"),
    "hing": ("asafoetida", "हींग"),
    "garam masala": ("गरम मसाला",),
    "chole masala": ("छोले मसाला",),
    "chat masala": ("chaat masala", "चाट मसाला"),
    "black pepper": ("kali mirch", "काली मिर्च"),
    # --- Oil, sweeteners ---
    "oil": ("tel", "तेल", "cooking oil", "refined oil"),
    "mustard oil": ("sarson ka tel", "सरसों का तेल"),
    "sugar": ("chini", "चीनी"),
    "jaggery": ("gud", "गुड़"),
    # --- Street-food supplies ---
    "sev": ("bhujia", "सेव", "भुजिया"),
    "puri": ("poori", "पूरी"),
    "papdi": ("पापड़ी",),
    "samosa": ("समोसा",),
    "kachori": ("कचौरी",),
    "bhature": ("भटूरे",),
    "noodles": ("चाउमीन", "chowmein"),
    "sauce": ("chutney", "सॉस", "चटनी"),
}


class SynonymIndex:
    """Read-only lookup between canonical keys and their surface forms."""

    def __init__(self, entries: Mapping[str, Iterable[str]]) -> None:
        variants: dict[str, frozenset[str]] = {}
        reverse: dict[str, str] = {}
        for raw_key, forms in entries.items():
            key = fold(raw_key)
            if not key:
                continue
            folded = {fold(f) for f in forms} - {""}
            folded.add(key)
            variants[key] = variants.get(key, frozenset()) | folded
        # Keys first, then forms in declaration order: first declaration wins.
        for key in variants:
            reverse.setdefault(key, key)
        for key, forms in variants.items():
            for form in sorted(forms):
                reverse.setdefault(form, key)
        self._variants = MappingProxyType(variants)
        self._reverse = MappingProxyType(reverse)

    def variants(self, key: str) -> frozenset[str]:
        """Surface forms of ``key`` plus the key itself; ``{key}`` if undeclared."""
        key = fold(key)
        return self._variants.get(key, frozenset({key}))

    def lookup(self, surface_form: str) -> str | None:
        """Canonical key for a surface form, or None."""
        return self._reverse.get(fold(surface_form))

    def variants_for(self, name: str) -> frozenset[str]:
        """Variants for a catalog product name.

        Uses the name as a key when declared, otherwise the key that lists the
        name as one of its forms ("potato" → potato's forms even when the
        catalog calls it "potatoes").
        """
        name = fold(name)
        if name in self._variants:
            return self._variants[name]
        key = self._reverse.get(name)
        if key is not None:
            return self._variants[key] | {name}
        return frozenset({name})

    def is_surface_form(self, phrase: str) -> bool:
        return fold(phrase) in self._reverse

    def keys(self) -> list[str]:
        return list(self._variants)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and fold(key) in self._variants

    def __len__(self) -> int:
        return len(self._variants)


def load_synonym_file(path: str | Path) -> dict[str, list[str]]:
    """Load ``{"key": ["form", ...]}`` from a JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Synonyms file {path} must contain a JSON object")
    entries: dict[str, list[str]] = {}
    for key, forms in data.items():
        if isinstance(forms, str):
            forms = [forms]
        entries[str(key)] = [str(f) for f in forms]
    return entries


def build_synonym_index(extra: Mapping[str, Iterable[str]] | None = None) -> SynonymIndex:
    """Build an index from the static table, extended by ``extra`` entries."""
    entries: dict[str, list[str]] = {k: list(v) for k, v in _PRODUCT_SYNONYMS.items()}
    for key, forms in (extra or {}).items():
        entries.setdefault(key, []).extend(forms)
    return SynonymIndex(entries)


@lru_cache(maxsize=1)
def get_synonym_index() -> SynonymIndex:
    """Process-wide index, built on first use."""
    extra = None
    if settings.synonyms_file:
        extra = load_synonym_file(settings.synonyms_file)
        logger.info("Loaded %d synonym entries from %s", len(extra), settings.synonyms_file)
    index = build_synonym_index(extra)
    logger.info("Synonym index ready: %d canonical keys", len(index))
    return index
