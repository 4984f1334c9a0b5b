"""Localized confirmation sentences for a parsed order."""

from __future__ import annotations

from .models import OrderOutcome, ParseResult

_TEMPLATES: dict[str, dict[str, str]] = {
    "en": {
        "added": "Added: {items}",
        "item": "{quantity} {name}",
        "supplier": " (Supplier: {supplier})",
        "not_found": " | Not found: {terms}",
        "separator": ", ",
        "not_understood": "Could not understand your order.",
        "no_items": "No valid items found.",
    },
    "hi": {
        "added": "जोड़ा गया: {items}",
        "item": "{quantity} {name}",
        "supplier": " (सप्लायर: {supplier})",
        "not_found": " | नहीं मिला: {terms}",
        "separator": ", ",
        "not_understood": "आपका ऑर्डर समझ नहीं आया।",
        "no_items": "कोई मान्य सामान नहीं मिला।",
    },
}

DEFAULT_LANGUAGE = "en"


def _templates(language: str | None) -> dict[str, str]:
    primary = (language or "").replace("_", "-").split("-", 1)[0].lower()
    return _TEMPLATES.get(primary, _TEMPLATES[DEFAULT_LANGUAGE])


def render_confirmation(
    result: ParseResult,
    language: str | None = None,
    *,
    with_suppliers: bool = True,
    with_unresolved: bool = True,
) -> str:
    """One sentence listing "<quantity> <name>" for every line item."""
    t = _templates(language)
    parts = []
    for line in result.items:
        text = t["item"].format(quantity=line.quantity, name=line.product.name)
        if with_suppliers and line.product.supplier_name:
            text += t["supplier"].format(supplier=line.product.supplier_name)
        parts.append(text)

    msg = t["added"].format(items=t["separator"].join(parts))
    if with_unresolved and result.unresolved:
        msg += t["not_found"].format(terms=t["separator"].join(result.unresolved))
    return msg


def render_outcome(outcome: OrderOutcome, result: ParseResult, language: str | None = None) -> str:
    """User-facing message for any outcome, including the failure cases."""
    t = _templates(language)
    if outcome is OrderOutcome.NOT_UNDERSTOOD:
        return t["not_understood"]
    if outcome is OrderOutcome.NO_ITEMS:
        return t["no_items"]
    return render_confirmation(result, language)
