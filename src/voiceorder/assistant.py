"""Voice order flow: transcription in, parsed order and confirmation out."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from .confirmation import render_outcome
from .models import OrderOutcome, ParseResult, Product
from .parser import parse_order
from .speech.announcer import SpeechAnnouncer
from .synonyms import SynonymIndex

logger = logging.getLogger(__name__)


@dataclass
class OrderReply:
    outcome: OrderOutcome
    message: str
    result: ParseResult


def process_order(
    text: str | None,
    catalog: Sequence[Product],
    language: str,
    announcer: SpeechAnnouncer | None = None,
    index: SynonymIndex | None = None,
) -> OrderReply:
    """Parse a transcription and build the reply shown (and spoken) to the vendor.

    Blank input short-circuits to NOT_UNDERSTOOD without touching the catalog.
    Successful orders are announced when an announcer is given; the
    announcement is scheduled after the result is final and never awaited.
    """
    if not text or not text.strip():
        result = ParseResult()
        outcome = OrderOutcome.NOT_UNDERSTOOD
        return OrderReply(outcome, render_outcome(outcome, result, language), result)

    result = parse_order(text, catalog, language=language, index=index)
    outcome = OrderOutcome.of(result)
    message = render_outcome(outcome, result, language)
    logger.info(
        "Voice order [%s]: %d tokens → %d items, %d unresolved (%s)",
        language, result.token_count, len(result.items), len(result.unresolved), outcome.value,
    )

    if announcer is not None and outcome in (OrderOutcome.COMPLETE, OrderOutcome.PARTIAL):
        announcer.announce(message, language)
    return OrderReply(outcome, message, result)
