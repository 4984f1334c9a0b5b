"""Spoken confirmation via a text-to-speech webhook (fire-and-forget)."""

from __future__ import annotations

import asyncio
import logging

import httpx

from ..config import settings

logger = logging.getLogger(__name__)

MAX_RETRIES = 3
RETRY_BACKOFF = (1, 3, 5)  # seconds


async def send_speech(
    url: str,
    text: str,
    lang: str,
    *,
    max_retries: int = MAX_RETRIES,
) -> bool:
    """POST the sentence to the TTS webhook with retry + backoff.

    Never raises: an unsupported voice or locale is not the caller's problem.
    """
    payload = {"text": text, "lang": lang}
    for attempt in range(max_retries):
        try:
            async with httpx.AsyncClient(timeout=10) as client:
                resp = await client.post(url, json=payload)
                resp.raise_for_status()
            return True
        except Exception as e:
            wait = RETRY_BACKOFF[attempt] if attempt < len(RETRY_BACKOFF) else RETRY_BACKOFF[-1]
            if attempt < max_retries - 1:
                logger.warning("TTS attempt %d/%d failed: %s (retry in %ds)", attempt + 1, max_retries, e, wait)
                await asyncio.sleep(wait)
            else:
                logger.warning("TTS failed after %d attempts: %s", max_retries, e)
    return False


class SpeechAnnouncer:
    def __init__(self, url: str | None = None, max_retries: int | None = None) -> None:
        self.url = url or settings.tts_webhook_url
        self.max_retries = max_retries or settings.tts_max_retries
        self._pending: set[asyncio.Task] = set()

    async def speak(self, text: str, lang: str) -> bool:
        if not self.url:
            logger.debug("TTS webhook URL not configured; skipping")
            return False
        if not text:
            return False
        return await send_speech(self.url, text, lang, max_retries=self.max_retries)

    def announce(self, text: str, lang: str) -> asyncio.Task | None:
        """Schedule ``speak`` without waiting for it."""
        if not self.url:
            return None
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop; skipping announcement")
            return None
        task = loop.create_task(self.speak(text, lang))
        # Keep a reference until done so the task is not garbage collected
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    @property
    def pending(self) -> int:
        return len(self._pending)
