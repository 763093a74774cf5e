"""Completion invoker — sends a built request body through the OpenAI SDK.

Only the first choice's text is returned.  SDK errors (auth, rate limit,
connection) propagate unchanged; nothing here retries.
"""

from __future__ import annotations

import logging
import time

from quickgpt.errors import NoResponseError

logger = logging.getLogger(__name__)


class CompletionInvoker:
    """Wraps an ``openai.OpenAI`` (or compatible) client."""

    def __init__(self, client):
        self._client = client

    def complete(self, body: dict) -> str:
        """Send *body* to ``chat.completions.create`` and return the reply text."""
        start = time.time()
        response = self._client.chat.completions.create(**body)
        elapsed = (time.time() - start) * 1000

        choices = getattr(response, "choices", None) or []
        content = choices[0].message.content if choices else None
        if not content:
            logger.warning(f"Empty completion from model={body.get('model')}")
            raise NoResponseError("No response from the model")

        logger.debug(
            f"Completion ok (model={body.get('model')}, "
            f"parts={len(body['messages'][-1]['content'])}, {elapsed:.0f} ms)"
        )
        return content
