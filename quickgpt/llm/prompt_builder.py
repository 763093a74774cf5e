"""Prompt builder — turns an intent and a user prompt into a request body.

Pure Python: no LLM calls, no I/O.  The client fills in its current
configuration (model, format flag, token budget) and hands the result
to :class:`~quickgpt.llm.completion.CompletionInvoker`.

Message layout
--------------
The system message is always first and the user message always second.
The user message content is a list of parts: the text part first, then
an ``image_url`` part when an image reference was given::

    [
        {"role": "system", "content": "<instruction>"},
        {"role": "user", "content": [
            {"type": "text", "text": "<prompt>"},
            {"type": "image_url", "image_url": {"url": "<image>"}},
        ]},
    ]
"""

from __future__ import annotations

import logging

from .prompts import (
    INTENT_CLAUSES,
    LANGUAGE_SUFFIX,
    NO_FORMAT_CLAUSE,
    PREAMBLE,
    Intent,
)

logger = logging.getLogger(__name__)


def create_system_prompt(intent: Intent | str, *, format: bool = False) -> str:
    """Build the system instruction for *intent*.

    ``format=False`` adds the clause forbidding LaTeX/Markdown/HTML.
    Plain string labels (``"eli5"``) are accepted; unknown ones raise
    ``ValueError``.
    """
    intent = Intent(intent)

    parts = [PREAMBLE]
    if not format:
        parts.append(NO_FORMAT_CLAUSE)
    parts.extend(INTENT_CLAUSES[intent])
    parts.append(LANGUAGE_SUFFIX)
    return "".join(parts)


def build_user_content(prompt: str, image: str | None = None) -> list[dict]:
    """User message parts: text first, optional image reference after it."""
    content: list[dict] = [{"type": "text", "text": prompt}]
    if image:
        content.append({"type": "image_url", "image_url": {"url": image}})
    return content


def create_completion_body(
    prompt: str,
    *,
    model: str,
    max_tokens: int,
    intent: Intent | str | None = None,
    format: bool = False,
    system_prompt: str | None = None,
    image: str | None = None,
) -> dict:
    """Assemble the chat-completion request for the OpenAI SDK.

    Parameters
    ----------
    prompt : str
        The user's text.
    model : str
        Model identifier, e.g. ``"gpt-4o"``.
    max_tokens : int
        Completion token ceiling.
    intent : Intent | str | None
        Selects the generated system prompt.  Ignored when
        *system_prompt* is given.
    format : bool
        Whether rich formatting is allowed in the reply.
    system_prompt : str | None
        Replaces the generated template entirely (custom completions).
    image : str | None
        URL or ``data:`` URL of an image to attach after the text.
    """
    if system_prompt is None:
        if intent is None:
            raise ValueError("Either an intent or a system_prompt is required")
        system_prompt = create_system_prompt(intent, format=format)

    body = {
        "model": model,
        "max_tokens": max_tokens,
        "messages": [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": build_user_content(prompt, image)},
        ],
    }
    logger.debug(
        f"Built completion body (model={model}, max_tokens={max_tokens}, "
        f"intent={intent}, image={'yes' if image else 'no'})"
    )
    return body
