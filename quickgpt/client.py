"""QuickGPT — one-call intents on top of the OpenAI chat-completion API.

Usage::

    from quickgpt import QuickGPT

    gpt = QuickGPT()                      # key from OPENAI_API_KEY / .env
    gpt.eli5("limit of 1/x as x approaches infinity")
    gpt.true_or_false("The earth is flat")       # -> False
    gpt.yes_or_no("Is Python dynamically typed?")  # -> "Yes"

    haiku = gpt.create_custom_completion("Reply only with a haiku.")
    haiku("autumn in Kyoto")

Each façade method passes its intent down explicitly; the request body is
built fresh per call from the client's current :class:`ClientConfig`.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Callable

from openai import OpenAI

from quickgpt.errors import ConfigurationError
from quickgpt.llm.completion import CompletionInvoker
from quickgpt.llm.prompt_builder import create_completion_body, create_system_prompt
from quickgpt.llm.prompts import Intent
from quickgpt.settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = (
    "API Key is required. Set OPENAI_API_KEY in your environment variables. "
    'Or pass it as an argument like the following: QuickGPT(api_key="your-api-key")'
)


@dataclass
class ClientConfig:
    """Per-client knobs.  Mutated in place by the QuickGPT setters.

    Defaults live in :class:`~quickgpt.settings.Settings`; build one with
    :meth:`from_settings`.
    """

    model: str
    format: bool
    max_tokens: int

    @classmethod
    def from_settings(cls, s: Settings) -> "ClientConfig":
        return cls(
            model=s.DEFAULT_MODEL,
            format=s.DEFAULT_FORMAT,
            max_tokens=s.DEFAULT_MAX_TOKENS,
        )


class QuickGPT:
    """Convenience client exposing one method per intent."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        settings: Settings | None = None,
        **client_options,
    ):
        if settings is None:
            # Env is read per construction, not frozen at import.
            s = default_settings
            key = api_key or os.getenv("OPENAI_API_KEY")
        else:
            s = settings
            key = api_key or s.OPENAI_API_KEY
        if not key:
            raise ConfigurationError(MISSING_KEY_MESSAGE)

        if s.OPENAI_BASE_URL:
            client_options.setdefault("base_url", s.OPENAI_BASE_URL)
        if s.REQUEST_TIMEOUT > 0:
            client_options.setdefault("timeout", s.REQUEST_TIMEOUT)

        self.openai = OpenAI(api_key=key, **client_options)
        self.config = ClientConfig.from_settings(s)
        self._invoker = CompletionInvoker(self.openai)
        logger.info(f"QuickGPT ready (model={self.config.model})")

    # ── Configuration ─────────────────────────────────────────────

    def set_model(self, model: str) -> None:
        """Model to use, e.g. ``"gpt-4"``, ``"gpt-4o"``, ``"gpt-4o-mini"``."""
        self.config.model = model
        logger.debug(f"model -> {model}")

    def set_format(self, format: bool) -> None:
        """Whether replies may use LaTeX, Markdown or HTML."""
        self.config.format = format
        logger.debug(f"format -> {format}")

    def set_max_token(self, token: int) -> None:
        """Maximum token length of the reply."""
        self.config.max_tokens = token
        logger.debug(f"max_tokens -> {token}")

    # ── Request assembly ──────────────────────────────────────────

    def create_system_prompt(self, intent: Intent | str) -> str:
        return create_system_prompt(intent, format=self.config.format)

    def create_completion_body(
        self,
        prompt: str,
        *,
        intent: Intent | str | None = None,
        system_prompt: str | None = None,
        image: str | None = None,
    ) -> dict:
        return create_completion_body(
            prompt,
            model=self.config.model,
            max_tokens=self.config.max_tokens,
            intent=intent,
            format=self.config.format,
            system_prompt=system_prompt,
            image=image,
        )

    def request(
        self,
        prompt: str,
        intent: Intent | str | None = None,
        *,
        system_prompt: str | None = None,
        image: str | None = None,
    ) -> str:
        """Build the body for *intent* (or *system_prompt*) and send it."""
        body = self.create_completion_body(
            prompt, intent=intent, system_prompt=system_prompt, image=image
        )
        return self._invoker.complete(body)

    # ── Intents ───────────────────────────────────────────────────

    def ask(self, prompt: str, image: str | None = None) -> str:
        """Ask a question and get a response."""
        return self.request(prompt, Intent.ASK, image=image)

    def just_answer(self, prompt: str, image: str | None = None) -> str:
        """Ask a question and get an answer without additional explanation."""
        return self.request(prompt, Intent.JUST_ANSWER, image=image)

    def eli5(self, prompt: str, image: str | None = None) -> str:
        """Explain Like I'm 5."""
        return self.request(prompt, Intent.ELI5, image=image)

    def explain(self, prompt: str, image: str | None = None) -> str:
        return self.request(prompt, Intent.EXPLAIN, image=image)

    def summarize(self, prompt: str, image: str | None = None) -> str:
        return self.request(prompt, Intent.SUMMARIZE, image=image)

    def evaluate(self, prompt: str, image: str | None = None) -> str:
        return self.request(prompt, Intent.EVALUATE, image=image)

    def true_or_false(self, prompt: str, image: str | None = None) -> bool:
        """True iff the lower-cased reply contains ``"true"``.

        A plain substring check: ``"Not true"`` counts as True.
        """
        response = self.request(prompt, Intent.TRUE_OR_FALSE, image=image)
        return "true" in response.lower()

    def yes_or_no(self, prompt: str, image: str | None = None) -> str:
        """``"Yes"`` / ``"No"``, derived from :meth:`true_or_false`."""
        return "Yes" if self.true_or_false(prompt, image) else "No"

    # ── Custom intents ────────────────────────────────────────────

    def create_custom_completion(
        self, system_prompt: str
    ) -> Callable[..., str]:
        """Return ``fn(prompt, image=None) -> str`` bound to *system_prompt*.

        The returned function reads this client's configuration at call
        time, so later ``set_model`` / ``set_max_token`` calls apply.
        """

        def custom_completion(prompt: str, image: str | None = None) -> str:
            return self.request(prompt, system_prompt=system_prompt, image=image)

        return custom_completion
