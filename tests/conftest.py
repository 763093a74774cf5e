"""Shared fixtures — a QuickGPT wired to a fake OpenAI SDK client.

No test ever reaches the network: ``quickgpt.client.OpenAI`` is patched
and ``chat.completions.create`` returns canned responses.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from quickgpt.settings import Settings


def make_response(content):
    """Mimic the SDK's ChatCompletion: ``choices[0].message.content``."""
    message = SimpleNamespace(role="assistant", content=content)
    return SimpleNamespace(choices=[SimpleNamespace(index=0, message=message)])


@pytest.fixture
def quick_settings():
    return Settings(
        OPENAI_API_KEY="sk-test",
        OPENAI_BASE_URL="",
        DEFAULT_MODEL="gpt-4o",
        DEFAULT_FORMAT=False,
        DEFAULT_MAX_TOKENS=1000,
        REQUEST_TIMEOUT=0.0,
    )


@pytest.fixture
def fake_openai():
    """Patched ``OpenAI`` class; ``.return_value`` is the SDK instance."""
    with patch("quickgpt.client.OpenAI") as mock_cls:
        sdk = MagicMock()
        sdk.chat.completions.create.return_value = make_response("ok")
        mock_cls.return_value = sdk
        yield mock_cls


@pytest.fixture
def gpt(fake_openai, quick_settings):
    from quickgpt.client import QuickGPT

    return QuickGPT(settings=quick_settings)


@pytest.fixture
def create(gpt):
    """The fake ``chat.completions.create`` behind *gpt*."""
    return gpt.openai.chat.completions.create
