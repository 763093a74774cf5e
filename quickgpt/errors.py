"""Exception types raised by QuickGPT.

Errors from the OpenAI SDK itself (``openai.APIError`` and friends) are
not wrapped — they reach the caller unchanged.
"""


class QuickGPTError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationError(QuickGPTError):
    """The client cannot be built, e.g. no API key was found."""


class NoResponseError(QuickGPTError):
    """The model answered without any text content."""
