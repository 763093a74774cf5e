"""QuickGPT — named-intent convenience client for OpenAI chat completions."""

from .client import ClientConfig, QuickGPT
from .errors import ConfigurationError, NoResponseError, QuickGPTError
from .llm.prompts import Intent

__version__ = "0.1.0"

__all__ = [
    "ClientConfig",
    "ConfigurationError",
    "Intent",
    "NoResponseError",
    "QuickGPT",
    "QuickGPTError",
]
