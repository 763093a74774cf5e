"""LLM package — prompt text, request-body assembly and the SDK call.

For new code, import from submodules directly::

    from quickgpt.llm.prompt_builder import create_completion_body
    from quickgpt.llm.completion import CompletionInvoker
"""

from .completion import CompletionInvoker
from .prompt_builder import create_completion_body, create_system_prompt
from .prompts import Intent

__all__ = [
    "CompletionInvoker",
    "Intent",
    "create_completion_body",
    "create_system_prompt",
]
