"""QuickGPT CLI — one sub-command per intent.

Usage:
    quickgpt ask "What is a limit?"
    quickgpt eli5 "limit of 1/x as x approaches infinity"
    quickgpt true-or-false "Water boils at 100C at sea level"
    quickgpt summarize "$(cat notes.txt)" --max-tokens 200
    quickgpt custom "autumn in Kyoto" --system "Reply only with a haiku."

Common options: --model, --format, --max-tokens, --image URL.
Needs OPENAI_API_KEY in the environment or in .env.
"""

from __future__ import annotations

import argparse
import logging
import sys

from openai import OpenAIError

from quickgpt.client import QuickGPT
from quickgpt.errors import QuickGPTError
from quickgpt.settings import settings

logger = logging.getLogger("quickgpt-cli")

# sub-command → QuickGPT method
COMMANDS = {
    "ask": "ask",
    "just-answer": "just_answer",
    "eli5": "eli5",
    "explain": "explain",
    "summarize": "summarize",
    "evaluate": "evaluate",
    "true-or-false": "true_or_false",
    "yes-or-no": "yes_or_no",
}


def _build_client(args) -> QuickGPT:
    gpt = QuickGPT(api_key=args.api_key)
    if args.model is not None:
        gpt.set_model(args.model)
    if args.format:
        gpt.set_format(True)
    if args.max_tokens is not None:
        gpt.set_max_token(args.max_tokens)
    return gpt


def cmd_intent(args) -> str:
    """Run one of the named intents and return printable output."""
    gpt = _build_client(args)
    method = getattr(gpt, COMMANDS[args.command])
    result = method(args.prompt, args.image)
    return str(result)


def cmd_custom(args) -> str:
    """Run an ad-hoc intent defined by --system."""
    gpt = _build_client(args)
    return gpt.create_custom_completion(args.system)(args.prompt, args.image)


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("prompt", help="Prompt text sent as the user message")
    common.add_argument("--image", help="Image URL (or data: URL) to attach")
    common.add_argument("--model", help=f"Model name (default: {settings.DEFAULT_MODEL})")
    common.add_argument("--format", action="store_true",
                        help="Allow LaTeX / Markdown / HTML in the reply")
    common.add_argument("--max-tokens", type=int,
                        help=f"Reply token ceiling (default: {settings.DEFAULT_MAX_TOKENS})")
    common.add_argument("--api-key", help="OpenAI API key (default: $OPENAI_API_KEY)")

    parser = argparse.ArgumentParser(
        prog="quickgpt",
        description="Ask, explain, summarize and more with one OpenAI call",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands")

    sub.add_parser("ask", parents=[common], help="Answer a question")
    sub.add_parser("just-answer", parents=[common], help="Answer without explanation")
    sub.add_parser("eli5", parents=[common], help="Explain Like I'm 5")
    sub.add_parser("explain", parents=[common], help="Explain the prompt")
    sub.add_parser("summarize", parents=[common], help="Summarize the prompt")
    sub.add_parser("evaluate", parents=[common], help="Evaluate the prompt")
    sub.add_parser("true-or-false", parents=[common], help="Answer True or False")
    sub.add_parser("yes-or-no", parents=[common], help="Answer Yes or No")

    p_custom = sub.add_parser("custom", parents=[common], help="Use your own system prompt")
    p_custom.add_argument("--system", required=True,
                          help="System prompt that replaces the intent template")

    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=settings.LOG_LEVEL.upper(), format="%(message)s")

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        if args.command == "custom":
            output = cmd_custom(args)
        else:
            output = cmd_intent(args)
    except QuickGPTError as e:
        logger.error(f"[!] {e}")
        return 1
    except OpenAIError as e:
        logger.error(f"[!] OpenAI request failed: {e}")
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
