from __future__ import annotations

import argparse
import asyncio
import sys

from agentic_search.config.settings import get_settings
from agentic_search.errors import SearchConfigError
from agentic_search.llm.models import ModelSettings
from agentic_search.log import configure_logging
from agentic_search.tools.search import GoogleSearch, SearchToolConfig


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run the Google search tool once and print its answer"
    )
    parser.add_argument("query", help="Search query")
    parser.add_argument(
        "--goal",
        default="",
        help="Agent goal passed to the summarizer for context",
    )
    parser.add_argument(
        "--provider",
        choices=["openai", "gemini"],
        help="Summarizer provider (defaults to LLM_PROVIDER)",
    )
    parser.add_argument("--model", help="Summarizer model name")
    parser.add_argument("--log-level", help="Logging level (defaults to LOG_LEVEL)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(args.log_level or settings.log_level)

    model_settings = ModelSettings.from_settings(settings)
    overrides = {}
    if args.provider:
        overrides["provider"] = args.provider
        if not args.model and args.provider != model_settings.provider:
            overrides["model"] = (
                settings.gemini_model
                if args.provider == "gemini"
                else settings.openai_model
            )
    if args.model:
        overrides["model"] = args.model
    if overrides:
        model_settings = model_settings.model_copy(update=overrides)

    try:
        config = SearchToolConfig.from_settings(settings, model_settings, args.goal)
    except SearchConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    output = asyncio.run(GoogleSearch(config).execute(args.query))
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
