from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from quotex.core.errors import ValidationError
from quotex.generation.providers.factory import Provider
from quotex.session.controller import SessionController
from quotex.utils.logging_config import setup_logging

load_dotenv()

setup_logging(level="WARNING")
logger = logging.getLogger(__name__)

API_KEY_ENV = {
    Provider.OPENAI: "OPENAI_API_KEY",
    Provider.CLAUDE: "ANTHROPIC_API_KEY",
    Provider.GEMINI: "GEMINI_API_KEY",
}


def print_result(controller: SessionController) -> None:
    """Print the answer and quote candidates."""
    print(f"\n{'=' * 80}")
    print("ANSWER")
    print(f"{'=' * 80}\n")
    print(controller.answer or "(empty)")

    print(f"\n{'-' * 80}")
    print(f"QUOTE CANDIDATES ({len(controller.quotes)})")
    print(f"{'-' * 80}")
    for q in controller.quotes:
        page = q.page if q.page is not None else "?"
        score = f"{q.score * 100:.0f}%" if q.score is not None else "n/a"
        print(f"[{q.id}] \"{q.quote}\"")
        print(f"      {q.source or '?'} · p.{page} · score {score}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Ask a question over local text files and get quote candidates")

    parser.add_argument(
        "files",
        type=Path,
        nargs="+",
        help="Text files to load as documents (name = file stem)",
    )
    parser.add_argument(
        "--question", "-q",
        required=True,
        help="Question to ask",
    )
    parser.add_argument(
        "--provider",
        choices=[p.value for p in Provider],
        default=Provider.OPENAI.value,
        help="Chat API to call",
    )
    parser.add_argument(
        "--api-key",
        default=None,
        help="API key (defaults to OPENAI_API_KEY / ANTHROPIC_API_KEY / GEMINI_API_KEY)",
    )
    parser.add_argument(
        "--relaxed",
        action="store_true",
        help="Allow free citation style instead of strict numbered quotes",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log requests and parsing details",
    )

    args = parser.parse_args(argv)
    if args.verbose:
        setup_logging(level="INFO")

    provider = Provider(args.provider)
    api_key = args.api_key or os.getenv(API_KEY_ENV[provider], "")

    controller = SessionController(
        provider=provider,
        credential=api_key,
        strict_quotes_only=not args.relaxed,
    )

    try:
        for path in args.files:
            controller.add_document(path.read_text(encoding="utf-8"), path.stem)
        controller.run_query(args.question)
    except (ValidationError, OSError) as e:
        logger.error(f"❌ {e}")
        return 1

    if controller.error:
        logger.error(f"❌ {controller.error}")
        return 1

    print_result(controller)
    return 0


if __name__ == "__main__":
    sys.exit(main())
