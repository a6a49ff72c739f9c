"""
undefined-terms CLI

Runs undefined-word extraction for one query/context pair and prints the
result. Without --query/--context the demonstration sample is used.

Exit codes: 0 on success, 1 on an extraction error (provider or parse),
2 on a configuration error or an unreadable context file.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from undefined_terms.core.config import LOG_LEVEL, load_settings, parse_model, parse_temperature
from undefined_terms.core.errors import ConfigError
from undefined_terms.core.logging_utils import configure_logging
from undefined_terms.core.result import Failure
from undefined_terms.pipeline.detector import detect_undefined_words
from undefined_terms.pipeline.schemas import ExtractionResult
from undefined_terms.sample_data import DEMO_CONTEXT, DEMO_QUERY

EXIT_EXTRACTION_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_INPUT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="undefined-terms",
        description="List the ambiguous words in a query that the context does not define",
    )
    parser.add_argument(
        "--query",
        type=str,
        default=None,
        help="Query text to analyze (default: built-in demonstration query)",
    )
    context_group = parser.add_mutually_exclusive_group()
    context_group.add_argument(
        "--context",
        type=str,
        default=None,
        help="Reference context text (default: built-in demonstration context)",
    )
    context_group.add_argument(
        "--context-file",
        type=Path,
        default=None,
        help="Read the reference context from a UTF-8 text file",
    )
    parser.add_argument(
        "--model",
        type=str,
        default=None,
        help="Model identifier (overrides OLLAMA_MODEL)",
    )
    parser.add_argument(
        "--temperature",
        type=str,
        default=None,
        help="Sampling temperature between 0 and 2 (overrides UNDEFINED_TERMS_TEMPERATURE)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject results where the number of reasons differs from the number of words",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=LOG_LEVEL,
        help=f"Logging level (default: {LOG_LEVEL})",
    )
    return parser


def format_result(result: ExtractionResult, output_format: str = "text") -> str:
    """Render a result for stdout."""
    if output_format == "json":
        return json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=2)

    if not result.undefined_words and not result.reasons:
        return "undefined_words: []"
    lines = ["undefined_words:"]
    for word, reason in result.pairs():
        lines.append(f"  - {word}: {reason}")
    if not result.is_aligned:
        lines.append(
            f"  # note: {len(result.undefined_words)} word(s) but {len(result.reasons)} reason(s)"
        )
        paired = len(result.pairs())
        for word in result.undefined_words[paired:]:
            lines.append(f"  - {word}: (no reason given)")
        for reason in result.reasons[paired:]:
            lines.append(f"  - (no word given): {reason}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level)
    logger = logging.getLogger(__name__)

    query = args.query if args.query is not None else DEMO_QUERY
    if args.context_file is not None:
        try:
            context = args.context_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"error: cannot read context file {args.context_file}: {e}", file=sys.stderr)
            return EXIT_INPUT_ERROR
    elif args.context is not None:
        context = args.context
    else:
        context = DEMO_CONTEXT if args.query is None else ""

    try:
        settings = load_settings()
        overrides = {}
        if args.model is not None:
            overrides["model"] = parse_model(args.model)
        if args.temperature is not None:
            overrides["temperature"] = parse_temperature(args.temperature)
        if overrides:
            settings = settings.model_copy(update=overrides)
    except ConfigError as e:
        print(f"error: ConfigError: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    logger.info(f"Detecting undefined words with model: {settings.model}")
    result = detect_undefined_words(query, context, settings=settings, strict=args.strict)

    if isinstance(result, Failure):
        print(f"error: {result.error.describe()}", file=sys.stderr)
        return EXIT_EXTRACTION_ERROR

    print(format_result(result.value, args.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
