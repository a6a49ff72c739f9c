"""
Parser for raw LLM completions.

Locates the fenced JSON block, decodes it, and hands the decoded value to
the schema descriptor. Failures come back as ParseError values:
- NOT_FOUND: no fenced block in the completion
- MALFORMED: block present but not decodable JSON
- SCHEMA_MISMATCH: decodable but the wrong shape
"""

import json
import logging
import re
from typing import Any, List

from undefined_terms.core.errors import ParseError, ParseErrorKind
from undefined_terms.core.result import Failure, Result, Success
from undefined_terms.pipeline.extraction.extraction_schema import (
    BLOCK_CLOSE,
    SchemaDescriptor,
    UNDEFINED_WORDS_SCHEMA,
)

logger = logging.getLogger(__name__)

# Opening fence: ``` plus an optional language tag (captured, case-insensitive)
FENCE_OPEN_PATTERN = re.compile(r"```[ \t]*([A-Za-z0-9_+.#-]*)[ \t]*\r?\n?")

JSON_TAG = "json"
_WHITESPACE = " \t\r\n"


def _repair_json(text: str) -> str:
    """
    Fix common LLM JSON slips that do not change the value's shape.

    Scans the text tracking string state, so string contents are never
    rewritten: trailing commas are only dropped outside strings and the
    invalid \\' escape is only rewritten inside them.
    """
    out = []
    in_string = False
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if in_string:
            if ch == "\\" and i + 1 < n:
                nxt = text[i + 1]
                # LLMs sometimes output \' which is invalid JSON (should be ')
                out.append("'" if nxt == "'" else ch + nxt)
                i += 2
                continue
            if ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch == ",":
            j = i + 1
            while j < n and text[j] in _WHITESPACE:
                j += 1
            # Trailing comma before a closing bracket or brace
            if j < n and text[j] in "}]":
                i += 1
                continue
        out.append(ch)
        i += 1
    return "".join(out)


def _decodes(text: str) -> bool:
    for candidate in (text, _repair_json(text)):
        try:
            json.loads(candidate)
            return True
        except json.JSONDecodeError:
            continue
    return False


def _is_json_fence(tag: str, body: str) -> bool:
    """A ```json fence, or an untagged fence whose body opens an object or array."""
    if tag.lower() == JSON_TAG:
        return True
    return tag == "" and body.lstrip().startswith(("{", "["))


def find_blocks(raw: str) -> List[str]:
    """
    Contents of every JSON fenced block in the completion, in order.

    Fences tagged with another language (```text, ```python) and untagged
    fences that do not hold an object or array are skipped. A closing
    fence that leaves undecodable JSON behind (for example ``` inside a
    JSON string) is skipped in favour of a later one. When no closing
    fence yields JSON the nearest one ends the block.
    """
    blocks = []
    pos = 0
    while True:
        opening = FENCE_OPEN_PATTERN.search(raw, pos)
        if opening is None:
            break
        start = opening.end()
        closes = []
        idx = raw.find(BLOCK_CLOSE, start)
        while idx != -1:
            closes.append(idx)
            idx = raw.find(BLOCK_CLOSE, idx + len(BLOCK_CLOSE))
        if not closes:
            break

        if not _is_json_fence(opening.group(1), raw[start:closes[0]]):
            logger.debug(f"Skipping non-JSON fence (tag: {opening.group(1) or 'none'})")
            pos = closes[0] + len(BLOCK_CLOSE)
            continue

        end = next((c for c in closes if _decodes(raw[start:c].strip())), closes[0])
        blocks.append(raw[start:end].strip())
        pos = end + len(BLOCK_CLOSE)
    return blocks


class ResponseParser:
    """Turns a raw completion into a validated result."""

    def __init__(self, schema: SchemaDescriptor = UNDEFINED_WORDS_SCHEMA):
        self.schema = schema

    def parse(self, raw: str) -> Result:
        """
        Parse and validate a raw completion.

        Args:
            raw: Completion text as returned by the provider

        Returns:
            Success(ExtractionResult) or Failure(ParseError)
        """
        if not raw or not raw.strip():
            logger.warning("Empty completion from LLM")
            return Failure(ParseError(ParseErrorKind.NOT_FOUND, "Completion is empty"))

        logger.debug(f"Raw LLM completion (first 500 chars): {raw[:500]}")

        blocks = find_blocks(raw)
        if not blocks:
            return Failure(ParseError(
                ParseErrorKind.NOT_FOUND,
                "No fenced JSON block found in completion",
            ))
        if len(blocks) > 1:
            logger.warning(f"Completion contains {len(blocks)} fenced blocks, using the first")

        decoded = self._decode(blocks[0])
        if isinstance(decoded, Failure):
            return decoded

        validated = self.schema.validate(decoded.value)
        if isinstance(validated, Failure):
            reason = validated.error
            return Failure(ParseError(
                ParseErrorKind.SCHEMA_MISMATCH,
                f"{reason.kind.value}: {reason.message}",
                reason=reason,
            ))

        logger.debug(f"Response validated against {self.schema.result_model.__name__}")
        return validated

    def _decode(self, block: str) -> Result:
        try:
            return Success(json.loads(block))
        except json.JSONDecodeError as e:
            first_error = e

        repaired = _repair_json(block)
        if repaired != block:
            try:
                value: Any = json.loads(repaired)
            except json.JSONDecodeError:
                pass
            else:
                logger.warning("Repaired malformed JSON block from LLM")
                return Success(value)

        logger.error(f"JSON parse error: {first_error}")
        logger.error(f"Block (first 500 chars): {block[:500]!r}")
        return Failure(ParseError(
            ParseErrorKind.MALFORMED,
            f"Invalid JSON in fenced block: {first_error}",
        ))
