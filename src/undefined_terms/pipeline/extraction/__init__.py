"""
Extraction module.

Contains the structured-extraction components:
- extraction_schema: schema descriptor and format instructions
- extraction_prompt: Prompt template
- response_parser: Maps a raw completion to ExtractionResult
"""

from .extraction_schema import (
    FieldKind,
    FieldSpec,
    SchemaDescriptor,
    STRICT_UNDEFINED_WORDS_SCHEMA,
    UNDEFINED_WORDS_SCHEMA,
    render_block,
)
from .extraction_prompt import PROMPT_TEMPLATE, build_prompt
from .response_parser import ResponseParser

__all__ = [
    'FieldKind',
    'FieldSpec',
    'SchemaDescriptor',
    'STRICT_UNDEFINED_WORDS_SCHEMA',
    'UNDEFINED_WORDS_SCHEMA',
    'render_block',
    'PROMPT_TEMPLATE',
    'build_prompt',
    'ResponseParser',
]
