"""
Undefined-word extraction pipeline.

Builds a prompt from a query and its context, sends it to the LLM and
parses the completion into a validated ExtractionResult.
"""

from .detector import UndefinedWordDetector, detect_undefined_words
from .llm_client import CompletionClient, OllamaLLMClient
from .schemas import CompletionOptions, ExtractionRequest, ExtractionResult

# Re-export from submodules for convenience
from .extraction import (
    PROMPT_TEMPLATE,
    UNDEFINED_WORDS_SCHEMA,
    ResponseParser,
    SchemaDescriptor,
    build_prompt,
)

__all__ = [
    # Core classes
    'UndefinedWordDetector',
    'detect_undefined_words',
    'CompletionClient',
    'OllamaLLMClient',
    'CompletionOptions',
    'ExtractionRequest',
    'ExtractionResult',

    # Extraction
    'PROMPT_TEMPLATE',
    'UNDEFINED_WORDS_SCHEMA',
    'ResponseParser',
    'SchemaDescriptor',
    'build_prompt',
]
