"""
undefined-terms: find the ambiguous words in a query that its context does not explain.
"""

from undefined_terms.core.errors import (
    ConfigError,
    ExtractionError,
    ParseError,
    ParseErrorKind,
    ProviderError,
    ProviderErrorKind,
)
from undefined_terms.core.result import Failure, Result, Success
from undefined_terms.pipeline.detector import UndefinedWordDetector, detect_undefined_words
from undefined_terms.pipeline.extraction.extraction_schema import (
    SchemaDescriptor,
    UNDEFINED_WORDS_SCHEMA,
)
from undefined_terms.pipeline.schemas import ExtractionRequest, ExtractionResult

__version__ = "1.0.0"

__all__ = [
    'detect_undefined_words',
    'UndefinedWordDetector',
    'SchemaDescriptor',
    'UNDEFINED_WORDS_SCHEMA',
    'ExtractionRequest',
    'ExtractionResult',
    'Success',
    'Failure',
    'Result',
    'ConfigError',
    'ExtractionError',
    'ProviderError',
    'ProviderErrorKind',
    'ParseError',
    'ParseErrorKind',
]
