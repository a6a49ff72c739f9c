"""
Error taxonomy for undefined-word extraction.

ConfigError is raised before any network call. ProviderError and ParseError
make up the ExtractionError union returned by the detector. Schema
validation failures are reported as SchemaValidationError and re-surfaced
by the parser as ParseError(SCHEMA_MISMATCH).
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ConfigError(Exception):
    """Missing or invalid configuration (credential, model, temperature)."""


class ProviderErrorKind(str, Enum):
    NETWORK = "network"
    AUTH = "auth"
    RATE_LIMITED = "rate_limited"
    OTHER = "other"


class ParseErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    MALFORMED = "malformed"
    SCHEMA_MISMATCH = "schema_mismatch"


class ValidationErrorKind(str, Enum):
    MISSING_FIELD = "missing_field"
    WRONG_TYPE = "wrong_type"
    EXTRA_FIELD = "extra_field"
    LENGTH_MISMATCH = "length_mismatch"


class ExtractionError(Exception):
    """Base class for terminal failures of a single extraction run."""

    kind: Enum

    def __init__(self, kind: Enum, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def describe(self) -> str:
        """One-line diagnostic, e.g. ``ParseError(not_found): ...``."""
        return f"{type(self).__name__}({self.kind.value}): {self.message}"


class ProviderError(ExtractionError):
    """Completion service failure: network, auth, rate limit or other."""

    def __init__(
        self,
        kind: ProviderErrorKind,
        message: str,
        status_code: Optional[int] = None,
    ):
        super().__init__(kind, message)
        self.status_code = status_code


class SchemaValidationError(Exception):
    """A decoded value does not match the declared result shape."""

    def __init__(self, kind: ValidationErrorKind, field: Optional[str], message: str):
        super().__init__(message)
        self.kind = kind
        self.field = field
        self.message = message


class ParseError(ExtractionError):
    """The completion could not be turned into a valid result."""

    def __init__(
        self,
        kind: ParseErrorKind,
        message: str,
        reason: Optional[SchemaValidationError] = None,
    ):
        super().__init__(kind, message)
        self.reason = reason
