"""Tests for result types and error descriptions."""

import pytest

from undefined_terms.core.errors import (
    ParseError,
    ParseErrorKind,
    ProviderError,
    ProviderErrorKind,
    SchemaValidationError,
    ValidationErrorKind,
)
from undefined_terms.core.result import Failure, Success, is_success, unwrap


class TestResult:
    """Tests for Success / Failure."""

    def test_unwrap_success(self):
        assert unwrap(Success(42)) == 42
        assert is_success(Success(None))

    def test_unwrap_failure_raises_carried_error(self):
        error = ProviderError(ProviderErrorKind.NETWORK, "connection refused")
        result = Failure(error)

        assert not is_success(result)
        with pytest.raises(ProviderError) as exc_info:
            unwrap(result)
        assert exc_info.value is error

    def test_results_are_immutable(self):
        result = Success("value")
        with pytest.raises(Exception):
            result.value = "other"


class TestErrorDescriptions:
    """Tests for error kinds and one-line diagnostics."""

    def test_provider_error_describe(self):
        error = ProviderError(ProviderErrorKind.RATE_LIMITED, "too many requests", status_code=429)

        assert error.kind is ProviderErrorKind.RATE_LIMITED
        assert error.status_code == 429
        assert error.describe() == "ProviderError(rate_limited): too many requests"

    def test_parse_error_keeps_validation_reason(self):
        reason = SchemaValidationError(ValidationErrorKind.MISSING_FIELD, "reasons", "Missing field 'reasons'")
        error = ParseError(ParseErrorKind.SCHEMA_MISMATCH, str(reason), reason=reason)

        assert error.reason is reason
        assert error.describe().startswith("ParseError(schema_mismatch):")
