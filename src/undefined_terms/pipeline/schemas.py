"""
Pydantic schemas for undefined-word extraction input and output.

Both models are frozen: a request is an immutable input to one run and a
result is immutable once the parser has validated it.
"""

from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field


class ExtractionRequest(BaseModel):
    """A single query/context pair to analyze."""

    model_config = ConfigDict(frozen=True)

    query: str = Field(
        description="User-supplied natural-language text to analyze"
    )
    context: str = Field(
        default="",
        description="Reference glossary/text treated as the ground truth of defined meaning"
    )


class ExtractionResult(BaseModel):
    """Ambiguous words not explained by the context, one reason per word."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    undefined_words: Tuple[str, ...] = Field(
        default=(),
        description="Words or phrases from the query that are ambiguous and not defined in the context"
    )
    reasons: Tuple[str, ...] = Field(
        default=(),
        description="Why each word is considered undefined, in the same order as undefined_words"
    )

    @property
    def is_aligned(self) -> bool:
        """True when there is exactly one reason per word."""
        return len(self.undefined_words) == len(self.reasons)

    def pairs(self) -> List[Tuple[str, str]]:
        """(word, reason) pairs, truncated to the shorter field."""
        return list(zip(self.undefined_words, self.reasons))


class CompletionOptions(BaseModel):
    """Per-call options passed to the completion client."""

    model_config = ConfigDict(frozen=True)

    temperature: float = Field(
        default=0.0,
        description="Sampling temperature (lower for more deterministic output)"
    )
    model: str = Field(
        description="Model identifier understood by the completion service"
    )
