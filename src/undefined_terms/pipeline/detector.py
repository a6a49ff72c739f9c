"""
Undefined-word detection orchestrator.

Sequences one request through the pipeline:
prompt building -> completion call -> response parsing.
Either the full result or a single terminal error comes back.
"""

import logging
from typing import Optional

from undefined_terms.core.config import Settings, load_settings
from undefined_terms.core.errors import ProviderError
from undefined_terms.core.result import Failure, Result, Success
from undefined_terms.pipeline.extraction.extraction_prompt import build_prompt
from undefined_terms.pipeline.extraction.extraction_schema import (
    SchemaDescriptor,
    STRICT_UNDEFINED_WORDS_SCHEMA,
    UNDEFINED_WORDS_SCHEMA,
)
from undefined_terms.pipeline.extraction.response_parser import ResponseParser
from undefined_terms.pipeline.llm_client import CompletionClient, OllamaLLMClient
from undefined_terms.pipeline.schemas import CompletionOptions, ExtractionRequest

logger = logging.getLogger(__name__)


class UndefinedWordDetector:
    """
    Runs undefined-word extraction for one request at a time.

    The detector holds no per-request state; the schema (and its cached
    format instructions) is shared read-only between runs.
    """

    def __init__(
        self,
        client: CompletionClient,
        schema: SchemaDescriptor = UNDEFINED_WORDS_SCHEMA,
        options: Optional[CompletionOptions] = None,
    ):
        """
        Initialize the detector.

        Args:
            client: Completion client (required)
            schema: Result schema descriptor
            options: Completion options; defaults to the client's model at
                temperature 0
        """
        if client is None:
            raise ValueError("client is required")
        self.client = client
        self.schema = schema
        self.parser = ResponseParser(schema)
        if options is None:
            options = CompletionOptions(model=getattr(client, "model", "") or "")
        self.options = options

    def run(self, request: ExtractionRequest) -> Result:
        """
        Detect undefined words for a single request.

        Makes exactly one completion call. Returns Success(ExtractionResult),
        Failure(ProviderError) or Failure(ParseError).
        """
        prompt = build_prompt(request, self.schema.describe())
        logger.debug(f"Built prompt ({len(prompt)} characters) for query of {len(request.query)} characters")

        try:
            raw = self.client.complete(prompt, self.options)
        except ProviderError as e:
            logger.error(f"Completion failed: {e.describe()}")
            return Failure(e)

        result = self.parser.parse(raw)
        if isinstance(result, Success):
            logger.info(f"Detected {len(result.value.undefined_words)} undefined word(s)")
        else:
            logger.warning(f"Could not parse completion: {result.error.describe()}")
        return result


def detect_undefined_words(
    query: str,
    context: str = "",
    client: Optional[CompletionClient] = None,
    settings: Optional[Settings] = None,
    strict: bool = False,
) -> Result:
    """
    Convenience entry point: detect undefined words in ``query`` given ``context``.

    When no client is injected one is built from ``settings`` (or the
    environment), raising ConfigError before any network call if the
    credential is missing.
    """
    request = ExtractionRequest(query=query, context=context)

    if client is None:
        settings = settings or load_settings()
        client = OllamaLLMClient.from_settings(settings)

    options = None
    if settings is not None:
        options = CompletionOptions(temperature=settings.temperature, model=settings.model)

    schema = STRICT_UNDEFINED_WORDS_SCHEMA if strict else UNDEFINED_WORDS_SCHEMA
    return UndefinedWordDetector(client, schema=schema, options=options).run(request)
