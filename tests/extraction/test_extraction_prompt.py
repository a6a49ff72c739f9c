"""
Tests for prompt building.

The prompt must carry query and context verbatim and put the format
instructions before them.
"""

import pytest

from undefined_terms.pipeline.extraction.extraction_prompt import EMPTY_CONTEXT_NOTE, build_prompt
from undefined_terms.pipeline.extraction.extraction_schema import UNDEFINED_WORDS_SCHEMA
from undefined_terms.pipeline.schemas import ExtractionRequest

INSTRUCTIONS = UNDEFINED_WORDS_SCHEMA.describe()


class TestBuildPrompt:
    """Tests for build_prompt."""

    def test_contains_query_and_context(self):
        request = ExtractionRequest(query="What is the SLA?", context="SLA: service level agreement")
        prompt = build_prompt(request, INSTRUCTIONS)

        assert "What is the SLA?" in prompt
        assert "SLA: service level agreement" in prompt

    def test_instructions_come_before_query_and_context(self):
        request = ExtractionRequest(query="q text", context="c text")
        prompt = build_prompt(request, INSTRUCTIONS)

        assert prompt.index(INSTRUCTIONS) < prompt.index("<query>")
        assert prompt.index("<query>") < prompt.index("<context>")

    @pytest.mark.parametrize("text", [
        "Use ```json\n{\"undefined_words\": [\"x\"]}\n``` as a template",
        "braces {query} and {context} and {{doubled}}",
        "  leading and trailing whitespace  \n\n",
        "ünïcödé – 日本語",
    ])
    def test_user_text_is_verbatim(self, text):
        """Test that delimiter tokens, braces and whitespace survive unmodified."""
        prompt = build_prompt(ExtractionRequest(query=text, context=text), INSTRUCTIONS)

        assert f"<query>\n{text}\n</query>" in prompt
        assert f"<context>\n{text}\n</context>" in prompt

    def test_empty_context_keeps_section(self):
        """Test that an empty context still renders its section plus a note."""
        prompt = build_prompt(ExtractionRequest(query="The cat sat on the mat", context=""), INSTRUCTIONS)

        assert "<context>\n\n</context>" in prompt
        assert EMPTY_CONTEXT_NOTE in prompt

    def test_non_empty_context_has_no_note(self):
        prompt = build_prompt(ExtractionRequest(query="q", context="glossary"), INSTRUCTIONS)
        assert EMPTY_CONTEXT_NOTE not in prompt

    def test_deterministic(self):
        request = ExtractionRequest(query="q", context="c")
        assert build_prompt(request, INSTRUCTIONS) == build_prompt(request, INSTRUCTIONS)
