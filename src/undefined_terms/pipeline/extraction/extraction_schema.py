"""
Schema descriptor for undefined-word extraction.

Declares the result shape as a closed set of field kinds, renders the
format instructions embedded in every prompt, and validates decoded JSON
against the shape without coercing it.

Block convention: the model answers with exactly one fenced code block
opened by ```json and closed by ```, containing one JSON object.
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Type, Union

from pydantic import BaseModel

from undefined_terms.core.errors import SchemaValidationError, ValidationErrorKind
from undefined_terms.core.result import Failure, Result, Success
from undefined_terms.pipeline.schemas import ExtractionResult

logger = logging.getLogger(__name__)

BLOCK_OPEN = "```json"
BLOCK_CLOSE = "```"


class FieldKind(str, Enum):
    """Kinds of value a result field can hold."""

    STRING_LIST = "string_list"


# JSON Schema fragment for each field kind
_KIND_JSON_SCHEMA: Dict[FieldKind, Dict[str, Any]] = {
    FieldKind.STRING_LIST: {"type": "array", "items": {"type": "string"}},
}

_KIND_LABEL: Dict[FieldKind, str] = {
    FieldKind.STRING_LIST: "array of strings",
}


@dataclass(frozen=True)
class FieldSpec:
    name: str
    kind: FieldKind
    description: str


def render_block(value: Union[BaseModel, Dict[str, Any]]) -> str:
    """Render a result (or plain JSON object) through the fenced-block convention."""
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json")
    body = json.dumps(value, ensure_ascii=False, indent=2)
    return f"{BLOCK_OPEN}\n{body}\n{BLOCK_CLOSE}"


class SchemaDescriptor:
    """
    Declarative description of the extraction result.

    Handles:
    - Format instruction rendering (computed once, then cached)
    - JSON Schema generation for the prompt
    - Validation of decoded values into the result model
    """

    def __init__(
        self,
        fields: Sequence[FieldSpec],
        result_model: Type[BaseModel] = ExtractionResult,
        strict_lengths: bool = False,
    ):
        """
        Initialize and check the descriptor.

        Args:
            fields: Field specs, in the order they are rendered
            result_model: Pydantic model built from a validated value
            strict_lengths: Reject values whose fields differ in length
                instead of only logging a warning

        Raises:
            ValueError: If fields are empty, duplicated, or do not match
                the result model's fields
        """
        names = [spec.name for spec in fields]
        if not names:
            raise ValueError("SchemaDescriptor requires at least one field")
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate field names in schema: {names}")
        if set(names) != set(result_model.model_fields):
            raise ValueError(
                f"Schema fields {sorted(names)} do not match "
                f"{result_model.__name__} fields {sorted(result_model.model_fields)}"
            )
        for spec in fields:
            if spec.kind not in _KIND_JSON_SCHEMA:
                raise ValueError(f"Unsupported field kind for {spec.name}: {spec.kind}")

        self.fields = tuple(fields)
        self.result_model = result_model
        self.strict_lengths = strict_lengths
        self._instructions: Optional[str] = None

    @property
    def field_names(self) -> tuple:
        return tuple(spec.name for spec in self.fields)

    def with_strict_lengths(self, strict: bool = True) -> "SchemaDescriptor":
        return SchemaDescriptor(self.fields, self.result_model, strict_lengths=strict)

    def json_schema(self) -> Dict[str, Any]:
        """JSON Schema for the result object, embedded in the format instructions."""
        properties = {}
        for spec in self.fields:
            prop = dict(_KIND_JSON_SCHEMA[spec.kind])
            prop["description"] = spec.description
            properties[spec.name] = prop
        return {
            "type": "object",
            "additionalProperties": False,
            "required": list(self.field_names),
            "properties": properties,
        }

    def describe(self) -> str:
        """Format instructions for the model. Deterministic and cached."""
        if self._instructions is None:
            self._instructions = self._render_instructions()
        return self._instructions

    def _render_instructions(self) -> str:
        lines = [
            "Return your answer as one JSON object matching this JSON Schema:",
            "",
            json.dumps(self.json_schema(), ensure_ascii=False, indent=2),
            "",
            "FIELDS:",
        ]
        for spec in self.fields:
            lines.append(f"- {spec.name} ({_KIND_LABEL[spec.kind]}): {spec.description}")

        lines += ["", "RULES:"]
        if len(self.fields) > 1:
            joined = ", ".join(self.field_names)
            lines.append(
                f"- {joined} must contain the same number of items; "
                f"item i of each field refers to the same word."
            )
        lines += [
            "- Use empty arrays when nothing qualifies. Do not add other keys.",
            f"- Wrap the JSON object in exactly one fenced code block that starts with "
            f"{BLOCK_OPEN} and ends with {BLOCK_CLOSE}. Do not output any other code block.",
            "",
            "EXPECTED LAYOUT:",
            render_block({name: [] for name in self.field_names}),
        ]
        return "\n".join(lines)

    def validate(self, value: Any) -> Result:
        """
        Validate a decoded JSON value against the declared fields.

        Never raises for malformed input. Returns Success(result_model) or
        Failure(SchemaValidationError). Values are not coerced: a string where
        a list is expected is rejected.
        """
        if not isinstance(value, dict):
            return Failure(SchemaValidationError(
                ValidationErrorKind.WRONG_TYPE,
                None,
                f"Expected a JSON object, got {type(value).__name__}",
            ))

        for name in self.field_names:
            if name not in value:
                return Failure(SchemaValidationError(
                    ValidationErrorKind.MISSING_FIELD, name, f"Missing field '{name}'"
                ))

        extra = [key for key in value if key not in self.field_names]
        if extra:
            return Failure(SchemaValidationError(
                ValidationErrorKind.EXTRA_FIELD,
                str(extra[0]),
                f"Unexpected field(s): {', '.join(map(str, extra))}",
            ))

        for spec in self.fields:
            error = self._check_kind(spec, value[spec.name])
            if error is not None:
                return Failure(error)

        lengths = {name: len(value[name]) for name in self.field_names}
        if len(set(lengths.values())) > 1:
            message = f"Field lengths differ: {lengths}"
            if self.strict_lengths:
                return Failure(SchemaValidationError(
                    ValidationErrorKind.LENGTH_MISMATCH, None, message
                ))
            logger.warning(f"{message} - accepting result")

        return Success(self.result_model(
            **{name: tuple(value[name]) for name in self.field_names}
        ))

    def _check_kind(self, spec: FieldSpec, field_value: Any) -> Optional[SchemaValidationError]:
        if spec.kind is FieldKind.STRING_LIST:
            if not isinstance(field_value, list):
                return SchemaValidationError(
                    ValidationErrorKind.WRONG_TYPE,
                    spec.name,
                    f"Field '{spec.name}' must be an array of strings, "
                    f"got {type(field_value).__name__}",
                )
            for idx, item in enumerate(field_value):
                if not isinstance(item, str):
                    return SchemaValidationError(
                        ValidationErrorKind.WRONG_TYPE,
                        spec.name,
                        f"Field '{spec.name}' item {idx} must be a string, "
                        f"got {type(item).__name__}",
                    )
        return None


UNDEFINED_WORDS_SCHEMA = SchemaDescriptor([
    FieldSpec(
        name="undefined_words",
        kind=FieldKind.STRING_LIST,
        description=(
            "Words or phrases from the query whose meaning is ambiguous "
            "and not explained by the context"
        ),
    ),
    FieldSpec(
        name="reasons",
        kind=FieldKind.STRING_LIST,
        description=(
            "For each entry in undefined_words, a short reason why it is "
            "ambiguous or undefined, in the same order"
        ),
    ),
])

STRICT_UNDEFINED_WORDS_SCHEMA = UNDEFINED_WORDS_SCHEMA.with_strict_lengths()
