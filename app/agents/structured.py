## Structured generation with fallback
"""
Turns "a prompt + an expected JSON shape" into a validated pydantic value.

The model's text is untrusted input. It is sanitized (code fences stripped),
parsed as strict JSON, validated against a pydantic schema and an optional
predicate. Any failure along the way, including the remote call itself,
collapses into a Fallback result carrying the caller's default value.
"""
import json
import logging
import re
from dataclasses import dataclass
from typing import Callable, Generic, Type, TypeVar

from pydantic import BaseModel

from app.agents.llm.base import LLMClient
from app.errors import GenerationFailure

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

SYSTEM_JSON = """You are a precise data generator.

You must return ONLY valid JSON (no markdown, no code fences, no commentary).
The JSON must match the given schema exactly.
"""

SYSTEM_TEXT = """You are an expert career coach.
Reply with plain text only. No markdown, no headings, no preamble.
"""

# A whole line that is only a fence, e.g. ``` or ```json
_FENCE_LINE = re.compile(r"^[ \t]*```[\w+-]*[ \t]*\r?$\n?", re.MULTILINE)
# Inline fences hugging the payload, e.g. ```json{"a": 1}```
_LEADING_FENCE = re.compile(r"^```[\w+-]*")


def _reject_constant(name: str) -> float:
    raise ValueError(f"Non-finite number {name} in JSON")


def strip_code_fences(text: str) -> str:
    cleaned = _FENCE_LINE.sub("", text).strip()
    if cleaned.startswith("```"):
        cleaned = _LEADING_FENCE.sub("", cleaned, count=1)
    if cleaned.endswith("```"):
        cleaned = cleaned[:-3]
    return cleaned.strip()


@dataclass(frozen=True)
class GenerationResult(Generic[T]):
    """Either Ok(value) or Fallback(value); both carry a value of the same shape.

    `is_fallback` and `error` exist for logging and tests only.
    """

    value: T
    is_fallback: bool = False
    error: str | None = None

    @classmethod
    def ok(cls, value: T) -> "GenerationResult[T]":
        return cls(value=value)

    @classmethod
    def fallback(cls, value: T, error: str) -> "GenerationResult[T]":
        return cls(value=value, is_fallback=True, error=error)


class StructuredGenerationClient:
    def __init__(self, llm: LLMClient, *, temperature: float = 0.2):
        self.llm = llm
        self.temperature = temperature

    def generate(
        self,
        prompt: str,
        *,
        schema: Type[T],
        default: T,
        validate: Callable[[T], bool] | None = None,
    ) -> GenerationResult[T]:
        """Single attempt; never raises."""
        try:
            raw_text = self.llm.generate_text(system=SYSTEM_JSON, user=prompt, temperature=self.temperature)
        except Exception as e:
            logger.exception("LLM call failed for %s, substituting default", schema.__name__)
            return GenerationResult.fallback(default, f"{type(e).__name__}: {e}")

        try:
            data = json.loads(strip_code_fences(raw_text), parse_constant=_reject_constant)
            value = schema.model_validate(data)
            if validate is not None and not validate(value):
                raise ValueError(f"{schema.__name__} failed validation")
        except Exception as e:
            # Includes errors raised by the caller's predicate
            logger.exception("Unusable LLM output for %s, substituting default", schema.__name__)
            return GenerationResult.fallback(default, f"{type(e).__name__}: {e}")

        return GenerationResult.ok(value)

    def generate_text(self, prompt: str, *, error_message: str = "Failed to generate content") -> str:
        """Plain-text mode. There is no default here: failures raise GenerationFailure."""
        try:
            text = self.llm.generate_text(system=SYSTEM_TEXT, user=prompt, temperature=self.temperature)
        except Exception as e:
            logger.exception("LLM text generation failed")
            raise GenerationFailure(error_message) from e

        text = (text or "").strip()
        if not text:
            logger.error("LLM returned empty text")
            raise GenerationFailure(error_message)
        return text
