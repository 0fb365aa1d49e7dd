"""
Repair and parse the JSON text returned by a vision model.

The repairs are textual and best-effort. They fix the failure modes seen in
practice (markdown fences, commentary around the object, broken ``\\u``
escapes, stray control characters) and nothing more. In particular the escape
repair is lossy: a ``\\u`` that is not followed by four hex digits always loses
its backslash, whatever the model meant by it.
"""
import json
import logging
import re
from typing import Optional

from .errors import MalformedJsonError
from .models import SlideAnalysisResult

logger = logging.getLogger(__name__)

_LEADING_FENCE = re.compile(r"^\s*```json\s*")
_TRAILING_FENCE = re.compile(r"\s*```\s*$")
_BAD_UNICODE_ESCAPE = re.compile(r"\\u(?![0-9a-fA-F]{4})")
# tab, LF and CR are kept
_CONTROL_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")


def strip_fences(text: str) -> str:
    text = _LEADING_FENCE.sub("", text, count=1)
    text = _TRAILING_FENCE.sub("", text, count=1)
    return text.strip()


def bound_object(text: str) -> str:
    """Cut ``text`` down to the span from the first ``{`` to the last ``}``."""
    start = text.find("{")
    end = text.rfind("}")
    if start != -1 and end != -1:
        return text[start : end + 1]
    return text


def sanitize(raw: str) -> str:
    cleaned = strip_fences(raw)
    cleaned = bound_object(cleaned)
    cleaned = _BAD_UNICODE_ESCAPE.sub("u", cleaned)
    cleaned = _CONTROL_CHARS.sub("", cleaned)
    return cleaned


def _reject_constant(name: str):
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"Invalid JSON constant {name}")


def parse_response(raw: Optional[str]) -> SlideAnalysisResult:
    """
    Turn raw model output into a ``SlideAnalysisResult``.

    An empty response yields the default (white, no elements) result. Anything
    else that still fails to parse after ``sanitize`` raises
    ``MalformedJsonError``; there is no second repair pass.
    """
    if not raw:
        logger.warning("Model returned an empty response; using an empty slide.")
        return SlideAnalysisResult()

    text = sanitize(raw)
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        logger.error(
            "Model response is not valid JSON after sanitizing: %s. Payload: %s",
            exc,
            text[:400],
        )
        raise MalformedJsonError(f"Malformed JSON in model response: {exc}", text) from exc

    if not isinstance(data, dict):
        logger.error(
            "Model response JSON is a %s, expected an object. Payload: %s",
            type(data).__name__,
            text[:400],
        )
        raise MalformedJsonError(
            f"Expected a JSON object, got {type(data).__name__}", text
        )
    return SlideAnalysisResult.from_dict(data)
