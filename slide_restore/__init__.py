"""
Rebuild editable slides from slide images with a vision model.

The package sends a slide image to Gemini or an OpenAI chat model, repairs the
JSON the model answers with, and can write the result back out as a PPTX.
"""

from .errors import ConfigurationError, MalformedJsonError, SlideRestoreError
from .models import ElementType, SlideAnalysisResult, SlideElement, TextAlign
from .sanitize import parse_response, sanitize

__all__ = [
    "ConfigurationError",
    "ElementType",
    "MalformedJsonError",
    "SlideAnalysisResult",
    "SlideElement",
    "SlideRestoreError",
    "TextAlign",
    "parse_response",
    "sanitize",
]
