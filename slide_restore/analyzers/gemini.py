from typing import Optional

from google.genai import types

from ..prompt import RESPONSE_SCHEMA, RESTORATION_PROMPT
from .base import BaseAnalyzer

DEFAULT_GEMINI_MODEL = "gemini-3-flash-preview"


class GeminiAnalyzer(BaseAnalyzer):
    def __init__(
        self,
        client,
        model: str = DEFAULT_GEMINI_MODEL,
        temperature: Optional[float] = None,
        thinking_budget: Optional[int] = 4096,
    ):
        super().__init__(model, temperature)
        self.client = client
        self.thinking_budget = thinking_budget

    def _build_config(self) -> types.GenerateContentConfig:
        config_args = {
            "response_mime_type": "application/json",
            "response_schema": RESPONSE_SCHEMA,
        }
        if self.thinking_budget is not None:
            config_args["thinking_config"] = types.ThinkingConfig(
                thinking_budget=self.thinking_budget
            )
        if self.temperature is not None:
            config_args["temperature"] = self.temperature
        return types.GenerateContentConfig(**config_args)

    def _generate(self, image: bytes, mime_type: str) -> Optional[str]:
        response = self.client.models.generate_content(
            model=self.model,
            contents=[
                types.Part.from_bytes(data=image, mime_type=mime_type),
                RESTORATION_PROMPT,
            ],
            config=self._build_config(),
        )
        return response.text
