import json
from typing import Optional

from ..images import to_data_url
from ..prompt import RESPONSE_SCHEMA, RESTORATION_PROMPT
from .base import BaseAnalyzer

DEFAULT_OPENAI_MODEL = "gpt-4o-mini"


class ChatGPTAnalyzer(BaseAnalyzer):
    def __init__(
        self,
        client,
        model: str = DEFAULT_OPENAI_MODEL,
        temperature: Optional[float] = None,
    ):
        super().__init__(model, temperature)
        self.client = client

    def _instructions(self) -> str:
        return (
            RESTORATION_PROMPT
            + "\n\nThe JSON object must follow this JSON schema:\n"
            + json.dumps(RESPONSE_SCHEMA)
        )

    def _generate(self, image: bytes, mime_type: str) -> Optional[str]:
        request_args = {
            "model": self.model,
            "messages": [
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": self._instructions()},
                        {
                            "type": "image_url",
                            "image_url": {"url": to_data_url(image, mime_type)},
                        },
                    ],
                }
            ],
            "response_format": {"type": "json_object"},
        }
        if self.temperature is not None:
            request_args["temperature"] = self.temperature

        resp = self.client.chat.completions.create(**request_args)
        return resp.choices[0].message.content
