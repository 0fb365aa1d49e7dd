import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .analyzers import BaseAnalyzer, ChatGPTAnalyzer, GeminiAnalyzer
from .analyzers.chat import DEFAULT_OPENAI_MODEL
from .analyzers.gemini import DEFAULT_GEMINI_MODEL
from .errors import ConfigurationError

BACKENDS = ("gemini", "openai")


@dataclass(frozen=True)
class Settings:
    backend: str = "gemini"
    model: Optional[str] = None
    gemini_api_key: Optional[str] = None
    openai_api_key: Optional[str] = None

    @classmethod
    def from_env(
        cls, dotenv_path: Optional[str] = None, load_dotenv_file: bool = True
    ) -> "Settings":
        if load_dotenv_file:
            load_dotenv(dotenv_path)
        return cls(
            backend=os.environ.get("SLIDE_RESTORE_BACKEND", "gemini").strip().lower(),
            model=os.environ.get("SLIDE_RESTORE_MODEL") or None,
            gemini_api_key=os.environ.get("GEMINI_API_KEY") or os.environ.get("API_KEY"),
            openai_api_key=os.environ.get("OPENAI_API_KEY"),
        )


def create_analyzer(
    settings: Settings,
    backend: Optional[str] = None,
    model: Optional[str] = None,
    temperature: Optional[float] = None,
) -> BaseAnalyzer:
    backend = (backend or settings.backend).lower()
    model = model or settings.model

    if backend == "gemini":
        if not settings.gemini_api_key:
            raise ConfigurationError("Set GEMINI_API_KEY environment variable.")
        from google import genai

        client = genai.Client(api_key=settings.gemini_api_key)
        return GeminiAnalyzer(
            client, model=model or DEFAULT_GEMINI_MODEL, temperature=temperature
        )

    if backend == "openai":
        if not settings.openai_api_key:
            raise ConfigurationError("Set OPENAI_API_KEY environment variable.")
        from openai import OpenAI

        client = OpenAI(api_key=settings.openai_api_key)
        return ChatGPTAnalyzer(
            client, model=model or DEFAULT_OPENAI_MODEL, temperature=temperature
        )

    raise ConfigurationError(
        f"Unknown backend {backend!r}; expected one of: {', '.join(BACKENDS)}"
    )
