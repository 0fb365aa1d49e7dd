from .base import BaseAnalyzer
from .chat import ChatGPTAnalyzer
from .gemini import GeminiAnalyzer

__all__ = ["BaseAnalyzer", "ChatGPTAnalyzer", "GeminiAnalyzer"]
