import logging
import time
from abc import ABC, abstractmethod
from typing import Optional

from ..images import decode_data_url
from ..models import SlideAnalysisResult
from ..sanitize import parse_response

logger = logging.getLogger(__name__)


class BaseAnalyzer(ABC):
    def __init__(self, model: str, temperature: Optional[float] = None):
        self.model = model
        self.temperature = temperature

    @abstractmethod
    def _generate(self, image: bytes, mime_type: str) -> Optional[str]:
        """Send the slide image to the model and return its raw text output."""
        raise NotImplementedError

    def analyze(self, image: bytes, mime_type: str = "image/jpeg") -> SlideAnalysisResult:
        start_time = time.time()
        try:
            text = self._generate(image, mime_type)
        except Exception:
            logger.exception("%s request to %s failed", type(self).__name__, self.model)
            raise
        logger.debug(
            "%s answered in %.2fs with %d chars",
            self.model,
            time.time() - start_time,
            len(text or ""),
        )
        return parse_response(text)

    def analyze_data_url(self, url: str) -> SlideAnalysisResult:
        """Analyze an image given as a base64 ``data:`` URL."""
        image, mime_type = decode_data_url(url)
        return self.analyze(image, mime_type)
