import json
import logging
import os
from typing import List, Optional, Sequence, Tuple

from tqdm import tqdm

from .analyzers import BaseAnalyzer
from .images import load_image
from .models import SlideAnalysisResult
from .pptx_builder import build_presentation, summarize_result

logger = logging.getLogger(__name__)


class RestoreResult:
    def __init__(
        self,
        slides: Optional[List[Tuple[str, SlideAnalysisResult]]] = None,
        failures: Optional[List[Tuple[str, Exception]]] = None,
        warnings: Optional[List[str]] = None,
        output_path: Optional[str] = None,
    ):
        self.slides = slides or []
        self.failures = failures or []
        self.warnings = warnings or []
        self.output_path = output_path

    @property
    def ok(self) -> bool:
        return not self.failures


def write_result_json(result: SlideAnalysisResult, image_path: str, json_dir: str) -> str:
    os.makedirs(json_dir, exist_ok=True)
    stem = os.path.splitext(os.path.basename(image_path))[0]
    path = os.path.join(json_dir, f"{stem}.json")
    with open(path, "w", encoding="utf-8") as f:
        json.dump(result.to_dict(), f, ensure_ascii=False, indent=2)
    return path


def restore_slides(
    analyzer: BaseAnalyzer,
    image_paths: Sequence[str],
    output_path: Optional[str] = None,
    json_dir: Optional[str] = None,
    fail_fast: bool = False,
) -> RestoreResult:
    outcome = RestoreResult()

    progress = tqdm(total=len(image_paths), desc="Analyzing")
    try:
        for image_path in image_paths:
            try:
                image, mime_type = load_image(image_path)
                result = analyzer.analyze(image, mime_type)
            except Exception as exc:
                if fail_fast:
                    raise
                logger.warning("Analysis failed for %s: %s", image_path, exc)
                outcome.failures.append((image_path, exc))
                outcome.warnings.append(f"[WARN] Analysis failed for {image_path}: {exc}")
                progress.update(1)
                continue

            logger.info("%s: %s", image_path, summarize_result(result))
            if json_dir:
                write_result_json(result, image_path, json_dir)
            outcome.slides.append((image_path, result))
            progress.update(1)
    finally:
        progress.close()

    if output_path:
        if outcome.slides:
            build_presentation(outcome.slides, output_path)
            outcome.output_path = output_path
        else:
            outcome.warnings.append("[WARN] No slide was analyzed successfully; no file written.")
    return outcome
