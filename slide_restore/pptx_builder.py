import io
import logging
import math
from typing import List, Optional, Sequence, Tuple

from PIL import Image
from pptx import Presentation
from pptx.dml.color import RGBColor
from pptx.enum.text import PP_ALIGN
from pptx.util import Emu, Inches, Pt

from .models import ElementType, SlideAnalysisResult, SlideElement, TextAlign

logger = logging.getLogger(__name__)

BLANK_LAYOUT_INDEX = 6

_ALIGNMENTS = {
    TextAlign.LEFT: PP_ALIGN.LEFT,
    TextAlign.CENTER: PP_ALIGN.CENTER,
    TextAlign.RIGHT: PP_ALIGN.RIGHT,
}


def parse_hex_color(value: Optional[str]) -> Optional[RGBColor]:
    """Parse ``#RRGGBB`` or ``#RGB``; anything else gives None."""
    if not isinstance(value, str):
        return None
    digits = value.strip().lstrip("#")
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    if len(digits) != 6:
        return None
    try:
        return RGBColor.from_string(digits.upper())
    except ValueError:
        return None


def element_box(
    element: SlideElement, width: int, height: int
) -> Optional[Tuple[int, int, int, int]]:
    """
    Convert an element's percentage box into (left, top, width, height) in the
    units of ``width``/``height``, clamped to the canvas. Returns None when the
    box is empty or its values are not numbers.
    """
    try:
        x = min(max(float(element.x), 0.0), 100.0)
        y = min(max(float(element.y), 0.0), 100.0)
        w = min(float(element.width), 100.0 - x)
        h = min(float(element.height), 100.0 - y)
    except (TypeError, ValueError):
        return None
    if not all(math.isfinite(v) for v in (x, y, w, h)):
        return None
    if w <= 0 or h <= 0:
        return None
    return (
        int(width * x / 100),
        int(height * y / 100),
        int(width * w / 100),
        int(height * h / 100),
    )


def fill_background(slide, color: Optional[str]):
    rgb = parse_hex_color(color)
    if rgb is None:
        logger.warning("Ignoring invalid background color %r", color)
        return
    fill = slide.background.fill
    fill.solid()
    fill.fore_color.rgb = rgb


def add_text_element(slide, element: SlideElement, box: Tuple[int, int, int, int]):
    left, top, width, height = box
    shape = slide.shapes.add_textbox(Emu(left), Emu(top), Emu(width), Emu(height))
    tf = shape.text_frame
    tf.word_wrap = True

    color = None
    if element.font_color is not None:
        color = parse_hex_color(element.font_color)
        if color is None:
            logger.warning("Ignoring invalid font color %r", element.font_color)

    lines = content_text(element).split("\n")
    for idx, line in enumerate(lines):
        para = tf.paragraphs[0] if idx == 0 else tf.add_paragraph()
        if element.text_align in _ALIGNMENTS:
            para.alignment = _ALIGNMENTS[element.text_align]
        run = para.add_run()
        run.text = line
        font = run.font
        if element.font_size is not None:
            try:
                font.size = Pt(float(element.font_size))
            except (TypeError, ValueError, OverflowError):
                logger.warning("Ignoring invalid font size %r", element.font_size)
        if element.is_bold is not None:
            font.bold = bool(element.is_bold)
        if color is not None:
            font.color.rgb = color
    return shape


def content_text(element: SlideElement) -> str:
    return "" if element.content is None else str(element.content)


def set_alt_text(picture, text: str):
    # python-pptx exposes no public setter for a picture's description
    picture._element.nvPicPr.cNvPr.set("descr", text)


def crop_region(source: Image.Image, element: SlideElement) -> Optional[Image.Image]:
    box = element_box(element, source.width, source.height)
    if box is None:
        return None
    left, top, width, height = box
    if width == 0 or height == 0:
        return None
    return source.crop((left, top, left + width, top + height))


def add_image_element(
    slide,
    element: SlideElement,
    box: Tuple[int, int, int, int],
    source: Image.Image,
):
    crop = crop_region(source, element)
    if crop is None:
        logger.warning("Image element %r is too small to crop; skipped", element.content)
        return None
    if crop.mode not in ("RGB", "RGBA"):
        crop = crop.convert("RGBA")
    stream = io.BytesIO()
    crop.save(stream, format="PNG")
    stream.seek(0)

    left, top, width, height = box
    picture = slide.shapes.add_picture(
        stream, Emu(left), Emu(top), Emu(width), Emu(height)
    )
    set_alt_text(picture, content_text(element))
    return picture


def add_slide(prs, image_path: str, result: SlideAnalysisResult):
    slide = prs.slides.add_slide(prs.slide_layouts[BLANK_LAYOUT_INDEX])
    fill_background(slide, result.background_color)

    slide_width, slide_height = prs.slide_width, prs.slide_height
    with Image.open(image_path) as source:
        source.load()
        # pictures first so text boxes stay on top
        ordered = result.image_elements + [
            el for el in result.elements if el.type != ElementType.IMAGE
        ]
        for element in ordered:
            box = element_box(element, slide_width, slide_height)
            if box is None:
                logger.warning(
                    "Skipping %s element with unusable box (%r, %r, %r, %r)",
                    element.type,
                    element.x,
                    element.y,
                    element.width,
                    element.height,
                )
                continue
            if element.type == ElementType.IMAGE:
                add_image_element(slide, element, box, source)
            elif element.type == ElementType.TEXT:
                add_text_element(slide, element, box)
            else:
                logger.warning("Skipping element of unknown type %r", element.type)
    return slide


def build_presentation(
    slides: Sequence[Tuple[str, SlideAnalysisResult]],
    output_path: str,
    slide_width: int = Inches(13.333),
    slide_height: int = Inches(7.5),
):
    """
    Write one editable slide per analyzed image.

    ``slides`` pairs each source image path with its analysis result; the image
    is only used to cut out the ``image`` elements.
    """
    prs = Presentation()
    prs.slide_width = slide_width
    prs.slide_height = slide_height
    for image_path, result in slides:
        add_slide(prs, image_path, result)
    prs.save(output_path)
    return prs


def summarize_result(result: SlideAnalysisResult) -> str:
    counts: List[str] = [
        f"{len(result.text_elements)} text",
        f"{len(result.image_elements)} image",
    ]
    return f"background {result.background_color}, " + ", ".join(counts)
