from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

DEFAULT_BACKGROUND_COLOR = "#FFFFFF"


class ElementType:
    TEXT = "text"
    IMAGE = "image"


class TextAlign:
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


# wire key -> attribute name, for the optional element fields
_OPTIONAL_FIELDS = {
    "fontSize": "font_size",
    "fontColor": "font_color",
    "isBold": "is_bold",
    "textAlign": "text_align",
}


@dataclass
class SlideElement:
    type: str  # "text" or "image"
    content: str  # OCR text, or a description of the graphic
    x: float  # percent of slide width
    y: float  # percent of slide height
    width: float
    height: float
    font_size: Optional[float] = None  # pt
    font_color: Optional[str] = None
    is_bold: Optional[bool] = None
    text_align: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SlideElement":
        kwargs = {
            "type": data.get("type"),
            "content": data.get("content"),
            "x": data.get("x"),
            "y": data.get("y"),
            "width": data.get("width"),
            "height": data.get("height"),
        }
        for wire_key, attr in _OPTIONAL_FIELDS.items():
            if wire_key in data:
                kwargs[attr] = data[wire_key]
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "type": self.type,
            "content": self.content,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }
        for wire_key, attr in _OPTIONAL_FIELDS.items():
            value = getattr(self, attr)
            if value is not None:
                out[wire_key] = value
        return out


@dataclass
class SlideAnalysisResult:
    background_color: str = DEFAULT_BACKGROUND_COLOR
    elements: List[SlideElement] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SlideAnalysisResult":
        # Values are taken as the model produced them; nothing is validated here.
        background = data.get("backgroundColor") or DEFAULT_BACKGROUND_COLOR
        raw_elements = data.get("elements")
        if not isinstance(raw_elements, list):
            raw_elements = []
        elements = [
            SlideElement.from_dict(el) for el in raw_elements if isinstance(el, dict)
        ]
        return cls(background_color=background, elements=elements)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "backgroundColor": self.background_color,
            "elements": [el.to_dict() for el in self.elements],
        }

    @property
    def text_elements(self) -> List[SlideElement]:
        return [el for el in self.elements if el.type == ElementType.TEXT]

    @property
    def image_elements(self) -> List[SlideElement]:
        return [el for el in self.elements if el.type == ElementType.IMAGE]
