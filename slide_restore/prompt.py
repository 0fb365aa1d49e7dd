RESTORATION_PROMPT = (
    "You are a Slide Restoration Expert. Your mission is to reconstruct this slide as an editable PPTX "
    "while perfectly preserving graphics and erasing text.\n\n"
    "STRICT WATERMARK REMOVAL RULES:\n"
    '1. REMOVE WATERMARKS: Explicitly ignore and EXCLUDE any text or logos that say "NotebookLM", '
    "especially in the bottom right corner. Do NOT create text boxes or image crops for these watermarks.\n"
    "2. COHESIVE ASSETS: Do NOT break icons or diagrams into fragments. Capture the WHOLE graphic group "
    "as a SINGLE 'image' element.\n"
    "3. NO CROPPED TEXT: Ensure 'image' elements focus on pure graphics. If text is nearby, capture the "
    "graphic as a clean sticker.\n"
    "4. FULL OCR: Detect every relevant text block (excluding the watermark). We will replace them with "
    "editable boxes.\n"
    "5. BACKGROUND: Identify the background color accurately.\n"
    "6. FONT SIZES: Be conservative for Chinese text (9-11pt body, 24-28pt titles).\n\n"
    "OUTPUT RULES:\n"
    "- Return ONLY a valid JSON object.\n"
    "- Do NOT include backslashes in text content unless properly escaped for JSON.\n"
    "- Do NOT use markdown code blocks in your response."
)

_ELEMENT_SCHEMA = {
    "type": "object",
    "properties": {
        "type": {"type": "string", "description": "Element type: 'text' or 'image'."},
        "content": {
            "type": "string",
            "description": "OCR text for 'text' type. Description for 'image' type.",
        },
        "x": {"type": "number", "description": "X pos (0-100)"},
        "y": {"type": "number", "description": "Y pos (0-100)"},
        "width": {"type": "number", "description": "Width (0-100)"},
        "height": {"type": "number", "description": "Height (0-100)"},
        "fontSize": {
            "type": "number",
            "description": "Font size in pt. (Body: 9-11pt, Title: 24-28pt, Stats: 32-40pt).",
        },
        "fontColor": {"type": "string", "description": "Hex color."},
        "isBold": {"type": "boolean"},
        "textAlign": {"type": "string", "description": "left, center, or right."},
    },
    "required": ["type", "content", "x", "y", "width", "height"],
}

RESPONSE_SCHEMA = {
    "type": "object",
    "properties": {
        "backgroundColor": {
            "type": "string",
            "description": "Primary hex color of the slide background (e.g., #F9F9F9).",
        },
        "elements": {"type": "array", "items": _ELEMENT_SCHEMA},
    },
    "required": ["backgroundColor", "elements"],
}
