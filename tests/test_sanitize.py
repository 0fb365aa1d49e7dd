"""
Tests for slide_restore.sanitize

Covers:
  - fence stripping and trimming
  - cutting the payload down to the outermost braces
  - broken unicode escape repair
  - control character removal
  - parse_response success, empty and malformed paths
"""

import json
import logging

import pytest

from slide_restore.errors import MalformedJsonError
from slide_restore.models import SlideAnalysisResult
from slide_restore.sanitize import bound_object, parse_response, sanitize, strip_fences


# ---------------------------------------------------------------------------
# sanitize
# ---------------------------------------------------------------------------

class TestFences:

    def test_leading_and_trailing_fence(self):
        raw = '```json\n{"a": 1}\n```'
        assert sanitize(raw) == '{"a": 1}'

    def test_leading_fence_only(self):
        assert sanitize('```json {"a": 1}') == '{"a": 1}'

    def test_trailing_fence_only(self):
        assert sanitize('{"a": 1}  ```') == '{"a": 1}'

    def test_inner_content_unchanged(self):
        inner = '{"a": "x\\ny", "b": [1, 2]}'
        assert strip_fences("```json\n" + inner + "\n```\n") == inner

    def test_surrounding_whitespace_trimmed(self):
        assert strip_fences('   {"a": 1}\n\n') == '{"a": 1}'


class TestBraceBounding:

    def test_prose_before_and_after(self):
        raw = 'Here is the JSON: {"a": {"b": 2}} Hope that helps!'
        assert sanitize(raw) == '{"a": {"b": 2}}'

    def test_no_braces_is_noop(self):
        assert bound_object("no json here") == "no json here"

    def test_only_opening_brace_is_noop(self):
        assert bound_object("text { more") == "text { more"

    def test_span_is_verbatim(self):
        span = '{"k": "v} inside", "n": {}}'
        assert bound_object("xx" + span + "yy") == span


class TestUnicodeEscapes:

    def test_short_escape_loses_backslash(self):
        assert sanitize("\\u12 foo") == "u12 foo"

    def test_valid_escape_untouched(self):
        assert sanitize("\\u1234 foo") == "\\u1234 foo"

    def test_non_hex_escape(self):
        assert sanitize('{"a": "\\uZZZZ"}') == '{"a": "uZZZZ"}'

    def test_mixed_escapes(self):
        raw = '{"a": "\\u00e9 and \\u9"}'
        assert sanitize(raw) == '{"a": "\\u00e9 and u9"}'

    def test_repaired_payload_parses(self):
        raw = '{"content": "caf\\u00e and \\u00e9"}'
        assert json.loads(sanitize(raw)) == {"content": "cafu00e and é"}


class TestControlCharacters:

    def test_removes_control_keeps_tab(self):
        assert sanitize("a\x01b\tc") == "ab\tc"

    def test_keeps_newline_and_carriage_return(self):
        assert sanitize('{"a":\r\n1}') == '{"a":\r\n1}'

    @pytest.mark.parametrize("char", ["\x00", "\x08", "\x0b", "\x0c", "\x0e", "\x1f", "\x7f", "\x85", "\x9f"])
    def test_removed_ranges(self, char):
        assert sanitize('{"a": "x' + char + 'y"}') == '{"a": "xy"}'

    def test_printable_latin1_kept(self):
        assert sanitize('{"a": " é"}') == '{"a": " é"}'


# ---------------------------------------------------------------------------
# parse_response
# ---------------------------------------------------------------------------

class TestParseResponse:

    @pytest.mark.parametrize("raw", ["", None])
    def test_empty_gives_default(self, raw):
        result = parse_response(raw)
        assert result == SlideAnalysisResult()
        assert result.background_color == "#FFFFFF"
        assert result.elements == []

    def test_empty_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="slide_restore.sanitize"):
            parse_response("")
        assert "empty response" in caplog.text

    def test_fenced_payload(self):
        result = parse_response('```json\n{"backgroundColor":"#FFF","elements":[]}\n```')
        assert result.background_color == "#FFF"
        assert result.elements == []

    def test_noise_around_payload(self):
        raw = (
            'noise{"backgroundColor":"#000","elements":[{"type":"text","content":"hi",'
            '"x":0,"y":0,"width":10,"height":5}]}trailing'
        )
        result = parse_response(raw)
        assert result.background_color == "#000"
        assert len(result.elements) == 1
        element = result.elements[0]
        assert element.type == "text"
        assert element.content == "hi"
        assert (element.x, element.y, element.width, element.height) == (0, 0, 10, 5)

    def test_optional_fields(self):
        raw = json.dumps(
            {
                "backgroundColor": "#F9F9F9",
                "elements": [
                    {
                        "type": "text",
                        "content": "Title",
                        "x": 5,
                        "y": 5,
                        "width": 90,
                        "height": 10,
                        "fontSize": 26,
                        "fontColor": "#333333",
                        "isBold": True,
                        "textAlign": "center",
                    },
                    {"type": "image", "content": "a bar chart", "x": 10, "y": 20, "width": 40, "height": 50},
                ],
            }
        )
        result = parse_response(raw)
        title, chart = result.elements
        assert title.font_size == 26
        assert title.font_color == "#333333"
        assert title.is_bold is True
        assert title.text_align == "center"
        assert chart.font_size is None
        assert chart.is_bold is None

    def test_unrepairable_raises(self):
        with pytest.raises(MalformedJsonError) as excinfo:
            parse_response('{"backgroundColor": invalid}')
        assert excinfo.value.text == '{"backgroundColor": invalid}'
        assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    def test_non_json_constants_raise(self, constant):
        raw = (
            '{"backgroundColor":"#FFF","elements":[{"type":"text","content":"a",'
            '"x":' + constant + ',"y":0,"width":10,"height":5}]}'
        )
        with pytest.raises(MalformedJsonError):
            parse_response(raw)

    def test_non_object_elements_ignored(self):
        assert parse_response('{"backgroundColor":"#FFF","elements":5}').elements == []

    def test_malformed_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_response("{not json}")

    def test_no_object_raises(self):
        with pytest.raises(MalformedJsonError):
            parse_response("I could not analyze this slide.")

    def test_top_level_array_raises(self):
        with pytest.raises(MalformedJsonError):
            parse_response("[1, 2, 3]")

    def test_missing_background_defaults(self):
        assert parse_response('{"elements": []}').background_color == "#FFFFFF"

    def test_fresh_result_per_call(self):
        first = parse_response("")
        second = parse_response("")
        assert first is not second
        first.elements.append(None)
        assert second.elements == []
