"""Tests for JSON parser."""

from interview_room.utils.json_parser import JSONParser


def test_extract_json_simple():
    """Test extracting simple JSON."""
    text = '{"confidence": 0.9, "reason": "r", "answer": "a"}'
    result = JSONParser.extract_json(text)
    assert result == {"confidence": 0.9, "reason": "r", "answer": "a"}


def test_extract_json_in_code_block():
    """Test extracting JSON from code block."""
    text = 'Result:\n```json\n{"answer": "Paris"}\n```'
    result = JSONParser.extract_json(text)
    assert result == {"answer": "Paris"}


def test_extract_json_in_answer_tags():
    """Test extracting JSON from answer tags."""
    text = '<answer>{"answer": "Paris"}</answer>'
    result = JSONParser.extract_json(text)
    assert result == {"answer": "Paris"}


def test_extract_json_embedded_in_prose():
    text = 'After searching, {"answer": "1991"} is my best guess.'
    assert JSONParser.extract_json(text) == {"answer": "1991"}


def test_extract_json_array_is_not_an_object():
    assert JSONParser.extract_json("[1, 2, 3]") == {}


def test_extract_json_invalid():
    """Test extracting invalid JSON returns empty dict."""
    assert JSONParser.extract_json("not json at all") == {}
    assert JSONParser.extract_json("") == {}
