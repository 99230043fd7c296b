"""Tests for verifier output parsing and page-text extraction."""

import pytest
from pydantic import ValidationError

from interview_room.services.verification.models import MalformedVerificationError
from interview_room.services.verification.tools import html_to_text
from interview_room.services.verification.verifier import parse_verification_answer


def test_parse_plain_json():
    answer = parse_verification_answer('{"confidence": 0.8, "reason": "docs", "answer": "2019"}')
    assert answer.confidence == 0.8
    assert answer.answer == "2019"


def test_parse_json_wrapped_in_prose():
    text = 'Here is my result:\n```json\n{"confidence": 1, "reason": "r", "answer": "yes"}\n```'
    assert parse_verification_answer(text).answer == "yes"


def test_parse_rejects_non_json():
    with pytest.raises(MalformedVerificationError):
        parse_verification_answer("no idea")


def test_parse_rejects_missing_fields():
    with pytest.raises(ValidationError):
        parse_verification_answer('{"confidence": 0.5}')


def test_parse_rejects_out_of_range_confidence():
    with pytest.raises(ValidationError):
        parse_verification_answer('{"confidence": 3, "reason": "r", "answer": "a"}')


def test_html_to_text_strips_markup():
    html = "<html><head><style>p{}</style><script>x()</script></head><body><p>Hello</p>\n\n\n<p>World</p></body></html>"
    assert html_to_text(html) == "Hello\n\nWorld"


def test_html_to_text_decodes_entities():
    assert html_to_text("<p>AT&amp;T &lt;3</p>") == "AT&T <3"
