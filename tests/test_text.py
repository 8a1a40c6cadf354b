"""Tests for text helpers."""

from papertrend.utils.text import clean_title, json_dumps, strip_tags


def test_strip_tags_keeps_entities():
    assert strip_tags("  <p>Fast &amp; <em>cheap</em></p> ") == "Fast &amp; cheap"


def test_strip_tags_removes_unterminated_tag():
    assert strip_tags("text <b") == "text"


def test_strip_tags_empty():
    assert strip_tags(None) == ""
    assert strip_tags("") == ""


def test_clean_title():
    assert clean_title("  Title \n") == "Title"
    assert clean_title(None) == ""


def test_json_dumps_keeps_order_and_unicode():
    assert json_dumps({"b": 1, "a": "é"}) == '{"b": 1, "a": "é"}'