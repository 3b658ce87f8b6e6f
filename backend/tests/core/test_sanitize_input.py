"""Input Sanitizer: verifies markup stripping on free-text fields.

Tests cover:
    - Non-string input degrades to ""
    - Script blocks removed with their content, in any letter case
    - Other tags removed, their text content kept
    - Surrounding whitespace trimmed
"""

import pytest

from app.core.sanitize_input import sanitize_input


@pytest.mark.parametrize("value", [None, 42, 3.5, ["a"], {"a": 1}, b"bytes"])
def test_non_string_becomes_empty(value):
    assert sanitize_input(value) == ""


def test_plain_text_is_trimmed():
    assert sanitize_input("  Drinks \n") == "Drinks"


def test_script_block_removed_with_body():
    assert sanitize_input("Tea<script>alert('x')</script>") == "Tea"


def test_script_block_removed_case_insensitive():
    assert sanitize_input("<SCRIPT type='text/javascript'>steal()</SCRIPT>Coffee") == "Coffee"


def test_html_tags_removed_text_kept():
    assert sanitize_input("<b>Hot</b> <i>Drinks</i>") == "Hot Drinks"


def test_only_markup_becomes_empty():
    assert sanitize_input("  <script>x()</script> <br/> ") == ""


def test_angle_bracket_without_tag_is_kept():
    assert sanitize_input("a < b") == "a < b"
