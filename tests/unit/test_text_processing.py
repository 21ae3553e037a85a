"""Unit tests for text processing helpers."""

import pytest

from cvtex.utils.text_processing import (
    join_non_empty,
    normalize_newlines,
    set_max_consecutive_blank_lines,
    split_lines,
)


@pytest.mark.unit
def test_split_lines_drops_blank_and_whitespace_lines():
    assert split_lines("A\nB\n\n   \nC") == ["A", "B", "C"]


@pytest.mark.unit
def test_split_lines_empty():
    assert split_lines("") == []
    assert split_lines("\n\n") == []


@pytest.mark.unit
def test_normalize_newlines_variants():
    assert normalize_newlines("a\\nb\\nc") == "a\nb\nc"
    assert normalize_newlines("a\r\nb\rc") == "a\nb\nc"
    assert normalize_newlines("") == ""


@pytest.mark.unit
def test_normalize_newlines_keeps_backslash_n_next_to_real_newlines():
    text = "Macros:\n\\newcommand and C:\\new"
    assert normalize_newlines(text) == text


@pytest.mark.unit
def test_join_non_empty():
    assert join_non_empty(["Madrid", "", "hola@ejemplo.com"], " | ") == "Madrid | hola@ejemplo.com"
    assert join_non_empty(["", ""], " | ") == ""


@pytest.mark.unit
def test_set_max_consecutive_blank_lines():
    assert set_max_consecutive_blank_lines("text\n\n\n\nmore") == "text\n\nmore"
    assert set_max_consecutive_blank_lines("text\n\n\n\nmore", max_consecutive=0) == "text\nmore"
    assert set_max_consecutive_blank_lines("text\n\nmore") == "text\n\nmore"
