"""Unit tests for core/extract/checklist.py"""

import pytest

from mdblocks.core.extract.checklist import (
    extract_checklist_items,
    extract_refs,
    parse_checklist_line,
    summarize,
)


def test_extract_simple_checklist():
    """Unchecked and checked items keep their text after the marker."""
    items = extract_checklist_items("- [ ] Task 1\n- [x] Task 2")
    assert [(i.text, i.checked) for i in items] == [("Task 1", False), ("Task 2", True)]


def test_nested_checklist_with_refs():
    """Indent, checked state, and refs for a nested checklist."""
    items = extract_checklist_items("- [ ] Task 1 (AC: 1)\n  - [x] Subtask 1.1\n- [x] Task 2 (AC: 2, 3)")
    assert [i.indent for i in items] == [0, 1, 0]
    assert [i.checked for i in items] == [False, True, True]
    assert [list(i.refs) for i in items] == [["1"], [], ["2", "3"]]
    assert items[0].text == "Task 1 (AC: 1)"

    summary = summarize(items)
    assert (summary.total, summary.completed, summary.pending) == (3, 2, 1)
    assert summary.percentage == pytest.approx(66.667, abs=1e-3)


def test_deep_nesting_indent_levels():
    items = extract_checklist_items("- [ ] Parent\n  - [x] Child 1\n  - [ ] Child 2\n    - [x] Grandchild")
    assert [i.indent for i in items] == [0, 1, 1, 2]


@pytest.mark.parametrize("line,indent", [
    (" - [ ] one space", 0),
    ("   - [ ] three spaces", 1),
    ("     - [ ] five spaces", 2),
    ("\t- [ ] one tab", 0),
    ("\t\t- [ ] two tabs", 1),
])
def test_indent_rounds_down(line, indent):
    """Indent is leading whitespace length // 2; tabs count as one character."""
    assert parse_checklist_line(line).indent == indent


def test_uppercase_marker_is_checked():
    assert parse_checklist_line("- [X] Task with uppercase X").checked


@pytest.mark.parametrize("line", [
    "- [y] Not a marker",
    "- [] Missing marker",
    "- [ ]No space after bracket",
    "-[ ] No space after dash",
    "* [ ] Asterisk bullet",
    "- [ ] ",
    "Regular text",
    "- Normal list item",
])
def test_non_checklist_lines(line):
    assert parse_checklist_line(line) is None


def test_output_follows_source_order():
    """Items are returned top-to-bottom regardless of indent."""
    items = extract_checklist_items("    - [ ] deep\n- [ ] top\n  - [ ] mid")
    assert [i.text for i in items] == ["deep", "top", "mid"]
    assert [i.indent for i in items] == [2, 0, 1]


def test_mixed_content_only_picks_checklist_lines():
    items = extract_checklist_items("# Heading\n\n- [ ] Task\n\nRegular text\n\n- Normal list item")
    assert len(items) == 1
    assert items[0].text == "Task"


def test_crlf_line_endings():
    items = extract_checklist_items("- [x] Done\r\n- [ ] Todo\r\n")
    assert [i.text for i in items] == ["Done", "Todo"]


def test_refs_trimmed_and_empty_dropped():
    """Reference tokens are trimmed and empty pieces dropped, order kept."""
    assert extract_refs("Task (AC:  1 ,  2 ,  3  )") == ["1", "2", "3"]
    assert extract_refs("Task (AC: 4,, 2,)") == ["4", "2"]
    assert extract_refs("Task (AC: )") == []


def test_only_first_ref_annotation_honored():
    """A second (AC: ...) on the same line is ignored."""
    item = parse_checklist_line("- [ ] Task (AC: 1) and later (AC: 2)")
    assert item.refs == ("1",)


def test_no_refs():
    assert parse_checklist_line("- [ ] Task without AC").refs == ()
    assert extract_refs("(ac: 1)") == []


def test_empty_text():
    assert extract_checklist_items("") == []
    summary = summarize([])
    assert summary.percentage == 0.0
