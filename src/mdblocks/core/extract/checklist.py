"""Checklist extraction: `- [ ]` / `- [x]` lines with indent and (AC: ...) references"""

import re

from mdblocks.core.models import ChecklistItem, ChecklistSummary


CHECKLIST_RE = re.compile(r'^(\s*)- \[([ xX])\] (.+)$')
REFS_RE = re.compile(r'\(AC:\s*([^)]+)\)')
INDENT_WIDTH = 2


def _lines(text: str) -> list[str]:
    """Split on newlines, dropping a trailing carriage return from each line."""
    return [line[:-1] if line.endswith('\r') else line for line in text.split('\n')]


def extract_refs(text: str) -> list[str]:
    """Return trimmed, non-empty tokens from the first (AC: ...) annotation in text.

    A second annotation on the same text is ignored.
    """
    m = REFS_RE.search(text)
    if not m:
        return []
    return [ref.strip() for ref in m.group(1).split(',') if ref.strip()]


def parse_checklist_line(line: str) -> ChecklistItem | None:
    """Return a ChecklistItem if line is a checklist entry, else None."""
    m = CHECKLIST_RE.match(line)
    if not m:
        return None
    indent, marker, text = m.groups()
    return ChecklistItem(
        text=text,
        checked=marker.lower() == 'x',
        indent=len(indent) // INDENT_WIDTH,     # tabs count as one character
        refs=tuple(extract_refs(text)),
    )


def extract_checklist_items(text: str) -> list[ChecklistItem]:
    """Scan text line by line and return checklist items in source order."""
    items = []
    for line in _lines(text):
        item = parse_checklist_line(line)
        if item is not None:
            items.append(item)
    return items


def summarize(items: list[ChecklistItem]) -> ChecklistSummary:
    return ChecklistSummary.from_items(items)
