"""Template placeholder scanning for {{name}} tokens"""

import re


PLACEHOLDER_RE = re.compile(r'\{\{(\w+)\}\}')


def extract_placeholders(text: str) -> list[str]:
    """Return placeholder names in order of occurrence, duplicates included."""
    return PLACEHOLDER_RE.findall(text)


def extract_unique_placeholders(text: str) -> list[str]:
    """Return the sorted set of placeholder names in text."""
    return sorted(set(PLACEHOLDER_RE.findall(text)))


def has_placeholders(text: str) -> bool:
    return PLACEHOLDER_RE.search(text) is not None


def count_placeholders(text: str) -> int:
    """Return the total number of placeholder occurrences (duplicates counted)."""
    return sum(1 for _ in PLACEHOLDER_RE.finditer(text))
