"""Slug generation for exported document file names"""

import re


_STRIP_RE = re.compile(r'[^\w\s-]')
_SEP_RE = re.compile(r'[\s_]+')


def slugify(text: str, default: str = "document") -> str:
    """Convert text to a lowercase, hyphen-separated file-safe slug; default when nothing remains."""
    text = _STRIP_RE.sub('', text.lower())
    text = _SEP_RE.sub('-', text)
    return re.sub(r'-+', '-', text).strip('-') or default
