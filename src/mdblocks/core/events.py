"""Block-level structural events and their derivation from markdown-it tokens"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional


class EventKind(str, Enum):
    start = "start"
    end = "end"
    text = "text"
    code = "code"           # inline code span
    softbreak = "softbreak"
    hardbreak = "hardbreak"
    rule = "rule"


class Tag(str, Enum):
    """Container elements carried by start/end events"""
    heading = "heading"
    paragraph = "paragraph"
    code_block = "code_block"
    list = "list"
    blockquote = "blockquote"
    table = "table"


@dataclass(frozen=True)
class Event:
    kind: EventKind
    tag: Optional[Tag] = None
    level: Optional[int] = None     # heading level (1-6) on heading start events
    text: str = ""

    @classmethod
    def start(cls, tag: Tag, level: Optional[int] = None) -> "Event":
        return cls(EventKind.start, tag=tag, level=level)

    @classmethod
    def end(cls, tag: Tag) -> "Event":
        return cls(EventKind.end, tag=tag)


SOFTBREAK = Event(EventKind.softbreak)
HARDBREAK = Event(EventKind.hardbreak)
RULE = Event(EventKind.rule)


CONTAINER_TAG_MAP: dict[str, Tag] = {
    'heading':      Tag.heading,
    'paragraph':    Tag.paragraph,
    'bullet_list':  Tag.list,
    'ordered_list': Tag.list,
    'blockquote':   Tag.blockquote,
    'table':        Tag.table,
}

CODE_TOKENS = {'fence', 'code_block'}


def heading_level(token) -> int | None:
    """Return the heading level (1-6) for a heading_open token, else None."""
    if token.type == 'heading_open' and token.tag and token.tag[0] == 'h' and token.tag[1:].isdigit():
        return int(token.tag[1:])
    return None


def _container_tag(token) -> Tag | None:
    """Map an *_open / *_close token to its container Tag, else None."""
    base, _, suffix = token.type.rpartition('_')
    if suffix not in ('open', 'close'):
        return None
    return CONTAINER_TAG_MAP.get(base)


def _inline_events(children: Iterable) -> Iterator[Event]:
    """Yield text and break events for the children of an inline token."""
    for child in children:
        if child.type == 'text':
            yield Event(EventKind.text, text=child.content)
        elif child.type == 'code_inline':
            yield Event(EventKind.code, text=child.content)
        elif child.type == 'softbreak':
            yield SOFTBREAK
        elif child.type == 'hardbreak':
            yield HARDBREAK
        elif child.type == 'image' and child.children:
            # alt text
            yield from _inline_events(child.children)


def token_events(tokens: Iterable) -> Iterator[Event]:
    """Convert a markdown-it token stream into block-level structural events.

    Fenced and indented code become a start/text/end triple; horizontal rules
    become a single rule event. List items, table rows/cells, and raw HTML
    produce no events.
    """
    for tok in tokens:
        if tok.type in CODE_TOKENS:
            yield Event.start(Tag.code_block)
            yield Event(EventKind.text, text=tok.content)
            yield Event.end(Tag.code_block)
        elif tok.type == 'hr':
            yield RULE
        elif tok.type == 'inline':
            yield from _inline_events(tok.children or [])
        elif (tag := _container_tag(tok)) is not None:
            if tok.nesting == 1:
                yield Event.start(tag, level=heading_level(tok))
            else:
                yield Event.end(tag)
