"""Block segmentation: reduce structural events into finalized, non-overlapping blocks"""

from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

from mdblocks.core.events import Event, EventKind, Tag
from mdblocks.core.extract.placeholders import extract_placeholders
from mdblocks.core.models import Block, BlockKind


RULE_CONTENT = "---"

TAG_KIND_MAP: dict[Tag, BlockKind] = {
    Tag.heading:    BlockKind.heading,
    Tag.paragraph:  BlockKind.paragraph,
    Tag.code_block: BlockKind.code,
    Tag.list:       BlockKind.list,
    Tag.blockquote: BlockKind.blockquote,
    Tag.table:      BlockKind.table,
}


@dataclass
class Reduction:
    """Output of a reducer pass: title, ordered blocks, and raw placeholder occurrences."""
    title: Optional[str] = None
    blocks: list[Block] = field(default_factory=list)
    placeholders: list[str] = field(default_factory=list)


class EventReducer:
    """Stateful reducer from a well-nested event stream to ordered blocks.

    Paragraphs nested in a list or blockquote are merged into the outermost
    container's buffer, so nested containers never split a block. Depth
    counters saturate at zero, and unexpected event orders are absorbed by
    whatever state is active; the reducer never raises.
    """

    def __init__(self, make_id: Callable[[], str]):
        self._make_id = make_id
        self._buffer: list[str] = []
        self._kind: Optional[BlockKind] = None
        self._level: Optional[int] = None
        self._list_depth = 0
        self._quote_depth = 0
        self._order_idx = 0
        self._result = Reduction()

    @property
    def _nested(self) -> bool:
        return self._list_depth > 0 or self._quote_depth > 0

    def _emit(self, kind: BlockKind, content: str, level: Optional[int] = None,
              placeholders: tuple[str, ...] = ()) -> None:
        self._result.blocks.append(Block(
            id=self._make_id(),
            kind=kind,
            level=level,
            content=content,
            order_idx=self._order_idx,
            placeholders=placeholders,
        ))
        self._order_idx += 1

    def _flush(self) -> None:
        """Finalize the open block if it has content; always reset buffer, kind, and level."""
        kind, self._kind = self._kind, None
        content = ''.join(self._buffer).strip()
        if kind is not None and content:
            found = extract_placeholders(content)
            self._result.placeholders.extend(found)
            self._emit(kind, content, self._level, tuple(found))
        self._buffer.clear()
        self._level = None

    def _open(self, tag: Tag, level: Optional[int] = None) -> None:
        self._flush()
        self._kind = TAG_KIND_MAP[tag]
        self._level = level

    def _start(self, event: Event) -> None:
        tag = event.tag
        if tag is Tag.heading:
            self._open(tag, event.level)
        elif tag is Tag.paragraph:
            if not self._nested:
                self._open(tag)
        elif tag is Tag.list:
            if self._list_depth == 0:
                self._open(tag)
            self._list_depth += 1
        elif tag is Tag.blockquote:
            if self._quote_depth == 0:
                self._open(tag)
            self._quote_depth += 1
        elif tag in (Tag.code_block, Tag.table):
            self._open(tag)

    def _end(self, event: Event) -> None:
        tag = event.tag
        if tag is Tag.heading:
            if self._result.title is None and self._level == 1:
                self._result.title = ''.join(self._buffer).strip()
            self._flush()
        elif tag is Tag.paragraph:
            if not self._nested:
                self._flush()
        elif tag is Tag.list:
            self._list_depth = max(self._list_depth - 1, 0)
            if self._list_depth == 0:
                self._flush()
        elif tag is Tag.blockquote:
            self._quote_depth = max(self._quote_depth - 1, 0)
            if self._quote_depth == 0:
                self._flush()
        elif tag in (Tag.code_block, Tag.table):
            self._flush()

    def feed(self, event: Event) -> None:
        """Apply a single event to the reducer state."""
        kind = event.kind
        if kind is EventKind.start:
            self._start(event)
        elif kind is EventKind.end:
            self._end(event)
        elif kind in (EventKind.text, EventKind.code):
            self._buffer.append(event.text)
        elif kind in (EventKind.softbreak, EventKind.hardbreak):
            self._buffer.append('\n')
        elif kind is EventKind.rule:
            self._flush()
            self._emit(BlockKind.rule, RULE_CONTENT)

    def finish(self) -> Reduction:
        """Flush any open block and return the accumulated result."""
        self._flush()
        return self._result


def reduce_events(events: Iterable[Event], make_id: Callable[[], str]) -> Reduction:
    """Run a fresh EventReducer over events and return its Reduction."""
    reducer = EventReducer(make_id)
    for event in events:
        reducer.feed(event)
    return reducer.finish()
