"""Typed document model: blocks, edges, checklist items, and the parsed document"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class BlockKind(str, Enum):
    """Closed set of content block types"""
    heading = "heading"
    paragraph = "paragraph"
    list = "list"
    code = "code"
    table = "table"
    blockquote = "blockquote"
    rule = "hr"
    checklist = "checklist"
    choice = "choice"


class EdgeKind(str, Enum):
    """Relationship types between blocks"""
    follows = "follows"
    contains = "contains"


class Block(BaseModel):
    """A contiguous, typed span of content at a fixed reading-order position."""
    model_config = ConfigDict(frozen=True)

    id: str
    kind: BlockKind
    level: Optional[int] = Field(default=None, ge=1, le=6)   # headings only
    content: str
    order_idx: int = Field(..., ge=0)
    placeholders: tuple[str, ...] = ()


class Edge(BaseModel):
    """A directed relationship between two block positions."""
    model_config = ConfigDict(frozen=True)

    source_idx: int
    target_idx: int
    kind: EdgeKind

    @classmethod
    def follows(cls, source_idx: int, target_idx: int) -> "Edge":
        return cls(source_idx=source_idx, target_idx=target_idx, kind=EdgeKind.follows)

    @classmethod
    def contains(cls, source_idx: int, target_idx: int) -> "Edge":
        return cls(source_idx=source_idx, target_idx=target_idx, kind=EdgeKind.contains)


class ChecklistItem(BaseModel):
    """A task-list line with completion state, indent depth, and reference tokens."""
    model_config = ConfigDict(frozen=True)

    text: str
    checked: bool
    indent: int = Field(default=0, ge=0)
    refs: tuple[str, ...] = ()


class ChecklistSummary(BaseModel):
    """Completion counts over a list of checklist items."""
    model_config = ConfigDict(frozen=True)

    total: int = 0
    completed: int = 0
    pending: int = 0
    percentage: float = 0.0

    @classmethod
    def from_items(cls, items) -> "ChecklistSummary":
        total = len(items)
        completed = sum(1 for item in items if item.checked)
        percentage = completed / total * 100.0 if total else 0.0
        return cls(total=total, completed=completed, pending=total - completed, percentage=percentage)

    @property
    def is_complete(self) -> bool:
        return self.total > 0 and self.completed == self.total

    @property
    def is_empty(self) -> bool:
        return self.total == 0 or self.completed == 0


class Document(BaseModel):
    """Immutable result of parsing one markdown text.

    Fields cannot be reassigned and sequences are tuples. metadata is the
    exception: it is a plain dict (string keys) built fresh for every parse,
    so it is owned by the caller and not shared between documents.
    """
    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    blocks: tuple[Block, ...] = ()
    placeholders: tuple[str, ...] = ()      # sorted, unique across all blocks
    edges: tuple[Edge, ...] = ()
    checklist_items: tuple[ChecklistItem, ...] = ()
    metadata: Optional[dict[str, Any]] = None

    def checklist_summary(self) -> ChecklistSummary:
        return ChecklistSummary.from_items(self.checklist_items)

    def get_block(self, idx: int) -> Optional[Block]:
        """Return the block at order index idx, or None when out of range."""
        if 0 <= idx < len(self.blocks):
            return self.blocks[idx]
        return None

    def get_block_by_id(self, block_id: str) -> Optional[Block]:
        return next((b for b in self.blocks if b.id == block_id), None)

    def blocks_by_kind(self, kind: BlockKind | str) -> list[Block]:
        """Return blocks of the given kind; accepts a BlockKind or its canonical name (e.g. 'hr')."""
        kind = BlockKind(kind)
        return [b for b in self.blocks if b.kind == kind]
