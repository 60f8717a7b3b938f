"""Sequential relationship edges between ordered blocks"""

from typing import Sequence

from mdblocks.core.models import Block, Edge


def build_edges(blocks: Sequence[Block]) -> list[Edge]:
    """Return a follows edge from each block to the next; empty for fewer than two blocks."""
    return [Edge.follows(i, i + 1) for i in range(len(blocks) - 1)]
