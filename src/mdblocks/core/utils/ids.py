"""Block identifier generation modes"""

from enum import Enum
from typing import Callable
from uuid import uuid4


class IdMode(str, Enum):
    """uuid: random uuid4 per block; none: empty ids for deterministic output"""
    uuid = "uuid"
    none = "none"


def id_factory(mode: IdMode) -> Callable[[], str]:
    """Return a zero-argument callable producing block ids for the given mode."""
    if IdMode(mode) is IdMode.uuid:
        return lambda: str(uuid4())
    return lambda: ""
