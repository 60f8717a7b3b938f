"""File discovery, metadata stripping, and document assembly from markdown text"""

import datetime
import logging
from pathlib import Path
from typing import Any, Optional

import yaml
from markdown_it import MarkdownIt

from mdblocks.core.edges import build_edges
from mdblocks.core.errors import MetadataParseError
from mdblocks.core.events import token_events
from mdblocks.core.extract.checklist import extract_checklist_items
from mdblocks.core.models import Document
from mdblocks.core.reduce import reduce_events
from mdblocks.core.utils.ids import IdMode, id_factory


logger = logging.getLogger(__name__)

METADATA_DELIMITER = '---'
MD_EXTENSIONS = {'.md', '.mdx'}


def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def _key_name(key) -> str:
    """Render a YAML scalar mapping key as a string (true -> 'true', 1 -> '1', null -> 'null')."""
    if key is None:
        return 'null'
    if isinstance(key, bool):
        return 'true' if key else 'false'
    if isinstance(key, datetime.date):
        return key.isoformat()
    if isinstance(key, (str, int, float)):
        return str(key)
    raise MetadataParseError(f"Invalid YAML metadata: unsupported mapping key {key!r}")


def _string_keys(value: Any) -> Any:
    """Recursively convert mapping keys to strings inside nested mappings and sequences."""
    if isinstance(value, dict):
        return {_key_name(k): _string_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_string_keys(v) for v in value]
    return value


def strip_metadata(text: str) -> tuple[Optional[dict[str, Any]], str]:
    """Return (metadata, body) with a leading YAML block removed.

    The block opens with a first line of exactly '---' (after leading
    whitespace) and closes at the next newline followed by '---'. Without
    both delimiters the text is returned unchanged with None metadata.
    Scalar mapping keys (ints, booleans, dates) become strings at every
    level. Raises MetadataParseError for invalid YAML, a non-mapping
    payload, or a key with no string form.
    """
    trimmed = text.lstrip()
    first_line = trimmed.split('\n', 1)[0].rstrip('\r')
    if first_line != METADATA_DELIMITER:
        return None, text

    rest = trimmed[len(METADATA_DELIMITER):]
    end = rest.find('\n' + METADATA_DELIMITER)
    if end == -1:
        return None, text

    raw = rest[:end].removeprefix('\n')
    body = rest[end + 1 + len(METADATA_DELIMITER):].lstrip('\n')
    try:
        metadata = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise MetadataParseError(f"Invalid YAML metadata: {e}") from e
    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        raise MetadataParseError(f"Invalid YAML metadata: expected a mapping, got {type(metadata).__name__}")
    return _string_keys(metadata), body


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.suffix in MD_EXTENSIONS)


class MarkdownParser:
    """Assembles a Document from markdown text.

    Holds only immutable configuration, so a single instance may parse
    independent inputs concurrently.
    """

    def __init__(
        self,
        id_mode: IdMode = IdMode.uuid,
        parser_config: str = 'gfm-like',
        frontmatter: bool = True,
        ):
        self.id_mode = IdMode(id_mode)
        self.frontmatter = frontmatter
        self._md = _make_parser(parser_config)
        self._make_id = id_factory(self.id_mode)

    @classmethod
    def without_ids(cls, **kwargs) -> "MarkdownParser":
        """Parser producing empty block ids, for deterministic output."""
        return cls(id_mode=IdMode.none, **kwargs)

    @classmethod
    def from_settings(cls, settings) -> "MarkdownParser":
        return cls(
            id_mode=IdMode.uuid if settings.generate_ids else IdMode.none,
            parser_config=settings.parser_config,
            frontmatter=settings.frontmatter,
        )

    def parse(self, text: str) -> Document:
        """Parse markdown text into an immutable Document.

        Raises MetadataParseError if a leading metadata block holds invalid YAML.
        """
        metadata = None
        body = text
        if self.frontmatter:
            metadata, body = strip_metadata(text)

        reduction = reduce_events(token_events(self._md.parse(body)), self._make_id)
        checklist_items = extract_checklist_items(body)
        edges = build_edges(reduction.blocks)
        logger.debug(
            "parsed %d blocks, %d checklist items, metadata=%s",
            len(reduction.blocks), len(checklist_items), metadata is not None,
        )
        return Document(
            title=reduction.title,
            blocks=tuple(reduction.blocks),
            placeholders=tuple(sorted(set(reduction.placeholders))),
            edges=tuple(edges),
            checklist_items=tuple(checklist_items),
            metadata=metadata,
        )

    def parse_file(self, path: Path) -> Document:
        """Read a UTF-8 file and parse it.

        OSError propagates on read failure, UnicodeDecodeError on invalid UTF-8.
        """
        return self.parse(Path(path).read_text(encoding='utf-8'))


def parse(text: str, id_mode: IdMode = IdMode.uuid) -> Document:
    """Parse text with a default-configured MarkdownParser."""
    return MarkdownParser(id_mode=id_mode).parse(text)
