"""Export: render a parsed Document as plain dicts, JSON, or YAML"""

import json

import yaml

from mdblocks.core.models import Document


def document_to_dict(doc: Document) -> dict:
    """Return a JSON-safe dict of doc with kinds as lowercase names and a checklist summary.

    Metadata dates/datetimes are rendered as ISO strings.
    """
    data = doc.model_dump(mode="json")
    data["checklist_summary"] = doc.checklist_summary().model_dump(mode="json")
    return data


def to_json(doc: Document, indent: int | None = 2) -> str:
    return json.dumps(document_to_dict(doc), indent=indent, ensure_ascii=False)


def to_yaml(doc: Document) -> str:
    return yaml.safe_dump(document_to_dict(doc), default_flow_style=False, allow_unicode=True, sort_keys=False)


EXPORTERS = {
    "json": to_json,
    "yaml": to_yaml,
}


def render(doc: Document, fmt: str = "json") -> str:
    """Render doc in the named output format ('json' or 'yaml')."""
    try:
        exporter = EXPORTERS[fmt]
    except KeyError:
        raise ValueError(f"Unknown output format: {fmt!r}") from None
    return exporter(doc)
