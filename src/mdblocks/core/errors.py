"""Exceptions raised on the document parsing path"""


class ParseError(Exception):
    """Base class for document parsing failures."""


class StructuralError(ParseError):
    """Invalid markdown structure. Reserved: the block reducer tolerates any event order."""


class MetadataParseError(ParseError, ValueError):
    """Malformed YAML inside a leading metadata block."""
