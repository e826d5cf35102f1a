"""Attribute deduplication filter: parse, clean and re-serialize XML text.

Key functions: sanitize, filter_xml
"""
from dataclasses import dataclass
from typing import Optional

from .readers import XmlParseFailure, parse_document
from .deduplication import remove_duplicate_attributes_in_document
from .writers import serialize_document


@dataclass(frozen=True)
class FilterResult:
    """Outcome of one filter run: cleaned text on success, a reason on failure."""
    text: str = ""
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.reason is None


def sanitize(text: str) -> FilterResult:
    """
    Remove duplicate attributes from every element of an XML document.

    The first occurrence of each attribute name on an element is kept; later
    ones are dropped. Everything else in the document is re-serialized as
    parsed.

    Returns:
        FilterResult with the cleaned text, or with the parser's message as
        reason if the text is not well-formed XML.
    """
    try:
        tree = parse_document(text)
    except XmlParseFailure as e:
        return FilterResult(reason=str(e))

    remove_duplicate_attributes_in_document(tree)
    return FilterResult(text=serialize_document(tree))


def filter_xml(text: str) -> str:
    """Return text with duplicate attributes removed, or "" if it could not be parsed."""
    return sanitize(text).text
