"""XML processing: parse, deduplicate attributes, re-serialize.

Readers: parse_document, make_parser, XmlParseFailure
Deduplication: first_occurrences, remove_duplicate_attributes,
remove_duplicate_attributes_in_document
Writers: serialize_document
Filtering: sanitize, filter_xml, FilterResult
"""
from .readers import XmlParseFailure, make_parser, parse_document
from .deduplication import (
    first_occurrences,
    remove_duplicate_attributes,
    remove_duplicate_attributes_in_document,
)
from .writers import serialize_document
from .filtering import FilterResult, filter_xml, sanitize

__all__ = [
    'XmlParseFailure',
    'make_parser',
    'parse_document',
    'first_occurrences',
    'remove_duplicate_attributes',
    'remove_duplicate_attributes_in_document',
    'serialize_document',
    'FilterResult',
    'filter_xml',
    'sanitize',
]
