"""Parsing of XML text into lxml document trees.

Key functions: make_parser, parse_document
"""
from bootstrap.delayed_imports import ET

# The only error log entry that does not make a document unusable: the same
# qualified name repeated on one element, which the deduplicator repairs.
# Namespace errors stay fatal. An unbound prefix leaves a raw "p:a" name that
# lxml refuses to set again, and two prefixes bound to one URI would fold
# distinct qualified names into a single Clark name.
_TOLERATED_ERRORS = frozenset({
    ET.ErrorTypes.ERR_ATTRIBUTE_REDEFINED,
})


class XmlParseFailure(Exception):
    """Raised when text cannot be turned into a well-formed document."""


def make_parser():
    """Build a fresh lxml parser. Parsers keep an error log, so never share one between calls."""
    return ET.XMLParser(
        recover=True,
        encoding="utf-8",
        resolve_entities=False,
        no_network=True,
        strip_cdata=False,
        remove_blank_text=False,
        remove_comments=False,
        remove_pis=False,
        huge_tree=True,
    )


def _blocking_errors(error_log):
    """Return the error log entries that mean the document is not well-formed."""
    return [
        entry for entry in error_log
        if entry.level >= ET.ErrorLevels.ERROR and entry.type not in _TOLERATED_ERRORS
    ]


def _describe(entry):
    return f"{entry.message} (line {entry.line}, column {entry.column})"


def parse_document(text):
    """
    Parse XML text into an lxml ElementTree.

    The parser runs in recovery mode so that elements with repeated attribute
    names still produce a tree, but any other well-formedness error rejects the
    whole document: there is no partial recovery.

    Args:
        text: The document as an already decoded string. Any encoding
            declaration inside it is ignored.

    Returns:
        lxml.etree._ElementTree for the parsed document

    Raises:
        XmlParseFailure: if the text is empty, cannot be encoded, or is not
            well-formed XML.
    """
    if not text:
        raise XmlParseFailure("Document is empty")

    try:
        data = text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise XmlParseFailure(f"Encoding error: {e}") from e

    parser = make_parser()
    try:
        root = ET.fromstring(data, parser)
    except ET.XMLSyntaxError as e:
        raise XmlParseFailure(str(e)) from e

    blocking = _blocking_errors(parser.error_log)
    if blocking:
        raise XmlParseFailure(_describe(blocking[0]))
    if root is None:
        raise XmlParseFailure("Document has no root element")

    return root.getroottree()
