"""Serialization of lxml document trees back to text.

Key function: serialize_document
"""
from bootstrap.delayed_imports import ET


def serialize_document(tree):
    """Render the whole document (doctype, top-level comments/PIs, root element) as a str, without an XML declaration."""
    return ET.tostring(tree, encoding="unicode")
