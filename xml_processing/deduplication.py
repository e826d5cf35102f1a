"""Removal of repeated attribute names from lxml element trees.

Key functions: first_occurrences, remove_duplicate_attributes,
remove_duplicate_attributes_in_document
"""
from bootstrap.delayed_imports import ET


def first_occurrences(attributes):
    """Return the (name, value) pairs with only the first pair kept for each name, order preserved."""
    seen = set()
    kept = []
    for name, value in attributes:
        if name in seen:
            continue
        seen.add(name)
        kept.append((name, value))
    return kept


def _replace_attributes(element, attributes):
    element.attrib.clear()
    for name, value in attributes:
        element.set(name, value)


def remove_duplicate_attributes(element):
    """
    Remove repeated attributes from element and all its descendant elements, in place.

    On every element the first attribute of each name survives with its
    original value, and survivors keep their relative order. Names are
    compared as opaque strings, and only against attributes of the same
    element: a name repeated on a child never affects its parent or siblings.
    Text, comments, processing instructions and child order are untouched.

    The tree is walked with an explicit stack, so nesting depth is not bound
    by the interpreter's recursion limit.
    """
    stack = [element]
    while stack:
        node = stack.pop()
        attributes = node.items()
        kept = first_occurrences(attributes)
        if len(kept) != len(attributes):
            _replace_attributes(node, kept)
        # reversed: siblings are popped in document order
        stack.extend(reversed(list(node.iterchildren(ET.Element))))


def iter_top_level_nodes(tree):
    """Yield the document's top-level nodes (comments, PIs and the root element) in document order."""
    root = tree.getroot()
    yield from reversed(list(root.itersiblings(preceding=True)))
    yield root
    yield from root.itersiblings()


def remove_duplicate_attributes_in_document(tree):
    """Run remove_duplicate_attributes on every top-level element of the document tree."""
    for node in iter_top_level_nodes(tree):
        if isinstance(node.tag, str):
            remove_duplicate_attributes(node)
