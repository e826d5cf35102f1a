"""Tests for the attribute deduplicator."""

from lxml import etree

from xml_processing import (
    first_occurrences,
    parse_document,
    remove_duplicate_attributes,
    remove_duplicate_attributes_in_document,
    serialize_document,
)
from xml_processing.deduplication import _replace_attributes


class FakeElement:
    """Minimal element whose attribute list may repeat names, like a raw start tag."""

    def __init__(self, tag, attributes=(), children=()):
        self.tag = tag
        self.attrib = list(attributes)
        self.children = list(children)
        self.set_calls = 0

    def items(self):
        return list(self.attrib)

    def set(self, name, value):
        self.set_calls += 1
        self.attrib.append((name, value))

    def iterchildren(self, tag=None):
        return iter(self.children)


class TestFirstOccurrences:
    """Test the per-element attribute list rebuild."""

    def test_keeps_first_value(self):
        """Test that later values of a repeated name are dropped."""
        pairs = [("a", "1"), ("b", "2"), ("a", "3")]
        assert first_occurrences(pairs) == [("a", "1"), ("b", "2")]

    def test_preserves_order(self):
        """Test that survivors keep their relative order."""
        pairs = [("z", "1"), ("y", "2"), ("z", "3"), ("x", "4"), ("y", "5")]
        assert first_occurrences(pairs) == [("z", "1"), ("y", "2"), ("x", "4")]

    def test_identical_duplicates(self):
        """Test that an exact repeat is dropped too."""
        assert first_occurrences([("x", "9"), ("x", "9"), ("y", "5")]) == [("x", "9"), ("y", "5")]

    def test_empty(self):
        """Test that no attributes stay no attributes."""
        assert first_occurrences([]) == []

    def test_names_are_opaque(self):
        """Test that names differing only by prefix or case are distinct."""
        pairs = [("p:a", "1"), ("q:a", "2"), ("A", "3"), ("a", "4")]
        assert first_occurrences(pairs) == pairs

    def test_accepts_iterators(self):
        """Test that any iterable of pairs works."""
        assert first_occurrences(iter([("a", "1"), ("a", "2")])) == [("a", "1")]


class TestRemoveDuplicateAttributes:
    """Test the tree walk."""

    def test_repeated_names_on_every_level(self):
        """Test that every node in the subtree is deduplicated."""
        grandchild = FakeElement("g", [("k", "1"), ("k", "2")])
        child = FakeElement("c", [("x", "9"), ("x", "9"), ("y", "5")], [grandchild])
        root = FakeElement("root", [("a", "1"), ("a", "2")], [child])

        remove_duplicate_attributes(root)

        assert root.attrib == [("a", "1")]
        assert child.attrib == [("x", "9"), ("y", "5")]
        assert grandchild.attrib == [("k", "1")]

    def test_scoping_between_parent_and_child(self):
        """Test that a name on the parent does not remove it from the child."""
        child = FakeElement("c", [("a", "2"), ("a", "3")])
        root = FakeElement("root", [("a", "1")], [child])

        remove_duplicate_attributes(root)

        assert root.attrib == [("a", "1")]
        assert child.attrib == [("a", "2")]

    def test_clean_nodes_untouched(self):
        """Test that nodes without duplicates are not rewritten."""
        child = FakeElement("c", [("a", "1"), ("b", "2")])
        root = FakeElement("root", [], [child])

        remove_duplicate_attributes(root)

        assert child.attrib == [("a", "1"), ("b", "2")]
        assert child.set_calls == 0
        assert root.set_calls == 0

    def test_children_order_untouched(self):
        """Test that the walk does not reorder children."""
        children = [FakeElement(t, [("n", t), ("n", "dup")]) for t in "abc"]
        root = FakeElement("root", [], children)

        remove_duplicate_attributes(root)

        assert [c.tag for c in root.children] == ["a", "b", "c"]
        assert [c.attrib for c in root.children] == [[("n", "a")], [("n", "b")], [("n", "c")]]

    def test_deep_tree_without_recursion(self):
        """Test that nesting deeper than the recursion limit is handled."""
        leaf = FakeElement("leaf", [("a", "1"), ("a", "2")])
        node = leaf
        for _ in range(5000):
            node = FakeElement("n", [("d", "1"), ("d", "2")], [node])

        remove_duplicate_attributes(node)

        assert node.attrib == [("d", "1")]
        assert leaf.attrib == [("a", "1")]

    def test_lxml_element(self):
        """Test the walk on a real lxml element."""
        root = etree.Element("root", a="1", b="2")
        child = etree.SubElement(root, "child", x="9")
        root.append(etree.Comment("note"))

        remove_duplicate_attributes(root)

        assert root.items() == [("a", "1"), ("b", "2")]
        assert child.items() == [("x", "9")]
        assert etree.tostring(root, encoding="unicode") == (
            '<root a="1" b="2"><child x="9"/><!--note--></root>'
        )

    def test_lxml_rebuild_keeps_namespaces(self):
        """Test that rewriting attributes keeps namespaced names."""
        root = etree.Element("root", nsmap={"p": "urn:x"})
        root.set("{urn:x}a", "1")
        root.set("b", "2")

        _replace_attributes(root, first_occurrences(root.items()))

        assert root.items() == [("{urn:x}a", "1"), ("b", "2")]
        assert etree.tostring(root, encoding="unicode") == '<root xmlns:p="urn:x" p:a="1" b="2"/>'


class TestRemoveDuplicateAttributesInDocument:
    """Test the document-level entry point."""

    def test_document_with_top_level_nodes(self):
        """Test that top-level comments and PIs are skipped and the root is cleaned."""
        tree = parse_document('<?pi x?><!-- c --><root a="1" a="2"><c b="1" b="2"/></root><!-- end -->')

        remove_duplicate_attributes_in_document(tree)

        text = serialize_document(tree)
        assert '<root a="1"><c b="1"/></root>' in text
        assert text.index("<?pi x?>") < text.index("<!-- c -->") < text.index("<root")
        assert text.index("</root>") < text.index("<!-- end -->")
