"""Unit tests for the generic element tree."""

import xml.etree.ElementTree as ET

import pytest

from feed_constructor.xmltree import (
    Element,
    add_child,
    find_child,
    parse_element,
    remove_children,
    replace_child,
    text_content,
    to_string,
    unode,
    upsert_child,
)

DOCUMENT = '<channel><title>T</title>\n<link>L</link><title>T2</title></channel>'


class TestXmlTreeUnit:
    """Unit tests for tree editing primitives."""

    def test_parse_keeps_text_and_order(self):
        channel = parse_element(DOCUMENT)

        assert [child.name for child in channel.elements] == ["title", "link", "title"]
        assert channel.children[1] == "\n"
        assert text_content(find_child(channel, "title")) == "T"

    def test_unode(self):
        node = unode("guid", "id-1", attributes=[("isPermaLink", "false")])

        assert node == Element("guid", (("isPermaLink", "false"),), ("id-1",))
        assert node.get("isPermaLink") == "false"
        assert node.get("missing") is None

    def test_replace_child_replaces_every_match_but_never_inserts(self):
        channel = parse_element(DOCUMENT)

        replaced = replace_child(channel, unode("title", "New"))
        untouched = replace_child(channel, unode("language", "en"))

        assert [c.text for c in replaced.elements if c.name == "title"] == ["New", "New"]
        assert untouched == channel

    def test_upsert_child_removes_then_prepends(self):
        channel = parse_element(DOCUMENT)

        result = upsert_child(channel, unode("title", "New"))

        assert [c.name for c in result.elements] == ["title", "link"]
        assert result.elements[0].text == "New"
        assert "\n" in result.children

    def test_add_and_remove(self):
        channel = add_child(parse_element(DOCUMENT), unode("language", "en"))

        assert channel.elements[0].name == "language"
        assert find_child(remove_children(channel, "title"), "title") is None

    def test_inputs_are_not_modified(self):
        channel = parse_element(DOCUMENT)
        snapshot = parse_element(DOCUMENT)

        upsert_child(channel, unode("title", "New"))
        remove_children(channel, "link")

        assert channel == snapshot

    def test_round_trip_through_elementtree(self):
        channel = parse_element(DOCUMENT)

        assert to_string(channel) == DOCUMENT

    def test_text_content_of_missing_element(self):
        assert text_content(None) is None

    def test_parse_error(self):
        with pytest.raises(ET.ParseError):
            parse_element("<channel>")
