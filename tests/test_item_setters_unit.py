"""Unit tests for item-level setters across all item variants."""

from datetime import datetime

import pytest

from feed_constructor import atom
from feed_constructor.constructor import atom_entry_to_item, new_item, xml_to_item
from feed_constructor.dublin_core import DCElement, DCItem
from feed_constructor.exceptions import UnhandledVariantError
from feed_constructor.item_setters import (
    with_item_author,
    with_item_categories,
    with_item_comment_link,
    with_item_date,
    with_item_description,
    with_item_enclosure,
    with_item_feed_link,
    with_item_id,
    with_item_last_update,
    with_item_link,
    with_item_pub_date,
    with_item_rights,
    with_item_title,
)
from feed_constructor.models import FeedKind
from feed_constructor.rdf import ContentInfo
from feed_constructor.xmltree import find_child, parse_element

XML_ITEM = """<item><title>Old</title><link>https://old.example/</link>
<guid>old-id</guid><guid>older-id</guid></item>"""


def xml_item(document: str = XML_ITEM):
    return xml_to_item(parse_element(document))


class TestItemSettersRss:
    """RSS items have a dedicated field for nearly everything."""

    def test_basic_fields(self):
        item = new_item(FeedKind.rss())

        item = with_item_title(item, "Launch")
        item = with_item_link(item, "https://news.example/launch")
        item = with_item_description(item, "It launched")
        item = with_item_author(item, "editor@news.example")
        item = with_item_comment_link(item, "https://news.example/launch#comments")
        item = with_item_pub_date(item, "Tue, 02 Jan 2024 08:00:00 GMT")

        assert item.item.title == "Launch"
        assert item.item.link == "https://news.example/launch"
        assert item.item.description == "It launched"
        assert item.item.author == "editor@news.example"
        assert item.item.comments == "https://news.example/launch#comments"
        assert item.item.pub_date == "Tue, 02 Jan 2024 08:00:00 GMT"

    def test_enclosure_with_type_and_length(self):
        item = with_item_enclosure(
            new_item(FeedKind.rss()), "https://x/a.mp3", "audio/mpeg", 12345
        )

        enclosure = item.item.enclosure
        assert enclosure.url == "https://x/a.mp3"
        assert enclosure.type == "audio/mpeg"
        assert enclosure.length == 12345

    def test_enclosure_type_defaults_to_html(self):
        item = with_item_enclosure(new_item(FeedKind.rss()), "https://x/page")

        assert item.item.enclosure.type == "text/html"
        assert item.item.enclosure.length is None

    def test_id_sets_guid_and_permalink_flag(self):
        item = with_item_id(new_item(FeedKind.rss()), "https://news.example/launch", True)

        assert item.item.guid.value == "https://news.example/launch"
        assert item.item.guid.permalink is True

    def test_feed_link_sets_source(self):
        item = with_item_feed_link(new_item(FeedKind.rss()), "Daily News", "https://news.example/rss")

        assert item.item.source.url == "https://news.example/rss"
        assert item.item.source.title == "Daily News"

    def test_rights_are_dropped(self):
        """RSS 2.0 has no per-item rights: the item comes back unchanged."""
        item = new_item(FeedKind.rss())

        assert with_item_rights(item, "CC-BY") is item

    def test_version_survives_setters(self):
        item = with_item_title(new_item(FeedKind.rss("0.92")), "Old school")

        assert item.version == "0.92"


class TestItemSettersAtom:
    """Atom entries use links and persons where RSS uses plain fields."""

    def test_enclosure_prepends_link(self):
        item = with_item_enclosure(
            new_item(FeedKind.atom()), "https://x/a.mp3", "audio/mpeg", 12345
        )

        link = item.entry.links[0]
        assert link.href == "https://x/a.mp3"
        assert link.rel == "enclosure"
        assert link.type == "audio/mpeg"
        assert link.length == "12345"

    def test_link_rewrites_first_alternate(self):
        entry = atom.Entry(
            id="urn:e",
            title="Entry",
            updated="2024-01-01T00:00:00Z",
            links=(
                atom.Link(href="https://x/replies", rel="replies"),
                atom.Link(href="https://x/old", rel="alternate"),
                atom.Link(href="https://x/other", rel="alternate"),
            ),
        )

        item = with_item_link(atom_entry_to_item(entry), "https://x/new")

        assert [link.href for link in item.entry.links] == [
            "https://x/replies",
            "https://x/new",
            "https://x/other",
        ]

    def test_link_without_alternate_adds_one(self):
        item = with_item_link(new_item(FeedKind.atom()), "https://x/new")

        assert item.entry.links == (atom.Link(href="https://x/new", rel="alternate"),)

    def test_link_without_rel_is_rewritten_as_the_alternate(self):
        entry = atom.Entry(
            id="urn:e",
            title="Entry",
            updated="2024-01-01T00:00:00Z",
            links=(atom.Link(href="https://old/"), atom.Link(href="https://x/c", rel="replies")),
        )

        item = with_item_link(atom_entry_to_item(entry), "https://new/")

        assert item.entry.links == (
            atom.Link(href="https://new/"),
            atom.Link(href="https://x/c", rel="replies"),
        )

    def test_author_replaces_all_authors(self):
        item = with_item_author(new_item(FeedKind.atom()), "first")
        item = with_item_author(item, "https://people.example/ann")

        assert item.entry.authors == (
            atom.Person(name="https://people.example/ann", uri="https://people.example/ann"),
        )

    def test_comment_link_is_a_replies_link(self):
        item = with_item_comment_link(new_item(FeedKind.atom()), "https://x/comments")

        assert item.entry.links[0] == atom.Link(href="https://x/comments", rel="replies")

    def test_feed_link_sets_source(self):
        item = with_item_feed_link(new_item(FeedKind.atom()), "Daily News", "https://news.example/")

        assert item.entry.source == atom.Source(id="https://news.example/", title="Daily News")

    def test_id_description_rights_and_date(self):
        item = new_item(FeedKind.atom())

        item = with_item_id(item, "urn:uuid:1234")
        item = with_item_description(item, "Summary")
        item = with_item_rights(item, "CC-BY")
        item = with_item_date(item, datetime(2024, 1, 2, 8, 0))

        assert item.entry.id == "urn:uuid:1234"
        assert item.entry.summary == "Summary"
        assert item.entry.rights == "CC-BY"
        assert item.entry.updated == "2024-01-02T08:00:00Z"

    def test_categories_keep_scheme(self):
        item = with_item_categories(new_item(FeedKind.atom()), [("a", None), ("b", "urn:s")])

        assert item.entry.categories == (
            atom.Category(term="a"),
            atom.Category(term="b", scheme="urn:s"),
        )


class TestItemSettersRdf:
    """RSS 1.0 items keep metadata in Dublin Core slots."""

    def test_rights_adds_exactly_one_slot(self):
        item = new_item(FeedKind.rdf())

        result = with_item_rights(item, "CC-BY")

        assert result.item.dc == (DCItem(DCElement.RIGHTS, "CC-BY"),)
        assert result.item.title == item.item.title
        assert result.item.content == item.item.content

    def test_rights_leaves_other_slots_alone(self):
        item = with_item_author(new_item(FeedKind.rdf()), "ann")
        item = with_item_rights(item, "CC-BY")
        item = with_item_rights(item, "CC0")

        assert item.item.dc == (
            DCItem(DCElement.RIGHTS, "CC0"),
            DCItem(DCElement.CREATOR, "ann"),
        )

    def test_slot_setters(self):
        item = new_item(FeedKind.rdf())

        item = with_item_pub_date(item, "2024-01-01")
        item = with_item_last_update(item, "2024-01-02")
        item = with_item_author(item, "ann")
        item = with_item_comment_link(item, "https://x/comments")
        item = with_item_id(item, "urn:1", True)

        assert item.item.dc == (
            DCItem(DCElement.IDENTIFIER, "urn:1"),
            DCItem(DCElement.RELATION, "https://x/comments"),
            DCItem(DCElement.CREATOR, "ann"),
            DCItem(DCElement.DATE, "2024-01-02"),
        )

    def test_enclosure_prepends_content_info(self):
        item = with_item_enclosure(new_item(FeedKind.rdf()), "https://x/a.mp3", "audio/mpeg", 10)
        item = with_item_enclosure(item, "https://x/b.ogg")

        assert item.item.content == (
            ContentInfo(uri="https://x/b.ogg"),
            ContentInfo(uri="https://x/a.mp3", format="audio/mpeg"),
        )

    def test_feed_link_only_keeps_title(self):
        item = with_item_feed_link(new_item(FeedKind.rdf()), "Daily News", "https://news.example/")

        assert item.item.title == "Daily News"
        assert item.item.dc == ()

    def test_plain_fields(self):
        item = new_item(FeedKind.rdf())

        item = with_item_title(item, "Launch")
        item = with_item_link(item, "https://x/launch")
        item = with_item_description(item, "It launched")

        assert (item.item.title, item.item.link, item.item.description) == (
            "Launch",
            "https://x/launch",
            "It launched",
        )

    def test_categories_become_subjects(self):
        item = with_item_categories(new_item(FeedKind.rdf()), [("a", "urn:s"), ("b", None)])

        assert item.item.dc == (
            DCItem(DCElement.SUBJECT, "a"),
            DCItem(DCElement.SUBJECT, "b"),
        )


class TestItemSettersXml:
    """XML items: the named child is always (re)inserted as the first child."""

    def test_title_replaces_and_moves_to_front(self):
        item = with_item_title(xml_item(), "New")

        titles = [c for c in item.element.elements if c.name == "title"]
        assert len(titles) == 1
        assert item.element.elements[0].text == "New"

    def test_missing_children_are_inserted(self):
        item = xml_item("<item/>")

        item = with_item_description(item, "Summary")
        item = with_item_author(item, "ann")
        item = with_item_comment_link(item, "https://x/comments")
        item = with_item_pub_date(item, "Tue, 02 Jan 2024 08:00:00 GMT")

        assert [c.name for c in item.element.elements] == [
            "pubDate",
            "comments",
            "author",
            "description",
        ]

    def test_id_replaces_every_guid(self):
        item = with_item_id(xml_item(), "new-id", False)

        guids = [c for c in item.element.elements if c.name == "guid"]
        assert len(guids) == 1
        assert guids[0].text == "new-id"
        assert guids[0].get("isPermaLink") == "false"

    def test_enclosure_has_fixed_length(self):
        item = with_item_enclosure(xml_item(), "https://x/a.mp3", "audio/mpeg", 12345)

        enclosure = find_child(item.element, "enclosure")
        assert enclosure.get("url") == "https://x/a.mp3"
        assert enclosure.get("length") == "0"
        assert enclosure.get("type") == "audio/mpeg"

    def test_feed_link_sets_source(self):
        item = with_item_feed_link(xml_item(), "Daily News", "https://news.example/rss")

        source = find_child(item.element, "source")
        assert source.get("url") == "https://news.example/rss"
        assert source.text == "Daily News"

    def test_link_replaced(self):
        item = with_item_link(xml_item(), "https://new.example/")

        assert find_child(item.element, "link").text == "https://new.example/"

    def test_categories_accumulate(self):
        item = with_item_categories(xml_item("<item/>"), [("a", None)])
        item = with_item_categories(item, [("b", "urn:s")])

        assert [dict(c.attributes) for c in item.element.elements] == [
            {"domain": "urn:s", "term": "b"},
            {"term": "a"},
        ]

    def test_rights_are_dropped(self):
        item = xml_item()

        assert with_item_rights(item, "CC-BY") is item


class TestItemSettersDispatch:
    """Every item setter rejects values that are not item variants."""

    @pytest.mark.parametrize(
        "setter,args",
        [
            (with_item_title, ("x",)),
            (with_item_link, ("x",)),
            (with_item_pub_date, ("x",)),
            (with_item_author, ("x",)),
            (with_item_comment_link, ("x",)),
            (with_item_enclosure, ("x",)),
            (with_item_feed_link, ("x", "y")),
            (with_item_id, ("x",)),
            (with_item_categories, ([("x", None)],)),
            (with_item_description, ("x",)),
            (with_item_rights, ("x",)),
        ],
    )
    def test_unhandled_variant(self, setter, args):
        with pytest.raises(UnhandledVariantError):
            setter({"title": "not an item"}, *args)
