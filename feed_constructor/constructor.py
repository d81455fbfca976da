"""Format-agnostic construction of feeds and items.

Every function here takes values and returns new values; nothing is mutated.
A feed is one of :class:`AtomFeed`, :class:`RssFeed`, :class:`RdfFeed` or
:class:`XmlFeed`, an item one of the matching ``*Item`` classes. The setters
live in :mod:`feed_constructor.feed_setters` and
:mod:`feed_constructor.item_setters`.
"""

from collections.abc import Iterable
from dataclasses import replace

from . import atom, rdf, rss
from .config import FORMAT_DEFAULTS, PLACEHOLDERS
from .exceptions import FeedKindMismatchError, UnhandledVariantError
from .logging_config import create_component_logger
from .models import (
    AtomFeed,
    AtomItem,
    Feed,
    FeedFormat,
    FeedKind,
    Item,
    RdfFeed,
    RdfItem,
    RssFeed,
    RssItem,
    XmlFeed,
    XmlItem,
)
from .xmltree import Element

logger = create_component_logger("constructor")


def _explicit_version(version: str, default: str) -> str | None:
    return None if version == default else version


def classify_feed(feed: Feed) -> FeedKind:
    """Return the kind of ``feed``.

    A bare XML tree has no format marker and is always reported as RSS 2.0.
    """
    if isinstance(feed, AtomFeed):
        return FeedKind.atom()
    if isinstance(feed, RssFeed):
        return FeedKind.rss(_explicit_version(feed.rss.version, FORMAT_DEFAULTS.rss_version))
    if isinstance(feed, RdfFeed):
        return FeedKind.rdf(_explicit_version(feed.feed.version, FORMAT_DEFAULTS.rdf_version))
    if isinstance(feed, XmlFeed):
        return FeedKind.rss(FORMAT_DEFAULTS.rss_version)
    raise UnhandledVariantError("classify_feed", feed)


def classify_item(item: Item) -> FeedKind:
    """Return the kind of ``item``. XML items are reported as RSS 2.0, like XML feeds."""
    if isinstance(item, AtomItem):
        return FeedKind.atom()
    if isinstance(item, RssItem):
        return FeedKind.rss(_explicit_version(item.version, FORMAT_DEFAULTS.rss_version))
    if isinstance(item, RdfItem):
        return FeedKind.rdf(_explicit_version(item.version, FORMAT_DEFAULTS.rdf_version))
    if isinstance(item, XmlItem):
        return FeedKind.rss(FORMAT_DEFAULTS.rss_version)
    raise UnhandledVariantError("classify_item", item)


def new_feed(kind: FeedKind) -> Feed:
    """Create an empty feed of the requested kind.

    Required fields hold the sentinels from :data:`~feed_constructor.config.PLACEHOLDERS`
    and are meant to be overwritten.
    """
    if kind.format is FeedFormat.ATOM:
        return AtomFeed(
            atom.null_feed(
                PLACEHOLDERS.feed_id, PLACEHOLDERS.feed_title, PLACEHOLDERS.feed_updated
            )
        )
    if kind.format is FeedFormat.RSS:
        document = rss.null_rss(PLACEHOLDERS.feed_title, PLACEHOLDERS.channel_url)
        if kind.version is not None:
            document = replace(document, version=kind.version)
        return RssFeed(document)
    if kind.format is FeedFormat.RDF:
        document = rdf.null_feed(PLACEHOLDERS.channel_url, PLACEHOLDERS.feed_title)
        if kind.version is not None:
            document = replace(document, version=kind.version)
        return RdfFeed(document)
    raise UnhandledVariantError("new_feed", kind)


def new_item(kind: FeedKind) -> Item:
    """Create an empty item for a feed of the requested kind."""
    if kind.format is FeedFormat.ATOM:
        return AtomItem(
            atom.null_entry(
                PLACEHOLDERS.entry_id, PLACEHOLDERS.entry_title, PLACEHOLDERS.entry_updated
            )
        )
    if kind.format is FeedFormat.RSS:
        return RssItem(rss.null_item(PLACEHOLDERS.rss_item_title), kind.effective_version)
    if kind.format is FeedFormat.RDF:
        return RdfItem(
            rdf.null_item(
                PLACEHOLDERS.rdf_item_uri,
                PLACEHOLDERS.rdf_item_title,
                PLACEHOLDERS.rdf_item_link,
            ),
            kind.effective_version,
        )
    raise UnhandledVariantError("new_item", kind)


def feed_from_atom(feed: atom.Feed) -> Feed:
    return AtomFeed(feed)


def feed_from_rss(document: rss.RSS) -> Feed:
    return RssFeed(document)


def feed_from_rdf(feed: rdf.Feed) -> Feed:
    return RdfFeed(feed)


def feed_from_xml(element: Element) -> Feed:
    return XmlFeed(element)


def atom_entry_to_item(entry: atom.Entry) -> Item:
    return AtomItem(entry)


def rss_item_to_item(item: rss.Item, version: str = FORMAT_DEFAULTS.rss_version) -> Item:
    return RssItem(item, version)


def rdf_item_to_item(item: rdf.Item, version: str = FORMAT_DEFAULTS.rdf_version) -> Item:
    return RdfItem(item, version)


def xml_to_item(element: Element) -> Item:
    return XmlItem(element)


def get_feed_items(feed: Feed) -> tuple[Item, ...]:
    """Return the items of a typed feed, first to last.

    Raises:
        FeedKindMismatchError: If ``feed`` is a bare XML tree
    """
    if isinstance(feed, AtomFeed):
        return tuple(AtomItem(entry) for entry in feed.feed.entries)
    if isinstance(feed, RssFeed):
        return tuple(RssItem(item, feed.rss.version) for item in feed.rss.channel.items)
    if isinstance(feed, RdfFeed):
        return tuple(RdfItem(item, feed.feed.version) for item in feed.feed.items)
    if isinstance(feed, XmlFeed):
        raise FeedKindMismatchError(
            classify_feed(feed),
            None,
            "get_feed_items: XML feeds have no typed item collection",
        )
    raise UnhandledVariantError("get_feed_items", feed)


def _mismatch(operation: str, feed: Feed, item: Item | None) -> FeedKindMismatchError:
    feed_kind = classify_feed(feed)
    item_kind = classify_item(item) if item is not None else None
    logger.log_kind_mismatch(operation, feed_kind, item_kind)
    if isinstance(feed, XmlFeed) or isinstance(item, XmlItem):
        return FeedKindMismatchError(
            feed_kind,
            item_kind,
            f"{operation}: XML feeds and items have no typed item collection "
            f"(feed: {'XML' if isinstance(feed, XmlFeed) else feed_kind}, "
            f"item: {'XML' if isinstance(item, XmlItem) else item_kind})",
        )
    return FeedKindMismatchError(feed_kind, item_kind)


def add_item(feed: Feed, item: Item) -> Feed:
    """Put ``item`` in front of the feed's items.

    Items are never converted between formats; the feed and item must be of
    the same family (Atom, RSS or RDF). The RDF channel's item URI list is left
    for the serializer to fill in.

    Raises:
        FeedKindMismatchError: If the families differ or either side is XML
    """
    if isinstance(feed, AtomFeed) and isinstance(item, AtomItem):
        return AtomFeed(replace(feed.feed, entries=(item.entry,) + feed.feed.entries))
    if isinstance(feed, RssFeed) and isinstance(item, RssItem):
        channel = feed.rss.channel
        channel = replace(channel, items=(item.item,) + channel.items)
        return RssFeed(replace(feed.rss, channel=channel))
    if isinstance(feed, RdfFeed) and isinstance(item, RdfItem):
        return RdfFeed(replace(feed.feed, items=(item.item,) + feed.feed.items))
    if not isinstance(feed, (AtomFeed, RssFeed, RdfFeed, XmlFeed)):
        raise UnhandledVariantError("add_item", feed)
    if not isinstance(item, (AtomItem, RssItem, RdfItem, XmlItem)):
        raise UnhandledVariantError("add_item", item)
    raise _mismatch("add_item", feed, item)


def _clear_items(feed: Feed) -> Feed:
    if isinstance(feed, AtomFeed):
        return AtomFeed(replace(feed.feed, entries=()))
    if isinstance(feed, RssFeed):
        return RssFeed(replace(feed.rss, channel=replace(feed.rss.channel, items=())))
    if isinstance(feed, RdfFeed):
        return RdfFeed(replace(feed.feed, items=()))
    if isinstance(feed, XmlFeed):
        raise _mismatch("with_feed_items", feed, None)
    raise UnhandledVariantError("with_feed_items", feed)


def with_feed_items(feed: Feed, items: Iterable[Item]) -> Feed:
    """Replace the feed's items with ``items``, keeping their order.

    Raises:
        FeedKindMismatchError: If any item's family differs from the feed's
    """
    result = _clear_items(feed)
    # add_item prepends, so adding from the last item backwards keeps the order
    for item in reversed(tuple(items)):
        result = add_item(result, item)
    return result
