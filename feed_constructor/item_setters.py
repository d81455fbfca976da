"""Item-level setters.

Each setter takes an item and a value and returns an item of the same
variant. Unlike the feed setters, XML items always end up with the child:
any existing children of that name are removed and the new one is inserted
first.
"""

from collections.abc import Iterable
from dataclasses import replace

from . import atom, rss
from .config import FORMAT_DEFAULTS
from .dates import DateStyle, DateValue, format_date
from .dublin_core import DCElement, prepend_slots, upsert_slot
from .exceptions import UnhandledVariantError
from .feed_setters import Category, add_category_elements
from .logging_config import create_component_logger
from .models import AtomItem, Item, RdfItem, RssItem, XmlItem
from .rdf import ContentInfo
from .xmltree import unode, upsert_child

logger = create_component_logger("item_setters")


def _upsert_item_slot(item: RdfItem, element: DCElement, text: str) -> RdfItem:
    dc = upsert_slot(element, text, item.item.dc)
    return replace(item, item=replace(item.item, dc=dc))


def _with_rss_item(item: RssItem, **changes) -> RssItem:
    return replace(item, item=replace(item.item, **changes))


def _with_rdf_item(item: RdfItem, **changes) -> RdfItem:
    return replace(item, item=replace(item.item, **changes))


def with_item_title(item: Item, title: str) -> Item:
    if isinstance(item, AtomItem):
        return AtomItem(replace(item.entry, title=title))
    if isinstance(item, RssItem):
        return _with_rss_item(item, title=title)
    if isinstance(item, RdfItem):
        return _with_rdf_item(item, title=title)
    if isinstance(item, XmlItem):
        return XmlItem(upsert_child(item.element, unode("title", title)))
    raise UnhandledVariantError("with_item_title", item)


def _replace_alternate(links: tuple[atom.Link, ...], url: str) -> tuple[atom.Link, ...]:
    for index, link in enumerate(links):
        # a link without rel is an alternate link
        if link.rel in (None, "alternate"):
            return links[:index] + (replace(link, href=url),) + links[index + 1 :]
    logger.debug(
        "with_item_link: entry has no alternate link, adding one",
        operation="with_item_link",
        field="link",
    )
    return (atom.Link(href=url, rel="alternate"),) + links


def with_item_link(item: Item, url: str) -> Item:
    """Set the item's web page. Atom rewrites its first ``alternate`` link.

    An Atom link without ``rel`` counts as ``alternate``.
    """
    if isinstance(item, AtomItem):
        return AtomItem(replace(item.entry, links=_replace_alternate(item.entry.links, url)))
    if isinstance(item, RssItem):
        return _with_rss_item(item, link=url)
    if isinstance(item, RdfItem):
        return _with_rdf_item(item, link=url)
    if isinstance(item, XmlItem):
        return XmlItem(upsert_child(item.element, unode("link", url)))
    raise UnhandledVariantError("with_item_link", item)


def with_item_pub_date(item: Item, date: DateValue) -> Item:
    """Set the date the item was published or last changed."""
    if isinstance(item, AtomItem):
        return AtomItem(replace(item.entry, updated=format_date(date, DateStyle.RFC3339)))
    if isinstance(item, RssItem):
        return _with_rss_item(item, pub_date=format_date(date, DateStyle.RFC822))
    if isinstance(item, RdfItem):
        return _upsert_item_slot(item, DCElement.DATE, format_date(date, DateStyle.RFC3339))
    if isinstance(item, XmlItem):
        text = format_date(date, DateStyle.RFC822)
        return XmlItem(upsert_child(item.element, unode("pubDate", text)))
    raise UnhandledVariantError("with_item_pub_date", item)


# Items carry a single date.
with_item_date = with_item_pub_date
with_item_last_update = with_item_pub_date


def with_item_author(item: Item, author: str) -> Item:
    """Set the item's sole author. Atom uses ``author`` as both name and URI."""
    if isinstance(item, AtomItem):
        person = atom.Person(name=author, uri=author)
        return AtomItem(replace(item.entry, authors=(person,)))
    if isinstance(item, RssItem):
        return _with_rss_item(item, author=author)
    if isinstance(item, RdfItem):
        return _upsert_item_slot(item, DCElement.CREATOR, author)
    if isinstance(item, XmlItem):
        return XmlItem(upsert_child(item.element, unode("author", author)))
    raise UnhandledVariantError("with_item_author", item)


def with_item_comment_link(item: Item, url: str) -> Item:
    if isinstance(item, AtomItem):
        link = atom.Link(href=url, rel="replies")
        return AtomItem(replace(item.entry, links=(link,) + item.entry.links))
    if isinstance(item, RssItem):
        return _with_rss_item(item, comments=url)
    if isinstance(item, RdfItem):
        return _upsert_item_slot(item, DCElement.RELATION, url)
    if isinstance(item, XmlItem):
        return XmlItem(upsert_child(item.element, unode("comments", url)))
    raise UnhandledVariantError("with_item_comment_link", item)


def with_item_enclosure(
    item: Item, url: str, media_type: str | None = None, length: int | None = None
) -> Item:
    """Attach a media file to the item.

    Args:
        item: Item to update
        url: Location of the media file
        media_type: MIME type; RSS and XML fall back to text/html
        length: Size in bytes, if known. XML items always get length 0.

    Returns:
        Updated item of the same variant
    """
    if isinstance(item, AtomItem):
        link = atom.Link(
            href=url,
            rel="enclosure",
            type=media_type,
            length=str(length) if length is not None else None,
        )
        return AtomItem(replace(item.entry, links=(link,) + item.entry.links))
    if isinstance(item, RssItem):
        enclosure = rss.null_enclosure(
            url, length, media_type or FORMAT_DEFAULTS.enclosure_type
        )
        return _with_rss_item(item, enclosure=enclosure)
    if isinstance(item, RdfItem):
        content = ContentInfo(uri=url, format=media_type)
        return _with_rdf_item(item, content=(content,) + item.item.content)
    if isinstance(item, XmlItem):
        enclosure = unode(
            "enclosure",
            attributes=(
                ("url", url),
                ("length", "0"),
                ("type", media_type or FORMAT_DEFAULTS.enclosure_type),
            ),
        )
        return XmlItem(upsert_child(item.element, enclosure))
    raise UnhandledVariantError("with_item_enclosure", item)


def with_item_feed_link(item: Item, title: str, url: str) -> Item:
    """Point the item back at the feed ``url`` it came from, labelled ``title``.

    RDF items have no source element; only the title is kept, as the item title.
    """
    if isinstance(item, AtomItem):
        source = atom.Source(id=url, title=title)
        return AtomItem(replace(item.entry, source=source))
    if isinstance(item, RssItem):
        return _with_rss_item(item, source=rss.null_source(url, title))
    if isinstance(item, RdfItem):
        return _with_rdf_item(item, title=title)
    if isinstance(item, XmlItem):
        source = unode("source", title, attributes=(("url", url),))
        return XmlItem(upsert_child(item.element, source))
    raise UnhandledVariantError("with_item_feed_link", item)


def with_item_id(item: Item, item_id: str, is_permalink: bool = False) -> Item:
    """Set the item's unique identifier.

    ``is_permalink`` marks the id as a URL that resolves to the item; only
    RSS and XML record it.
    """
    if isinstance(item, AtomItem):
        return AtomItem(replace(item.entry, id=item_id))
    if isinstance(item, RssItem):
        guid = replace(rss.null_guid(item_id), permalink=is_permalink)
        return _with_rss_item(item, guid=guid)
    if isinstance(item, RdfItem):
        return _upsert_item_slot(item, DCElement.IDENTIFIER, item_id)
    if isinstance(item, XmlItem):
        guid = unode(
            "guid", item_id, attributes=(("isPermaLink", str(is_permalink).lower()),)
        )
        return XmlItem(upsert_child(item.element, guid))
    raise UnhandledVariantError("with_item_id", item)


def with_item_categories(item: Item, categories: Iterable[Category]) -> Item:
    """Add ``(term, scheme)`` categories in front of the existing ones."""
    categories = tuple(categories)
    if isinstance(item, AtomItem):
        added = tuple(atom.Category(term=term, scheme=scheme) for term, scheme in categories)
        return AtomItem(replace(item.entry, categories=added + item.entry.categories))
    if isinstance(item, RssItem):
        added = tuple(rss.Category(value=term, domain=domain) for term, domain in categories)
        return _with_rss_item(item, categories=added + item.item.categories)
    if isinstance(item, RdfItem):
        terms = [term for term, _ in categories]
        return _with_rdf_item(item, dc=prepend_slots(DCElement.SUBJECT, terms, item.item.dc))
    if isinstance(item, XmlItem):
        return XmlItem(add_category_elements(item.element, categories))
    raise UnhandledVariantError("with_item_categories", item)


def with_item_description(item: Item, description: str) -> Item:
    if isinstance(item, AtomItem):
        return AtomItem(replace(item.entry, summary=description))
    if isinstance(item, RssItem):
        return _with_rss_item(item, description=description)
    if isinstance(item, RdfItem):
        return _with_rdf_item(item, description=description)
    if isinstance(item, XmlItem):
        return XmlItem(upsert_child(item.element, unode("description", description)))
    raise UnhandledVariantError("with_item_description", item)


def with_item_rights(item: Item, rights: str) -> Item:
    """Set per-item rights.

    RSS 2.0 only has channel-level rights, so RSS and XML items are returned
    unchanged and the value is dropped.
    """
    if isinstance(item, AtomItem):
        return AtomItem(replace(item.entry, rights=rights))
    if isinstance(item, RssItem):
        logger.log_dropped_field("with_item_rights", "rights", "RSS")
        return item
    if isinstance(item, RdfItem):
        return _upsert_item_slot(item, DCElement.RIGHTS, rights)
    if isinstance(item, XmlItem):
        logger.log_dropped_field("with_item_rights", "rights", "XML")
        return item
    raise UnhandledVariantError("with_item_rights", item)
