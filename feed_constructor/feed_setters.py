"""Feed-level setters.

Each setter takes a feed and a value and returns a feed of the same variant
with the value stored wherever that format keeps it. RDF stores most
metadata in Dublin Core slots. XML trees are edited under their ``channel``
element; a missing child is left missing, except for categories, which are
always inserted.
"""

from collections.abc import Callable, Iterable
from dataclasses import replace

from . import atom, rdf, rss
from .config import FORMAT_DEFAULTS, PLACEHOLDERS
from .dates import DateStyle, DateValue, format_date
from .dublin_core import DCElement, prepend_slots, upsert_slot
from .exceptions import UnhandledVariantError
from .logging_config import create_component_logger
from .models import AtomFeed, Feed, RdfFeed, RssFeed, XmlFeed
from .xmltree import (
    Element,
    add_child,
    find_child,
    map_children,
    replace_child,
    text_content,
    unode,
)

logger = create_component_logger("feed_setters")

Category = tuple[str, str | None]


def _with_channel(feed: rss.RSS, **changes) -> rss.RSS:
    return replace(feed, channel=replace(feed.channel, **changes))


def _with_rdf_channel(feed: rdf.Feed, **changes) -> rdf.Feed:
    return replace(feed, channel=replace(feed.channel, **changes))


def _upsert_channel_slot(feed: rdf.Feed, element: DCElement, text: str) -> rdf.Feed:
    return _with_rdf_channel(feed, dc=upsert_slot(element, text, feed.channel.dc))


def _edit_channels(
    element: Element, func: Callable[[Element], Element | None]
) -> Element:
    return map_children(
        element, lambda child: func(child) if child.name == "channel" else None
    )


def _replace_in_channel(element: Element, new_child: Element, operation: str) -> Element:
    """Swap ``new_child`` in for the same-named channel children, if there are any."""
    channel = find_child(element, "channel")
    if channel is None or find_child(channel, new_child.name) is None:
        logger.debug(
            f"{operation}: no <{new_child.name}> in channel, left unchanged",
            operation=operation,
            field=new_child.name,
        )
    return _edit_channels(element, lambda channel: replace_child(channel, new_child))


def with_feed_title(feed: Feed, title: str) -> Feed:
    if isinstance(feed, AtomFeed):
        return AtomFeed(replace(feed.feed, title=title))
    if isinstance(feed, RssFeed):
        return RssFeed(_with_channel(feed.rss, title=title))
    if isinstance(feed, RdfFeed):
        return RdfFeed(_with_rdf_channel(feed.feed, title=title))
    if isinstance(feed, XmlFeed):
        return XmlFeed(
            _replace_in_channel(feed.element, unode("title", title), "with_feed_title")
        )
    raise UnhandledVariantError("with_feed_title", feed)


def with_feed_home(feed: Feed, url: str) -> Feed:
    """Set the URL the feed itself is published at.

    Atom gains a new ``self`` link on every call; the other formats overwrite
    a single field.
    """
    if isinstance(feed, AtomFeed):
        link = atom.Link(href=url, rel="self", type=FORMAT_DEFAULTS.atom_feed_link_type)
        return AtomFeed(replace(feed.feed, links=(link,) + feed.feed.links))
    if isinstance(feed, RssFeed):
        return RssFeed(_with_channel(feed.rss, link=url))
    if isinstance(feed, RdfFeed):
        return RdfFeed(_with_rdf_channel(feed.feed, uri=url))
    if isinstance(feed, XmlFeed):
        return XmlFeed(
            _replace_in_channel(feed.element, unode("link", url), "with_feed_home")
        )
    raise UnhandledVariantError("with_feed_home", feed)


def with_feed_html(feed: Feed, url: str) -> Feed:
    """Set the URL of the HTML page the feed belongs to."""
    if isinstance(feed, AtomFeed):
        link = atom.Link(href=url, rel="alternate", type=FORMAT_DEFAULTS.html_link_type)
        return AtomFeed(replace(feed.feed, links=(link,) + feed.feed.links))
    if isinstance(feed, RssFeed):
        return RssFeed(_with_channel(feed.rss, link=url))
    if isinstance(feed, RdfFeed):
        return RdfFeed(_with_rdf_channel(feed.feed, link=url))
    if isinstance(feed, XmlFeed):
        return XmlFeed(
            _replace_in_channel(feed.element, unode("link", url), "with_feed_html")
        )
    raise UnhandledVariantError("with_feed_html", feed)


def with_feed_description(feed: Feed, description: str) -> Feed:
    if isinstance(feed, AtomFeed):
        return AtomFeed(replace(feed.feed, subtitle=description))
    if isinstance(feed, RssFeed):
        return RssFeed(_with_channel(feed.rss, description=description))
    if isinstance(feed, RdfFeed):
        return RdfFeed(_with_rdf_channel(feed.feed, description=description))
    if isinstance(feed, XmlFeed):
        return XmlFeed(
            _replace_in_channel(
                feed.element, unode("description", description), "with_feed_description"
            )
        )
    raise UnhandledVariantError("with_feed_description", feed)


def with_feed_pub_date(feed: Feed, date: DateValue) -> Feed:
    """Set the publication date. Atom and RDF share it with the last-update date."""
    if isinstance(feed, AtomFeed):
        return AtomFeed(replace(feed.feed, updated=format_date(date, DateStyle.RFC3339)))
    if isinstance(feed, RssFeed):
        return RssFeed(_with_channel(feed.rss, pub_date=format_date(date, DateStyle.RFC822)))
    if isinstance(feed, RdfFeed):
        text = format_date(date, DateStyle.RFC3339)
        return RdfFeed(_upsert_channel_slot(feed.feed, DCElement.DATE, text))
    if isinstance(feed, XmlFeed):
        text = format_date(date, DateStyle.RFC822)
        return XmlFeed(
            _replace_in_channel(feed.element, unode("pubDate", text), "with_feed_pub_date")
        )
    raise UnhandledVariantError("with_feed_pub_date", feed)


def with_feed_last_update(feed: Feed, date: DateValue) -> Feed:
    """Set the last-update date. Only RSS keeps it apart from the publication date."""
    if isinstance(feed, AtomFeed):
        return AtomFeed(replace(feed.feed, updated=format_date(date, DateStyle.RFC3339)))
    if isinstance(feed, RssFeed):
        text = format_date(date, DateStyle.RFC822)
        return RssFeed(_with_channel(feed.rss, last_update=text))
    if isinstance(feed, RdfFeed):
        text = format_date(date, DateStyle.RFC3339)
        return RdfFeed(_upsert_channel_slot(feed.feed, DCElement.DATE, text))
    if isinstance(feed, XmlFeed):
        text = format_date(date, DateStyle.RFC822)
        return XmlFeed(
            _replace_in_channel(
                feed.element, unode("lastUpdate", text), "with_feed_last_update"
            )
        )
    raise UnhandledVariantError("with_feed_last_update", feed)


def with_feed_date(feed: Feed, date: DateValue) -> Feed:
    """Set both the publication and the last-update date."""
    return with_feed_last_update(with_feed_pub_date(feed, date), date)


def with_feed_logo_link(feed: Feed, image_url: str, link: str) -> Feed:
    """Attach a logo image at ``image_url`` that links to ``link``.

    RSS and RDF title the image with the channel's current title, so set the
    title first.
    """
    if isinstance(feed, AtomFeed):
        self_link = atom.Link(
            href=link, rel="self", type=FORMAT_DEFAULTS.atom_feed_link_type
        )
        return AtomFeed(
            replace(feed.feed, logo=image_url, links=(self_link,) + feed.feed.links)
        )
    if isinstance(feed, RssFeed):
        channel = feed.rss.channel
        image = rss.null_image(image_url, channel.title, link)
        return RssFeed(_with_channel(feed.rss, image=image))
    if isinstance(feed, RdfFeed):
        channel = feed.feed.channel
        image = rdf.null_image(image_url, channel.title, link)
        document = _with_rdf_channel(feed.feed, image_uri=image_url)
        return RdfFeed(replace(document, image=image))
    if isinstance(feed, XmlFeed):
        channel = find_child(feed.element, "channel")
        title = text_content(find_child(channel, "title")) if channel is not None else None
        if title is None:
            title = PLACEHOLDERS.xml_feed_title
        image = unode(
            "image",
            children=(unode("url", image_url), unode("title", title), unode("link", link)),
        )
        return XmlFeed(_replace_in_channel(feed.element, image, "with_feed_logo_link"))
    raise UnhandledVariantError("with_feed_logo_link", feed)


def with_feed_language(feed: Feed, language: str) -> Feed:
    """Set the feed language. Atom records it as an ``xml:lang`` attribute.

    An existing ``xml:lang`` is replaced, so the attribute appears once.
    """
    if isinstance(feed, AtomFeed):
        kept = tuple(attr for attr in feed.feed.attrs if attr[0] != "xml:lang")
        return AtomFeed(replace(feed.feed, attrs=(("xml:lang", language),) + kept))
    if isinstance(feed, RssFeed):
        return RssFeed(_with_channel(feed.rss, language=language))
    if isinstance(feed, RdfFeed):
        return RdfFeed(_upsert_channel_slot(feed.feed, DCElement.LANGUAGE, language))
    if isinstance(feed, XmlFeed):
        return XmlFeed(
            _replace_in_channel(
                feed.element, unode("language", language), "with_feed_language"
            )
        )
    raise UnhandledVariantError("with_feed_language", feed)


def category_element(term: str, domain: str | None) -> Element:
    attributes = [("term", term)]
    if domain is not None:
        attributes.insert(0, ("domain", domain))
    return unode("category", attributes=attributes)


def add_category_elements(
    element: Element, categories: tuple[Category, ...]
) -> Element:
    """Insert one <category> per entry before the existing children, in order."""
    for term, domain in reversed(categories):
        element = add_child(element, category_element(term, domain))
    return element


def with_feed_categories(feed: Feed, categories: Iterable[Category]) -> Feed:
    """Add ``(term, scheme)`` categories in front of the existing ones.

    Categories accumulate; nothing is replaced. RDF keeps only the terms.
    """
    categories = tuple(categories)
    if isinstance(feed, AtomFeed):
        added = tuple(atom.Category(term=term, scheme=scheme) for term, scheme in categories)
        return AtomFeed(replace(feed.feed, categories=added + feed.feed.categories))
    if isinstance(feed, RssFeed):
        added = tuple(rss.Category(value=term, domain=domain) for term, domain in categories)
        channel = feed.rss.channel
        return RssFeed(_with_channel(feed.rss, categories=added + channel.categories))
    if isinstance(feed, RdfFeed):
        terms = [term for term, _ in categories]
        dc = prepend_slots(DCElement.SUBJECT, terms, feed.feed.channel.dc)
        return RdfFeed(_with_rdf_channel(feed.feed, dc=dc))
    if isinstance(feed, XmlFeed):
        return XmlFeed(
            _edit_channels(
                feed.element, lambda channel: add_category_elements(channel, categories)
            )
        )
    raise UnhandledVariantError("with_feed_categories", feed)


def with_feed_generator(feed: Feed, generator: str, uri: str | None = None) -> Feed:
    """Name the software that produced the feed. Only Atom keeps ``uri``."""
    if isinstance(feed, AtomFeed):
        return AtomFeed(replace(feed.feed, generator=atom.Generator(name=generator, uri=uri)))
    if isinstance(feed, RssFeed):
        return RssFeed(_with_channel(feed.rss, generator=generator))
    if isinstance(feed, RdfFeed):
        return RdfFeed(_upsert_channel_slot(feed.feed, DCElement.SOURCE, generator))
    if isinstance(feed, XmlFeed):
        return XmlFeed(
            _replace_in_channel(
                feed.element, unode("generator", generator), "with_feed_generator"
            )
        )
    raise UnhandledVariantError("with_feed_generator", feed)
