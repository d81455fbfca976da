"""RSS 1.0 (RDF Site Summary) record types."""

from dataclasses import dataclass

from .dublin_core import DCItem


@dataclass(frozen=True)
class ContentInfo:
    """A ``content:item`` entry from the RSS 1.0 content module."""

    uri: str | None = None
    format: str | None = None
    encoding: str | None = None
    value: str | None = None


@dataclass(frozen=True)
class Image:
    """The <image> element referenced from the channel."""

    uri: str
    title: str
    url: str
    link: str
    dc: tuple[DCItem, ...] = ()


@dataclass(frozen=True)
class Channel:
    """The <channel> element.

    ``dc`` holds every piece of metadata RSS 1.0 has no element of its own for.
    """

    uri: str
    title: str
    link: str
    description: str
    image_uri: str | None = None
    item_uris: tuple[str, ...] = ()
    dc: tuple[DCItem, ...] = ()


@dataclass(frozen=True)
class Item:
    """An <item> element."""

    uri: str
    title: str
    link: str
    description: str | None = None
    dc: tuple[DCItem, ...] = ()
    content: tuple[ContentInfo, ...] = ()


@dataclass(frozen=True)
class Feed:
    """An <rdf:RDF> document."""

    channel: Channel
    version: str = "1.0"
    image: Image | None = None
    items: tuple[Item, ...] = ()


def null_feed(uri: str, title: str) -> Feed:
    """Create a feed whose channel links to ``uri`` and uses ``title`` as description."""
    return Feed(channel=Channel(uri=uri, title=title, link=uri, description=title))


def null_item(uri: str, title: str, link: str) -> Item:
    return Item(uri=uri, title=title, link=link)


def null_image(url: str, title: str, link: str) -> Image:
    return Image(uri=url, title=title, url=url, link=link)
