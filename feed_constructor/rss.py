"""RSS 2.0 record types."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Category:
    """A <category> element with its optional domain attribute."""

    value: str
    domain: str | None = None


@dataclass(frozen=True)
class Image:
    """A channel <image> element."""

    url: str
    title: str
    link: str
    width: int | None = None
    height: int | None = None
    description: str | None = None


@dataclass(frozen=True)
class Enclosure:
    """An item <enclosure> element."""

    url: str
    type: str
    length: int | None = None


@dataclass(frozen=True)
class Guid:
    """An item <guid> element."""

    value: str
    permalink: bool | None = None


@dataclass(frozen=True)
class Source:
    """An item <source> element naming the channel the item came from."""

    url: str
    title: str


@dataclass(frozen=True)
class Item:
    """A channel <item> element. RSS 2.0 requires a title or a description."""

    title: str | None = None
    link: str | None = None
    description: str | None = None
    author: str | None = None
    categories: tuple[Category, ...] = ()
    comments: str | None = None
    enclosure: Enclosure | None = None
    guid: Guid | None = None
    pub_date: str | None = None
    source: Source | None = None


@dataclass(frozen=True)
class Channel:
    """The <channel> element and its items."""

    title: str
    link: str
    description: str
    language: str | None = None
    copyright: str | None = None
    pub_date: str | None = None
    last_update: str | None = None
    categories: tuple[Category, ...] = ()
    generator: str | None = None
    image: Image | None = None
    items: tuple[Item, ...] = ()


@dataclass(frozen=True)
class RSS:
    """An <rss> document."""

    channel: Channel
    version: str = "2.0"
    attrs: tuple[tuple[str, str], ...] = ()


def null_rss(title: str, link: str) -> RSS:
    """Create an RSS 2.0 document whose channel has only a title and a link.

    The channel description is required by RSS 2.0, so it is seeded with the title.
    """
    return RSS(channel=Channel(title=title, link=link, description=title))


def null_item(title: str) -> Item:
    return Item(title=title)


def null_image(url: str, title: str, link: str) -> Image:
    return Image(url=url, title=title, link=link)


def null_enclosure(url: str, length: int | None, media_type: str) -> Enclosure:
    return Enclosure(url=url, type=media_type, length=length)


def null_guid(value: str) -> Guid:
    return Guid(value=value)


def null_source(url: str, title: str) -> Source:
    return Source(url=url, title=title)
