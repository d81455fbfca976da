"""Atom 1.0 record types."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Link:
    """An atom:link element."""

    href: str
    rel: str | None = None
    type: str | None = None
    hreflang: str | None = None
    title: str | None = None
    length: str | None = None


@dataclass(frozen=True)
class Category:
    """An atom:category element."""

    term: str
    scheme: str | None = None
    label: str | None = None


@dataclass(frozen=True)
class Person:
    """An atom:author or atom:contributor construct."""

    name: str
    uri: str | None = None
    email: str | None = None


@dataclass(frozen=True)
class Generator:
    """An atom:generator element."""

    name: str
    uri: str | None = None
    version: str | None = None


@dataclass(frozen=True)
class Source:
    """An atom:source element, pointing back at the originating feed."""

    id: str | None = None
    title: str | None = None
    updated: str | None = None
    links: tuple[Link, ...] = ()


@dataclass(frozen=True)
class Entry:
    """An atom:entry element."""

    id: str
    title: str
    updated: str
    authors: tuple[Person, ...] = ()
    categories: tuple[Category, ...] = ()
    links: tuple[Link, ...] = ()
    published: str | None = None
    rights: str | None = None
    source: Source | None = None
    summary: str | None = None
    content: str | None = None


@dataclass(frozen=True)
class Feed:
    """An atom:feed document."""

    id: str
    title: str
    updated: str
    authors: tuple[Person, ...] = ()
    categories: tuple[Category, ...] = ()
    generator: Generator | None = None
    icon: str | None = None
    logo: str | None = None
    links: tuple[Link, ...] = ()
    rights: str | None = None
    subtitle: str | None = None
    entries: tuple[Entry, ...] = ()
    attrs: tuple[tuple[str, str], ...] = ()


def null_feed(feed_id: str, title: str, updated: str) -> Feed:
    """Create a feed carrying only the three required fields."""
    return Feed(id=feed_id, title=title, updated=updated)


def null_entry(entry_id: str, title: str, updated: str) -> Entry:
    """Create an entry carrying only the three required fields."""
    return Entry(id=entry_id, title=title, updated=updated)


def null_link(href: str) -> Link:
    return Link(href=href)
