"""Data models for Feed Constructor."""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from . import atom, rdf, rss
from .config import FORMAT_DEFAULTS
from .xmltree import Element


class FeedFormat(Enum):
    """Syndication format family."""

    ATOM = "atom"
    RSS = "rss"
    RDF = "rdf"


@dataclass(frozen=True)
class FeedKind:
    """Format family plus an explicit version, if any.

    ``version`` is None when the format's default version applies
    ("2.0" for RSS, "1.0" for RDF). Atom has no versions.
    """

    format: FeedFormat
    version: str | None = None

    def __post_init__(self):
        if self.format is FeedFormat.ATOM and self.version is not None:
            raise ValueError(f"Atom feeds carry no version, got {self.version!r}")

    @classmethod
    def atom(cls) -> "FeedKind":
        return cls(FeedFormat.ATOM)

    @classmethod
    def rss(cls, version: str | None = None) -> "FeedKind":
        return cls(FeedFormat.RSS, version)

    @classmethod
    def rdf(cls, version: str | None = None) -> "FeedKind":
        return cls(FeedFormat.RDF, version)

    @property
    def effective_version(self) -> str | None:
        """Version actually written out, with the format default filled in."""
        if self.version is not None:
            return self.version
        if self.format is FeedFormat.RSS:
            return FORMAT_DEFAULTS.rss_version
        if self.format is FeedFormat.RDF:
            return FORMAT_DEFAULTS.rdf_version
        return None

    def __str__(self) -> str:
        if self.format is FeedFormat.ATOM:
            return "Atom"
        label = "RSS" if self.format is FeedFormat.RSS else "RDF"
        if self.version is None:
            return label
        return f"{label} {self.version}"


@dataclass(frozen=True)
class AtomFeed:
    """Feed backed by an Atom document."""

    feed: atom.Feed


@dataclass(frozen=True)
class RssFeed:
    """Feed backed by an RSS 2.0 (or earlier) document."""

    rss: rss.RSS


@dataclass(frozen=True)
class RdfFeed:
    """Feed backed by an RSS 1.0 document."""

    feed: rdf.Feed


@dataclass(frozen=True)
class XmlFeed:
    """Feed backed by a bare element tree, assumed to be RSS 2.0 shaped."""

    element: Element


@dataclass(frozen=True)
class AtomItem:
    entry: atom.Entry


@dataclass(frozen=True)
class RssItem:
    """RSS item. ``version`` is the RSS version of the feed it was made for."""

    item: rss.Item
    version: str = FORMAT_DEFAULTS.rss_version


@dataclass(frozen=True)
class RdfItem:
    """RSS 1.0 item. ``version`` is the RDF version of the feed it was made for."""

    item: rdf.Item
    version: str = FORMAT_DEFAULTS.rdf_version


@dataclass(frozen=True)
class XmlItem:
    element: Element


Feed = Union[AtomFeed, RssFeed, RdfFeed, XmlFeed]
Item = Union[AtomItem, RssItem, RdfItem, XmlItem]
