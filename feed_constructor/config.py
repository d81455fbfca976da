"""Configuration management for Feed Constructor."""

import os
from dataclasses import dataclass

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LoggingConfig:
    """Configuration for library logging."""

    level: str = "WARNING"
    structured: bool = True


@dataclass(frozen=True)
class FormatDefaults:
    """Per-format defaults. Not configurable: classification depends on them."""

    rss_version: str = "2.0"
    rdf_version: str = "1.0"
    enclosure_type: str = "text/html"
    atom_feed_link_type: str = "application/atom+xml"
    html_link_type: str = "text/html"


@dataclass(frozen=True)
class Placeholders:
    """Sentinel values written into required fields by the constructors.

    A value still equal to one of these was never set by the caller.
    """

    feed_id: str = "feed-id-not-filled-in"
    feed_title: str = "dummy-title"
    feed_updated: str = "dummy-and-bogus-update-date"
    channel_url: str = "default-channel-url"
    entry_id: str = "entry-id-not-filled-in"
    entry_title: str = "dummy-entry-title"
    entry_updated: str = "dummy-and-bogus-entry-update-date"
    rss_item_title: str = "dummy-rss-item-title"
    rdf_item_uri: str = "dummy-item-uri"
    rdf_item_title: str = "dummy-item-title"
    rdf_item_link: str = "dummy-item-link"
    xml_feed_title: str = "feed_title"


FORMAT_DEFAULTS = FormatDefaults()
PLACEHOLDERS = Placeholders()


class Config:
    """Main configuration manager."""

    def __init__(self):
        """Initialize configuration from environment variables."""
        self.log_level = os.getenv("FEED_CONSTRUCTOR_LOG_LEVEL", "WARNING")
        self.structured_logs = os.getenv("FEED_CONSTRUCTOR_STRUCTURED_LOGS", "true")

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration.

        Raises:
            ValueError: If the log level is not a standard logging level name
        """
        level = self.log_level.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.log_level}")

        structured = self.structured_logs.strip().lower() not in ("0", "false", "no", "off")
        return LoggingConfig(level=level, structured=structured)

    def get_format_defaults(self) -> FormatDefaults:
        return FORMAT_DEFAULTS

    def get_placeholders(self) -> Placeholders:
        return PLACEHOLDERS
