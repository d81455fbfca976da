"""Exceptions raised by the feed constructor."""


class FeedConstructionError(Exception):
    """Base class for errors raised while building or editing a feed."""


class FeedKindMismatchError(FeedConstructionError):
    """Raised when an item is added to a feed of a different format family.

    Formats are never converted into each other, so this signals a programming
    error in the caller rather than bad input data.
    """

    def __init__(self, feed_kind, item_kind, message: str | None = None):
        self.feed_kind = feed_kind
        self.item_kind = item_kind
        super().__init__(
            message
            or f"cannot add a {item_kind} item to a {feed_kind} feed: "
            "items are not converted between feed formats"
        )


class UnhandledVariantError(FeedConstructionError, TypeError):
    """Raised when an operation is handed something that is not a feed/item variant."""

    def __init__(self, operation: str, value):
        self.operation = operation
        self.value = value
        super().__init__(f"{operation}: unhandled variant {type(value).__name__}")
