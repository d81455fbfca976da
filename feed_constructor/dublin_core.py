"""Dublin Core metadata slots attached to RSS 1.0 channels and items.

RSS 1.0 models only a handful of fields natively (title, link, description).
Everything else a feed usually carries (dates, language, authorship, rights,
subjects) travels as an ordered list of ``dc:*`` elements. This module keeps
that list as a tuple of :class:`DCItem` and offers the two edits the
constructor needs:

- :func:`upsert_slot` for single-valued metadata: the first slot of the same
  kind is rewritten in place, otherwise a new slot goes to the front.
- :func:`prepend_slots` for multi-valued metadata such as subjects: every
  value is added, nothing is replaced.

Neither function ever creates a second slot of a kind that :func:`upsert_slot`
manages, so duplicates can only come from the input.
"""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import Enum


class DCElement(str, Enum):
    """The fifteen Dublin Core element names."""

    TITLE = "title"
    CREATOR = "creator"
    SUBJECT = "subject"
    DESCRIPTION = "description"
    PUBLISHER = "publisher"
    CONTRIBUTOR = "contributor"
    DATE = "date"
    TYPE = "type"
    FORMAT = "format"
    IDENTIFIER = "identifier"
    SOURCE = "source"
    LANGUAGE = "language"
    RELATION = "relation"
    COVERAGE = "coverage"
    RIGHTS = "rights"


@dataclass(frozen=True)
class DCItem:
    """A single ``dc:<element>`` value."""

    element: DCElement
    text: str

    @property
    def tag(self) -> str:
        return f"dc:{self.element.value}"


def find_slot(element: DCElement, slots: Iterable[DCItem]) -> DCItem | None:
    """Return the first slot of the given kind, or None."""
    for slot in slots:
        if slot.element == element:
            return slot
    return None


def upsert_slot(
    element: DCElement, text: str, slots: tuple[DCItem, ...]
) -> tuple[DCItem, ...]:
    """Set the text of the first ``element`` slot, or prepend a new one.

    Args:
        element: Dublin Core element to set
        text: New text for the slot
        slots: Existing slots, left untouched

    Returns:
        New slot tuple with the same length (slot rewritten in place) or one
        longer (slot added at the front)
    """
    for index, slot in enumerate(slots):
        if slot.element == element:
            return slots[:index] + (replace(slot, text=text),) + slots[index + 1 :]
    return (DCItem(element=element, text=text),) + slots


def prepend_slots(
    element: DCElement, texts: Iterable[str], slots: tuple[DCItem, ...]
) -> tuple[DCItem, ...]:
    """Add one ``element`` slot per text in front of the existing slots.

    The new slots keep the order of ``texts``.
    """
    added = tuple(DCItem(element=element, text=text) for text in texts)
    return added + slots
