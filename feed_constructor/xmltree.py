"""Minimal immutable XML element tree used for the untyped feed fallback.

Only what the constructor needs is here: locating, replacing, inserting and
removing children by tag name. Conversion to and from
``xml.etree.ElementTree`` lets callers hand in parsed documents and render
the result.
"""

import xml.etree.ElementTree as ET
from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from typing import Union


@dataclass(frozen=True)
class Element:
    """An element with ordered attributes and mixed element/text children."""

    name: str
    attributes: tuple[tuple[str, str], ...] = ()
    children: tuple[Union["Element", str], ...] = ()

    def get(self, attribute: str, default: str | None = None) -> str | None:
        for key, value in self.attributes:
            if key == attribute:
                return value
        return default

    @property
    def elements(self) -> tuple["Element", ...]:
        return tuple(child for child in self.children if isinstance(child, Element))

    @property
    def text(self) -> str:
        """Concatenated text children (direct only)."""
        return "".join(child for child in self.children if isinstance(child, str))


Node = Union[Element, str]


def unode(
    name: str,
    text: str | None = None,
    attributes: Iterable[tuple[str, str]] = (),
    children: Iterable[Node] = (),
) -> Element:
    """Build an element with optional text, attributes and child elements."""
    nodes: tuple[Node, ...] = tuple(children)
    if text is not None:
        nodes = (text,) + nodes
    return Element(name=name, attributes=tuple(attributes), children=nodes)


def find_child(element: Element, name: str) -> Element | None:
    """Return the first child element called ``name``."""
    for child in element.elements:
        if child.name == name:
            return child
    return None


def text_content(element: Element | None) -> str | None:
    if element is None:
        return None
    return element.text


def map_children(
    element: Element, func: Callable[[Element], Element | None]
) -> Element:
    """Rewrite child elements; ``func`` returns a replacement or None to keep the child."""
    if not element.children:
        return element
    nodes = []
    for child in element.children:
        if isinstance(child, Element):
            new_child = func(child)
            nodes.append(child if new_child is None else new_child)
        else:
            nodes.append(child)
    return replace(element, children=tuple(nodes))


def filter_children(element: Element, keep: Callable[[Element], bool]) -> Element:
    """Drop child elements for which ``keep`` is false. Text children always stay."""
    if not element.children:
        return element
    nodes = tuple(
        child
        for child in element.children
        if not isinstance(child, Element) or keep(child)
    )
    return replace(element, children=nodes)


def add_child(element: Element, child: Element) -> Element:
    """Insert ``child`` as the first child of ``element``."""
    return replace(element, children=(child,) + element.children)


def remove_children(element: Element, name: str) -> Element:
    """Remove every child element called ``name``."""
    return filter_children(element, lambda child: child.name != name)


def replace_child(element: Element, new_child: Element) -> Element:
    """Replace every child sharing ``new_child``'s name. Nothing is inserted."""
    return map_children(
        element, lambda child: new_child if child.name == new_child.name else None
    )


def upsert_child(element: Element, new_child: Element) -> Element:
    """Remove children sharing ``new_child``'s name, then insert it first."""
    return add_child(remove_children(element, new_child.name), new_child)


def from_etree(node: ET.Element) -> Element:
    """Convert an ElementTree element (tails and text included) to an Element."""
    children: list[Node] = []
    if node.text:
        children.append(node.text)
    for sub in node:
        # comments and processing instructions have a factory function as tag
        if isinstance(sub.tag, str):
            children.append(from_etree(sub))
        if sub.tail:
            children.append(sub.tail)
    return Element(
        name=node.tag,
        attributes=tuple(node.attrib.items()),
        children=tuple(children),
    )


def to_etree(element: Element) -> ET.Element:
    """Convert an Element back to an ElementTree element."""
    node = ET.Element(element.name, dict(element.attributes))
    last: ET.Element | None = None
    for child in element.children:
        if isinstance(child, Element):
            last = to_etree(child)
            node.append(last)
        elif last is None:
            node.text = (node.text or "") + child
        else:
            last.tail = (last.tail or "") + child
    return node


def parse_element(xml_text: str | bytes) -> Element:
    """Parse an XML document into an Element.

    Raises:
        xml.etree.ElementTree.ParseError: If the document is not well-formed
    """
    return from_etree(ET.fromstring(xml_text))


def to_string(element: Element) -> str:
    return ET.tostring(to_etree(element), encoding="unicode")
