"""Read-only view over a parsed DWML document."""
from __future__ import annotations

from typing import Iterator, List, Optional
from xml.etree import ElementTree as ET

from ..errors import UpstreamError


class FeedNode:
    __slots__ = ("_element",)

    def __init__(self, element: ET.Element) -> None:
        self._element = element

    def __repr__(self) -> str:
        return f"FeedNode({self.name!r})"

    def __len__(self) -> int:
        return len(self._element)

    def __iter__(self) -> Iterator["FeedNode"]:
        return iter(self.children())

    @property
    def name(self) -> str:
        return self._element.tag

    def children(self) -> List["FeedNode"]:
        return [FeedNode(child) for child in self._element]

    def children_by_name(self, name: str) -> List["FeedNode"]:
        return [FeedNode(child) for child in self._element.findall(name)]

    def child(self, name: str) -> Optional["FeedNode"]:
        found = self._element.find(name)
        return FeedNode(found) if found is not None else None

    def first_child(self) -> Optional["FeedNode"]:
        if len(self._element) == 0:
            return None
        return FeedNode(self._element[0])

    def has_attribute(self, name: str) -> bool:
        return name in self._element.attrib

    def attribute(self, name: str, default: str = "") -> str:
        return self._element.get(name, default)

    def text(self) -> str:
        return (self._element.text or "").strip()

    def child_text(self, name: str) -> str:
        node = self.child(name)
        return node.text() if node is not None else ""


def parse_document(payload: bytes | str) -> FeedNode:
    try:
        root = ET.fromstring(payload)
    except ET.ParseError as exc:
        raise UpstreamError(f"There was an error processing the XML response: {exc}") from exc
    return FeedNode(root)
