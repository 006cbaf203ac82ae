"""Abstract section tree shared by every report rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union


@dataclass(frozen=True, slots=True)
class Paragraph:
    text: str
    label: str | None = None


@dataclass(frozen=True, slots=True)
class Badge:
    """Recommendation label; ``tier`` is one of ``high``, ``medium``, ``low``."""

    text: str
    tier: str
    label: str | None = None


@dataclass(frozen=True, slots=True)
class ListItem:
    text: str
    children: tuple[ListItem, ...] = ()


@dataclass(frozen=True, slots=True)
class BulletList:
    items: tuple[ListItem, ...]


@dataclass(frozen=True, slots=True)
class Table:
    """Grid with one header row; every row has ``len(columns)`` cells."""

    columns: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]


@dataclass(frozen=True, slots=True)
class Section:
    """Titled group of nodes; ``level`` is the depth in the tree (root is 0)."""

    title: str
    level: int
    children: tuple[Node, ...] = ()
    key: str = ""
    collapsible: bool = False


Node = Union[Section, Paragraph, Badge, BulletList, Table]


def walk(node: Node) -> Iterator[Node]:
    """Yield ``node`` and its descendants in document order."""
    yield node
    if isinstance(node, Section):
        for child in node.children:
            yield from walk(child)


def outline(tree: Section) -> list[tuple[int, str]]:
    """Heading sequence ``(level, title)`` in document order."""
    return [(node.level, node.title) for node in walk(tree) if isinstance(node, Section)]


def find_section(tree: Section, key: str) -> Section | None:
    for node in walk(tree):
        if isinstance(node, Section) and node.key == key:
            return node
    return None
