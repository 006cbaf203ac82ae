"""Interactive view: an HTML node tree with collapsible groups and badges."""

from __future__ import annotations

from dataclasses import dataclass, field
from html import escape

from ..core.tree import Badge, BulletList, ListItem, Node, Paragraph, Section, Table

_STYLESHEET = """
details > summary { cursor: pointer; }
.candidate-badge { border-radius: 9999px; padding: 0.1rem 0.6rem; border: 1px solid; }
.badge-high { background: #dcfce7; color: #166534; }
.badge-medium { background: #fef9c3; color: #854d0e; }
.badge-low { background: #fee2e2; color: #991b1b; }
table.report-table { border-collapse: collapse; }
table.report-table th, table.report-table td { border: 1px solid #e5e7eb; padding: 0.5rem; }
tr.hoverable:hover { background: #eff6ff; }
"""


@dataclass(slots=True)
class UINode:
    """Element of the interactive view; ``text`` precedes ``children``."""

    tag: str
    text: str | None = None
    classes: tuple[str, ...] = ()
    attrs: dict[str, str] = field(default_factory=dict)
    children: list[UINode] = field(default_factory=list)


class InteractiveRenderer:
    """Maps the section tree onto UI nodes without deriving any new content."""

    def render(self, tree: Section) -> UINode:
        return self._node(tree)

    def _node(self, node: Node) -> UINode:
        if isinstance(node, Section):
            return self._section(node)
        if isinstance(node, Paragraph):
            return self._paragraph(node)
        if isinstance(node, Badge):
            return self._badge(node)
        if isinstance(node, BulletList):
            return self._list(node.items)
        if isinstance(node, Table):
            return self._table(node)
        raise TypeError(f"Unsupported node: {type(node).__name__}")

    def _section(self, section: Section) -> UINode:
        level = str(section.level)
        heading = UINode(
            f"h{min(section.level + 1, 6)}",
            text=section.title,
            classes=("section-header",),
            attrs={"data-level": level},
        )
        children = [self._node(child) for child in section.children]
        attrs = {"data-level": level}
        if section.key:
            attrs["data-key"] = section.key
        if section.collapsible:
            return UINode(
                "details",
                classes=("section", "collapsible"),
                attrs=attrs,
                children=[UINode("summary", children=[heading]), *children],
            )
        return UINode("section", classes=("section",), attrs=attrs, children=[heading, *children])

    @staticmethod
    def _badge(badge: Badge) -> UINode:
        pill = UINode("span", text=badge.text, classes=("candidate-badge", f"badge-{badge.tier}"))
        if badge.label is None:
            return pill
        return UINode("p", children=[UINode("strong", text=f"{badge.label}: "), pill])

    @staticmethod
    def _paragraph(paragraph: Paragraph) -> UINode:
        if paragraph.label is None:
            return UINode("p", text=paragraph.text)
        return UINode(
            "p",
            children=[
                UINode("strong", text=f"{paragraph.label}:"),
                UINode("span", text=f" {paragraph.text}"),
            ],
        )

    def _list(self, items: tuple[ListItem, ...]) -> UINode:
        return UINode(
            "ul",
            children=[
                UINode("li", text=item.text, children=[self._list(item.children)] if item.children else [])
                for item in items
            ],
        )

    @staticmethod
    def _table(table: Table) -> UINode:
        header = UINode("tr", children=[UINode("th", text=column) for column in table.columns])
        body = [
            UINode("tr", classes=("hoverable",), children=[UINode("td", text=cell) for cell in row])
            for row in table.rows
        ]
        return UINode(
            "table",
            classes=("report-table",),
            children=[UINode("thead", children=[header]), UINode("tbody", children=body)],
        )


def to_html(node: UINode) -> str:
    """Serialize a UI node tree to an HTML fragment."""
    attrs = dict(node.attrs)
    if node.classes:
        attrs = {"class": " ".join(node.classes), **attrs}
    rendered_attrs = "".join(f' {name}="{escape(value)}"' for name, value in attrs.items())
    inner = escape(node.text) if node.text is not None else ""
    inner += "".join(to_html(child) for child in node.children)
    return f"<{node.tag}{rendered_attrs}>{inner}</{node.tag}>"


def render_page(node: UINode, *, title: str) -> str:
    """Wrap a rendered tree into a standalone HTML page."""
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en"><head><meta charset="utf-8">'
        f"<title>{escape(title)}</title><style>{_STYLESHEET}</style></head>"
        f"<body>{to_html(node)}</body></html>\n"
    )


def ui_outline(node: UINode) -> list[tuple[int, str]]:
    """Heading sequence ``(level, title)`` of a rendered tree, in document order."""
    headings: list[tuple[int, str]] = []
    if node.tag in {"h1", "h2", "h3", "h4", "h5", "h6"} and "data-level" in node.attrs:
        headings.append((int(node.attrs["data-level"]), node.text or ""))
    for child in node.children:
        headings.extend(ui_outline(child))
    return headings
