"""Typed content-tree nodes.

All nodes are frozen dataclasses with slots:
- Immutability: a decoded tree is read-only and safe to share across threads
- Memory efficiency: __slots__ keeps large article trees small
- Pattern matching: match statements dispatch on the concrete class

Every concrete class carries a ``node_type`` class variable equal to the
``type`` tag used by the content-tree JSON format.

Node Hierarchy:
Node (base)
├── Root                      (owns exactly one Body)
├── Parent                    (ordered, exclusively owned children)
│   ├── Body
│   ├── Paragraph, Heading, Strong, Emphasis, Strikethrough, Link
│   ├── List, ListItem, Blockquote
│   ├── ScrollyBlock, ScrollySection, ScrollyCopy, ScrollyHeading
│   ├── Layout, LayoutSlot
│   └── Table, TableCaption, TableBody, TableFooter, TableRow, TableCell
├── LiteralNode               (single string value)
│   └── Text
├── Reference                 (identifier of externally resolved content)
│   ├── ImageSet, Recommended, Tweet, Flourish, Video
│   ├── ScrollyImage, LayoutImage
│   └── CustomCodeComponent
├── Break, ThematicBreak, Pullquote, BigNumber, YoutubeVideo
└── Wrapper                   (slot indirection, one embedded node)
    ├── BodyBlock, Phrasing
    ├── BlockquoteChild, ListItemChild
    ├── LayoutChild, LayoutSlotChild
    ├── ScrollySectionChild, ScrollyCopyChild
    └── TableChild

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Literal

# Levels are not restricted at decode time; the renderer rejects the ones
# the external format has no tag for.
HeadingLevel = Literal["chapter", "subheading", "label"]
ScrollyHeadingLevel = Literal["chapter", "heading", "subheading"]

# =============================================================================
# Capability bases
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all content-tree nodes."""

    node_type: ClassVar[str] = ""


@dataclass(frozen=True, slots=True)
class Parent(Node):
    """Node owning an ordered sequence of child nodes."""

    children: tuple[Node, ...]


@dataclass(frozen=True, slots=True)
class LiteralNode(Node):
    """Node owning a single string value instead of children."""

    value: str


@dataclass(frozen=True, slots=True)
class Reference(Node):
    """Node pointing at content resolved outside the tree (images, tweets, ...)."""

    id: str


@dataclass(frozen=True, slots=True)
class Wrapper(Node):
    """Single-child indirection restricting which variants a slot accepts.

    Wrappers have no markup of their own. ``accepts`` lists the ``type``
    tags the decoder allows in the slot.

    """

    embedded: Node
    accepts: ClassVar[frozenset[str]] = frozenset()


# =============================================================================
# Root
# =============================================================================


@dataclass(frozen=True, slots=True)
class Root(Node):
    """Tree entry point.

    JSON: {"type": "root", "body": {...}}

    A root decoded without a body holds None; rendering it raises
    StructuralError.

    """

    body: Body | None
    node_type = "root"


@dataclass(frozen=True, slots=True)
class Body(Parent):
    """Article body: the ordered block-level content.

    JSON: {"type": "body", "version": 1, "children": [...]}
    XHTML: <body>...</body>

    """

    children: tuple[BodyBlock, ...]
    version: float | None = None
    node_type = "body"


# =============================================================================
# Phrasing (inline) nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(LiteralNode):
    """Literal text.

    JSON: {"type": "text", "value": "Hello"}
    XHTML: the value, verbatim

    """

    node_type = "text"


@dataclass(frozen=True, slots=True)
class Break(Node):
    """Line break. XHTML: <br>"""

    node_type = "break"


@dataclass(frozen=True, slots=True)
class Strong(Parent):
    """XHTML: <strong>...</strong>"""

    children: tuple[Phrasing, ...]
    node_type = "strong"


@dataclass(frozen=True, slots=True)
class Emphasis(Parent):
    """XHTML: <em>...</em>"""

    children: tuple[Phrasing, ...]
    node_type = "emphasis"


@dataclass(frozen=True, slots=True)
class Strikethrough(Parent):
    """XHTML: <s>...</s>"""

    children: tuple[Phrasing, ...]
    node_type = "strikethrough"


@dataclass(frozen=True, slots=True)
class Link(Parent):
    """Hyperlink.

    JSON: {"type": "link", "url": "https://www.ft.com/content/<uuid>", "title": "", "children": [...]}
    XHTML: <ft-content type="...Article" url="http://api.ft.com/content/<uuid>">...</ftcontent>

    """

    children: tuple[Phrasing, ...]
    url: str
    title: str = ""
    node_type = "link"


# =============================================================================
# Block nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Paragraph(Parent):
    """XHTML: <p>...</p>"""

    children: tuple[Phrasing, ...]
    node_type = "paragraph"


@dataclass(frozen=True, slots=True)
class Heading(Parent):
    """Heading.

    JSON: {"type": "heading", "level": "chapter", "children": [{"type": "text", ...}]}
    XHTML: <h1> for chapter, <h2> for subheading, <h4> for label

    """

    children: tuple[Text, ...]
    level: HeadingLevel
    node_type = "heading"


@dataclass(frozen=True, slots=True)
class ThematicBreak(Node):
    """XHTML: <hr>"""

    node_type = "thematic-break"


@dataclass(frozen=True, slots=True)
class List(Parent):
    """Ordered or unordered list.

    JSON: {"type": "list", "ordered": false, "children": [{"type": "list-item", ...}]}
    XHTML: <ul>/<ol> with <li> children

    """

    children: tuple[ListItem, ...]
    ordered: bool
    node_type = "list"


@dataclass(frozen=True, slots=True)
class ListItem(Parent):
    """XHTML: <li>...</li>"""

    children: tuple[ListItemChild, ...]
    node_type = "list-item"


@dataclass(frozen=True, slots=True)
class Blockquote(Parent):
    """XHTML: <blockquote>...</blockquote>"""

    children: tuple[BlockquoteChild, ...]
    node_type = "blockquote"


@dataclass(frozen=True, slots=True)
class Pullquote(Node):
    """Pull quote carrying its own text rather than children.

    JSON: {"type": "pullquote", "text": "...", "source": "..."}

    """

    text: str
    source: str | None = None
    node_type = "pullquote"


@dataclass(frozen=True, slots=True)
class ImageSet(Reference):
    """Embedded image set.

    JSON: {"type": "image-set", "id": "<uuid>", "picture": {...}}
    XHTML: <content data-embedded="true" id="<uuid>" type="...ImageSet"></content>

    """

    picture: dict[str, Any] | None = None
    node_type = "image-set"


@dataclass(frozen=True, slots=True)
class BigNumber(Node):
    """Highlighted figure with a short description."""

    number: str
    description: str = ""
    node_type = "big-number"


@dataclass(frozen=True, slots=True)
class Video(Reference):
    embedded: bool = False
    node_type = "video"


@dataclass(frozen=True, slots=True)
class YoutubeVideo(Node):
    url: str
    node_type = "youtube-video"


@dataclass(frozen=True, slots=True)
class Recommended(Reference):
    """Recommended-article teaser; ``teaser`` is resolved upstream and kept opaque."""

    heading: str = ""
    teaser_title_override: str = ""
    teaser: dict[str, Any] | None = None
    node_type = "recommended"


@dataclass(frozen=True, slots=True)
class Tweet(Reference):
    html: str = ""
    node_type = "tweet"


@dataclass(frozen=True, slots=True)
class Flourish(Reference):
    """Flourish data visualisation."""

    layout_width: str = ""
    flourish_type: str = ""
    description: str = ""
    timestamp: str = ""
    fallback_image: dict[str, Any] | None = None
    node_type = "flourish"


@dataclass(frozen=True, slots=True)
class CustomCodeComponent(Reference):
    """Externally hosted interactive component."""

    path: str = ""
    version_range: str = ""
    attributes_last_modified: str = ""
    attributes: dict[str, Any] | None = None
    layout_width: str = ""
    node_type = "custom-code-component"


# =============================================================================
# Scrollytelling
# =============================================================================


@dataclass(frozen=True, slots=True)
class ScrollyBlock(Parent):
    children: tuple[ScrollySection, ...]
    theme: str = ""
    node_type = "scrolly-block"


@dataclass(frozen=True, slots=True)
class ScrollySection(Parent):
    children: tuple[ScrollySectionChild, ...]
    display: str = ""
    no_box: bool = False
    position: str = ""
    transition: str = ""
    node_type = "scrolly-section"


@dataclass(frozen=True, slots=True)
class ScrollyImage(Reference):
    picture: dict[str, Any] | None = None
    node_type = "scrolly-image"


@dataclass(frozen=True, slots=True)
class ScrollyCopy(Parent):
    children: tuple[ScrollyCopyChild, ...]
    node_type = "scrolly-copy"


@dataclass(frozen=True, slots=True)
class ScrollyHeading(Parent):
    children: tuple[Text, ...]
    level: ScrollyHeadingLevel
    node_type = "scrolly-heading"


# =============================================================================
# Layout (published inside the experimental tag)
# =============================================================================


@dataclass(frozen=True, slots=True)
class Layout(Parent):
    children: tuple[LayoutChild, ...]
    layout_name: str = ""
    layout_width: str = ""
    node_type = "layout"


@dataclass(frozen=True, slots=True)
class LayoutSlot(Parent):
    children: tuple[LayoutSlotChild, ...]
    node_type = "layout-slot"


@dataclass(frozen=True, slots=True)
class LayoutImage(Reference):
    alt: str = ""
    caption: str = ""
    credit: str = ""
    picture: dict[str, Any] | None = None
    node_type = "layout-image"


# =============================================================================
# Tables
# =============================================================================


@dataclass(frozen=True, slots=True)
class Table(Parent):
    """Table with caption, body and footer parts."""

    children: tuple[TableChild, ...]
    stripes: bool = False
    compact: bool = False
    layout_width: str = ""
    collapse_after_how_many_rows: int | None = None
    responsive_style: str = ""
    column_settings: list[Any] | None = None
    node_type = "table"


@dataclass(frozen=True, slots=True)
class TableCaption(Parent):
    children: tuple[Phrasing, ...]
    node_type = "table-caption"


@dataclass(frozen=True, slots=True)
class TableBody(Parent):
    children: tuple[TableRow, ...]
    node_type = "table-body"


@dataclass(frozen=True, slots=True)
class TableFooter(Parent):
    children: tuple[Phrasing, ...]
    node_type = "table-footer"


@dataclass(frozen=True, slots=True)
class TableRow(Parent):
    children: tuple[TableCell, ...]
    node_type = "table-row"


@dataclass(frozen=True, slots=True)
class TableCell(Parent):
    children: tuple[Phrasing, ...]
    heading: bool = False
    column_span: int | None = None
    row_span: int | None = None
    node_type = "table-cell"


# =============================================================================
# Slot wrappers
# =============================================================================

_PHRASING = frozenset({"text", "break", "strong", "emphasis", "strikethrough", "link"})


@dataclass(frozen=True, slots=True)
class BodyBlock(Wrapper):
    """Top-level block inside Body."""

    node_type = "body-block"
    accepts = frozenset(
        {
            "paragraph",
            "flourish",
            "heading",
            "image-set",
            "big-number",
            "custom-code-component",
            "layout",
            "list",
            "blockquote",
            "pullquote",
            "scrolly-block",
            "thematic-break",
            "table",
            "recommended",
            "tweet",
            "video",
            "youtube-video",
        }
    )


@dataclass(frozen=True, slots=True)
class Phrasing(Wrapper):
    """Inline content inside running text."""

    node_type = "phrasing"
    accepts = _PHRASING


@dataclass(frozen=True, slots=True)
class BlockquoteChild(Wrapper):
    node_type = "blockquote-child"
    accepts = _PHRASING | {"paragraph"}


@dataclass(frozen=True, slots=True)
class ListItemChild(Wrapper):
    node_type = "list-item-child"
    accepts = _PHRASING | {"paragraph"}


@dataclass(frozen=True, slots=True)
class LayoutChild(Wrapper):
    node_type = "layout-child"
    accepts = frozenset({"heading", "layout-image", "layout-slot"})


@dataclass(frozen=True, slots=True)
class LayoutSlotChild(Wrapper):
    node_type = "layout-slot-child"
    accepts = frozenset({"heading", "paragraph", "layout-image"})


@dataclass(frozen=True, slots=True)
class ScrollySectionChild(Wrapper):
    node_type = "scrolly-section-child"
    accepts = frozenset({"scrolly-copy", "scrolly-image"})


@dataclass(frozen=True, slots=True)
class ScrollyCopyChild(Wrapper):
    node_type = "scrolly-copy-child"
    accepts = frozenset({"paragraph", "scrolly-heading"})


@dataclass(frozen=True, slots=True)
class TableChild(Wrapper):
    node_type = "table-child"
    accepts = frozenset({"table-caption", "table-body", "table-footer"})


# =============================================================================
# Registries
# =============================================================================

# JSON ``type`` tag -> node class, for every variant that appears in a payload
NODE_TYPES: dict[str, type[Node]] = {
    cls.node_type: cls
    for cls in (
        Root,
        Body,
        Text,
        Break,
        Strong,
        Emphasis,
        Strikethrough,
        Link,
        Paragraph,
        Heading,
        ThematicBreak,
        List,
        ListItem,
        Blockquote,
        Pullquote,
        ImageSet,
        BigNumber,
        Video,
        YoutubeVideo,
        Recommended,
        Tweet,
        Flourish,
        CustomCodeComponent,
        ScrollyBlock,
        ScrollySection,
        ScrollyImage,
        ScrollyCopy,
        ScrollyHeading,
        Layout,
        LayoutSlot,
        LayoutImage,
        Table,
        TableCaption,
        TableBody,
        TableFooter,
        TableRow,
        TableCell,
    )
}

WRAPPER_TYPES: dict[str, type[Wrapper]] = {
    cls.node_type: cls
    for cls in (
        BodyBlock,
        Phrasing,
        BlockquoteChild,
        ListItemChild,
        LayoutChild,
        LayoutSlotChild,
        ScrollySectionChild,
        ScrollyCopyChild,
        TableChild,
    )
}


def children_of(node: Node) -> tuple[Node, ...] | None:
    """Return the ordered children of a Parent, None for any other node."""
    if isinstance(node, Parent):
        return node.children
    return None


def embedded_of(node: Node) -> Node | None:
    """Return the node held by a Wrapper, None for any other node."""
    if isinstance(node, Wrapper):
        return node.embedded
    return None
