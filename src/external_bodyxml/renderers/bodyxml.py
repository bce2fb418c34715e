"""External body XML renderer.

Walks a content tree and emits the XHTML fragment distributed to consumers
outside the FT: widely understood HTML tags plus a few FT-specific embed
tags, with internal-only node kinds removed.

Rendering order:
For every node, children are rendered first and concatenated (no separator)
into the node's inner content; the node's rule then wraps that inner content,
ignores it, or replaces the node with nothing. Wrapper nodes delegate to
their embedded node and Root delegates to its body.

Errors:
The first failure anywhere in the tree propagates out of render() unchanged,
so a caller receives either the complete fragment or an exception, never
partial output. Because children are rendered before their parent's rule,
a failure inside a subtree whose output is later discarded still aborts the
render.

Thread Safety:
The renderer holds only its immutable config. Multiple threads can share
one BodyXmlRenderer instance and call render() concurrently.
"""

from external_bodyxml.config import RenderConfig, get_render_config
from external_bodyxml.errors import RenderError, StructuralError, UnsupportedVariantError
from external_bodyxml.nodes import (
    BigNumber,
    Blockquote,
    Body,
    Break,
    CustomCodeComponent,
    Emphasis,
    Flourish,
    Heading,
    ImageSet,
    Layout,
    LayoutImage,
    LayoutSlot,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Parent,
    Pullquote,
    Recommended,
    Root,
    ScrollyBlock,
    ScrollyCopy,
    ScrollyHeading,
    ScrollyImage,
    ScrollySection,
    Strikethrough,
    Strong,
    Table,
    TableBody,
    TableCaption,
    TableCell,
    TableFooter,
    TableRow,
    Text,
    ThematicBreak,
    Tweet,
    Video,
    Wrapper,
    YoutubeVideo,
)
from external_bodyxml.stringbuilder import StringBuilder
from external_bodyxml.utils.logger import get_logger

logger = get_logger(__name__)

ARTICLE_TYPE = "http://www.ft.com/ontology/content/Article"
IMAGE_SET_TYPE = "http://www.ft.com/ontology/content/ImageSet"
CONTENT_API_URL = "http://api.ft.com/content/"

HEADING_TAGS: dict[str, str] = {
    "chapter": "h1",
    "subheading": "h2",
    "label": "h4",
}


def article_id_from_url(url: str) -> str:
    """Return the last path segment of a link URL.

    >>> article_id_from_url("https://www.ft.com/content/1234-5678")
    '1234-5678'
    """
    return url.split("/")[-1]


class BodyXmlRenderer:
    """Render a content tree to the external XHTML body format.

    Usage:
        >>> from external_bodyxml.nodes import Body, BodyBlock, Paragraph, Phrasing, Root, Text
        >>> root = Root(body=Body(children=(
        ...     BodyBlock(embedded=Paragraph(children=(Phrasing(embedded=Text(value="Hello")),))),
        ... )))
        >>> BodyXmlRenderer().render(root)
        '<body><p>Hello</p></body>'

    """

    __slots__ = ("_config",)

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialize renderer.

        Args:
            config: Render configuration. Defaults to the config active in the
                current context (see ``render_config_context``).
        """
        self._config = config or get_render_config()

    @property
    def config(self) -> RenderConfig:
        return self._config

    def render(self, node: Node | None) -> str:
        """Render a node and everything below it.

        Args:
            node: Any node; usually a Root.

        Returns:
            XHTML fragment (``<body>...</body>`` when given a Root or Body).

        Raises:
            StructuralError: If a node is missing or the tree is too deep.
            UnsupportedVariantError: If a node cannot be expressed, e.g. a
                heading level with no external tag.

        Render errors carry the location of the failing node in ``path``
        (``$.body.children[1]``), relative to ``node``.
        """
        try:
            return self._render_node(node, 0)
        except RenderError as exc:
            if exc.path is not None:
                exc.path = f"${exc.path}"
            raise
        except RecursionError as exc:
            raise StructuralError("tree is nested too deeply to render") from exc

    def _render_node(self, node: Node | None, depth: int) -> str:
        if node is None:
            raise StructuralError("missing node")
        if depth > self._config.max_depth:
            msg = f"tree exceeds maximum depth of {self._config.max_depth}"
            raise StructuralError(msg)

        if isinstance(node, Root):
            return self._render_child(node.body, depth + 1, ".body")
        if isinstance(node, Wrapper):
            # wrappers have no JSON object of their own, so no path segment
            return self._render_node(node.embedded, depth + 1)

        inner = ""
        if isinstance(node, Parent):
            sb = StringBuilder()
            for i, child in enumerate(node.children):
                sb.append(self._render_child(child, depth + 1, f".children[{i}]"))
            inner = sb.build()

        return self._apply_rule(node, inner)

    def _render_child(self, child: Node | None, depth: int, segment: str) -> str:
        try:
            return self._render_node(child, depth)
        except RenderError as exc:
            exc.path = f"{segment}{exc.path or ''}"
            raise

    def _apply_rule(self, node: Node, inner: str) -> str:
        """Combine a node with its rendered inner content."""
        match node:
            case Body():
                return f"<body>{inner}</body>"
            case Text():
                return node.value
            case Break():
                return "<br>"
            case ThematicBreak():
                return "<hr>"
            case Paragraph():
                return f"<p>{inner}</p>"
            case Heading():
                return self._render_heading(node, inner)
            case Strong():
                return f"<strong>{inner}</strong>"
            case Emphasis():
                return f"<em>{inner}</em>"
            case Strikethrough():
                return f"<s>{inner}</s>"
            case Link():
                return self._render_link(node, inner)
            case List():
                tag = "ol" if node.ordered else "ul"
                return f"<{tag}>{inner}</{tag}>"
            case ListItem():
                return f"<li>{inner}</li>"
            case Blockquote():
                return f"<blockquote>{inner}</blockquote>"
            case Pullquote():
                # <pull-quote> is an FT tag rather than standard HTML
                return (
                    f"<pull-quote><pull-quote-text><p>{node.text}</p></pull-quote-text>"
                    f"<pull-quote-source>{node.source or ''}</pull-quote-source></pull-quote>"
                )
            case ImageSet():
                return (
                    f'<content data-embedded="true" id="{node.id}" '
                    f'type="{IMAGE_SET_TYPE}"></content>'
                )
            case (
                Table()
                | TableCaption()
                | TableBody()
                | TableFooter()
                | TableRow()
                | TableCell()
                | Video()
                | YoutubeVideo()
                | ScrollyBlock()
                | ScrollySection()
                | ScrollyImage()
                | ScrollyCopy()
                | ScrollyHeading()
            ):
                # TODO: give tables, videos and scrollytelling an external representation
                return self._discard(node, inner)
            case Layout() | LayoutSlot() | LayoutImage():
                # published inside the experimental tag, not part of the external format
                return self._discard(node, inner)
            case Recommended() | Tweet() | BigNumber() | Flourish() | CustomCodeComponent():
                # published as internal custom tags
                return self._discard(node, inner)
            case _:
                if self._config.strict:
                    msg = f"no external rendering rule for {type(node).__name__}"
                    raise UnsupportedVariantError(node.node_type or type(node).__name__, msg)
                logger.debug("Skipping unknown node %s", type(node).__name__)
                return ""

    def _render_heading(self, heading: Heading, inner: str) -> str:
        tag = HEADING_TAGS.get(heading.level)
        if tag is None:
            msg = f"unsupported heading level {heading.level!r}"
            raise UnsupportedVariantError(heading.node_type, msg)
        return f"<{tag}>{inner}</{tag}>"

    def _render_link(self, link: Link, inner: str) -> str:
        # Only links to FT articles are modelled; the link node carries no
        # field that tells other kinds of link apart. The closing tag is
        # <ftcontent>, as published by the existing external format.
        article_id = article_id_from_url(link.url)
        return (
            f'<ft-content type="{ARTICLE_TYPE}" url="{CONTENT_API_URL}{article_id}">'
            f"{inner}</ftcontent>"
        )

    def _discard(self, node: Node, inner: str) -> str:
        if inner:
            logger.debug("Dropping %d characters of %s content", len(inner), node.node_type)
        return ""
