"""external-bodyxml: content tree to external XHTML.

Converts an article stored in the content-tree format (a JSON node graph with
a ``type`` discriminator per node) into the XHTML body distributed to
consumers that should not receive internal-only details: external users,
automated HTML processors, republishing platforms.

Quick Start:
    >>> from external_bodyxml import transform
    >>> transform(b'''{"type": "root", "body": {"type": "body", "children": [
    ...     {"type": "paragraph", "children": [{"type": "text", "value": "Hello"}]}
    ... ]}}''')
    '<body><p>Hello</p></body>'

Errors:
    >>> from external_bodyxml import BodyXmlError, DecodeError, StructuralError
    >>> try:
    ...     transform(payload)
    ... except DecodeError:
    ...     ...  # bad input
    ... except BodyXmlError:
    ...     ...  # well-formed tree, but not expressible externally
"""

from collections.abc import Iterable

from external_bodyxml.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from external_bodyxml.errors import (
    BodyXmlError,
    DecodeError,
    RenderError,
    StructuralError,
    UnsupportedVariantError,
)
from external_bodyxml.nodes import (
    NODE_TYPES,
    WRAPPER_TYPES,
    Body,
    Node,
    Parent,
    Root,
    Wrapper,
    children_of,
    embedded_of,
)
from external_bodyxml.renderers.bodyxml import BodyXmlRenderer
from external_bodyxml.renderers.protocol import TreeRenderer
from external_bodyxml.serialization import from_dict, from_json, to_dict, to_json
from external_bodyxml.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)


def _require_root(node: Node) -> Root:
    if not isinstance(node, Root):
        kind = node.node_type if isinstance(node, Node) else type(node).__name__
        msg = f"expected root node, got {kind!r}"
        raise StructuralError(msg)
    return node


def transform(payload: str | bytes | bytearray, *, config: RenderConfig | None = None) -> str:
    """Decode a content-tree payload and render it as external XHTML.

    Args:
        payload: Content-tree JSON whose top-level node is a root.
        config: Render configuration (defaults to the context config).

    Returns:
        ``<body>...</body>`` XHTML fragment.

    Raises:
        DecodeError: If the payload cannot be decoded into a content tree.
        StructuralError: If the top-level node is not a root, or the tree is malformed.
        UnsupportedVariantError: If the tree holds content the external format cannot express.

    """
    try:
        node = from_json(payload)
    except DecodeError as exc:
        logger.debug("Failed to decode content tree: %s", exc)
        raise
    return transform_tree(node, config=config)


def transform_tree(root: Node, *, config: RenderConfig | None = None) -> str:
    """Render an already decoded tree.

    Raises:
        StructuralError: If ``root`` is not a Root.

    """
    return BodyXmlRenderer(config).render(_require_root(root))


def transform_many(
    payloads: Iterable[str | bytes | bytearray],
    *,
    config: RenderConfig | None = None,
) -> list[str]:
    """Transform a batch of payloads with one renderer.

    The first failing payload aborts the batch.

    Example:
        >>> results = transform_many(payloads_from_queue)

    """
    renderer = BodyXmlRenderer(config)
    results: list[str] = []
    for payload in payloads:
        results.append(renderer.render(_require_root(from_json(payload))))
    return results


def render(node: Node | None, *, config: RenderConfig | None = None) -> str:
    """Render any subtree (a Body, a Paragraph, ...) without the root check."""
    return BodyXmlRenderer(config).render(node)


__all__ = [  # noqa: RUF022  grouped by category
    # Version
    "__version__",
    # Core API
    "transform",
    "transform_tree",
    "transform_many",
    "render",
    # Nodes
    "Node",
    "Parent",
    "Wrapper",
    "Root",
    "Body",
    "NODE_TYPES",
    "WRAPPER_TYPES",
    "children_of",
    "embedded_of",
    # Renderer
    "BodyXmlRenderer",
    "TreeRenderer",
    # Serialization
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    # Errors
    "BodyXmlError",
    "DecodeError",
    "RenderError",
    "StructuralError",
    "UnsupportedVariantError",
    # Configuration (ContextVar-based)
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
