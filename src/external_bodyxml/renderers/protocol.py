"""TreeRenderer protocol: stable interface for content-tree renderers.

Any renderer that implements ``render(node) -> str`` conforms to this protocol.
The built-in ``BodyXmlRenderer`` is the reference implementation.

Example:
    from external_bodyxml.renderers.protocol import TreeRenderer

    def publish(renderer: TreeRenderer, root: Root) -> str:
        return renderer.render(root)

"""

from typing import Protocol

from external_bodyxml.nodes import Node


class TreeRenderer(Protocol):
    """Protocol for content-tree renderers."""

    def render(self, node: Node | None) -> str:
        """Render a node (usually a Root) to a string.

        Args:
            node: The tree to render.

        Returns:
            Rendered string output.

        """
        ...
