"""Content-tree renderers.

Available Renderers:
- BodyXmlRenderer: Renders a content tree to the external XHTML body format

Thread Safety:
Renderers keep no per-render state on the instance.
Safe for concurrent use from multiple threads.

"""

from external_bodyxml.renderers.bodyxml import BodyXmlRenderer
from external_bodyxml.renderers.protocol import TreeRenderer

__all__ = ["BodyXmlRenderer", "TreeRenderer"]
