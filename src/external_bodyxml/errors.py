"""Exception classes for external-bodyxml.

Every failure surfaces as a subclass of BodyXmlError so callers can tell
bad input (DecodeError, StructuralError) apart from content the external
format cannot express (UnsupportedVariantError).
"""

from __future__ import annotations


class BodyXmlError(Exception):
    """Base exception for all external-bodyxml errors."""

    pass


class DecodeError(BodyXmlError):
    """Payload cannot be decoded into a content tree.

    Raised for invalid JSON, unknown ``type`` tags, missing required fields,
    wrongly typed scalars and nodes placed in a slot that does not accept them.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        """Initialize decode error with an optional JSON path.

        Args:
            message: Error description
            path: JSONPath-like location of the offending value (e.g. ``$.body.children[0]``)
        """
        self.message = message
        self.path = path

        location = f"{path}: " if path else ""
        super().__init__(f"{location}{message}")


class RenderError(BodyXmlError):
    """Base for failures raised while rendering a tree.

    The renderer records where in the tree the failure happened as a
    JSONPath-like ``path`` (e.g. ``$.body.children[2]``), matching the paths
    DecodeError reports for the same payload.
    """

    path: str | None = None

    def __str__(self) -> str:
        message = super().__str__()
        return f"{self.path}: {message}" if self.path else message


class StructuralError(RenderError):
    """Tree shape is unusable.

    Raised when the root is not a Root, a required node is absent,
    or the tree is deeper than the configured limit.
    """

    pass


class UnsupportedVariantError(RenderError):
    """A node is well-formed but cannot be expressed in external XHTML."""

    def __init__(self, node_type: str, message: str) -> None:
        """Initialize unsupported variant error.

        Args:
            node_type: Discriminator of the failing node (e.g. "heading")
            message: Description of what is unsupported
        """
        self.node_type = node_type
        super().__init__(f"Node '{node_type}': {message}")
