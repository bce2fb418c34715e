"""Exception formatting and hierarchy tests."""

from external_bodyxml.errors import (
    BodyXmlError,
    DecodeError,
    RenderError,
    StructuralError,
    UnsupportedVariantError,
)


class TestDecodeErrorFormatting:
    """Verify DecodeError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = DecodeError("invalid JSON")
        assert str(err) == "invalid JSON"
        assert err.path is None
        assert err.message == "invalid JSON"

    def test_with_path(self) -> None:
        err = DecodeError("missing 'type' field", path="$.body.children[3]")
        assert str(err) == "$.body.children[3]: missing 'type' field"
        assert err.path == "$.body.children[3]"

    def test_is_base_error(self) -> None:
        assert isinstance(DecodeError("x"), BodyXmlError)


class TestUnsupportedVariantError:
    """Verify UnsupportedVariantError formatting and hierarchy."""

    def test_basic_format(self) -> None:
        err = UnsupportedVariantError("heading", "unsupported heading level 'intro'")
        assert str(err) == "Node 'heading': unsupported heading level 'intro'"
        assert err.node_type == "heading"

    def test_is_base_error(self) -> None:
        assert isinstance(UnsupportedVariantError("x", "y"), BodyXmlError)


class TestStructuralError:
    def test_is_base_error(self) -> None:
        err = StructuralError("missing node")
        assert isinstance(err, BodyXmlError)
        assert str(err) == "missing node"

    def test_distinct_from_decode_error(self) -> None:
        assert not issubclass(StructuralError, DecodeError)
        assert not issubclass(UnsupportedVariantError, StructuralError)


class TestRenderErrorPath:
    """Render errors gain a location once the renderer has placed them."""

    def test_path_prefixes_message(self) -> None:
        err = UnsupportedVariantError("heading", "unsupported heading level 'intro'")
        err.path = "$.body.children[1]"
        assert str(err) == "$.body.children[1]: Node 'heading': unsupported heading level 'intro'"

    def test_render_errors_share_base(self) -> None:
        assert issubclass(StructuralError, RenderError)
        assert issubclass(UnsupportedVariantError, RenderError)
        assert not issubclass(DecodeError, RenderError)
