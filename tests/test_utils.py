"""Tests for logging helpers and StringBuilder."""

import logging

import pytest

from external_bodyxml.nodes import Body, BodyBlock, Paragraph, Phrasing, Table, Text
from external_bodyxml.renderers.bodyxml import BodyXmlRenderer
from external_bodyxml.stringbuilder import StringBuilder
from external_bodyxml.utils.logger import get_logger


class TestGetLogger:
    def test_prefixes_name(self) -> None:
        assert get_logger("engine").name == "external_bodyxml.engine"

    def test_keeps_package_names(self) -> None:
        assert get_logger("external_bodyxml.renderers").name == "external_bodyxml.renderers"
        assert get_logger("external_bodyxml").name == "external_bodyxml"

    def test_similar_prefix_is_namespaced(self) -> None:
        assert get_logger("external_bodyxmlish").name == "external_bodyxml.external_bodyxmlish"

    def test_returns_stdlib_logger(self) -> None:
        assert isinstance(get_logger("x"), logging.Logger)


class TestRendererLogging:
    def test_dropped_content_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        table = Table(children=())
        para = Paragraph(children=(Phrasing(embedded=Text(value="x")),))
        body = Body(children=(BodyBlock(embedded=para), BodyBlock(embedded=table)))

        with caplog.at_level(logging.DEBUG, logger="external_bodyxml"):
            BodyXmlRenderer().render(body)

        # the table had no content, so nothing was dropped
        assert not any("Dropping" in r.message for r in caplog.records)

    def test_dropped_nonempty_content_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        from external_bodyxml.nodes import TableCaption, TableChild

        caption = TableCaption(children=(Phrasing(embedded=Text(value="cap")),))
        table = Table(children=(TableChild(embedded=caption),))

        with caplog.at_level(logging.DEBUG, logger="external_bodyxml"):
            BodyXmlRenderer().render(table)

        messages = [r.getMessage() for r in caplog.records]
        assert "Dropping 3 characters of table-caption content" in messages


class TestStringBuilder:
    def test_build(self) -> None:
        sb = StringBuilder()
        sb.append("<p>").append("Hello").append("</p>")
        assert sb.build() == "<p>Hello</p>"

    def test_empty_fragments_skipped(self) -> None:
        sb = StringBuilder()
        sb.append("").append("a").append("")
        assert len(sb) == 1
        assert bool(sb)

    def test_empty_builder(self) -> None:
        sb = StringBuilder()
        assert sb.build() == ""
        assert not sb
