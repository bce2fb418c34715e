"""Property-based tests for the renderer using Hypothesis.

These tests verify invariants that should hold for any tree:
1. Wrappers are transparent
2. A parent's inner content is its children's output, in order, unseparated
3. Internal-only variants render empty whatever they contain
4. Trees built from supported variants never raise
5. Decoding the encoding of a tree gives back the same tree
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from external_bodyxml.nodes import (
    BigNumber,
    Body,
    BodyBlock,
    Break,
    CustomCodeComponent,
    Emphasis,
    Heading,
    ImageSet,
    Link,
    List,
    ListItem,
    ListItemChild,
    Node,
    Paragraph,
    Phrasing,
    Recommended,
    Root,
    Strikethrough,
    Strong,
    Table,
    TableBody,
    TableCell,
    TableChild,
    TableRow,
    Text,
    ThematicBreak,
    Tweet,
    Video,
)
from external_bodyxml.renderers.bodyxml import BodyXmlRenderer
from external_bodyxml.serialization import from_json, to_json

renderer = BodyXmlRenderer()

texts = st.text(max_size=12).map(lambda v: Text(value=v))


def _phrasing(children: list[Node]) -> tuple[Phrasing, ...]:
    return tuple(Phrasing(embedded=c) for c in children)


phrasing_nodes = st.recursive(
    st.one_of(texts, st.just(Break())),
    lambda inner: st.one_of(
        st.lists(inner, max_size=3).map(lambda c: Strong(children=_phrasing(c))),
        st.lists(inner, max_size=3).map(lambda c: Emphasis(children=_phrasing(c))),
        st.lists(inner, max_size=3).map(lambda c: Strikethrough(children=_phrasing(c))),
        st.tuples(st.text(max_size=20), st.lists(inner, max_size=3)).map(
            lambda t: Link(url=t[0], children=_phrasing(t[1]))
        ),
    ),
    max_leaves=12,
)

paragraphs = st.lists(phrasing_nodes, max_size=4).map(lambda c: Paragraph(children=_phrasing(c)))

headings = st.tuples(
    st.sampled_from(["chapter", "subheading", "label"]), st.lists(texts, max_size=3)
).map(lambda t: Heading(level=t[0], children=tuple(t[1])))

lists = st.tuples(st.booleans(), st.lists(st.lists(phrasing_nodes, max_size=2), max_size=3)).map(
    lambda t: List(
        ordered=t[0],
        children=tuple(
            ListItem(children=tuple(ListItemChild(embedded=c) for c in item)) for item in t[1]
        ),
    )
)

supported_blocks = st.one_of(
    paragraphs,
    headings,
    lists,
    st.just(ThematicBreak()),
    st.text(min_size=1, max_size=8).map(lambda i: ImageSet(id=i)),
)


def _table(cells: list[Node]) -> Table:
    row = TableRow(children=tuple(TableCell(children=_phrasing([c])) for c in cells))
    return Table(children=(TableChild(embedded=TableBody(children=(row,))),))


discarded_blocks = st.one_of(
    st.lists(phrasing_nodes, max_size=4).map(_table),
    st.just(Video(id="v")),
    st.just(Tweet(id="t", html="<p>x</p>")),
    st.just(Recommended(id="r")),
    st.just(BigNumber(number="1")),
    st.just(CustomCodeComponent(id="c")),
)


def _root(blocks: list[Node]) -> Root:
    return Root(body=Body(children=tuple(BodyBlock(embedded=b) for b in blocks)))


class TestRendererProperties:
    @given(node=phrasing_nodes)
    @settings(max_examples=100)
    def test_wrapper_is_transparent(self, node: Node) -> None:
        assert renderer.render(Phrasing(embedded=node)) == renderer.render(node)
        assert renderer.render(ListItemChild(embedded=node)) == renderer.render(node)

    @given(children=st.lists(phrasing_nodes, max_size=5))
    @settings(max_examples=100)
    def test_children_concatenate_in_order(self, children: list[Node]) -> None:
        expected = "".join(renderer.render(c) for c in children)
        assert renderer.render(Paragraph(children=_phrasing(children))) == f"<p>{expected}</p>"

    @given(block=discarded_blocks)
    def test_discarded_blocks_render_empty(self, block: Node) -> None:
        assert renderer.render(block) == ""

    @given(
        blocks=st.lists(supported_blocks, max_size=4),
        dropped=st.lists(discarded_blocks, max_size=3),
    )
    @settings(max_examples=50)
    def test_discarded_blocks_do_not_change_body(
        self, blocks: list[Node], dropped: list[Node]
    ) -> None:
        mixed = [*dropped, *blocks, *dropped]
        assert renderer.render(_root(mixed)) == renderer.render(_root(blocks))

    @given(blocks=st.lists(supported_blocks, max_size=5))
    @settings(max_examples=100)
    def test_supported_trees_always_render(self, blocks: list[Node]) -> None:
        result = renderer.render(_root(blocks))
        assert result.startswith("<body>")
        assert result.endswith("</body>")

    @given(blocks=st.lists(st.one_of(supported_blocks, discarded_blocks), max_size=4))
    @settings(max_examples=50)
    def test_decode_of_encoding_is_identity(self, blocks: list[Node]) -> None:
        root = _root(blocks)
        assert from_json(to_json(root)) == root
