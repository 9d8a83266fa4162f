"""Property registry tests"""

import pytest

from opendocx.wordml.components import (
    CellFormatter,
    ParagraphFormatter,
    RowFormatter,
    RunFormatter,
    TableFormatter,
)
from opendocx.wordml.properties import (
    ELEMENT_KINDS,
    ValueKind,
    effective_aliases,
    effective_map,
    lookup_kind,
    resolve_alias,
)


class TestAliases:
    def test_shared_aliases(self):
        for kind in ELEMENT_KINDS:
            assert resolve_alias(kind, "align") == "jc"
            assert resolve_alias(kind, "justify") == "jc"
            assert resolve_alias(kind, "shading") == "shd"

    def test_kind_specific_alias_wins(self):
        assert resolve_alias("paragraph", "style") == "pStyle"
        assert resolve_alias("run", "style") == "rStyle"
        assert resolve_alias("table", "style") == "tblStyle"
        assert resolve_alias("paragraph", "border") == "pBdr"
        assert resolve_alias("cell", "border") == "tcBorders"

    def test_row_aliases(self):
        assert resolve_alias("row", "skipBefore") == "gridBefore"
        assert resolve_alias("row", "skipAfter") == "gridAfter"
        assert resolve_alias("row", "header") == "tblHeader"

    def test_unknown_passes_through(self):
        assert resolve_alias("run", "sparkle") == "sparkle"

    def test_aliases_single_hop(self):
        # canonical names never alias again
        for kind in ELEMENT_KINDS:
            aliases = effective_aliases(kind)
            for canonical in aliases.values():
                assert aliases.get(canonical, canonical) == canonical


class TestLookup:
    def test_kinds(self):
        assert lookup_kind("paragraph", "ind") == ValueKind.INDENT
        assert lookup_kind("run", "sz") == ValueKind.SIZE
        assert lookup_kind("table", "tblLayout") == ValueKind.LAYOUT
        assert lookup_kind("cell", "vMerge") == ValueKind.VMERGE

    def test_shared_shading(self):
        for kind in ELEMENT_KINDS:
            assert lookup_kind(kind, "shd") == ValueKind.SHADING

    def test_unknown_is_none(self):
        assert lookup_kind("paragraph", "sparkle") is None
        assert lookup_kind("row", "vMerge") is None

    def test_map_is_read_only(self):
        with pytest.raises(TypeError):
            effective_map("paragraph")["sparkle"] = ValueKind.BOOL


@pytest.mark.parametrize(
    "formatter",
    [ParagraphFormatter(), RunFormatter(), TableFormatter(), RowFormatter(), CellFormatter()],
)
def test_every_mapped_property_has_handler(formatter):
    for canonical in effective_map(formatter.element_kind):
        assert formatter.handler_for(canonical) is not None


@pytest.mark.parametrize(
    "formatter",
    [ParagraphFormatter(), RunFormatter(), TableFormatter(), RowFormatter(), CellFormatter()],
)
def test_unknown_property_omitted(formatter):
    from lxml import etree

    from opendocx.wordml.base import NS

    parent = etree.Element(f"{{{NS['w']}}}p")
    assert formatter.format({"sparkle": 1}, parent) is None
    assert len(parent) == 0

    known = next(c for c, kind in effective_map(formatter.element_kind).items() if kind == ValueKind.BOOL)
    container = formatter.format({"sparkle": 1, known: True}, parent)
    assert [c.tag for c in container] == [f"{{{NS['w']}}}{known}"]


def test_unknown_element_kind():
    with pytest.raises(KeyError):
        effective_map("footnote")
    with pytest.raises(KeyError):
        resolve_alias("footnote", "align")


@pytest.mark.parametrize(
    "formatter",
    [ParagraphFormatter(), RunFormatter(), TableFormatter(), RowFormatter(), CellFormatter()],
)
@pytest.mark.parametrize("value, expected", [
    (True, "on"), (1, "on"), ("yes", "on"),
    (False, "off"), (0, "off"), ("false", "off"), ("", "off"),
])
def test_bool_properties_reparse(formatter, value, expected):
    from lxml import etree

    from opendocx.wordml.base import NS, on_off

    for canonical, kind in effective_map(formatter.element_kind).items():
        if kind != ValueKind.BOOL:
            continue
        parent = etree.Element(f"{{{NS['w']}}}p")
        formatter.format({canonical: value}, parent)
        node = etree.fromstring(etree.tostring(parent))[0][0]
        # an element without w:val is on
        assert on_off(node.get(f"{{{NS['w']}}}val", "on")) == expected
