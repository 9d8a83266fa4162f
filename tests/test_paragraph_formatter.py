"""Paragraph property tests"""

import copy

import pytest

from opendocx.wordml.base import NS
from opendocx.wordml.coercers import ALIGN_VALUES
from opendocx.wordml.components import ParagraphFormatter
from opendocx.wordml.errors import InvalidPropertyValue

W = NS["w"]


def w(local):
    return f"{{{W}}}{local}"


@pytest.fixture
def formatter():
    return ParagraphFormatter()


class TestAlignment:
    def test_justify_is_both(self, formatter, parent, wattr):
        ppr = formatter.format({"align": "justify"}, parent)
        assert ppr.tag == w("pPr")
        assert wattr(ppr.find(w("jc")), "val") == "both"

    def test_same_as_canonical(self, formatter, parent, xpath):
        other = copy.deepcopy(parent)
        formatter.format({"align": "justify"}, parent)
        formatter.format({"jc": "both"}, other)
        assert xpath(parent, "w:pPr/w:jc/@w:val") == xpath(other, "w:pPr/w:jc/@w:val")

    def test_invalid_alignment(self, formatter, parent):
        with pytest.raises(InvalidPropertyValue) as exc:
            formatter.format({"align": "left-ish"}, parent)
        assert exc.value.element == "paragraph"
        assert exc.value.name == "jc"
        assert ",".join(ALIGN_VALUES) in str(exc.value)


class TestBorders:
    def test_scalar_border_every_side(self, formatter, parent, wattr):
        ppr = formatter.format({"border": 1.5}, parent)
        sides = list(ppr.find(w("pBdr")))
        assert [s.tag for s in sides] == [
            w("top"), w("right"), w("bottom"), w("left"), w("between"), w("bar")
        ]
        for side in sides:
            assert wattr(side, "val") == "single"
            assert wattr(side, "sz") == "12"

    def test_val_written_first(self, formatter, parent):
        ppr = formatter.format({"border": {"top": {"sz": 1}}}, parent)
        top = ppr.find(f"{w('pBdr')}/{w('top')}")
        assert list(top.attrib) == [w("val"), w("sz")]

    def test_side_mapping(self, formatter, parent, wattr):
        ppr = formatter.format(
            {"border": {"bottom": {"sz": 1, "color": "#00ff00"}, "diagonal": 1}},
            parent,
        )
        sides = list(ppr.find(w("pBdr")))
        assert len(sides) == 1
        assert sides[0].tag == w("bottom")
        assert wattr(sides[0], "sz") == "8"
        assert wattr(sides[0], "color") == "00FF00"

    def test_border_attrs(self, formatter, parent, wattr):
        ppr = formatter.format(
            {"border": {"top": {"val": "double", "space": 4, "shadow": True, "glow": 1}}},
            parent,
        )
        top = ppr.find(f"{w('pBdr')}/{w('top')}")
        assert wattr(top, "val") == "double"
        assert wattr(top, "space") == "4"
        assert wattr(top, "shadow") == "on"
        assert wattr(top, "glow") is None

    def test_bad_border_width(self, formatter, parent):
        with pytest.raises(InvalidPropertyValue) as exc:
            formatter.format({"border": {"top": {"sz": "thick"}}}, parent)
        assert exc.value.name == "pBdr.top.sz"
        assert exc.value.element == "paragraph"

    def test_unrecognized_sides_leave_no_border(self, formatter, parent):
        assert formatter.format({"border": {"diagonal": 2}}, parent) is None
        assert len(parent) == 0

    def test_unrecognized_sides_keep_other_properties(self, formatter, parent):
        ppr = formatter.format({"border": {"glow": 2}, "keepNext": True}, parent)
        assert [c.tag for c in ppr] == [w("keepNext")]


class TestUnknown:
    def test_unknown_skipped(self, formatter, parent):
        ppr = formatter.format({"sparkle": 1, "keepNext": True}, parent)
        assert [c.tag for c in ppr] == [w("keepNext")]

    def test_only_unknown_leaves_no_container(self, formatter, parent):
        assert formatter.format({"sparkle": 1}, parent) is None
        assert len(parent) == 0

    def test_empty(self, formatter, parent):
        assert formatter.format(None, parent) is None
        assert formatter.format({}, parent) is None
        assert len(parent) == 0


class TestFailure:
    def test_invalid_value_leaves_parent_untouched(self, formatter, parent):
        with pytest.raises(InvalidPropertyValue):
            formatter.format({"keepNext": True, "align": "left-ish"}, parent)
        assert len(parent) == 0

    def test_existing_children_kept(self, formatter, parent):
        formatter.format({"keepNext": True}, parent)
        with pytest.raises(InvalidPropertyValue):
            formatter.format({"keepLines": True, "indent": {"left": "far"}}, parent)
        assert [c.tag for c in parent] == [w("pPr")]
        assert [c.tag for c in parent[0]] == [w("keepNext")]


class TestValues:
    def test_bool(self, formatter, parent, wattr):
        ppr = formatter.format({"keepNext": True, "keepLines": "false"}, parent)
        assert wattr(ppr.find(w("keepNext")), "val") is None
        assert wattr(ppr.find(w("keepLines")), "val") == "off"

    def test_property_order_kept(self, formatter, parent):
        ppr = formatter.format({"widowControl": True, "style": "Body", "keepNext": True}, parent)
        assert [c.tag for c in ppr] == [w("widowControl"), w("pStyle"), w("keepNext")]

    def test_scalar_indent(self, formatter, parent, wattr):
        ind = formatter.format({"indent": 0.5}, parent).find(w("ind"))
        assert wattr(ind, "left") == "720"
        assert wattr(ind, "right") == "720"

    def test_indent_mapping(self, formatter, parent, wattr):
        ind = formatter.format({"indent": {"left": -0.5, "hanging": 0.25, "middle": 1}}, parent).find(w("ind"))
        assert wattr(ind, "left") == "-720"
        assert wattr(ind, "hanging") == "360"
        assert wattr(ind, "middle") is None

    def test_scalar_spacing_is_line_multiple(self, formatter, parent, wattr):
        spacing = formatter.format({"spacing": 1.5}, parent).find(w("spacing"))
        assert wattr(spacing, "line") == "360"
        assert wattr(spacing, "lineRule") == "auto"

    def test_spacing_points(self, formatter, parent, wattr):
        spacing = formatter.format({"spacing": {"before": 12, "after": 6}}, parent).find(w("spacing"))
        assert wattr(spacing, "before") == "240"
        assert wattr(spacing, "after") == "120"

    def test_exact_line_in_points(self, formatter, parent, wattr):
        spacing = formatter.format({"spacing": {"line": 14, "lineRule": "exact"}}, parent).find(w("spacing"))
        assert wattr(spacing, "line") == "280"
        assert wattr(spacing, "lineRule") == "exact"

    def test_bad_line_rule(self, formatter, parent):
        with pytest.raises(InvalidPropertyValue):
            formatter.format({"spacing": {"line": 1, "lineRule": "loose"}}, parent)

    def test_tabs(self, formatter, parent, xpath):
        formatter.format({"tabs": [{"pos": 1, "val": "right", "leader": "dot"}, 2]}, parent)
        assert xpath(parent, "w:pPr/w:tabs/w:tab/@w:val") == ["right", "left"]
        assert xpath(parent, "w:pPr/w:tabs/w:tab/@w:pos") == ["1440", "2880"]
        assert xpath(parent, "w:pPr/w:tabs/w:tab/@w:leader") == ["dot"]

    def test_numbering(self, formatter, parent, xpath):
        formatter.format({"numbering": {"numId": 3, "ilvl": 1}}, parent)
        assert xpath(parent, "w:pPr/w:numPr/w:ilvl/@w:val") == ["1"]
        assert xpath(parent, "w:pPr/w:numPr/w:numId/@w:val") == ["3"]

    def test_numbering_requires_id(self, formatter, parent):
        with pytest.raises(InvalidPropertyValue):
            formatter.format({"numbering": {"ilvl": 1}}, parent)

    def test_paragraph_mark_run(self, formatter, parent, xpath):
        formatter.format({"run": {"bold": True, "size": 14}}, parent)
        assert len(xpath(parent, "w:pPr/w:rPr/w:b")) == 1
        assert xpath(parent, "w:pPr/w:rPr/w:sz/@w:val") == ["28"]

    def test_shading_scalar_is_fill(self, formatter, parent, wattr):
        shd = formatter.format({"shading": "#ffff00"}, parent).find(w("shd"))
        assert wattr(shd, "val") == "clear"
        assert wattr(shd, "fill") == "FFFF00"

    def test_text_alignment(self, formatter, parent, xpath):
        formatter.format({"valign": "baseline"}, parent)
        assert xpath(parent, "w:pPr/w:textAlignment/@w:val") == ["baseline"]

    def test_text_direction_synonym(self, formatter, parent, xpath):
        formatter.format({"textDirection": "vertical"}, parent)
        assert xpath(parent, "w:pPr/w:textDirection/@w:val") == ["tbRl"]

    def test_outline_level(self, formatter, parent, xpath):
        formatter.format({"outline": 2}, parent)
        assert xpath(parent, "w:pPr/w:outlineLvl/@w:val") == ["2"]

    def test_first_error_aborts(self, formatter, parent):
        with pytest.raises(InvalidPropertyValue) as exc:
            formatter.format({"keepNext": True, "indent": "wide", "align": "bogus"}, parent)
        assert exc.value.name == "ind.left"
