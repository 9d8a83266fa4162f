"""Table, row and cell property tests"""

import pytest

from opendocx.wordml.base import NS
from opendocx.wordml.components import CellFormatter, RowFormatter, TableFormatter
from opendocx.wordml.errors import InvalidPropertyValue

W = NS["w"]


def w(local):
    return f"{{{W}}}{local}"


class TestTable:
    @pytest.fixture
    def formatter(self):
        return TableFormatter()

    def test_layout_synonym(self, formatter, parent, xpath):
        formatter.format({"layout": "auto"}, parent)
        assert xpath(parent, "w:tblPr/w:tblLayout/@w:type") == ["autofit"]

    def test_layout_invalid(self, formatter, parent):
        with pytest.raises(InvalidPropertyValue) as exc:
            formatter.format({"layout": "bogus"}, parent)
        assert exc.value.element == "table"
        assert "autofit,fixed" in str(exc.value)

    @pytest.mark.parametrize("value, expected", [
        (6, ("8640", "dxa")),
        ("50%", ("2500", "pct")),
        ("auto", ("0", "auto")),
        ({"w": 5000, "type": "pct"}, ("5000", "pct")),
    ])
    def test_width(self, formatter, parent, wattr, value, expected):
        tbl_w = formatter.format({"width": value}, parent).find(w("tblW"))
        assert (wattr(tbl_w, "w"), wattr(tbl_w, "type")) == expected

    def test_negative_indent_allowed(self, formatter, parent, xpath):
        formatter.format({"indent": -0.25}, parent)
        assert xpath(parent, "w:tblPr/w:tblInd/@w:w") == ["-360"]

    def test_negative_width_rejected(self, formatter, parent):
        with pytest.raises(InvalidPropertyValue):
            formatter.format({"width": -1}, parent)

    def test_scalar_border(self, formatter, parent, wattr):
        borders = formatter.format({"border": 0.5}, parent).find(w("tblBorders"))
        assert [b.tag for b in borders] == [
            w("top"), w("right"), w("bottom"), w("left"), w("insideH"), w("insideV")
        ]
        assert all(wattr(b, "sz") == "4" for b in borders)

    def test_cell_margin(self, formatter, parent, xpath):
        formatter.format({"margin": 0.1}, parent)
        assert xpath(parent, "w:tblPr/w:tblCellMar/*/@w:w") == ["144"] * 4
        assert xpath(parent, "w:tblPr/w:tblCellMar/*/@w:type") == ["dxa"] * 4

    def test_look(self, formatter, parent, wattr):
        look = formatter.format({"look": {"firstRow": True, "noVBand": 1, "fancy": 1}}, parent).find(w("tblLook"))
        assert wattr(look, "firstRow") == "1"
        assert wattr(look, "noVBand") == "1"
        assert wattr(look, "fancy") is None

    def test_position(self, formatter, parent, wattr):
        pos = formatter.format({"position": {"tblpX": 1, "horzAnchor": "page"}}, parent).find(w("tblpPr"))
        assert wattr(pos, "tblpX") == "1440"
        assert wattr(pos, "horzAnchor") == "page"

    def test_alignment(self, formatter, parent, xpath):
        formatter.format({"align": "center"}, parent)
        assert xpath(parent, "w:tblPr/w:jc/@w:val") == ["center"]


class TestRow:
    @pytest.fixture
    def formatter(self):
        return RowFormatter()

    def test_height_at_least(self, formatter, parent, wattr):
        height = formatter.format({"height": 0.5}, parent).find(w("trHeight"))
        assert wattr(height, "val") == "720"
        assert wattr(height, "hRule") == "atLeast"

    def test_exact_height(self, formatter, parent, xpath):
        formatter.format({"height": {"val": 0.25, "hRule": "exact"}}, parent)
        assert xpath(parent, "w:trPr/w:trHeight/@w:hRule") == ["exact"]

    def test_header_and_skips(self, formatter, parent, xpath):
        formatter.format({"header": True, "skipBefore": 2}, parent)
        assert len(xpath(parent, "w:trPr/w:tblHeader")) == 1
        assert xpath(parent, "w:trPr/w:gridBefore/@w:val") == ["2"]

    def test_invalid_attributed_to_row(self, formatter, parent):
        with pytest.raises(InvalidPropertyValue) as exc:
            formatter.format({"skipAfter": "some"}, parent)
        assert exc.value.element == "row"


class TestCell:
    @pytest.fixture
    def formatter(self):
        return CellFormatter()

    def test_span(self, formatter, parent, xpath):
        formatter.format({"colspan": 2}, parent)
        assert xpath(parent, "w:tcPr/w:gridSpan/@w:val") == ["2"]

    def test_vmerge(self, formatter, parent, xpath):
        formatter.format({"merge": True}, parent)
        assert xpath(parent, "w:tcPr/w:vMerge/@w:val") == ["continue"]

    def test_vmerge_restart(self, formatter, parent, xpath):
        formatter.format({"merge": "restart"}, parent)
        assert xpath(parent, "w:tcPr/w:vMerge/@w:val") == ["restart"]

    def test_valign(self, formatter, parent, xpath):
        formatter.format({"valign": "center"}, parent)
        assert xpath(parent, "w:tcPr/w:vAlign/@w:val") == ["center"]
        with pytest.raises(InvalidPropertyValue):
            formatter.format({"valign": "baseline"}, parent)

    def test_scalar_border(self, formatter, parent):
        borders = formatter.format({"border": 1}, parent).find(w("tcBorders"))
        assert [b.tag for b in borders] == [
            w("top"), w("left"), w("bottom"), w("right"), w("insideH"), w("insideV")
        ]

    def test_diagonal_border(self, formatter, parent, xpath):
        formatter.format({"border": {"tl2br": {"sz": 0.5}}}, parent)
        assert xpath(parent, "w:tcPr/w:tcBorders/w:tl2br/@w:sz") == ["4"]

    def test_width(self, formatter, parent, xpath):
        formatter.format({"width": 1.5, "shading": "auto"}, parent)
        assert xpath(parent, "w:tcPr/w:tcW/@w:w") == ["2160"]
        assert xpath(parent, "w:tcPr/w:shd/@w:fill") == ["auto"]
