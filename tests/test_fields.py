import pytest

from detection import classify_cell
from dto.cell_data import Cell, DataType
from dto.fields import FieldCandidate
from errors import CoordinateError
from extractors.fields import (
    calculate_confidence,
    generate_field_candidates,
    generate_field_name,
    generate_suggestions,
)
from extractors.workbook import coordinate_to_reference


def _cell(text, row, column):
    return classify_cell(
        Cell(row=row, column=column, raw_text=text),
        coordinate_to_reference(column, row),
    )


class TestGenerateFieldName:
    @pytest.mark.parametrize(
        "display, expected",
        [
            ("Vendor Name:", "vendor_name"),
            ("Invoice Number:", "invoice_number"),
            ("Invoice #", "invoice"),
            ("Unit Price (USD)", "unit_price_usd"),
            ("Ship-To Address", "ship_to_address"),
            ("Total & Tax", "total__tax"),
        ],
    )
    def test_names(self, display, expected):
        assert generate_field_name(display) == expected

    def test_leading_digit_gets_prefix(self):
        name = generate_field_name("2nd Item")
        assert name.startswith("field_")
        assert name == "field_2nd_item"

    def test_nothing_left(self):
        assert generate_field_name("#:") == ""


class TestCalculateConfidence:
    def test_top_rows_with_keywords(self):
        assert calculate_confidence(_cell("Vendor Name:", 1, 1)) == pytest.approx(1.0)

    def test_early_rows_with_keywords(self):
        assert calculate_confidence(_cell("Total Amount:", 4, 1)) == pytest.approx(0.8)

    def test_later_rows_without_keywords(self):
        assert calculate_confidence(_cell("ID", 6, 1)) == pytest.approx(0.5)

    def test_bounds(self):
        for row in range(1, 7):
            for text in ("ID", "Customer"):
                score = calculate_confidence(_cell(text, row, 1))
                assert 0.5 <= score <= 1.0


class TestGenerateFieldCandidates:
    def test_header_candidates(self):
        headers = [_cell("Vendor Name:", 1, 1), _cell("Invoice Number:", 2, 1)]
        candidates = generate_field_candidates(headers, [])
        assert [c.field_name for c in candidates] == ["vendor_name", "invoice_number"]
        assert candidates[0].display_name == "Vendor Name:"
        assert candidates[0].source_cell == "A1"
        assert candidates[0].keywords == ["vendor", "name"]
        assert not any(c.inferred for c in candidates)

    def test_inferred_column_candidate(self):
        data = [_cell(v, r, 3) for r, v in enumerate(["10", "20", "n/a"], start=8)]
        candidates = generate_field_candidates([], data)
        assert len(candidates) == 1
        inferred = candidates[0]
        assert inferred.field_name == "column_c1_number"
        assert inferred.display_name == "Column C1 (Number)"
        assert inferred.source_cell == "C1"
        assert inferred.data_type == DataType.NUMBER
        assert inferred.keywords == ["number", "column", "c1"]
        assert inferred.confidence == 0.6
        assert inferred.inferred is True

    def test_columns_with_two_cells_are_ignored(self):
        data = [_cell("10", 8, 1), _cell("20", 9, 1)]
        assert generate_field_candidates([], data) == []

    def test_no_dominant_type(self):
        data = [_cell("10", 8, 1), _cell("jane@x.com", 9, 1), _cell("Widget", 10, 1)]
        assert generate_field_candidates([], data) == []

    def test_dominant_type_tie_keeps_first_seen(self):
        values = ["Widget", "10", "Gadget", "20"]
        data = [_cell(v, r, 2) for r, v in enumerate(values, start=8)]
        candidates = generate_field_candidates([], data)
        assert candidates[0].field_name == "column_b1_text"

    def test_headers_come_before_inferred(self):
        headers = [_cell("Amount", 1, 1)]
        data = [_cell(v, r, 1) for r, v in enumerate(["1", "2", "3"], start=8)]
        candidates = generate_field_candidates(headers, data)
        assert [c.inferred for c in candidates] == [False, True]

    def test_column_without_reference_is_skipped(self, monkeypatch):
        data = [_cell(v, r, c) for c in (1, 3) for r, v in enumerate(["1", "2", "3"], start=8)]

        def reference(column, row):
            if column == 3:
                raise CoordinateError(column, row)
            return coordinate_to_reference(column, row)

        monkeypatch.setattr("extractors.fields.coordinate_to_reference", reference)
        candidates = generate_field_candidates([], data)
        assert [c.field_name for c in candidates] == ["column_a1_number"]


class TestGenerateSuggestions:
    def _candidate(self, name, cell):
        return FieldCandidate(
            field_name=name,
            display_name=name,
            source_cell=cell,
            data_type=DataType.TEXT,
            confidence=0.5,
        )

    def test_last_writer_wins(self):
        candidates = [
            self._candidate("total", "A1"),
            self._candidate("date", "A2"),
            self._candidate("total", "D9"),
        ]
        assert generate_suggestions(candidates) == {"total": "D9", "date": "A2"}

    def test_empty_names_are_skipped(self):
        assert generate_suggestions([self._candidate("", "A1")]) == {}
