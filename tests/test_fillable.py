from detection import classify_cell
from dto.cell_data import Cell, PatternType
from extractors.fillable import extract_fillable_fields


def _cell(text, row, column, ref):
    return classify_cell(Cell(row=row, column=column, raw_text=text), ref)


class TestExtractFillableFields:
    def test_inventory(self):
        cells = [
            _cell("Vendor Name:", 1, 1, "A1"),
            _cell("[VENDOR_NAME]", 1, 2, "B1"),
            _cell("{{due date}}", 2, 2, "B2"),
            _cell("[TOTAL]", 3, 2, "B3"),
        ]
        inventory = extract_fillable_fields(cells)

        assert inventory.total_count == 3
        assert [f.cell for f in inventory.fields] == ["B1", "B2", "B3"]
        assert inventory.patterns == {
            PatternType.SINGLE_BRACKET_CAPS: 2,
            PatternType.DOUBLE_CURLY: 1,
        }
        assert inventory.field_mapping == {
            "vendor_name": "B1",
            "due_date": "B2",
            "total": "B3",
        }
        first = inventory.fields[0]
        assert first.value == "[VENDOR_NAME]"
        assert first.placeholder_text == "VENDOR_NAME"
        assert (first.row, first.column) == (1, 2)

    def test_repeated_field_name_maps_to_last_cell(self):
        cells = [_cell("[TOTAL]", 1, 1, "A1"), _cell("<TOTAL>", 5, 4, "D5")]
        inventory = extract_fillable_fields(cells)
        assert inventory.total_count == 2
        assert inventory.field_mapping == {"total": "D5"}

    def test_no_placeholders(self):
        inventory = extract_fillable_fields([_cell("Total", 1, 1, "A1")])
        assert inventory.total_count == 0
        assert inventory.fields == []
        assert inventory.patterns == {}
