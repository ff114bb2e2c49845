"""
Spreadsheet template analyzer: library entry point and CLI.

Usage:
    python analyzer.py <excel_file> [--output <report.json>]

Loads a workbook, picks the sheet with the most data, classifies its cells
(headers, data, fillable placeholders), measures the table shape and
proposes confidence-scored template fields.  The result is written as a
single JSON report.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Dict, List

import dotenv

from detection import classify_cell
from dto.cell_data import Cell, ClassifiedCell
from dto.output import AnalysisReport
from dto.structure import DataStructure
from errors import AnalysisError, CoordinateError, NoSheetsError
from extractors.fields import generate_field_candidates, generate_suggestions
from extractors.fillable import extract_fillable_fields
from extractors.sheet import select_sheet, summarize_sheets
from extractors.table import (
    analyze_table_structure,
    find_data_start_row,
    find_likely_header_row,
    has_merged_cells,
)
from extractors.workbook import Document, coordinate_to_reference, open_document
from utils.sampling import analysis_column_limit, find_max_columns, sample_rows

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Main pipeline
# -------------------------------------------------------------------


def _classify_rows(
    rows: List[List[str]],
    row_mapping: List[int],
    column_limit: int,
) -> List[ClassifiedCell]:
    """Classify every non-blank cell of the sampled rows, in row-major order."""
    classified: List[ClassifiedCell] = []
    for sample_index, row in enumerate(rows):
        original_row = row_mapping[sample_index] + 1
        for col_index, raw in enumerate(row[:column_limit]):
            text = raw.strip()
            if not text:
                continue

            column = col_index + 1
            try:
                reference = coordinate_to_reference(column, original_row)
            except CoordinateError:
                logger.debug("Skipping cell at row %d, column %d", original_row, column)
                continue

            cell = Cell(row=original_row, column=column, raw_text=text)
            classified.append(classify_cell(cell, reference))
    return classified


def analyze_document(document: Document, file_name: str = "") -> AnalysisReport:
    """
    Analyse an already-open document and return its ``AnalysisReport``.

    Raises ``NoSheetsError`` if the document has no sheets.
    """
    sheet_names = document.sheet_names()
    if not sheet_names:
        raise NoSheetsError(file_name)

    sheet_summaries = summarize_sheets(document)
    sheet_name, rows = select_sheet(document)

    sampled_rows, row_mapping = sample_rows(rows)
    max_columns = find_max_columns(sampled_rows)
    column_limit = analysis_column_limit(sampled_rows)

    classified = _classify_rows(sampled_rows, row_mapping, column_limit)

    # Fillable cells are data even when they also look like headers.
    header_candidates: List[ClassifiedCell] = []
    data_cells: List[ClassifiedCell] = []
    for cell in classified:
        if cell.fillable is None and cell.is_header:
            header_candidates.append(cell)
        else:
            data_cells.append(cell)

    cell_data: Dict[str, str] = {c.cell: c.raw_text for c in classified}

    field_candidates = generate_field_candidates(header_candidates, data_cells)
    fillable_fields = extract_fillable_fields(classified)

    data_structure = DataStructure(
        likely_header_row=find_likely_header_row(rows),
        data_start_row=find_data_start_row(rows),
        has_merged_cells=has_merged_cells(document, sheet_name),
        table_structure=analyze_table_structure(rows),
    )

    logger.info(
        "  -> %d header candidate(s), %d data cell(s), %d field candidate(s), "
        "%d fillable field(s)",
        len(header_candidates),
        len(data_cells),
        len(field_candidates),
        fillable_fields.total_count,
    )

    return AnalysisReport(
        file_name=file_name,
        sheet_names=sheet_names,
        active_sheet=sheet_name,
        sheets=sheet_summaries,
        row_count=len(rows),
        column_count=max_columns,
        analyzed_row_count=len(sampled_rows),
        analyzed_column_count=column_limit,
        cell_data=cell_data,
        header_candidates=header_candidates,
        data_cells=data_cells,
        field_candidates=field_candidates,
        fillable_fields=fillable_fields,
        suggestions=generate_suggestions(field_candidates),
        data_structure=data_structure,
    )


def analyze(file_path: str) -> AnalysisReport:
    """
    Analyse the workbook at *file_path*.

    Raises ``DocumentOpenError`` or ``NoSheetsError``; no partial report is
    ever returned.
    """
    with open_document(file_path) as document:
        return analyze_document(document, file_name=Path(file_path).name)


# -------------------------------------------------------------------
# CLI
# -------------------------------------------------------------------


def _log_level() -> int:
    """``LOG_LEVEL`` as a logging level; unknown names fall back to INFO."""
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").strip().upper())
    if not isinstance(level, int):
        return logging.INFO
    return level


def main() -> None:
    dotenv.load_dotenv()

    logging.basicConfig(
        level=_log_level(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )

    parser = argparse.ArgumentParser(
        description="Analyse an Excel template and propose fillable fields.",
    )
    parser.add_argument(
        "excel_file",
        help="Path to the .xlsx file to analyse",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output JSON file path (default: <input_name>_analysis.json)",
    )
    args = parser.parse_args()

    excel_path = args.excel_file
    if not os.path.isfile(excel_path):
        logger.error("File not found: %s", excel_path)
        sys.exit(1)

    output_path = args.output or f"{Path(excel_path).stem}_analysis.json"

    try:
        report = analyze(excel_path)
    except AnalysisError as exc:
        logger.error("Analysis failed: %s", exc)
        sys.exit(1)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(report.model_dump_json(indent=2))

    logger.info("Report written to %s", output_path)


if __name__ == "__main__":
    main()
