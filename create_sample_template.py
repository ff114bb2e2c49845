"""
Write a small invoice template workbook with [CAPS_ID] placeholders.

Usage:
    python create_sample_template.py [--output sample_template.xlsx]

Handy for trying the analyzer end to end.
"""

from __future__ import annotations

import argparse
import logging

from openpyxl import Workbook

logger = logging.getLogger(__name__)

SHEET_NAME = "Invoice"

_HEADER_FIELDS = [
    ("Vendor Name:", "[VENDOR_NAME]"),
    ("Invoice Number:", "[INVOICE_NUMBER]"),
    ("Invoice Date:", "[INVOICE_DATE]"),
    ("Total Amount:", "[TOTAL_AMOUNT]"),
]

_LINE_ITEM_HEADINGS = ["Description", "Quantity", "Unit Price", "Total"]
_LINE_ITEM_PLACEHOLDERS = [
    "[LINE_ITEM_1_DESC]",
    "[LINE_ITEM_1_QTY]",
    "[LINE_ITEM_1_PRICE]",
    "[LINE_ITEM_1_TOTAL]",
]


def build_sample_workbook() -> Workbook:
    wb = Workbook()
    ws = wb.active
    ws.title = SHEET_NAME

    for row, (label, placeholder) in enumerate(_HEADER_FIELDS, start=1):
        ws.cell(row=row, column=1, value=label)
        ws.cell(row=row, column=2, value=placeholder)

    # Row 5 is left blank between the header block and the line items.
    for col, heading in enumerate(_LINE_ITEM_HEADINGS, start=1):
        ws.cell(row=6, column=col, value=heading)
    for col, placeholder in enumerate(_LINE_ITEM_PLACEHOLDERS, start=1):
        ws.cell(row=7, column=col, value=placeholder)

    return wb


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )
    parser = argparse.ArgumentParser(description="Write a sample invoice template.")
    parser.add_argument(
        "-o",
        "--output",
        default="sample_template.xlsx",
        help="Output .xlsx path (default: sample_template.xlsx)",
    )
    args = parser.parse_args()

    build_sample_workbook().save(args.output)
    logger.info("Sample template written to %s", args.output)


if __name__ == "__main__":
    main()
