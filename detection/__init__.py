"""
Per-cell heuristics.

Each cell is run through:
  1. detect_fillable: placeholder syntax ([[x]], [X], {{x}}, {X}, <X>)
  2. detect_data_type: currency / number / date / email / phone / text
  3. is_likely_header: label-like text in the top rows
  4. extract_keywords: significant lowercase words

``classify_cell`` bundles all four into a ClassifiedCell.
"""

from detection.classifier import classify_cell
from detection.data_type import detect_data_type
from detection.header import is_likely_header
from detection.keywords import extract_keywords
from detection.placeholder import detect_fillable

__all__ = [
    "classify_cell",
    "detect_data_type",
    "detect_fillable",
    "extract_keywords",
    "is_likely_header",
]
