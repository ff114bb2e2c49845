"""
Error kinds raised by the analysis pipeline.

Fatal (abort the whole analysis, no partial report):
  - DocumentOpenError: file missing / corrupt / unsupported
  - NoSheetsError: the workbook has zero sheets

Recoverable (caught by the loop that owns them):
  - SheetReadError: one sheet's rows cannot be read; the sheet is skipped
  - CoordinateError: a row/column pair has no A1 reference; the cell is skipped
"""


class AnalysisError(Exception):
    """Base class for every error raised by the analyzer."""


class DocumentOpenError(AnalysisError):
    def __init__(self, path: str, reason: str = ""):
        self.path = path
        message = f"Cannot open spreadsheet file: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class NoSheetsError(AnalysisError):
    def __init__(self, path: str = ""):
        self.path = path
        super().__init__(f"Spreadsheet has no sheets: {path}" if path else "Spreadsheet has no sheets")


class SheetReadError(AnalysisError):
    def __init__(self, sheet_name: str, reason: str = ""):
        self.sheet_name = sheet_name
        message = f"Cannot read rows of sheet '{sheet_name}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class CoordinateError(AnalysisError, ValueError):
    def __init__(self, column: int, row: int):
        self.column = column
        self.row = row
        super().__init__(f"Invalid cell coordinates: column={column}, row={row}")
