"""Services implementation package."""

from .excel_exporter import EXPORT_COLUMNS, ExcelExporter, ExportColumn, ExportedWorkbook
from .result_buffer import ResultBuffer

__all__ = ["EXPORT_COLUMNS", "ExcelExporter", "ExportColumn", "ExportedWorkbook", "ResultBuffer"]
