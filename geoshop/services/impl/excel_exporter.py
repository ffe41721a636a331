"""Tabular Exporter - Result Buffer → xlsx 문서"""
import json
from dataclasses import dataclass
from datetime import datetime
from io import BytesIO
from typing import Any, Callable, Iterable, Optional, Sequence

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from geoshop.core.exceptions import ExportFailedException
from geoshop.core.logging import get_component_logger
from geoshop.schemas.shopping_schema import BufferRecord
from .result_buffer import utc_now

logger = get_component_logger("EXPORT")


XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
SHEET_TITLE = "Shopping Results"
HEADER_FILL_COLOR = "FFE0E0E0"


@dataclass(frozen=True)
class ExportColumn:
    """엑셀 컬럼 정의 (헤더, 레코드 키, 너비)"""
    header: str
    key: str
    width: int


EXPORT_COLUMNS: Sequence[ExportColumn] = (
    ExportColumn("Geolocation", "geolocation", 15),
    ExportColumn("Translated Query", "translatedQuery", 25),
    ExportColumn("Product Title", "title", 40),
    ExportColumn("Product ID", "productId", 20),
    ExportColumn("Price Range", "priceRange", 15),
    ExportColumn("Seller Count", "sellerCount", 12),
    ExportColumn("Product Link", "productLink", 50),
    ExportColumn("Seller Name", "sellerName", 30),
    ExportColumn("Seller Link", "sellerLink", 50),
    ExportColumn("Base Price", "basePrice", 12),
    ExportColumn("Shipping", "shipping", 12),
    ExportColumn("Total Price", "totalPrice", 12),
    ExportColumn("Seller Index", "sellerIndex", 10),
    ExportColumn("Saved At", "savedAt", 20),
)


@dataclass(frozen=True)
class ExportedWorkbook:
    """렌더링된 엑셀 문서"""
    content: bytes
    filename: str
    media_type: str = XLSX_MEDIA_TYPE

    @property
    def content_disposition(self) -> str:
        return f"attachment; filename={self.filename}"


def to_cell_value(value: Any) -> Any:
    """셀에 쓸 수 있는 값으로 변환 (없으면 빈 셀)"""
    if value is None:
        return None
    if isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, (dict, list, tuple)):
        value = json.dumps(value, ensure_ascii=False, default=str)
    return ILLEGAL_CHARACTERS_RE.sub("", str(value))


class ExcelExporter:
    """버퍼 스냅샷을 고정 14컬럼 시트로 렌더링"""

    def __init__(
        self,
        columns: Sequence[ExportColumn] = EXPORT_COLUMNS,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.columns = tuple(columns)
        self._clock = clock or utc_now

    def build_filename(self) -> str:
        millis = int(self._clock().timestamp() * 1000)
        return f"shopping-results-{millis}.xlsx"

    def render(self, records: Iterable[BufferRecord]) -> ExportedWorkbook:
        """xlsx 바이트 생성

        Raises:
            ExportFailedException: 렌더링 실패
        """
        try:
            workbook = Workbook()
            sheet = workbook.active
            sheet.title = SHEET_TITLE

            sheet.append([column.header for column in self.columns])

            count = 0
            for record in records:
                row = record.to_row()
                sheet.append([to_cell_value(row.get(column.key)) for column in self.columns])
                count += 1

            # "=" 로 시작하는 문자열이 수식으로 해석되지 않도록
            for row_cells in sheet.iter_rows(min_row=2):
                for cell in row_cells:
                    if cell.data_type == "f":
                        cell.data_type = "s"

            header_font = Font(bold=True)
            header_fill = PatternFill(fill_type="solid", fgColor=HEADER_FILL_COLOR)
            for cell in sheet[1]:
                cell.font = header_font
                cell.fill = header_fill

            for index, column in enumerate(self.columns, start=1):
                sheet.column_dimensions[get_column_letter(index)].width = column.width
            sheet.freeze_panes = "A2"

            stream = BytesIO()
            workbook.save(stream)
        except Exception as e:
            logger.error(f"Excel export error: {type(e).__name__}: {e}", exc_info=True)
            raise ExportFailedException(f"{type(e).__name__}: {e}") from e

        exported = ExportedWorkbook(content=stream.getvalue(), filename=self.build_filename())
        logger.info(f"Rendered {count} row(s) into {exported.filename}")
        return exported
