"""Result Buffer - 엑셀 내보내기 대기 행 저장소

프로세스 수명 동안만 유지되는 메모리 저장소입니다 (영속 저장 없음).
"""
import threading
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from geoshop.core.exceptions import ValidationException
from geoshop.core.logging import get_component_logger
from geoshop.schemas.shopping_schema import BufferRecord

logger = get_component_logger("BUFFER")


RecordInput = Union[BufferRecord, Mapping[str, Any]]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601, 밀리초, Z 접미사 (예: 2025-01-01T12:00:00.000Z)"""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ResultBuffer:
    """추가 전용 행 버퍼

    - append/extend/clear 만 상태를 변경하며, 하나의 잠금으로 직렬화됩니다.
    - extend 는 전부 검증한 뒤 한 번에 추가합니다 (부분 추가 상태는 보이지 않음).
    - 저장된 BufferRecord 는 불변입니다.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._records: List[BufferRecord] = []
        self._lock = threading.Lock()
        self._clock = clock or utc_now

    def _coerce(self, record: RecordInput, index: Optional[int] = None) -> BufferRecord:
        field = "record" if index is None else f"products[{index}]"
        if isinstance(record, BufferRecord):
            return record
        if not isinstance(record, Mapping):
            raise ValidationException(field, "must be an object")
        try:
            return BufferRecord.model_validate(dict(record))
        except ValidationError as e:
            raise ValidationException(field, f"invalid record: {e.error_count()} error(s)") from e

    def append(self, record: RecordInput) -> int:
        """단일 행 추가

        Returns:
            추가 후 전체 행 수
        """
        return self._commit([self._coerce(record)])

    def extend(self, records: Iterable[RecordInput]) -> int:
        """여러 행 추가 (입력 순서 유지, 전부 아니면 전무)"""
        coerced = [self._coerce(record, index) for index, record in enumerate(records)]
        return self._commit(coerced)

    def extend_item(self, item: Any, market_code: str, translated_query: Optional[str]) -> Tuple[int, int]:
        """검색 결과 상품 하나를 판매처별 행으로 펼쳐 추가

        Returns:
            (추가된 행 수, 추가 후 전체 행 수)
        """
        if not isinstance(item, Mapping):
            raise ValidationException("item", "must be an object")
        try:
            rows = BufferRecord.rows_from_item(dict(item), market_code, translated_query or "")
        except ValidationError as e:
            raise ValidationException("item", f"invalid item: {e.error_count()} error(s)") from e
        return len(rows), self._commit(rows)

    def _commit(self, records: List[BufferRecord]) -> int:
        with self._lock:
            saved_at = format_timestamp(self._clock())
            self._records.extend(record.stamped(saved_at) for record in records)
            total = len(self._records)
        logger.info(f"Appended {len(records)} record(s), total={total}")
        return total

    def snapshot(self) -> Tuple[BufferRecord, ...]:
        """현재 행의 읽기 전용 사본"""
        with self._lock:
            return tuple(self._records)

    def summary(self) -> List[Dict[str, Any]]:
        """상태 조회용 축약 (title, geolocation, savedAt)"""
        return [
            {"title": record.title, "geolocation": record.geolocation, "savedAt": record.saved_at}
            for record in self.snapshot()
        ]

    def clear(self) -> int:
        """모든 행 삭제

        Returns:
            삭제된 행 수
        """
        with self._lock:
            removed = len(self._records)
            self._records = []
        logger.info(f"Cleared {removed} record(s)")
        return removed

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
