"""비즈니스 로직 서비스 - export only."""

from .container import ServiceContainer, build_services
from .impl import ExcelExporter, ResultBuffer

__all__ = ["ExcelExporter", "ResultBuffer", "ServiceContainer", "build_services"]
