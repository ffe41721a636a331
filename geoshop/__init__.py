"""다국가 쇼핑 검색 서비스"""

__version__ = "1.0.0"
