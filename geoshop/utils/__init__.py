"""Utilities package"""

from .resource_loader import load_translation_table, load_yaml_resource
from .text_utils import normalize_lookup_key, strip_wrapping_quotes

__all__ = [
    "load_translation_table",
    "load_yaml_resource",
    "normalize_lookup_key",
    "strip_wrapping_quotes",
]
