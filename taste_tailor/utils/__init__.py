"""Utility helpers."""

from .images import detect_mime_type, to_data_uri
from .text import clean_label, join_list, strip_code_fences

__all__ = [
    "detect_mime_type",
    "to_data_uri",
    "clean_label",
    "join_list",
    "strip_code_fences",
]
