"""Utility helpers for dependency resolution."""

from .paths import find_on_search_path, is_within, join_path, path_from_url
from .properties_file import PropertiesFormatError, load_properties, parse_properties

__all__ = [
    "PropertiesFormatError",
    "find_on_search_path",
    "is_within",
    "join_path",
    "load_properties",
    "parse_properties",
    "path_from_url",
]
