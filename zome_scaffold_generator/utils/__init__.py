"""
Utilities Module for Zome Scaffolding

Case conversion and identifier checks for entry type and field names.
"""

from .string_case import (
    NON_RAW_KEYWORDS,
    RUST_KEYWORDS,
    can_be_raw_identifier,
    escape_rust_keyword,
    is_rust_keyword,
    is_snake_case_identifier,
    is_title_case_identifier,
    snake_case,
    title_case,
)

__all__ = [
    "NON_RAW_KEYWORDS",
    "RUST_KEYWORDS",
    "can_be_raw_identifier",
    "escape_rust_keyword",
    "is_rust_keyword",
    "is_snake_case_identifier",
    "is_title_case_identifier",
    "snake_case",
    "title_case",
]
