"""
Jinja2 filters for integrity zome generation.

The per-entry formatters below produce the individual declarations of the
generated ``lib.rs``; ``merge_strings`` joins them into fragments.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from zome_scaffold_generator.utils.string_case import snake_case, title_case

REQUIRED_VALIDATIONS: Final = 5

_VARIANT_INDENT: Final = "    "


def merge_strings(strings: Iterable[str], separator: str = "\n") -> str:
    """Join generated fragments, one per line by default.

    Example:
        >>> merge_strings(["mod a;", "mod b;"])
        'mod a;\\nmod b;'
    """
    return separator.join(strings)


def mod_declaration(entry_type_name: str) -> str:
    """Declare the sub-module holding an entry type.

    Example:
        >>> mod_declaration("my thing")
        'mod my_thing;'
    """
    return f"mod {snake_case(entry_type_name)};"


def use_declaration(entry_type_name: str) -> str:
    """Import an entry type from its sub-module.

    Example:
        >>> use_declaration("my thing")
        'use my_thing::MyThing;'
    """
    return f"use {snake_case(entry_type_name)}::{title_case(entry_type_name)};"


def entry_variant(entry_type_name: str) -> str:
    """Declare the ``EntryTypes`` variant carrying an entry type."""
    type_name = title_case(entry_type_name)
    return (
        f"{_VARIANT_INDENT}#[entry_def(required_validations = {REQUIRED_VALIDATIONS})]\n"
        f"{_VARIANT_INDENT}{type_name}({type_name}),"
    )


# Register filters that will be available in Jinja templates
FILTERS = {
    "title_case": title_case,
}
