"""
Zome Definition Parser Module

Loads zome definitions into typed dataclasses and validates the entry type
names they carry.
"""

from .zome_parser import (
    FIELD_TYPES,
    EntryDefinition,
    FieldDefinition,
    TypeDefinition,
    ZomeDefinition,
    ZomeDefinitionParser,
    validate_entry_type_name,
    validate_field_name,
    validate_zome_definition,
)

__all__ = [
    "FIELD_TYPES",
    "EntryDefinition",
    "FieldDefinition",
    "TypeDefinition",
    "ZomeDefinition",
    "ZomeDefinitionParser",
    "validate_entry_type_name",
    "validate_field_name",
    "validate_zome_definition",
]
