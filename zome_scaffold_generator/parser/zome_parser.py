"""
Zome Definition Parser.

This module loads zome definitions, as produced by the scaffolding pipeline,
into typed dataclasses and validates entry type names before they are
embedded into generated Rust identifiers.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Final

from zome_scaffold_generator.errors import (
    EntryTypeAlreadyExistsError,
    InvalidFieldTypeError,
    InvalidReservedWordError,
    InvalidStringFormatError,
    InvalidZomeDefinitionError,
)
from zome_scaffold_generator.utils.string_case import (
    can_be_raw_identifier,
    escape_rust_keyword,
    is_rust_keyword,
    is_snake_case_identifier,
    is_title_case_identifier,
    snake_case,
    title_case,
)

# Field types accepted in entry definitions, mapped to their Rust types
FIELD_TYPES: Final = {
    "String": "String",
    "bool": "bool",
    "u32": "u32",
    "i32": "i32",
    "f32": "f32",
    "Timestamp": "Timestamp",
    "ActionHash": "ActionHash",
    "EntryHash": "EntryHash",
    "AgentPubKey": "AgentPubKey",
}

# Type names already defined by the generated lib.rs or the integrity prelude
_RESERVED_TYPE_NAMES: Final = frozenset(
    {"EntryTypes", "UnitEntryTypes", "LinkTypes", "Op", "Entry", "Record", "Action"}
)

# Module names whose source file the crate generator already writes
_RESERVED_MODULE_NAMES: Final = frozenset({"lib"})


@dataclass
class FieldDefinition:
    """A single field of an entry type."""

    name: str
    field_type: str
    optional: bool = False
    vec: bool = False
    rust_field_name: str = field(init=False)
    rust_type: str = field(init=False)

    def __post_init__(self) -> None:
        if self.field_type not in FIELD_TYPES:
            raise InvalidFieldTypeError(self.field_type, list(FIELD_TYPES))
        self.rust_field_name = escape_rust_keyword(snake_case(self.name))

        rust_type = FIELD_TYPES[self.field_type]
        if self.vec:
            rust_type = f"Vec<{rust_type}>"
        if self.optional:
            rust_type = f"Option<{rust_type}>"
        self.rust_type = rust_type


@dataclass
class TypeDefinition:
    """A data type identified by its human-readable name."""

    name: str
    fields: list[FieldDefinition] = field(default_factory=list)

    @property
    def rust_module_name(self) -> str:
        return snake_case(self.name)

    @property
    def rust_type_name(self) -> str:
        return title_case(self.name)


@dataclass
class EntryDefinition:
    type_definition: TypeDefinition


@dataclass
class ZomeDefinition:
    """An integrity zome: a name plus its ordered entry definitions."""

    name: str
    entry_defs: list[EntryDefinition] = field(default_factory=list)

    @property
    def crate_name(self) -> str:
        return snake_case(self.name)


def validate_entry_type_name(name: str) -> None:
    """Check that an entry type name yields valid Rust identifiers.

    Raises:
        InvalidStringFormatError: If the name is empty or does not convert into
            a valid snake case module name and title case type name.
        InvalidReservedWordError: If the name collides with a Rust keyword or a
            type name the generated module already defines.
    """
    module_name = snake_case(name)
    type_name = title_case(name)

    if not module_name:
        raise InvalidStringFormatError(name, "entry type name must not be empty")
    if not is_snake_case_identifier(module_name) or not is_title_case_identifier(type_name):
        raise InvalidStringFormatError(name, "entry type name must convert into a valid Rust identifier")
    if is_rust_keyword(module_name) or module_name in _RESERVED_MODULE_NAMES:
        raise InvalidReservedWordError(module_name)
    if type_name in _RESERVED_TYPE_NAMES:
        raise InvalidReservedWordError(type_name)


def validate_field_name(name: str) -> None:
    """Check that a field name yields a valid Rust field identifier.

    Raises:
        InvalidStringFormatError: If the snake case form is empty or not an identifier.
        InvalidReservedWordError: If the snake case form is a keyword that cannot be
            escaped as a raw identifier.
    """
    field_name = snake_case(name)

    if not is_snake_case_identifier(field_name):
        raise InvalidStringFormatError(name, "field name must convert into a valid Rust identifier")
    if not can_be_raw_identifier(field_name):
        raise InvalidReservedWordError(field_name)


def validate_zome_definition(zome: ZomeDefinition) -> None:
    """Validate every entry type and field name of a zome and reject duplicates.

    Names are compared after snake case conversion, since "my thing" and
    "MyThing" would generate the same module.
    """
    seen: set[str] = set()
    for entry_def in zome.entry_defs:
        name = entry_def.type_definition.name
        validate_entry_type_name(name)
        for field_def in entry_def.type_definition.fields:
            validate_field_name(field_def.name)

        module_name = snake_case(name)
        if module_name in seen:
            raise EntryTypeAlreadyExistsError(name, zome.name)
        seen.add(module_name)


class ZomeDefinitionParser:
    """Parser for zome definitions in JSON form."""

    def __init__(self, *, strict: bool = True) -> None:
        self.strict = strict

    def parse_file(self, file_path: str | Path) -> ZomeDefinition:
        """Parse a zome definition from a JSON file."""
        path = Path(file_path)
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
        return self.parse_dict(data)

    def parse_dict(self, data: Any) -> ZomeDefinition:  # noqa: ANN401
        """Parse a zome definition from an already-decoded dictionary."""
        if not isinstance(data, dict):
            msg = "Zome definition must be a JSON object"
            raise InvalidZomeDefinitionError(msg)

        name = data.get("name")
        if not isinstance(name, str) or not name:
            msg = "Zome definition requires a non-empty 'name'"
            raise InvalidZomeDefinitionError(msg)

        raw_entry_defs = data.get("entry_defs", [])
        if not isinstance(raw_entry_defs, list):
            msg = "'entry_defs' must be a list"
            raise InvalidZomeDefinitionError(msg)

        zome = ZomeDefinition(
            name=name,
            entry_defs=[self._parse_entry_def(entry_data) for entry_data in raw_entry_defs],
        )

        if self.strict:
            validate_zome_definition(zome)

        return zome

    def _parse_entry_def(self, entry_data: Any) -> EntryDefinition:  # noqa: ANN401
        if not isinstance(entry_data, dict):
            msg = "Each entry definition must be an object"
            raise InvalidZomeDefinitionError(msg)

        type_data = entry_data.get("typeDefinition", entry_data.get("type_definition"))
        if not isinstance(type_data, dict):
            msg = "Entry definition is missing its 'typeDefinition'"
            raise InvalidZomeDefinitionError(msg)

        return EntryDefinition(type_definition=self._parse_type_definition(type_data))

    def _parse_type_definition(self, type_data: dict[str, Any]) -> TypeDefinition:
        name = type_data.get("name")
        if not isinstance(name, str):
            msg = "Type definition requires a string 'name'"
            raise InvalidZomeDefinitionError(msg)

        raw_fields = type_data.get("fields", [])
        if not isinstance(raw_fields, list):
            msg = f"'fields' of type '{name}' must be a list"
            raise InvalidZomeDefinitionError(msg)

        return TypeDefinition(name=name, fields=[self._parse_field(field_data) for field_data in raw_fields])

    @staticmethod
    def _parse_field(field_data: Any) -> FieldDefinition:  # noqa: ANN401
        if not isinstance(field_data, dict) or not isinstance(field_data.get("name"), str):
            msg = "Each field requires a string 'name'"
            raise InvalidZomeDefinitionError(msg)

        return FieldDefinition(
            name=field_data["name"],
            field_type=str(field_data.get("type", "String")),
            optional=bool(field_data.get("optional", False)),
            vec=bool(field_data.get("vec", False)),
        )
