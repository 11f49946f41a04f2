"""Exceptions raised while loading, validating and generating zome definitions."""


class ScaffoldError(Exception):
    """Base class for all scaffolding errors."""


class InvalidZomeDefinitionError(ScaffoldError):
    """The zome definition is structurally malformed."""


class InvalidFieldTypeError(InvalidZomeDefinitionError):
    def __init__(self, field_type: str, valid_types: list[str]) -> None:
        self.field_type = field_type
        self.valid_types = valid_types
        super().__init__(
            f'Invalid field type "{field_type}", here are all valid field types: "{", ".join(valid_types)}"'
        )


class InvalidStringFormatError(ScaffoldError):
    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        super().__init__(f'Invalid string format: "{value}" ({reason})')


class InvalidReservedWordError(ScaffoldError):
    def __init__(self, word: str) -> None:
        self.word = word
        super().__init__(f"Invalid reserved word: {word}")


class EntryTypeAlreadyExistsError(ScaffoldError):
    def __init__(self, entry_type: str, zome_name: str) -> None:
        self.entry_type = entry_type
        self.zome_name = zome_name
        super().__init__(f'Entry type "{entry_type}" already exists in the integrity zome "{zome_name}"')


class GeneratedFileConflictError(ScaffoldError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f'Generated file "{path}" would overwrite another generated file')
