"""
Typegen-specific exception classes.
"""


class TypegenError(Exception):
    """Base class for all typegen errors.
    """


class ConfigurationError(TypegenError):
    """Error in a dialect or adapter configuration.
    """


class DanglingReferenceError(ConfigurationError):
    """A registry entry names a type that is neither builtin, defined nor imported.

    `references` holds `(entry, name)` pairs, where `entry` is the registry
    location (`scalars.date`, `definitions.Numeric`) and `name` the
    identifier that could not be resolved.
    """

    def __init__(self, references: list[tuple[str, str]]) -> None:
        self.references = list(references)
        detail = ', '.join(f'{entry} -> {name}' for entry, name in self.references)
        super().__init__(f'Unresolved type references: {detail}')


class SerializationError(TypegenError):
    """Error converting nodes to or from builtin structures.
    """
