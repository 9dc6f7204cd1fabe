"""
Dialect registry for the type generator.
"""
from typegen.dialects.base import _DIALECT_REGISTRY
from typegen.dialects.base import Dialect as Dialect
from typegen.dialects.base import IntrospectorOptions as IntrospectorOptions
from typegen.dialects.base import register_dialect as register_dialect
from typegen.dialects.postgres import PostgresDialect as PostgresDialect
from typegen.dialects.sqlite import SqliteDialect as SqliteDialect


def _validate_dialect(dialect: str) -> None:
    """Raise ValueError if dialect is not registered."""
    if dialect not in _DIALECT_REGISTRY:
        available = list(_DIALECT_REGISTRY.keys())
        raise ValueError(f'Unsupported dialect: {dialect}. Available: {available}')


def get_available_dialects() -> list[str]:
    """Return list of registered dialect names."""
    return list(_DIALECT_REGISTRY.keys())


def is_supported_dialect(dialect: str) -> bool:
    """Check if a dialect is supported."""
    return dialect in _DIALECT_REGISTRY


def get_dialect_class(dialect: str) -> type[Dialect]:
    """Get the dialect class for a dialect name without instantiating."""
    _validate_dialect(dialect)
    return _DIALECT_REGISTRY[dialect]
