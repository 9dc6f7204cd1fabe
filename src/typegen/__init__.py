"""
Dialect-driven type mapping for database schema code generation.

A dialect resolves each native column type to a type-expression tree that
an emitter renders as a target-language type declaration:

- Module functions: typegen.get_scalar(dialect, 'numeric')
- Adapter methods: dialect.adapter.get_scalar('numeric')
"""
__version__ = '0.1.0'

from typegen.adapters import Adapter, build_adapter, validate_adapter
from typegen.ast import ArrayExpressionNode, ColumnTypeNode, IdentifierNode
from typegen.ast import MappedTypeNode, ModuleReferenceNode, Node
from typegen.ast import ObjectExpressionNode, PropertyNode
from typegen.ast import UnionExpressionNode
from typegen.dialects import Dialect, PostgresDialect, SqliteDialect
from typegen.exceptions import ConfigurationError, DanglingReferenceError
from typegen.exceptions import SerializationError, TypegenError
from typegen.factory import create_dialect
from typegen.options import DialectOptions
from typegen.parsers import DateParser, NumericParser, TimestampParser


def get_scalar(dialect: Dialect, native_type: str) -> Node:
    """Return the type node for a native column type.
    """
    return dialect.adapter.get_scalar(native_type)


def collect_imports(dialect: Dialect, node: Node) -> dict[str, ModuleReferenceNode]:
    """Return the module imports a type node needs.
    """
    return dialect.adapter.collect_imports(node)


__all__ = [
    'create_dialect',
    'get_scalar',
    'collect_imports',
    'build_adapter',
    'validate_adapter',
    'Adapter',
    'Dialect',
    'DialectOptions',
    'PostgresDialect',
    'SqliteDialect',
    'DateParser',
    'NumericParser',
    'TimestampParser',
    'Node',
    'IdentifierNode',
    'ModuleReferenceNode',
    'PropertyNode',
    'ObjectExpressionNode',
    'UnionExpressionNode',
    'ArrayExpressionNode',
    'MappedTypeNode',
    'ColumnTypeNode',
    'TypegenError',
    'ConfigurationError',
    'DanglingReferenceError',
    'SerializationError',
]
