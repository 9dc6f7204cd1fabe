"""
Dialect-independent type definitions shared by reference across adapters.

Dialects that support JSON columns copy `JSON_DEFINITIONS` into their own
definitions so every dialect renders the same JSON value shape.
"""
from types import MappingProxyType

from typegen.ast import ArrayExpressionNode, IdentifierNode, MappedTypeNode
from typegen.ast import UnionExpressionNode

__all__ = [
    'BUILTIN_TYPES',
    'JSON_ARRAY_DEFINITION',
    'JSON_DEFINITION',
    'JSON_DEFINITIONS',
    'JSON_OBJECT_DEFINITION',
    'JSON_PRIMITIVE_DEFINITION',
    'JSON_VALUE_DEFINITION',
]

# Names an IdentifierNode may use without a definitions/imports entry
BUILTIN_TYPES = frozenset({
    'bigint',
    'boolean',
    'Buffer',
    'Date',
    'null',
    'number',
    'string',
    'unknown',
})

JSON_PRIMITIVE_DEFINITION = UnionExpressionNode([
    IdentifierNode('string'),
    IdentifierNode('number'),
    IdentifierNode('boolean'),
    IdentifierNode('null'),
])

JSON_ARRAY_DEFINITION = ArrayExpressionNode(IdentifierNode('JsonValue'))

JSON_OBJECT_DEFINITION = MappedTypeNode(IdentifierNode('JsonValue'))

JSON_VALUE_DEFINITION = UnionExpressionNode([
    IdentifierNode('JsonPrimitive'),
    IdentifierNode('JsonArray'),
    IdentifierNode('JsonObject'),
])

JSON_DEFINITION = IdentifierNode('JsonValue')

JSON_DEFINITIONS = MappingProxyType({
    'Json': JSON_DEFINITION,
    'JsonArray': JSON_ARRAY_DEFINITION,
    'JsonObject': JSON_OBJECT_DEFINITION,
    'JsonPrimitive': JSON_PRIMITIVE_DEFINITION,
    'JsonValue': JSON_VALUE_DEFINITION,
})
