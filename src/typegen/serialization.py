"""
Serialization of type-expression nodes to builtin structures and JSON.

Nodes become dictionaries tagged with their `kind`:

    IdentifierNode('string') -> {'kind': 'identifier', 'name': 'string'}
"""
import json
from dataclasses import fields
from typing import Any

from typegen.adapters import Adapter
from typegen.ast import Node
from typegen.exceptions import SerializationError

__all__ = ['adapter_to_dict', 'from_dict', 'from_json', 'to_dict', 'to_json']


def _encode(value: Any) -> Any:
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, tuple | list):
        return [_encode(item) for item in value]
    return value


def _decode(value: Any) -> Any:
    if isinstance(value, dict):
        return from_dict(value)
    if isinstance(value, list):
        return [_decode(item) for item in value]
    return value


def to_dict(node: Node) -> dict[str, Any]:
    """Serialize a node tree to nested dictionaries.
    """
    if not isinstance(node, Node):
        raise SerializationError(f'Cannot serialize object of type {type(node).__name__}')
    data = {'kind': node.kind}
    for f in fields(node):
        data[f.name] = _encode(getattr(node, f.name))
    return data


def from_dict(data: dict[str, Any]) -> Node:
    """Rebuild a node tree from `to_dict` output.

    Raises
        SerializationError: missing or unknown `kind`, or bad fields
    """
    if not isinstance(data, dict):
        raise SerializationError(f'Expected a dict, got {type(data).__name__}')
    if 'kind' not in data:
        raise SerializationError("Missing required 'kind' field")
    kind = data['kind']
    node_cls = Node.registry.get(kind)
    if node_cls is None:
        raise SerializationError(f'Unknown node kind {kind!r}. Available: {sorted(Node.registry)}')
    values = {key: _decode(value) for key, value in data.items() if key != 'kind'}
    try:
        return node_cls(**values)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f'Invalid {kind} node: {exc}') from exc


def to_json(node: Node, **kwargs: Any) -> str:
    """Serialize a node tree to a JSON string."""
    return json.dumps(to_dict(node), **kwargs)


def from_json(text: str) -> Node:
    """Deserialize a node tree from a JSON string.

    Raises
        SerializationError: malformed JSON or an invalid node tree
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f'Invalid JSON: {exc}') from exc
    return from_dict(data)


def adapter_to_dict(adapter: Adapter) -> dict[str, Any]:
    """Dump every registry of an adapter, for inspection and comparison.
    """
    return {
        'dialect': adapter.dialect,
        'default_scalar': to_dict(adapter.default_scalar),
        'default_schemas': list(adapter.default_schemas),
        'scalars': {name: to_dict(node) for name, node in adapter.scalars.items()},
        'definitions': {name: to_dict(node) for name, node in adapter.definitions.items()},
        'imports': {name: to_dict(node) for name, node in adapter.imports.items()},
    }
