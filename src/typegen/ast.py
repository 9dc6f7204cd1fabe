"""
Type-expression nodes used to describe target-language type declarations.

The nodes form a small closed tree:

- IdentifierNode: a builtin type or a reference to a named definition/import
- ModuleReferenceNode: a type imported from an external module
- ObjectExpressionNode / PropertyNode: a structural record type
- UnionExpressionNode: an ordered alternation of types
- ArrayExpressionNode / MappedTypeNode: array and string-keyed map types
- ColumnTypeNode: the select/insert/update triple of a column

Nodes are frozen dataclasses. They carry no rendering logic; the emitter
dispatches on `kind`. Because they are immutable, the same instance may be
shared by any number of registry entries.
"""
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import ClassVar

__all__ = [
    'Node',
    'IdentifierNode',
    'ModuleReferenceNode',
    'PropertyNode',
    'ObjectExpressionNode',
    'UnionExpressionNode',
    'ArrayExpressionNode',
    'MappedTypeNode',
    'ColumnTypeNode',
    'iter_identifiers',
]


@dataclass(frozen=True)
class Node:
    """Base class for type-expression nodes.

    Subclasses are registered by `kind`, derived from the class name
    (`UnionExpressionNode` -> `union_expression`) unless given explicitly.
    """

    kind: ClassVar[str]
    registry: ClassVar[dict[str, type['Node']]] = {}

    def __init_subclass__(cls, kind: str | None = None, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if kind is None:
            base = cls.__name__.removesuffix('Node')
            kind = ''.join(f'_{c.lower()}' if c.isupper() else c for c in base).lstrip('_')
        cls.kind = kind

        existing = Node.registry.get(kind)
        if existing is not None and existing is not cls:
            raise ValueError(f'Node kind {kind!r} already registered to {existing.__name__}')
        Node.registry[kind] = cls

    def children(self) -> tuple['Node', ...]:
        """Direct child nodes, in declaration order.
        """
        return ()


@dataclass(frozen=True)
class IdentifierNode(Node):
    """A bare type name: `string`, `Date`, or a key of definitions/imports.
    """

    name: str


@dataclass(frozen=True)
class ModuleReferenceNode(Node):
    """A type imported from an external module.

    Only the module path is stored; the imported symbol is the key the node
    is registered under in `Adapter.imports`.
    """

    module_specifier: str


@dataclass(frozen=True)
class PropertyNode(Node):
    """One named field of an object type.
    """

    name: str
    value: Node

    def children(self) -> tuple[Node, ...]:
        return (self.value,)


@dataclass(frozen=True)
class ObjectExpressionNode(Node):
    """A structural record type made of uniquely named properties.
    """

    properties: Sequence[PropertyNode]

    def __post_init__(self) -> None:
        properties = tuple(self.properties)
        seen = set()
        for prop in properties:
            if prop.name in seen:
                raise ValueError(f'Duplicate property name: {prop.name}')
            seen.add(prop.name)
        object.__setattr__(self, 'properties', properties)

    def children(self) -> tuple[Node, ...]:
        return self.properties


@dataclass(frozen=True)
class UnionExpressionNode(Node):
    """An alternation of types. Member order is kept for stable output only.
    """

    members: Sequence[Node]

    def __post_init__(self) -> None:
        members = tuple(self.members)
        if not members:
            raise ValueError('UnionExpressionNode requires at least one member')
        object.__setattr__(self, 'members', members)

    def children(self) -> tuple[Node, ...]:
        return self.members


@dataclass(frozen=True)
class ArrayExpressionNode(Node):
    """An array whose elements are all of `values` type.
    """

    values: Node

    def children(self) -> tuple[Node, ...]:
        return (self.values,)


@dataclass(frozen=True)
class MappedTypeNode(Node):
    """An object with arbitrary string keys mapping to `value` type.
    """

    value: Node

    def children(self) -> tuple[Node, ...]:
        return (self.value,)


@dataclass(frozen=True)
class ColumnTypeNode(Node):
    """Column type seen on select, accepted on insert, accepted on update.

    Omitted slots cascade: insert defaults to select, update defaults to
    insert. The defaults are stored at construction so every reader sees
    three concrete nodes.
    """

    select_type: Node
    insert_type: Node | None = None
    update_type: Node | None = None

    def __post_init__(self) -> None:
        if self.insert_type is None:
            object.__setattr__(self, 'insert_type', self.select_type)
        if self.update_type is None:
            object.__setattr__(self, 'update_type', self.insert_type)

    def children(self) -> tuple[Node, ...]:
        return (self.select_type, self.insert_type, self.update_type)


def iter_identifiers(node: Node) -> Iterator[str]:
    """Yield the name of every IdentifierNode in a tree, pre-order.
    """
    if isinstance(node, IdentifierNode):
        yield node.name
        return
    for child in node.children():
        yield from iter_identifiers(child)
