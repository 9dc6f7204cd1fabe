"""
Tests for type-expression nodes.
"""
import dataclasses

import pytest
from typegen.ast import ArrayExpressionNode, ColumnTypeNode, IdentifierNode
from typegen.ast import MappedTypeNode, ModuleReferenceNode, Node
from typegen.ast import ObjectExpressionNode, PropertyNode
from typegen.ast import UnionExpressionNode, iter_identifiers


def test_node_kinds_registered():
    """Test that every node class is registered under its kind"""
    assert Node.registry['identifier'] is IdentifierNode
    assert Node.registry['module_reference'] is ModuleReferenceNode
    assert Node.registry['property'] is PropertyNode
    assert Node.registry['object_expression'] is ObjectExpressionNode
    assert Node.registry['union_expression'] is UnionExpressionNode
    assert Node.registry['array_expression'] is ArrayExpressionNode
    assert Node.registry['mapped_type'] is MappedTypeNode
    assert Node.registry['column_type'] is ColumnTypeNode


def test_duplicate_kind_rejected():
    """Test that a second class cannot claim an existing kind"""
    with pytest.raises(ValueError, match='already registered'):
        class OtherIdentifier(Node, kind='identifier'):
            pass

    assert Node.registry['identifier'] is IdentifierNode


def test_nodes_are_immutable_values():
    """Test value equality, hashing and immutability"""
    a = IdentifierNode('string')
    b = IdentifierNode('string')
    assert a == b
    assert hash(a) == hash(b)
    assert a != IdentifierNode('number')

    with pytest.raises(dataclasses.FrozenInstanceError):
        a.name = 'number'


def test_union_requires_member():
    """Test that an empty union is rejected"""
    with pytest.raises(ValueError):
        UnionExpressionNode([])


def test_union_keeps_order():
    """Test that union members keep their given order"""
    union = UnionExpressionNode([IdentifierNode('number'), IdentifierNode('string')])
    assert union.members == (IdentifierNode('number'), IdentifierNode('string'))
    assert union != UnionExpressionNode([IdentifierNode('string'), IdentifierNode('number')])


def test_object_expression_unique_properties():
    """Test property name uniqueness within an object type"""
    point = ObjectExpressionNode([
        PropertyNode('x', IdentifierNode('number')),
        PropertyNode('y', IdentifierNode('number')),
    ])
    assert [p.name for p in point.properties] == ['x', 'y']
    assert isinstance(point.properties, tuple)

    with pytest.raises(ValueError, match='Duplicate property name: x'):
        ObjectExpressionNode([
            PropertyNode('x', IdentifierNode('number')),
            PropertyNode('x', IdentifierNode('string')),
        ])


def test_column_type_cascading_defaults():
    """Test that omitted insert/update types cascade from select"""
    select = UnionExpressionNode([IdentifierNode('number'), IdentifierNode('string')])
    column = ColumnTypeNode(select)

    assert column.insert_type is select
    assert column.update_type is column.insert_type


def test_column_type_update_defaults_to_insert():
    """Test that update falls back to insert, not select"""
    column = ColumnTypeNode(IdentifierNode('Date'),
                            UnionExpressionNode([IdentifierNode('Date'), IdentifierNode('string')]))

    assert column.select_type == IdentifierNode('Date')
    assert column.update_type is column.insert_type


def test_column_type_explicit_slots():
    """Test that explicit slots are kept as given"""
    column = ColumnTypeNode(IdentifierNode('string'),
                            IdentifierNode('number'),
                            IdentifierNode('bigint'))

    assert column.select_type == IdentifierNode('string')
    assert column.insert_type == IdentifierNode('number')
    assert column.update_type == IdentifierNode('bigint')


def test_shared_nodes():
    """Test that one node instance can be reused across trees"""
    string = IdentifierNode('string')
    union = UnionExpressionNode([string, IdentifierNode('number')])
    column = ColumnTypeNode(string, union)

    assert column.select_type is union.members[0]


def test_iter_identifiers():
    """Test identifier traversal order across nested nodes"""
    node = ColumnTypeNode(
        IdentifierNode('IPostgresInterval'),
        UnionExpressionNode([
            IdentifierNode('IPostgresInterval'),
            IdentifierNode('number'),
        ]),
    )
    assert list(iter_identifiers(node)) == [
        'IPostgresInterval',
        'IPostgresInterval', 'number',
        'IPostgresInterval', 'number',
    ]

    nested = ObjectExpressionNode([
        PropertyNode('items', ArrayExpressionNode(IdentifierNode('JsonValue'))),
        PropertyNode('meta', MappedTypeNode(IdentifierNode('string'))),
    ])
    assert list(iter_identifiers(nested)) == ['JsonValue', 'string']
    assert list(iter_identifiers(ModuleReferenceNode('postgres-interval'))) == []


if __name__ == '__main__':
    __import__('pytest').main([__file__])
