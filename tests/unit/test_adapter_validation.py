"""
Tests for adapter reference resolution and validation.
"""
import pytest
from typegen.adapters import Adapter, find_dangling_references, register_adapter
from typegen.adapters import validate_adapter
from typegen.adapters.base import _ADAPTER_REGISTRY, build_adapter
from typegen.ast import ColumnTypeNode, IdentifierNode, ModuleReferenceNode
from typegen.ast import ObjectExpressionNode, PropertyNode, UnionExpressionNode
from typegen.exceptions import ConfigurationError, DanglingReferenceError


def _adapter(scalars, definitions=None, imports=None, default_scalar=None):
    return Adapter(
        dialect='test',
        default_scalar=default_scalar or IdentifierNode('string'),
        default_schemas=['main'],
        scalars=scalars,
        definitions=definitions or {},
        imports=imports or {},
    )


def test_dangling_scalar_reference():
    """Test that a scalar naming an unknown type is reported"""
    adapter = _adapter({'money': IdentifierNode('Money')})

    assert find_dangling_references(adapter) == [('scalars.money', 'Money')]
    with pytest.raises(DanglingReferenceError) as excinfo:
        validate_adapter(adapter)
    assert excinfo.value.references == [('scalars.money', 'Money')]
    assert 'scalars.money -> Money' in str(excinfo.value)
    assert isinstance(excinfo.value, ConfigurationError)


def test_dangling_nested_definition_reference():
    """Test that references inside compound definitions are checked"""
    adapter = _adapter(
        {'geo': IdentifierNode('Geo')},
        definitions={
            'Geo': ObjectExpressionNode([
                PropertyNode('x', IdentifierNode('number')),
                PropertyNode('crs', IdentifierNode('Crs')),
            ]),
        },
    )
    assert find_dangling_references(adapter) == [('definitions.Geo', 'Crs')]


def test_dangling_default_scalar():
    """Test that the default scalar is validated too"""
    adapter = _adapter({}, default_scalar=IdentifierNode('Anything'))
    assert find_dangling_references(adapter) == [('default_scalar', 'Anything')]


def test_valid_adapter_returned():
    """Test that validation returns a valid adapter unchanged"""
    adapter = _adapter(
        {'interval': IdentifierNode('Interval')},
        definitions={
            'Interval': ColumnTypeNode(
                IdentifierNode('Duration'),
                UnionExpressionNode([IdentifierNode('Duration'), IdentifierNode('string')]),
            ),
        },
        imports={'Duration': ModuleReferenceNode('duration-lib')},
    )
    assert validate_adapter(adapter) is adapter
    assert adapter.default_schemas == ('main',)


def test_resolve():
    """Test name resolution order and failures"""
    adapter = _adapter(
        {},
        definitions={'Point': IdentifierNode('string')},
        imports={'Duration': ModuleReferenceNode('duration-lib')},
    )
    assert adapter.resolve('Point') == IdentifierNode('string')
    assert adapter.resolve('Duration') == ModuleReferenceNode('duration-lib')
    assert adapter.resolve('number') is None
    assert adapter.get_definition('Missing') is None
    assert adapter.get_import('Point') is None

    with pytest.raises(DanglingReferenceError):
        adapter.resolve('Missing')


def test_recursive_definitions_terminate():
    """Test that self-referencing definitions are walked once"""
    adapter = _adapter(
        {'tree': IdentifierNode('Tree')},
        definitions={
            'Tree': ObjectExpressionNode([
                PropertyNode('value', IdentifierNode('Duration')),
                PropertyNode('children', IdentifierNode('Tree')),
            ]),
        },
        imports={'Duration': ModuleReferenceNode('duration-lib')},
    )
    node = adapter.get_scalar('tree')
    assert adapter.collect_definitions(node) == ['Tree']
    assert adapter.collect_imports(node) == {'Duration': ModuleReferenceNode('duration-lib')}


def test_adapter_copies_registries():
    """Test that adapters never share the mappings they were built from"""
    scalars = {'text': IdentifierNode('string')}
    adapter = _adapter(scalars)
    scalars['text'] = IdentifierNode('number')

    assert adapter.get_scalar('text') == IdentifierNode('string')


def test_register_adapter():
    """Test registering and building a custom dialect adapter"""
    @register_adapter('test')
    def build_test_adapter(upper=False):
        target = 'String' if upper else 'string'
        return validate_adapter(_adapter({'text': IdentifierNode('string')},
                                         definitions={'String': IdentifierNode(target)}))

    try:
        adapter = build_adapter('test', upper=True)
        assert adapter.get_definition('String') == IdentifierNode('String')
    finally:
        _ADAPTER_REGISTRY.pop('test', None)


if __name__ == '__main__':
    __import__('pytest').main([__file__])
