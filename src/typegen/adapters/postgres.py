"""
PostgreSQL adapter.

Types follow what node-postgres hands back at runtime: any type without a
registered parser comes back as a string, and any value can be sent to the
server as a string. Native type names are the internal catalog names
(`int4`, `bool`, `varchar`); SQL spellings such as `integer` or
`timestamp with time zone` are mapped to them through psycopg's builtin type
registry.
"""
import logging
import re

from psycopg.postgres import types as postgres_types
from typegen.adapters.base import Adapter, register_adapter, validate_adapter
from typegen.ast import ColumnTypeNode, IdentifierNode, ModuleReferenceNode
from typegen.ast import Node, ObjectExpressionNode, PropertyNode
from typegen.ast import UnionExpressionNode
from typegen.definitions import JSON_DEFINITIONS
from typegen.parsers import DateParser, NumericParser, TimestampParser

logger = logging.getLogger(__name__)

__all__ = [
    'build_postgres_adapter',
    'get_scalar_by_oid',
    'postgres_type_name',
    'type_name_for_oid',
]


def _identifier(name: str) -> IdentifierNode:
    return IdentifierNode(name)


def _union(*names: str) -> UnionExpressionNode:
    return UnionExpressionNode([IdentifierNode(name) for name in names])


def _point(*fields: str) -> ObjectExpressionNode:
    return ObjectExpressionNode([PropertyNode(f, IdentifierNode('number')) for f in fields])


def postgres_type_name(native_type: str) -> str:
    """Map a PostgreSQL type spelling to its catalog name.

    `integer` -> `int4`, `character varying` -> `varchar`. Type modifiers are
    dropped: `numeric(10,2)` -> `numeric`, `timestamp(3) with time zone` ->
    `timestamptz`. Array types and names psycopg does not know are returned
    lowercased and otherwise unchanged.
    """
    name = re.sub(r'\s*\(.*?\)', '', native_type)
    name = ' '.join(name.lower().split())
    if name.endswith('[]'):
        return name
    info = postgres_types.get(name)
    return info.name if info is not None else name


def type_name_for_oid(oid: int) -> str | None:
    """Return the catalog type name for a builtin type OID.

    Array OIDs map to `<element>[]`; unknown OIDs to None.
    """
    info = postgres_types.get(oid)
    if info is None:
        return None
    if info.oid != oid and info.array_oid == oid:
        return f'{info.name}[]'
    return info.name


def get_scalar_by_oid(adapter: Adapter, oid: int) -> Node:
    """Resolve a column type from a cursor description OID.
    """
    name = type_name_for_oid(oid)
    if name is None:
        logger.debug(f'Unknown PostgreSQL type OID {oid}, using default scalar')
        return adapter.default_scalar
    return adapter.get_scalar(name)


def _default_definitions() -> dict[str, Node]:
    return {
        'Circle': _point('x', 'y', 'radius'),
        'Int8': ColumnTypeNode(
            _identifier('string'),
            _union('string', 'number', 'bigint'),
            _union('string', 'number', 'bigint'),
        ),
        'Interval': ColumnTypeNode(
            _identifier('IPostgresInterval'),
            _union('IPostgresInterval', 'number', 'string'),
            _union('IPostgresInterval', 'number', 'string'),
        ),
        **JSON_DEFINITIONS,
        'Numeric': ColumnTypeNode(
            _identifier('string'),
            _union('number', 'string'),
            _union('number', 'string'),
        ),
        'Point': _point('x', 'y'),
        'Timestamp': ColumnTypeNode(
            _identifier('Date'),
            _union('Date', 'string'),
            _union('Date', 'string'),
        ),
    }


def _default_imports() -> dict[str, ModuleReferenceNode]:
    return {
        'IPostgresInterval': ModuleReferenceNode('postgres-interval'),
    }


# Found through experimentation in Adminer and in the 'pg' source code
_SCALAR_TYPES = {
    'bit': 'string',
    'bool': 'boolean',  # "boolean" in Adminer
    'box': 'string',
    'bpchar': 'string',  # "character" in Adminer
    'bytea': 'Buffer',
    'cidr': 'string',
    'circle': 'Circle',
    'date': 'Timestamp',
    'float4': 'number',  # "real" in Adminer
    'float8': 'number',  # "double precision" in Adminer
    'inet': 'string',
    'int2': 'number',
    'int4': 'number',
    'int8': 'Int8',  # "bigint" in Adminer
    'interval': 'Interval',
    'json': 'Json',
    'jsonb': 'Json',
    'line': 'string',
    'lseg': 'string',
    'macaddr': 'string',
    'money': 'string',
    'numeric': 'Numeric',
    'oid': 'number',
    'path': 'string',
    'point': 'Point',
    'polygon': 'string',
    'text': 'string',
    'time': 'string',
    'timestamp': 'Timestamp',
    'timestamptz': 'Timestamp',
    'tsquery': 'string',
    'tsvector': 'string',
    'txid_snapshot': 'string',
    'uuid': 'string',
    'varbit': 'string',  # "bit varying" in Adminer
    'varchar': 'string',  # "character varying" in Adminer
    'xml': 'string',
}


def _warn_unrecognized(option: str, value: str | None, choices: type) -> None:
    if value is not None and value not in {choice.value for choice in choices}:
        logger.warning(f'Unrecognized {option} {value!r}, using default')


@register_adapter('postgresql')
def build_postgres_adapter(date_parser: str | None = None,
                           numeric_parser: str | None = None,
                           timestamp_parser: str | None = None) -> Adapter:
    """Build the PostgreSQL adapter for the given parser options.

    Args:
        date_parser: `string` maps `date` columns to string instead of Timestamp
        numeric_parser: `number` or `number-or-string` changes the Numeric
            definition; anything else keeps the string read type
        timestamp_parser: `string` reads Timestamp columns as strings

    Unrecognized values are logged and treated as unset.

    Returns
        A new, validated Adapter
    """
    _warn_unrecognized('date_parser', date_parser, DateParser)
    _warn_unrecognized('numeric_parser', numeric_parser, NumericParser)
    _warn_unrecognized('timestamp_parser', timestamp_parser, TimestampParser)

    scalars = {name: IdentifierNode(target) for name, target in _SCALAR_TYPES.items()}
    definitions = _default_definitions()

    if date_parser == DateParser.STRING:
        scalars['date'] = _identifier('string')

    if numeric_parser == NumericParser.NUMBER:
        definitions['Numeric'] = ColumnTypeNode(
            _identifier('number'),
            _union('number', 'string'),
            _union('number', 'string'),
        )
    elif numeric_parser == NumericParser.NUMBER_OR_STRING:
        definitions['Numeric'] = ColumnTypeNode(_union('number', 'string'))

    if timestamp_parser == TimestampParser.STRING:
        definitions['Timestamp'] = ColumnTypeNode(
            _identifier('string'),
            _union('Date', 'string'),
            _union('Date', 'string'),
        )

    logger.debug(f'Built postgresql adapter: date_parser={date_parser}, '
                 f'numeric_parser={numeric_parser}, timestamp_parser={timestamp_parser}')

    return validate_adapter(Adapter(
        dialect='postgresql',
        default_scalar=_identifier('string'),
        default_schemas=('public',),
        scalars=scalars,
        definitions=definitions,
        imports=_default_imports(),
        normalize_type_name=postgres_type_name,
    ))
