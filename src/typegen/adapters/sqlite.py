"""
SQLite adapter.

SQLite accepts any declared column type and only assigns it one of five
affinities. Exact declared names found in the scalar map are used as-is;
everything else is reduced to its affinity with the rules from
https://www.sqlite.org/datatype3.html (section 3.1).
"""
import logging
import re

from typegen.adapters.base import Adapter, register_adapter, validate_adapter
from typegen.ast import IdentifierNode

logger = logging.getLogger(__name__)

__all__ = ['build_sqlite_adapter', 'sqlite_type_name']

# The sqlite3 module returns DATE/DATETIME/TIME as text unless
# detect_types is enabled, and booleans as 0/1 integers.
_SCALAR_TYPES = {
    'any': 'unknown',
    'blob': 'Buffer',
    'boolean': 'number',
    'date': 'string',
    'datetime': 'string',
    'integer': 'number',
    'numeric': 'number',
    'real': 'number',
    'text': 'string',
    'time': 'string',
}


def sqlite_type_name(native_type: str) -> str:
    """Reduce a declared SQLite column type to a scalar key.

    `VARCHAR(20)` -> `text`, `BIGINT` -> `integer`, `DOUBLE` -> `real`.
    """
    name = re.sub(r'\(.*\)', '', native_type).strip().lower()
    if name in _SCALAR_TYPES:
        return name
    if 'int' in name:
        return 'integer'
    if any(token in name for token in ('char', 'clob', 'text')):
        return 'text'
    if not name or 'blob' in name:
        return 'blob'
    if any(token in name for token in ('real', 'floa', 'doub')):
        return 'real'
    return 'numeric'


@register_adapter('sqlite')
def build_sqlite_adapter() -> Adapter:
    """Build the SQLite adapter. SQLite has no parser options.
    """
    logger.debug('Built sqlite adapter')
    return validate_adapter(Adapter(
        dialect='sqlite',
        default_scalar=IdentifierNode('string'),
        default_schemas=(),
        scalars={name: IdentifierNode(target) for name, target in _SCALAR_TYPES.items()},
        definitions={},
        imports={},
        normalize_type_name=sqlite_type_name,
    ))
