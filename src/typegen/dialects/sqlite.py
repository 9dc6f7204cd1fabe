"""
SQLite dialect.
"""
from typegen.adapters import Adapter, build_adapter
from typegen.dialects.base import Dialect, IntrospectorOptions, register_dialect


@register_dialect('sqlite')
class SqliteDialect(Dialect):
    """SQLite dialect. Parser options do not apply and are ignored.
    """

    def create_adapter(self, options: IntrospectorOptions) -> Adapter:
        return build_adapter('sqlite')
