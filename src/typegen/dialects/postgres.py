"""
PostgreSQL dialect.
"""
from typegen.adapters import Adapter, build_adapter
from typegen.dialects.base import Dialect, IntrospectorOptions, register_dialect


@register_dialect('postgresql')
class PostgresDialect(Dialect):
    """PostgreSQL dialect with node-postgres parser options.

    Supported options: `default_schemas`, `domains`, `partitions`,
    `date_parser`, `numeric_parser`, `timestamp_parser`.
    """

    def create_adapter(self, options: IntrospectorOptions) -> Adapter:
        return build_adapter(
            'postgresql',
            date_parser=options.date_parser,
            numeric_parser=options.numeric_parser,
            timestamp_parser=options.timestamp_parser,
        )
