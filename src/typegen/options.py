from dataclasses import dataclass, field

from typegen.dialects import get_available_dialects, is_supported_dialect

from libb import ConfigOptions

__all__ = ['DialectOptions']


@dataclass
class DialectOptions(ConfigOptions):
    """Options

    supported dialects: `postgresql`, `sqlite`

    Introspection options:
    - default_schemas: schemas in scope, empty for the dialect default
    - domains: whether domain types are visible (default: True)
    - partitions: whether partition tables are visible (default: False)

    Parser options (PostgreSQL only):
    - date_parser: `string` | `timestamp`
    - numeric_parser: `string` | `number` | `number-or-string`
    - timestamp_parser: `string` | `timestamp`

    Parser values are not validated; unrecognized values act as unset.
    """
    dialect: str = 'postgresql'
    default_schemas: list[str] = field(default_factory=list)
    domains: bool = True
    partitions: bool = False
    date_parser: str = None
    numeric_parser: str = None
    timestamp_parser: str = None

    def __post_init__(self):
        if not is_supported_dialect(self.dialect):
            available = get_available_dialects()
            raise ValueError(f'dialect must be one of: {available}')
