"""
Base dialect interface.

A dialect couples the options handed to the (external) schema introspector
with the Adapter the emitter uses to map column types. It has no logic of its
own: it partitions the user options and builds its own Adapter.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, ClassVar

from typegen.adapters import Adapter

if TYPE_CHECKING:
    from typegen.options import DialectOptions

logger = logging.getLogger(__name__)

# Registry of dialect name -> dialect class
_DIALECT_REGISTRY: dict[str, type['Dialect']] = {}


def register_dialect(name: str):
    """Decorator to register a dialect class.

    Usage:
        @register_dialect('postgresql')
        class PostgresDialect(Dialect):
            ...
    """
    def decorator(cls: type['Dialect']) -> type['Dialect']:
        cls.name = name
        _DIALECT_REGISTRY[name] = cls
        return cls
    return decorator


@dataclass(frozen=True)
class IntrospectorOptions:
    """Options passed through unmodified to the schema introspector.
    """
    default_schemas: tuple[str, ...] = ()
    domains: bool = True
    partitions: bool = False
    date_parser: str | None = None
    numeric_parser: str | None = None
    timestamp_parser: str | None = None


class Dialect(ABC):
    """Base class for generator dialects.
    """

    name: ClassVar[str]

    def __init__(self, options: 'DialectOptions | dict[str, Any] | None' = None) -> None:
        options = self._load_options(options)
        introspector_options = IntrospectorOptions(
            default_schemas=tuple(options.default_schemas or ()),
            domains=options.domains,
            partitions=options.partitions,
            date_parser=options.date_parser,
            numeric_parser=options.numeric_parser,
            timestamp_parser=options.timestamp_parser,
        )
        self._adapter = self.create_adapter(introspector_options)
        if not introspector_options.default_schemas:
            introspector_options = replace(introspector_options,
                                           default_schemas=self._adapter.default_schemas)
        self._introspector_options = introspector_options
        logger.debug(f'Created {self.name} dialect with {introspector_options}')

    def _load_options(self, options: 'DialectOptions | dict[str, Any] | None') -> 'DialectOptions':
        """Return `options` as DialectOptions for this dialect.

        Raises
            TypeError: options is neither DialectOptions, a dict nor None
        """
        # options imports the dialect registry
        from typegen.options import DialectOptions

        if options is None:
            return DialectOptions(dialect=self.name)
        if isinstance(options, dict):
            return DialectOptions(**{'dialect': self.name, **options})
        if isinstance(options, DialectOptions):
            return options
        raise TypeError(f'options must be DialectOptions, dict or None, not {type(options).__name__}')

    @property
    def adapter(self) -> Adapter:
        """Adapter owned by this dialect."""
        return self._adapter

    @property
    def introspector_options(self) -> IntrospectorOptions:
        return self._introspector_options

    @abstractmethod
    def create_adapter(self, options: IntrospectorOptions) -> Adapter:
        """Build a new Adapter from the type-mapping subset of the options.

        Args:
            options: Resolved introspector options, including parser choices

        Returns
            Adapter instance owned by this dialect
        """
