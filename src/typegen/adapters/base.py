"""
Adapter record and builder registry.

An Adapter is a per-dialect, read-only registry that maps native column type
names to type-expression nodes:

- scalars: native type name -> node (usually an IdentifierNode)
- definitions: named type -> node, referenced from scalars or other definitions
- imports: named type -> ModuleReferenceNode for types pulled from a module
- default_scalar: node used for native types missing from scalars
- default_schemas: catalog schemas in scope when the user names none

Adapters are built by dialect builder functions registered with
`register_adapter`. A builder starts from fresh copies of its dialect
defaults, applies the parser options and returns a frozen Adapter, so two
builds never share a mutable registry.
"""
import logging
from collections import deque
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from typegen.ast import ModuleReferenceNode, Node, iter_identifiers
from typegen.definitions import BUILTIN_TYPES
from typegen.exceptions import DanglingReferenceError

logger = logging.getLogger(__name__)

# Registry of dialect name -> adapter builder
_ADAPTER_REGISTRY: dict[str, Callable[..., 'Adapter']] = {}


def register_adapter(dialect: str):
    """Decorator to register an adapter builder for a dialect.

    Usage:
        @register_adapter('postgresql')
        def build_postgres_adapter(date_parser=None, ...) -> Adapter:
            ...
    """
    def decorator(func: Callable[..., 'Adapter']) -> Callable[..., 'Adapter']:
        _ADAPTER_REGISTRY[dialect] = func
        return func
    return decorator


def get_available_adapters() -> list[str]:
    """Return list of dialect names with a registered adapter builder."""
    return list(_ADAPTER_REGISTRY.keys())


def build_adapter(dialect: str, **options: Any) -> 'Adapter':
    """Build a new Adapter for `dialect` with the given parser options.
    """
    if dialect not in _ADAPTER_REGISTRY:
        available = get_available_adapters()
        raise ValueError(f'Unsupported dialect: {dialect}. Available: {available}')
    return _ADAPTER_REGISTRY[dialect](**options)


def lowercase_type_name(native_type: str) -> str:
    """Default type name normalizer."""
    return native_type.strip().lower()


@dataclass(frozen=True)
class Adapter:
    """Read-only type registry for one dialect.

    The mappings passed in are copied and wrapped in read-only proxies.
    """

    dialect: str
    default_scalar: Node
    default_schemas: tuple[str, ...]
    scalars: Mapping[str, Node]
    definitions: Mapping[str, Node]
    imports: Mapping[str, ModuleReferenceNode]
    normalize_type_name: Callable[[str], str] = field(default=lowercase_type_name, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'default_schemas', tuple(self.default_schemas))
        object.__setattr__(self, 'scalars', MappingProxyType(dict(self.scalars)))
        object.__setattr__(self, 'definitions', MappingProxyType(dict(self.definitions)))
        object.__setattr__(self, 'imports', MappingProxyType(dict(self.imports)))

    def get_scalar(self, native_type: str) -> Node:
        """Return the node for a native column type.

        The name is tried as given, then normalized; unknown types fall back
        to `default_scalar`.
        """
        if native_type in self.scalars:
            return self.scalars[native_type]
        key = self.normalize_type_name(native_type)
        if key in self.scalars:
            return self.scalars[key]
        logger.debug(f'No {self.dialect} scalar for {native_type!r}, using default')
        return self.default_scalar

    def get_definition(self, name: str) -> Node | None:
        return self.definitions.get(name)

    def get_import(self, name: str) -> ModuleReferenceNode | None:
        return self.imports.get(name)

    def is_resolvable(self, name: str) -> bool:
        """Check if an identifier name is builtin, defined or imported."""
        return name in BUILTIN_TYPES or name in self.definitions or name in self.imports

    def resolve(self, name: str) -> Node | None:
        """Return the node an identifier refers to.

        Returns
            The definition or import node, or None for builtin types

        Raises
            DanglingReferenceError: the name is not known to this adapter
        """
        if name in self.definitions:
            return self.definitions[name]
        if name in self.imports:
            return self.imports[name]
        if name in BUILTIN_TYPES:
            return None
        raise DanglingReferenceError([('<lookup>', name)])

    def _walk_references(self, node: Node) -> list[str]:
        """Names of every definition and import reachable from `node`.

        Each name is visited once, so recursive definitions terminate.
        """
        seen: set[str] = set()
        found: list[str] = []
        pending = deque(iter_identifiers(node))
        while pending:
            name = pending.popleft()
            if name in seen:
                continue
            seen.add(name)
            target = self.resolve(name)
            if target is None:
                continue
            found.append(name)
            pending.extend(iter_identifiers(target))
        return found

    def collect_definitions(self, node: Node) -> list[str]:
        """Definition names `node` depends on, in discovery order."""
        return [name for name in self._walk_references(node) if name in self.definitions]

    def collect_imports(self, node: Node) -> dict[str, ModuleReferenceNode]:
        """Imports `node` depends on, directly or through definitions.
        """
        return {name: self.imports[name]
                for name in self._walk_references(node)
                if name in self.imports and name not in self.definitions}


def _registry_entries(adapter: Adapter) -> Iterable[tuple[str, Node]]:
    yield 'default_scalar', adapter.default_scalar
    for name, node in adapter.scalars.items():
        yield f'scalars.{name}', node
    for name, node in adapter.definitions.items():
        yield f'definitions.{name}', node


def find_dangling_references(adapter: Adapter) -> list[tuple[str, str]]:
    """Return `(entry, name)` pairs for every unresolvable identifier.
    """
    dangling = []
    for entry, node in _registry_entries(adapter):
        for name in iter_identifiers(node):
            if not adapter.is_resolvable(name):
                dangling.append((entry, name))
    return dangling


def validate_adapter(adapter: Adapter) -> Adapter:
    """Raise DanglingReferenceError if any registry entry has a broken reference.

    Returns the adapter unchanged so builders can `return validate_adapter(...)`.
    """
    dangling = find_dangling_references(adapter)
    if dangling:
        raise DanglingReferenceError(dangling)
    return adapter
