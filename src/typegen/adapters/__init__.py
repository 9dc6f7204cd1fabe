"""
Adapter factory and per-dialect type registries.
"""
from typegen.adapters.base import Adapter as Adapter
from typegen.adapters.base import build_adapter as build_adapter
from typegen.adapters.base import find_dangling_references as find_dangling_references
from typegen.adapters.base import get_available_adapters as get_available_adapters
from typegen.adapters.base import register_adapter as register_adapter
from typegen.adapters.base import validate_adapter as validate_adapter
from typegen.adapters.postgres import build_postgres_adapter as build_postgres_adapter
from typegen.adapters.postgres import get_scalar_by_oid as get_scalar_by_oid
from typegen.adapters.sqlite import build_sqlite_adapter as build_sqlite_adapter
