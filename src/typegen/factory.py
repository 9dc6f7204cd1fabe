"""
Dialect construction from user options.
"""
import logging
from typing import Any

from typegen.dialects import Dialect, get_dialect_class
from typegen.options import DialectOptions

from libb import load_options

logger = logging.getLogger(__name__)

__all__ = ['create_dialect']


@load_options(cls=DialectOptions)
def create_dialect(options: DialectOptions | dict[str, Any] | str,
                   config: Any | None = None, **kw: Any) -> Dialect:
    """Create a dialect with its own adapter.

    Args:
        options: Can be:
            - DialectOptions instance
            - Dictionary of option values
            - String name of a configuration setting
        config: Configuration module used to resolve a string setting
        **kw: Individual option overrides

    Returns
        Dialect instance for `options.dialect`
    """
    dialect_cls = get_dialect_class(options.dialect)
    logger.debug(f'Creating {options.dialect} dialect')
    return dialect_cls(options)
