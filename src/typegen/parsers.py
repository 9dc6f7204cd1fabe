"""
Runtime parser choices that change how a driver hands values back.

Each option is a single enumerated choice. Values are plain strings so
options loaded from configuration compare equal to the enum members.
"""
from enum import StrEnum


class DateParser(StrEnum):
    """How `date` columns are returned by the driver.
    """
    STRING = 'string'
    TIMESTAMP = 'timestamp'


class NumericParser(StrEnum):
    """How arbitrary-precision `numeric` columns are returned.
    """
    STRING = 'string'
    NUMBER = 'number'
    NUMBER_OR_STRING = 'number-or-string'


class TimestampParser(StrEnum):
    """How `timestamp`/`timestamptz` columns are returned.
    """
    STRING = 'string'
    TIMESTAMP = 'timestamp'
