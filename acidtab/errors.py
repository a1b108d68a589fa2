"""
Exceptions recorded by (and raised from) acidtab.
"""


class TableError(ValueError):
    """Base class for errors recorded on a Table."""


class ShapeError(TableError):
    """The number of values does not fit the number of columns."""


class ColumnIndexError(TableError):
    """A column configuration call referred to a column which doesn't exist."""


class CellFormatError(TableError):
    """A value could not be formatted by its column's pattern or callback."""


class ConfigError(Exception):
    """A style configuration file could not be used."""
