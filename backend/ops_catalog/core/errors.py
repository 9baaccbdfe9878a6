"""Exceptions raised by the store itself.

Database failures are not wrapped: SQLAlchemy errors reach callers of the
write accessors unchanged.
"""


class StoreError(Exception):
    """Base class for errors raised by the store layer."""


class StoreNotReadyError(StoreError):
    """An accessor was called before the schema bootstrap finished."""


class UnknownTableError(StoreError, KeyError):
    """The bootstrapper was asked for a table it has no definition for."""

    def __init__(self, table_name: str):
        super().__init__(table_name)
        self.table_name = table_name

    def __str__(self) -> str:
        return f"no bootstrap definition for table {self.table_name!r}"
