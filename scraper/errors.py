"""
Error types raised while fetching and parsing the Kandilli bulletin.

Every failure aborts the whole operation; nothing here is recovered
internally. Each error carries enough context (url, row index, column,
raw text) to tell a network problem apart from a bulletin format change.
"""


class BulletinError(Exception):
    """Base class for all bulletin errors."""


class FetchError(BulletinError):
    """Network failure, non-success status or undecodable body."""

    def __init__(self, message, url=None):
        super().__init__(message)
        self.url = url


class StructureError(BulletinError):
    """Expected page structure (pre block, header, rows, columns) is missing."""

    def __init__(self, message, row_index=None):
        super().__init__(message)
        self.row_index = row_index


class FieldParseError(BulletinError, ValueError):
    """A single column could not be converted to its target type."""

    def __init__(self, column, raw_value, row_index=None, reason=None):
        location = f" in row {row_index}" if row_index is not None else ""
        message = f"Cannot parse column '{column}'{location}: {raw_value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.column = column
        self.raw_value = raw_value
        self.row_index = row_index
