"""Failure types raised by data source adapters."""


class DataSourceError(RuntimeError):
    """A data source could not be read or written.

    "No rows" is never reported with this error: repositories return empty
    lists or None for that.

    Attributes:
        source: Name of the store that failed.
    """

    def __init__(self, source: str, message: str) -> None:
        super().__init__(f"{source}: {message}")
        self.source = source


__all__ = ["DataSourceError"]
