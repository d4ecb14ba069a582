"""Shared helpers for SQLAlchemy-backed repositories."""

from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

from networth_engine.application.ports.errors import DataSourceError


@contextmanager
def translate_errors(source: str):
    """Re-raise SQLAlchemy failures as DataSourceError for ``source``.

    Args:
        source: Name of the store being accessed.

    Raises:
        DataSourceError: When the wrapped block raises SQLAlchemyError.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        raise DataSourceError(source, str(exc)) from exc


__all__ = ["translate_errors"]
