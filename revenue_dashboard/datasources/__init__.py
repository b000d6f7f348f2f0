"""Revenue and invoice data sources.

Providers (synthetic, REST, SQL) share the `DataProvider` protocol; the
`DataRepository` picks one from settings, normalizes its frames and serves the
dashboard queries, memoized through `CacheFacade`.
"""
from .base import DataProvider
from .synthetic import SyntheticProvider
from .rest import RestProvider
from .sql import SqlProvider
from .cache import CacheFacade
from .repository import DataRepository

__all__ = [
    "DataProvider",
    "SyntheticProvider",
    "RestProvider",
    "SqlProvider",
    "CacheFacade",
    "DataRepository",
]
