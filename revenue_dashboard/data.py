from typing import List, Optional

from flask_caching import Cache

from .config import get_settings
from .datasources import DataRepository
from .definitions import CardData, InvoiceRow, LatestInvoice, Revenue

# Singleton repository instance for the module facade, initialized with settings
_repo = DataRepository(settings=get_settings())


def set_cache(cache: Cache) -> None:
    """Wire the Flask-Caching instance into the data repository.

    Called once from the composition root.
    """
    _repo.set_cache(cache)


def fetch_revenue(force_key: Optional[str] = None) -> List[Revenue]:
    return _repo.get_revenue(force_key)


def fetch_latest_invoices(limit: int = 5) -> List[LatestInvoice]:
    return _repo.get_latest_invoices(limit)


def fetch_card_data() -> CardData:
    return _repo.get_card_data()


def fetch_filtered_invoices(query: Optional[str], page: int) -> List[InvoiceRow]:
    """One table page of invoices matching `query`, newest first."""
    return _repo.get_filtered_invoices(query, page)


def fetch_invoice_pages(query: Optional[str]) -> int:
    return _repo.get_invoice_pages(query)
