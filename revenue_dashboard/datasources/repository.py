from __future__ import annotations

import logging
import math
from typing import List, Optional

import pandas as pd
from flask_caching import Cache

from ..config import Settings, get_settings
from ..definitions import CardData, InvoiceRow, LatestInvoice, Revenue
from ..utils import format_currency, today_key
from .base import DataProvider, INVOICE_COLUMNS
from .cache import CacheFacade
from .rest import RestProvider
from .sql import SqlProvider
from .synthetic import SyntheticProvider

logger = logging.getLogger(__name__)

# Columns searched by the invoices filter
SEARCH_COLUMNS = ["name", "email", "amount", "date", "status"]

INVOICE_STATUSES = ("pending", "paid")


class DataRepository:
    """High-level data access with provider selection, capping, normalization, and caching."""

    def __init__(
        self,
        provider: Optional[DataProvider] = None,
        cache_facade: Optional[CacheFacade] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.provider = provider or self._default_provider()
        self.cache_facade = cache_facade or CacheFacade(cache=None, timeout_seconds=self.settings.cache_timeout_seconds)

    # ---- Provider selection ----
    def _default_provider(self) -> DataProvider:
        src = self.settings.data_source
        logger.info("Using %s data source", src)
        if src == "REST":
            return RestProvider(self.settings)
        if src == "SQL":
            return SqlProvider(self.settings)
        return SyntheticProvider(self.settings)

    # ---- Loaders ----
    def load_revenue_uncached(self) -> pd.DataFrame:
        df = self.provider.load_revenue()
        df = df.dropna(subset=["month"]).reset_index(drop=True)
        df["revenue"] = df["revenue"].fillna(0).astype(int)
        return df

    def load_invoices_uncached(self) -> pd.DataFrame:
        df = self.provider.load_invoices()
        if len(df) > self.settings.max_rows:
            logger.info("Capping invoices from %d to %d rows", len(df), self.settings.max_rows)
            df = df.sample(self.settings.max_rows, random_state=1)
        df = df.copy()
        for col in ["id", "customer_id", "name", "email"]:
            df[col] = df[col].fillna("").astype(str)
        dates = pd.to_datetime(df["date"], errors="coerce")
        statuses = df["status"].fillna("").astype(str).str.strip().str.lower()
        valid = dates.notna() & statuses.isin(INVOICE_STATUSES)
        if not valid.all():
            logger.warning(
                "Dropping %d invoices without a date or with a status other than %s",
                int((~valid).sum()), "/".join(INVOICE_STATUSES),
            )
        df = df[valid].copy()
        df["date"] = dates[valid].dt.strftime("%Y-%m-%d")
        df["status"] = statuses[valid]
        df["amount"] = df["amount"].fillna(0).astype(int)
        df = df.sort_values(["date", "id"], ascending=[False, True]).reset_index(drop=True)
        return df[INVOICE_COLUMNS]

    def load_cached(self, day_key: str) -> pd.DataFrame:
        @self.cache_facade.memoize
        def _invoices(_k: str) -> pd.DataFrame:  # pragma: no cover - thin wrapper
            return self.load_invoices_uncached()

        return _invoices(day_key)

    def load_revenue_cached(self, day_key: str) -> pd.DataFrame:
        @self.cache_facade.memoize
        def _revenue(_k: str) -> pd.DataFrame:  # pragma: no cover - thin wrapper
            return self.load_revenue_uncached()

        return _revenue(day_key)

    def get_data(self, force_key: Optional[str] = None) -> pd.DataFrame:
        """All normalized invoices, newest first."""
        key = force_key if force_key else today_key()
        df = self.load_cached(key)
        return df.copy()

    # ---- Queries ----
    def get_revenue(self, force_key: Optional[str] = None) -> List[Revenue]:
        key = force_key if force_key else today_key()
        df = self.load_revenue_cached(key)
        return [Revenue(month=str(r.month), revenue=int(r.revenue)) for r in df.itertuples(index=False)]

    def get_latest_invoices(self, limit: int = 5, force_key: Optional[str] = None) -> List[LatestInvoice]:
        df = self.get_data(force_key).head(limit)
        return [
            LatestInvoice(id=str(r.id), name=str(r.name), email=str(r.email), amount=format_currency(int(r.amount)))
            for r in df.itertuples(index=False)
        ]

    def get_card_data(self, force_key: Optional[str] = None) -> CardData:
        df = self.get_data(force_key)
        return CardData(
            total_paid_invoices=int(df.loc[df["status"] == "paid", "amount"].sum()),
            total_pending_invoices=int(df.loc[df["status"] == "pending", "amount"].sum()),
            number_of_invoices=len(df),
            number_of_customers=int(df["customer_id"].nunique()),
        )

    @staticmethod
    def _search(df: pd.DataFrame, query: Optional[str]) -> pd.DataFrame:
        q = (query or "").strip().lower()
        if not q:
            return df
        mask = pd.Series(False, index=df.index)
        for col in SEARCH_COLUMNS:
            mask |= df[col].astype(str).str.lower().str.contains(q, regex=False, na=False)
        return df[mask]

    def get_invoice_pages(self, query: Optional[str] = None, force_key: Optional[str] = None) -> int:
        """Number of table pages for `query`; an empty result still has one page."""
        matches = len(self._search(self.get_data(force_key), query))
        return max(1, math.ceil(matches / self.settings.items_per_page))

    def get_filtered_invoices(
        self, query: Optional[str] = None, page: int = 1, force_key: Optional[str] = None
    ) -> List[InvoiceRow]:
        per_page = self.settings.items_per_page
        offset = (max(page, 1) - 1) * per_page
        df = self._search(self.get_data(force_key), query).iloc[offset:offset + per_page]
        return [InvoiceRow.model_validate(rec) for rec in df.to_dict(orient="records")]

    # ---- Cache wiring ----
    def set_cache(self, cache: Cache) -> None:
        self.cache_facade = CacheFacade(cache, timeout_seconds=self.settings.cache_timeout_seconds)
