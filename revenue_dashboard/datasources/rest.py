import logging

import numpy as np
import pandas as pd
import requests

from ..config import Settings, get_settings
from .base import INVOICE_COLUMNS, REVENUE_COLUMNS
from .synthetic import SyntheticProvider

logger = logging.getLogger(__name__)


class RestProvider:
    """Fetches revenue and invoices from a REST API and normalizes them to the dashboard schema."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    def _url(self, resource: str) -> str:
        base = (self.settings.api_base_url or "").rstrip("/")
        return f"{base}/{resource}" if base else ""

    def _fetch(self, resource: str, columns: list[str]) -> pd.DataFrame:
        url = self._url(resource)
        resp = requests.get(url, timeout=30)
        resp.raise_for_status()
        df = pd.DataFrame(resp.json())
        for col in set(columns) - set(df.columns):
            df[col] = np.nan
        return df[columns]

    def load_revenue(self) -> pd.DataFrame:
        if not self._url("revenue"):
            logger.info("API_BASE_URL not set; using synthetic revenue")
            return SyntheticProvider(self.settings).load_revenue()
        return self._fetch("revenue", REVENUE_COLUMNS)

    def load_invoices(self) -> pd.DataFrame:
        if not self._url("invoices"):
            logger.info("API_BASE_URL not set; using synthetic invoices")
            return SyntheticProvider(self.settings).load_invoices()
        return self._fetch("invoices", INVOICE_COLUMNS)
