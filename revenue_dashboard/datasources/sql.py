import logging

import pandas as pd
from sqlalchemy import create_engine

from ..config import Settings, get_settings
from .synthetic import SyntheticProvider

logger = logging.getLogger(__name__)


class SqlProvider:
    """Loads revenue and invoices from the SQL database defined by DB_URL."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self._engine = None

    def _get_engine(self):
        if self._engine is None:
            self._engine = create_engine(self.settings.db_url, pool_pre_ping=True)
        return self._engine

    def load_revenue(self) -> pd.DataFrame:
        if not self.settings.db_url:
            logger.info("DB_URL not set; using synthetic revenue")
            return SyntheticProvider(self.settings).load_revenue()
        return pd.read_sql("SELECT month, revenue FROM revenue", self._get_engine())

    def load_invoices(self) -> pd.DataFrame:
        if not self.settings.db_url:
            logger.info("DB_URL not set; using synthetic invoices")
            return SyntheticProvider(self.settings).load_invoices()
        sql = (
            """
            SELECT
                invoices.id, invoices.customer_id,
                customers.name, customers.email,
                invoices.amount, CAST(invoices.date AS DATE) AS date, invoices.status
            FROM invoices
            JOIN customers ON invoices.customer_id = customers.id
            ORDER BY invoices.date DESC
            """
        )
        return pd.read_sql(sql, self._get_engine())
