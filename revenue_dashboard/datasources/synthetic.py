import datetime as dt
import logging

import numpy as np
import pandas as pd

from ..config import Settings, get_settings

logger = logging.getLogger(__name__)

MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

CUSTOMERS = [
    ("c-001", "Evil Rabbit", "evil@rabbit.com"),
    ("c-002", "Delba de Oliveira", "delba@oliveira.com"),
    ("c-003", "Lee Robinson", "lee@robinson.com"),
    ("c-004", "Michael Novotny", "michael@novotny.com"),
    ("c-005", "Amy Burns", "amy@burns.com"),
    ("c-006", "Balazs Orban", "balazs@orban.com"),
]


class SyntheticProvider:
    """Generates synthetic revenue and invoices for demos and local development."""

    def __init__(self, settings: Settings | None = None, seed: int = 42) -> None:
        self.settings = settings or get_settings()
        self.seed = seed

    def load_revenue(self) -> pd.DataFrame:
        rng = np.random.default_rng(self.seed)
        # Whole hundreds so the chart has some exact and some rounded ceilings
        revenue = rng.integers(10, 50, size=len(MONTHS)) * 100
        return pd.DataFrame({"month": MONTHS, "revenue": revenue})

    def load_invoices(self) -> pd.DataFrame:
        rows = self.settings.max_rows
        logger.debug("Generating %d synthetic invoices", rows)
        rng = np.random.default_rng(self.seed)
        days = pd.date_range(dt.date.today() - dt.timedelta(days=364), periods=365, freq="D")
        picks = rng.integers(0, len(CUSTOMERS), size=rows)
        df = pd.DataFrame({
            "id": [f"inv-{i + 1:05d}" for i in range(rows)],
            "customer_id": [CUSTOMERS[p][0] for p in picks],
            "name": [CUSTOMERS[p][1] for p in picks],
            "email": [CUSTOMERS[p][2] for p in picks],
            "amount": rng.integers(500, 700_000, size=rows),
            "date": rng.choice(days, size=rows),
            "status": rng.choice(["pending", "paid"], size=rows, p=[0.4, 0.6]),
        })
        return df
