from typing import Protocol

import pandas as pd

REVENUE_COLUMNS = ["month", "revenue"]
INVOICE_COLUMNS = ["id", "customer_id", "name", "email", "amount", "date", "status"]


class DataProvider(Protocol):
    """Protocol for data providers returning pandas DataFrames."""

    def load_revenue(self) -> pd.DataFrame: ...

    def load_invoices(self) -> pd.DataFrame: ...
