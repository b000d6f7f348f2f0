from __future__ import annotations

from dataclasses import dataclass, field

import pandas as pd
from flask import Flask
from flask_caching import Cache

from revenue_dashboard.config import Settings
from revenue_dashboard.datasources.base import DataProvider
from revenue_dashboard.datasources.repository import DataRepository
from revenue_dashboard.definitions import Revenue
from revenue_dashboard.utils import today_key


@dataclass
class FakeProvider(DataProvider):
    rows: int
    statuses: list = field(default_factory=lambda: ["paid", "Pending"])

    def load_revenue(self) -> pd.DataFrame:  # type: ignore[override]
        return pd.DataFrame({"month": ["Jan", "Feb"], "revenue": [2000.0, 2500.0]})

    def load_invoices(self) -> pd.DataFrame:  # type: ignore[override]
        return pd.DataFrame({
            "id": list(range(1, self.rows + 1)),
            "customer_id": [f"c{i % 3}" for i in range(self.rows)],
            "name": ["Amy Burns" if i % 2 else "Lee Robinson" for i in range(self.rows)],
            "email": ["amy@burns.com" if i % 2 else "lee@robinson.com" for i in range(self.rows)],
            "amount": [1000 * (i + 1) for i in range(self.rows)],
            "date": pd.date_range("2024-01-01", periods=self.rows, freq="D"),
            "status": [self.statuses[i % 2] for i in range(self.rows)],
        })


def make_repo(rows=10, **settings):
    s = Settings(**{"max_rows": 500, "items_per_page": 3, **settings})
    return DataRepository(provider=FakeProvider(rows=rows), settings=s)


def test_repository_capping_and_normalization():
    repo = make_repo(rows=200, max_rows=50)
    df = repo.load_invoices_uncached()
    assert len(df) == 50
    assert df["date"].str.match(r"^\d{4}-\d{2}-\d{2}$").all()
    assert df["id"].map(type).eq(str).all()
    assert set(df["status"]) == {"paid", "pending"}
    # newest first
    assert df["date"].is_monotonic_decreasing


def test_get_revenue_returns_models():
    revenue = make_repo().get_revenue()
    assert revenue == [Revenue(month="Jan", revenue=2000), Revenue(month="Feb", revenue=2500)]


def test_card_data_totals():
    cards = make_repo(rows=4).get_card_data()
    # amounts 1000..4000; even rows paid
    assert cards.total_paid_invoices == 1000 + 3000
    assert cards.total_pending_invoices == 2000 + 4000
    assert cards.number_of_invoices == 4
    assert cards.number_of_customers == 3


def test_latest_invoices_are_newest_and_formatted():
    latest = make_repo(rows=10).get_latest_invoices(limit=2)
    assert [inv.id for inv in latest] == ["10", "9"]
    assert latest[0].amount == "$100.00"


def test_filtered_invoices_pages_and_search():
    repo = make_repo(rows=10)
    assert repo.get_invoice_pages() == 4
    page = repo.get_filtered_invoices(page=4)
    assert [r.id for r in page] == ["1"]

    amy = repo.get_filtered_invoices(query="AMY")
    assert amy and all(r.name == "Amy Burns" for r in amy)
    assert repo.get_invoice_pages("amy") == 2
    assert repo.get_invoice_pages("2024-01-05") == 1
    assert repo.get_filtered_invoices(query="2024-01-05")[0].id == "5"


def test_no_matches_still_has_one_page():
    repo = make_repo(rows=5)
    assert repo.get_invoice_pages("nobody") == 1
    assert repo.get_filtered_invoices("nobody", page=1) == []


def test_repository_caching_with_flask_cache(monkeypatch):
    repo = make_repo(rows=30)

    server = Flask(__name__)
    cache = Cache(server, config={"CACHE_TYPE": "SimpleCache", "CACHE_DEFAULT_TIMEOUT": 60})
    repo.set_cache(cache)

    calls = {"count": 0}
    orig = repo.load_invoices_uncached

    def wrapped():
        calls["count"] += 1
        return orig()

    monkeypatch.setattr(repo, "load_invoices_uncached", wrapped)

    key = today_key()
    _ = repo.get_data()
    _ = repo.get_card_data()
    assert calls["count"] == 1

    _ = repo.get_data(force_key=f"{key}__123")
    assert calls["count"] == 2


@dataclass
class MessyProvider(FakeProvider):
    def load_invoices(self) -> pd.DataFrame:  # type: ignore[override]
        return pd.DataFrame({
            "id": ["i1", "i2", "i3", "i4", "i5"],
            "customer_id": ["c1", "c1", "c2", "c2", "c3"],
            "name": ["Amy", "Lee", "Evil", "Delba", None],
            "email": ["a@x.com", "l@x.com", "e@x.com", "d@x.com", None],
            "amount": [100, 200, 300, 400, 500],
            "date": ["2024-01-01", "2024-01-02", None, "2024-01-04", "2024-01-05"],
            "status": [" PAID ", "Overdue", "pending", None, "pending"],
        })


def test_invoices_with_unknown_status_or_missing_date_are_dropped(caplog):
    repo = DataRepository(provider=MessyProvider(rows=0), settings=Settings(max_rows=500, items_per_page=6))
    with caplog.at_level("WARNING"):
        rows = repo.get_filtered_invoices(None, 1)
    assert [(r.id, r.status) for r in rows] == [("i5", "pending"), ("i1", "paid")]
    assert rows[0].name == ""
    assert "Dropping 3 invoices" in caplog.text
    assert repo.get_invoice_pages() == 1
