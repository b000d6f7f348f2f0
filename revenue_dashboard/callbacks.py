import logging
from typing import Any, List, Optional, Tuple, Union

from dash import ALL, Input, Output, State, ctx, html, no_update
from pydantic import BaseModel, ValidationError, field_validator

from .data import fetch_filtered_invoices, fetch_invoice_pages
from .ui import invoice_table_rows, pagination_bar

logger = logging.getLogger(__name__)


class InvoiceQuery(BaseModel):
    query: Optional[str] = None
    page: int = 1

    @field_validator("query", mode="before")
    @classmethod
    def normalize_query(cls, v):
        if v is None:
            return None
        s = str(v).strip()
        return s if s else None

    @field_validator("page", mode="before")
    @classmethod
    def default_page(cls, v):
        if v is None or v == "":
            return 1
        return v


def next_page(triggered_id: Union[str, dict, None], clicks: Any, current_page: Optional[int]) -> Optional[int]:
    """Page selected by the component that fired, or None when nothing changed.

    A new search always starts over from page 1.
    """
    if not isinstance(triggered_id, dict):
        return 1
    if not clicks:
        # buttons re-rendered with the pagination bar, not clicked
        return None
    current = current_page or 1
    if triggered_id.get("type") == "page-btn":
        return int(triggered_id["page"])
    if triggered_id.get("type") == "page-arrow":
        return current - 1 if triggered_id.get("dir") == "prev" else current + 1
    return None


def render_invoices(query: Optional[str], page: Any) -> Tuple[List[dict], html.Div]:
    """Table rows and pagination bar for `page`, clamped to the pages available."""
    try:
        q = InvoiceQuery(query=query, page=page)
    except ValidationError as e:
        logger.warning("Invalid invoice query, showing first page: %s", e)
        q = InvoiceQuery(query=query)

    total_pages = fetch_invoice_pages(q.query)
    current = min(max(q.page, 1), total_pages)
    rows = fetch_filtered_invoices(q.query, current)
    return invoice_table_rows(rows), pagination_bar(current, total_pages)


def register_callbacks(app):

    @app.callback(
        Output("page-store", "data"),
        Input("search-invoices", "value"),
        Input({"type": "page-btn", "page": ALL}, "n_clicks"),
        Input({"type": "page-arrow", "dir": ALL}, "n_clicks"),
        State("page-store", "data"),
    )
    def select_page(_query, _page_clicks, _arrow_clicks, current_page):
        clicks = ctx.triggered[0]["value"] if ctx.triggered else None
        page = next_page(ctx.triggered_id, clicks, current_page)
        return no_update if page is None else page

    @app.callback(
        Output("invoices-table", "data"),
        Output("pagination", "children"),
        Input("page-store", "data"),
        Input("search-invoices", "value"),
    )
    def update_invoices(page, query):
        return render_invoices(query, page)
