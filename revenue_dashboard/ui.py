from typing import List, Optional

from dash import dcc, html, dash_table

from .config import get_settings
from .auth import JWTClaims, current_claims
from .data import fetch_card_data, fetch_latest_invoices, fetch_revenue
from .definitions import ELLIPSIS, InvoiceRow, Revenue
from .utils import format_currency, format_date_to_local, generate_pagination, generate_y_axis

CARD_STYLE = {
    "border": "1px solid #e0e0e0",
    "borderRadius": "8px",
    "padding": "12px 16px",
    "minWidth": "160px",
    "boxShadow": "0 1px 2px rgba(0,0,0,0.04)",
    "background": "white",
}

PAGE_STYLE = {"minWidth": "36px", "height": "36px", "margin": "0 2px", "borderRadius": "6px",
              "border": "1px solid #e0e0e0", "background": "white"}
ACTIVE_PAGE_STYLE = {**PAGE_STYLE, "background": "#2563eb", "color": "white", "border": "1px solid #2563eb"}

TABLE_COLUMNS = [("name", "Customer"), ("email", "Email"), ("amount", "Amount"), ("date", "Date"), ("status", "Status")]


def revenue_figure(revenue: List[Revenue]) -> dict:
    """Monthly revenue bars with the y-axis ticks from `generate_y_axis`."""
    y_axis = generate_y_axis(revenue)
    top = y_axis.top_label
    tick_vals = [top - 1000 * i for i in range(len(y_axis.y_axis_labels))]
    return {
        "data": [{
            "type": "bar",
            "x": [r.month for r in revenue],
            "y": [r.revenue for r in revenue],
            "name": "Revenue",
            "marker": {"color": "#60a5fa"},
        }],
        "layout": {
            "title": "Recent Revenue",
            "yaxis": {"range": [0, top or 1000], "tickvals": tick_vals, "ticktext": y_axis.y_axis_labels},
            "paper_bgcolor": "white",
            "plot_bgcolor": "white",
        },
    }


def invoice_table_rows(rows: List[InvoiceRow], locale: Optional[str] = None) -> List[dict]:
    locale = locale or get_settings().locale
    return [
        {
            "id": r.id,
            "name": r.name,
            "email": r.email,
            "amount": format_currency(r.amount),
            "date": format_date_to_local(r.date, locale),
            "status": r.status.capitalize(),
        }
        for r in rows
    ]


def pagination_bar(current_page: int, total_pages: int) -> html.Div:
    """Arrows plus numbered page buttons; "..." entries render as plain text."""
    children = [
        html.Button("←", id={"type": "page-arrow", "dir": "prev"}, n_clicks=0,
                    disabled=current_page <= 1, style=PAGE_STYLE),
    ]
    for item in generate_pagination(current_page, total_pages):
        if item == ELLIPSIS:
            children.append(html.Span(ELLIPSIS, className="page-ellipsis", style={"padding": "0 8px"}))
            continue
        children.append(html.Button(
            str(item),
            id={"type": "page-btn", "page": item},
            n_clicks=0,
            style=ACTIVE_PAGE_STYLE if item == current_page else PAGE_STYLE,
        ))
    children.append(html.Button("→", id={"type": "page-arrow", "dir": "next"}, n_clicks=0,
                                disabled=current_page >= total_pages, style=PAGE_STYLE))
    return html.Div(children, style={"display": "flex", "justifyContent": "center", "marginTop": "12px"})


class UIBuilder:
    """Class that encapsulates layout building logic."""

    def __init__(self, title: Optional[str] = None) -> None:
        self.title = title or get_settings().app_title

    @staticmethod
    def card(label, value, id_suffix):
        return html.Div(
            className="card",
            children=[
                html.Div(label, className="card-label"),
                html.Div(value, className="card-value", id=f"card-{id_suffix}"),
            ],
            style=CARD_STYLE,
        )

    @staticmethod
    def revenue_chart(revenue: List[Revenue]):
        if not revenue:
            return html.P("No data available.", id="revenue-chart-empty")
        return dcc.Graph(id="revenue-chart", figure=revenue_figure(revenue))

    @staticmethod
    def latest_invoices():
        items = [
            html.Li([
                html.Span(inv.name, style={"fontWeight": "600"}),
                html.Span(f" {inv.email}", style={"color": "#666"}),
                html.Span(inv.amount, style={"float": "right"}),
            ], style={"padding": "6px 0", "borderBottom": "1px solid #f0f0f0"})
            for inv in fetch_latest_invoices()
        ]
        return html.Div([
            html.H3("Latest Invoices"),
            html.Ul(items, id="latest-invoices", style={"listStyle": "none", "padding": "0"}),
        ], style={**CARD_STYLE, "flex": "1"})

    def build_layout(self):
        claims = current_claims()
        user_name = JWTClaims.model_validate(claims).display_name
        cards = fetch_card_data()

        return html.Div([
            dcc.Store(id="claims-store", data=claims),
            dcc.Store(id="page-store", data=1),

            html.Div([
                html.H2(self.title, style={"margin": "0"}),
                html.Div(f"Welcome, {user_name}", style={"color": "#666"}),
            ], style={"display": "flex", "flexDirection": "column", "gap": "4px", "marginBottom": "12px"}),

            # ==== Summary cards ====
            html.Div(
                id="card-row",
                children=[
                    UIBuilder.card("Collected", format_currency(cards.total_paid_invoices), "collected"),
                    UIBuilder.card("Pending", format_currency(cards.total_pending_invoices), "pending"),
                    UIBuilder.card("Total Invoices", str(cards.number_of_invoices), "invoices"),
                    UIBuilder.card("Total Customers", str(cards.number_of_customers), "customers"),
                ],
                style={"display": "flex", "gap": "12px", "flexWrap": "wrap", "marginBottom": "8px"},
            ),

            # ==== Revenue + latest invoices ====
            html.Div([
                html.Div(UIBuilder.revenue_chart(fetch_revenue()), style={"flex": "2"}),
                UIBuilder.latest_invoices(),
            ], style={"display": "flex", "gap": "12px"}),

            html.Hr(),

            # ==== Invoices ====
            html.H3("Invoices"),
            dcc.Input(id="search-invoices", placeholder="Search invoices...", type="text",
                      debounce=True, style={"width": "100%", "marginBottom": "8px"}),
            dash_table.DataTable(
                id="invoices-table",
                columns=[{"name": label, "id": col} for col, label in TABLE_COLUMNS],
                data=[],
                style_table={"overflowX": "auto"},
                style_cell={"minWidth": 80, "maxWidth": 240, "whiteSpace": "nowrap", "textOverflow": "ellipsis"},
            ),
            html.Div(id="pagination"),
        ])


def serve_layout():
    return UIBuilder().build_layout()
