from typing import List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

# Marker standing in for a run of omitted page numbers
ELLIPSIS: Literal["..."] = "..."

PaginationItem = Union[int, Literal["..."]]


class Revenue(BaseModel):
    """One month of revenue, in whole currency units."""

    model_config = ConfigDict(frozen=True)

    month: str
    revenue: int


class YAxis(BaseModel):
    top_label: int
    y_axis_labels: List[str]


class LatestInvoice(BaseModel):
    id: str
    name: str
    email: str
    amount: str  # already formatted for display


class InvoiceRow(BaseModel):
    id: str
    customer_id: str
    name: str
    email: str
    amount: int  # cents
    date: str
    status: Literal["pending", "paid"]


class CardData(BaseModel):
    total_paid_invoices: int = Field(default=0, description="Collected amount in cents")
    total_pending_invoices: int = Field(default=0, description="Pending amount in cents")
    number_of_invoices: int = 0
    number_of_customers: int = 0
