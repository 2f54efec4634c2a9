# app/models/invoices.py

import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel

InvoiceStatus = Literal["pending", "paid"]


class InvoiceForm(BaseModel):
    """Validated user input for creating or updating an invoice."""

    customer_id: str
    amount: Decimal
    status: InvoiceStatus


class InvoiceOut(BaseModel):
    id: str
    customer_id: str
    customer_name: str
    customer_email: str
    amount_in_cents: int
    amount: Decimal
    status: InvoiceStatus
    date: datetime.date

    class Config:
        from_attributes = True
