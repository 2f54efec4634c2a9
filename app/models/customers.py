# app/models/customers.py

from pydantic import BaseModel


class CustomerForm(BaseModel):
    """Validated user input for creating or updating a customer."""

    name: str
    email: str


class CustomerOut(BaseModel):
    id: str
    name: str
    email: str
    image_url: str

    class Config:
        from_attributes = True


class CustomerSummaryOut(CustomerOut):
    total_invoices: int
    total_pending: int
    total_paid: int
