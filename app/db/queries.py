# app/db/queries.py
"""
Read-side queries backing the dashboard listing and edit pages.
"""

from decimal import Decimal
from typing import List, Optional

from sqlalchemy import case, func, select
from sqlalchemy.engine import Engine

from app.db.schema import customers, invoices
from app.models.customers import CustomerOut, CustomerSummaryOut
from app.models.invoices import InvoiceOut


def _cents_to_amount(cents: int) -> Decimal:
    return Decimal(cents) / 100


def _row_to_invoice(row) -> InvoiceOut:
    return InvoiceOut(
        id=row["id"],
        customer_id=row["customer_id"],
        customer_name=row["customer_name"],
        customer_email=row["customer_email"],
        amount_in_cents=row["amount"],
        amount=_cents_to_amount(row["amount"]),
        status=row["status"],
        date=row["date"],
    )


def _invoice_select():
    return (
        select(
            invoices.c.id,
            invoices.c.customer_id,
            customers.c.name.label("customer_name"),
            customers.c.email.label("customer_email"),
            invoices.c.amount,
            invoices.c.status,
            invoices.c.date,
        )
        .select_from(invoices.join(customers))
    )


def fetch_invoices(engine: Engine) -> List[InvoiceOut]:
    """
    All invoices with their customer, newest first.
    """
    stmt = _invoice_select().order_by(invoices.c.date.desc(), invoices.c.id)

    with engine.connect() as conn:
        rows = conn.execute(stmt).mappings().all()

    return [_row_to_invoice(row) for row in rows]


def fetch_invoice_by_id(engine: Engine, invoice_id: str) -> Optional[InvoiceOut]:
    stmt = _invoice_select().where(invoices.c.id == invoice_id)

    with engine.connect() as conn:
        row = conn.execute(stmt).mappings().first()

    if row is None:
        return None
    return _row_to_invoice(row)


def fetch_customers(engine: Engine) -> List[CustomerSummaryOut]:
    """
    All customers ordered by name, with invoice count and pending/paid totals
    in cents.
    """
    def _total_for(status: str):
        return func.coalesce(
            func.sum(case((invoices.c.status == status, invoices.c.amount), else_=0)),
            0,
        )

    stmt = (
        select(
            customers.c.id,
            customers.c.name,
            customers.c.email,
            customers.c.image_url,
            func.count(invoices.c.id).label("total_invoices"),
            _total_for("pending").label("total_pending"),
            _total_for("paid").label("total_paid"),
        )
        .select_from(customers.outerjoin(invoices))
        .group_by(
            customers.c.id,
            customers.c.name,
            customers.c.email,
            customers.c.image_url,
        )
        .order_by(customers.c.name)
    )

    with engine.connect() as conn:
        rows = conn.execute(stmt).mappings().all()

    return [
        CustomerSummaryOut(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            image_url=row["image_url"],
            total_invoices=row["total_invoices"],
            total_pending=row["total_pending"],
            total_paid=row["total_paid"],
        )
        for row in rows
    ]


def fetch_customer_by_id(engine: Engine, customer_id: str) -> Optional[CustomerOut]:
    stmt = (
        select(
            customers.c.id,
            customers.c.name,
            customers.c.email,
            customers.c.image_url,
        )
        .where(customers.c.id == customer_id)
    )

    with engine.connect() as conn:
        row = conn.execute(stmt).mappings().first()

    if row is None:
        return None
    return CustomerOut(
        id=row["id"],
        name=row["name"],
        email=row["email"],
        image_url=row["image_url"],
    )
