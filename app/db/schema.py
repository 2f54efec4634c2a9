# app/db/schema.py

import uuid

from sqlalchemy import (
    MetaData, Table, Column, Integer, String,
    Date, ForeignKey, CheckConstraint, Text
)

metadata = MetaData()


def _new_id() -> str:
    return str(uuid.uuid4())


customers = Table(
    "customers",
    metadata,
    Column("id", String(36), primary_key=True, default=_new_id),
    Column("name", String, nullable=False),
    Column("email", String, nullable=False),
    Column("image_url", String, nullable=False),
)

invoices = Table(
    "invoices",
    metadata,
    Column("id", String(36), primary_key=True, default=_new_id),
    Column(
        "customer_id",
        String(36),
        ForeignKey("customers.id", ondelete="CASCADE"),
        nullable=False,
    ),
    # integer cents
    Column("amount", Integer, nullable=False),
    Column("status", Text, nullable=False),
    Column("date", Date, nullable=False),
    CheckConstraint("amount > 0", name="ck_invoices_amount_positive"),
    CheckConstraint(
        "status IN ('pending', 'paid')", name="ck_invoices_status_known"
    ),
)

users = Table(
    "users",
    metadata,
    Column("id", String(36), primary_key=True, default=_new_id),
    Column("name", String, nullable=False),
    Column("email", Text, unique=True, nullable=False),
    # passlib hash, never the plain password
    Column("password", Text, nullable=False),
)
