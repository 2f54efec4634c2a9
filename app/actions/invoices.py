# app/actions/invoices.py
"""
Invoice mutations: validate -> one statement -> revalidate -> redirect/message.
"""

import logging
from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo

from sqlalchemy.exc import SQLAlchemyError

from app.actions.results import (
    ActionMessage,
    DatabaseError,
    DeleteOutcome,
    FieldErrors,
    FormOutcome,
    RedirectTo,
)
from app.config import get_settings
from app.db.schema import invoices
from app.ports import StatementExecutor, ViewInvalidator
from app.validation import (
    RawForm,
    ValidationFailure,
    amount_in_cents,
    validate_invoice_form,
)

logger = logging.getLogger(__name__)

INVOICES_PATH = "/dashboard/invoices"


def current_date(tz_name: Optional[str] = None) -> date:
    """
    Current calendar date in the configured time zone (UTC by default).
    """
    zone = ZoneInfo(tz_name or get_settings().timezone)
    return datetime.now(zone).date()


def create_invoice(
    form: RawForm,
    db: StatementExecutor,
    views: ViewInvalidator,
    today: Optional[date] = None,
) -> FormOutcome:
    validated = validate_invoice_form(form)
    if isinstance(validated, ValidationFailure):
        logger.info("Invoice create rejected: %s", sorted(validated.errors))
        return FieldErrors(
            errors=validated.errors,
            message="Missing Fields. Failed to Create Invoice.",
        )

    record = validated.record
    cents = amount_in_cents(record.amount)
    invoice_date = today or current_date()

    stmt = invoices.insert().values(
        customer_id=record.customer_id,
        amount=cents,
        status=record.status,
        date=invoice_date,
    )
    try:
        db.execute(stmt)
    except SQLAlchemyError:
        logger.exception("Failed to create invoice for customer %s", record.customer_id)
        return DatabaseError(message="Database Error: Failed to Create Invoice.")

    logger.info(
        "Created invoice for customer %s (%s cents, %s, %s)",
        record.customer_id, cents, record.status, invoice_date.isoformat(),
    )
    views.revalidate_path(INVOICES_PATH)
    return RedirectTo(path=INVOICES_PATH)


def update_invoice(
    invoice_id: str,
    form: RawForm,
    db: StatementExecutor,
    views: ViewInvalidator,
) -> FormOutcome:
    validated = validate_invoice_form(form)
    if isinstance(validated, ValidationFailure):
        logger.info("Invoice %s update rejected: %s", invoice_id, sorted(validated.errors))
        return FieldErrors(
            errors=validated.errors,
            message="Missing Fields. Failed to Update Invoice.",
        )

    record = validated.record
    cents = amount_in_cents(record.amount)

    # Unknown ids update zero rows; that is not an error.
    stmt = (
        invoices.update()
        .where(invoices.c.id == invoice_id)
        .values(
            customer_id=record.customer_id,
            amount=cents,
            status=record.status,
        )
    )
    try:
        rowcount = db.execute(stmt)
    except SQLAlchemyError:
        logger.exception("Failed to update invoice %s", invoice_id)
        return DatabaseError(message="Database Error: Failed to Update Invoice.")

    logger.info("Updated invoice %s (%s row(s))", invoice_id, rowcount)
    views.revalidate_path(INVOICES_PATH)
    return RedirectTo(path=INVOICES_PATH)


def delete_invoice(
    invoice_id: str,
    db: StatementExecutor,
    views: ViewInvalidator,
) -> DeleteOutcome:
    stmt = invoices.delete().where(invoices.c.id == invoice_id)
    try:
        rowcount = db.execute(stmt)
    except SQLAlchemyError:
        logger.exception("Failed to delete invoice %s", invoice_id)
        return DatabaseError(message="Database Error: Failed to Delete Invoice.")

    logger.info("Deleted invoice %s (%s row(s))", invoice_id, rowcount)
    views.revalidate_path(INVOICES_PATH)
    return ActionMessage(message="Deleted Invoice.")
