# app/actions/customers.py

import logging

from sqlalchemy.exc import SQLAlchemyError

from app.actions.results import (
    ActionMessage,
    DatabaseError,
    DeleteOutcome,
    FieldErrors,
    FormOutcome,
    RedirectTo,
)
from app.db.schema import customers
from app.ports import StatementExecutor, ViewInvalidator
from app.validation import RawForm, ValidationFailure, validate_customer_form

logger = logging.getLogger(__name__)

CUSTOMERS_PATH = "/dashboard/customers"
DEFAULT_IMAGE_URL = "/customers/new-user.png"


def create_customer(
    form: RawForm,
    db: StatementExecutor,
    views: ViewInvalidator,
) -> FormOutcome:
    validated = validate_customer_form(form)
    if isinstance(validated, ValidationFailure):
        logger.info("Customer create rejected: %s", sorted(validated.errors))
        return FieldErrors(
            errors=validated.errors,
            message="Missing Fields. Failed to Create Customer.",
        )

    record = validated.record
    stmt = customers.insert().values(
        name=record.name,
        email=record.email,
        image_url=DEFAULT_IMAGE_URL,
    )
    try:
        db.execute(stmt)
    except SQLAlchemyError:
        logger.exception("Failed to create customer %r", record.name)
        return DatabaseError(message="Database Error: Failed to Create Customer.")

    logger.info("Created customer %r", record.name)
    views.revalidate_path(CUSTOMERS_PATH)
    return RedirectTo(path=CUSTOMERS_PATH)


def update_customer(
    customer_id: str,
    form: RawForm,
    db: StatementExecutor,
    views: ViewInvalidator,
) -> FormOutcome:
    validated = validate_customer_form(form)
    if isinstance(validated, ValidationFailure):
        logger.info("Customer %s update rejected: %s", customer_id, sorted(validated.errors))
        return FieldErrors(
            errors=validated.errors,
            message="Missing Fields. Failed to Update Customer.",
        )

    record = validated.record
    stmt = (
        customers.update()
        .where(customers.c.id == customer_id)
        .values(name=record.name, email=record.email)
    )
    try:
        rowcount = db.execute(stmt)
    except SQLAlchemyError:
        logger.exception("Failed to update customer %s", customer_id)
        return DatabaseError(message="Database Error: Failed to Update Customer.")

    logger.info("Updated customer %s (%s row(s))", customer_id, rowcount)
    views.revalidate_path(CUSTOMERS_PATH)
    return RedirectTo(path=CUSTOMERS_PATH)


def delete_customer(
    customer_id: str,
    db: StatementExecutor,
    views: ViewInvalidator,
) -> DeleteOutcome:
    stmt = customers.delete().where(customers.c.id == customer_id)
    try:
        rowcount = db.execute(stmt)
    except SQLAlchemyError:
        logger.exception("Failed to delete customer %s", customer_id)
        return DatabaseError(message="Database Error: Failed to Delete Customer.")

    logger.info("Deleted customer %s (%s row(s))", customer_id, rowcount)
    views.revalidate_path(CUSTOMERS_PATH)
    return ActionMessage(message="Deleted Customer.")
