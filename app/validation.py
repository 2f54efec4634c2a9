# app/validation.py
"""
Form validation for the dashboard actions.

Raw form input arrives as a mapping of field name -> string (or None when the
field was not posted). Each validator returns either a ValidationSuccess
carrying the typed record, or a ValidationFailure carrying a field error map.
Validators never raise.

Server-set fields (id, date, image_url) are never read from the form.
"""

from decimal import ROUND_HALF_UP, Decimal, DecimalException
from typing import Dict, Generic, List, Mapping, Optional, TypeVar, Union

from pydantic import BaseModel

from app.models.customers import CustomerForm
from app.models.invoices import InvoiceForm

CUSTOMER_ID_ERROR = "Please select a customer."
AMOUNT_ERROR = "Please enter an amount greater than $0."
STATUS_ERROR = "Please select an invoice status."
NAME_ERROR = "Please enter the customer name."
EMAIL_ERROR = "Please enter the customer email."

INVOICE_STATUSES = ("pending", "paid")

# largest value a portable 32-bit INTEGER column holds
MAX_AMOUNT_CENTS = 2**31 - 1

RecordT = TypeVar("RecordT", InvoiceForm, CustomerForm)

RawForm = Mapping[str, Optional[str]]


class ValidationSuccess(BaseModel, Generic[RecordT]):
    record: RecordT


class ValidationFailure(BaseModel):
    errors: Dict[str, List[str]]


InvoiceValidation = Union[ValidationSuccess[InvoiceForm], ValidationFailure]
CustomerValidation = Union[ValidationSuccess[CustomerForm], ValidationFailure]


# ---- Field helpers ----

def _required_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_amount(value: Optional[str]) -> Optional[Decimal]:
    """
    Coerce a form value to a positive Decimal, or None if it is not one.

    The amount must also fit the invoices.amount INTEGER column once
    converted to cents.
    """
    if value is None:
        return None
    try:
        amount = Decimal(value.strip())
    except DecimalException:
        return None
    if not amount.is_finite() or amount <= 0:
        return None
    try:
        cents = amount_in_cents(amount)
    except DecimalException:
        # too large to express in whole cents
        return None
    if cents <= 0 or cents > MAX_AMOUNT_CENTS:
        return None
    return amount


def amount_in_cents(amount: Decimal) -> int:
    """
    Dollars -> integer cents, e.g. Decimal("49.99") -> 4999.

    Sub-cent fractions round half up.
    """
    cents = (amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return int(cents)


# ---- Validators ----

def validate_invoice_form(raw: RawForm) -> InvoiceValidation:
    errors: Dict[str, List[str]] = {}

    customer_id = _required_text(raw.get("customerId"))
    if customer_id is None:
        errors.setdefault("customerId", []).append(CUSTOMER_ID_ERROR)

    amount = parse_amount(raw.get("amount"))
    if amount is None:
        errors.setdefault("amount", []).append(AMOUNT_ERROR)

    status = raw.get("status")
    if status not in INVOICE_STATUSES:
        errors.setdefault("status", []).append(STATUS_ERROR)

    if errors:
        return ValidationFailure(errors=errors)

    return ValidationSuccess[InvoiceForm](
        record=InvoiceForm(customer_id=customer_id, amount=amount, status=status)
    )


def validate_customer_form(raw: RawForm) -> CustomerValidation:
    errors: Dict[str, List[str]] = {}

    name = _required_text(raw.get("name"))
    if name is None:
        errors.setdefault("name", []).append(NAME_ERROR)

    email = _required_text(raw.get("email"))
    if email is None:
        errors.setdefault("email", []).append(EMAIL_ERROR)

    if errors:
        return ValidationFailure(errors=errors)

    return ValidationSuccess[CustomerForm](
        record=CustomerForm(name=name, email=email)
    )
