from datetime import date

from sqlalchemy import func, select

from app.actions.customers import (
    DEFAULT_IMAGE_URL,
    create_customer,
    delete_customer,
    update_customer,
)
from app.actions.invoices import (
    create_invoice,
    current_date,
    delete_invoice,
    update_invoice,
)
from app.actions.results import ActionMessage, DatabaseError, FieldErrors, RedirectTo
from app.db.schema import customers, invoices


def _invoice_rows(engine):
    with engine.connect() as conn:
        return conn.execute(select(invoices)).mappings().all()


def _insert_invoice(engine, invoice_id="i1", amount=1500, status="pending"):
    with engine.begin() as conn:
        conn.execute(
            invoices.insert().values(
                id=invoice_id,
                customer_id="c1",
                amount=amount,
                status=status,
                date=date(2023, 6, 5),
            )
        )


# ---- Invoices ----

def test_create_invoice_inserts_revalidates_and_redirects(engine, db, views):
    outcome = create_invoice(
        {"customerId": "c1", "amount": "100", "status": "pending"},
        db,
        views,
        today=date(2024, 3, 1),
    )

    assert outcome == RedirectTo(path="/dashboard/invoices")
    assert len(db.statements) == 1
    assert views.paths == ["/dashboard/invoices"]

    rows = _invoice_rows(engine)
    assert len(rows) == 1
    assert rows[0]["customer_id"] == "c1"
    assert rows[0]["amount"] == 10000
    assert rows[0]["status"] == "pending"
    assert rows[0]["date"] == date(2024, 3, 1)
    assert rows[0]["id"]


def test_create_invoice_defaults_to_today(engine, db, views):
    create_invoice({"customerId": "c1", "amount": "49.99", "status": "paid"}, db, views)

    row = _invoice_rows(engine)[0]
    assert row["amount"] == 4999
    assert row["date"] == current_date()


def test_create_invoice_validation_failure_skips_database(db, views):
    outcome = create_invoice(
        {"customerId": "c1", "amount": "0", "status": "overdue"}, db, views
    )

    assert isinstance(outcome, FieldErrors)
    assert outcome.message == "Missing Fields. Failed to Create Invoice."
    assert outcome.errors == {
        "amount": ["Please enter an amount greater than $0."],
        "status": ["Please select an invoice status."],
    }
    assert db.statements == []
    assert views.paths == []


def test_create_invoice_database_error(failing_db, views):
    outcome = create_invoice(
        {"customerId": "c1", "amount": "10", "status": "paid"}, failing_db, views
    )

    assert outcome == DatabaseError(message="Database Error: Failed to Create Invoice.")
    assert len(failing_db.statements) == 1
    assert views.paths == []


def test_update_invoice_overwrites_mutable_fields(engine, db, views):
    _insert_invoice(engine)

    outcome = update_invoice(
        "i1", {"customerId": "c1", "amount": "20.5", "status": "paid"}, db, views
    )

    assert outcome == RedirectTo(path="/dashboard/invoices")
    assert views.paths == ["/dashboard/invoices"]
    row = _invoice_rows(engine)[0]
    assert row["amount"] == 2050
    assert row["status"] == "paid"
    assert row["date"] == date(2023, 6, 5)


def test_update_missing_invoice_still_redirects(engine, db, views):
    outcome = update_invoice(
        "nope", {"customerId": "c1", "amount": "1", "status": "paid"}, db, views
    )

    assert outcome == RedirectTo(path="/dashboard/invoices")
    assert _invoice_rows(engine) == []


def test_update_invoice_validation_failure(db, views):
    outcome = update_invoice("i1", {"amount": "-5", "status": "paid"}, db, views)

    assert isinstance(outcome, FieldErrors)
    assert outcome.message == "Missing Fields. Failed to Update Invoice."
    assert outcome.errors == {
        "customerId": ["Please select a customer."],
        "amount": ["Please enter an amount greater than $0."],
    }
    assert db.statements == []


def test_update_invoice_database_error(failing_db, views):
    outcome = update_invoice(
        "i1", {"customerId": "c1", "amount": "1", "status": "paid"}, failing_db, views
    )
    assert outcome == DatabaseError(message="Database Error: Failed to Update Invoice.")
    assert views.paths == []


def test_delete_invoice(engine, db, views):
    _insert_invoice(engine)

    outcome = delete_invoice("i1", db, views)

    assert outcome == ActionMessage(message="Deleted Invoice.")
    assert views.paths == ["/dashboard/invoices"]
    assert _invoice_rows(engine) == []


def test_delete_missing_invoice_reports_success(db, views):
    assert delete_invoice("missing", db, views) == ActionMessage(message="Deleted Invoice.")


def test_delete_invoice_database_error(failing_db, views):
    outcome = delete_invoice("i1", failing_db, views)
    assert outcome == DatabaseError(message="Database Error: Failed to Delete Invoice.")
    assert views.paths == []


# ---- Customers ----

def _customer(engine, name):
    with engine.connect() as conn:
        return conn.execute(
            select(customers).where(customers.c.name == name)
        ).mappings().first()


def test_create_customer_uses_placeholder_image(engine, db, views):
    outcome = create_customer(
        {"name": "Lee Robinson", "email": "lee@robinson.com", "image_url": "/x.png"},
        db,
        views,
    )

    assert outcome == RedirectTo(path="/dashboard/customers")
    assert views.paths == ["/dashboard/customers"]
    row = _customer(engine, "Lee Robinson")
    assert row["email"] == "lee@robinson.com"
    assert row["image_url"] == DEFAULT_IMAGE_URL


def test_create_customer_database_error(failing_db, views):
    outcome = create_customer(
        {"name": "Lee Robinson", "email": "lee@robinson.com"}, failing_db, views
    )

    assert outcome == DatabaseError(message="Database Error: Failed to Create Customer.")
    assert not isinstance(outcome, RedirectTo)
    assert views.paths == []


def test_create_customer_validation_failure(db, views):
    outcome = create_customer({"name": "Lee"}, db, views)

    assert outcome == FieldErrors(
        errors={"email": ["Please enter the customer email."]},
        message="Missing Fields. Failed to Create Customer.",
    )
    assert db.statements == []


def test_update_customer_missing_name_runs_no_sql(db, views):
    outcome = update_customer("u1", {"name": "", "email": "a@b.com"}, db, views)

    assert isinstance(outcome, FieldErrors)
    assert outcome.errors == {"name": ["Please enter the customer name."]}
    assert outcome.message == "Missing Fields. Failed to Update Customer."
    assert db.statements == []
    assert views.paths == []


def test_update_customer(engine, db, views):
    outcome = update_customer(
        "c1", {"name": "Good Rabbit", "email": "good@rabbit.com"}, db, views
    )

    assert outcome == RedirectTo(path="/dashboard/customers")
    row = _customer(engine, "Good Rabbit")
    assert row["id"] == "c1"
    assert row["email"] == "good@rabbit.com"
    assert row["image_url"] == "/customers/evil-rabbit.png"


def test_update_customer_database_error(failing_db, views):
    outcome = update_customer("c1", {"name": "A", "email": "a@b.com"}, failing_db, views)
    assert outcome == DatabaseError(message="Database Error: Failed to Update Customer.")


def test_delete_customer(engine, db, views):
    outcome = delete_customer("c1", db, views)

    assert outcome == ActionMessage(message="Deleted Customer.")
    assert views.paths == ["/dashboard/customers"]
    with engine.connect() as conn:
        assert conn.execute(select(func.count()).select_from(customers)).scalar_one() == 0


def test_delete_missing_customer_reports_success(db, views):
    assert delete_customer("ghost", db, views) == ActionMessage(message="Deleted Customer.")


def test_delete_customer_database_error(failing_db, views):
    outcome = delete_customer("c1", failing_db, views)
    assert outcome == DatabaseError(message="Database Error: Failed to Delete Customer.")


# ---- Limits and referential integrity ----

def test_create_invoice_amount_beyond_column_is_field_error(engine, db, views):
    outcome = create_invoice(
        {"customerId": "c1", "amount": "1e17", "status": "paid"}, db, views
    )

    assert isinstance(outcome, FieldErrors)
    assert outcome.errors == {"amount": ["Please enter an amount greater than $0."]}
    assert db.statements == []
    assert _invoice_rows(engine) == []


def test_create_invoice_for_unknown_customer(engine, db, views):
    outcome = create_invoice(
        {"customerId": "ghost", "amount": "5", "status": "paid"}, db, views
    )

    assert outcome == DatabaseError(message="Database Error: Failed to Create Invoice.")
    assert views.paths == []
    assert _invoice_rows(engine) == []


def test_update_invoice_to_unknown_customer(engine, db, views):
    _insert_invoice(engine)

    outcome = update_invoice(
        "i1", {"customerId": "ghost", "amount": "5", "status": "paid"}, db, views
    )

    assert outcome == DatabaseError(message="Database Error: Failed to Update Invoice.")
    assert _invoice_rows(engine)[0]["customer_id"] == "c1"


def test_delete_customer_cascades_to_invoices(engine, db, views):
    _insert_invoice(engine, "i1")
    _insert_invoice(engine, "i2", status="paid")

    outcome = delete_customer("c1", db, views)

    assert outcome == ActionMessage(message="Deleted Customer.")
    assert _invoice_rows(engine) == []
