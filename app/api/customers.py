# app/api/customers.py

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from sqlalchemy.engine import Engine

from app.actions.customers import (
    CUSTOMERS_PATH,
    create_customer,
    delete_customer,
    update_customer,
)
from app.api.deps import (
    get_db_engine,
    get_executor,
    get_view_cache,
    read_form,
)
from app.api.responses import outcome_response
from app.cache import ViewCache
from app.db.executor import EngineExecutor
from app.db.queries import fetch_customer_by_id, fetch_customers
from app.models.customers import CustomerOut, CustomerSummaryOut

router = APIRouter(prefix=CUSTOMERS_PATH, tags=["customers"])


@router.get("", response_model=List[CustomerSummaryOut])
def list_customers(
    engine: Engine = Depends(get_db_engine),
    views: ViewCache = Depends(get_view_cache),
) -> List[CustomerSummaryOut]:
    """
    Return all customers with their invoice totals.
    """
    return views.get_or_render(CUSTOMERS_PATH, lambda: fetch_customers(engine))


@router.post("/create")
def post_create_customer(
    form: Dict[str, Optional[str]] = Depends(read_form),
    db: EngineExecutor = Depends(get_executor),
    views: ViewCache = Depends(get_view_cache),
) -> Response:
    return outcome_response(create_customer(form, db, views))


@router.get("/{customer_id}/edit", response_model=CustomerOut)
def get_customer(
    customer_id: str,
    engine: Engine = Depends(get_db_engine),
) -> CustomerOut:
    """
    Return a single customer by ID.
    """
    customer = fetch_customer_by_id(engine, customer_id)
    if customer is None:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer


@router.post("/{customer_id}/edit")
def post_update_customer(
    customer_id: str,
    form: Dict[str, Optional[str]] = Depends(read_form),
    db: EngineExecutor = Depends(get_executor),
    views: ViewCache = Depends(get_view_cache),
) -> Response:
    return outcome_response(update_customer(customer_id, form, db, views))


@router.post("/{customer_id}/delete")
def post_delete_customer(
    customer_id: str,
    db: EngineExecutor = Depends(get_executor),
    views: ViewCache = Depends(get_view_cache),
) -> Response:
    return outcome_response(delete_customer(customer_id, db, views))
