# app/api/invoices.py

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from sqlalchemy.engine import Engine

from app.actions.invoices import (
    INVOICES_PATH,
    create_invoice,
    delete_invoice,
    update_invoice,
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
from app.db.queries import fetch_invoice_by_id, fetch_invoices
from app.models.invoices import InvoiceOut

router = APIRouter(prefix=INVOICES_PATH, tags=["invoices"])


@router.get("", response_model=List[InvoiceOut])
def list_invoices(
    engine: Engine = Depends(get_db_engine),
    views: ViewCache = Depends(get_view_cache),
) -> List[InvoiceOut]:
    """
    All invoices, newest first. Served from the view cache until a mutation
    revalidates it.
    """
    return views.get_or_render(INVOICES_PATH, lambda: fetch_invoices(engine))


@router.post("/create")
def post_create_invoice(
    form: Dict[str, Optional[str]] = Depends(read_form),
    db: EngineExecutor = Depends(get_executor),
    views: ViewCache = Depends(get_view_cache),
) -> Response:
    return outcome_response(create_invoice(form, db, views))


@router.get("/{invoice_id}/edit", response_model=InvoiceOut)
def get_invoice(
    invoice_id: str,
    engine: Engine = Depends(get_db_engine),
) -> InvoiceOut:
    """
    Look up a single invoice for the edit form.
    """
    invoice = fetch_invoice_by_id(engine, invoice_id)
    if invoice is None:
        raise HTTPException(status_code=404, detail="Invoice not found")
    return invoice


@router.post("/{invoice_id}/edit")
def post_update_invoice(
    invoice_id: str,
    form: Dict[str, Optional[str]] = Depends(read_form),
    db: EngineExecutor = Depends(get_executor),
    views: ViewCache = Depends(get_view_cache),
) -> Response:
    return outcome_response(update_invoice(invoice_id, form, db, views))


@router.post("/{invoice_id}/delete")
def post_delete_invoice(
    invoice_id: str,
    db: EngineExecutor = Depends(get_executor),
    views: ViewCache = Depends(get_view_cache),
) -> Response:
    return outcome_response(delete_invoice(invoice_id, db, views))
