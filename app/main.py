from fastapi import FastAPI

from app.api.auth import router as auth_router
from app.api.customers import router as customers_router
from app.api.invoices import router as invoices_router
from app.logging_config import configure_logging

configure_logging()

app = FastAPI(
    title="Invoices & Customers Dashboard API",
    version="0.1.0",
)

@app.get("/health")
def health_check():
    return {"status": "ok"}

app.include_router(auth_router)
app.include_router(customers_router)
app.include_router(invoices_router)
