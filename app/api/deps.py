# app/api/deps.py

from typing import Dict, Optional

from fastapi import Depends, Request
from sqlalchemy.engine import Engine

from app.auth.credentials import CredentialsProvider
from app.cache import ViewCache
from app.db.engine import get_engine
from app.db.executor import EngineExecutor

view_cache = ViewCache()


def get_db_engine() -> Engine:
    return get_engine()


def get_executor(engine: Engine = Depends(get_db_engine)) -> EngineExecutor:
    return EngineExecutor(engine)


def get_view_cache() -> ViewCache:
    return view_cache


def get_identity_provider(
    engine: Engine = Depends(get_db_engine),
) -> CredentialsProvider:
    return CredentialsProvider(engine)


async def read_form(request: Request) -> Dict[str, Optional[str]]:
    """
    Posted form fields as plain strings; file uploads are ignored.
    """
    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}
