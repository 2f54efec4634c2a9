# app/api/auth.py

from typing import Dict, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, Response

from app.actions.auth import authenticate
from app.actions.results import RedirectTo
from app.api.deps import get_identity_provider, read_form
from app.api.responses import outcome_response
from app.auth.credentials import CredentialsProvider

router = APIRouter(tags=["auth"])


@router.post("/login")
def login(
    form: Dict[str, Optional[str]] = Depends(read_form),
    identity: CredentialsProvider = Depends(get_identity_provider),
) -> Response:
    result = authenticate(form, identity)
    if isinstance(result, RedirectTo):
        return outcome_response(result)
    return JSONResponse(status_code=401, content={"message": result})
