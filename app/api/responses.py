# app/api/responses.py

from typing import Union

from fastapi.responses import JSONResponse, RedirectResponse, Response

from app.actions.results import ActionMessage, DatabaseError, FieldErrors, RedirectTo

_STATUS_BY_KIND = {
    "validation": 422,
    "database": 500,
    "message": 200,
}


def outcome_response(
    outcome: Union[FieldErrors, DatabaseError, RedirectTo, ActionMessage],
) -> Response:
    """
    Turn an action outcome into an HTTP response.

    Redirects become 303 See Other so the browser follows up with a GET.
    """
    if isinstance(outcome, RedirectTo):
        return RedirectResponse(outcome.path, status_code=303)
    return JSONResponse(
        status_code=_STATUS_BY_KIND[outcome.kind],
        content=outcome.model_dump(),
    )
