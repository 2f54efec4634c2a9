# app/actions/results.py
"""
Terminal outcomes of a dashboard action.

An action ends in exactly one of these. Redirects are values, so callers decide
how to turn them into a response.
"""

from typing import Dict, List, Literal, Union

from pydantic import BaseModel


class FieldErrors(BaseModel):
    kind: Literal["validation"] = "validation"
    errors: Dict[str, List[str]]
    message: str


class DatabaseError(BaseModel):
    kind: Literal["database"] = "database"
    message: str


class RedirectTo(BaseModel):
    kind: Literal["redirect"] = "redirect"
    path: str


class ActionMessage(BaseModel):
    kind: Literal["message"] = "message"
    message: str


FormOutcome = Union[FieldErrors, DatabaseError, RedirectTo]
DeleteOutcome = Union[DatabaseError, ActionMessage]
