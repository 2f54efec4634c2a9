# app/ports.py
"""
Collaborator interfaces used by the dashboard actions.

Each action talks to the outside world only through these: one statement
executor, one view invalidator and, for sign-in, one identity provider.
"""

from typing import Mapping, Optional, Protocol

from sqlalchemy.sql.expression import Executable

from app.actions.results import RedirectTo


class StatementExecutor(Protocol):
    """Runs a single SQLAlchemy Core statement in its own transaction."""

    def execute(self, statement: Executable) -> int:
        """Execute the statement and return the number of rows affected.

        Raises sqlalchemy.exc.SQLAlchemyError on failure.
        """
        ...


class ViewInvalidator(Protocol):
    """Marks cached renderings under a path as stale."""

    def revalidate_path(self, path: str) -> None:
        ...


class IdentityProvider(Protocol):
    """Signs a user in with a named provider."""

    def sign_in(
        self, provider: str, credentials: Mapping[str, Optional[str]]
    ) -> RedirectTo:
        """Return where to send the user on success.

        Raises app.auth.errors.AuthError on failure.
        """
        ...
