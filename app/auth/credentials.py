# app/auth/credentials.py

import logging
from typing import Mapping, Optional

from pydantic import BaseModel, EmailStr, Field, ValidationError
from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from app.actions.results import RedirectTo
from app.auth.errors import AuthError
from app.auth.passwords import verify_password
from app.db.schema import users

logger = logging.getLogger(__name__)

CREDENTIALS_PROVIDER = "credentials"
SIGNED_IN_PATH = "/dashboard"


class SignInCredentials(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)


class CredentialsProvider:
    """
    Email/password identity provider backed by the users table.
    """

    def __init__(self, engine: Engine, redirect_to: str = SIGNED_IN_PATH) -> None:
        self.engine = engine
        self.redirect_to = redirect_to

    def _password_hash_for(self, email: str) -> Optional[str]:
        stmt = select(users.c.password).where(users.c.email == email)
        with self.engine.connect() as conn:
            return conn.execute(stmt).scalar_one_or_none()

    def sign_in(
        self, provider: str, credentials: Mapping[str, Optional[str]]
    ) -> RedirectTo:
        if provider != CREDENTIALS_PROVIDER:
            raise AuthError("Configuration", f"Unknown provider {provider!r}")

        try:
            parsed = SignInCredentials(
                email=credentials.get("email"),
                password=credentials.get("password"),
            )
        except ValidationError:
            raise AuthError("CredentialsSignin")

        try:
            password_hash = self._password_hash_for(parsed.email)
        except SQLAlchemyError as e:
            logger.exception("User lookup failed")
            raise AuthError("CallbackRouteError", "Failed to fetch user.") from e

        if password_hash is None or not verify_password(parsed.password, password_hash):
            raise AuthError("CredentialsSignin")

        logger.info("Signed in %s", parsed.email)
        return RedirectTo(path=self.redirect_to)
