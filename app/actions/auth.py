# app/actions/auth.py

import logging
from typing import Union

from app.actions.results import RedirectTo
from app.auth.errors import AuthError
from app.ports import IdentityProvider
from app.validation import RawForm

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials."
SOMETHING_WENT_WRONG = "Something went wrong."


def authenticate(form: RawForm, identity: IdentityProvider) -> Union[str, RedirectTo]:
    """
    Sign in with the credentials provider.

    Returns the provider's redirect on success, or a user-facing message for a
    classified AuthError. Any other exception propagates.
    """
    try:
        return identity.sign_in("credentials", form)
    except AuthError as error:
        logger.warning("Sign-in failed: %s", error.type)
        if error.type == "CredentialsSignin":
            return INVALID_CREDENTIALS
        return SOMETHING_WENT_WRONG
