# app/auth/errors.py


class AuthError(Exception):
    """
    Sign-in failure raised by an identity provider.

    `type` classifies the failure, e.g. "CredentialsSignin" when the
    email/password pair does not match, "Configuration" for an unknown
    provider, "CallbackRouteError" when the provider itself broke.
    """

    def __init__(self, type: str, message: str = "") -> None:
        super().__init__(message or type)
        self.type = type
