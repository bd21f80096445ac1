"""Credentials Provider — default CredentialVerifier: e-mail + bcrypt password.

Invariants:
    - Only the "credentials" strategy exists; any other raises AuthError("Configuration")
    - Malformed input, unknown e-mail, and wrong password are indistinguishable:
      all raise AuthError("CredentialsSignin")
    - Datastore failure during lookup raises AuthError("CallbackRouteError")
    - Success ends in navigator(target); target is redirectTo only when it is a local path

Design Decisions:
    - bcrypt.checkpw on the stored hash: users are seeded with bcrypt hashes
    - Session cookies are not issued here; the surrounding deployment owns sessions
"""

import logging

import bcrypt
from pydantic import BaseModel, Field, ValidationError

from invoicing.core.domain_types import AuthErrorType, CREDENTIALS_STRATEGY, FieldMap
from invoicing.core.errors import AuthError, DatabaseError
from invoicing.core.repository_protocols import Navigator, UserRecord, UserRepository
from invoicing.infrastructure.navigation import redirect, safe_redirect_target

logger = logging.getLogger(__name__)


class Credentials(BaseModel):
    """Login form fields."""
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    password: str = Field(min_length=6)


class CredentialsProvider:
    """Verifies e-mail/password against the users table."""

    def __init__(
        self,
        users: UserRepository,
        dashboard_path: str,
        navigator: Navigator = redirect,
    ):
        self.users = users
        self.dashboard_path = dashboard_path
        self.navigator = navigator

    async def sign_in(self, strategy: str, credentials: FieldMap) -> None:
        if strategy != CREDENTIALS_STRATEGY:
            raise AuthError(AuthErrorType.CONFIGURATION.value)

        user = await self._authorize(credentials)
        if user is None:
            raise AuthError(AuthErrorType.CREDENTIALS_SIGNIN.value)

        logger.info("User signed in", extra={"strategy": strategy})
        self.navigator(safe_redirect_target(
            credentials.get("redirectTo"), self.dashboard_path,
        ))

    async def _authorize(self, credentials: FieldMap) -> UserRecord | None:
        try:
            parsed = Credentials.model_validate({
                "email": credentials.get("email"),
                "password": credentials.get("password"),
            })
        except ValidationError:
            return None

        try:
            user = await self.users.get_by_email(parsed.email)
        except DatabaseError as e:
            logger.error(
                f"User lookup failed: {e.message}",
                extra={"error_code": e.code, "strategy": CREDENTIALS_STRATEGY},
            )
            raise AuthError(AuthErrorType.CALLBACK_ROUTE_ERROR.value) from e
        if user is None:
            return None

        if not _password_matches(parsed.password, user.password_hash):
            return None
        return user


def _password_matches(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except ValueError:
        logger.warning("Stored password hash is not a bcrypt hash")
        return False
