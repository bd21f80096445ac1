"""Authenticate — login form handler in front of the credential verifier.

Invariants:
    - Success returns None: the verifier performs navigation itself
    - AuthError("CredentialsSignin") -> "Invalid credentials."
    - Any other AuthError type -> "Something went wrong."
    - Every other exception (including the redirect signal) propagates unchanged
"""

import logging

from invoicing.core.domain_types import CREDENTIALS_STRATEGY, FieldMap
from invoicing.core.errors import AuthError
from invoicing.core.format_messages import describe_auth_error
from invoicing.core.repository_protocols import CredentialVerifier

logger = logging.getLogger(__name__)


async def authenticate(
    prev_state: str | None,
    form: FieldMap,
    *,
    verifier: CredentialVerifier,
) -> str | None:
    """Sign in with the credentials strategy; return a display string on failure."""
    try:
        await verifier.sign_in(CREDENTIALS_STRATEGY, form)
    except AuthError as e:
        logger.info(
            "Sign-in rejected",
            extra={"error_code": str(e.type), "strategy": CREDENTIALS_STRATEGY},
        )
        return describe_auth_error(e.type)
    return None
