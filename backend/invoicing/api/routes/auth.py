"""Auth Routes — login form endpoint.

Invariants:
    - Success surfaces as RedirectRequired -> 303 (issued by the credentials provider)
    - Known failures answer 401 with {"message": <display string>}
    - Unknown failures propagate to the generic 500 handler
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from invoicing.config import get_settings
from invoicing.infrastructure.database import get_db
from invoicing.infrastructure.user_repository import SqlUserRepository
from invoicing.services.authenticate import authenticate
from invoicing.services.credentials_provider import CredentialsProvider

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


def get_credential_verifier(
    db: AsyncSession = Depends(get_db),
) -> CredentialsProvider:
    return CredentialsProvider(
        SqlUserRepository(db), get_settings().dashboard_path,
    )


@router.post("/login")
async def login(
    request: Request,
    verifier: CredentialsProvider = Depends(get_credential_verifier),
):
    """Sign in from form fields email, password and optional redirectTo."""
    form = await request.form()
    message = await authenticate(None, form, verifier=verifier)
    if message is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED, content={"message": message},
    )
