"""Invoice Routes — form endpoints for create/update/delete plus the cached listing.

Invariants:
    - Form bodies are passed to the handlers untouched (handlers own validation)
    - A returned State is always a failure for create/update: 400 with errors, 503 without
    - Delete answers 200 with "Deleted Invoice!" or 503
    - Listing pages are cached under settings.invoices_path, one entry per (limit, offset)
    - A page whose query overlapped a mutation is served once but never cached

Design Decisions:
    - POST /{id} for update: HTML forms cannot send PUT
    - Success of create/update surfaces as RedirectRequired -> 303 (error_handlers.py)
"""

import logging

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from invoicing.config import get_settings
from invoicing.core.domain_types import InvoiceId, PathKey
from invoicing.core.format_messages import DELETED_MESSAGE
from invoicing.infrastructure.database import get_db
from invoicing.infrastructure.invoice_repository import SqlInvoiceRepository
from invoicing.infrastructure.view_cache import ListingCache, get_view_cache
from invoicing.schemas.form_state import FormState
from invoicing.services.invoice_actions import InvoiceActions

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/invoices", tags=["invoices"])


def get_invoice_actions(
    db: AsyncSession = Depends(get_db),
    cache: ListingCache = Depends(get_view_cache),
) -> InvoiceActions:
    """FastAPI dependency: handlers wired to the request's DB session."""
    return InvoiceActions(
        SqlInvoiceRepository(db), cache, PathKey(get_settings().invoices_path),
    )


def _failure_response(state: FormState) -> JSONResponse:
    code = (
        status.HTTP_400_BAD_REQUEST if state.is_validation_failure
        else status.HTTP_503_SERVICE_UNAVAILABLE
    )
    return JSONResponse(status_code=code, content=state.to_response())


@router.get("")
async def list_invoices(
    limit: int = Query(10, ge=1, le=100),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db),
    cache: ListingCache = Depends(get_view_cache),
):
    """Latest invoices, served from the listing cache when fresh."""
    path_key = PathKey(get_settings().invoices_path)
    variant = f"{limit}:{offset}"
    cached = cache.get(path_key, variant)
    if cached is not None:
        return cached

    generation = cache.generation(path_key)
    rows = await SqlInvoiceRepository(db).list_page(limit, offset)
    page = {
        "invoices": rows,
        "pagination": {"limit": limit, "offset": offset},
    }
    cache.put(path_key, variant, page, generation)
    return page


@router.post("")
async def create_invoice(
    request: Request, actions: InvoiceActions = Depends(get_invoice_actions),
):
    """Create from form fields customerId, amount, status."""
    form = await request.form()
    state = await actions.create_invoice(None, form)
    return _failure_response(state)


@router.post("/{invoice_id}")
async def update_invoice(
    invoice_id: str,
    request: Request,
    actions: InvoiceActions = Depends(get_invoice_actions),
):
    """Update customer, amount and status of an existing invoice."""
    form = await request.form()
    state = await actions.update_invoice(InvoiceId(invoice_id), form)
    return _failure_response(state)


@router.delete("/{invoice_id}")
async def delete_invoice(
    invoice_id: str, actions: InvoiceActions = Depends(get_invoice_actions),
):
    """Delete an invoice; the listing refreshes in place."""
    state = await actions.delete_invoice(InvoiceId(invoice_id))
    if state.message == DELETED_MESSAGE:
        return state.to_response()
    return _failure_response(state)
