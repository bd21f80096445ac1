"""Form State — the shape every mutation handler hands back to the form.

Invariants:
    - errors is keyed by form field name (customerId, amount, status)
    - errors absent + message present == persistence failure (UI shows a banner)
    - errors present == validation failure (UI highlights fields)
    - to_response() drops absent keys, so a persistence failure has no "errors" key

Design Decisions:
    - One model for both prior and next state: handlers accept the previous
      state for interface symmetry with stateful forms and ignore it
"""

from pydantic import BaseModel


class FormState(BaseModel):
    """Handler result: optional per-field errors and/or a flat message."""
    errors: dict[str, list[str]] | None = None
    message: str | None = None

    @property
    def is_validation_failure(self) -> bool:
        return bool(self.errors)

    def to_response(self) -> dict:
        return self.model_dump(exclude_none=True)
