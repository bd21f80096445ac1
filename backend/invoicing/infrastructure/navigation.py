"""Navigation — the default Navigator: ends the request with a redirect signal.

Invariants:
    - redirect() never returns
    - Only same-site relative paths are accepted as redirect targets from user input
"""

from typing import NoReturn

from invoicing.core.errors import RedirectRequired


def redirect(location: str) -> NoReturn:
    """Terminate the current handler; the API layer answers 303 See Other."""
    raise RedirectRequired(location)


def safe_redirect_target(candidate: object, fallback: str) -> str:
    """Use a user-supplied target only when it is a local absolute path."""
    if (
        isinstance(candidate, str)
        and candidate.startswith("/")
        and not candidate.startswith("//")
        and "\\" not in candidate
    ):
        return candidate
    return fallback
