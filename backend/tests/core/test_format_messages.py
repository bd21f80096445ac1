"""Message Formatting — pure tests for State builders and auth display strings.

Tests cover:
    - Validation failure state carries errors and the "Missing Fields" banner
    - Database failure state carries only a message containing "Database Error"
    - Each mutation kind names its verb
    - CredentialsSignin maps to "Invalid credentials.", every other type to the generic string
"""

import pytest

from invoicing.core.domain_types import AuthErrorType, MutationKind
from invoicing.core.format_messages import (
    database_failed_state,
    deleted_state,
    describe_auth_error,
    validation_failed_state,
)


def test_validation_failed_state_for_create():
    errors = {"amount": ["Please enter an amount greater than $0."]}
    assert validation_failed_state(MutationKind.CREATE, errors) == {
        "errors": errors,
        "message": "Missing Fields. Failed to Create Invoice.",
    }


@pytest.mark.parametrize("kind, expected", [
    (MutationKind.CREATE, "Database Error: Failed to Create Invoice."),
    (MutationKind.UPDATE, "Database Error: Failed to Update Invoice."),
    (MutationKind.DELETE, "Database Error: Failed to Delete Invoice."),
])
def test_database_failed_state_has_message_only(kind, expected):
    state = database_failed_state(kind)
    assert state == {"message": expected}
    assert "errors" not in state


def test_deleted_state():
    assert deleted_state() == {"message": "Deleted Invoice!"}


def test_credentials_signin_maps_to_invalid_credentials():
    assert describe_auth_error("CredentialsSignin") == "Invalid credentials."
    assert describe_auth_error(AuthErrorType.CREDENTIALS_SIGNIN) == "Invalid credentials."


@pytest.mark.parametrize("error_type", [
    AuthErrorType.CALLBACK_ROUTE_ERROR.value,
    AuthErrorType.ACCESS_DENIED.value,
    AuthErrorType.CONFIGURATION.value,
    "SomeFutureType",
])
def test_other_auth_types_map_to_generic_message(error_type):
    assert describe_auth_error(error_type) == "Something went wrong."
