"""Shared customer lookup errors"""

from libs.result import Error, ErrorKind


def customer_not_found(customer_id: str) -> Error:
    return Error(
        code="CUSTOMER_NOT_FOUND",
        message=f"Customer {customer_id} not found",
        kind=ErrorKind.NOT_FOUND,
    )


def email_exists(email: str) -> Error:
    return Error(
        code="CUSTOMER_EMAIL_EXISTS",
        message="Customer with this email already exists",
        reason=f"email={email}",
        kind=ErrorKind.CONFLICT,
    )
