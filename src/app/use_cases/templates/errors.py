"""Shared template lookup errors"""

from libs.result import Error, ErrorKind


def template_not_found(template_id: str) -> Error:
    return Error(
        code="TEMPLATE_NOT_FOUND",
        message=f"Template {template_id} not found",
        kind=ErrorKind.NOT_FOUND,
    )
