"""Owner identity resolution

Authentication happens upstream; the gateway forwards the authenticated
owner id in the X-Owner-Id header.
"""

from typing import Optional
from fastapi import Header, Request, status

from libs.result import Error
from src.api.error import ClientError

OWNER_HEADER = "X-Owner-Id"


async def get_current_owner_id(
    request: Request,
    x_owner_id: Optional[str] = Header(default=None, alias=OWNER_HEADER),
) -> str:
    if x_owner_id and x_owner_id.strip():
        return x_owner_id.strip()

    config = request.app.state.config
    if config.AUTH_DISABLED:
        return config.DEFAULT_OWNER_ID

    raise ClientError(
        Error(code="UNAUTHENTICATED", message=f"Missing {OWNER_HEADER} header"),
        status_code=status.HTTP_401_UNAUTHORIZED,
    )
