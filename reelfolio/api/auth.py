import logging
import secrets

from fastapi import Header, HTTPException, Request

logger = logging.getLogger(__name__)

_BEARER_PREFIX = "Bearer "


def require_admin(request: Request, authorization: str | None = Header(default=None)) -> None:
    """Shared-secret bearer check against the injected ADMIN_PASSWORD setting."""
    password = request.app.state.settings.ADMIN_PASSWORD
    if not password or not authorization or not authorization.startswith(_BEARER_PREFIX):
        logger.info("[auth] rejected | path=%s | reason=missing credentials", request.url.path)
        raise HTTPException(status_code=401, detail="Unauthorized")
    token = authorization[len(_BEARER_PREFIX):]
    if not secrets.compare_digest(token.encode("utf-8"), password.encode("utf-8")):
        logger.info("[auth] rejected | path=%s | reason=bad token", request.url.path)
        raise HTTPException(status_code=401, detail="Unauthorized")
