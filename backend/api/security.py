"""
Optional shared-secret guard for the catalog reload endpoint.

Reads stay open. When MENU_MATCH_API_KEY is set, POST /api/menu-match/reload
needs the same value in the X-API-Key header.
"""
import hmac
import logging
from typing import Optional

from fastapi import Header, HTTPException

from backend.core.config import settings

logger = logging.getLogger(__name__)


def require_api_key(x_api_key: Optional[str] = Header(None, alias="X-API-Key")) -> None:
    """Reject the request unless it carries the configured reload key."""
    expected = settings.API_KEY
    if not expected:
        return

    if x_api_key is None:
        logger.warning("Catalog reload refused: no X-API-Key header")
        raise HTTPException(status_code=401, detail="Missing API key")

    if not hmac.compare_digest(x_api_key.encode(), expected.encode()):
        logger.warning("Catalog reload refused: wrong API key")
        raise HTTPException(status_code=401, detail="Invalid API key")
