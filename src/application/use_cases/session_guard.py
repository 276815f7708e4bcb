from __future__ import annotations

from typing import Any, Awaitable, Callable

import httpx
from loguru import logger

from src.domain.errors import AuthenticationRequired, RequestError
from src.infrastructure.session.session_context import SessionContext


async def load_authenticated(session: SessionContext, fetch: Callable[[], Awaitable[Any]]) -> Any:
    """Run a page's initial fetch behind the session check.

    A missing token or a failed fetch (error status, unreachable backend or
    an unreadable response) both end the session: the token is
    cleared and AuthenticationRequired is raised for the caller to send the
    user back to login.
    """
    if not session.is_authenticated():
        raise AuthenticationRequired()
    try:
        return await fetch()
    except (RequestError, httpx.HTTPError, ValueError) as exc:
        # ValueError covers error pages that are not JSON
        logger.info(f"Clearing session after failed load: {exc!r}")
        session.remove_token()
        raise AuthenticationRequired() from exc
