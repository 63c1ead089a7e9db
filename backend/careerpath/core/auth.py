"""Caller identity.

Sign-in is handled by an external identity provider that sits in front of
this service and forwards the authenticated user id in a request header
(``X-User-Id`` by default). Requests without the header fall back to the
configured guest user so the API stays usable in local development.
"""

from fastapi import Request

from careerpath.core.config import get_settings
from careerpath.core.logging import bind_request_context


async def get_auth_user(request: Request) -> str:
    """Get the id of the user making an HTTP request.

    Async so the log context it binds lives in the request's own context
    rather than a threadpool copy.

    Args:
        request: HTTP request object (injected by FastAPI)

    Returns:
        User ID (str)
    """
    settings = get_settings()
    user_id = request.headers.get(settings.USER_ID_HEADER, "").strip()
    if not user_id:
        user_id = settings.DEFAULT_USER_ID

    bind_request_context(user_id=user_id, path=request.url.path)
    return user_id

