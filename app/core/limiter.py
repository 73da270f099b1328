"""
Shared slowapi rate limiter, keyed on the Authorization header.
"""
from slowapi import Limiter
from starlette.requests import Request


def get_authorization_header(request: Request) -> str:
    """
    Extract authorization header for rate limiting.
    Anonymous callers share one bucket.
    """
    auth = request.headers.get("Authorization", "")
    return auth or "anonymous"


limiter = Limiter(key_func=get_authorization_header)
