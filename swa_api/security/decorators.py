from __future__ import annotations

from collections.abc import Callable


def require_authentication() -> Callable:
    """
    Mark a route as requiring a decoded client principal.

    Implementation detail:
    - This decorator does NOT perform auth itself.
    - It attaches metadata that the global security dependency reads
      *after* routing (during dependency resolution), so the route is gated
      even if the YAML config has no entry for it.
    """

    def decorator(fn: Callable) -> Callable:
        setattr(fn, "__security_auth_required__", True)
        return fn

    return decorator
