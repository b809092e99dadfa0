from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List

import httpx
from postgrest.exceptions import APIError
from supabase import Client
from supabase_auth.errors import AuthError

from ..core.exceptions import BackendError

logger = logging.getLogger(__name__)

ClientProvider = Callable[[], Client]


@contextmanager
def backend_call(operation: str) -> Iterator[None]:
    """Translate SDK-reported errors into ``BackendError``.

    Only SDK and transport errors are wrapped; anything else propagates as-is.
    """
    try:
        yield
    except (AuthError, APIError, httpx.HTTPError) as e:
        logger.warning("supabase %s failed: %s", operation, getattr(e, "message", None) or e)
        raise BackendError(operation) from e


def rows(response: Any) -> List[Dict[str, Any]]:
    data = getattr(response, "data", None)
    return list(data or [])
