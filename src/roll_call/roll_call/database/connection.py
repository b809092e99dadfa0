from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple
from urllib.parse import urlparse

import httpx
from supabase import Client, ClientOptions, create_client


@dataclass
class SupabaseConfig:
    url: str
    key: str

    @property
    def host(self) -> str:
        return urlparse(self.url).netloc or self.url


class SupabaseConnection:
    """Singleton-like Supabase client factory, one instance per (url, key).

    Note: We create short-lived clients per request (each one carries the auth
    state of a single operator), so token auto-refresh and persistence are off.
    """

    _instances: Dict[Tuple[str, str], "SupabaseConnection"] = {}

    def __init__(self, config: SupabaseConfig):
        self._config = config

    @classmethod
    def get_instance(cls, config: SupabaseConfig) -> "SupabaseConnection":
        key = (config.url, config.key)
        if key not in cls._instances:
            cls._instances[key] = SupabaseConnection(config)
        return cls._instances[key]

    @property
    def config(self) -> SupabaseConfig:
        return self._config

    def connect(self) -> Client:
        return create_client(
            self._config.url,
            self._config.key,
            options=ClientOptions(auto_refresh_token=False, persist_session=False),
        )


def close_client(client: Any) -> None:
    """Close the HTTP pools a short-lived client opened (auth, and PostgREST if it was used)."""
    sessions = [getattr(getattr(client, "auth", None), "_http_client", None)]
    postgrest = getattr(client, "_postgrest", None)
    if postgrest is not None:
        sessions.append(getattr(postgrest, "session", None))

    for http in sessions:
        if isinstance(http, httpx.Client) and not http.is_closed:
            http.close()
