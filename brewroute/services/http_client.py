"""Shared HTTP session for outbound provider calls"""
import threading
from typing import Optional

import requests


class ProviderError(RuntimeError):
    """An external data provider failed or returned an unusable payload"""


_lock = threading.Lock()
_session: Optional[requests.Session] = None


def get_http_session() -> requests.Session:
    """
    Return the process-wide requests session, creating it on first use.

    Concurrent first callers block on the lock so only one session is built.
    """
    global _session
    if _session is None:
        with _lock:
            if _session is None:
                session = requests.Session()
                session.headers.update({"Accept": "application/json"})
                _session = session
    return _session


def reset_http_session() -> None:
    """Close the shared session; the next call to get_http_session() builds a new one"""
    global _session
    with _lock:
        if _session is not None:
            _session.close()
            _session = None
