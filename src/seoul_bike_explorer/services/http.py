"""
HTTP session shared by every download in the project.

The dataset host occasionally answers with 5xx or throttles, so requests go
through a ``requests.Session`` with an urllib3 retry adapter and a default
timeout.

Usage::

    from seoul_bike_explorer.services.http import session

    resp = session.get(url)
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from seoul_bike_explorer import __version__

#: Exponential backoff on throttling and gateway errors, idempotent methods only.
DEFAULT_RETRY = Retry(
    total=3,
    backoff_factor=1,  # 0s, 2s, 4s between retries
    status_forcelist=[429, 500, 502, 503, 504],
    allowed_methods=["GET", "HEAD"],
    raise_on_status=False,  # callers use resp.raise_for_status()
)

DEFAULT_TIMEOUT = 60  # seconds; the full CSV is ~600 KB

USER_AGENT = f"seoul-bike-explorer/{__version__}"


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = USER_AGENT,
) -> requests.Session:
    """
    Build a session with the retry adapter mounted for http and https.

    Args:
        retry: Retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Timeout applied when a request does not pass its own.
        user_agent: Value of the ``User-Agent`` header.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    for prefix in ("https://", "http://"):
        s.mount(prefix, adapter)
    s.headers["User-Agent"] = user_agent

    send = s.send

    def _send(prepared: requests.PreparedRequest, **kwargs: object) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send  # type: ignore[method-assign]
    return s


#: Module-level session.
session: requests.Session = create_session()
