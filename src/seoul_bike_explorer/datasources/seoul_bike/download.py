"""Download the Seoul bike sharing CSV."""

from __future__ import annotations

from seoul_bike_explorer.services.http import session


def fetch_dataset_csv(url: str) -> bytes:
    """
    Fetch the raw dataset file.

    Args:
        url: Location of the CSV (see ``Settings.dataset_url``).

    Returns:
        The response body, undecoded.
    """
    resp = session.get(url)
    resp.raise_for_status()
    return resp.content
