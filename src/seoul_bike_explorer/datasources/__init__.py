"""Dataset sources.

One subpackage per dataset, laid out the same way:

    datasources/{name}/
    ├── __init__.py       # re-exports, with __all__
    ├── client.py         # location, column names, header aliases
    ├── models.py         # frozen dataclasses for typed rows
    ├── download.py       # bytes over HTTP
    ├── loader.py         # bytes -> text rows
    └── normalize.py      # text rows -> typed records

Plugging in another hourly rental export
----------------------------------------
1. Map its headers onto the canonical names in ``seoul_bike/client.py``
   (``COLUMN_ALIASES``); if the layout differs more than that, add a
   sibling package mirroring ``seoul_bike/``.

2. Downloads go through the shared session and hand back raw bytes::

       from seoul_bike_explorer.services.http import session

       def fetch_export(url: str) -> bytes:
           resp = session.get(url)
           resp.raise_for_status()
           return resp.content

3. Store the bytes in the reference tier from a ``@task`` in
   ``flows/fetch.py`` using ``store.write_file(path, content, source=...,
   valid_until=...)``; ``flows/build.py`` reads them back with
   ``store.read_bytes``.

4. Cover header mapping and row normalization in ``tests/``.
"""
