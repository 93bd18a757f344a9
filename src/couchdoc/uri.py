"""Request address construction for databases and documents."""

from __future__ import annotations

import httpx

from couchdoc.models.kind import DocumentKind


def _with_path(base_uri: httpx.URL | str, segments: list[str]) -> httpx.URL:
    """Return a copy of ``base_uri`` whose path is exactly ``segments``."""
    return httpx.URL(base_uri).copy_with(path="/" + "/".join(segments))


def build_uri(
    base_uri: httpx.URL | str,
    db_name: str,
    doc_id: str,
    kind: DocumentKind = DocumentKind.NORMAL,
) -> httpx.URL:
    """Construct a document address from a server base address.

    Any path on ``base_uri`` is discarded and replaced by
    ``/<db_name>[/<kind segment>]/<doc_id>``. Scheme, credentials, host, port,
    query and fragment are carried over unchanged. Segments are not escaped
    here; ``httpx.URL`` applies its own normalization.
    """
    segments = [db_name]
    component = kind.uri_path_component()
    if component is not None:
        segments.append(component)
    segments.append(doc_id)
    return _with_path(base_uri, segments)


def database_uri(base_uri: httpx.URL | str, db_name: str) -> httpx.URL:
    """Construct the address of a database itself."""
    return _with_path(base_uri, [db_name])
