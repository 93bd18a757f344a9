"""Client data model and addressing for an HTTP document database."""

from couchdoc.models import Document, DocumentKind, Revision
from couchdoc.uri import build_uri, database_uri

__all__ = [
    "Document",
    "DocumentKind",
    "Revision",
    "build_uri",
    "database_uri",
]
