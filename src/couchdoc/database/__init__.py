"""HTTP client and repositories for document access."""

from couchdoc.database.client import CouchClient
from couchdoc.database.repository import DesignDocumentRepository, DocumentRepository

__all__ = [
    "CouchClient",
    "DesignDocumentRepository",
    "DocumentRepository",
]
