"""Data models for documents, revisions and document kinds."""

from couchdoc.models.document import Document
from couchdoc.models.kind import DocumentKind
from couchdoc.models.revision import Revision

__all__ = [
    "Document",
    "DocumentKind",
    "Revision",
]
