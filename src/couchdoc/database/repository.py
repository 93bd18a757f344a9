"""Single-document data access through the addressing layer."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from pydantic import TypeAdapter

from couchdoc.exceptions import raise_for_couch_status
from couchdoc.models.document import Document
from couchdoc.models.kind import DocumentKind
from couchdoc.models.revision import Revision
from couchdoc.uri import build_uri

if TYPE_CHECKING:
    import httpx

    from couchdoc.database.client import CouchClient

logger = logging.getLogger(__name__)

T = TypeVar("T")

_HTTP_NOT_FOUND = 404


def _revision_from_etag(etag: str) -> Revision:
    """Strip the quotes the server puts around the revision in ``ETag``."""
    return Revision.from_string(etag.strip('"'))


class DocumentRepository(Generic[T]):
    """Fetch, store and delete documents of one kind in one database."""

    model_class: ClassVar[Any] = dict[str, Any]
    kind: ClassVar[DocumentKind] = DocumentKind.NORMAL

    def __init__(
        self,
        client: CouchClient,
        model_class: type[T] | None = None,
        *,
        db_name: str | None = None,
    ) -> None:
        self._client = client
        self._model_class = model_class or self.model_class
        self._db_name = db_name or client.database
        self._adapter: TypeAdapter[T] = TypeAdapter(self._model_class)

    def uri(self, doc_id: str) -> httpx.URL:
        """Return the address of ``doc_id`` in this repository's database.

        Accepts both the bare name and the full id the server returns
        (``"_design/recipes"``) for kinds that add a path segment.
        """
        segment = self.kind.uri_path_component()
        if segment is not None:
            doc_id = doc_id.removeprefix(f"{segment}/")
        return build_uri(self._client.base_url, self._db_name, doc_id, self.kind)

    async def get(self, doc_id: str) -> Document[T] | None:
        """Fetch the current version of a document, or None if it does not exist."""
        response = await self._client.http.get(self.uri(doc_id))
        if response.status_code == _HTTP_NOT_FOUND:
            logger.debug("Document %s not found in %s", doc_id, self._db_name)
            return None
        raise_for_couch_status(response)
        return Document[self._model_class].from_body(response.json())

    async def get_revision(self, doc_id: str) -> Revision | None:
        """Return the current revision of a document without fetching its body."""
        response = await self._client.http.head(self.uri(doc_id))
        if response.status_code == _HTTP_NOT_FOUND:
            return None
        raise_for_couch_status(response)
        etag = response.headers.get("ETag")
        if not etag:
            return None
        return _revision_from_etag(etag)

    async def save(
        self,
        doc_id: str,
        content: T,
        revision: Revision | None = None,
    ) -> Document[T]:
        """Create or update a document.

        Passing the ``revision`` the caller last read makes the write
        conditional; a stale revision raises ``RevisionConflictError``.
        """
        body: dict[str, Any] = dict(self._adapter.dump_python(content, mode="json"))
        if revision is not None:
            body["_rev"] = revision.as_text()

        response = await self._client.http.put(self.uri(doc_id), json=body)
        raise_for_couch_status(response)

        reply = response.json()
        new_revision = Revision.from_string(reply["rev"])
        logger.info("Saved %s at revision %s", doc_id, new_revision)
        return Document[self._model_class](
            id=reply.get("id", doc_id),
            revision=new_revision,
            content=content,
        )

    async def delete(self, doc_id: str, revision: Revision) -> Revision:
        """Delete a document at ``revision`` and return the deletion revision."""
        response = await self._client.http.delete(
            self.uri(doc_id), params={"rev": revision.as_text()}
        )
        raise_for_couch_status(response)
        deleted = Revision.from_string(response.json()["rev"])
        logger.info("Deleted %s at revision %s", doc_id, deleted)
        return deleted


class DesignDocumentRepository(DocumentRepository[dict[str, Any]]):
    """Access design documents (views, validation functions) of a database."""

    kind = DocumentKind.DESIGN
