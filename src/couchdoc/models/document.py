"""Document model — id, revision and typed content of a stored document."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict

from couchdoc.models.revision import Revision

T = TypeVar("T")

_ID_KEY = "_id"
_REV_KEY = "_rev"


class Document(BaseModel, Generic[T]):
    """A fetched document version.

    ``id`` and ``revision`` together identify the exact stored version;
    ``content`` is whatever the caller parameterizes the model with.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    revision: Revision
    content: T

    @classmethod
    def from_body(cls, body: Mapping[str, Any]) -> Document[T]:
        """Build a document from a raw JSON body returned by the server.

        Reserved underscore fields other than ``_id`` and ``_rev`` are dropped.
        """
        content = {key: value for key, value in body.items() if not key.startswith("_")}
        return cls.model_validate(
            {"id": body.get(_ID_KEY), "revision": body.get(_REV_KEY), "content": content}
        )

    def to_body(self) -> dict[str, Any]:
        """Return the document as a JSON-ready body including ``_id`` and ``_rev``."""
        body = dict(self.model_dump(mode="json")["content"])
        body[_ID_KEY] = self.id
        body[_REV_KEY] = self.revision.as_text()
        return body
