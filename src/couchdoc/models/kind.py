"""Document kinds — normal documents vs. design documents."""

from __future__ import annotations

from enum import StrEnum

DESIGN_PATH_SEGMENT = "_design"


class DocumentKind(StrEnum):
    """Enumerate the document kinds that shape a document's address."""

    NORMAL = "normal"
    DESIGN = "design"

    def uri_path_component(self) -> str | None:
        """Return the path segment placed between database and id, if any."""
        if self is DocumentKind.DESIGN:
            return DESIGN_PATH_SEGMENT
        return None
