"""Revision token — opaque, ordered identifier of a stored document version."""

from __future__ import annotations

from functools import total_ordering
from typing import TYPE_CHECKING, Any

from pydantic_core import core_schema

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler


@total_ordering
class Revision:
    """A document revision as assigned by the database.

    The token is never parsed. Equality and ordering compare the raw strings,
    so ``"10-aaa" < "2-bbb"`` even though generation 10 is newer than
    generation 2. The server decides winning revisions; callers that need
    generation-aware ordering must split the token themselves.
    """

    __slots__ = ("_token",)

    def __init__(self, token: str) -> None:
        object.__setattr__(self, "_token", token)

    @classmethod
    def from_string(cls, token: str) -> Revision:
        """Wrap a revision string received from the server or the caller."""
        return cls(token)

    def as_text(self) -> str:
        return self._token

    def clone(self) -> Revision:
        """Return an independent revision with the same token."""
        return Revision.from_string(str(self._token))

    def compare(self, other: object) -> int:
        """Return -1, 0 or 1 comparing the tokens lexicographically."""
        if not isinstance(other, Revision):
            raise TypeError(f"cannot compare Revision with {type(other).__name__}")
        if self._token < other._token:
            return -1
        if self._token > other._token:
            return 1
        return 0

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Revision is immutable")

    def __reduce__(self) -> tuple[type[Revision], tuple[str]]:
        return (Revision, (self._token,))

    def __copy__(self) -> Revision:
        return self.clone()

    def __deepcopy__(self, memo: dict[int, Any]) -> Revision:
        return self.clone()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Revision):
            return NotImplemented
        return self._token == other._token

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Revision):
            return NotImplemented
        return self._token < other._token

    def __hash__(self) -> int:
        return hash(self._token)

    def __str__(self) -> str:
        return self._token

    def __repr__(self) -> str:
        return f"Revision({self._token!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate from a plain string and serialize back to one."""
        from_str = core_schema.no_info_after_validator_function(
            cls.from_string, core_schema.str_schema()
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_str]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.as_text
            ),
        )
