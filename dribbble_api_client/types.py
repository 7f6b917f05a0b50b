"""Value types shared by the client and its callers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Union


class Scope(str, Enum):
    """OAuth scopes understood by Dribbble."""

    PUBLIC = "public"
    UPLOAD = "upload"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Pager:
    """Page number and page size for list endpoints.

    Values are sent as-is; range checking is left to the server.
    """

    page: int
    per_page: int


PagerLike = Union[Pager, Mapping[str, Any]]
