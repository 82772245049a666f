"""
Typed outcomes of user-triggerable requests.

Rejections caused by user input are returned as values, never raised.
Precondition violations (bad ids passed to accessors) raise instead.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional


class VertexError(StrEnum):
    TOO_CLOSE = "too_close"


class EdgeError(StrEnum):
    SELF_LOOP = "self_loop"
    INVALID_INDEX = "invalid_index"
    DUPLICATE_EDGE = "duplicate_edge"


@dataclass(frozen=True)
class AddVertexResult:
    """Return object of a site insertion: the new id, or the reason it was refused."""
    vertex_id: Optional[int] = None
    error: Optional[VertexError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class AddEdgeResult:
    """Return object of a link creation: the computed weight, or the reason it was refused."""
    weight: Optional[int] = None
    error: Optional[EdgeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None
