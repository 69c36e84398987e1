"""Value types produced by the codec."""

from __future__ import annotations

from pluscodes.models.code_area import CodeArea

__all__ = [
    "CodeArea",
]
