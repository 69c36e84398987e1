from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass(slots=True)
class PlusCodeError(Exception):
    """Codec error carrying a stable machine-readable code."""

    code: str
    message: str
    details: Any | None = None

    def __str__(self) -> str:
        return self.message


class InvalidArgumentError(PlusCodeError):
    def __init__(self, message: str, *, details: Any | None = None) -> None:
        super().__init__(code="INVALID_ARGUMENT", message=message, details=details)


class InvalidCodeError(PlusCodeError):
    def __init__(self, message: str, *, details: Any | None = None) -> None:
        super().__init__(code="INVALID_CODE", message=message, details=details)


class OutOfRangeError(PlusCodeError):
    def __init__(self, message: str, *, details: Any | None = None) -> None:
        super().__init__(code="OUT_OF_RANGE", message=message, details=details)
