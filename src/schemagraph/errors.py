from __future__ import annotations

from dataclasses import dataclass


class SchemaGraphError(Exception):
    """Import failure with a short machine-readable code."""

    def __init__(self, message: str, code: str = "EIMPORT") -> None:
        super().__init__(message)
        self.code = code


class MalformedInputError(SchemaGraphError):
    """The document cannot be read as the declared format; fatal to the import."""

    def __init__(self, message: str, code: str = "EMALFORMED", index: int | None = None) -> None:
        super().__init__(message, code=code)
        self.index = index


class UnsupportedInputError(SchemaGraphError):
    def __init__(self, message: str, code: str = "EUNSUPPORTED") -> None:
        super().__init__(message, code=code)


class ReadFailureError(SchemaGraphError):
    def __init__(self, message: str, code: str = "EREAD") -> None:
        super().__init__(message, code=code)


@dataclass(frozen=True)
class Diagnostic:
    """A record-level defect. Collected, never raised."""

    code: str
    message: str
    severity: str = "error"
    index: int | None = None

    def __str__(self) -> str:
        where = f" (record {self.index})" if self.index is not None else ""
        return f"[{self.code}] {self.message}{where}"
