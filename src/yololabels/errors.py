from __future__ import annotations

from pathlib import Path


class LabelParseError(ValueError):
    """A label line could not be parsed into a record.

    Raised for missing mandatory fields and for field text that is not a
    valid number of the expected type. ``line_number`` and ``path`` are filled
    in as the error propagates out of multi-line and file parses.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        text: str | None = None,
        line_number: int | None = None,
        path: Path | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.text = text
        self.line_number = line_number
        self.path = path

    def add_context(self, line_number: int | None = None, path: Path | None = None) -> None:
        if line_number is not None:
            self.line_number = line_number
        if path is not None:
            self.path = path

    def __str__(self) -> str:
        where = []
        if self.path is not None:
            where.append(str(self.path))
        if self.line_number is not None:
            where.append(f"line {self.line_number}")
        if not where:
            return self.message
        return f"{':'.join(where)}: {self.message}"


class LabelFileError(OSError):
    """A label file exists but cannot be read as text."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read label file {path}: {reason}")
        self.path = path
        self.reason = reason
