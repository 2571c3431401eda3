from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field


class RuntimeConfig(BaseModel):
    log_level: str = "INFO"
    log_file: Path | None = None


class ParserConfig(BaseModel):
    """How raw label text is split into lines before per-line parsing."""

    line_endings: Literal["strip", "reject"] = "strip"
    empty_text: Literal["empty", "error"] = "empty"
    trailing_newline: bool = True
    encoding: str = "utf-8"

    @classmethod
    def strict(cls) -> "ParserConfig":
        # CR left in the last field, "" and a terminal "\n" parsed as a line
        return cls(line_endings="reject", empty_text="error", trailing_newline=False)


class LabelsConfig(BaseModel):
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)
    parser: ParserConfig = Field(default_factory=ParserConfig)
