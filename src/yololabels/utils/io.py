from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from yololabels.errors import LabelFileError


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def read_text(path: Path, encoding: str = "utf-8") -> str:
    # newline="" keeps "\r" so line-ending handling stays with the parser
    try:
        with path.open("r", encoding=encoding, newline="") as f:
            return f.read()
    except UnicodeDecodeError as exc:
        raise LabelFileError(path, f"not valid {encoding} text ({exc.reason})") from exc


def read_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        obj = yaml.safe_load(f)
    if obj is None:
        return {}
    if not isinstance(obj, dict):
        raise ValueError(f"YAML file {path} must contain a mapping at the top level")
    return obj
