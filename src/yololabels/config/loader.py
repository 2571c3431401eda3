from __future__ import annotations

import logging
from copy import deepcopy
from pathlib import Path
from typing import Any

from yololabels.config.schema import LabelsConfig
from yololabels.utils.io import read_yaml
from yololabels.utils.logging import configure_logging


def _parse_override(item: str) -> tuple[list[str], Any]:
    # "parser.trailing_newline=false" -> (["parser", "trailing_newline"], False)
    key, sep, raw = item.partition("=")
    parts = key.split(".")
    if not sep or not all(parts):
        raise ValueError(f"Invalid override '{item}'. Expected section.key=value")
    lowered = raw.lower()
    if lowered in {"true", "false"}:
        return parts, lowered == "true"
    if lowered in {"none", "null"}:
        return parts, None
    # pydantic coerces the remaining strings to each field's type
    return parts, raw


def load_config(config_path: Path | None = None, overrides: list[str] | None = None) -> LabelsConfig:
    payload = deepcopy(read_yaml(config_path)) if config_path is not None else {}
    for item in overrides or []:
        parts, value = _parse_override(item)
        section = payload
        for part in parts[:-1]:
            section = section.setdefault(part, {})
            if not isinstance(section, dict):
                raise ValueError(f"Override '{item}' does not point into a config section")
        section[parts[-1]] = value
    return LabelsConfig.model_validate(payload)


def setup(config_path: Path | None = None, overrides: list[str] | None = None) -> LabelsConfig:
    """Load the config and apply its runtime section (logging)."""
    config = load_config(config_path, overrides=overrides)
    configure_logging(config.runtime.log_level, config.runtime.log_file)
    logging.getLogger(__name__).debug("Parser config: %s", config.parser.model_dump())
    return config
