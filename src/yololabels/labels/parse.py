from __future__ import annotations

import logging
import re
from pathlib import Path

from yololabels.config.schema import ParserConfig
from yololabels.constants import (
    CONFIDENCE_FIELD,
    FIELD_NAMES,
    FIELD_SEPARATOR,
    INT_FIELD_MAX,
    INT_FIELD_MIN,
    LINE_SEPARATOR,
    REQUIRED_FIELDS,
    TRACK_ID_FIELD,
)
from yololabels.errors import LabelParseError
from yololabels.labels.types import YoloLabel, YoloLabels
from yololabels.utils.io import read_text

LOGGER = logging.getLogger(__name__)

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def _parse_int(fields: list[str], index: int) -> int:
    name = FIELD_NAMES[index]
    text = fields[index]
    if not _INT_PATTERN.fullmatch(text):
        raise LabelParseError(f"{name} is not an integer: {text!r}", field=name, text=text)
    value = int(text)
    if not INT_FIELD_MIN <= value <= INT_FIELD_MAX:
        raise LabelParseError(
            f"{name} {value} outside [{INT_FIELD_MIN}, {INT_FIELD_MAX}]", field=name, text=text
        )
    return value


def _parse_float(fields: list[str], index: int) -> float:
    name = FIELD_NAMES[index]
    text = fields[index]
    # float() alone would accept padding, "_" separators and non-ASCII digits
    if not text or not text.isascii() or text != text.strip() or "_" in text:
        raise LabelParseError(f"{name} is not a number: {text!r}", field=name, text=text)
    try:
        return float(text)
    except ValueError as exc:
        raise LabelParseError(f"{name} is not a number: {text!r}", field=name, text=text) from exc


def parse_label(line: str, config: ParserConfig | None = None) -> YoloLabel:
    """Parse one ``class x y w h [confidence [track_id]]`` line.

    Fields are separated by single spaces; anything after the seventh field is
    ignored. Raises :class:`LabelParseError` on a missing mandatory field or
    non-numeric text.
    """
    cfg = config or ParserConfig()
    if cfg.line_endings == "strip" and line.endswith("\r"):
        line = line[:-1]

    fields = line.split(FIELD_SEPARATOR)
    if len(fields) < REQUIRED_FIELDS:
        missing = FIELD_NAMES[len(fields)]
        raise LabelParseError(
            f"expected at least {REQUIRED_FIELDS} fields, got {len(fields)} (missing {missing})",
            field=missing,
            text=line,
        )

    return YoloLabel(
        class_index=_parse_int(fields, 0),
        x_center=_parse_float(fields, 1),
        y_center=_parse_float(fields, 2),
        width=_parse_float(fields, 3),
        height=_parse_float(fields, 4),
        confidence=_parse_float(fields, CONFIDENCE_FIELD) if len(fields) > CONFIDENCE_FIELD else None,
        track_id=_parse_int(fields, TRACK_ID_FIELD) if len(fields) > TRACK_ID_FIELD else None,
    )


def _split_lines(text: str, cfg: ParserConfig) -> list[str]:
    lines = text.split(LINE_SEPARATOR)
    if cfg.trailing_newline and len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return lines


def parse_labels(text: str, config: ParserConfig | None = None) -> YoloLabels:
    """Parse newline-separated label text, keeping line order.

    The first malformed line aborts the whole parse; the raised error carries
    its 1-based line number.
    """
    cfg = config or ParserConfig()
    lines = _split_lines(text, cfg)
    if lines == [""] and cfg.empty_text == "empty":
        return YoloLabels()

    labels: list[YoloLabel] = []
    for line_number, line in enumerate(lines, start=1):
        try:
            labels.append(parse_label(line, config=cfg))
        except LabelParseError as exc:
            exc.add_context(line_number=line_number)
            raise
    return YoloLabels(tuple(labels))


def load_labels(path: Path | str, config: ParserConfig | None = None) -> YoloLabels:
    cfg = config or ParserConfig()
    path = Path(path)
    text = read_text(path, encoding=cfg.encoding)
    try:
        labels = parse_labels(text, config=cfg)
    except LabelParseError as exc:
        exc.add_context(path=path)
        raise
    LOGGER.debug("Loaded %d labels from %s", len(labels), path)
    return labels
