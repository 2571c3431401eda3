from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Iterator, overload

if TYPE_CHECKING:
    from yololabels.config.schema import ParserConfig


@dataclass(frozen=True)
class YoloLabel:
    """One YOLO annotation line: class index, box and optional tracking fields.

    Box fields are normalized (fractions of the image size) when parsed and
    absolute pixels after :meth:`to_pixels`. Nothing enforces either range.
    """

    class_index: int
    x_center: float
    y_center: float
    width: float
    height: float
    confidence: float | None = None
    track_id: int | None = None

    @classmethod
    def from_line(cls, line: str, config: "ParserConfig | None" = None) -> "YoloLabel":
        from yololabels.labels.parse import parse_label

        return parse_label(line, config=config)

    def to_pixels(self, image_width: int, image_height: int) -> "YoloLabel":
        from yololabels.labels.convert import label_to_pixels

        return label_to_pixels(self, image_width, image_height)


@dataclass(frozen=True)
class YoloLabels:
    """Ordered, immutable set of labels read from one text source."""

    labels: tuple[YoloLabel, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "labels", tuple(self.labels))

    @classmethod
    def from_text(cls, text: str, config: "ParserConfig | None" = None) -> "YoloLabels":
        from yololabels.labels.parse import parse_labels

        return parse_labels(text, config=config)

    @classmethod
    def from_file(cls, path: Path | str, config: "ParserConfig | None" = None) -> "YoloLabels":
        from yololabels.labels.parse import load_labels

        return load_labels(path, config=config)

    def to_pixels(self, image_width: int, image_height: int) -> "YoloLabels":
        from yololabels.labels.convert import labels_to_pixels

        return labels_to_pixels(self, image_width, image_height)

    def __iter__(self) -> Iterator[YoloLabel]:
        return iter(self.labels)

    def __len__(self) -> int:
        return len(self.labels)

    @overload
    def __getitem__(self, index: int) -> YoloLabel: ...

    @overload
    def __getitem__(self, index: slice) -> "YoloLabels": ...

    def __getitem__(self, index: int | slice) -> "YoloLabel | YoloLabels":
        if isinstance(index, slice):
            return YoloLabels(self.labels[index])
        return self.labels[index]
