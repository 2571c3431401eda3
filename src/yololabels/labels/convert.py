from __future__ import annotations

import logging
from dataclasses import replace
from numbers import Integral
from typing import overload

from yololabels.labels.types import YoloLabel, YoloLabels

LOGGER = logging.getLogger(__name__)


def _check_dimensions(image_width: int, image_height: int) -> None:
    for name, value in (("image_width", image_width), ("image_height", image_height)):
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise ValueError(f"{name} must be an integer pixel count, got {value!r}")
        if value < 0:
            raise ValueError(f"{name} must be >= 0, got {value}")


def _scale(label: YoloLabel, width: float, height: float) -> YoloLabel:
    return replace(
        label,
        x_center=label.x_center * width,
        y_center=label.y_center * height,
        width=label.width * width,
        height=label.height * height,
    )


def label_to_pixels(label: YoloLabel, image_width: int, image_height: int) -> YoloLabel:
    _check_dimensions(image_width, image_height)
    return _scale(label, float(image_width), float(image_height))


def labels_to_pixels(labels: YoloLabels, image_width: int, image_height: int) -> YoloLabels:
    _check_dimensions(image_width, image_height)
    width, height = float(image_width), float(image_height)
    out = YoloLabels(tuple(_scale(label, width, height) for label in labels))
    LOGGER.debug("Converted %d labels to %dx%d pixels", len(out), image_width, image_height)
    return out


@overload
def convert_to_pixels(item: YoloLabel, image_width: int, image_height: int) -> YoloLabel: ...


@overload
def convert_to_pixels(item: YoloLabels, image_width: int, image_height: int) -> YoloLabels: ...


def convert_to_pixels(
    item: YoloLabel | YoloLabels, image_width: int, image_height: int
) -> YoloLabel | YoloLabels:
    """Scale normalized box coordinates to pixels for a ``image_width`` x ``image_height`` image.

    Returns a new value; ``item`` is left untouched. Class index, confidence
    and track id are carried over as-is. A zero dimension gives zero
    coordinates along that axis.
    """
    if isinstance(item, YoloLabels):
        return labels_to_pixels(item, image_width, image_height)
    if isinstance(item, YoloLabel):
        return label_to_pixels(item, image_width, image_height)
    raise TypeError(f"Expected YoloLabel or YoloLabels, got {type(item).__name__}")


def to_xyxy(label: YoloLabel) -> tuple[float, float, float, float]:
    """Corner form ``(x1, y1, x2, y2)`` in the same space as ``label``."""
    half_w = label.width / 2.0
    half_h = label.height / 2.0
    return (
        label.x_center - half_w,
        label.y_center - half_h,
        label.x_center + half_w,
        label.y_center + half_h,
    )
