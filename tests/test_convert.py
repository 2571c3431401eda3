import pytest

from yololabels.labels.convert import convert_to_pixels, label_to_pixels, to_xyxy
from yololabels.labels.parse import parse_label, parse_labels
from yololabels.labels.types import YoloLabel

LINE = "-1 0.603856 0.368098 0.048642 0.075372"


def test_label_to_pixels_scales_box_only() -> None:
    label = YoloLabel(2, 0.5, 0.25, 0.1, 0.2, confidence=0.9, track_id=7)
    out = label_to_pixels(label, 640, 480)
    assert out == YoloLabel(2, 320.0, 120.0, 64.0, 96.0, confidence=0.9, track_id=7)
    assert label.x_center == 0.5


def test_width_is_exact_product() -> None:
    label = parse_label(LINE)
    out = label.to_pixels(2000, 1300)
    assert out.width == label.width * 2000
    assert out.height == label.height * 1300
    assert out.x_center == label.x_center * 2000
    assert out.y_center == label.y_center * 1300


def test_zero_dimensions() -> None:
    out = convert_to_pixels(parse_label(LINE + " 0.5 3"), 0, 0)
    assert (out.x_center, out.y_center, out.width, out.height) == (0.0, 0.0, 0.0, 0.0)
    assert out.class_index == -1
    assert out.confidence == 0.5
    assert out.track_id == 3


def test_collection_conversion_keeps_original() -> None:
    labels = parse_labels(f"{LINE}\n{LINE}")
    pixels = convert_to_pixels(labels, 2000, 1300)
    assert len(pixels) == 2
    for label in pixels:
        assert label.width == pytest.approx(97.284)
    assert labels[0].width == pytest.approx(0.048642)
    assert labels.to_pixels(2000, 1300) == pixels


def test_collection_conversion_keeps_order() -> None:
    labels = parse_labels("0 0.1 0.1 0.1 0.1\n1 0.2 0.2 0.2 0.2")
    pixels = labels.to_pixels(10, 10)
    assert [label.class_index for label in pixels] == [0, 1]
    assert pixels[1].x_center == pytest.approx(2.0)


@pytest.mark.parametrize("width,height", [(-1, 10), (10, -5), (10.5, 10), (True, 10)])
def test_invalid_dimensions(width, height) -> None:
    with pytest.raises(ValueError):
        convert_to_pixels(parse_label(LINE), width, height)


def test_unsupported_type() -> None:
    with pytest.raises(TypeError):
        convert_to_pixels([parse_label(LINE)], 10, 10)  # type: ignore[call-overload]


def test_to_xyxy() -> None:
    label = YoloLabel(0, 0.5, 0.5, 0.2, 0.4)
    assert to_xyxy(label) == pytest.approx((0.4, 0.3, 0.6, 0.7))
    assert to_xyxy(label.to_pixels(100, 100)) == pytest.approx((40.0, 30.0, 60.0, 70.0))
