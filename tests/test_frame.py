import numpy as np
import pandas as pd

from yololabels.labels.frame import labels_to_array, labels_to_frame
from yololabels.labels.parse import parse_labels


def test_labels_to_array() -> None:
    labels = parse_labels("0 0.1 0.2 0.3 0.4\n-1 0.5 0.6 0.7 0.8 0.9 5")
    arr = labels_to_array(labels)
    assert arr.shape == (2, 5)
    assert arr.dtype == np.float64
    np.testing.assert_allclose(arr[1], [-1.0, 0.5, 0.6, 0.7, 0.8])


def test_labels_to_array_empty() -> None:
    assert labels_to_array(parse_labels("")).shape == (0, 5)


def test_labels_to_frame_optional_columns() -> None:
    labels = parse_labels("0 0.1 0.2 0.3 0.4\n1 0.5 0.6 0.7 0.8 0.9\n2 0.5 0.6 0.7 0.8 0.9 5")
    df = labels_to_frame(labels)
    assert list(df.columns) == [
        "class_index",
        "x_center",
        "y_center",
        "width",
        "height",
        "confidence",
        "track_id",
    ]
    assert df["class_index"].tolist() == [0, 1, 2]
    assert np.isnan(df.loc[0, "confidence"])
    assert df.loc[1, "confidence"] == 0.9
    assert df.loc[0, "track_id"] is pd.NA
    assert df.loc[1, "track_id"] is pd.NA
    assert df.loc[2, "track_id"] == 5
    assert str(df["track_id"].dtype) == "Int64"


def test_labels_to_frame_empty() -> None:
    df = labels_to_frame(parse_labels(""))
    assert df.empty
    assert len(df.columns) == 7
