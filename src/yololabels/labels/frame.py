from __future__ import annotations

import numpy as np
import pandas as pd

from yololabels.constants import FIELD_NAMES, REQUIRED_FIELDS
from yololabels.labels.types import YoloLabels


def labels_to_array(labels: YoloLabels) -> np.ndarray:
    """``(N, 5)`` float array of class index and box, one row per label."""
    if len(labels) == 0:
        return np.zeros((0, REQUIRED_FIELDS), dtype=np.float64)
    return np.asarray(
        [[lb.class_index, lb.x_center, lb.y_center, lb.width, lb.height] for lb in labels],
        dtype=np.float64,
    )


def labels_to_frame(labels: YoloLabels) -> pd.DataFrame:
    rows = [
        {
            "class_index": lb.class_index,
            "x_center": lb.x_center,
            "y_center": lb.y_center,
            "width": lb.width,
            "height": lb.height,
            "confidence": np.nan if lb.confidence is None else lb.confidence,
            "track_id": pd.NA if lb.track_id is None else lb.track_id,
        }
        for lb in labels
    ]
    df = pd.DataFrame(rows, columns=list(FIELD_NAMES))
    return df.astype(
        {
            "class_index": "int64",
            "x_center": "float64",
            "y_center": "float64",
            "width": "float64",
            "height": "float64",
            "confidence": "float64",
            "track_id": "Int64",
        }
    )
