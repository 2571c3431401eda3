"""Project constants."""

FIELD_SEPARATOR = " "
LINE_SEPARATOR = "\n"

REQUIRED_FIELDS = 5
CONFIDENCE_FIELD = 5
TRACK_ID_FIELD = 6

# class indices and track ids are stored as signed 8-bit values
INT_FIELD_MIN = -128
INT_FIELD_MAX = 127

FIELD_NAMES = (
    "class_index",
    "x_center",
    "y_center",
    "width",
    "height",
    "confidence",
    "track_id",
)
