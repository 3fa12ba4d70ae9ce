# No dependencies
from enum import Enum


class FormatType(str, Enum):
    INT = "int"
    FLOAT = "float"


# Upper bound of each HSV channel per format
hsv_maxima = {
    FormatType.INT: (255, 255, 255),
    FormatType.FLOAT: (360.0, 1.0, 255),
}

format_classes = {
    FormatType.INT: int,
    FormatType.FLOAT: float,
}

CHANNEL_MAX = 255
HUE_360 = 360
HUE_255 = 255
