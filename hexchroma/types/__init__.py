from .color_types import RGB, HSV, XYZ, Lab, ColorSpace, Scalar, ColorLike
from .format_type import FormatType

__all__ = ["RGB", "HSV", "XYZ", "Lab", "ColorSpace", "Scalar", "ColorLike", "FormatType"]
