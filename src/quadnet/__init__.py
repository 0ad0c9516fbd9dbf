"""quadnet: a single layer network that learns to classify 2-D points by quadrant."""

from .errors import DimensionMismatch, InvalidConfiguration, QuadnetError, UnknownLabel
from .models.classifier import InitPolicy, LinearClassifier
from .models.codec import QUADRANT_LABELS, QUADRANTS, LabelCodec, decode, encode

__version__ = "0.1.0"
__all__ = [
    "LinearClassifier",
    "InitPolicy",
    "LabelCodec",
    "QUADRANT_LABELS",
    "QUADRANTS",
    "encode",
    "decode",
    "QuadnetError",
    "InvalidConfiguration",
    "DimensionMismatch",
    "UnknownLabel",
]
