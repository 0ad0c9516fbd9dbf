from .classifier import InitPolicy, LinearClassifier
from .codec import QUADRANT_LABELS, QUADRANTS, LabelCodec
