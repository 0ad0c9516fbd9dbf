import torch

from ..errors import DimensionMismatch, InvalidConfiguration, UnknownLabel
from .classifier import as_vector

QUADRANT_LABELS = ("blue", "red", "green", "purple")


class LabelCodec:
    """One-hot encoding over a fixed, ordered label space.

    Index ``i`` of a target or output vector always means ``labels[i]``.
    """

    def __init__(self, labels=QUADRANT_LABELS):
        labels = tuple(labels)
        if not labels:
            raise InvalidConfiguration("label space must not be empty")
        if not all(isinstance(label, str) for label in labels):
            raise InvalidConfiguration(f"labels must be strings, got {list(labels)}")
        if len(set(labels)) != len(labels):
            raise InvalidConfiguration(f"labels must be distinct, got {list(labels)}")
        self.labels = labels

    def __len__(self):
        return len(self.labels)

    def __iter__(self):
        return iter(self.labels)

    def __repr__(self):
        return f"LabelCodec({list(self.labels)})"

    def index(self, label):
        for i, candidate in enumerate(self.labels):
            if candidate == label:
                return i
        raise UnknownLabel(label, self.labels)

    def encode(self, label):
        target = torch.zeros(len(self.labels), dtype=torch.float64)
        target[self.index(label)] = 1.0
        return target

    def decode(self, output):
        """Label of the largest output; ties go to the lowest index."""
        output = as_vector(output, len(self.labels), "output")
        best = 0
        for i in range(1, len(output)):
            if output[i] > output[best]:
                best = i
        return self.labels[best]


QUADRANTS = LabelCodec(QUADRANT_LABELS)


def encode(label):
    return QUADRANTS.encode(label)


def decode(output):
    return QUADRANTS.decode(output)
