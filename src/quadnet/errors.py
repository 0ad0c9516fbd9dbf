class QuadnetError(ValueError):
    """Base class for every error raised by the classifier and its codec."""


class InvalidConfiguration(QuadnetError):
    """Constructor arguments out of range (counts, learning rate, policy, labels)."""


class DimensionMismatch(QuadnetError):
    """A vector does not have the length the classifier or codec was built for."""

    def __init__(self, name, expected, actual):
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(f"{name} has length {actual}, expected {expected}")


class UnknownLabel(QuadnetError, KeyError):
    """Label outside the codec's label space."""

    def __init__(self, label, labels):
        self.label = label
        self.labels = tuple(labels)
        super().__init__(f"unknown label {label!r}, expected one of {list(self.labels)}")

    def __str__(self):
        # KeyError would repr() the message
        return self.args[0]
