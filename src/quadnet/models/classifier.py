import math
import numbers
from enum import Enum

import torch
import torch.nn as nn

from ..errors import DimensionMismatch, InvalidConfiguration


class InitPolicy(str, Enum):
    ZERO = "zero"
    UNIFORM_RANDOM = "uniform"


def sigmoid(z):
    """Squash each activation into (0, 1)."""
    return 1 / (1 + torch.exp(-z))


def as_vector(values, length, name):
    vec = torch.as_tensor(values, dtype=torch.float64)
    if vec.dim() != 1 or vec.shape[0] != length:
        actual = vec.shape[0] if vec.dim() == 1 else tuple(vec.shape)
        raise DimensionMismatch(name, length, actual)
    return vec


def _check_count(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 1:
        raise InvalidConfiguration(f"{name} must be a positive integer, got {value!r}")
    return int(value)


class LinearClassifier(nn.Module):
    """Single layer network: one weight row per output class, sigmoid on every unit.

    There is no bias and no hidden layer. ``learn`` performs one online
    gradient step per call and mutates the weights in place.
    """

    def __init__(self, input_count=2, output_count=4, learning_rate=0.1,
                 init_policy=InitPolicy.ZERO, generator=None):
        super().__init__()
        self.input_count = _check_count("input_count", input_count)
        self.output_count = _check_count("output_count", output_count)

        if (isinstance(learning_rate, bool) or not isinstance(learning_rate, numbers.Real)
                or not math.isfinite(learning_rate) or learning_rate <= 0):
            raise InvalidConfiguration(f"learning_rate must be a positive number, got {learning_rate!r}")
        self.learning_rate = float(learning_rate)

        try:
            self.init_policy = InitPolicy(init_policy)
        except ValueError:
            raise InvalidConfiguration(
                f"init_policy must be one of {[p.value for p in InitPolicy]}, got {init_policy!r}"
            ) from None

        self.generator = generator
        self.weight = nn.Parameter(self._initial_weights(), requires_grad=False)

    def _initial_weights(self):
        shape = (self.output_count, self.input_count)
        if self.init_policy is InitPolicy.UNIFORM_RANDOM:
            return torch.rand(shape, generator=self.generator, dtype=torch.float64)
        return torch.zeros(shape, dtype=torch.float64)

    @property
    def weights(self):
        return self.weight.detach().clone()

    def reset(self):
        """Re-draw the weights with the configured init policy."""
        with torch.no_grad():
            self.weight.copy_(self._initial_weights())

    def predict(self, inputs):
        """Propagate ``inputs`` through the network.

        Each output unit takes the dot product of its weight row with the
        inputs and passes it through the sigmoid. The units are independent,
        so the outputs do not sum to 1.
        """
        x = as_vector(inputs, self.input_count, "inputs")
        with torch.no_grad():
            return sigmoid(self.weight @ x)

    def forward(self, inputs):
        return self.predict(inputs)

    def learn(self, inputs, target):
        """Nudge every weight towards ``target`` by one gradient step.

        w[i][j] += lr * (target[i] - out[i]) * out[i] * (1 - out[i]) * inputs[j]
        """
        x = as_vector(inputs, self.input_count, "inputs")
        t = as_vector(target, self.output_count, "target")

        output = self.predict(x)
        error = t - output
        delta = self.learning_rate * error * output * (1 - output)

        with torch.no_grad():
            self.weight.add_(delta.unsqueeze(1) * x.unsqueeze(0))

    def extra_repr(self):
        return (f"input_count={self.input_count}, output_count={self.output_count}, "
                f"learning_rate={self.learning_rate}, init_policy={self.init_policy.value}")
