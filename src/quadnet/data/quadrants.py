from dataclasses import dataclass
from typing import Optional

import numpy as np
import torch
from sklearn.datasets import make_blobs


@dataclass
class Point:
    x: float
    y: float
    label: Optional[str] = None
    predicted_label: Optional[str] = None

    @property
    def inputs(self):
        return [self.x, self.y]


# One labelled point at the centre of each quadrant
TRAINING_DATA = (
    Point(-0.5, -0.5, "blue"),
    Point(0.5, -0.5, "red"),
    Point(-0.5, 0.5, "green"),
    Point(0.5, 0.5, "purple"),
)


def sample_training_point(data=TRAINING_DATA, generator=None):
    """Pick one point uniformly at random, with replacement."""
    i = torch.randint(len(data), (1,), generator=generator).item()
    return data[i]


def random_points(n=100, generator=None):
    """Unlabelled points drawn uniformly from the [-1, 1) square."""
    xy = torch.rand((n, 2), generator=generator, dtype=torch.float64) * 2 - 1
    return [Point(float(x), float(y)) for x, y in xy.tolist()]


def get_test_data(n=400, cluster_std=0.15, data=TRAINING_DATA, seed=None):
    """Noisy labelled points scattered around each training point."""
    centers = [[p.x, p.y] for p in data]
    X, y = make_blobs(n_samples=n, centers=centers, cluster_std=cluster_std, random_state=seed)
    X = np.clip(X, -1.0, 1.0)
    labels = [data[i].label for i in y]
    return [Point(float(a), float(b), label) for (a, b), label in zip(X, labels)]
