"""
Sensitivity sampling for the yield charts.
Every point is a full prediction with a single input changed.
"""

import numpy as np

from yield_model import predict

LABELS = ('Low', 'Current', 'High')

# (field, low delta, high delta)
PERTURBATIONS = {
    'rainfall': ('rainfall', -50, 50),
    'fertilizer': ('fert', -50, 100),
    'fert': ('fert', -50, 100),
}

SWEEP_FIELDS = ('rainfall', 'temp', 'soil', 'fert')


def sample(data, dimension):
    """Return (low, current, high) predictions for the rainfall or fertilizer axis."""
    if dimension not in PERTURBATIONS:
        raise ValueError(f"Unsupported sensitivity dimension: {dimension}")
    name, low, high = PERTURBATIONS[dimension]
    current = getattr(data, name)
    values = (max(0, current + low), current, current + high)
    return tuple(predict(data.with_value(name, value)) for value in values)


def profile_vector(data):
    return (data.soil, data.rainfall, data.temp, data.fert)


def sweep(data, dimension, start, stop, num=11):
    """
    Predictions at evenly spaced values of one input, ends included.
    Negative values are clamped to 0 before predicting.
    """
    if dimension == 'fertilizer':
        dimension = 'fert'
    if dimension not in SWEEP_FIELDS:
        raise ValueError(f"Unsupported sweep dimension: {dimension}")
    if num < 2:
        raise ValueError("A sweep needs at least 2 points")

    points = []
    for value in np.linspace(start, stop, int(num)):
        value = max(0.0, float(value))
        points.append((value, predict(data.with_value(dimension, value))))
    return points
