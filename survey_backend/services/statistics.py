# survey_backend/services/statistics.py

import math
from typing import Dict, List

import numpy as np

# Curves are always drawn across a 0-100 scale.
DOMAIN_MAX = 100.0


def normal_distribution(mean: float, std_dev: float, num_points: int) -> List[Dict[str, float]]:
    """
    Sample the Gaussian PDF at num_points evenly spaced x values over [0, 100].
    Returns chart-ready points: [{"x": ..., "y": ...}, ...] in ascending x.

    Degenerate input is not rejected: num_points == 1 or std_dev == 0
    produce nan/inf values in the output instead of raising.
    """
    points: List[Dict[str, float]] = []

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        step = np.float64(DOMAIN_MAX) / np.float64(num_points - 1)
        sigma = np.float64(std_dev)
        coefficient = np.float64(1.0) / (sigma * np.sqrt(2 * math.pi))

        for i in range(num_points):
            x = np.float64(i) * step
            y = coefficient * np.exp(-0.5 * ((x - mean) / sigma) ** 2)
            points.append({"x": float(x), "y": float(y)})

    return points
