# skeleton_engine/processing/geometry.py
import numpy as np
from typing import Sequence

def length(position: np.ndarray) -> float:
    """Euclidean magnitude of a position, i.e. its distance from the sensor origin."""
    return float(np.linalg.norm(position))

def chain_length(positions: Sequence[np.ndarray]) -> float:
    """
    Sums the distances between consecutive points, in the order given.
    Raises ValueError for fewer than two points.
    """
    if len(positions) < 2:
        raise ValueError(f"A chain needs at least two points, got {len(positions)}")

    points = np.asarray(positions, dtype=float)
    segments = np.diff(points, axis=0)
    return float(np.linalg.norm(segments, axis=1).sum())
