"""
IPD Measurement
Inter-personal distance from world space positions, rounded to the centimeter
"""

import numpy as np
from typing import Dict, Mapping
from scipy.spatial.distance import cdist


class InvalidPositionError(ValueError):
    """A position that cannot be read as an (x, y, z) vector."""


def as_position(value, name: str = 'position') -> np.ndarray:
    """Coerce a sequence, mapping, or object with x/y/z into a 3-vector."""
    if value is None:
        raise InvalidPositionError(f"parameter '{name}' must be an object with fields 'x', 'y', and 'z'")

    if isinstance(value, Mapping):
        if not all(axis in value for axis in ('x', 'y', 'z')):
            raise InvalidPositionError(f"parameter '{name}' must be an object with fields 'x', 'y', and 'z'")
        coords = (value['x'], value['y'], value['z'])
    elif all(hasattr(value, axis) for axis in ('x', 'y', 'z')):
        coords = (value.x, value.y, value.z)
    else:
        coords = value

    try:
        position = np.asarray(coords, dtype=np.float64)
    except (TypeError, ValueError):
        raise InvalidPositionError(f"parameter '{name}' must be numeric, got {value!r}")

    if position.shape != (3,) or not np.all(np.isfinite(position)):
        raise InvalidPositionError(f"parameter '{name}' must be a finite 3-vector, got {value!r}")
    return position


def _round_cm(distances: np.ndarray) -> np.ndarray:
    # Half-up rounding, distances are never negative
    return np.floor(distances + 0.5).astype(np.int64)


def ipd_between(a, b) -> int:
    """Euclidean distance between two positions in centimeters, rounded to the nearest centimeter."""
    pos_a = as_position(a, 'a')
    pos_b = as_position(b, 'b')
    distance = np.sqrt(np.sum((pos_a - pos_b) ** 2))
    return int(_round_cm(np.array([distance]))[0])


def ipds_from(subject, entities: Mapping[int, object]) -> Dict[int, int]:
    """Distance from one subject to many entities, keyed by entity ID."""
    if not entities:
        return {}

    origin = as_position(subject, 'subject').reshape(1, 3)
    entity_ids = list(entities.keys())
    positions = np.vstack([as_position(entities[entity_id], f'entity {entity_id}')
                           for entity_id in entity_ids])

    distances = _round_cm(cdist(origin, positions, metric='euclidean')[0])
    return {entity_id: int(distance) for entity_id, distance in zip(entity_ids, distances)}
