"""
Orientation group of a minicube and its transformation table.

An orientation is a new distribution of the six faces: orientation[f] is the
reference face that now sits on the physical face f. The transformation table
gives the new orientation of a minicube after one clockwise quarter turn of
each face. Counter-clockwise turns use the opposite face.
"""
from typing import Optional, Sequence

import numpy as np

from .config import NFACES, NORIENTS, NROTATIONS
from .geometry import ADJACENTS, adjacent, opposite


def build_orientation_group() -> np.ndarray:
    """For every face and every one of its 4 phases, one orientation (index 4*face + phase)."""
    orientations = np.zeros((NORIENTS, NFACES), dtype=np.int8)
    i = 0
    for f in range(NFACES):
        for a in range(4):
            orientations[i] = (
                f,
                adjacent(f, a),
                adjacent(f, a + 1),
                adjacent(f, a + 3),
                adjacent(f, a + 2),
                opposite(f),
            )
            i += 1
    return orientations


ORIENTATIONS = build_orientation_group()
ORIENTATIONS.setflags(write=False)


def rotate_minicube(face: int, colors: Sequence[int]) -> np.ndarray:
    """Rotate a minicube clockwise from the given face: the value on adjacents[k] moves to adjacents[k+1]."""
    rotated = np.array(colors, dtype=np.int8)
    adjacents = ADJACENTS[face]
    rotated[adjacents] = rotated[np.roll(adjacents, 1)]
    return rotated


def find_orientation(colors: Sequence[int]) -> Optional[int]:
    """Index of the orientation equal to the given face tuple, None if it is not one."""
    matches = np.flatnonzero((ORIENTATIONS == np.asarray(colors)).all(axis=1))
    if matches.size == 0:
        return None
    return int(matches[0])


def apply_orientation(reference_colors: Sequence[int], orientation: int) -> np.ndarray:
    """Colors of a minicube seen in the given orientation."""
    return np.asarray(reference_colors)[ORIENTATIONS[orientation]]


def build_transformation_table() -> np.ndarray:
    """
    New orientation of a minicube for every rotation and previous orientation.
    A missing orientation means the tables are inconsistent.
    """
    table = np.zeros((NROTATIONS, NORIENTS), dtype=np.int8)
    for r in range(NROTATIONS):
        for i in range(NORIENTS):
            found = find_orientation(rotate_minicube(r, ORIENTATIONS[i]))
            if found is None:
                raise RuntimeError("rotation %d of orientation %d is not an orientation" % (r, i))
            table[r][i] = found
    return table


TRANSFORMATIONS = build_transformation_table()
TRANSFORMATIONS.setflags(write=False)


def next_orientation(face: int, orientation: int) -> int:
    return int(TRANSFORMATIONS[face][orientation])
