"""
Geometry of the cube: faces, adjacency and the reference coloring of the
20 minicubes.

Faces of the cube and of each minicube, used also as the colors:

       |z
       |___4___
      /.      /|
     / . 0   / |
    /_______/  |
    |  . . .| .|___
   2| .     |3 /  x
    |.  1   | /
    |_______|/
   /     5
  /y

Standard positions of the minicubes, shown in horizontal layers:

      |z
      |
      |12_13_14
     /15    16/
    /17_18_19/
      |8_____9_
     /        /
    /10____11/
      |0__1__2_____
     /3     4 /    x
    /5__6__7_/
   /
  /y
"""
from typing import Optional, Sequence

import numpy as np

from .config import EMPTY_COLOR, NFACES, NMINICUBES, NMINICUBES_PER_FACE

# Adjacent faces of each face in clockwise order, starting from the minor one.
# Rotating a minicube from face 0, the face in 1 moves to 2, 2 to 4, 4 to 3
# and 3 to 1.
ADJACENTS = np.array([
    [1, 2, 4, 3],
    [0, 3, 5, 2],
    [0, 1, 5, 4],
    [0, 4, 5, 1],
    [0, 2, 5, 3],
    [1, 3, 4, 2],
], dtype=np.int8)

OPPOSITES = np.array([5, 4, 3, 2, 1, 0], dtype=np.int8)

# Positions of the minicubes of each face, corners first and edges second,
# each group in clockwise order starting from the minor value.
POSITIONS_BY_FACE = np.array([
    [12, 14, 19, 17,   13, 16, 18, 15],
    [5, 17, 19, 7,     6, 10, 18, 11],
    [0, 12, 17, 5,     3, 8, 15, 10],
    [2, 7, 19, 14,     4, 11, 16, 9],
    [0, 2, 14, 12,     1, 9, 13, 8],
    [0, 5, 7, 2,       1, 3, 6, 4],
], dtype=np.int8)

for _table in (ADJACENTS, OPPOSITES, POSITIONS_BY_FACE):
    _table.setflags(write=False)


def opposite(face: int) -> int:
    return int(OPPOSITES[face])


def adjacent(face: int, k: int) -> int:
    """k-th adjacent face of face, k taken modulo 4."""
    return int(ADJACENTS[face][k % 4])


def init_color(face: int, x: int, y: int, z: int) -> int:
    """Color of the given face of the lattice cell (x, y, z), EMPTY_COLOR if hidden."""
    on_plane = {
        0: z == 2,
        1: y == 2,
        2: x == 0,
        3: x == 2,
        4: y == 0,
        5: z == 0,
    }
    return face if on_plane[face] else EMPTY_COLOR


def build_reference_colorings() -> np.ndarray:
    """
    Colors of the faces of every external minicube except the centers,
    in x,y,z order (x changes first, then y, then z). The scan order
    defines the minicube indexes.
    """
    colorings = []
    for z in range(3):
        for y in range(3):
            for x in range(3):
                colors = [init_color(f, x, y, z) for f in range(NFACES)]
                if sum(c != EMPTY_COLOR for c in colors) > 1:
                    colorings.append(colors)
    if len(colorings) != NMINICUBES:
        raise RuntimeError("expected %d minicubes, found %d" % (NMINICUBES, len(colorings)))
    return np.array(colorings, dtype=np.int8)


REFERENCE_COLORS = build_reference_colorings()
REFERENCE_COLORS.setflags(write=False)

# Shape of each position: which faces carry a sticker
_REFERENCE_SHAPES = REFERENCE_COLORS != EMPTY_COLOR


def locate_piece(colors: Sequence[int]) -> Optional[int]:
    """
    Return the position whose reference minicube has stickers on exactly the
    same faces as the given colors, or None if there is no such position.
    Only the colored/empty pattern is compared, not the colors themselves.
    """
    shape = np.asarray(colors) != EMPTY_COLOR
    if shape.shape != (NFACES,):
        return None
    matches = np.flatnonzero((_REFERENCE_SHAPES == shape).all(axis=1))
    if matches.size == 0:
        return None
    return int(matches[0])


def corner_positions(face: int) -> np.ndarray:
    return POSITIONS_BY_FACE[face][:NMINICUBES_PER_FACE // 2]


def edge_positions(face: int) -> np.ndarray:
    return POSITIONS_BY_FACE[face][NMINICUBES_PER_FACE // 2:]
