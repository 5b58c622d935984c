"""
Cube state: orientation of every minicube and the minicube in every position
"""
import logging

import numpy as np

from .config import NMINICUBES, NORIENTS, POSITION_FIRST_CHAR, SOLVED_POSITION, CubeError
from .geometry import (OPPOSITES, POSITIONS_BY_FACE, REFERENCE_COLORS, corner_positions, edge_positions,
                       locate_piece)
from .orientation import TRANSFORMATIONS, apply_orientation

log = logging.getLogger(__name__)


class InvalidEncodedPosition(CubeError):

    def __init__(self, position: str, reason: str):
        super().__init__("Invalid initial position: %s (%s)" % (position, reason))
        self.position = position
        self.reason = reason


def reduce_turns(times: int) -> int:
    """Reduce any number of quarter turns of a face to -2, -1, 0, 1 or 2."""
    times = int(np.fmod(times, 4))
    if times == 3:
        return -1
    if times == -3:
        return 1
    return times


def check_position_chars(position: str) -> None:
    """Raise InvalidEncodedPosition unless position has 20 letters in the range A-X."""
    if len(position) != NMINICUBES:
        raise InvalidEncodedPosition(position, "expected %d characters, got %d" % (NMINICUBES, len(position)))
    for c in position:
        if not 0 <= ord(c) - ord(POSITION_FIRST_CHAR) < NORIENTS:
            raise InvalidEncodedPosition(position, "%r is not a letter from A to X" % c)


class CubeState:
    """
    The cube as two synchronized arrays:
      orientation_of[minicube] -> orientation index 0..23
      piece_at[position]       -> minicube occupying that position

    Only rotate_face changes them, the position of every minicube can always
    be derived again from its orientation.
    """

    def __init__(self, position: str = SOLVED_POSITION):
        self._orients, self._pieces = self._decode(position)

    @classmethod
    def initialize(cls, position: str) -> "CubeState":
        return cls(position)

    @classmethod
    def solved(cls) -> "CubeState":
        return cls(SOLVED_POSITION)

    @staticmethod
    def _decode(position: str):
        """
        Save the orientations and compute the positions of the minicubes.
        Two minicubes in the same position make the whole position invalid.
        """
        check_position_chars(position)
        orients = np.array([ord(c) - ord(POSITION_FIRST_CHAR) for c in position], dtype=np.int8)
        pieces = np.full(NMINICUBES, -1, dtype=np.int8)

        for i in range(NMINICUBES):
            pos = locate_piece(apply_orientation(REFERENCE_COLORS[i], orients[i]))
            if pos is None:
                raise InvalidEncodedPosition(position, "minicube %d has no position" % i)
            if pieces[pos] != -1:
                raise InvalidEncodedPosition(
                    position, "minicubes %d and %d are both in position %d" % (pieces[pos], i, pos))
            pieces[pos] = i

        return orients, pieces

    def rotate_face(self, face: int, times: int):
        """
        Rotate a face the given number of quarter turns, negative to do it in
        reverse. First moves the minicubes to their new positions and then
        changes their orientations.
        """
        if not times:
            return
        posarr = POSITIONS_BY_FACE[face]
        corners, edges = corner_positions(face), edge_positions(face)
        self._pieces[corners] = self._pieces[np.roll(corners, times)]
        self._pieces[edges] = self._pieces[np.roll(edges, times)]

        transform = TRANSFORMATIONS[face] if times > 0 else TRANSFORMATIONS[OPPOSITES[face]]
        moved = self._pieces[posarr]
        for _ in range(abs(times)):
            self._orients[moved] = transform[self._orients[moved]]
        log.debug("rotated face %d %+d times: %s", face, times, self.encode())

    def apply(self, move):
        """Apply a parsed move, reducing its count first."""
        self.rotate_face(move.face, reduce_turns(move.turns))

    def encode(self) -> str:
        return ''.join(chr(ord(POSITION_FIRST_CHAR) + int(o)) for o in self._orients)

    @property
    def orientation_of(self) -> np.ndarray:
        view = self._orients.view()
        view.setflags(write=False)
        return view

    @property
    def piece_at(self) -> np.ndarray:
        view = self._pieces.view()
        view.setflags(write=False)
        return view

    def position_of(self, piece: int) -> int:
        return int(np.flatnonzero(self._pieces == piece)[0])

    def apparent_colors(self, position: int) -> np.ndarray:
        """Colors of the faces of the minicube in the given position."""
        piece = self._pieces[position]
        return apply_orientation(REFERENCE_COLORS[piece], self._orients[piece])

    def is_solved(self) -> bool:
        return not self._orients.any()

    def copy(self) -> "CubeState":
        other = CubeState.__new__(CubeState)
        other._orients = self._orients.copy()
        other._pieces = self._pieces.copy()
        return other

    def __eq__(self, other) -> bool:
        if not isinstance(other, CubeState):
            return NotImplemented
        return (np.array_equal(self._orients, other._orients)
                and np.array_equal(self._pieces, other._pieces))

    def __repr__(self):
        return "CubeState(%r)" % self.encode()
