import numpy as np
import pytest

from rubik.core.config import EMPTY_COLOR, NFACES, NMINICUBES, NORIENTS
from rubik.core.geometry import (ADJACENTS, OPPOSITES, POSITIONS_BY_FACE, REFERENCE_COLORS, adjacent,
                                 build_reference_colorings, locate_piece, opposite)
from rubik.core.orientation import (ORIENTATIONS, TRANSFORMATIONS, apply_orientation, build_orientation_group,
                                    find_orientation, next_orientation, rotate_minicube)


def test_opposite_is_an_involution():
    for f in range(NFACES):
        assert opposite(opposite(f)) == f
        assert opposite(f) != f
        assert f not in ADJACENTS[f]
        assert opposite(f) not in ADJACENTS[f]


def test_adjacent_wraps_around():
    assert adjacent(0, 0) == 1
    assert adjacent(0, 3) == 3
    assert adjacent(0, 4) == adjacent(0, 0)
    assert adjacent(5, 6) == ADJACENTS[5][2]


def test_reference_colorings_layout():
    assert REFERENCE_COLORS.shape == (NMINICUBES, NFACES)
    counts = (REFERENCE_COLORS != EMPTY_COLOR).sum(axis=1)
    assert sorted(counts.tolist()) == [2] * 12 + [3] * 8
    # first cell of the scan is x=0, y=0, z=0: left, back and bottom
    assert REFERENCE_COLORS[0].tolist() == [-1, -1, 2, -1, 4, 5]
    # last one is x=2, y=2, z=2: top, front and right
    assert REFERENCE_COLORS[19].tolist() == [0, 1, -1, 3, -1, -1]
    # a face only ever carries its own color
    for f in range(NFACES):
        assert set(REFERENCE_COLORS[:, f].tolist()) == {EMPTY_COLOR, f}


def test_reference_colorings_are_deterministic():
    assert np.array_equal(build_reference_colorings(), REFERENCE_COLORS)


def test_tables_are_read_only():
    with pytest.raises(ValueError):
        REFERENCE_COLORS[0][0] = 3
    with pytest.raises(ValueError):
        TRANSFORMATIONS[0][0] = 1


def test_every_reference_coloring_locates_its_own_position():
    positions = [locate_piece(REFERENCE_COLORS[p]) for p in range(NMINICUBES)]
    assert positions == list(range(NMINICUBES))


def test_locate_piece_compares_only_the_sticker_pattern():
    colors = REFERENCE_COLORS[7].copy()
    colors[colors != EMPTY_COLOR] = [5, 4, 3]
    assert locate_piece(colors) == 7


def test_locate_piece_not_found():
    assert locate_piece([0, 1, 2, 3, 4, 5]) is None
    assert locate_piece([EMPTY_COLOR] * NFACES) is None
    # top and bottom at once is not a real minicube
    assert locate_piece([0, EMPTY_COLOR, EMPTY_COLOR, EMPTY_COLOR, EMPTY_COLOR, 5]) is None


def test_positions_by_face_belong_to_the_face():
    for f in range(NFACES):
        positions = POSITIONS_BY_FACE[f]
        assert len(set(positions.tolist())) == 8
        for pos in positions:
            assert REFERENCE_COLORS[pos][f] == f
        corners = (REFERENCE_COLORS[positions[:4]] != EMPTY_COLOR).sum(axis=1)
        edges = (REFERENCE_COLORS[positions[4:]] != EMPTY_COLOR).sum(axis=1)
        assert corners.tolist() == [3] * 4
        assert edges.tolist() == [2] * 4


def test_orientation_group_is_24_distinct_permutations():
    assert ORIENTATIONS.shape == (NORIENTS, NFACES)
    assert len({tuple(o) for o in ORIENTATIONS.tolist()}) == NORIENTS
    for o in ORIENTATIONS:
        assert sorted(o.tolist()) == list(range(NFACES))


def test_orientation_zero_is_the_identity():
    assert ORIENTATIONS[0].tolist() == [0, 1, 2, 3, 4, 5]
    assert apply_orientation(REFERENCE_COLORS[12], 0).tolist() == REFERENCE_COLORS[12].tolist()


def test_orientation_group_layout():
    assert np.array_equal(build_orientation_group(), ORIENTATIONS)
    # face 2, phase 1
    assert ORIENTATIONS[9].tolist() == [2, 1, 5, 0, 4, 3]
    for i, o in enumerate(ORIENTATIONS):
        assert o[0] == i // 4
        assert o[5] == OPPOSITES[i // 4]


def test_find_orientation():
    for i in range(NORIENTS):
        assert find_orientation(ORIENTATIONS[i]) == i
    assert find_orientation([0, 0, 0, 0, 0, 0]) is None
    # a mirror image is not a rotation
    assert find_orientation([0, 2, 1, 3, 4, 5]) is None


def test_rotate_minicube_follows_adjacency():
    assert rotate_minicube(0, [0, 1, 2, 3, 4, 5]).tolist() == [0, 3, 1, 4, 2, 5]
    assert rotate_minicube(1, [0, 1, 2, 3, 4, 5]).tolist() == [2, 1, 5, 0, 4, 3]


def test_transformation_table_values():
    assert TRANSFORMATIONS.shape == (NFACES, NORIENTS)
    assert next_orientation(0, 0) == 3
    assert next_orientation(1, 0) == 9
    assert set(TRANSFORMATIONS.flatten().tolist()) <= set(range(NORIENTS))


@pytest.mark.parametrize("face", range(NFACES))
def test_generators_have_order_four(face):
    for i in range(NORIENTS):
        o = i
        for _ in range(4):
            o = next_orientation(face, o)
        assert o == i
        assert next_orientation(face, i) != i


@pytest.mark.parametrize("face", range(NFACES))
def test_opposite_generators_are_inverse(face):
    for i in range(NORIENTS):
        assert next_orientation(opposite(face), next_orientation(face, i)) == i


@pytest.mark.parametrize("face", range(NFACES))
def test_each_generator_permutes_the_orientations(face):
    assert sorted(TRANSFORMATIONS[face].tolist()) == list(range(NORIENTS))
