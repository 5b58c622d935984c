"""
ASCII renderers: the whole cube seen from two sides, single minicubes and
dumps of the tables.
"""
from typing import Dict, List, Optional, Sequence

from .colors import ColorAlphabet
from .config import NFACES, NMINICUBES, NORIENTS, NROTATIONS
from .geometry import POSITIONS_BY_FACE, REFERENCE_COLORS, locate_piece
from .orientation import ORIENTATIONS, TRANSFORMATIONS
from .state import CubeState

# Minicube orientation: A..F are replaced by the colors of the faces 0..5
ORIENT_KEYS = "ABCDEF"
ORIENT_TPL = [
    "    ____E___",
    "   /.      /|",
    "  / . A   / |",
    " /_______/  |",
    " |  . . .| .|",
    "C| .     |D /",
    " |.  B   | /",
    " |_______|/",
    "      F",
]

# Whole cube: front-top-right view on the left and back-bottom-left view on
# the right. The keys are filled in this order: every visible face, then a
# backslash for '*', then the six center colors.
CUBE_KEYS = "SjsktaluTvbxJUyKzLc{VmdoMXOfAYpBqCgrDZFhGP[HQIRi*ENWenw"
CUBE_TPL = [
    "         ___p_____q_____r__ (n      __C_____B_____A__ (E",
    "       Y/  A  /  B  /  C  /|       |     |     |     |",
    "       /_____/_____/_____/ |r     g|  r  |  q  |  p  |*A",
    "     Z/  D  /  E  /  F  /|g|       |_____|_____|_____|Y*",
    "     /_____/_____/_____/ |/|       |     |     |     | |*D",
    "   [/  G  /  H  /  I  /|h/ |o     d|  o  |  n  |  m  |*|Z*",
    "W) /_____/_____/_____/ |/|d|       |_____|_____|_____|V* |*G",
    "   |     |     |     |i/ |/|       |     |     |     | |*|[*",
    "  [|  P  |  Q  |  R  |/|e/ |l     a|  l  |  k  |  j  |*|W* |P",
    "   |_____|_____|_____| |/|a/       |_____|_____|_____|S* |*|",
    "   |     |     |     |f/ |/u    e) *  u  *  t  *  s  * |*|X|",
    "  X|  M  |  N  |  O  |/|b/         a*_____*_____*_____*|T* |M",
    "   |_____|_____|_____| |/x           *  x  *  w  *  v  * |*|",
    "   |     |     |     |c/             b*_____*_____*_____*|U|",
    "  U|  J  |  K  |  L  |/{               *  {  *  z  *  y  * |J",
    "   |_____|_____|_____|                 c*_____*_____*_____*|",
    "      y     z     {   (w                   L     K     J    (N",
]

# (position, face) of every visible sticker, positions in x,y,z order
STICKERS = [
    (0, 2), (0, 4), (0, 5),
    (1, 4), (1, 5),
    (2, 3), (2, 4), (2, 5),
    (3, 2), (3, 5),
    (4, 3), (4, 5),
    (5, 1), (5, 2), (5, 5),
    (6, 1), (6, 5),
    (7, 1), (7, 3), (7, 5),
    (8, 2), (8, 4),
    (9, 3), (9, 4),
    (10, 1), (10, 2),
    (11, 1), (11, 3),
    (12, 0), (12, 2), (12, 4),
    (13, 0), (13, 4),
    (14, 0), (14, 3), (14, 4),
    (15, 0), (15, 2),
    (16, 0), (16, 3),
    (17, 0), (17, 1), (17, 2),
    (18, 0), (18, 1),
    (19, 0), (19, 1), (19, 3),
]


def fill_template(lines: Sequence[str], keys: str, values: Sequence[str], indent: str = "") -> List[str]:
    """Replace every one-char key found in the lines with its value."""
    table: Dict[int, str] = {ord(k): v for k, v in zip(keys, values)}
    return [indent + line.translate(table) for line in lines]


class CubeTextHUD:
    """Text views of a cube state using the characters of an alphabet."""

    def __init__(self, alphabet: Optional[ColorAlphabet] = None, indent: str = "        "):
        self.alphabet = alphabet or ColorAlphabet()
        self.indent = indent

    def render(self, cube: CubeState) -> str:
        colors = [cube.apparent_colors(pos) for pos in range(NMINICUBES)]
        values = [self.alphabet.char_of(int(colors[pos][face])) for pos, face in STICKERS]
        values.append('\\')
        values.extend(self.alphabet.char_of(f) for f in range(NFACES))
        return '\n'.join(fill_template(CUBE_TPL, CUBE_KEYS, values, self.indent))

    def render_position(self, cube: CubeState) -> str:
        return self.indent + cube.encode()

    def render_orientation(self, orientation: int) -> str:
        values = [self.alphabet.char_of(int(f)) for f in ORIENTATIONS[orientation]]
        return '\n'.join(fill_template(ORIENT_TPL, ORIENT_KEYS, values, "   "))

    def dump_orientations(self) -> str:
        blocks = []
        for i in range(NORIENTS):
            drawing = self.render_orientation(i).split('\n')
            drawing[0] = ("%-3s" % ("%d:" % i)) + drawing[0][3:]
            blocks.append('\n'.join(drawing))
        return '\n'.join(blocks)

    def dump_colorings(self) -> str:
        """Reference colors of every minicube and the position found for them."""
        lines = []
        for i in range(NMINICUBES):
            cells = ''.join(" %s" % ('.' if c < 0 else c) for c in REFERENCE_COLORS[i])
            lines.append("%2d: %s  (%s)" % (i, cells, locate_piece(REFERENCE_COLORS[i])))
        return '\n'.join(lines)

    def dump_transformations(self) -> str:
        lines = ["ORIENT|" + ''.join(" %2d" % i for i in range(NORIENTS)),
                 "------|" + "---" * NORIENTS]
        for r in range(NROTATIONS):
            lines.append("MOVE %d|" % r + ''.join(" %2d" % o for o in TRANSFORMATIONS[r]))
        return '\n'.join(lines)

    def dump_positions(self) -> str:
        lines = ["FACE| --CORNERS-- ---EDGES---"]
        for f in range(NFACES):
            lines.append("  %d |" % f + ''.join("%3d" % p for p in POSITIONS_BY_FACE[f]))
        return '\n'.join(lines)
