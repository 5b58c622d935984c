import logging
from typing import List

from .core.colors import ColorAlphabet
from .core.config import DEFAULT_COLOR_CHARS, NEWLINE, SOLVED_POSITION
from .core.parser import Move, MoveParser
from .core.state import CubeState
from .core.text_hud import CubeTextHUD

log = logging.getLogger(__name__)


class CubeSession:
    """High-level session: color characters, input parser and cube state together."""

    def __init__(self, chars: str = DEFAULT_COLOR_CHARS, initial: str = SOLVED_POSITION):
        # both are validated before any state exists
        self.alphabet = ColorAlphabet(chars)
        self.initial = initial
        self.cube = CubeState(initial)
        self.parser = MoveParser(self.alphabet)
        self.hud = CubeTextHUD(self.alphabet)

    def feed(self, text: str) -> List[Move]:
        """
        Apply the moves of the given text as soon as they are known. Every
        line break also flushes the parser, so a line is complete once fed.
        """
        applied = []
        for c in text:
            move = self.parser.feed(c)
            moves = [move] if move is not None else []
            if c == NEWLINE:
                moves.extend(self.parser.flush())
            for m in moves:
                self.cube.apply(m)
                applied.append(m)
        if applied:
            log.debug("applied %s, position %s", applied, self.position)
        return applied

    def feed_line(self, line: str) -> List[Move]:
        if not line.endswith(NEWLINE):
            line += NEWLINE
        return self.feed(line)

    @property
    def position(self) -> str:
        return self.cube.encode()

    def is_solved(self) -> bool:
        return self.cube.is_solved()

    def render(self) -> str:
        return self.hud.render(self.cube)

    def render_position(self) -> str:
        return self.hud.render_position(self.cube)

    def reset(self):
        """Back to the initial position with an empty parser."""
        self.cube = CubeState(self.initial)
        self.parser.reset()
