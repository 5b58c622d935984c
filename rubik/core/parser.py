"""
Input parser: turns the characters typed by the user into face moves.

A face character turns that face clockwise a quarter turn, "-N" or "N'" turns
it anticlockwise. Consecutive turns of the same face are added into a single
move, and a line break commits what is pending. Any other character is
ignored.
"""
import logging
from typing import List, NamedTuple, Optional

from .colors import ColorAlphabet
from .config import APOS, MINUS, NEWLINE

log = logging.getLogger(__name__)

# Actions decided for one input character
SAVE_FOUND_FACE = 1
SAVE_PENDING_FACE = 2
ROTATE_SAVED_FACE = 4


class Move(NamedTuple):
    face: int
    turns: int


class MoveParser:
    """
    State of the input between characters:
      pending_face   -- face just read, its sign can still change
      saved_face     -- face whose turns are being added up in turn_count
      pending_sign   -- +1 or -1, sign of the pending face
      turn_count     -- net quarter turns of saved_face
      last_char      -- previous character
      last_face_char -- face character an apostrophe can still negate
    """

    def __init__(self, alphabet: Optional[ColorAlphabet] = None):
        self.alphabet = alphabet or ColorAlphabet()
        self.reset()

    def reset(self):
        self.pending_face: Optional[int] = None
        self.saved_face: Optional[int] = None
        self.pending_sign = 1
        self.turn_count = 0
        self.last_char = ''
        self.last_face_char = ''

    def _commit_actions(self) -> int:
        """Actions needed to move the pending face into the saved one."""
        action = SAVE_PENDING_FACE
        if self.saved_face is not None and self.saved_face != self.pending_face:
            action |= ROTATE_SAVED_FACE
        return action

    def feed(self, c: str) -> Optional[Move]:
        """
        Update the state with one character and return the move to apply, if any.
        A line break only commits the pending face, a second one is needed to
        get its move (or use flush).
        """
        action = 0
        face = self.alphabet.face_of(c)
        if face is not None:
            if self.pending_face is not None:
                action |= self._commit_actions()
            action |= SAVE_FOUND_FACE
            self.last_face_char = c
        else:
            if c == APOS:
                if self.last_face_char and self.pending_face is not None:
                    self.pending_sign = -self.pending_sign
            else:
                if c == NEWLINE:
                    if self.pending_face is not None:
                        action |= self._commit_actions()
                    elif self.saved_face is not None:
                        action |= ROTATE_SAVED_FACE
                self.last_face_char = ''

        result = None
        if action & ROTATE_SAVED_FACE:
            result = Move(self.saved_face, self.turn_count)
            self.saved_face = None
            self.turn_count = 0
        if action & SAVE_PENDING_FACE:
            self.saved_face = self.pending_face
            self.pending_face = None
            self.turn_count += self.pending_sign
            self.pending_sign = 1
        if action & SAVE_FOUND_FACE:
            self.pending_face = face
            self.pending_sign = -1 if self.last_char == MINUS else 1

        self.last_char = c
        if result is not None:
            log.debug("move %s", result)
        return result

    def flush(self) -> List[Move]:
        """Commit the pending face and return every move still waiting, leaving the parser empty."""
        moves = []
        for _ in range(2):
            move = self.feed(NEWLINE)
            if move is not None:
                moves.append(move)
        return moves

    def parse(self, text: str) -> List[Move]:
        """All the moves of a text, flushed at the end."""
        moves = [m for m in map(self.feed, text) if m is not None]
        return moves + self.flush()
