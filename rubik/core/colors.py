"""
Characters used to show the colors and to name the faces in the input.
"""
from typing import Optional

from .config import APOS, DEFAULT_COLOR_CHARS, EMPTY_CHAR, EMPTY_COLOR, MINUS, NFACES, CubeError


class InvalidColorAlphabet(CubeError):

    def __init__(self, chars: str, reason: str):
        super().__init__("Invalid color characters: %s (%s)" % (chars, reason))
        self.chars = chars
        self.reason = reason


def check_color_chars(chars: str) -> None:
    """Raise InvalidColorAlphabet unless chars has 6 distinct printable characters other than - and '."""
    if len(chars) != NFACES:
        raise InvalidColorAlphabet(chars, "expected %d characters, got %d" % (NFACES, len(chars)))
    for i, c in enumerate(chars):
        if not c.isprintable() or c.isspace() or not c.isascii():
            raise InvalidColorAlphabet(chars, "%r is not a printable character" % c)
        if c in (APOS, MINUS):
            raise InvalidColorAlphabet(chars, "%r is reserved for negation" % c)
        if chars.index(c) < i:
            raise InvalidColorAlphabet(chars, "%r is repeated" % c)


class ColorAlphabet:
    """Maps the colors 0..5 to their characters and back."""

    def __init__(self, chars: str = DEFAULT_COLOR_CHARS):
        check_color_chars(chars)
        self.chars = chars

    def face_of(self, c: str) -> Optional[int]:
        idx = self.chars.find(c) if len(c) == 1 else -1
        return idx if idx >= 0 else None

    def char_of(self, color: int) -> str:
        return self.chars[color] if color != EMPTY_COLOR else EMPTY_CHAR

    def __repr__(self):
        return "ColorAlphabet(%r)" % self.chars
