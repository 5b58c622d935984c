#!/usr/bin/env python3
"""
Console program to play with the Rubik's cube and save any position.
Reads moves from stdin, shows the cube in ASCII and the 20-letter position
after every line.
"""
import argparse
import logging
import sys
from typing import List, Optional, TextIO

import yaml

from rubik.core.colors import InvalidColorAlphabet
from rubik.core.config import CubeError, load_config
from rubik.cube_state import CubeSession

log = logging.getLogger(__name__)

# unknown arguments and an unreadable config
EXIT_USAGE = 1
EXIT_INVALID_POSITION = 2
EXIT_INVALID_CHARS = 3

INPUT_HELP = """\
Entering the character shown in the center of a face turns
that face clockwise one-quarter turn, and entering -N or N'
turns the face N anticlockwise one-quarter turn. Applying
the apostrophe again to the same face cancels it. Any other
unrecognized symbol is ignored.

Repeat the moves 12 to find when the initial position is recovered:
  yes 12 | head -200 | rubik -s | nl | grep AAAAAAAAAAAAAAAAAAAA

Exit status: 1 for a usage error or an unreadable config, 2 for an invalid
initial position, 3 for invalid color characters.
"""

DUMPS = ('colorings', 'orientations', 'transformations', 'positions')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        "rubik",
        description="Shows a 3D representation of the Rubik's Cube in ASCII and "
                    "allows to turn its faces by default entering the digits 1-6.",
        epilog=INPUT_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('-c', '--chars', type=str, default=None,
                        help='6 characters to represent the colors, for example UFLRBD')
    parser.add_argument('-i', '--initial', type=str, default=None,
                        help='the 20 uppercase letters (A-X) printed after each move '
                             'to recover again the same position')
    parser.add_argument('-s', '--silent', action='store_true', default=None,
                        help='prints only the position and not the ASCII cube')
    parser.add_argument('--config', type=str, default=None, help='YAML file with chars, initial and silent')
    parser.add_argument('--dump', choices=DUMPS, default=None, help='print an internal table and exit')
    parser.add_argument('--debug', action='store_true', help='Enable debugs')
    return parser


def setup_logging(debug: bool = False):
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO,
                        format='%(asctime)s %(filename)14s %(levelname)8s: %(message)s')

    # Color the errors and warnings in red
    logging.addLevelName(logging.ERROR, "\033[91m   ERROR\033[0m")
    logging.addLevelName(logging.WARNING, "\033[91m WARNING\033[0m")


class App:

    def __init__(self, chars: str, initial: str, silent: bool = False,
                 stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.session = CubeSession(chars, initial)
        self.silent = silent
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def show(self):
        if not self.silent:
            print(self.session.render(), file=self.stdout)
            print(file=self.stdout)
        print(self.session.render_position(), file=self.stdout)
        self.stdout.flush()

    def run(self):
        self.show()
        for line in self.stdin:
            self.session.feed_line(line)
            self.show()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # usage errors share the status of an unreadable config, --help exits 0
        return EXIT_USAGE if e.code else 0
    setup_logging(args.debug)

    try:
        cfg = load_config(args.config)
    except (OSError, ValueError, yaml.YAMLError) as e:
        log.error("could not read config: %s", e)
        return EXIT_USAGE

    chars = args.chars if args.chars is not None else cfg['chars']
    initial = args.initial if args.initial is not None else cfg['initial']
    silent = args.silent if args.silent is not None else cfg['silent']

    try:
        app = App(chars, initial, silent)
    except CubeError as e:
        log.error(str(e))
        parser.print_help(sys.stderr)
        return EXIT_INVALID_CHARS if isinstance(e, InvalidColorAlphabet) else EXIT_INVALID_POSITION

    if args.dump:
        hud = app.session.hud
        print(getattr(hud, 'dump_%s' % args.dump)())
        return 0

    try:
        app.run()
    except KeyboardInterrupt:
        log.info("interrupted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
