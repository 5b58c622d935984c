"""
Configuration: cube dimensions, input tokens and the optional config.yaml
"""
import logging
import os
from typing import Any, Dict, Optional

import yaml

log = logging.getLogger(__name__)

# Cube dimensions
NFACES = 6
NMINICUBES = 20
NORIENTS = 24
NROTATIONS = NFACES
NMINICUBES_PER_FACE = 8

# Colors are 0..5, a face of a minicube without sticker is EMPTY
EMPTY_COLOR = -1

# Characters shown for the colors and accepted as face tokens
DEFAULT_COLOR_CHARS = "123456"
EMPTY_CHAR = ' '

# Input tokens
MINUS = '-'
APOS = "'"
NEWLINE = '\n'

# Encoded position: one letter per minicube, A is orientation 0
POSITION_FIRST_CHAR = 'A'
SOLVED_POSITION = POSITION_FIRST_CHAR * NMINICUBES

# Relative to the current directory
DEFAULT_CONFIG_PATH = "config.yaml"


class CubeError(ValueError):
    """Base class of the errors detected before a session starts."""


DEFAULTS: Dict[str, Any] = {
    'chars': DEFAULT_COLOR_CHARS,
    'initial': SOLVED_POSITION,
    'silent': False,
}


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Read config.yaml and merge it over DEFAULTS.
    A missing file is not an error, the defaults are used.
    """
    path = path or DEFAULT_CONFIG_PATH
    cfg = dict(DEFAULTS)
    if not os.path.exists(path):
        log.debug("config %s not found, using defaults", path)
        return cfg

    with open(path, "r") as f:
        loaded = yaml.safe_load(f) or {}

    if not isinstance(loaded, dict):
        raise ValueError("%s must contain a mapping, got %s" % (path, type(loaded).__name__))

    for key, value in loaded.items():
        if key not in DEFAULTS:
            log.warning("ignoring unknown config key %r in %s", key, path)
            continue
        if value is not None:
            cfg[key] = value
    for key, default in DEFAULTS.items():
        if not isinstance(cfg[key], type(default)):
            raise ValueError("%s: %s must be a %s, got %r" % (path, key, type(default).__name__, cfg[key]))
    log.debug("config loaded from %s: %s", path, cfg)
    return cfg
