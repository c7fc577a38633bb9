from __future__ import annotations
import logging
import os
from pathlib import Path


# Resolve installation dir (shallot package directory)
_SHALLOT_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _SHALLOT_DIR / 'prelude'
_DEFAULT_PROGRAMS_DIR = _SHALLOT_DIR / 'programs'
PRELUDE_FILE = 'core.shl'

# Roughly four Python frames per nested Lisp call, so this allows a few
# thousand nested applications.
DEFAULT_RECURSION_LIMIT = 20_000
DEFAULT_LOG_LEVEL = 'WARNING'


def get_prelude_root() -> Path:
    raw = os.environ.get('SHALLOT_PRELUDE_PATH', '').strip()
    if not raw:
        return _DEFAULT_PRELUDE_DIR
    # a file path names its directory
    p = Path(raw)
    return p if p.is_dir() else p.parent


def get_prelude_file() -> Path:
    return get_prelude_root() / PRELUDE_FILE


def programs_root() -> Path:
    return _DEFAULT_PROGRAMS_DIR


def get_recursion_limit() -> int:
    raw = os.environ.get('SHALLOT_RECURSION_LIMIT')
    if not raw:
        return DEFAULT_RECURSION_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"SHALLOT_RECURSION_LIMIT must be an integer, got {raw!r}")
    if limit <= 0:
        raise ValueError(f"SHALLOT_RECURSION_LIMIT must be positive, got {limit}")
    return limit


def get_log_level() -> int:
    name = os.environ.get('SHALLOT_LOG_LEVEL', DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown SHALLOT_LOG_LEVEL {name!r}")
    return level
