"""Environment variable loading for wallgen.

Load order (first wins):
  1. Existing OS environment variables — never overwrite.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Walking stops at .git so we never load a .env from outside the repo.
Only sets variables that are NOT already in os.environ.

WALLGEN_* variables then supply defaults for the render options; command
line flags still override them.
"""

import os
from pathlib import Path
from typing import Any

ENV_PREFIX = 'WALLGEN_'

# option name -> converter for its WALLGEN_<NAME> variable
ENV_OPTIONS: dict[str, Any] = {
    'width': int,
    'height': int,
    'background': str,
    'colours': str,
    'style': str,
    'num_shapes': int,
    'bars': int,
    'iterations': int,
    'scale': float,
    'seed': int,
    'output': str,
}


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or file (worktree)
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse a .env file into a dict. Handles KEY=value and KEY="value"."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        if '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip()
        value = raw_value.strip().strip('"').strip("'")
        if key:
            result[key] = value
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    parsed = _parse_dotenv(path)
    for key, value in parsed.items():
        if key not in os.environ:
            os.environ[key] = value

    return path


def env_defaults() -> dict[str, Any]:
    """Render option defaults taken from WALLGEN_* variables.

    Raises ValueError naming the variable when a value does not convert.
    """
    defaults: dict[str, Any] = {}
    for name, convert in ENV_OPTIONS.items():
        key = ENV_PREFIX + name.upper()
        raw = os.environ.get(key)
        if raw is None:
            continue
        try:
            defaults[name] = convert(raw)
        except ValueError:
            raise ValueError(f'Invalid value for {key}: {raw!r}') from None
    return defaults
