"""Settings lookup shared by the theme, logging and the loop.

Priority: real environment variable > .env in the working directory > default.
Only TODO_* keys are read from .env; NO_COLOR is honored from the real
environment only.
"""
from __future__ import annotations
import os
from pathlib import Path
from typing import Dict, Mapping, Optional

ENV_FILE = Path('.env')
ENV_PREFIX = 'TODO_'


def read_env_file(path: Path = ENV_FILE) -> Dict[str, str]:
    """Parse KEY=VALUE lines from a .env file, keeping only TODO_* keys."""
    overrides: Dict[str, str] = {}
    if not path.exists():
        return overrides
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k = k.strip()
        v = v.strip().strip('"').strip("'")
        if k.startswith(ENV_PREFIX):
            overrides[k] = v
    return overrides


_ENV_OVERRIDES: Dict[str, str] = read_env_file()


def setting(name: str, default: Optional[str] = None,
            environ: Optional[Mapping[str, str]] = None,
            overrides: Optional[Mapping[str, str]] = None) -> Optional[str]:
    env = os.environ if environ is None else environ
    file_values = _ENV_OVERRIDES if overrides is None else overrides
    value = env.get(name)
    if value:
        return value
    return file_values.get(name, default)
