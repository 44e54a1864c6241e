"""Environment and settings for accent-tool.

Load order (first wins):
  1. Existing OS environment variables — never overwrite.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Settings recognised (all optional):
  ACCENT_TMP_DIR        directory for the temporary accent sample PNG
  ACCENT_SAMPLE_PIXELS  pixels sampled by the k-means extractor (5000)
  ACCENT_SEED           sampling / clustering seed (42)
  ACCENT_LOG_LEVEL      loguru level for the CLI stderr sink (WARNING)
"""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = 'ACCENT_'


def find_dotenv(start: Path) -> Path | None:
    """Nearest .env at or above `start`; None once a .git boundary is passed."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a normal clone, a file in a worktree
        if (directory / '.git').exists():
            return None
    return None


def parse_dotenv(text: str) -> dict[str, str]:
    """Parse KEY=value lines. Quotes around values are dropped, # lines skipped."""
    result: dict[str, str] = {}
    for raw in text.splitlines():
        line = raw.strip()
        if line.startswith('export '):
            line = line[len('export ') :].lstrip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env values into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in parse_dotenv(path.read_text(encoding='utf-8')).items():
        os.environ.setdefault(key, value)
    return path


def _int_setting(name: str, default: int) -> int:
    raw = os.environ.get(ENV_PREFIX + name, '').strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f'{ENV_PREFIX}{name} must be an integer, got {raw!r}') from None


@dataclass(frozen=True)
class Settings:
    tmp_dir: Path
    sample_pixels: int = 5000
    seed: int = 42
    log_level: str = 'WARNING'

    @classmethod
    def from_env(cls) -> Settings:
        tmp_dir = os.environ.get(ENV_PREFIX + 'TMP_DIR') or tempfile.gettempdir()
        sample_pixels = _int_setting('SAMPLE_PIXELS', 5000)
        if sample_pixels < 1:
            raise ValueError(f'{ENV_PREFIX}SAMPLE_PIXELS must be positive, got {sample_pixels}')
        return cls(
            tmp_dir=Path(tmp_dir),
            sample_pixels=sample_pixels,
            seed=_int_setting('SEED', 42),
            log_level=(os.environ.get(ENV_PREFIX + 'LOG_LEVEL') or 'WARNING').upper(),
        )
