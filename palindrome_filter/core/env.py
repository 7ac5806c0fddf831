"""Settings and .env loading for palindrome-filter.

Load order (first wins):
  1. Existing OS environment variables — never overwrite.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables:
  PALINDROME_FILTER_WORKERS     thread pool size for the concurrent strategy
                                (default: os.cpu_count())
  PALINDROME_FILTER_CHUNK_SIZE  numbers handed to a worker per task
                                (default: split evenly, a few chunks per worker)

Values that are not positive integers are ignored with a warning.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

WORKERS_VAR = 'PALINDROME_FILTER_WORKERS'
CHUNK_SIZE_VAR = 'PALINDROME_FILTER_CHUNK_SIZE'


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or file (worktree)
        if (directory / '.git').exists():
            return None
    return None


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines. Accepts quoted values and an `export ` prefix."""
    result: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        if line.startswith('export '):
            line = line[len('export ') :]
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    path = Path(env_file) if env_file else _find_dotenv(Path.cwd())
    if path is None or not path.is_file():
        return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def _positive_int(name: str, raw: str | None) -> int | None:
    if raw is None or raw.strip() == '':
        return None
    try:
        value = int(raw)
    except ValueError:
        logger.warning('ignoring %s=%r: not an integer', name, raw)
        return None
    if value < 1:
        logger.warning('ignoring %s=%r: must be positive', name, raw)
        return None
    return value


@dataclass(frozen=True)
class FilterSettings:
    """Tuning knobs for the concurrent strategy. None means pick a default."""

    workers: int | None = None
    chunk_size: int | None = None

    @classmethod
    def from_env(cls) -> FilterSettings:
        return cls(
            workers=_positive_int(WORKERS_VAR, os.environ.get(WORKERS_VAR)),
            chunk_size=_positive_int(CHUNK_SIZE_VAR, os.environ.get(CHUNK_SIZE_VAR)),
        )

    def override(self, workers: int | None = None, chunk_size: int | None = None) -> FilterSettings:
        """Return a copy with any non-None argument replacing the current value."""
        return FilterSettings(
            workers=workers if workers is not None else self.workers,
            chunk_size=chunk_size if chunk_size is not None else self.chunk_size,
        )

    def resolved_workers(self) -> int:
        if self.workers is not None:
            return self.workers
        return os.cpu_count() or 1
