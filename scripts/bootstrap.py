"""Bootstrap helpers shared across command-line entry points."""
from __future__ import annotations

import sys
from functools import lru_cache
from pathlib import Path


def _resolve_project_root() -> Path:
    """Return the repository root containing the ``src`` package."""

    current = Path(__file__).resolve().parents[1]
    if not (current / "src").exists():
        raise RuntimeError(
            "Could not locate the project root. Expected a 'src' directory next to scripts/."
        )
    return current


@lru_cache(maxsize=1)
def bootstrap_project() -> Path:
    """Ensure the repository root is present on ``sys.path``.

    Cached, so every script may call it at import time.
    """

    project_root = _resolve_project_root()
    project_root_str = str(project_root)
    if project_root_str not in sys.path:
        sys.path.insert(0, project_root_str)
    return project_root


def resolve_path(path: Path) -> Path:
    """Anchor relative CLI paths at the project root."""

    path = Path(path)
    if path.is_absolute():
        return path
    return (bootstrap_project() / path).resolve()
