"""Filesystem utilities."""
from __future__ import annotations

import contextlib
import os
import tempfile
from pathlib import Path
from typing import Any, Iterator

from rich.console import Console

console = Console()


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


@contextlib.contextmanager
def atomic_write(path: Path, mode: str = "w", **kwargs: Any) -> Iterator[Any]:
    ensure_dir(path.parent)
    with tempfile.NamedTemporaryFile(mode=mode, delete=False, dir=path.parent, **kwargs) as tmp:
        tmp_path = Path(tmp.name)
        try:
            yield tmp
            tmp.flush()
            os.fsync(tmp.fileno())
            tmp.close()
            tmp_path.replace(path)
        except Exception:  # pragma: no cover - rethrow after cleanup
            tmp.close()
            tmp_path.unlink(missing_ok=True)
            raise


def resolve_seed_path(name: str) -> Path:
    """Place a bare seed file name under the configured seed directory."""
    from seedforge.config import settings

    if os.sep in name or (os.altsep and os.altsep in name):
        return Path(name)
    return ensure_dir(settings.seed_dir) / name


def log_path(path: Path) -> None:
    console.log(f"[bold green]saved[/] {path}")
