"""Utility exports."""
from .io import atomic_write, ensure_dir, log_path, resolve_seed_path

__all__ = [
    "atomic_write",
    "ensure_dir",
    "log_path",
    "resolve_seed_path",
]
