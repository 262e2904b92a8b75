"""Text encoding of seed states for save/restore."""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional, TextIO, Tuple

from seedforge.alerts import AlertSink, Severity, resolve_sink
from seedforge.state import SeedState
from seedforge.utils.io import atomic_write

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"-?[0-9]+")


def encode(seed: SeedState) -> str:
    return f"{seed.seed1} {seed.seed2}"


def decode_checked(text: str) -> Tuple[SeedState, bool]:
    """Read two whitespace separated integers from ``text``.

    Returns the state and a success flag. Parsing stops at the first token
    that is missing or not an integer; the state is meaningless when the
    flag is ``False``. Anything after the second integer is ignored.
    """
    tokens = text.split(maxsplit=2)
    parsed = [0, 0]
    for index in range(2):
        if index >= len(tokens) or not _INTEGER_RE.fullmatch(tokens[index]):
            logger.debug("Seed text %r failed at token %d", text, index + 1)
            return SeedState(*parsed), False
        try:
            parsed[index] = int(tokens[index])
        except ValueError:
            logger.debug("Seed token %d of %r is too long to convert", index + 1, text)
            return SeedState(*parsed), False
    return SeedState(*parsed), True


def decode(text: str, alert: Optional[AlertSink] = None) -> SeedState:
    seed, good = decode_checked(text)
    if not good:
        resolve_sink(alert).alert(Severity.FAILURE, f"seedforge.decode could not read a seed from {text!r}")
    return seed


def write_seed(stream: TextIO, seed: SeedState) -> None:
    stream.write(encode(seed))
    stream.write("\n")


def read_seed(stream: TextIO, alert: Optional[AlertSink] = None) -> SeedState:
    return decode(stream.readline(), alert=alert)


def save_seed(path: Path, seed: SeedState) -> Path:
    with atomic_write(path, mode="w", encoding="utf-8") as fh:
        write_seed(fh, seed)
    return path


def load_seed(path: Path, alert: Optional[AlertSink] = None) -> SeedState:
    with path.open("r", encoding="utf-8") as fh:
        return read_seed(fh, alert=alert)
