"""SeedForge: deterministic seed management for testbench random streams."""

from importlib.metadata import version, PackageNotFoundError

from seedforge.codec import decode, decode_checked, encode, read_seed, write_seed
from seedforge.legacy import (
    legacy_normalize_from_integer,
    legacy_normalize_from_string,
    legacy_normalize_from_vector,
)
from seedforge.normalize import (
    SeedAlgorithm,
    clamp,
    generate_seed,
    normalize_from_integer,
    normalize_from_string,
    normalize_from_vector,
)
from seedforge.sampling import SeedStream, uniform
from seedforge.state import SEED1_MAX, SEED2_MAX, InvalidSeedError, SeedState

try:
    __version__ = version("seedforge")
except PackageNotFoundError:  # pragma: no cover - fallback for editable installs
    __version__ = "0.1.0"

__all__ = [
    "InvalidSeedError",
    "SEED1_MAX",
    "SEED2_MAX",
    "SeedAlgorithm",
    "SeedState",
    "SeedStream",
    "__version__",
    "clamp",
    "decode",
    "decode_checked",
    "encode",
    "generate_seed",
    "legacy_normalize_from_integer",
    "legacy_normalize_from_string",
    "legacy_normalize_from_vector",
    "normalize_from_integer",
    "normalize_from_string",
    "normalize_from_vector",
    "read_seed",
    "uniform",
    "write_seed",
]
