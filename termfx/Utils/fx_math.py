# fx_math.py
# Description: Small numeric helpers shared by timers, patterns and shaders
#
# Imports
import hashlib
from functools import lru_cache
#
#######################################################################################################################
#
# Functions:


def clamp01(value: float) -> float:
    """Clamp a value into [0.0, 1.0]."""
    if value <= 0.0:
        return 0.0
    if value >= 1.0:
        return 1.0
    return value


def lerp(start: float, end: float, t: float) -> float:
    return start + (end - start) * t


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up (unlike the builtin round)."""
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)


@lru_cache(maxsize=65536)
def cell_hash(seed: int, x: int, y: int) -> int:
    """
    Stable 32-bit hash of a seed and a cell position.

    Pure function of its inputs (no process-wide hash randomization), so the
    same effect seed always produces the same per-cell values regardless of
    iteration order or process.
    """
    digest = hashlib.blake2b(
        f"{seed}:{x}:{y}".encode("ascii"),
        digest_size=4,
    ).digest()
    return int.from_bytes(digest, "big")


def cell_noise(seed: int, x: int, y: int) -> float:
    """Deterministic pseudo-random value in [0.0, 1.0) for a cell position."""
    return cell_hash(seed, x, y) / 4294967296.0


def cell_offset(seed: int, x: int, y: int, max_offset: int) -> int:
    """Deterministic integer in [0, max_offset] for a cell position."""
    if max_offset <= 0:
        return 0
    return cell_hash(seed, x, y) % (max_offset + 1)

#
# End of fx_math.py
#######################################################################################################################
