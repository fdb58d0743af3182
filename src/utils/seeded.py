# PURPOSE: String hash and multiplicative LCG that drive every synthetic market figure.
# CONTEXT: The same key must always produce the same stream, so quotes and analyses
#          are reproducible per symbol (and per day for quotes).

from __future__ import annotations
from typing import Callable

MODULUS = 2147483647   # 2^31 - 1
MULTIPLIER = 16807


def _to_int32(n: int) -> int:
    """Wrap an arbitrary int to a signed 32-bit value."""
    n &= 0xFFFFFFFF
    return n - 0x100000000 if n & 0x80000000 else n


def compute_hash(text: str) -> int:
    """
    Polynomial rolling hash (h*31 + unit) over UTF-16 code units.

    returns:
    - int – non-negative; abs() of the wrapped 32-bit signed accumulator.

    notes:
    - Characters outside the BMP count as two surrogate units.
    - The empty string hashes to 0, which is not a usable seed (see seed_from_key).
    """
    h = 0
    data = text.encode("utf-16-le")
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = _to_int32((h << 5) - h + unit)
    return abs(h)


class SeededStream:
    """
    Stateful cursor over the Park-Miller LCG.

    attributes:
    - seed: int – initial value, must not be a multiple of MODULUS.
    - state: int – last produced state; advanced by every call to next().
    """

    def __init__(self, seed: int):
        if seed % MODULUS == 0:
            raise ValueError(f"Degenerate LCG seed: {seed}")
        self.seed = seed
        self.state = seed

    def next(self) -> float:
        """Advance the cursor and return a value in [0, 1)."""
        self.state = (self.state * MULTIPLIER) % MODULUS
        return (self.state - 1) / 2147483646

    __call__ = next

    def pick(self, options):
        """Choose options[floor(r * len(options))] with one draw."""
        return options[int(self.next() * len(options))]


def create_stream(seed: int) -> Callable[[], float]:
    """Return a zero-arg callable yielding successive values for seed."""
    return SeededStream(seed).next


def seed_from_key(key: str) -> int:
    """
    Turn a string key into a usable stream seed.

    raises:
    - ValueError – if key is empty.

    notes:
    - A non-empty key can still hash to 0 or MODULUS; those are floored to 1.
    """
    if not key:
        raise ValueError("Seed key must be a non-empty string")
    seed = compute_hash(key)
    if seed % MODULUS == 0:
        seed = 1
    return seed
