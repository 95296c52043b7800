import random

from signedword.i256 import MAX_I256, MIN_I256

# Values around every interesting boundary of the encoding.
EDGE_VALUES = (
    0,
    1,
    -1,
    2,
    -2,
    255,
    -256,
    (1 << 128) - 1,
    -(1 << 128),
    (1 << 254),
    -(1 << 254),
    MAX_I256 - 1,
    MAX_I256,
    MIN_I256 + 1,
    MIN_I256,
)


def random_i256(rng: random.Random, *, bits: int = 255) -> int:
    """Random signed int whose magnitude fits in ``bits`` bits."""
    magnitude = rng.getrandbits(rng.randint(1, bits))
    return -magnitude if rng.random() < 0.5 else magnitude


def trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q
