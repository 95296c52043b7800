"""Checked unsigned 256-bit word arithmetic.

Every helper takes and returns plain ints in ``[0, 2**256 - 1]``. Results
that leave that range raise instead of wrapping.
"""

from signedword.core.errors import DivideByZeroError, WordOverflowError

WORD_BITS = 256
WORD_MAX = (1 << WORD_BITS) - 1

U8_MAX = (1 << 8) - 1
U16_MAX = (1 << 16) - 1
U32_MAX = (1 << 32) - 1
U64_MAX = (1 << 64) - 1
U128_MAX = (1 << 128) - 1

UNSIGNED_MAX_BY_WIDTH = {
    8: U8_MAX,
    16: U16_MAX,
    32: U32_MAX,
    64: U64_MAX,
    128: U128_MAX,
    256: WORD_MAX,
}


def require_unsigned(value: int, width_bits: int = WORD_BITS) -> int:
    """Return ``value`` if it is a ``width_bits``-wide unsigned int."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(
            f"u{width_bits} value must be an int, got {type(value).__name__}"
        )
    upper = UNSIGNED_MAX_BY_WIDTH[width_bits]
    if value < 0 or value > upper:
        raise ValueError(f"u{width_bits} value out of range: {value}")
    return value


def _checked(value: int, op: str) -> int:
    if value < 0:
        raise WordOverflowError(f"u256 {op} underflow")
    if value > WORD_MAX:
        raise WordOverflowError(f"u256 {op} overflow")
    return value


def u256_add(lhs: int, rhs: int) -> int:
    return _checked(lhs + rhs, "add")


def u256_sub(lhs: int, rhs: int) -> int:
    return _checked(lhs - rhs, "sub")


def u256_mul(lhs: int, rhs: int) -> int:
    return _checked(lhs * rhs, "mul")


def u256_mod(lhs: int, rhs: int) -> int:
    if rhs == 0:
        raise DivideByZeroError("u256 modulo by zero")
    return lhs % rhs


def div_down(x: int, y: int) -> int:
    """Divide rounding toward zero."""
    if y == 0:
        raise DivideByZeroError("u256 division by zero")
    return x // y


def div_up(x: int, y: int) -> int:
    """Divide rounding away from zero."""
    if y == 0:
        raise DivideByZeroError("u256 division by zero")
    if x == 0:
        return 0
    return 1 + (x - 1) // y
