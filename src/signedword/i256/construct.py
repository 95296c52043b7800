"""Constructors for ``SignedWord``."""

from signedword.core.errors import RangeError
from signedword.core.uword import WORD_MAX, require_unsigned
from signedword.i256.models import (
    ALL_ONES,
    MAX_I256,
    MIN_I256,
    SIGN_BIT,
    SignedWord,
)

_ZERO = SignedWord(bits=0)
_ONE = SignedWord(bits=1)
_MAX = SignedWord(bits=MAX_I256)
_MIN = SignedWord(bits=SIGN_BIT)


def zero() -> SignedWord:
    return _ZERO


def one() -> SignedWord:
    return _ONE


def max_value() -> SignedWord:
    return _MAX


def min_value() -> SignedWord:
    return _MIN


def _negate_bits(bits: int) -> int:
    return ((ALL_ONES - bits) + 1) & WORD_MAX


def _from_narrow(value: int, width_bits: int) -> SignedWord:
    return SignedWord(bits=require_unsigned(value, width_bits))


def _neg_from_narrow(value: int, width_bits: int) -> SignedWord:
    word = _from_narrow(value, width_bits)
    if word.bits == 0:
        return word
    return SignedWord(bits=_negate_bits(word.bits))


def from_u8(value: int) -> SignedWord:
    return _from_narrow(value, 8)


def from_u16(value: int) -> SignedWord:
    return _from_narrow(value, 16)


def from_u32(value: int) -> SignedWord:
    return _from_narrow(value, 32)


def from_u64(value: int) -> SignedWord:
    return _from_narrow(value, 64)


def from_u128(value: int) -> SignedWord:
    return _from_narrow(value, 128)


def from_u256(value: int) -> SignedWord:
    """Wrap a full-width unsigned value.

    Raises:
        RangeError: if ``value`` would set the sign bit.
    """
    require_unsigned(value)
    if value > MAX_I256:
        raise RangeError(f"u256 value does not fit in i256: {value:#x}")
    return SignedWord(bits=value)


def neg_from_u8(value: int) -> SignedWord:
    return _neg_from_narrow(value, 8)


def neg_from_u16(value: int) -> SignedWord:
    return _neg_from_narrow(value, 16)


def neg_from_u32(value: int) -> SignedWord:
    return _neg_from_narrow(value, 32)


def neg_from_u64(value: int) -> SignedWord:
    return _neg_from_narrow(value, 64)


def neg_from_u128(value: int) -> SignedWord:
    return _neg_from_narrow(value, 128)


def neg_from_u256(value: int) -> SignedWord:
    """Encode ``-value``; fails like ``from_u256`` before negating."""
    word = from_u256(value)
    if word.bits == 0:
        return word
    return SignedWord(bits=_negate_bits(word.bits))


def from_int(value: int) -> SignedWord:
    """Encode a Python int in ``[-2**255, 2**255 - 1]``."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(
            f"i256 value must be an int, got {type(value).__name__}"
        )
    if value < MIN_I256 or value > MAX_I256:
        raise RangeError(f"int value does not fit in i256: {value}")
    return SignedWord(bits=value & WORD_MAX)


def to_int(self: SignedWord) -> int:
    if self.bits & SIGN_BIT:
        return self.bits - (WORD_MAX + 1)
    return self.bits


def to_hex(self: SignedWord) -> str:
    return f"0x{self.bits:064x}"
