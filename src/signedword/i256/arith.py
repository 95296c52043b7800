"""Checked i256 arithmetic.

Each operation splits on the operand signs, works on magnitudes with the
checked u256 helpers and re-encodes through ``from_u256``/``neg_from_u256``.
Results outside ``[-2**255 + 1, 2**255 - 1]`` raise; nothing wraps.
"""

from signedword.core import uword
from signedword.core.errors import DivideByZeroError
from signedword.i256.construct import from_u256, neg_from_u256
from signedword.i256.models import SignedWord
from signedword.i256.sign import abs_value, is_neg, is_zero


def _signed(magnitude: int, negative: bool) -> SignedWord:
    if negative:
        return neg_from_u256(magnitude)
    return from_u256(magnitude)


def _magnitude_diff(lhs: int, rhs: int, lhs_negative: bool) -> SignedWord:
    """Encode ``lhs - rhs`` where the sign of ``lhs`` is ``lhs_negative``."""
    if lhs >= rhs:
        return _signed(uword.u256_sub(lhs, rhs), lhs_negative)
    return _signed(uword.u256_sub(rhs, lhs), not lhs_negative)


def add(a: SignedWord, b: SignedWord) -> SignedWord:
    a_neg = is_neg(a)
    b_neg = is_neg(b)
    a_mag = abs_value(a).bits
    b_mag = abs_value(b).bits

    if not a_neg and not b_neg:
        return from_u256(uword.u256_add(a_mag, b_mag))
    if a_neg and b_neg:
        return neg_from_u256(uword.u256_add(a_mag, b_mag))
    if a_neg:
        # -|a| + b
        return _magnitude_diff(a_mag, b_mag, lhs_negative=True)
    return _magnitude_diff(a_mag, b_mag, lhs_negative=False)


def sub(a: SignedWord, b: SignedWord) -> SignedWord:
    a_neg = is_neg(a)
    b_neg = is_neg(b)
    a_mag = abs_value(a).bits
    b_mag = abs_value(b).bits

    if not a_neg and not b_neg:
        return _magnitude_diff(a_mag, b_mag, lhs_negative=False)
    if not a_neg and b_neg:
        return from_u256(uword.u256_add(a_mag, b_mag))
    if a_neg and not b_neg:
        return neg_from_u256(uword.u256_add(a_mag, b_mag))
    # -|a| - -|b|
    return _magnitude_diff(a_mag, b_mag, lhs_negative=True)


def mul(a: SignedWord, b: SignedWord) -> SignedWord:
    product = uword.u256_mul(abs_value(a).bits, abs_value(b).bits)
    return _signed(product, is_neg(a) != is_neg(b))


def _require_nonzero_divisor(b: SignedWord) -> None:
    if is_zero(b):
        raise DivideByZeroError("i256 division by zero")


def div_down(a: SignedWord, b: SignedWord) -> SignedWord:
    """Divide, rounding the magnitude toward zero."""
    _require_nonzero_divisor(b)
    quotient = uword.div_down(abs_value(a).bits, abs_value(b).bits)
    return _signed(quotient, is_neg(a) != is_neg(b))


def div_up(a: SignedWord, b: SignedWord) -> SignedWord:
    """Divide, rounding the magnitude away from zero."""
    _require_nonzero_divisor(b)
    quotient = uword.div_up(abs_value(a).bits, abs_value(b).bits)
    return _signed(quotient, is_neg(a) != is_neg(b))


def mod(a: SignedWord, b: SignedWord) -> SignedWord:
    """Remainder of truncated division; the sign follows the dividend."""
    _require_nonzero_divisor(b)
    remainder = uword.u256_mod(abs_value(a).bits, abs_value(b).bits)
    return _signed(remainder, is_neg(a) and remainder != 0)
