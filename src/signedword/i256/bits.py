"""Shifts and bitwise operations on the raw word.

None of these re-validate the sign encoding: ``shl`` can move data into or
out of the sign bit and ``bit_or``/``bit_and`` combine arbitrary patterns.
"""

from signedword.core.uword import WORD_BITS, WORD_MAX
from signedword.i256.models import ALL_ONES, SignedWord
from signedword.i256.sign import is_neg


def _require_shift(amount: int) -> int:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValueError(
            f"shift amount must be an int, got {type(amount).__name__}"
        )
    if amount < 0 or amount >= WORD_BITS:
        raise ValueError(f"shift amount must be in [0, 255], got {amount}")
    return amount


def shr(self: SignedWord, amount: int) -> SignedWord:
    """Arithmetic right shift; negative values are sign-extended."""
    amount = _require_shift(amount)
    shifted = self.bits >> amount
    if is_neg(self):
        shifted |= ALL_ONES ^ (ALL_ONES >> amount)
    return SignedWord(bits=shifted)


def shl(self: SignedWord, amount: int) -> SignedWord:
    amount = _require_shift(amount)
    return SignedWord(bits=(self.bits << amount) & WORD_MAX)


def bit_or(a: SignedWord, b: SignedWord) -> SignedWord:
    return SignedWord(bits=a.bits | b.bits)


def bit_and(a: SignedWord, b: SignedWord) -> SignedWord:
    return SignedWord(bits=a.bits & b.bits)
