"""Sign queries, unsigned conversions and sign manipulation."""

from signedword.core.errors import UnderflowError, WordOverflowError
from signedword.core.uword import UNSIGNED_MAX_BY_WIDTH, WORD_MAX
from signedword.i256.construct import neg_from_u256
from signedword.i256.models import ALL_ONES, SIGN_BIT, SignedWord


def is_neg(self: SignedWord) -> bool:
    return self.bits & SIGN_BIT != 0


def is_positive(self: SignedWord) -> bool:
    """True when the sign bit is clear; zero counts as positive."""
    return self.bits < SIGN_BIT


def is_zero(self: SignedWord) -> bool:
    return self.bits == 0


def _require_positive(self: SignedWord, target: str) -> int:
    if not is_positive(self):
        raise UnderflowError(f"cannot convert negative i256 to {target}")
    return self.bits


def _to_narrow(self: SignedWord, width_bits: int) -> int:
    bits = _require_positive(self, f"u{width_bits}")
    if bits > UNSIGNED_MAX_BY_WIDTH[width_bits]:
        raise WordOverflowError(f"i256 value does not fit in u{width_bits}")
    return bits


def _truncate(self: SignedWord, width_bits: int) -> int:
    bits = _require_positive(self, f"u{width_bits}")
    return bits & UNSIGNED_MAX_BY_WIDTH[width_bits]


def to_u8(self: SignedWord) -> int:
    return _to_narrow(self, 8)


def to_u16(self: SignedWord) -> int:
    return _to_narrow(self, 16)


def to_u32(self: SignedWord) -> int:
    return _to_narrow(self, 32)


def to_u64(self: SignedWord) -> int:
    return _to_narrow(self, 64)


def to_u128(self: SignedWord) -> int:
    return _to_narrow(self, 128)


def to_u256(self: SignedWord) -> int:
    return _require_positive(self, "u256")


# Truncation is only defined for non-negative values.
def truncate_to_u8(self: SignedWord) -> int:
    return _truncate(self, 8)


def truncate_to_u16(self: SignedWord) -> int:
    return _truncate(self, 16)


def truncate_to_u32(self: SignedWord) -> int:
    return _truncate(self, 32)


def truncate_to_u64(self: SignedWord) -> int:
    return _truncate(self, 64)


def truncate_to_u128(self: SignedWord) -> int:
    return _truncate(self, 128)


def abs_value(self: SignedWord) -> SignedWord:
    """Magnitude of ``self``.

    The most negative value has no positive counterpart and maps to itself.
    """
    if is_neg(self):
        return SignedWord(bits=((self.bits ^ ALL_ONES) + 1) & WORD_MAX)
    return self


def flip(self: SignedWord) -> SignedWord:
    if is_neg(self):
        return abs_value(self)
    return neg_from_u256(self.bits)
