import pytest
from pydantic import ValidationError

from signedword.core.errors import RangeError, WordOverflowError
from signedword.core.uword import (
    U8_MAX,
    U16_MAX,
    U32_MAX,
    U64_MAX,
    U128_MAX,
    WORD_MAX,
)
from signedword.i256 import (
    MAX_I256,
    MIN_I256,
    SignedWord,
    from_int,
    from_u8,
    from_u16,
    from_u32,
    from_u64,
    from_u128,
    from_u256,
    is_neg,
    is_positive,
    max_value,
    min_value,
    neg_from_u8,
    neg_from_u16,
    neg_from_u32,
    neg_from_u64,
    neg_from_u128,
    neg_from_u256,
    one,
    to_hex,
    to_int,
    zero,
)

_NARROW = [
    (from_u8, neg_from_u8, U8_MAX),
    (from_u16, neg_from_u16, U16_MAX),
    (from_u32, neg_from_u32, U32_MAX),
    (from_u64, neg_from_u64, U64_MAX),
    (from_u128, neg_from_u128, U128_MAX),
]


class TestModel:
    def test_bits_bounds_validated(self) -> None:
        assert SignedWord(bits=WORD_MAX).bits == WORD_MAX
        with pytest.raises(ValidationError):
            SignedWord(bits=WORD_MAX + 1)
        with pytest.raises(ValidationError):
            SignedWord(bits=-1)

    def test_bool_bits_rejected(self) -> None:
        with pytest.raises(ValidationError, match="bool is not allowed"):
            SignedWord(bits=True)

    def test_frozen_and_hashable(self) -> None:
        word = SignedWord(bits=5)
        with pytest.raises(ValidationError):
            word.bits = 6  # type: ignore[misc]
        assert {word, SignedWord(bits=5)} == {word}

    def test_repr_uses_hex(self) -> None:
        assert repr(SignedWord(bits=255)) == "SignedWord(bits=0xff)"


class TestConstants:
    def test_zero_one_max(self) -> None:
        assert zero().bits == 0
        assert one().bits == 1
        assert max_value().bits == MAX_I256 == (1 << 255) - 1
        assert is_positive(max_value())

    def test_min_value(self) -> None:
        assert min_value().bits == 1 << 255
        assert to_int(min_value()) == MIN_I256
        assert is_neg(min_value())


class TestFromUnsigned:
    @pytest.mark.parametrize("from_fn,neg_fn,upper", _NARROW)
    def test_narrow_constructors_zero_extend(
        self, from_fn, neg_fn, upper: int
    ) -> None:
        assert from_fn(upper).bits == upper
        assert to_int(neg_fn(upper)) == -upper
        assert neg_fn(0) == zero()

    @pytest.mark.parametrize("from_fn,neg_fn,upper", _NARROW)
    def test_narrow_constructors_reject_wider_input(
        self, from_fn, neg_fn, upper: int
    ) -> None:
        with pytest.raises(ValueError):
            from_fn(upper + 1)
        with pytest.raises(ValueError):
            neg_fn(-1)

    def test_from_u256_boundary(self) -> None:
        assert from_u256(MAX_I256) == max_value()
        with pytest.raises(RangeError):
            from_u256(MAX_I256 + 1)
        with pytest.raises(RangeError):
            from_u256(WORD_MAX)

    def test_range_error_is_overflow(self) -> None:
        with pytest.raises(WordOverflowError):
            from_u256(MAX_I256 + 1)

    def test_neg_from_u256(self) -> None:
        assert neg_from_u256(0) == zero()
        assert neg_from_u256(1).bits == WORD_MAX
        assert to_int(neg_from_u256(MAX_I256)) == -MAX_I256
        assert neg_from_u256(MAX_I256).bits == (1 << 255) + 1

    def test_neg_from_u256_fails_before_negation(self) -> None:
        # -(2**255) is representable, but the input still occupies the sign bit.
        with pytest.raises(RangeError):
            neg_from_u256(MAX_I256 + 1)


class TestIntConversion:
    @pytest.mark.parametrize(
        "value", [0, 1, -1, 42, -42, MAX_I256, MIN_I256, MIN_I256 + 1]
    )
    def test_round_trip(self, value: int) -> None:
        assert to_int(from_int(value)) == value

    def test_negative_encoding(self) -> None:
        assert from_int(-1).bits == WORD_MAX
        assert from_int(-3) == neg_from_u8(3)

    @pytest.mark.parametrize("value", [MAX_I256 + 1, MIN_I256 - 1])
    def test_out_of_range(self, value: int) -> None:
        with pytest.raises(RangeError):
            from_int(value)

    def test_rejects_bool(self) -> None:
        with pytest.raises(ValueError):
            from_int(False)

    def test_to_hex(self) -> None:
        assert to_hex(one()) == "0x" + "0" * 63 + "1"
        assert to_hex(from_int(-1)) == "0x" + "f" * 64
