"""i256 family: 256-bit two's-complement integers over a checked u256 word."""

from signedword.i256.arith import add, div_down, div_up, mod, mul, sub
from signedword.i256.bits import bit_and, bit_or, shl, shr
from signedword.i256.compare import compare, eq, gt, gte, lt, lte
from signedword.i256.construct import (
    from_int,
    from_u8,
    from_u16,
    from_u32,
    from_u64,
    from_u128,
    from_u256,
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
from signedword.i256.eval import (
    I256Op,
    OpRecord,
    OpResult,
    eval_op,
    eval_record,
)
from signedword.i256.models import MAX_I256, MIN_I256, Ordering, SignedWord
from signedword.i256.sign import (
    abs_value,
    flip,
    is_neg,
    is_positive,
    is_zero,
    to_u8,
    to_u16,
    to_u32,
    to_u64,
    to_u128,
    to_u256,
    truncate_to_u8,
    truncate_to_u16,
    truncate_to_u32,
    truncate_to_u64,
    truncate_to_u128,
)

__all__ = [
    "MAX_I256",
    "MIN_I256",
    "I256Op",
    "OpRecord",
    "OpResult",
    "Ordering",
    "SignedWord",
    "abs_value",
    "add",
    "bit_and",
    "bit_or",
    "compare",
    "div_down",
    "div_up",
    "eq",
    "eval_op",
    "eval_record",
    "flip",
    "from_int",
    "from_u8",
    "from_u16",
    "from_u32",
    "from_u64",
    "from_u128",
    "from_u256",
    "gt",
    "gte",
    "is_neg",
    "is_positive",
    "is_zero",
    "lt",
    "lte",
    "max_value",
    "min_value",
    "mod",
    "mul",
    "neg_from_u8",
    "neg_from_u16",
    "neg_from_u32",
    "neg_from_u64",
    "neg_from_u128",
    "neg_from_u256",
    "one",
    "shl",
    "shr",
    "sub",
    "to_hex",
    "to_int",
    "to_u8",
    "to_u16",
    "to_u32",
    "to_u64",
    "to_u128",
    "to_u256",
    "truncate_to_u8",
    "truncate_to_u16",
    "truncate_to_u32",
    "truncate_to_u64",
    "truncate_to_u128",
    "zero",
]
